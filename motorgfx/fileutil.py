"""Reading binary assets and reporting errors to the user."""

from __future__ import annotations

import os
import sys


def read_file(path: str | os.PathLike) -> bytes:
    """Return the whole contents of the file at ``path``.

    Raises OSError if the file cannot be opened.
    """
    with open(path, "rb") as handle:
        return handle.read()


def show_error(message: str) -> None:
    """Report ``message`` on standard error."""
    print(message, file=sys.stderr, flush=True)