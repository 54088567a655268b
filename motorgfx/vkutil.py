"""Vulkan result messages, version packing and translation of rendering enums."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from .rendering import (
    BlendFactor,
    BlendOp,
    ColorFormat,
    CompareOp,
    CullFaceSide,
    FrontFaceVertexWinding,
    PolygonDrawMode,
    PrimitiveTopology,
    VertexInputRate,
)


@dataclass(frozen=True)
class Version:
    """A major.minor.patch version."""

    major: int
    minor: int
    patch: int

    def packed(self) -> int:
        """The version packed into one 32-bit integer as Vulkan expects."""
        return (self.major << 22) | (self.minor << 12) | self.patch


class MemoryUsage(Enum):
    """Intended access pattern of a memory allocation."""

    GPU_ONLY = 0
    CPU_ONLY = 1
    CPU_TO_GPU = 2
    GPU_TO_CPU = 3


_RESULT_MESSAGES: dict[int, str] = {
    0: "Command successfully completed.",
    1: "A fence or query has not yet completed.",
    2: "A wait operation has not completed in the specified time.",
    3: "An event is signaled.",
    4: "An event is unsignaled.",
    5: "A return array was too small for the result.",
    1000001003: (
        "A swapchain no longer matches the surface properties exactly, "
        "but can still be used to present to the surface successfully."
    ),
    -1: "A host memory allocation has failed.",
    -2: "A device memory allocation has failed.",
    -3: "Initialization of an object could not be completed for implementation-specific reasons.",
    -4: "The logical or physical device has been lost.",
    -5: "Mapping of a memory object has failed.",
    -6: "A requested layer is not present or could not be loaded.",
    -7: "A requested extension is not supported.",
    -8: "A requested feature is not supported.",
    -9: (
        "The requested version of Vulkan is not supported by the driver or is otherwise "
        "incompatible for implementation-specific reasons."
    ),
    -10: "Too many objects of the type have already been created.",
    -11: "A requested format is not supported on this device.",
    -1000000000: "A surface is no longer available.",
    -1000000001: "The requested window is already connected to a VkSurfaceKHR, or to some other non-Vulkan API.",
    -1000001004: (
        "A surface has changed in such a way that it is no longer compatible with the swapchain, "
        "and further presentation requests using the swapchain will fail. Applications must query "
        "the new surface properties and recreate their swapchain if they wish to continue"
        "presenting to the surface."
    ),
    -1000003001: (
        "The display used by a swapchain does not use the same presentable image layout, "
        "or is incompatible in a way that prevents sharing an image."
    ),
    -1000011001: "A validation layer found an error.",
}

_TOPOLOGY = {
    PrimitiveTopology.POINT_LIST: 0,
    PrimitiveTopology.LINE_LIST: 1,
    PrimitiveTopology.LINE_STRIP: 2,
    PrimitiveTopology.TRIANGLE_LIST: 3,
    PrimitiveTopology.TRIANGLE_STRIP: 4,
    PrimitiveTopology.TRIANGLE_FAN: 5,
    PrimitiveTopology.LINE_LIST_WITH_ADJACENCY: 6,
    PrimitiveTopology.LINE_STRIP_WITH_ADJACENCY: 7,
    PrimitiveTopology.TRIANGLE_LIST_WITH_ADJACENCY: 8,
    PrimitiveTopology.TRIANGLE_STRIP_WITH_ADJACENCY: 9,
    PrimitiveTopology.PATCH_LIST: 10,
}

_POLYGON_MODE = {
    PolygonDrawMode.FILL: 0,
    PolygonDrawMode.LINE: 1,
    PolygonDrawMode.POINT: 2,
}

_FRONT_FACE = {
    FrontFaceVertexWinding.COUNTER_CLOCKWISE: 0,
    FrontFaceVertexWinding.CLOCKWISE: 1,
}

_CULL_MODE = {
    CullFaceSide.NONE: 0,
    CullFaceSide.FRONT: 0x1,
    CullFaceSide.BACK: 0x2,
    CullFaceSide.FRONT_AND_BACK: 0x3,
}

_COMPARE_OP = {
    CompareOp.NEVER: 0,
    CompareOp.LESS: 1,
    CompareOp.EQUAL: 2,
    CompareOp.LESS_OR_EQUAL: 3,
    CompareOp.GREATER: 4,
    CompareOp.NOT_EQUAL: 5,
    CompareOp.GREATER_OR_EQUAL: 6,
    CompareOp.ALWAYS: 7,
}

_BLEND_FACTOR = {
    BlendFactor.ZERO: 0,
    BlendFactor.ONE: 1,
    BlendFactor.SRC_COLOR: 2,
    BlendFactor.ONE_MINUS_SRC_COLOR: 3,
    BlendFactor.DST_COLOR: 4,
    BlendFactor.ONE_MINUS_DST_COLOR: 5,
    BlendFactor.SRC_ALPHA: 6,
    BlendFactor.ONE_MINUS_SRC_ALPHA: 7,
    BlendFactor.DST_ALPHA: 8,
    BlendFactor.ONE_MINUS_DST_ALPHA: 9,
    BlendFactor.SRC_ALPHA_SATURATE: 14,
}

_BLEND_OP = {
    BlendOp.ADD: 0,
    BlendOp.SUBTRACT: 1,
    BlendOp.REVERSE_SUBTRACT: 2,
    BlendOp.MIN: 3,
    BlendOp.MAX: 4,
}

_VERTEX_INPUT_RATE = {
    VertexInputRate.VERTEX: 0,
    VertexInputRate.INSTANCE: 1,
}

# R16_UINT and R32_UINT have no entry and are rejected.
_COLOR_FORMAT = {
    ColorFormat.R32_SFLOAT: 100,
    ColorFormat.R32G32_SFLOAT: 103,
    ColorFormat.R32G32B32_SFLOAT: 106,
    ColorFormat.R32G32B32A32_SFLOAT: 109,
    ColorFormat.R32_SINT: 99,
    ColorFormat.R32G32_SINT: 102,
    ColorFormat.R32G32B32_SINT: 105,
    ColorFormat.R32G32B32A32_SINT: 108,
    ColorFormat.R8_UNORM: 9,
    ColorFormat.R8G8_UNORM: 16,
    ColorFormat.R8G8B8_UNORM: 23,
    ColorFormat.R8G8B8A8_UNORM: 37,
    ColorFormat.B8G8R8_UNORM: 30,
    ColorFormat.B8G8R8A8_UNORM: 44,
    ColorFormat.D32_SFLOAT: 126,
}


def _lookup(table: Mapping[Enum, int], enum_type: type[Enum], value) -> int:
    try:
        return table[enum_type(value)]
    except (ValueError, KeyError):
        raise ValueError(f"Unsupported {enum_type.__name__}: {value!r}") from None


def translate_result(result: int) -> str:
    """Human-readable description of a Vulkan result code."""
    message = _RESULT_MESSAGES.get(int(result))
    if message is None:
        return f"Unknown error {int(result)}"
    return message


def topology(value: PrimitiveTopology) -> int:
    """Vulkan primitive topology for ``value``."""
    return _lookup(_TOPOLOGY, PrimitiveTopology, value)


def polygon_mode(value: PolygonDrawMode) -> int:
    """Vulkan polygon mode for ``value``."""
    return _lookup(_POLYGON_MODE, PolygonDrawMode, value)


def front_face(value: FrontFaceVertexWinding) -> int:
    """Vulkan front-face winding for ``value``."""
    return _lookup(_FRONT_FACE, FrontFaceVertexWinding, value)


def cull_mode(value: CullFaceSide) -> int:
    """Vulkan cull mode flags for ``value``."""
    return _lookup(_CULL_MODE, CullFaceSide, value)


def compare_op(value: CompareOp) -> int:
    """Vulkan compare operation for ``value``."""
    return _lookup(_COMPARE_OP, CompareOp, value)


def blend_factor(value: BlendFactor) -> int:
    """Vulkan blend factor for ``value``."""
    return _lookup(_BLEND_FACTOR, BlendFactor, value)


def blend_op(value: BlendOp) -> int:
    """Vulkan blend operation for ``value``."""
    return _lookup(_BLEND_OP, BlendOp, value)


def vertex_input_rate(value: VertexInputRate) -> int:
    """Vulkan vertex input rate for ``value``."""
    return _lookup(_VERTEX_INPUT_RATE, VertexInputRate, value)


def color_format(value: ColorFormat) -> int:
    """Vulkan format for ``value``; unsigned integer formats are unsupported."""
    return _lookup(_COLOR_FORMAT, ColorFormat, value)