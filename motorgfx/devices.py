"""Physical device description: queue family selection, memory type choice and queue planning."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag

from .fastmath import count_bits_set
from .vkutil import MemoryUsage


class QueueFlag(IntFlag):
    """Capabilities of a queue family."""

    GRAPHICS = 0x1
    COMPUTE = 0x2
    TRANSFER = 0x4
    SPARSE_BINDING = 0x8


class MemoryProperty(IntFlag):
    """Properties of a device memory type."""

    DEVICE_LOCAL = 0x1
    HOST_VISIBLE = 0x2
    HOST_COHERENT = 0x4
    HOST_CACHED = 0x8
    LAZILY_ALLOCATED = 0x10


@dataclass(frozen=True)
class ExtensionProperties:
    """A device extension and the revision the device implements."""

    name: str
    spec_version: int = 1


@dataclass
class QueuesInfo:
    """Queue families and queue counts chosen for a logical device.

    An index of ``None`` means no family was chosen for that role.
    """

    graphics_index: int | None = None
    compute_index: int | None = None
    transfer_index: int | None = None
    graphics_queue_count: int = 0
    compute_queue_count: int = 0
    transfer_queue_count: int = 0


@dataclass(frozen=True)
class QueueRequest:
    """Queues to create from one family when building a logical device."""

    family_index: int | None
    count: int
    priority: float = 0.0


_USAGE_FLAGS: dict[MemoryUsage, tuple[MemoryProperty, MemoryProperty]] = {
    MemoryUsage.GPU_ONLY: (MemoryProperty(0), MemoryProperty.DEVICE_LOCAL),
    MemoryUsage.CPU_ONLY: (
        MemoryProperty.HOST_VISIBLE | MemoryProperty.HOST_COHERENT,
        MemoryProperty(0),
    ),
    MemoryUsage.CPU_TO_GPU: (MemoryProperty.HOST_VISIBLE, MemoryProperty.DEVICE_LOCAL),
    MemoryUsage.GPU_TO_CPU: (
        MemoryProperty.HOST_VISIBLE,
        MemoryProperty.HOST_COHERENT | MemoryProperty.HOST_CACHED,
    ),
}


@dataclass
class PhysicalDeviceInfo:
    """What a physical device reports about itself."""

    name: str = ""
    driver_version: int = 0
    vendor_id: int = 0
    device_id: int = 0
    queue_families: list[QueueFlag] = field(default_factory=list)
    memory_types: list[MemoryProperty] = field(default_factory=list)
    extensions: list[ExtensionProperties] = field(default_factory=list)

    def queue_family_index(self, flags) -> int | None:
        """Index of the best queue family for ``flags``, or ``None``.

        Compute-only requests prefer a family without graphics; transfer-only
        requests prefer a family with neither graphics nor compute. Otherwise
        the first family sharing any requested capability is taken.
        """
        wanted = QueueFlag(flags)
        families = list(enumerate(QueueFlag(f) for f in self.queue_families))

        if wanted & QueueFlag.COMPUTE and not wanted & QueueFlag.GRAPHICS:
            for index, family in families:
                if family & wanted and not family & QueueFlag.GRAPHICS:
                    return index

        if (
            wanted & QueueFlag.TRANSFER
            and not wanted & QueueFlag.GRAPHICS
            and not wanted & QueueFlag.COMPUTE
        ):
            for index, family in families:
                if family & wanted and not family & (QueueFlag.GRAPHICS | QueueFlag.COMPUTE):
                    return index

        return next((index for index, family in families if family & wanted), None)

    def is_extension_supported(self, name: str, min_version: int) -> bool:
        """Whether the device offers extension ``name`` at ``min_version`` or later."""
        return any(
            ext.name == name and ext.spec_version >= min_version for ext in self.extensions
        )

    def memory_type_index(self, type_bits: int, usage) -> int | None:
        """Choose a memory type allowed by ``type_bits`` for ``usage``.

        Types lacking a required property are skipped; among the rest the
        first with the fewest missing preferred properties wins. Returns
        ``None`` when no type qualifies.
        """
        required, preferred = _USAGE_FLAGS[MemoryUsage(usage)]
        best: int | None = None
        best_missing: int | None = None

        for index, properties in enumerate(self.memory_types):
            if not (type_bits >> index) & 1:
                continue
            properties = MemoryProperty(properties)
            if required & ~properties:
                continue
            missing = count_bits_set(int(preferred & ~properties))
            if best_missing is None or missing < best_missing:
                best, best_missing = index, missing
                if missing == 0:
                    break
        return best

    def plan_queues(
        self, graphics_count: int, compute_count: int
    ) -> tuple[QueuesInfo, list[QueueRequest]]:
        """Choose queue families and the queues to create for a logical device.

        A transfer queue is always requested. Without compute queues the
        compute role falls back to the graphics family.
        """
        if graphics_count < 0 or compute_count < 0:
            raise ValueError("queue counts must not be negative")

        requested = QueueFlag.TRANSFER
        if graphics_count > 0:
            requested |= QueueFlag.GRAPHICS
        if compute_count > 0:
            requested |= QueueFlag.COMPUTE

        info = QueuesInfo()
        requests: list[QueueRequest] = []

        if requested & QueueFlag.GRAPHICS:
            info.graphics_index = self.queue_family_index(QueueFlag.GRAPHICS)
            info.graphics_queue_count = graphics_count
            requests.append(QueueRequest(info.graphics_index, graphics_count))

        if requested & QueueFlag.COMPUTE:
            info.compute_index = self.queue_family_index(QueueFlag.COMPUTE)
            info.compute_queue_count = compute_count
            requests.append(QueueRequest(info.compute_index, compute_count))
        else:
            info.compute_index = info.graphics_index
            info.compute_queue_count = graphics_count

        if requested & QueueFlag.TRANSFER:
            info.transfer_index = self.queue_family_index(QueueFlag.TRANSFER)
            info.transfer_queue_count = 1
            requests.append(QueueRequest(info.transfer_index, 1))
        else:
            info.transfer_index = info.graphics_index
            info.transfer_queue_count = graphics_count

        return info, requests