import pytest

from motorgfx.devices import (
    ExtensionProperties,
    MemoryProperty,
    PhysicalDeviceInfo,
    QueueFlag,
    QueueRequest,
)
from motorgfx.vkutil import MemoryUsage

ALL = QueueFlag.GRAPHICS | QueueFlag.COMPUTE | QueueFlag.TRANSFER
HV = MemoryProperty.HOST_VISIBLE
HC = MemoryProperty.HOST_COHERENT


@pytest.fixture
def device():
    return PhysicalDeviceInfo(
        name="Test GPU",
        queue_families=[
            ALL,
            QueueFlag.COMPUTE | QueueFlag.TRANSFER,
            QueueFlag.TRANSFER,
        ],
        memory_types=[
            MemoryProperty.DEVICE_LOCAL,
            HV | HC,
            HV | HC | MemoryProperty.HOST_CACHED,
            MemoryProperty.DEVICE_LOCAL | HV,
        ],
        extensions=[ExtensionProperties("VK_KHR_swapchain", 70)],
    )


def test_flag_values_match_vulkan():
    assert QueueFlag(1) is QueueFlag.GRAPHICS
    assert QueueFlag(4) is QueueFlag.TRANSFER
    assert MemoryProperty(8) is MemoryProperty.HOST_CACHED


def test_graphics_family(device):
    assert device.queue_family_index(QueueFlag.GRAPHICS) == 0


def test_dedicated_compute_family(device):
    assert device.queue_family_index(QueueFlag.COMPUTE) == 1


def test_dedicated_transfer_family(device):
    assert device.queue_family_index(QueueFlag.TRANSFER) == 2


def test_fallback_to_shared_family():
    dev = PhysicalDeviceInfo(queue_families=[ALL])
    assert dev.queue_family_index(QueueFlag.COMPUTE) == 0
    assert dev.queue_family_index(QueueFlag.TRANSFER) == 0


def test_missing_family_is_none():
    dev = PhysicalDeviceInfo(queue_families=[QueueFlag.TRANSFER])
    assert dev.queue_family_index(QueueFlag.GRAPHICS) is None


def test_extension_supported(device):
    assert device.is_extension_supported("VK_KHR_swapchain", 70)
    assert not device.is_extension_supported("VK_KHR_swapchain", 71)
    assert not device.is_extension_supported("VK_EXT_debug_report", 0)


def test_memory_gpu_only(device):
    assert device.memory_type_index(0b1111, MemoryUsage.GPU_ONLY) == 0


def test_memory_cpu_only(device):
    assert device.memory_type_index(0b1111, MemoryUsage.CPU_ONLY) == 1


def test_memory_cpu_to_gpu_prefers_device_local(device):
    assert device.memory_type_index(0b1111, MemoryUsage.CPU_TO_GPU) == 3


def test_memory_gpu_to_cpu_prefers_cached(device):
    assert device.memory_type_index(0b1111, MemoryUsage.GPU_TO_CPU) == 2


def test_memory_respects_type_bits(device):
    assert device.memory_type_index(0b0110, MemoryUsage.GPU_ONLY) == 1


def test_memory_none_when_required_missing(device):
    assert device.memory_type_index(0b0001, MemoryUsage.CPU_ONLY) is None


def test_plan_queues_full(device):
    info, requests = device.plan_queues(2, 3)
    assert (info.graphics_index, info.graphics_queue_count) == (0, 2)
    assert (info.compute_index, info.compute_queue_count) == (1, 3)
    assert (info.transfer_index, info.transfer_queue_count) == (2, 1)
    assert requests == [QueueRequest(0, 2), QueueRequest(1, 3), QueueRequest(2, 1)]


def test_plan_queues_compute_falls_back_to_graphics(device):
    info, requests = device.plan_queues(2, 0)
    assert info.compute_index == info.graphics_index
    assert info.compute_queue_count == 2
    assert len(requests) == 2


def test_plan_queues_transfer_only(device):
    info, requests = device.plan_queues(0, 0)
    assert info.graphics_index is None
    assert requests == [QueueRequest(2, 1)]


def test_plan_queues_rejects_negative(device):
    with pytest.raises(ValueError):
        device.plan_queues(-1, 0)