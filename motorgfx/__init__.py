"""Vector and matrix math, pipeline descriptions, Vulkan value mappings and device-selection helpers."""

__version__ = "0.1.0"
__all__ = [
    "fastmath",
    "vector",
    "matrix",
    "rendering",
    "vkutil",
    "devices",
    "pipeline",
    "fileutil",
]