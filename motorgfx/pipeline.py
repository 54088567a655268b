"""Graphics pipeline, render pass and swapchain sharing descriptions for Vulkan."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, IntFlag
from typing import Any

from . import vkutil
from .rendering import AttachmentColorBlendProperties, GraphicsPipelineProperties


class ColorComponent(IntFlag):
    """Colour channels a blend attachment may write."""

    R = 0x1
    G = 0x2
    B = 0x4
    A = 0x8


class DynamicState(IntEnum):
    """Pipeline state that can be changed while recording commands."""

    VIEWPORT = 0
    SCISSOR = 1
    LINE_WIDTH = 2
    DEPTH_BIAS = 3
    BLEND_CONSTANTS = 4
    DEPTH_BOUNDS = 5


class SharingMode(Enum):
    """How swapchain images are shared between queue families."""

    EXCLUSIVE = 0
    CONCURRENT = 1


@dataclass(frozen=True)
class SwapchainSharing:
    """Sharing mode of swapchain images and the queue families involved."""

    mode: SharingMode
    queue_family_indices: tuple[int, ...] = ()


# Vulkan values used by the default render pass.
FORMAT_B8G8R8A8_SNORM = 45
SAMPLE_COUNT_1 = 1
ATTACHMENT_LOAD_OP_CLEAR = 1
ATTACHMENT_LOAD_OP_DONT_CARE = 2
ATTACHMENT_STORE_OP_STORE = 0
ATTACHMENT_STORE_OP_DONT_CARE = 1
IMAGE_LAYOUT_UNDEFINED = 0
IMAGE_LAYOUT_COLOR_ATTACHMENT_OPTIMAL = 2
IMAGE_LAYOUT_PRESENT_SRC_KHR = 1000001002
PIPELINE_BIND_POINT_GRAPHICS = 0

_DYNAMIC_FLAGS = (
    ("dynamic_viewport", DynamicState.VIEWPORT),
    ("dynamic_scissor", DynamicState.SCISSOR),
    ("dynamic_line_width", DynamicState.LINE_WIDTH),
    ("dynamic_depth_bias", DynamicState.DEPTH_BIAS),
    ("dynamic_blend_constants", DynamicState.BLEND_CONSTANTS),
    ("dynamic_depth_bounds", DynamicState.DEPTH_BOUNDS),
)


def color_write_mask(attachment: AttachmentColorBlendProperties) -> ColorComponent:
    """Colour components the attachment writes, as a flag set."""
    mask = ColorComponent(0)
    if attachment.color_write_mask_r:
        mask |= ColorComponent.R
    if attachment.color_write_mask_g:
        mask |= ColorComponent.G
    if attachment.color_write_mask_b:
        mask |= ColorComponent.B
    if attachment.color_write_mask_a:
        mask |= ColorComponent.A
    return mask


def dynamic_states(properties: GraphicsPipelineProperties) -> list[DynamicState]:
    """Dynamic states enabled by ``properties``, in a fixed order."""
    return [state for name, state in _DYNAMIC_FLAGS if getattr(properties, name)]


def _blend_attachment(attachment: AttachmentColorBlendProperties) -> dict[str, Any]:
    return {
        "blend_enable": attachment.blend_enable,
        "src_color_blend_factor": vkutil.blend_factor(attachment.src_color_blend_factor),
        "dst_color_blend_factor": vkutil.blend_factor(attachment.dst_color_blend_factor),
        "color_blend_op": vkutil.blend_op(attachment.color_blend_op),
        "src_alpha_blend_factor": vkutil.blend_factor(attachment.src_alpha_blend_factor),
        "dst_alpha_blend_factor": vkutil.blend_factor(attachment.dst_alpha_blend_factor),
        "alpha_blend_op": vkutil.blend_op(attachment.alpha_blend_op),
        "color_write_mask": int(color_write_mask(attachment)),
    }


def describe_pipeline(properties: GraphicsPipelineProperties) -> dict[str, Any]:
    """Translate pipeline properties into the Vulkan fixed-function state.

    Raises ValueError for a value that has no Vulkan counterpart.
    """
    vertex_input = properties.vertex_input_info
    return {
        "input_assembly": {
            "topology": vkutil.topology(properties.topology),
            "primitive_restart_enable": False,
        },
        "vertex_input": {
            "bindings": [
                {
                    "binding": b.binding,
                    "stride": b.stride,
                    "input_rate": vkutil.vertex_input_rate(b.input_rate),
                }
                for b in vertex_input.binding_descriptions
            ],
            "attributes": [
                {
                    "location": a.location,
                    "binding": a.binding,
                    "format": vkutil.color_format(a.format),
                    "offset": a.offset,
                }
                for a in vertex_input.attribute_descriptions
            ],
        },
        "viewport": {"viewport_count": 1, "scissor_count": 1},
        "rasterization": {
            "depth_clamp_enable": False,
            "rasterizer_discard_enable": False,
            "polygon_mode": vkutil.polygon_mode(properties.polygon_draw_mode),
            "cull_mode": vkutil.cull_mode(properties.cull_face_side),
            "front_face": vkutil.front_face(properties.front_face_vertex_winding),
            "depth_bias_enable": False,
            "line_width": properties.line_width,
        },
        "color_blend": {
            "attachments": [
                _blend_attachment(a) for a in properties.attachment_color_blend_properties
            ],
        },
        "multisample": {"rasterization_samples": SAMPLE_COUNT_1},
        "depth_stencil": {
            "depth_test_enable": properties.depth_test_enable,
            "depth_write_enable": properties.depth_write_enable,
            "depth_compare_op": vkutil.compare_op(properties.depth_compare_op),
            "depth_bounds_test_enable": properties.depth_bounds_test_enable,
            "min_depth_bounds": properties.min_depth_bounds,
            "max_depth_bounds": properties.max_depth_bounds,
        },
        "dynamic_states": [int(s) for s in dynamic_states(properties)],
    }


def describe_render_pass() -> dict[str, Any]:
    """The single-subpass render pass with one presentable colour attachment."""
    return {
        "attachments": [
            {
                "format": FORMAT_B8G8R8A8_SNORM,
                "samples": SAMPLE_COUNT_1,
                "load_op": ATTACHMENT_LOAD_OP_CLEAR,
                "store_op": ATTACHMENT_STORE_OP_STORE,
                "stencil_load_op": ATTACHMENT_LOAD_OP_DONT_CARE,
                "stencil_store_op": ATTACHMENT_STORE_OP_DONT_CARE,
                "initial_layout": IMAGE_LAYOUT_UNDEFINED,
                "final_layout": IMAGE_LAYOUT_PRESENT_SRC_KHR,
            }
        ],
        "subpasses": [
            {
                "pipeline_bind_point": PIPELINE_BIND_POINT_GRAPHICS,
                "color_attachments": [
                    {
                        "attachment": 0,
                        "layout": IMAGE_LAYOUT_COLOR_ATTACHMENT_OPTIMAL,
                    }
                ],
            }
        ],
    }


def swapchain_sharing(graphics_index: int | None, present_index: int | None) -> SwapchainSharing:
    """Decide how swapchain images are shared between graphics and present queues.

    Raises ValueError when either queue family is missing.
    """
    if graphics_index is None:
        raise ValueError("Device does not have swapchain support!")
    if present_index is None:
        raise ValueError("Device has no queue family that can present to the surface")
    if graphics_index != present_index:
        return SwapchainSharing(SharingMode.CONCURRENT, (graphics_index, present_index))
    return SwapchainSharing(SharingMode.EXCLUSIVE)