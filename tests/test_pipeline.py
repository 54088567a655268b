import pytest

from motorgfx import pipeline, vkutil
from motorgfx.pipeline import ColorComponent, DynamicState, SharingMode
from motorgfx.rendering import (
    AttachmentColorBlendProperties,
    AttributeDescription,
    BindingDescription,
    BlendFactor,
    BlendOp,
    ColorFormat,
    CullFaceSide,
    GraphicsPipelineProperties,
    PrimitiveTopology,
    VertexInputInfo,
    VertexInputRate,
)


def _only(channel):
    flags = dict(
        color_write_mask_r=False,
        color_write_mask_g=False,
        color_write_mask_b=False,
        color_write_mask_a=False,
    )
    flags[f"color_write_mask_{channel}"] = True
    return AttachmentColorBlendProperties(**flags)


def test_default_write_mask_has_all_channels():
    mask = pipeline.color_write_mask(AttachmentColorBlendProperties())
    assert mask == ColorComponent.R | ColorComponent.G | ColorComponent.B | ColorComponent.A


def test_write_mask_empty():
    attachment = AttachmentColorBlendProperties(
        color_write_mask_r=False,
        color_write_mask_g=False,
        color_write_mask_b=False,
        color_write_mask_a=False,
    )
    assert pipeline.color_write_mask(attachment) == 0


@pytest.mark.parametrize(
    "channel, flag",
    [("r", ColorComponent.R), ("g", ColorComponent.G), ("b", ColorComponent.B), ("a", ColorComponent.A)],
)
def test_write_mask_single_channel(channel, flag):
    assert pipeline.color_write_mask(_only(channel)) == flag


def test_write_mask_channels_combine():
    combined = ColorComponent(0)
    for channel in "rgba":
        combined |= pipeline.color_write_mask(_only(channel))
    assert combined == pipeline.color_write_mask(AttachmentColorBlendProperties())


def test_default_dynamic_states():
    assert pipeline.dynamic_states(GraphicsPipelineProperties()) == [
        DynamicState.VIEWPORT,
        DynamicState.SCISSOR,
    ]


def test_all_dynamic_states_in_order():
    props = GraphicsPipelineProperties(
        dynamic_line_width=True,
        dynamic_depth_bias=True,
        dynamic_blend_constants=True,
        dynamic_depth_bounds=True,
    )
    states = pipeline.dynamic_states(props)
    assert states == sorted(DynamicState)


def test_no_dynamic_states():
    props = GraphicsPipelineProperties(dynamic_viewport=False, dynamic_scissor=False)
    assert pipeline.dynamic_states(props) == []


def test_describe_pipeline_defaults():
    props = GraphicsPipelineProperties()
    desc = pipeline.describe_pipeline(props)
    assert desc["input_assembly"]["topology"] == vkutil.topology(PrimitiveTopology.TRIANGLE_LIST)
    assert desc["rasterization"]["cull_mode"] == vkutil.cull_mode(CullFaceSide.BACK)
    assert desc["rasterization"]["line_width"] == props.line_width
    assert desc["vertex_input"] == {"bindings": [], "attributes": []}
    assert desc["color_blend"]["attachments"] == []
    assert desc["depth_stencil"]["depth_test_enable"] is True
    assert desc["depth_stencil"]["min_depth_bounds"] == props.min_depth_bounds
    assert desc["dynamic_states"] == [DynamicState.VIEWPORT, DynamicState.SCISSOR]


def test_describe_pipeline_vertex_input_and_blending():
    props = GraphicsPipelineProperties(
        vertex_input_info=VertexInputInfo(
            binding_descriptions=[BindingDescription(0, 32, VertexInputRate.INSTANCE)],
            attribute_descriptions=[AttributeDescription(1, 0, ColorFormat.R32G32B32_SFLOAT, 12)],
        ),
        attachment_color_blend_properties=[
            AttachmentColorBlendProperties(
                blend_enable=True,
                src_color_blend_factor=BlendFactor.SRC_ALPHA,
                dst_color_blend_factor=BlendFactor.ONE_MINUS_SRC_ALPHA,
                color_blend_op=BlendOp.ADD,
            )
        ],
    )
    desc = pipeline.describe_pipeline(props)
    binding = desc["vertex_input"]["bindings"][0]
    assert binding["stride"] == 32
    assert binding["input_rate"] == vkutil.vertex_input_rate(VertexInputRate.INSTANCE)
    attribute = desc["vertex_input"]["attributes"][0]
    assert attribute["location"] == 1
    assert attribute["offset"] == 12
    assert attribute["format"] == vkutil.color_format(ColorFormat.R32G32B32_SFLOAT)
    blend = desc["color_blend"]["attachments"][0]
    assert blend["blend_enable"] is True
    assert blend["src_color_blend_factor"] == vkutil.blend_factor(BlendFactor.SRC_ALPHA)
    assert blend["color_write_mask"] == int(
        pipeline.color_write_mask(AttachmentColorBlendProperties())
    )


def test_describe_pipeline_rejects_unsupported_format():
    props = GraphicsPipelineProperties(
        vertex_input_info=VertexInputInfo(
            attribute_descriptions=[AttributeDescription(0, 0, ColorFormat.R16_UINT, 0)]
        )
    )
    with pytest.raises(ValueError):
        pipeline.describe_pipeline(props)


def test_render_pass_layout():
    desc = pipeline.describe_render_pass()
    assert len(desc["attachments"]) == 1
    attachment = desc["attachments"][0]
    assert attachment["format"] == pipeline.FORMAT_B8G8R8A8_SNORM
    assert attachment["load_op"] == pipeline.ATTACHMENT_LOAD_OP_CLEAR
    assert attachment["final_layout"] == 1000001002
    subpass = desc["subpasses"][0]
    assert subpass["color_attachments"] == [
        {"attachment": 0, "layout": pipeline.IMAGE_LAYOUT_COLOR_ATTACHMENT_OPTIMAL}
    ]


def test_sharing_exclusive_when_same_family():
    sharing = pipeline.swapchain_sharing(2, 2)
    assert sharing.mode is SharingMode.EXCLUSIVE
    assert sharing.queue_family_indices == ()


def test_sharing_concurrent_when_families_differ():
    sharing = pipeline.swapchain_sharing(0, 3)
    assert sharing.mode is SharingMode.CONCURRENT
    assert sharing.queue_family_indices == (0, 3)


def test_sharing_without_graphics_family():
    with pytest.raises(ValueError, match="swapchain support"):
        pipeline.swapchain_sharing(None, 0)


def test_sharing_without_present_family():
    with pytest.raises(ValueError):
        pipeline.swapchain_sharing(0, None)