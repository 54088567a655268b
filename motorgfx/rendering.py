"""API-neutral rendering descriptions: pipeline state, vertex layout and windows."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ColorFormat(Enum):
    """Texel and vertex attribute formats."""

    R16_UINT = 0
    R32_UINT = 1
    R32_SFLOAT = 2
    R32G32_SFLOAT = 3
    R32G32B32_SFLOAT = 4
    R32G32B32A32_SFLOAT = 5
    R32_SINT = 6
    R32G32_SINT = 7
    R32G32B32_SINT = 8
    R32G32B32A32_SINT = 9
    R8_UNORM = 10
    R8G8_UNORM = 11
    R8G8B8_UNORM = 12
    R8G8B8A8_UNORM = 13
    B8G8R8_UNORM = 14
    B8G8R8A8_UNORM = 15
    D32_SFLOAT = 16


class PrimitiveTopology(Enum):
    """How vertices are assembled into primitives."""

    POINT_LIST = 0
    LINE_LIST = 1
    LINE_STRIP = 2
    TRIANGLE_LIST = 3
    TRIANGLE_STRIP = 4
    TRIANGLE_FAN = 5
    LINE_LIST_WITH_ADJACENCY = 6
    LINE_STRIP_WITH_ADJACENCY = 7
    TRIANGLE_LIST_WITH_ADJACENCY = 8
    TRIANGLE_STRIP_WITH_ADJACENCY = 9
    PATCH_LIST = 10


class PolygonDrawMode(Enum):
    """How polygons are rasterised."""

    FILL = 0
    LINE = 1
    POINT = 2


class FrontFaceVertexWinding(Enum):
    """Vertex order that marks a front-facing triangle."""

    COUNTER_CLOCKWISE = 0
    CLOCKWISE = 1


class CullFaceSide(Enum):
    """Which triangle faces are discarded."""

    NONE = 0
    FRONT = 1
    BACK = 2
    FRONT_AND_BACK = 3


class CompareOp(Enum):
    """Comparison used by depth testing."""

    NEVER = 0
    LESS = 1
    EQUAL = 2
    LESS_OR_EQUAL = 3
    GREATER = 4
    NOT_EQUAL = 5
    GREATER_OR_EQUAL = 6
    ALWAYS = 7


class BlendFactor(Enum):
    """Source and destination factors for colour blending."""

    ZERO = 0
    ONE = 1
    SRC_COLOR = 2
    ONE_MINUS_SRC_COLOR = 3
    DST_COLOR = 4
    ONE_MINUS_DST_COLOR = 5
    SRC_ALPHA = 6
    ONE_MINUS_SRC_ALPHA = 7
    DST_ALPHA = 8
    ONE_MINUS_DST_ALPHA = 9
    SRC_ALPHA_SATURATE = 10


class BlendOp(Enum):
    """Operation combining blended source and destination."""

    ADD = 0
    SUBTRACT = 1
    REVERSE_SUBTRACT = 2
    MIN = 3
    MAX = 4


class VertexInputRate(Enum):
    """Whether a vertex binding advances per vertex or per instance."""

    VERTEX = 0
    INSTANCE = 1


class WindowMode(Enum):
    """Presentation mode of a window."""

    FULL_SCREEN = 0
    WINDOWED = 1
    BORDERLESS = 2


@dataclass
class Rectangle:
    """An integer rectangle with a signed origin and unsigned size."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("rectangle width and height must not be negative")


@dataclass
class ViewportProperties:
    """Viewport placement and depth range."""

    x: float
    y: float
    width: float
    height: float
    min_depth: float = 0.0
    max_depth: float = 1.0


@dataclass
class BindingDescription:
    """A vertex buffer binding slot."""

    binding: int
    stride: int
    input_rate: VertexInputRate = VertexInputRate.VERTEX


@dataclass
class AttributeDescription:
    """A single vertex attribute read from a binding."""

    location: int
    binding: int
    format: ColorFormat
    offset: int


@dataclass
class VertexInputInfo:
    """All vertex bindings and attributes of a pipeline."""

    binding_descriptions: list[BindingDescription] = field(default_factory=list)
    attribute_descriptions: list[AttributeDescription] = field(default_factory=list)


@dataclass
class AttachmentColorBlendProperties:
    """Blend state and write mask of one colour attachment."""

    blend_enable: bool = False
    src_color_blend_factor: BlendFactor = BlendFactor.ZERO
    dst_color_blend_factor: BlendFactor = BlendFactor.ZERO
    color_blend_op: BlendOp = BlendOp.ADD
    src_alpha_blend_factor: BlendFactor = BlendFactor.ZERO
    dst_alpha_blend_factor: BlendFactor = BlendFactor.ZERO
    alpha_blend_op: BlendOp = BlendOp.ADD
    color_write_mask_r: bool = True
    color_write_mask_g: bool = True
    color_write_mask_b: bool = True
    color_write_mask_a: bool = True


@dataclass
class GraphicsPipelineProperties:
    """Fixed-function state of a graphics pipeline."""

    vertex_input_info: VertexInputInfo = field(default_factory=VertexInputInfo)
    topology: PrimitiveTopology = PrimitiveTopology.TRIANGLE_LIST
    polygon_draw_mode: PolygonDrawMode = PolygonDrawMode.FILL
    front_face_vertex_winding: FrontFaceVertexWinding = FrontFaceVertexWinding.COUNTER_CLOCKWISE
    cull_face_side: CullFaceSide = CullFaceSide.BACK
    line_width: float = 1.0
    dynamic_viewport: bool = True
    dynamic_scissor: bool = True
    dynamic_line_width: bool = False
    dynamic_depth_bias: bool = False
    dynamic_blend_constants: bool = False
    dynamic_depth_bounds: bool = False

    attachment_color_blend_properties: list[AttachmentColorBlendProperties] = field(
        default_factory=list
    )

    depth_test_enable: bool = True
    depth_write_enable: bool = True
    depth_compare_op: CompareOp = CompareOp.LESS
    depth_bounds_test_enable: bool = False
    min_depth_bounds: float = 0.0
    max_depth_bounds: float = 1.0