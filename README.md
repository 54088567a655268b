# motorgfx

Building blocks for a small real-time renderer, in plain Python with no
third-party dependencies: vector and matrix math, descriptions of graphics
pipeline state, mappings of that state to Vulkan values, and the logic for
picking queue families and memory types on a GPU.

## Modules

- `motorgfx.fastmath`: scalar helpers `to_radians`, `to_degrees`, `tan`,
  `clamp`, `lerp`, `inv_sqrt`, `floor_int`, `ceil_int`, `round_int`,
  `safe_acos` and `count_bits_set`. `ceil_int` is `floor_int(value + 1)`, so
  whole numbers go to the next integer up. `round_int` rounds halves up.
  `safe_acos` returns `0.0` at or above 1 and pi at or below -1 instead of
  failing.
- `motorgfx.vector`: the dataclasses `Vector2`, `Vector3` and `Vector4`.
  They support `+`, `-`, `*` and `/` component-wise with a vector of the same
  type or with a number, and they provide `dot`, `length`, `length_squared`,
  `normalized` and `normalize`. Normalizing a zero vector raises
  `ZeroDivisionError`. `Vector2` has `u`/`v` aliases, and `Vector3` and
  `Vector4` have `r`/`g`/`b`(/`a`) aliases.
- `motorgfx.matrix`: row-major `Matrix3` and `Matrix4`. A new matrix is the
  identity, or you can pass it 9 or 16 values. Both support indexing, `*`,
  `==`, `copy` and `str`, together with:
  - translation and basis vectors: `set_translation`, `translation`, `right`,
    `up` and `forward`;
  - `transposed`/`transpose` and `inverse`;
  - `rotate(axis, radians)`, which post-multiplies by rotations about x, y
    and z;
  - `transform(vector)`.

  `Matrix3.inverse` transposes the rotation part and negates the translation.
  `Matrix4.inverse` is a general inverse that returns the identity for a
  (near-)singular matrix. `Matrix4` also has `from_matrix3`,
  `to_rotation_matrix`, `set_scale`, `scale` and `invert`. `Matrix4.rotate`
  rebuilds the matrix from its rotated 3x3 block, so the translation is reset.
- `motorgfx.rendering`: enums (`ColorFormat`, `PrimitiveTopology`,
  `PolygonDrawMode`, `FrontFaceVertexWinding`, `CullFaceSide`, `CompareOp`,
  `BlendFactor`, `BlendOp`, `VertexInputRate`, `WindowMode`) and dataclasses
  (`Rectangle`, `ViewportProperties`, `BindingDescription`,
  `AttributeDescription`, `VertexInputInfo`, `AttachmentColorBlendProperties`,
  `GraphicsPipelineProperties`) that describe pipeline state.
- `motorgfx.vkutil`: `translate_result` turns `VkResult` codes into messages.
  `Version.packed()` packs a major.minor.patch version. `MemoryUsage` names
  memory access patterns. `topology`, `polygon_mode`, `front_face`,
  `cull_mode`, `compare_op`, `blend_factor`, `blend_op`, `vertex_input_rate`
  and `color_format` map the rendering enums to Vulkan values, and they raise
  `ValueError` for values that have no mapping. `R16_UINT` and `R32_UINT`
  have none.
- `motorgfx.devices`: `PhysicalDeviceInfo` holds what a device reports, with
  `queue_family_index`, `is_extension_supported`, `memory_type_index` and
  `plan_queues`, together with `QueueFlag`, `MemoryProperty`,
  `ExtensionProperties`, `QueuesInfo` and `QueueRequest`.
- `motorgfx.pipeline`: `describe_pipeline` and `describe_render_pass` build
  plain dictionaries of Vulkan fixed-function state. `dynamic_states`,
  `color_write_mask` and `swapchain_sharing` return the dynamic states, the
  colour write mask and the sharing mode of swapchain images.
- `motorgfx.fileutil`: `read_file` returns a file's bytes, for example a
  compiled shader. `show_error` writes a message to standard error.

## Installation

```
pip install .
```

## Examples

```python
from motorgfx.matrix import Matrix4
from motorgfx.vector import Vector3, Vector4

m = Matrix4()
m.set_translation(1.0, 2.0, 3.0, 1.0)
m.set_scale(Vector3(2.0, 2.0, 2.0))
inverse = m.inverse()
point = m.transform(Vector4(1.0, 0.0, 0.0, 1.0))
```

```python
from motorgfx.rendering import GraphicsPipelineProperties
from motorgfx.pipeline import describe_pipeline, dynamic_states

props = GraphicsPipelineProperties()
print(dynamic_states(props))      # viewport and scissor by default
print(describe_pipeline(props))
```

```python
from motorgfx.devices import MemoryProperty, PhysicalDeviceInfo, QueueFlag
from motorgfx.vkutil import MemoryUsage

device = PhysicalDeviceInfo(
    name="Example GPU",
    queue_families=[
        QueueFlag.GRAPHICS | QueueFlag.COMPUTE | QueueFlag.TRANSFER,
        QueueFlag.TRANSFER,
    ],
    memory_types=[
        MemoryProperty.DEVICE_LOCAL,
        MemoryProperty.HOST_VISIBLE | MemoryProperty.HOST_COHERENT,
    ],
)
device.queue_family_index(QueueFlag.TRANSFER)           # 1, the transfer-only family
info, requests = device.plan_queues(1, 0)
device.memory_type_index(0b11, MemoryUsage.CPU_ONLY)    # 1
```

## What it does not do

The package holds data and decision logic only. It does not open windows. It
does not load or call a graphics driver, create instances, devices,
swapchains or pipelines, or record command buffers. `describe_pipeline` and
`describe_render_pass` return dictionaries, not GPU objects. The caller fills
`PhysicalDeviceInfo` by hand, because the package does not query hardware.

## Running the tests

```
pip install ".[test]"
pytest
```