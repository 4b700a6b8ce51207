# nirsviz

Building blocks for a near-infrared spectroscopy (NIRS) viewer. The package
reads the probe layout of a SNIRF recording from its group tree. It also
holds the small application pieces a viewer is built from: layers, an asset
registry, vertex buffer layouts and a camera base class.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Reading a probe layout

`nirsviz.snirf.Snirf.load(root, filepath)` reads a SNIRF group tree that has
already been opened. In that tree:

- a group is any mapping from names to sub-groups or datasets;
- a dataset is a numpy array, a list, a tuple, or any object with a `shape`.

`filepath` must name a file that exists. If it does not, the error is logged
and `FileNotFoundError` is raised.

The tree must contain the group `nirs` with the members `data1`,
`metaDataTags` and `probe`. The `probe` group must hold these datasets:

- `detectorPos2D`, `detectorPos3D`, `sourcePos2D` and `sourcePos3D`;
- `wavelengths`;
- `landmarkLabels` and `landmarkPos3D`.

A missing member raises `KeyError`. A position dataset that is not
two-dimensional raises `ValueError`, and so does having fewer landmark labels
than landmark rows.

```python
import numpy as np
from nirsviz.snirf import Snirf

root = {
    "nirs": {
        "data1": {},
        "metaDataTags": {},
        "probe": {
            "detectorPos2D": np.array([[1.0, 2.0]]),
            "detectorPos3D": np.array([[1.0, 2.0, 3.0]]),
            "sourcePos2D": np.array([[4.0, 5.0]]),
            "sourcePos3D": np.array([[4.0, 5.0, 6.0]]),
            "wavelengths": np.array([760.0, 850.0]),
            "landmarkLabels": np.array([b"Nz", b"Iz"]),
            "landmarkPos3D": np.array([[0.0, 1.0, 2.0], [3.0, 4.0, 5.0]]),
        },
    }
}

recording = Snirf()
recording.load(root, "subject01.snirf")   # the path must exist on disk

for line in recording.summary():
    print(line)
```

### What `load` fills in

After loading, the recording has these attributes:

- `recording.probes_2d`, a list of `Probe2D` records.
- `recording.probes_3d`, a list of `Probe3D` records.
- `recording.landmarks`, a list of `Landmark` records.
- `recording.filepath`, the path that was loaded.

All three record types are dataclasses in `nirsviz.nirs`.

Detectors come first in the probe lists, then sources. In the 3D probe
positions the second and third axes are swapped, so `(x, y, z)` in the file
becomes `(x, z, y)`. Landmark positions are kept as they are in the file.
Landmark labels given as bytes are decoded as UTF-8.

`load` does two more things:

- It logs every group found in the tree, using `walk_groups`, and then logs
  the summary.
- It appends to the lists rather than replacing them, so loading a second
  time adds to what is already there.

### Helpers

- `summary()` gives the first ten 2D/3D probe pairs and the first ten
  landmarks as lines of text.
- `print_summary()` writes those lines to the core logger.
- `is_file_loaded()` tells whether a path has been loaded.

The module also has these functions:

- `walk_groups(group, path)` returns every object under a group as
  `(kind, path)` pairs, depth first. The kind is `"Group"`, `"Dataset"` or
  `"Other"`.
- `dataset_shape(dataset)` writes a shape such as `"(3, 2)"`.
- `probe_type_to_string(probe_type)` gives `"SOURCE"`, `"DETECTOR"`, or
  `"INVALID"` for anything that is not a `ProbeType`.

`nirsviz.nirs` also defines `SOURCE_COLOR` (red) and `DETECTOR_COLOR` (blue)
as RGBA tuples.

## Layers

```python
from nirsviz.layers import Layer, LayerStack

class ProbeView(Layer):
    def on_update(self, dt):
        super().on_update(dt)

stack = LayerStack()
stack.push_layer(ProbeView("probes"))
stack.push_overlay(Layer("ui"))

for layer in stack:
    layer.on_update(0.016)

for layer in reversed(stack):
    layer.on_event("resize")
```

### Ordering

Regular layers always come before overlays, whatever order they were pushed
in.

### Attaching and removing

- Pushing a layer calls its `on_attach`.
- `pop_layer`, `pop_overlay` and `clear` call `on_detach` on the layers they
  remove.
- A layer that is not in the matching part of the stack is ignored.

### Default hooks

The base `Layer` hooks keep simple counts:

- `attached` records whether the layer is on a stack.
- `elapsed` holds the sum of the `dt` values passed to `on_update`.
- `frames_rendered`, `ui_frames_rendered` and `events_seen` count the calls
  to the matching hooks.

## Assets

```python
from nirsviz.assets import AssetManager, AssetNotFoundError

assets = AssetManager()
assets.register("mesh", "head", head_mesh)
head = assets.get("mesh", "head")
```

Assets are stored by kind and name. The kind can be any hashable value, such
as a class.

- Registering a name again replaces the earlier asset.
- Looking up a name that was never registered for that kind raises
  `AssetNotFoundError`, a subclass of `LookupError`.
- `shutdown()` drops every stored asset, and so does `init()`.

## Buffer layouts

```python
from nirsviz.buffer_layout import BufferElement, BufferLayout, ShaderDataType

layout = BufferLayout([
    BufferElement(ShaderDataType.FLOAT3, "a_Position"),
    BufferElement(ShaderDataType.FLOAT4, "a_Color"),
])
print(layout.stride)                      # 28
print([e.offset for e in layout])         # [0, 12]
```

Each element gets its size from `shader_data_type_size`, and
`component_count()` gives the number of components of the element. Both
raise `ValueError` for `ShaderDataType.NONE`. The layout lays its elements
out one after another and sums their sizes into `stride`.

## Cameras

`nirsviz.camera.Camera` is an abstract base class. A subclass implements
these four methods:

- `on_update(dt)`
- `on_event(event)`
- `update_view_matrix()`
- `update_projection_matrix()`

The base class holds the camera state as numpy arrays:

- `view_matrix` and `projection_matrix`
- `position` and `focal_point`
- `front`, `up` and `right`

It also provides these methods:

- `view_projection_matrix()` returns `projection_matrix @ view_matrix`.
- `set_viewport_size(width, height)` stores the viewport size. It also sets
  the aspect ratio, unless `set_fixed_aspect_ratio(True)` has been called.

## Logging

- `nirsviz.log.init(log_path)` sets up the `NVIZ` logger. It writes to
  standard output and to a log file that is truncated on every call. The
  default file is `NVIZ.log`.
- `get_core_logger()` returns that logger.
- `check(condition, message)` handles a false condition: it logs
  `"Assertion failed: <message>"` as an error and raises `AssertionError`.

## What this package does not do

This package has no window, no rendering and no command-line program. It
draws nothing on screen: the camera and buffer layout classes only hold state
and sizes. It also does not open HDF5 files itself. You open the SNIRF file
with a reader of your choice and pass the resulting group tree to
`Snirf.load`. Channel data, wavelengths and metadata are not read either;
only the probe geometry and the landmarks are.