# wireview

`wireview` opens a 1600×900 window and draws a Wavefront OBJ model as a
white wireframe on black. Faces that point away from the camera are not
drawn. You can fly the camera through the scene. The camera's position and
rotation are shown in the top-left corner.

## Installation

```
pip install .
```

The window is drawn with pygame, which is installed along with the package.

## Running

```
wireview
```

With no arguments the viewer loads `../tank.obj`. You can also pass a path
to another OBJ file:

```
wireview model.obj
```

If the file cannot be opened, the viewer prints
`Failed to open OBJ file: <path>` to standard error. It still opens the
window, with an empty scene.

The camera starts at `(0, 0, 50)` and looks down the negative Z axis. The
projection uses a 90° vertical field of view, a 16:9 aspect ratio, a near
plane at 1 and a far plane at 250. The window is redrawn up to 60 times a
second.

### Controls

| Key          | Action                  |
|--------------|-------------------------|
| W / S        | move forward / backward |
| A / D        | move left / right       |
| Q / E        | move down / up          |
| Up / Down    | pitch                   |
| Left / Right | yaw                     |
| R / F        | roll                    |
| Esc          | quit                    |

Each frame moves the camera by 0.1 units and turns it by 1°. Only one
movement key and one rotation key take effect per frame. The first key
found in the order listed above is used.

## Using the library

The building blocks can be used on their own:

```python
import math
from wireview.vectors import Vec3
from wireview.quaternion import Quaternion
from wireview.camera import Camera
from wireview.objparser import load_obj

yaw = Quaternion.from_axis_angle(math.pi / 2, Vec3(0, 1, 0))
print(yaw.rotate(Vec3(0, 0, -1)))      # forward turned 90° about Y

camera = Camera(Vec3(0, 0, 50))
camera.move_forward(1.0)
view = camera.view_matrix()

vertices, faces = load_obj("model.obj")
```

- `wireview.vectors`: `Vec3` and `Vec4`. For two `Vec3` values, `a * b`
  is the dot product and `a ^ b` is the cross product. For a `Vec3` and a
  number, `a * 2.0` scales the vector. `Vec4.from_vec3` lifts a point to
  `w = 1`.
- `wireview.quaternion`: `Quaternion` has `from_axis_angle`, `from_euler`,
  multiplication, `conjugate`, `inverse`, `norm`, `normalize` (in place),
  `to_rotation_matrix`, `rotate` and `apply_rotation`.
- `wireview.camera`: `Camera` has a `position` and a `rotation`. It
  provides the translation, rotation and view matrices, the forward, right
  and up vectors, and `move_forward`, `move_right` and `move_up`.
- `wireview.objparser`: `load_obj(path)` and `parse_obj(lines)` both
  return `(vertices, faces)`. They read only `v` and `f` records. Each face
  is a list of zero-based vertex indices, and any `/texture/normal` parts
  are ignored. A vertex with fewer than three coordinates, or a face entry
  that is not an index, raises `ValueError`.
- `wireview.face`: `Face(indices)` has three methods. `is_facing` is the
  back-face test, based on the first three vertices. `project` returns
  screen-space points, or an empty list when any vertex lies in front of
  the near plane at 0.1. `draw` draws the outline on a pygame surface.
- `wireview.app`: `projection_matrix`, `apply_input` and `render_scene`
  are the pieces the viewer runs on each frame. `main` is the `wireview`
  command.

## Limitations

Only outlines are drawn. There is no filling, shading, texturing or depth
sorting. The viewer does not clip faces: a face with any vertex behind the
camera's near plane is left out entirely. Materials, normals, texture
coordinates and groups in OBJ files are ignored.

## Tests

```
pip install .[test]
pytest
```