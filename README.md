# orrery

Geometry code that builds UV-sphere meshes, and a small OpenGL window
(through pyglet) that draws one sphere as a planet.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running the viewer

```
orrery
```

This asks for an OpenGL 3.3 forward-compatible context with a depth buffer
and opens a resizable 1280×720 window titled "Solar System". If the window
cannot be created, the error is printed to standard error and the command
exits with status 1.

The viewer prints the full paths of `assets/shaders/basic.vs` and
`assets/shaders/basic.fs`, resolved against the current working directory,
then compiles and links those two files. Run it from a directory that holds
them. If a file is missing, a `FileNotFoundError` is raised. If compiling or
linking fails, a `RuntimeError` is raised that carries the shader log.

The scene is a unit sphere (36 sectors, 18 stacks). Only its vertex positions
are uploaded, into the shader's attribute at location 0, or into its first
attribute when none is at location 0. The shader receives three `mat4`
uniforms: `model` (identity), `view` (a translation by -5 along Z) and
`projection` (a 45° perspective at 1280/720 aspect, near 0.1, far 100). Close
the window to quit.

## Building sphere meshes

`orrery.sphere.Sphere(radius, sectors=36, stacks=18, smooth=True, up_axis=3)`
builds a UV sphere. Its mesh lives in these lists:

- `vertices`: `(x, y, z)` positions, `(sectors + 1) * (stacks + 1)` of them,
  running from the north pole to the south pole
- `normals`: unit normals, one per vertex
- `tex_coords`: `(s, t)` pairs in `[0, 1]`
- `indices`: triangle indices, three per triangle
- `line_indices`: index pairs for a wireframe

```python
from orrery.sphere import Sphere

planet = Sphere(1.0, 36, 18, True, 3)
print(planet.vertex_count())      # 37 * 19 = 703
print(planet.triangle_count())
data = planet.interleaved_vertices()   # x, y, z, nx, ny, nz, s, t per vertex
```

The counts are `vertex_count()`, `normal_count()`, `tex_coord_count()`,
`index_count()`, `line_index_count()` and `triangle_count()`.

The mesh is built with Z (axis 3) as its up axis. When `up_axis` is 1 (X) or
2 (Y), the vertices and normals are rotated to match.
`change_up_axis(from_axis, to_axis)` rotates an existing mesh in the same way.
`reverse_normals()` flips every normal and reverses the winding of every
triangle.

To change `radius`, `sectors`, `stacks` or `up_axis`, set the attribute and
then call `rebuild()`. `smooth` is stored on the sphere, but it does not change
the mesh. `ValueError` is raised in these cases:

- a sector or stack count below 1
- a zero radius
- an axis number other than 1, 2 or 3
- `change_up_axis` called with the same axis twice

Each build logs the vertex and index counts at INFO level.

## Other pieces

- `orrery.celestial_body.CelestialBody(radius, position, color=(1.0, 1.0, 1.0))`:
  a dataclass base for scene bodies. Its `update(delta_time)` and `draw()`
  methods do nothing; subclasses are meant to override them.
- `orrery.shader.load_sources(vertex_path, fragment_path)`: reads both shader
  files and returns their text as a pair.
- `orrery.shader.Shader(vertex_path, fragment_path)`: compiles and links a
  program. It needs a current OpenGL context. `use()` activates the program.
  `set_mat4(name, matrix)` sets a uniform from 16 column-major floats. Names
  the program does not use are ignored, and a `ValueError` is raised for any
  other count of values.
- `orrery.app`: the column-major matrix helpers `identity()`,
  `translate(x, y, z)` and `perspective(fov_y, aspect, near, far)`, where
  `fov_y` is in radians. It also has `full_path(relative_path)` and `main()`,
  which is what the `orrery` command runs.

## What it does not do

The viewer draws a single still sphere with fixed matrices. It does not
provide the following:

- orbits or animation
- lighting or textures
- camera controls
- more than one body

`CelestialBody` has no motion or drawing of its own. The package does not
ship any shader files.