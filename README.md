# raycaster

A compact recursive ray tracer written with NumPy. It renders a fixed
scene of a room with a table, spheres, cylinders and cones, lit by two
point lights and a spotlight, and saves the result as an image file with
Pillow.

## Features

- Primitives: spheres (with an optional 4x4 model transform), flat quads
  and triangles, cylinders with a closed top cap, and upright cones.
- Phong-style lighting with ambient, diffuse and specular terms.
- Hard shadows from two point lights, lightened when the shadow is cast by
  a transparent object.
- A spotlight with a 15 degree cut-off aimed at the table.
- Recursive reflection, refraction through solid objects and transparency,
  up to a depth of 10.
- A chequerboard pattern on the table top and an image texture wrapped
  around one cylinder.
- Optional adaptive anti-aliasing that subdivides cells whose samples differ.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
raycaster --help
```

lists the options. Running `raycaster` renders the built-in scene:

- `--size N` – number of cells per side of the image (default 500); the
  output image is N by N pixels.
- `--texture PATH` – image wrapped around the textured cylinder (default
  `Flowers.jpg` in the current directory). If it cannot be opened, a
  message is printed and that cylinder samples as black.
- `--output PATH` – where to save the rendered image (default
  `raytrace.png`).
- `--anti-alias` – use adaptive supersampling instead of one ray per cell.

Rendering is done in pure Python per cell and is slow at the default size;
a small `--size` such as 50 gives a quick preview.

## Library use

The package is split into small modules:

- `raycaster.linalg` – vector and matrix helpers (`vec3`, `normalize`,
  `reflect`, `refract`, `translate`, `scale`, `rotate`). Matrices are 4x4
  arrays acting on column vectors; `refract` returns the zero vector on
  total internal reflection.
- `raycaster.scene_object` – `SceneObject`, the abstract base for
  everything a ray can hit. It holds the material (`color`, `reflective`,
  `refractive`, `specular`, `transparent`, their coefficients,
  `refractive_index`, `shininess`), `set_transform` and `lighting`.
- `raycaster.sphere`, `raycaster.plane`, `raycaster.cylinder`,
  `raycaster.cone` – the primitives `Sphere`, `Plane`, `Cylinder` and
  `Cone`, each with `intersect` and `normal`. `Plane` also has
  `is_inside`.
- `raycaster.ray` – `Ray`, whose `closest_pt` finds the nearest hit in a
  list of scene objects and returns its index, or `None` on a miss.
- `raycaster.texture` – `Texture` and `load_texture` for sampling an image
  with `color_at(s, t)`; `(0, 0)` is the lower-left corner.
- `raycaster.tracer` – `build_scene`, `disk_rand`, `main` and
  `RayTracer`, with `trace`, `anti_aliasing` and `render`.

`intersect` returns the distance along the ray to the nearest hit, or -1
when the ray misses.

Rendering the demo scene to an array:

```python
from raycaster.tracer import RayTracer, build_scene

tracer = RayTracer(build_scene())
pixels = tracer.render(40)   # shape (40, 40, 3), row 0 at the top
```

Tracing a single ray against your own objects:

```python
from raycaster.ray import Ray
from raycaster.sphere import Sphere
from raycaster.linalg import vec3

ball = Sphere(vec3(0, 0, -10), 2)
ball.color = (1.0, 0.2, 0.2)

tracer = RayTracer([ball], checker_index=None, textured_index=None)
color = tracer.trace(Ray(vec3(0, 0, 0), vec3(0, 0, -1)), 1)
```

By default `RayTracer` paints the object at index 0 with the chequerboard
and wraps the texture around the object at index 16, matching the layout
of `build_scene`; pass `None` for either index to turn the effect off.
Both effects change the object's `color` after the hit is shaded, so they
show on later rays.

## What it does not do

The package does not open a window or display the image on screen; it
only renders to an array or, through the command, to an image file. The
scene is fixed in `build_scene`: there is no scene file format to load.