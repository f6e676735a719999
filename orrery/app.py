"""Window that renders a sphere through the basic shader."""

from __future__ import annotations

import argparse
import logging
import math
import sys
from pathlib import Path

from orrery.sphere import Sphere

logger = logging.getLogger(__name__)

Mat4 = tuple[float, ...]

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
VERTEX_SHADER = "assets/shaders/basic.vs"
FRAGMENT_SHADER = "assets/shaders/basic.fs"


def identity() -> Mat4:
    """The 4x4 identity matrix, column-major."""
    return tuple(1.0 if col == row else 0.0 for col in range(4) for row in range(4))


def translate(x: float, y: float, z: float) -> Mat4:
    """A translation matrix, column-major."""
    m = list(identity())
    m[12:15] = (float(x), float(y), float(z))
    return tuple(m)


def perspective(fov_y: float, aspect: float, near: float, far: float) -> Mat4:
    """A right-handed perspective projection to clip space [-1, 1], column-major.

    ``fov_y`` is the vertical field of view in radians.
    """
    if aspect == 0:
        raise ValueError("aspect must be non-zero")
    if near == far:
        raise ValueError("near and far must differ")
    tan_half = math.tan(fov_y / 2)
    if tan_half == 0:
        raise ValueError("fov_y must be non-zero")
    m = [0.0] * 16
    m[0] = 1.0 / (aspect * tan_half)
    m[5] = 1.0 / tan_half
    m[10] = -(far + near) / (far - near)
    m[11] = -1.0
    m[14] = -(2.0 * far * near) / (far - near)
    return tuple(m)


def full_path(relative_path: str) -> str:
    """Resolve ``relative_path`` against the current working directory."""
    return str(Path.cwd() / relative_path)


def _position_attribute(program) -> str:
    attributes = program.attributes
    for name, info in attributes.items():
        if info.get("location") == 0:
            return name
    if not attributes:
        raise RuntimeError("shader program has no vertex attributes")
    return next(iter(attributes))


def main(argv: list[str] | None = None) -> int:
    """Open the window and draw until it is closed; return the exit status."""
    parser = argparse.ArgumentParser(prog="orrery", description="Render the solar system.")
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    import pyglet
    from pyglet import gl

    from orrery.shader import Shader

    config = gl.Config(
        major_version=3,
        minor_version=3,
        forward_compatible=True,
        double_buffer=True,
        depth_size=24,
    )
    try:
        window = pyglet.window.Window(
            WINDOW_WIDTH, WINDOW_HEIGHT, "Solar System", config=config, resizable=True
        )
    except (pyglet.window.NoSuchConfigException, pyglet.window.WindowException) as exc:
        print("Failed to create window", file=sys.stderr)
        print(exc, file=sys.stderr)
        return 1

    gl.glEnable(gl.GL_DEPTH_TEST)

    print(full_path(VERTEX_SHADER))
    print(full_path(FRAGMENT_SHADER))
    shader = Shader(VERTEX_SHADER, FRAGMENT_SHADER)

    planet = Sphere(1.0)
    positions = [c for vertex in planet.vertices for c in vertex]
    attribute = _position_attribute(shader.program)
    vertex_list = shader.program.vertex_list_indexed(
        planet.vertex_count(),
        gl.GL_TRIANGLES,
        planet.indices,
        **{attribute: ("f", positions)},
    )

    model = identity()
    view = translate(0.0, 0.0, -5.0)
    projection = perspective(math.radians(45.0), WINDOW_WIDTH / WINDOW_HEIGHT, 0.1, 100.0)

    @window.event
    def on_draw():
        window.clear()
        shader.use()
        shader.set_mat4("model", model)
        shader.set_mat4("view", view)
        shader.set_mat4("projection", projection)
        vertex_list.draw(gl.GL_TRIANGLES)

    pyglet.app.run()
    vertex_list.delete()
    return 0


if __name__ == "__main__":
    sys.exit(main())