"""GLSL shader program built from a vertex and a fragment source file."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def load_sources(vertex_path: PathLike, fragment_path: PathLike) -> tuple[str, str]:
    """Read the vertex and fragment shader sources and return them as a pair."""
    sources = []
    for kind, path in (("vertex", vertex_path), ("fragment", fragment_path)):
        try:
            sources.append(Path(path).read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise FileNotFoundError(f"Failed to open {kind} shader file: {path}") from exc
    vertex_source, fragment_source = sources
    return vertex_source, fragment_source


class Shader:
    """A linked shader program; needs a current OpenGL context."""

    def __init__(self, vertex_path: PathLike, fragment_path: PathLike) -> None:
        vertex_source, fragment_source = load_sources(vertex_path, fragment_path)

        from pyglet.graphics.shader import Shader as GLShader
        from pyglet.graphics.shader import ShaderException, ShaderProgram

        def compile_stage(source: str, stage: str):
            try:
                return GLShader(source, stage)
            except ShaderException as exc:
                raise RuntimeError(
                    f"ERROR::SHADER_COMPILATION_ERROR of type: {stage.upper()}\n{exc}"
                ) from exc

        vertex = compile_stage(vertex_source, "vertex")
        fragment = compile_stage(fragment_source, "fragment")
        try:
            self.program = ShaderProgram(vertex, fragment)
        except ShaderException as exc:
            raise RuntimeError(f"ERROR::PROGRAM_LINKING_ERROR of type: PROGRAM\n{exc}") from exc
        finally:
            # The stages are linked into the program and no longer needed.
            vertex.delete()
            fragment.delete()
        self.id = self.program.id

    def use(self) -> None:
        """Make this program the active one."""
        self.program.use()

    def set_mat4(self, name: str, matrix: Iterable[float]) -> None:
        """Set a 4x4 matrix uniform from 16 floats in column-major order.

        A name that the program does not use is ignored.
        """
        values = tuple(float(v) for v in matrix)
        if len(values) != 16:
            raise ValueError(f"a 4x4 matrix needs 16 values, got {len(values)}")
        if name not in self.program.uniforms:
            logger.debug("uniform %r is not active in program %s", name, self.id)
            return
        self.program[name] = values