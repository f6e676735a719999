"""UV-sphere mesh generation, a celestial-body base type, shader loading and a small OpenGL viewer."""

__version__ = "0.1.0"
__all__ = ["app", "celestial_body", "shader", "sphere"]