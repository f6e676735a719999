"""Base type for bodies placed in the scene."""

from __future__ import annotations

from dataclasses import dataclass, field

Vec3 = tuple[float, float, float]


def _vec3(value) -> Vec3:
    x, y, z = (float(c) for c in value)
    return (x, y, z)


@dataclass
class CelestialBody:
    """A body with a radius, a position and a colour; subclasses add motion and drawing."""

    radius: float
    position: Vec3
    color: Vec3 = field(default=(1.0, 1.0, 1.0))

    def __post_init__(self) -> None:
        self.radius = float(self.radius)
        self.position = _vec3(self.position)
        self.color = _vec3(self.color)

    def update(self, delta_time: float) -> None:
        """Advance the body by ``delta_time`` seconds; a plain body stays put."""

    def draw(self) -> None:
        """Render the body; a plain body has nothing to draw."""