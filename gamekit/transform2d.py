"""Position, scale, rotation and pivot of a 2D or UI object."""

from __future__ import annotations

from dataclasses import dataclass, field

from gamekit.vector2 import Vector2


@dataclass
class Transform2D:
    """Spatial state of a 2D element; rotation is in radians, pivot in 0..1."""

    position: Vector2 = field(default_factory=lambda: Vector2(0.0, 0.0))
    scale: Vector2 = field(default_factory=lambda: Vector2(1.0, 1.0))
    rotation: float = 0.0
    pivot: Vector2 = field(default_factory=lambda: Vector2(0.5, 0.5))

    def reset(self) -> None:
        """Restore the default state."""
        self.position = Vector2(0.0, 0.0)
        self.scale = Vector2(1.0, 1.0)
        self.rotation = 0.0
        self.pivot = Vector2(0.5, 0.5)

    def contains(self, world_point: Vector2, size: Vector2) -> bool:
        """Whether ``world_point`` lies inside a rectangle of ``size`` under this transform."""
        if self.scale.x <= 0.0 or self.scale.y <= 0.0:
            return False

        point = world_point - self.position
        if self.rotation != 0.0:
            point = point.rotated_by(-self.rotation)
        point = Vector2(point.x / self.scale.x, point.y / self.scale.y)

        half_w = size.x / 2.0
        half_h = size.y / 2.0
        pivot_offset = Vector2(
            (self.pivot.x - 0.5) * size.x, (self.pivot.y - 0.5) * size.y
        )
        point = point - pivot_offset

        return -half_w <= point.x <= half_w and -half_h <= point.y <= half_h