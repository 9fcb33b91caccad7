"""Sphere collision shape that follows an entity's transform."""

from __future__ import annotations

from typing import ClassVar, Optional

from gamekit.collision import CollisionShapeType, ComponentID
from gamekit.math3d import Vector3
from gamekit.transform import TransformComponent


class SphereCollider:
    """A sphere centred on its transform and scaled by the largest scale axis."""

    component_id: ClassVar[ComponentID] = ComponentID.SPHERE
    shape_type: ClassVar[CollisionShapeType] = CollisionShapeType.SPHERE

    def __init__(
        self, transform: Optional[TransformComponent] = None, radius: float = 1.0
    ) -> None:
        self.transform = transform
        self.radius = radius

    def center(self) -> Vector3:
        """World-space centre; the origin when no transform is attached."""
        if self.transform is not None:
            return self.transform.position
        return Vector3(0.0, 0.0, 0.0)

    def world_radius(self) -> float:
        """Radius multiplied by the largest component of the transform's scale."""
        if self.transform is not None:
            scale = self.transform.scale
            return self.radius * max(scale.x, scale.y, scale.z)
        return self.radius