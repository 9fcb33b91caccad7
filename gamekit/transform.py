"""Position, velocity, rotation and scale of a 3D entity."""

from __future__ import annotations

from typing import ClassVar, Optional

from gamekit.collision import ComponentID
from gamekit.math3d import Matrix, Quaternion, Vector3

_MIN_SPEED_SQ = 1e-8


class TransformComponent:
    """Spatial state of an entity; the rotation is kept as a quaternion."""

    component_id: ClassVar[ComponentID] = ComponentID.TRANSFORM

    def __init__(self, position: Optional[Vector3] = None) -> None:
        self.position: Vector3 = position if position is not None else Vector3(0.0, 0.0, 0.0)
        self.velocity: Vector3 = Vector3(0.0, 0.0, 0.0)
        self._rotation: Quaternion = Quaternion.identity()
        self.scale: Vector3 = Vector3(1.0, 1.0, 1.0)

    @property
    def rotation(self) -> Quaternion:
        """Current orientation."""
        return self._rotation

    @rotation.setter
    def rotation(self, value: Quaternion) -> None:
        self._rotation = value.normalized()

    def update(self, delta_time: float) -> None:
        """Advance the position by the velocity over ``delta_time`` seconds."""
        if self.velocity.square_size() > _MIN_SPEED_SQ:
            self.position = self.position + self.velocity * delta_time

    def rotation_matrix(self) -> Matrix:
        """The rotation as a matrix."""
        return self._rotation.to_matrix()

    def world_matrix(self) -> Matrix:
        """Scale, then rotation, then translation."""
        scale = Matrix.scaling(self.scale)
        translate = Matrix.translation(self.position)
        return scale @ self.rotation_matrix() @ translate

    def set_rotation_euler(self, euler_angles: Vector3) -> None:
        """Set the rotation from (pitch, yaw, roll) in radians."""
        self._rotation = Quaternion.from_euler_angles(
            euler_angles.x, euler_angles.y, euler_angles.z
        )

    def add_yaw(self, angle: float) -> None:
        """Compose a yaw rotation onto the current rotation."""
        self._rotation = self._rotation * Quaternion.from_euler_angles(0.0, angle, 0.0)

    def add_pitch(self, angle: float) -> None:
        """Compose a pitch rotation onto the current rotation."""
        self._rotation = self._rotation * Quaternion.from_euler_angles(angle, 0.0, 0.0)

    def forward(self) -> Vector3:
        """Local +Z in world space."""
        return Vector3(0.0, 0.0, 1.0).transform(self.rotation_matrix())

    def right(self) -> Vector3:
        """Local +X in world space."""
        return Vector3(1.0, 0.0, 0.0).transform(self.rotation_matrix())

    def up(self) -> Vector3:
        """Local +Y in world space."""
        return Vector3(0.0, 1.0, 0.0).transform(self.rotation_matrix())