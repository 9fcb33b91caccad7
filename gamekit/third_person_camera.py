"""Camera that orbits and smoothly follows a target transform."""

from __future__ import annotations

import math
from typing import ClassVar, Optional

from gamekit.collision import ComponentID
from gamekit.math3d import Matrix, Quaternion, Vector3
from gamekit.transform import TransformComponent

MIN_PITCH = -0.5
MAX_PITCH = 1.5
_MIN_LOOK_SQ = 1e-6


def look_rotation_matrix(forward: Vector3, up: Vector3) -> Matrix:
    """A rotation matrix whose rows are the right, up and forward axes."""
    z_axis = forward.normalized()
    x_axis = up.cross(z_axis).normalized()
    y_axis = z_axis.cross(x_axis)
    return Matrix(
        (
            (x_axis.x, x_axis.y, x_axis.z, 0.0),
            (y_axis.x, y_axis.y, y_axis.z, 0.0),
            (z_axis.x, z_axis.y, z_axis.z, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )


class ThirdPersonCamera:
    """Keeps a camera transform at a distance behind a target, looking at it."""

    component_id: ClassVar[ComponentID] = ComponentID.THIRD_PERSON_CAMERA

    def __init__(
        self,
        transform: TransformComponent,
        target: Optional[TransformComponent] = None,
    ) -> None:
        self.transform = transform
        self.target = target
        self.distance = 40.0
        self.offset = Vector3(0.0, 5.0, 0.0)
        self.rotation_speed = 2.0
        self.lerp_speed = 15.0
        self.yaw = math.pi * 0.25
        self.pitch = -0.2

    def ideal_position(self) -> Vector3:
        """Where the camera wants to be for the current yaw, pitch and distance."""
        if self.target is None:
            raise RuntimeError("camera has no target")
        pitch = min(max(self.pitch, MIN_PITCH), MAX_PITCH)
        rotation = Quaternion.from_euler_angles(pitch, self.yaw, 0.0)
        direction = Vector3(0.0, 0.0, -1.0).transform(rotation.to_matrix())
        return self.target.position + direction * self.distance

    def update(self, delta_time: float) -> None:
        """Move and turn the camera toward its ideal pose, independent of frame rate."""
        if self.target is None:
            return
        self.pitch = min(max(self.pitch, MIN_PITCH), MAX_PITCH)

        final_position = self.ideal_position()
        current = self.transform.position
        factor = 1.0 - math.exp(-self.lerp_speed * delta_time)
        self.transform.position = current + (final_position - current) * factor

        look_at = self.target.position + self.offset
        look_dir = look_at - self.transform.position
        if look_dir.square_size() > _MIN_LOOK_SQ:
            target_rot = Quaternion.from_matrix(
                look_rotation_matrix(look_dir, Vector3(0.0, 1.0, 0.0))
            )
            rot_factor = 1.0 - math.exp(-self.lerp_speed * 1.5 * delta_time)
            self.transform.rotation = Quaternion.slerp(
                self.transform.rotation, target_rot, rot_factor
            )