import math

import pytest

from gamekit.collision import ComponentID
from gamekit.math3d import Quaternion, Vector3
from gamekit.transform import TransformComponent


def test_defaults():
    t = TransformComponent()
    assert t.position == Vector3(0.0, 0.0, 0.0)
    assert t.velocity == Vector3(0.0, 0.0, 0.0)
    assert t.scale == Vector3(1.0, 1.0, 1.0)
    assert t.rotation == Quaternion.identity()
    assert t.component_id is ComponentID.TRANSFORM


def test_initial_position():
    t = TransformComponent(Vector3(1.0, 2.0, 3.0))
    assert t.position == Vector3(1.0, 2.0, 3.0)


def test_identity_directions():
    t = TransformComponent()
    assert tuple(t.forward()) == pytest.approx((0.0, 0.0, 1.0), abs=1e-9)
    assert tuple(t.right()) == pytest.approx((1.0, 0.0, 0.0), abs=1e-9)
    assert tuple(t.up()) == pytest.approx((0.0, 1.0, 0.0), abs=1e-9)


def test_update_moves_by_velocity():
    t = TransformComponent(Vector3(1.0, 2.0, 3.0))
    t.velocity = Vector3(1.0, 0.0, 0.0)
    t.update(0.5)
    assert tuple(t.position) == pytest.approx((1.5, 2.0, 3.0), abs=1e-9)


def test_update_ignores_tiny_velocity():
    t = TransformComponent(Vector3(1.0, 2.0, 3.0))
    t.velocity = Vector3(1e-5, 0.0, 0.0)
    t.update(1.0)
    assert t.position == Vector3(1.0, 2.0, 3.0)


def test_rotation_setter_normalizes():
    t = TransformComponent()
    t.rotation = Quaternion(0.0, 2.0, 0.0, 2.0)
    assert math.isclose(math.sqrt(sum(c * c for c in t.rotation)), 1.0)


def test_set_rotation_euler_matches_quaternion():
    t = TransformComponent()
    t.set_rotation_euler(Vector3(0.3, 0.7, -0.2))
    expected = Quaternion.from_euler_angles(0.3, 0.7, -0.2)
    assert tuple(t.rotation) == pytest.approx(tuple(expected), abs=1e-9)


@pytest.mark.parametrize("angle", [0.1, 1.0, math.pi / 3])
def test_yaw_round_trip(angle):
    t = TransformComponent()
    t.add_pitch(0.4)
    before = tuple(t.forward())
    t.add_yaw(angle)
    t.add_yaw(-angle)
    assert tuple(t.forward()) == pytest.approx(before, abs=1e-9)


def test_directions_stay_orthonormal():
    t = TransformComponent()
    t.add_yaw(0.8)
    t.add_pitch(-0.5)
    f, r, u = t.forward(), t.right(), t.up()
    for v in (f, r, u):
        assert math.isclose(v.length(), 1.0, abs_tol=1e-9)
    assert math.isclose(f.dot(r), 0.0, abs_tol=1e-9)
    assert math.isclose(f.dot(u), 0.0, abs_tol=1e-9)
    assert math.isclose(r.dot(u), 0.0, abs_tol=1e-9)


def test_world_matrix_origin_maps_to_position():
    t = TransformComponent(Vector3(4.0, -2.0, 7.0))
    t.scale = Vector3(2.0, 3.0, 0.5)
    t.add_yaw(1.1)
    mapped = Vector3(0.0, 0.0, 0.0).transform(t.world_matrix())
    assert tuple(mapped) == pytest.approx((4.0, -2.0, 7.0), abs=1e-9)


def test_world_matrix_scales_then_translates():
    t = TransformComponent(Vector3(10.0, 0.0, 0.0))
    t.scale = Vector3(2.0, 2.0, 2.0)
    mapped = Vector3(1.0, 0.0, 0.0).transform(t.world_matrix())
    assert tuple(mapped) == pytest.approx((12.0, 0.0, 0.0), abs=1e-9)