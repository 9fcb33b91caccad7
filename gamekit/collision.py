"""Collision shape kinds, component identifiers and collision-pair keys."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable

from gamekit.math3d import Vector3


class CollisionShapeType(enum.IntEnum):
    """Kinds of collision shape; the order defines pair normalisation."""

    SPHERE = 0
    BOX = 1
    CAPSULE = 2
    RAY = 3
    MESH = 4
    UNKNOWN = 5


class ComponentID(enum.Enum):
    """Identifiers of every component kind."""

    TRANSFORM = enum.auto()
    SPRITE_RENDERER = enum.auto()
    MODEL_RENDERER = enum.auto()
    PLAYER_CONTROLLER = enum.auto()
    AI_CONTROLLER = enum.auto()
    RIGIDBODY = enum.auto()
    COLLIDER = enum.auto()
    CAMERA = enum.auto()
    CAMERA_CONTROLLER = enum.auto()
    ANIMATOR = enum.auto()
    MOVE = enum.auto()
    LIFE = enum.auto()
    HOMING = enum.auto()
    HEALTH = enum.auto()
    SHOOTING = enum.auto()
    SPHERE = enum.auto()
    CAPSULE = enum.auto()
    THIRD_PERSON_CAMERA = enum.auto()


@dataclass(frozen=True)
class CollisionInfo:
    """Result of a collision test: push-out direction and penetration depth."""

    normal: Vector3
    depth: float


@dataclass(frozen=True, order=True)
class CollisionPair:
    """Unordered pair of shape types; ``first`` always holds the smaller one."""

    first: CollisionShapeType
    second: CollisionShapeType

    def __post_init__(self) -> None:
        a = CollisionShapeType(self.first)
        b = CollisionShapeType(self.second)
        if b < a:
            a, b = b, a
        object.__setattr__(self, "first", a)
        object.__setattr__(self, "second", b)


CollisionFunc = Callable[[object, object], "CollisionInfo | None"]