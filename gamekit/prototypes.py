"""Registry of entity prototypes that are cloned on demand."""

from __future__ import annotations

import abc
from typing import Any, ClassVar, Dict, List, Optional

from gamekit.math3d import Vector3


class EntityPrototype(abc.ABC):
    """Something that can produce fresh entities."""

    @abc.abstractmethod
    def clone(self) -> Any:
        """A new entity."""

    @abc.abstractmethod
    def clone_with_transform(self, position: Vector3) -> Any:
        """A new entity placed at ``position``."""


class UnknownPrototypeError(LookupError):
    """Raised when no prototype is registered under an id."""

    def __init__(self, prototype_id: str) -> None:
        super().__init__(f"unknown prototype ID: {prototype_id}")
        self.prototype_id = prototype_id


class PrototypeManager:
    """Maps ids to prototypes and creates entities from them."""

    _shared: ClassVar[Optional["PrototypeManager"]] = None

    def __init__(self) -> None:
        self._prototypes: Dict[str, EntityPrototype] = {}

    @classmethod
    def instance(cls) -> "PrototypeManager":
        """The process-wide manager."""
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared

    def register(self, prototype_id: str, prototype: Optional[EntityPrototype]) -> None:
        """Register or replace a prototype; ``None`` is ignored."""
        if prototype is not None:
            self._prototypes[prototype_id] = prototype

    def _lookup(self, prototype_id: str) -> EntityPrototype:
        try:
            return self._prototypes[prototype_id]
        except KeyError:
            raise UnknownPrototypeError(prototype_id) from None

    def create(self, prototype_id: str) -> Any:
        """Clone the prototype registered under ``prototype_id``."""
        return self._lookup(prototype_id).clone()

    def create_at(self, prototype_id: str, position: Vector3) -> Any:
        """Clone the prototype and place it at ``position``."""
        return self._lookup(prototype_id).clone_with_transform(position)

    def has(self, prototype_id: str) -> bool:
        """Whether a prototype is registered under ``prototype_id``."""
        return prototype_id in self._prototypes

    def all_ids(self) -> List[str]:
        """Every registered id."""
        return list(self._prototypes)

    def clear(self) -> None:
        """Remove all prototypes."""
        self._prototypes.clear()

    def __contains__(self, prototype_id: object) -> bool:
        return prototype_id in self._prototypes

    def __len__(self) -> int:
        return len(self._prototypes)