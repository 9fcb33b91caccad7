"""Caching loaders for models, images, sounds and animation indices."""

from __future__ import annotations

import enum
import logging
import threading
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Tuple

log = logging.getLogger(__name__)

INVALID_HANDLE = -1

Loader = Callable[[str], int]
Unloader = Callable[[int], None]


class ResourceKind(enum.Enum):
    """Kinds of resource a manager can hold."""

    MODEL = "model"
    IMAGE = "image"
    SOUND = "sound"


@dataclass(frozen=True)
class ResourceTraits:
    """How to load and release one kind of resource."""

    load: Loader
    unload: Unloader

    def release(self, handle: int) -> None:
        """Unload ``handle`` unless it is the invalid handle."""
        if handle != INVALID_HANDLE:
            self.unload(handle)


class ResourceCache:
    """Path-keyed cache of handles for one kind of resource."""

    def __init__(self, traits: ResourceTraits) -> None:
        self._traits = traits
        self._data: Dict[str, int] = {}

    def get(self, path: str) -> int:
        """The cached handle for ``path``, loading it on first use."""
        cached = self._data.get(path)
        if cached is not None:
            return cached
        handle = self._traits.load(path)
        if handle != INVALID_HANDLE:
            self._data[path] = handle
        else:
            log.warning("resource load failed: %s", path)
        return handle

    def clear(self) -> None:
        """Release every cached handle."""
        for handle in self._data.values():
            self._traits.release(handle)
        self._data.clear()

    def __contains__(self, path: object) -> bool:
        return path in self._data

    def __len__(self) -> int:
        return len(self._data)


class ResourceManager:
    """One cache per resource kind, guarded by a single lock."""

    def __init__(self, traits: Mapping[ResourceKind, ResourceTraits]) -> None:
        self._caches: Dict[ResourceKind, ResourceCache] = {
            kind: ResourceCache(t) for kind, t in traits.items()
        }
        self._lock = threading.Lock()

    def get(self, kind: ResourceKind, path: str) -> int:
        """The handle of ``path`` in the cache for ``kind``."""
        with self._lock:
            try:
                cache = self._caches[kind]
            except KeyError:
                raise LookupError(f"no cache for resource kind {kind!r}") from None
            return cache.get(path)

    def clear_all(self) -> None:
        """Release every resource of every kind."""
        with self._lock:
            for cache in self._caches.values():
                cache.clear()


class SoundFactory:
    """Caches sound handles by path."""

    def __init__(self, load: Loader, unload: Unloader) -> None:
        self._load = load
        self._unload = unload
        self._cache: Dict[str, int] = {}

    def load(self, path: str) -> int:
        """The handle for ``path``, reusing a cached one."""
        cached = self._cache.get(path)
        if cached is not None:
            return cached
        handle = self._load(path)
        if handle != INVALID_HANDLE:
            self._cache[path] = handle
        return handle

    def clear(self) -> None:
        """Release every cached sound."""
        for handle in self._cache.values():
            self._unload(handle)
        self._cache.clear()


class AnimationFactory:
    """Caches animation indices by model handle and animation name."""

    def __init__(self, resolve: Callable[[int, str], int]) -> None:
        self._resolve = resolve
        self._cache: Dict[Tuple[int, str], int] = {}

    def get_index(self, model_handle: int, anim_name: str) -> int:
        """The index of ``anim_name`` in the model, resolved once."""
        key = (model_handle, anim_name)
        if key not in self._cache:
            self._cache[key] = self._resolve(model_handle, anim_name)
        return self._cache[key]

    def clear(self) -> None:
        """Forget every cached index."""
        self._cache.clear()