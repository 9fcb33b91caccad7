"""Thread-safe random number source with a shared default instance."""

from __future__ import annotations

import random
import threading
from typing import ClassVar, Optional


class Random:
    """Random integers and floats in a range, guarded by a lock."""

    _shared: ClassVar[Optional["Random"]] = None
    _shared_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, seed: Optional[int] = None) -> None:
        self._engine = random.Random(seed)
        self._lock = threading.Lock()

    @classmethod
    def instance(cls) -> "Random":
        """The process-wide instance, seeded from system entropy on first use."""
        with cls._shared_lock:
            if cls._shared is None:
                cls._shared = cls()
            return cls._shared

    def get_int(self, low: int, high: int) -> int:
        """A uniformly distributed integer in ``[low, high]``."""
        if low > high:
            raise ValueError(f"empty range: {low} > {high}")
        with self._lock:
            return self._engine.randint(low, high)

    def get_float(self, low: float, high: float) -> float:
        """A uniformly distributed float in ``[low, high)``."""
        if low > high:
            raise ValueError(f"empty range: {low} > {high}")
        with self._lock:
            value = low + (high - low) * self._engine.random()
        if value >= high and high > low:
            return low
        return value