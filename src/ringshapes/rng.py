"""
rng.py
------

Seedable, lock-guarded random source for randomized ring construction.

Every randomized shape samples its spans or spokes exactly once, at
construction time, from an `RNG` passed in by the caller. Passing a seeded
instance makes the resulting geometry reproducible; omitting it falls back to
a process-global (or thread-local) instance.

Supports both `random.Random` and `numpy.random.Generator` backends with an
identical scalar API.
"""

from __future__ import annotations

__all__ = ["RNGBackend", "RNG", "get_rng", "set_global_seed",]

import os
import time
import random
import threading
from numbers import Real
from typing import Any, Optional, TypeAlias, Union

import numpy as np


RNGBackend: TypeAlias = Union[random.Random, np.random.Generator, "RNG"]


def _entropy_seed() -> int:
    return os.getpid() ^ (time.time_ns() & 0xFFFFFFFF) ^ random.getrandbits(32)


# ---------------------------------------------------------------------
# RNG class
# ---------------------------------------------------------------------
class RNG:
    """Encapsulated, thread-safe hybrid random generator.

    Attributes:
        _rng:  Backend RNG (random.Random or numpy.random.Generator).
        _lock: threading.Lock for safe concurrent access.

    Notes:
        - Uses the Python stdlib backend by default.
        - `seed=None` seeds from PID/time entropy; any integer (including 0)
          gives a reproducible stream.
    """

    def __init__(self, seed: Optional[int] = None, use_numpy: bool = False):
        self._lock = threading.Lock()
        self._use_numpy = use_numpy
        self._rng: RNGBackend = self._make_backend(seed)

    def _make_backend(self, seed: Optional[int]) -> RNGBackend:
        seed_val = _entropy_seed() if seed is None else seed
        if self._use_numpy:
            return np.random.default_rng(seed_val)
        return random.Random(seed_val)

    # -----------------------------------------------------------------
    # Core seeding
    # -----------------------------------------------------------------
    def seed(self, seed: Optional[int] = None) -> None:
        """Reinitialize the RNG in place (preserves object identity)."""
        with self._lock:
            self._rng = self._make_backend(seed)

    # -----------------------------------------------------------------
    # Scalar random methods
    # -----------------------------------------------------------------
    def random(self) -> float:
        with self._lock:
            return float(self._rng.random())

    def randint(self, a: int, b: int) -> int:
        """Random integer in the inclusive range [a, b]."""
        with self._lock:
            if self._use_numpy:
                return int(self._rng.integers(a, b + 1))
            return self._rng.randint(a, b)

    def randrange(self, a: int, b: Optional[int] = None) -> int:
        with self._lock:
            if b is None: a, b = 0, a
            if self._use_numpy:
                return int(self._rng.integers(a, b))
            return self._rng.randrange(a, b)

    def uniform(self, a: float = 0.0, b: float = 1.0) -> float:
        with self._lock:
            out = self._rng.uniform(a, b)
            return float(out) if isinstance(out, Real) else out

    def choice(self, seq: list[Any]) -> Any:
        with self._lock:
            if self._use_numpy:
                return seq[int(self._rng.integers(0, len(seq)))]
            return self._rng.choice(seq)

    def normal(self, mu: float = 0.0, sigma: float = 1.0) -> float:
        with self._lock:
            if self._use_numpy:
                return float(self._rng.normal(mu, sigma))
            return self._rng.normalvariate(mu, sigma)

    def shuffle(self, seq: list[Any]) -> list[Any]:
        with self._lock:
            if self._use_numpy:
                return list(self._rng.permutation(seq))
            self._rng.shuffle(seq)
            return seq

    # -----------------------------------------------------------------
    # Utility & Introspection
    # -----------------------------------------------------------------
    def getstate(self):
        with self._lock:
            if self._use_numpy:
                return self._rng.bit_generator.state
            return self._rng.getstate()

    def setstate(self, state) -> None:
        with self._lock:
            if self._use_numpy:
                self._rng.bit_generator.state = state
            else:
                self._rng.setstate(state)

    def __repr__(self) -> str:
        backend = "numpy" if self._use_numpy else "stdlib"
        return f"<RNG backend={backend} pid={os.getpid()} id={id(self)}>"


# =============================================================================
# GLOBAL & THREAD-LOCAL ACCESSORS
# =============================================================================
_global_rng = RNG()
_thread_local = threading.local()


def get_rng(thread_safe: bool = False, use_numpy: bool = False) -> RNG:
    """Return an RNG instance (shared or per-thread)."""
    if thread_safe:
        if not hasattr(_thread_local, "rng"):
            _thread_local.rng = RNG(use_numpy=use_numpy)
        return _thread_local.rng
    return _global_rng


def set_global_seed(seed: int) -> None:
    """Re-seed the process-global RNG and the calling thread's RNG.

    Shapes sample from ``get_rng(thread_safe=True)`` when no RNG is passed,
    so both accessors must restart for ``.random()`` calls to repeat.
    RNGs already created by other threads keep their state.
    """
    _global_rng.seed(seed)
    get_rng(thread_safe=True).seed(seed)
