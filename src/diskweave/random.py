# src/diskweave/random.py
from __future__ import annotations

from typing import Optional, Union

import numpy as np

RngLike = Union[np.random.Generator, int, None]


def resolve_rng(rng: RngLike = None) -> np.random.Generator:
    """Return a ``Generator`` for ``rng``.

    A ``Generator`` is used as is, an ``int`` seeds a new one and ``None``
    creates a fresh unseeded generator for this call only.  No module level
    generator is kept.
    """
    if isinstance(rng, np.random.Generator):
        return rng
    if rng is None:
        return np.random.default_rng()
    if isinstance(rng, bool) or not isinstance(rng, (int, np.integer)):
        raise TypeError(f"rng must be a numpy Generator, an int seed or None, got {type(rng).__name__}")
    return np.random.default_rng(int(rng))


def spawn_rngs(seed: Optional[int], n: int) -> list[np.random.Generator]:
    """Independent generators for ``n`` concurrent sampling calls."""
    if n < 0:
        raise ValueError("n must be >= 0")
    return [np.random.default_rng(s) for s in np.random.SeedSequence(seed).spawn(n)]


__all__ = ["RngLike", "resolve_rng", "spawn_rngs"]
