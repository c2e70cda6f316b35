"""Random source helpers shared by the generators."""

from __future__ import annotations

import random


def random_below(rng: random.Random, n: int) -> int:
    """
    Uniform integer in [0, n).

    An empty range yields 0 without consuming a draw; recursive division
    relies on this for one-cell wall segments.
    """
    if n <= 0:
        return 0
    return rng.randrange(n)


def resolve_rng(seed: int | None = None, rng: random.Random | None = None) -> random.Random:
    """
    Pick the random source for one maze request.

    Args:
        seed: Seed for a fresh generator; None seeds from OS entropy
        rng: Explicit random source, takes precedence over `seed`

    Returns:
        The random source to thread through generation
    """
    if rng is not None:
        return rng
    return random.Random(seed)
