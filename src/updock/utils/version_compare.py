"""Ordering and breaking/compatible classification of pattern versions."""

from __future__ import annotations

import enum
from typing import Sequence


class UpdateType(enum.Enum):
    BREAKING = "breaking"
    COMPATIBLE = "compatible"


def ordering_of(a: Sequence[int], b: Sequence[int]) -> int:
    """Compare two versions component by component, leftmost first.

    Returns -1, 0 or 1. Both versions must come from the same pattern.
    """
    if len(a) != len(b):
        raise ValueError(f"Versions {a!r} and {b!r} come from different patterns")
    for x, y in zip(a, b):
        if x != y:
            return -1 if x < y else 1
    return 0


def is_newer(candidate: Sequence[int], current: Sequence[int]) -> bool:
    """Return True if candidate is strictly newer than current."""
    return ordering_of(candidate, current) > 0


def update_type(
    candidate: Sequence[int],
    current: Sequence[int],
    breaking_degree: int | None,
) -> UpdateType:
    """Classify an update from ``current`` to the strictly newer ``candidate``.

    A difference at or before the breaking degree is breaking; without a
    breaking degree every update is compatible.
    """
    if not is_newer(candidate, current):
        raise ValueError(f"{candidate!r} is not newer than {current!r}")
    first_diff = next(i for i, (x, y) in enumerate(zip(candidate, current)) if x != y)
    if breaking_degree is not None and first_diff <= breaking_degree:
        return UpdateType.BREAKING
    return UpdateType.COMPATIBLE
