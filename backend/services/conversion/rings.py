from __future__ import annotations
import math
from typing import List, Sequence


def _has_nan(pair: Sequence[float]) -> bool:
    return any(isinstance(v, float) and math.isnan(v) for v in pair[:2])


def is_closed(coords: Sequence[Sequence[float]]) -> bool:
    return bool(coords) and list(coords[0][:2]) == list(coords[-1][:2])


def close_ring(coords: Sequence[Sequence[float]]) -> List[List[float]]:
    """
    Return a copy of ``coords`` whose last pair equals its first.
    Rings with a NaN endpoint are returned as they are.
    """
    ring = [list(p) for p in coords]
    if not ring or _has_nan(ring[0]) or _has_nan(ring[-1]):
        return ring
    if not is_closed(ring):
        ring.append(list(ring[0]))
    return ring
