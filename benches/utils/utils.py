# benches/utils/utils.py
from __future__ import annotations

from collections.abc import Iterator
from itertools import product
from typing import Any

import numpy as np


def _pctl(values: list[float], p: float) -> float:
    """p-th percentile (0..100, clamped) of `values`; 0.0 when there are none."""
    if not values:
        return 0.0
    return float(np.percentile(np.asarray(values, dtype=np.float64), min(max(p, 0.0), 100.0)))


def _as_list(v: Any) -> list[Any]:
    """
    Normalize a parsed flag value to a sweep axis.

    Braced lists already come back as lists; a plain `a,b` comes back from the
    parser as one string and is split here.
    """
    if isinstance(v, list | tuple):
        return list(v)
    if isinstance(v, str) and "," in v:
        return [s.strip() for s in v.split(",") if s.strip()]
    return [v]


def _cartesian(axes: dict[str, list[Any]]) -> Iterator[dict[str, Any]]:
    """One run config per combination of axis values, first axis varying slowest."""
    names, choices = zip(*axes.items()) if axes else ((), ())
    for point in product(*choices):
        yield {name: value for name, value in zip(names, point)}
