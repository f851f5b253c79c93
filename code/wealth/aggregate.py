from typing import Iterable, List, Sequence

import numpy as np

from .errors import EmptyInputError
from .schemas import ProjectionPoint


def median(values: Iterable[float]) -> float:
    ordered = sorted(float(v) for v in values)
    n = len(ordered)
    if n == 0:
        raise EmptyInputError("median of an empty collection is undefined")
    mid = n // 2
    if n % 2 != 0:
        return ordered[mid]
    return (ordered[mid - 1] + ordered[mid]) / 2


def probability_of_ruin(terminal_values: Iterable[float]) -> float:
    """Share of trials whose terminal value is at or below zero."""
    values = list(terminal_values)
    if not values:
        raise EmptyInputError("probability of ruin needs at least one trial")
    ruined = sum(1 for v in values if v <= 0)
    return ruined / len(values)


def per_year_medians(
    years: Sequence[int],
    status_quo: np.ndarray,
    optimized: np.ndarray,
) -> List[ProjectionPoint]:
    status_quo = np.asarray(status_quo, dtype=float)
    optimized = np.asarray(optimized, dtype=float)
    if status_quo.shape != optimized.shape:
        raise ValueError(f"policy shapes differ: {status_quo.shape} vs {optimized.shape}")
    if status_quo.ndim != 2 or status_quo.shape[1] != len(years):
        raise ValueError(f"expected (trials, {len(years)}) values, got {status_quo.shape}")

    points: List[ProjectionPoint] = []
    for t, year in enumerate(years):
        points.append(
            ProjectionPoint(
                year=year,
                status_quo_median=median(status_quo[:, t]),
                optimized_median=median(optimized[:, t]),
            )
        )
    return points
