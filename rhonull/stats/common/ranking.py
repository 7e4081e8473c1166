"""
rhonull.stats.common.ranking
============================

Rank computation and Spearman's rho from matched ranks.

With no ties, Spearman's rho between two rank vectors of length `n` has the
closed form

    rho = 1 - 6 * sum((r1 - r2)^2) / (n * (n^2 - 1))

so every generator only needs the squared rank differences and a multiplier
that depends on `n` alone.

Examples
--------
>>> import numpy as np
>>> rank_vector([0.3, -1.2, 2.5]).tolist()
[1, 0, 2]
>>> mult = rho_multiplier(3)
>>> rho_from_ranks(np.array([0, 1, 2]), np.array([2, 1, 0]), mult)
-1.0
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike


def rank_vector(values: ArrayLike) -> np.ndarray:
    """
    Return the 0-based position of each value in ascending sort order.

    Ties are broken by first occurrence (stable sort), so equal values keep
    their original relative order. Under continuous draws ties have
    probability zero; the rule only makes the degenerate case reproducible.

    Examples:
        >>> rank_vector([1.0, 1.0, 0.0]).tolist()
        [1, 2, 0]
    """
    arr = np.asarray(values)
    order = np.argsort(arr, kind="stable")
    ranks = np.empty(arr.shape[0], dtype=np.int64)
    ranks[order] = np.arange(arr.shape[0], dtype=np.int64)
    return ranks


def rho_multiplier(n: int) -> float:
    """
    Scaling constant `6 / (n * (n^2 - 1))` for `n` observations.

    A single observation gives an infinite multiplier, and every rho built
    from it is NaN.

    Examples:
        >>> rho_multiplier(1)
        inf
    """
    n = np.float64(n)
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(6.0) / (n * (n * n - 1.0)))


def squared_rank_distance(rank1: np.ndarray, rank2: np.ndarray) -> float:
    """Sum of squared differences between matched ranks."""
    diff = np.subtract(rank1, rank2, dtype=np.float64)
    return float(np.dot(diff, diff))


def rho_from_ranks(rank1: np.ndarray, rank2: np.ndarray, mult: float) -> float:
    """
    Spearman's rho from two rank vectors and a precomputed multiplier.

    The result is not clamped; for tiny `n` floating-point accumulation can
    put it marginally outside [-1, 1].
    """
    return 1.0 - squared_rank_distance(rank1, rank2) * mult
