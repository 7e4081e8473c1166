"""
rhonull.reporting.summary
=========================

Tabular views of simulated null distributions, built with polars.

- `summarize_null()`: one-row moments and tail quantiles of the samples
- `null_table()`: per-iteration samples alongside the seeds that produced them
- `empirical_p_values()`: upper-tail Monte Carlo p-values for observed rho

Examples
--------
>>> import numpy as np
>>> from rhonull.reporting.summary import summarize_null, empirical_p_values
>>> samples = np.array([-0.5, 0.0, 0.5, 1.0])
>>> summary = summarize_null(samples, nobs=5)
>>> summary["iterations"][0], summary["mean"][0], summary["expected_variance"][0]
(4, 0.25, 0.25)
>>> empirical_p_values([0.75, -1.0], samples).tolist()
[0.4, 1.0]
"""

from __future__ import annotations
from typing import Optional, Sequence

import numpy as np
import polars as pl
from numpy.typing import ArrayLike


def summarize_null(samples: ArrayLike, nobs: Optional[int] = None) -> pl.DataFrame:
    """
    Summarize a null distribution in a single-row DataFrame.

    Args:
        samples: Simulated rho values
        nobs: Number of observations; when given, adds the asymptotic null
            variance `1 / (nobs - 1)` for comparison

    Returns:
        DataFrame with columns `iterations, mean, variance, min, max, q025,
        q975` (plus `expected_variance` when `nobs` is given). Statistics of
        an empty sample are null.
    """
    df = pl.DataFrame({"rho": np.asarray(samples, dtype=np.float64)})
    rho = pl.col("rho")
    summary = df.select(
        rho.count().alias("iterations"),
        rho.mean().alias("mean"),
        rho.var(ddof=1).alias("variance"),
        rho.min().alias("min"),
        rho.max().alias("max"),
        rho.quantile(0.025, interpolation="linear").alias("q025"),
        rho.quantile(0.975, interpolation="linear").alias("q975"),
    )

    if nobs is not None:
        if nobs <= 1:
            raise ValueError(f"nobs must be greater than 1, got {nobs}")
        summary = summary.with_columns(
            pl.lit(1.0 / (nobs - 1)).alias("expected_variance")
        )

    return summary


def null_table(samples: ArrayLike, seeds: Sequence[int]) -> pl.DataFrame:
    """Per-iteration table with columns `iteration, seed, rho`."""
    rho = np.asarray(samples, dtype=np.float64)
    if len(seeds) != rho.shape[0]:
        raise ValueError(
            f"samples and seeds must have same length ({rho.shape[0]} != {len(seeds)})"
        )
    return pl.DataFrame(
        {
            "iteration": np.arange(rho.shape[0], dtype=np.int64),
            "seed": np.asarray(seeds, dtype=np.int64),
            "rho": rho,
        }
    )


def empirical_p_values(observed: ArrayLike, samples: ArrayLike) -> np.ndarray:
    """
    One-sided Monte Carlo p-values for stronger-than-null positive correlation.

    Each p-value is `(1 + #{null >= observed}) / (1 + m)`, which never
    returns zero for a finite number `m` of null samples.

    Raises:
        ValueError: if `samples` is empty.
    """
    null = np.sort(np.asarray(samples, dtype=np.float64))
    if null.shape[0] == 0:
        raise ValueError("at least one null sample is required")

    obs = np.asarray(observed, dtype=np.float64)
    exceed = null.shape[0] - np.searchsorted(null, obs, side="left")
    return (1.0 + exceed) / (1.0 + null.shape[0])
