"""
rhonull.api - User-Friendly Facade
==================================

Off-the-shelf entry points organised by the question being asked, rather
than by the simulation machinery behind them.

Examples
--------
>>> # Exchangeable observations
>>> from rhonull.api.null_distribution import correlation_null
>>> rho = correlation_null(40, iterations=100, seed=7)
>>>
>>> # Residuals of a linear model
>>> import numpy as np
>>> from rhonull.api.null_distribution import residual_correlation_null
>>> design = np.ones((40, 1))
>>> rho = residual_correlation_null(design, iterations=100, seed=7)

Unified Interface
-----------------
- `NullConfig`: iteration count, seeding and parallelism
- `correlation_null()`: permutation null for exchangeable observations
- `residual_correlation_null()`: null for residuals of a design matrix
- `batch_correlation_null()`: permutation nulls for several sizes at once

Architecture
------------
The facade delegates to:
- rhonull.core: failure kinds and the projection capability
- rhonull.stats: ranking, seeding and the generators
- rhonull.runtime: execution strategies
"""

from rhonull.api.null_distribution import (
    NullConfig,
    batch_correlation_null,
    correlation_null,
    residual_correlation_null,
)

__all__ = [
    "NullConfig",
    "batch_correlation_null",
    "correlation_null",
    "residual_correlation_null",
]
