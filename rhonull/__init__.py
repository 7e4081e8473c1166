"""
rhonull: Monte Carlo null distributions for Spearman's rank correlation.

Testing whether two measured sequences are more strongly rank-correlated than
expected by chance needs a reference distribution of rho under "no true
correlation". rhonull simulates that distribution in two settings:

- independent, freely exchangeable observations, where the null is obtained
  by drawing random permutations of the ranks;
- observations whose mean structure has been explained by a linear model,
  where only the residuals are exchangeable and the null is obtained by
  simulating residuals in the orthogonal complement of the design matrix.

Every draw is driven by its own integer seed, so a distribution is a pure
function of its seed sequence and can be recomputed bit-for-bit, sequentially
or on a thread pool.

Example
-------
>>> import rhonull
>>> assert hasattr(rhonull, "core")
>>> assert hasattr(rhonull, "stats")
>>> rho = rhonull.null_rho(10, 3, [1, 2, 3])
>>> rho.shape
(3,)
"""

from rhonull import api, core, reporting, runtime, stats
from rhonull.core.errors import (
    InvalidIterationCount,
    InvalidObservationCount,
    NullDistributionError,
    SeedCountMismatch,
)
from rhonull.core.projection import ProjectionOperator, QRProjection
from rhonull.stats.null.residual import null_rho_design
from rhonull.stats.null.unconstrained import null_rho

__all__ = [
    "api",
    "core",
    "reporting",
    "runtime",
    "stats",
    "InvalidIterationCount",
    "InvalidObservationCount",
    "NullDistributionError",
    "SeedCountMismatch",
    "ProjectionOperator",
    "QRProjection",
    "null_rho",
    "null_rho_design",
]
