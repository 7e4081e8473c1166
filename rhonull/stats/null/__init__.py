"""
rhonull.stats.null
==================

Null distribution generators for Spearman's rho.

- `unconstrained`: random permutations for `n` freely exchangeable units.
- `residual`: simulated residuals confined to the orthogonal complement of a
  design matrix, for observations whose mean structure is explained by a
  linear model.

Both return one rho sample per seed, in seed order.
"""

from rhonull.stats.null.residual import ResidualKernel, null_rho_design
from rhonull.stats.null.unconstrained import PermutationKernel, null_rho

__all__ = ["PermutationKernel", "ResidualKernel", "null_rho", "null_rho_design"]
