"""
Statistical building blocks for rank-correlation null distributions.

1. **Common** (rhonull.stats.common):
   Ranking, rho scaling and seeded random streams shared by every generator.

2. **Null** (rhonull.stats.null):
   The generators themselves: permutation-based for freely exchangeable
   observations, and projection-based for residuals of a linear model.

Example:
--------
>>> from rhonull.stats.common.ranking import rho_multiplier
>>> rho_multiplier(2)
1.0

>>> from rhonull.stats.null.unconstrained import null_rho
>>> sorted(set(null_rho(2, 4, [1, 2, 3, 4]).tolist())) in ([-1.0], [1.0], [-1.0, 1.0])
True
"""
