"""
rhonull.stats.null.residual
===========================

Null distribution of Spearman's rho between residuals of a linear model.

Once a design matrix `X` (`n x p`) has absorbed part of the variation, the
residuals are no longer freely exchangeable: they live in the
`(n - p)`-dimensional orthogonal complement of the column space of `X`.
The null is therefore simulated directly in that space. For each iteration
two residual vectors are built by drawing standard normal coefficients for
the last `n - p` columns of Q (the first `p` coefficients are zero, since
those directions are explained by the design) and mapping them to
observation space with the projection operator. Rho between the two rank
vectors is one null sample.

Both vectors of an iteration come from one generator, advanced without
re-seeding; this ordering is part of the reproducibility contract.

Examples
--------
>>> import numpy as np
>>> from rhonull.core.projection import QRProjection
>>> from rhonull.stats.null.residual import null_rho_design
>>> X = np.column_stack([np.ones(20), np.linspace(0.0, 1.0, 20)])
>>> proj = QRProjection.from_design(X)
>>> rho = null_rho_design(proj, iterations=3, seeds=[1, 2, 3])
>>> rho.shape
(3,)
>>> bool((null_rho_design(proj, 3, [1, 2, 3]) == rho).all())
True
"""

from __future__ import annotations
import logging
import operator
from dataclasses import dataclass, field
from typing import Optional, Sequence

import numpy as np

from rhonull.core.errors import InvalidIterationCount
from rhonull.core.projection import ProjectionOperator
from rhonull.runtime.runners import Runner, SequentialRunner
from rhonull.stats.common.ranking import rank_vector, rho_from_ranks, rho_multiplier
from rhonull.stats.common.rng import SeedLike, coerce_seeds, seeded_generator

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class ResidualKernel:
    """
    One iteration of the residual generator: seed -> rho.

    The projection operator is shared read-only; every call allocates its
    own coefficient buffer and generator.
    """

    projection: ProjectionOperator
    mult: float = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "mult", rho_multiplier(self.projection.nobs))

    def simulate_residuals(self, generator: np.random.Generator) -> np.ndarray:
        """Draw one residual vector in the complement of the design."""
        nobs = self.projection.nobs
        ncoefs = self.projection.ncoefs

        coefs = np.zeros(nobs, dtype=np.float64)
        coefs[ncoefs:] = generator.standard_normal(nobs - ncoefs)
        return self.projection.apply(coefs)

    def __call__(self, seed: SeedLike) -> float:
        generator = seeded_generator(seed)
        first = rank_vector(self.simulate_residuals(generator))
        second = rank_vector(self.simulate_residuals(generator))
        return rho_from_ranks(first, second, self.mult)


def null_rho_design(
    projection: ProjectionOperator,
    iterations: int,
    seeds: Sequence[SeedLike],
    runner: Optional[Runner] = None,
) -> np.ndarray:
    """
    Simulate the null distribution of rho between residuals of a design.

    Args:
        projection: Q-multiplication capability bound to the design matrix
        iterations: Number of Monte Carlo draws; must be positive
        seeds: One integer seed per iteration
        runner: Execution strategy (default: sequential)

    Returns:
        Float array of length `iterations`, ordered like `seeds`

    Raises:
        InvalidIterationCount: if `iterations <= 0`
        SeedCountMismatch: if `len(seeds) != iterations`

    Note:
        Unlike `null_rho`, zero iterations are rejected here.
    """
    iterations = operator.index(iterations)
    if iterations <= 0:
        raise InvalidIterationCount(
            f"number of iterations should be positive, got {iterations}"
        )

    checked = coerce_seeds(seeds, iterations)

    if runner is None:
        runner = SequentialRunner()

    logger.debug(
        "Residual null: nobs=%d, ncoefs=%d, iterations=%d",
        projection.nobs,
        projection.ncoefs,
        iterations,
    )
    return runner.run(ResidualKernel(projection), checked)
