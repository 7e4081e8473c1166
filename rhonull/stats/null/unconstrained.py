"""
rhonull.stats.null.unconstrained
================================

Null distribution of Spearman's rho for freely exchangeable observations.

Under the null of no correlation every pairing of ranks is equally likely,
so rho between the identity ranking `0..n-1` and a uniformly random
permutation of it is an exact draw from the null. The permutation is
integer-valued, so no floating-point ranking (and no tie handling) is needed.

Examples
--------
>>> from rhonull.stats.null.unconstrained import null_rho
>>> rho = null_rho(ncells=50, iterations=4, seeds=[11, 12, 13, 14])
>>> rho.shape
(4,)
>>> bool(((rho >= -1.0) & (rho <= 1.0)).all())
True
>>> bool((null_rho(50, 4, [11, 12, 13, 14]) == rho).all())
True
"""

from __future__ import annotations
import logging
import operator
from dataclasses import dataclass, field
from typing import Optional, Sequence

import numpy as np

from rhonull.core.errors import InvalidIterationCount, InvalidObservationCount
from rhonull.runtime.runners import Runner, SequentialRunner
from rhonull.stats.common.ranking import rho_from_ranks, rho_multiplier
from rhonull.stats.common.rng import SeedLike, coerce_seeds, seeded_generator

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class PermutationKernel:
    """
    One iteration of the unconstrained generator: seed -> rho.

    Attributes:
        ncells: Number of exchangeable observations
        mult: Rho multiplier for `ncells`, computed once per call
    """

    ncells: int
    mult: float = field(init=False)
    identity: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "mult", rho_multiplier(self.ncells))
        object.__setattr__(self, "identity", np.arange(self.ncells, dtype=np.int64))

    def __call__(self, seed: SeedLike) -> float:
        generator = seeded_generator(seed)
        rankings = generator.permutation(self.ncells)
        return rho_from_ranks(rankings, self.identity, self.mult)


def null_rho(
    ncells: int,
    iterations: int,
    seeds: Sequence[SeedLike],
    runner: Optional[Runner] = None,
) -> np.ndarray:
    """
    Simulate the null distribution of rho by random permutation.

    Args:
        ncells: Number of observations; must exceed 1
        iterations: Number of Monte Carlo draws; zero is allowed
        seeds: One integer seed per iteration
        runner: Execution strategy (default: sequential)

    Returns:
        Float array of length `iterations`, ordered like `seeds`

    Raises:
        InvalidObservationCount: if `ncells <= 1`
        InvalidIterationCount: if `iterations < 0`
        SeedCountMismatch: if `len(seeds) != iterations`
    """
    ncells = operator.index(ncells)
    if ncells <= 1:
        raise InvalidObservationCount(
            f"number of cells should be greater than 1, got {ncells}"
        )

    iterations = operator.index(iterations)
    if iterations < 0:
        raise InvalidIterationCount(
            f"number of iterations should be non-negative, got {iterations}"
        )

    checked = coerce_seeds(seeds, iterations)

    if runner is None:
        runner = SequentialRunner()

    logger.debug("Permutation null: ncells=%d, iterations=%d", ncells, iterations)
    return runner.run(PermutationKernel(ncells), checked)
