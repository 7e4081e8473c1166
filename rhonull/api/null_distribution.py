"""
rhonull.api.null_distribution
=============================

Facade for simulating rank-correlation null distributions.

Callers describe *how much* to simulate and *how* to seed it with a
`NullConfig`, then pick the entry point matching their data:

- `correlation_null()`: observations are freely exchangeable
- `residual_correlation_null()`: observations were fitted with a linear model
  and only residuals are exchangeable

Examples
--------
>>> import numpy as np
>>> from rhonull.api.null_distribution import NullConfig, correlation_null
>>> config = NullConfig(iterations=200, seed=2024)
>>> rho = correlation_null(25, config)
>>> rho.shape
(200,)
>>>
>>> # Same config, same distribution
>>> bool((correlation_null(25, config) == rho).all())
True
>>>
>>> # Blocking factor with two levels
>>> from rhonull.api.null_distribution import residual_correlation_null
>>> design = np.column_stack([np.ones(10), np.repeat([0.0, 1.0], 5)])
>>> residual_correlation_null(design, iterations=5, seed=1).shape
(5,)
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from typing import Any, List, Optional, Sequence, Union

import numpy as np
from numpy.typing import ArrayLike

from rhonull.core.errors import InvalidIterationCount
from rhonull.core.projection import ProjectionOperator, QRProjection
from rhonull.runtime.runners import Runner, SequentialRunner, ThreadedRunner
from rhonull.stats.common.rng import draw_seeds
from rhonull.stats.null.residual import null_rho_design
from rhonull.stats.null.unconstrained import null_rho

logger = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 1000


@dataclass
class NullConfig:
    """
    Configuration for one null distribution request.

    Parameters
    ----------
    iterations : int, optional
        Number of Monte Carlo draws; defaults to `len(seeds)` when explicit
        seeds are given, and to 1000 otherwise
    seed : int, optional
        Master seed from which one seed per iteration is drawn
    seeds : sequence of int, optional
        Explicit per-iteration seeds; mutually exclusive with `seed`
    max_workers : int, optional
        Thread pool size; `None` or 1 runs iterations sequentially

    Examples
    --------
    >>> NullConfig(seeds=[1, 2, 3]).n_iterations
    3
    >>> NullConfig(seed=5).n_iterations
    1000
    >>> NullConfig(iterations=2, seed=1, seeds=[1, 2]).validate()
    Traceback (most recent call last):
    ...
    ValueError: seed and seeds are mutually exclusive
    """

    iterations: Optional[int] = None
    seed: Optional[int] = None
    seeds: Optional[Sequence[int]] = None
    max_workers: Optional[int] = None

    def validate(self) -> None:
        """Validate configuration."""
        if self.n_iterations < 0:
            raise InvalidIterationCount(
                f"number of iterations should be non-negative, got {self.n_iterations}"
            )
        if self.seed is not None and self.seeds is not None:
            raise ValueError("seed and seeds are mutually exclusive")
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be positive, got {self.max_workers}")

    @property
    def n_iterations(self) -> int:
        """Requested iterations, falling back to the number of explicit seeds."""
        if self.iterations is not None:
            return self.iterations
        if self.seeds is not None:
            return len(self.seeds)
        return DEFAULT_ITERATIONS

    def resolve_seeds(self) -> Union[Sequence[int], np.ndarray]:
        """Return the explicit seeds, or draw them from the master seed."""
        if self.seeds is not None:
            return self.seeds
        return draw_seeds(self.n_iterations, self.seed)

    def make_runner(self) -> Runner:
        """Sequential runner for one worker, threaded runner otherwise."""
        if self.max_workers is None or self.max_workers == 1:
            return SequentialRunner()
        return ThreadedRunner(max_workers=self.max_workers)


def _resolve_config(config: Optional[NullConfig], overrides: Any) -> NullConfig:
    resolved = replace(config or NullConfig(), **overrides)
    resolved.validate()
    return resolved


def correlation_null(
    ncells: int,
    config: Optional[NullConfig] = None,
    **overrides: Any,
) -> np.ndarray:
    """
    Null distribution of rho for `ncells` freely exchangeable observations.

    Parameters
    ----------
    ncells : int
        Number of observations (> 1)
    config : NullConfig, optional
        Simulation settings; defaults to `NullConfig()`
    **overrides
        Field overrides applied on top of `config`

    Returns
    -------
    numpy.ndarray
        `config.n_iterations` rho samples
    """
    cfg = _resolve_config(config, overrides)
    seeds = cfg.resolve_seeds()
    logger.debug("correlation_null: ncells=%s, iterations=%d", ncells, cfg.n_iterations)
    return null_rho(ncells, cfg.n_iterations, seeds, runner=cfg.make_runner())


def residual_correlation_null(
    design: Union[ArrayLike, ProjectionOperator],
    config: Optional[NullConfig] = None,
    **overrides: Any,
) -> np.ndarray:
    """
    Null distribution of rho between residuals of a linear model.

    Parameters
    ----------
    design : array-like or ProjectionOperator
        Design matrix (`n x p`, full column rank), factorized here without
        pivoting, or a ready projection operator for an existing factorization
    config : NullConfig, optional
        Simulation settings; defaults to `NullConfig()`
    **overrides
        Field overrides applied on top of `config`

    Returns
    -------
    numpy.ndarray
        `config.n_iterations` rho samples
    """
    cfg = _resolve_config(config, overrides)
    if isinstance(design, ProjectionOperator):
        projection = design
    else:
        projection = QRProjection.from_design(design)

    seeds = cfg.resolve_seeds()
    return null_rho_design(projection, cfg.n_iterations, seeds, runner=cfg.make_runner())


def batch_correlation_null(
    ncells_list: Sequence[int],
    config: Optional[NullConfig] = None,
    **overrides: Any,
) -> List[np.ndarray]:
    """
    Null distributions for several observation counts sharing one config.

    Every distribution reuses the same seeds, so they differ only through
    the number of observations.
    """
    cfg = _resolve_config(config, overrides)
    seeds = cfg.resolve_seeds()
    runner = cfg.make_runner()
    return [null_rho(n, cfg.n_iterations, seeds, runner=runner) for n in ncells_list]
