"""
Tests for the null distribution facade and its configuration.
"""

import numpy as np
import pytest

from rhonull.api.null_distribution import (
    NullConfig,
    batch_correlation_null,
    correlation_null,
    residual_correlation_null,
)
from rhonull.core.errors import InvalidIterationCount, SeedCountMismatch
from rhonull.core.projection import QRProjection
from rhonull.runtime.runners import SequentialRunner, ThreadedRunner
from rhonull.stats.null.residual import null_rho_design
from rhonull.stats.null.unconstrained import null_rho


class TestNullConfig:
    def test_defaults(self):
        config = NullConfig()
        config.validate()
        assert config.n_iterations == 1000
        assert isinstance(config.make_runner(), SequentialRunner)

    def test_threaded_runner_for_several_workers(self):
        runner = NullConfig(max_workers=4).make_runner()
        assert isinstance(runner, ThreadedRunner)
        assert runner.max_workers == 4

    def test_single_worker_is_sequential(self):
        assert isinstance(NullConfig(max_workers=1).make_runner(), SequentialRunner)

    def test_negative_iterations(self):
        with pytest.raises(InvalidIterationCount):
            NullConfig(iterations=-1).validate()

    def test_seed_and_seeds_exclusive(self):
        with pytest.raises(ValueError, match="mutually exclusive"):
            NullConfig(iterations=2, seed=1, seeds=[1, 2]).validate()

    def test_invalid_workers(self):
        with pytest.raises(ValueError):
            NullConfig(max_workers=0).validate()

    def test_iterations_follow_explicit_seeds(self):
        config = NullConfig(seeds=[4, 5, 6])
        config.validate()
        assert config.n_iterations == 3

    def test_explicit_iterations_take_precedence(self):
        assert NullConfig(iterations=2, seeds=[4, 5, 6]).n_iterations == 2

    def test_explicit_seeds_used_verbatim(self):
        assert NullConfig(iterations=3, seeds=[5, 6, 7]).resolve_seeds() == [5, 6, 7]

    def test_drawn_seeds_reproducible(self):
        a = NullConfig(iterations=5, seed=11).resolve_seeds()
        b = NullConfig(iterations=5, seed=11).resolve_seeds()
        assert np.array_equal(a, b)
        assert len(a) == 5


class TestCorrelationNull:
    def test_explicit_seeds_match_core(self):
        rho = correlation_null(20, iterations=3, seeds=[1, 2, 3])
        assert np.array_equal(rho, null_rho(20, 3, [1, 2, 3]))

    def test_overrides_applied_on_top_of_config(self):
        base = NullConfig(iterations=50, seed=1)
        assert correlation_null(20, base, iterations=10).shape == (10,)
        assert base.iterations == 50

    def test_threaded_matches_sequential(self):
        config = NullConfig(iterations=40, seed=3)
        sequential = correlation_null(15, config)
        threaded = correlation_null(15, config, max_workers=3)
        assert np.array_equal(sequential, threaded)

    def test_zero_iterations(self):
        assert correlation_null(10, iterations=0, seed=1).shape == (0,)

    def test_seeds_without_iterations(self):
        rho = correlation_null(20, NullConfig(seeds=[1, 2, 3, 4, 5]))
        assert np.array_equal(rho, null_rho(20, 5, [1, 2, 3, 4, 5]))

    def test_seed_mismatch_from_config(self):
        with pytest.raises(SeedCountMismatch):
            correlation_null(10, iterations=5, seeds=[1, 2, 3])


class TestResidualCorrelationNull:
    def test_accepts_design_matrix(self):
        X = np.column_stack([np.ones(12), np.arange(12.0)])
        rho = residual_correlation_null(X, iterations=4, seeds=[1, 2, 3, 4])
        expected = null_rho_design(QRProjection.from_design(X), 4, [1, 2, 3, 4])
        assert np.allclose(rho, expected)

    def test_accepts_projection_operator(self):
        proj = QRProjection.from_design(np.ones((10, 1)))
        rho = residual_correlation_null(proj, iterations=3, seeds=[4, 5, 6])
        assert np.array_equal(rho, null_rho_design(proj, 3, [4, 5, 6]))

    def test_zero_iterations_rejected(self):
        with pytest.raises(InvalidIterationCount):
            residual_correlation_null(np.ones((10, 1)), iterations=0, seed=1)


class TestBatchCorrelationNull:
    def test_one_distribution_per_size(self):
        out = batch_correlation_null([5, 10, 20], iterations=30, seed=2)
        assert [r.shape for r in out] == [(30,), (30,), (30,)]

    def test_shares_seeds(self):
        seeds = list(range(8))
        out = batch_correlation_null([6, 9], iterations=8, seeds=seeds)
        assert np.array_equal(out[1], null_rho(9, 8, seeds))
