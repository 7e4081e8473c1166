"""
Tests for rank computation and rho scaling.
"""

import numpy as np
import pytest

from rhonull.stats.common.ranking import (
    rank_vector,
    rho_from_ranks,
    rho_multiplier,
    squared_rank_distance,
)


class TestRankVector:
    def test_ranks_follow_ascending_order(self):
        assert rank_vector([2.5, -1.0, 0.0, 10.0]).tolist() == [2, 0, 1, 3]

    def test_ranks_are_a_permutation(self):
        values = np.random.default_rng(0).standard_normal(100)
        ranks = rank_vector(values)
        assert sorted(ranks.tolist()) == list(range(100))

    def test_ties_broken_by_first_occurrence(self):
        assert rank_vector([3.0, 1.0, 3.0, 1.0]).tolist() == [2, 0, 3, 1]

    def test_all_equal_values_keep_positions(self):
        assert rank_vector(np.zeros(5)).tolist() == [0, 1, 2, 3, 4]

    def test_empty_input(self):
        assert rank_vector([]).shape == (0,)


class TestRhoScaling:
    def test_multiplier_closed_form(self):
        assert rho_multiplier(10) == pytest.approx(6 / (10 * 99))

    def test_multiplier_for_two_observations(self):
        assert rho_multiplier(2) == 1.0

    def test_multiplier_for_one_observation_is_infinite(self):
        assert rho_multiplier(1) == np.inf

    def test_single_observation_rho_is_nan(self):
        rank = np.zeros(1, dtype=np.int64)
        assert np.isnan(rho_from_ranks(rank, rank, rho_multiplier(1)))

    def test_identical_ranks_give_one(self):
        ranks = np.arange(7)
        assert rho_from_ranks(ranks, ranks, rho_multiplier(7)) == 1.0

    def test_reversed_ranks_give_minus_one(self):
        ranks = np.arange(7)
        rho = rho_from_ranks(ranks, ranks[::-1], rho_multiplier(7))
        assert rho == pytest.approx(-1.0)

    def test_squared_distance(self):
        assert squared_rank_distance(np.array([0, 1, 2]), np.array([1, 0, 2])) == 2.0

    def test_matches_scipy_spearman_without_ties(self):
        from scipy.stats import spearmanr

        rng = np.random.default_rng(3)
        x, y = rng.standard_normal(40), rng.standard_normal(40)
        rho = rho_from_ranks(rank_vector(x), rank_vector(y), rho_multiplier(40))
        assert rho == pytest.approx(spearmanr(x, y)[0])
