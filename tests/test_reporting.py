"""
Tests for polars summaries of null distributions.
"""

import numpy as np
import polars as pl
import pytest

from rhonull.reporting.summary import empirical_p_values, null_table, summarize_null
from rhonull.stats.null.unconstrained import null_rho


class TestSummarizeNull:
    def test_columns(self):
        summary = summarize_null(np.array([0.1, -0.2, 0.3]))
        assert summary.columns == ["iterations", "mean", "variance", "min", "max", "q025", "q975"]
        assert summary.height == 1

    def test_values(self):
        samples = np.array([-0.5, 0.0, 0.5, 1.0])
        row = summarize_null(samples).row(0, named=True)
        assert row["iterations"] == 4
        assert row["mean"] == pytest.approx(0.25)
        assert row["variance"] == pytest.approx(np.var(samples, ddof=1))
        assert row["min"] == -0.5
        assert row["max"] == 1.0

    def test_expected_variance(self):
        n = 40
        rho = null_rho(n, 2000, list(range(2000)))
        row = summarize_null(rho, nobs=n).row(0, named=True)
        assert row["expected_variance"] == pytest.approx(1 / 39)
        assert row["variance"] == pytest.approx(row["expected_variance"], rel=0.15)

    def test_empty_samples(self):
        row = summarize_null(np.array([])).row(0, named=True)
        assert row["iterations"] == 0
        assert row["mean"] is None

    def test_invalid_nobs(self):
        with pytest.raises(ValueError):
            summarize_null(np.array([0.0]), nobs=1)


class TestNullTable:
    def test_layout(self):
        df = null_table(np.array([0.5, -0.5]), [10, 20])
        assert isinstance(df, pl.DataFrame)
        assert df["iteration"].to_list() == [0, 1]
        assert df["seed"].to_list() == [10, 20]
        assert df["rho"].to_list() == [0.5, -0.5]

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            null_table(np.array([0.5]), [1, 2])


class TestEmpiricalPValues:
    def test_counts_ties_as_exceeding(self):
        p = empirical_p_values([0.5], np.array([0.5, 0.5, 0.0]))
        assert p.tolist() == [0.75]

    def test_extremes(self):
        samples = np.linspace(-1, 1, 9)
        p = empirical_p_values([2.0, -2.0], samples)
        assert p[0] == pytest.approx(1 / 10)
        assert p[1] == pytest.approx(1.0)

    def test_requires_samples(self):
        with pytest.raises(ValueError):
            empirical_p_values([0.1], np.array([]))
