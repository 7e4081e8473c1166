"""
rhonull.reporting
=================

Polars-based summaries of simulated null distributions.
"""

from rhonull.reporting.summary import empirical_p_values, null_table, summarize_null

__all__ = ["empirical_p_values", "null_table", "summarize_null"]
