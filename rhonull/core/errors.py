"""
rhonull.core.errors
===================

Failure kinds for null distribution requests.

All of them are caller contract violations detected before any simulation
starts, so they derive from `ValueError` and are never retried.

Examples
--------
>>> from rhonull.core.errors import InvalidObservationCount, NullDistributionError
>>> issubclass(InvalidObservationCount, NullDistributionError)
True
>>> issubclass(NullDistributionError, ValueError)
True
"""


class NullDistributionError(ValueError):
    """Base class for invalid null distribution requests."""


class InvalidObservationCount(NullDistributionError):
    """The number of observations cannot be permuted meaningfully."""


class InvalidIterationCount(NullDistributionError):
    """The requested number of Monte Carlo iterations is out of range."""


class SeedCountMismatch(NullDistributionError):
    """The seed sequence does not supply exactly one seed per iteration."""
