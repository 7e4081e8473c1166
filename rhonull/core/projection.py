"""
rhonull.core.projection
=======================

Orthogonal projection capability consumed by the residual null generator.

A design matrix `X` (`n x p`, full column rank) with QR factorization
`X = Q R` splits observation space into the column space of `X` (first `p`
columns of `Q`) and its orthogonal complement (remaining `n - p` columns).
Multiplying a coefficient vector by `Q` maps it back into observation space,
which is all the residual generator needs: it never sees `Q` itself.

- `ProjectionOperator`: the abstract capability ("apply Q or Q^T").
- `QRProjection`: implementation over a compact Householder factorization in
  LAPACK `geqrf` layout (the layout R's `qr()` returns as `qr`/`qraux`),
  applied with LAPACK `dormqr`.

Examples
--------
>>> import numpy as np
>>> from rhonull.core.projection import QRProjection
>>> X = np.column_stack([np.ones(5), np.arange(5.0)])
>>> proj = QRProjection.from_design(X)
>>> proj.nobs, proj.ncoefs
(5, 2)
>>> v = np.array([0.0, 0.0, 1.0, -1.0, 0.5])
>>> resid = proj.apply(v)
>>> bool(np.allclose(X.T @ resid, 0.0))
True
>>> bool(np.allclose(proj.apply(resid, transpose=True), v))
True
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike
from scipy import linalg
from scipy.linalg import lapack


class ProjectionOperator(ABC):
    """
    Base class for "multiply by Q" capabilities bound to one design matrix.

    Implementations must not write to shared state inside `apply`, not even
    temporarily, so that one instance can serve concurrent iterations.
    """

    @property
    @abstractmethod
    def nobs(self) -> int:
        """Number of observations (rows of the design matrix)."""

    @property
    @abstractmethod
    def ncoefs(self) -> int:
        """Number of coefficients (columns of the design matrix)."""

    @abstractmethod
    def apply(
        self,
        vector: ArrayLike,
        transpose: bool = False,
        out: Optional[np.ndarray] = None,
    ) -> np.ndarray:
        """
        Multiply a length-`nobs` vector by Q (or Q^T when `transpose`).

        Returns a new array, or writes into and returns `out` when given.
        """

    def _check_vector(self, vector: ArrayLike) -> np.ndarray:
        arr = np.asarray(vector, dtype=np.float64)
        if arr.shape != (self.nobs,):
            raise ValueError(
                f"vector must have shape ({self.nobs},), got {arr.shape}"
            )
        return arr


class QRProjection(ProjectionOperator):
    """
    Projection operator backed by a compact Householder QR factorization.

    Args:
        qr: `n x p` array holding R in its upper triangle and the Householder
            vectors below the diagonal (LAPACK `geqrf` output).
        tau: Length-`p` array of Householder scalar factors.

    The factorization is taken as given: rank and identifiability of the
    design are the caller's responsibility.
    """

    def __init__(self, qr: ArrayLike, tau: ArrayLike) -> None:
        self._qr = np.asarray(qr, dtype=np.float64, order="F")
        self._tau = np.ascontiguousarray(tau, dtype=np.float64).ravel()

        if self._qr.ndim != 2:
            raise ValueError(f"qr must be a 2D array, got {self._qr.ndim}D")
        nobs, ncoefs = self._qr.shape
        if ncoefs > nobs:
            raise ValueError(
                f"number of coefficients ({ncoefs}) exceeds number of observations ({nobs})"
            )
        if self._tau.shape[0] != ncoefs:
            raise ValueError(
                f"tau must have one entry per coefficient ({ncoefs}), got {self._tau.shape[0]}"
            )

        self._lwork = self._query_lwork() if ncoefs else 0

    @classmethod
    def from_design(cls, design: ArrayLike) -> "QRProjection":
        """Factorize a design matrix without pivoting and wrap the result."""
        X = np.asarray(design, dtype=np.float64)
        if X.ndim != 2:
            raise ValueError(f"design must be a 2D array, got {X.ndim}D")
        nobs, ncoefs = X.shape
        if ncoefs > nobs:
            raise ValueError(
                f"design has more columns ({ncoefs}) than rows ({nobs})"
            )
        if ncoefs == 0:
            return cls(np.empty((nobs, 0)), np.empty(0))

        (qr, tau), _ = linalg.qr(X, mode="raw")
        return cls(qr, tau)

    @property
    def nobs(self) -> int:
        return int(self._qr.shape[0])

    @property
    def ncoefs(self) -> int:
        return int(self._qr.shape[1])

    def _query_lwork(self) -> int:
        probe = np.zeros((self.nobs, 1), dtype=np.float64, order="F")
        _, work, info = lapack.dormqr("L", "N", self._qr, self._tau, probe, -1)
        if info != 0:
            raise RuntimeError(f"workspace query for 'dormqr' failed (info={info})")
        return max(1, int(work[0]))

    def apply(
        self,
        vector: ArrayLike,
        transpose: bool = False,
        out: Optional[np.ndarray] = None,
    ) -> np.ndarray:
        """
        Multiply a vector by Q (or Q^T) without forming Q.

        `dormqr` writes into the diagonal of its reflector array while it
        runs, so every call hands it a private copy of the factorization.

        Examples:
            >>> import numpy as np
            >>> proj = QRProjection.from_design(np.ones((3, 1)))
            >>> buf = np.empty(3)
            >>> _ = proj.apply([0.0, 1.0, 0.0], out=buf)
            >>> bool(np.isclose(buf.sum(), 0.0))
            True
        """
        arr = self._check_vector(vector)

        if self.ncoefs == 0:
            result = arr.copy()
        else:
            rhs = np.array(arr, dtype=np.float64, order="F").reshape(self.nobs, 1)
            cq, _, info = lapack.dormqr(
                "L",
                "T" if transpose else "N",
                self._qr.copy(order="F"),
                self._tau,
                rhs,
                self._lwork,
                overwrite_c=1,
            )
            if info != 0:
                raise RuntimeError(f"residual calculations failed for 'dormqr' (info={info})")
            result = cq[:, 0]

        if out is not None:
            out[...] = result
            return out
        return result
