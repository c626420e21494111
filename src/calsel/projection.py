"""
Principal-component projection shared by the selectors.

``project()`` decomposes a (centred, optionally scaled) matrix with a
singular value decomposition and returns a frozen :class:`Projection`
holding scores, eigenvalues and explained-variance fractions.

Component count
---------------
``pc`` is either an exact count (integer >= 1) or a variance threshold
(float in (0, 1)).  For a threshold, the cumulative explained fractions are
compared with ``pc``; the components strictly below the threshold are kept
plus one more, so the retained set explains at least ``pc``::

    ratios    = [0.60, 0.25, 0.10, 0.05]
    cumsum    = [0.60, 0.85, 0.95, 1.00]
    pc = 0.90 -> cumsum < 0.90 = [T, T, F, F] -> 2 + 1 = 3 components
    pc = 0.50 -> no component below 0.50      -> 1 component
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral, Real

import numpy as np
from scipy import linalg
from sklearn.preprocessing import StandardScaler
from sklearn.utils.extmath import svd_flip

from ._errors import InvalidArgument, NumericalError


@dataclass(frozen=True)
class Projection:
    """
    Principal-component projection of a sample matrix.

    Attributes
    ----------
    scores : ndarray (n_samples, n_components)
    eigenvalues : ndarray (n_components,)
        Variances of the score columns, non-increasing.
    explained_variance_ratio : ndarray (n_components,)
        Fraction of the total variance carried by each retained component.
    components : ndarray (n_components, n_features)
        Loadings (right singular vectors).
    mean : ndarray (n_features,) or None
        Column means removed before decomposition (None when not centred).
    scale : ndarray (n_features,) or None
        Column scales applied before decomposition (None when not scaled).
    n_components : int
    """
    scores: np.ndarray
    eigenvalues: np.ndarray
    explained_variance_ratio: np.ndarray
    components: np.ndarray
    mean: np.ndarray | None
    scale: np.ndarray | None
    n_components: int

    def whiten(self) -> np.ndarray:
        """
        Return scores divided by the square root of their eigenvalues.

        Euclidean distances between whitened scores are Mahalanobis
        distances in the retained component space.

        Raises
        ------
        NumericalError
            If a retained component has (numerically) zero variance.
        """
        eig = self.eigenvalues
        tol = np.finfo(np.float64).eps * max(self.scores.shape) * max(eig[0], 0.0)
        if eig[0] <= 0.0 or np.any(eig <= tol):
            raise NumericalError(
                "Cannot whiten: the retained components include a direction with "
                "zero variance (rank-deficient matrix).  Retain fewer components "
                "via 'pc'."
            )
        return self.scores / np.sqrt(eig)


def resolve_n_components(explained_variance_ratio, pc) -> int:
    """
    Translate a component specifier into a component count.

    Parameters
    ----------
    explained_variance_ratio : ndarray
        Per-component variance fractions, in component order.
    pc : int or float
        Integer >= 1 for an exact count, float in (0, 1) for a variance
        threshold.

    Returns
    -------
    n_components : int
        Never larger than ``len(explained_variance_ratio)``.
    """
    n_available = len(explained_variance_ratio)
    if isinstance(pc, bool) or not isinstance(pc, Real):
        raise InvalidArgument(f"pc must be a number, got {pc!r}.")
    if 0 < pc < 1:
        below = np.cumsum(explained_variance_ratio) < pc
        if below.any():
            n = int(np.flatnonzero(below)[-1]) + 2
        else:
            n = 1
        return min(n, n_available)
    if pc >= 1 and (isinstance(pc, Integral) or float(pc).is_integer()):
        return min(int(pc), n_available)
    raise InvalidArgument(
        f"pc must be an integer >= 1 or a fraction in (0, 1), got {pc!r}."
    )


def project(X, pc=None, center=True, scale=False) -> Projection:
    """
    Project ``X`` onto its principal components.

    Parameters
    ----------
    X : ndarray (n_samples, n_features)
    pc : int, float or None
        Component specifier (see :func:`resolve_n_components`).  ``None``
        keeps every component.
    center : bool, default True
        Subtract column means before decomposition.
    scale : bool, default False
        Divide columns by their standard deviation before decomposition.

    Returns
    -------
    projection : Projection

    Raises
    ------
    NumericalError
        If ``scale=True`` and a column has zero variance, or the matrix is
        identically zero.
    """
    X = np.asarray(X, dtype=np.float64)
    n_samples = X.shape[0]

    scaler = StandardScaler(with_mean=center, with_std=scale)
    if scale:
        var = X.var(axis=0)
        if np.any(var <= np.finfo(np.float64).tiny):
            bad = np.flatnonzero(var <= np.finfo(np.float64).tiny).tolist()
            raise NumericalError(
                f"Cannot scale: column(s) {bad} have zero variance."
            )
    X_prep = scaler.fit_transform(X)

    U, s, Vt = linalg.svd(X_prep, full_matrices=False)
    U, Vt = svd_flip(U, Vt)

    eigenvalues_all = s ** 2 / max(n_samples - 1, 1)
    total = eigenvalues_all.sum()
    if total <= 0.0:
        raise NumericalError("Cannot project a matrix with zero total variance.")
    ratios_all = eigenvalues_all / total

    n_comp = len(s) if pc is None else resolve_n_components(ratios_all, pc)

    scores = U[:, :n_comp] * s[:n_comp]
    return Projection(
        scores=scores,
        eigenvalues=eigenvalues_all[:n_comp],
        explained_variance_ratio=ratios_all[:n_comp],
        components=Vt[:n_comp],
        mean=scaler.mean_ if center else None,
        scale=scaler.scale_ if scale else None,
        n_components=n_comp,
    )
