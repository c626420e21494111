"""
Distance computations for calsel selectors.

Mahalanobis distance is never computed through an explicit inverse
covariance: the data are projected onto their principal components and each
score column is divided by the square root of its eigenvalue, after which
plain Euclidean distance applies.

``RunningMinimum`` holds the incremental "distance to nearest selected
point" bookkeeping used by the max-min selectors (Kennard-Stone, DUPLEX).
"""

from __future__ import annotations

from enum import Enum

import numpy as np
from scipy.spatial.distance import cdist

from ._errors import InvalidArgument
from .projection import project


class Metric(str, Enum):
    """Distance metric tag accepted by the selectors."""

    EUCLIDEAN = 'euclid'
    MAHALANOBIS = 'mahal'

    @classmethod
    def parse(cls, value) -> 'Metric':
        """Accept a Metric or one of its spelled-out aliases."""
        if isinstance(value, cls):
            return value
        key = str(value).lower()
        if key not in _METRIC_ALIASES:
            raise InvalidArgument(
                f"Unknown metric: {value!r}. "
                f"Available metrics: {sorted(_METRIC_ALIASES)}"
            )
        return _METRIC_ALIASES[key]


_METRIC_ALIASES = {
    'euclid': Metric.EUCLIDEAN,
    'euclidean': Metric.EUCLIDEAN,
    'mahal': Metric.MAHALANOBIS,
    'mahalanobis': Metric.MAHALANOBIS,
}


def to_mahalanobis(X) -> np.ndarray:
    """
    Map ``X`` to a space where Euclidean distance is Mahalanobis distance.

    Uses every principal component of the centred matrix.

    Raises
    ------
    NumericalError
        If the covariance matrix is singular (e.g. fewer samples than
        features, or collinear columns).
    """
    return project(X, pc=None, center=True, scale=False).whiten()


def metric_space(X, metric) -> np.ndarray:
    """Return the coordinates in which Euclidean distance realises ``metric``."""
    if Metric.parse(metric) is Metric.MAHALANOBIS:
        return to_mahalanobis(X)
    return np.asarray(X, dtype=np.float64)


def pairwise(A, B=None) -> np.ndarray:
    """
    Euclidean distance matrix between the rows of ``A`` and ``B``.

    With ``B=None`` the result is the symmetric (n, n) matrix of ``A``
    against itself, with an exact zero diagonal.
    """
    if B is None:
        D = cdist(A, A, metric='euclidean')
        np.fill_diagonal(D, 0.0)
        return D
    return cdist(A, B, metric='euclidean')


def point_to_set(X, point_idx, pool_idx) -> np.ndarray:
    """Distances from row ``point_idx`` of ``X`` to the rows ``pool_idx``."""
    return cdist(X[[point_idx]], X[pool_idx], metric='euclidean').ravel()


def farthest_pair(D):
    """
    Return the pair ``(i, j)`` with the largest distance in ``D``.

    The matrix is scanned column by column, so for a symmetric ``D`` the
    first maximum is found below the diagonal and ``i > j``: the larger
    index of the pair comes first.  All-zero matrices (identical rows) give
    ``(1, 0)``.
    """
    flat = int(np.argmax(D.ravel(order='F')))
    i, j = np.unravel_index(flat, D.shape, order='F')
    if i == j:
        return 1, 0
    return int(i), int(j)


class RunningMinimum:
    """
    Distance of every pool point to its nearest selected point.

    The pool is an explicit index array; selecting points moves them out of
    the pool and folds their rows of the distance matrix into the minima in
    O(pool) per added point.

    Parameters
    ----------
    D : ndarray (n, n)
        Full pairwise distance matrix (read only).
    selected : array-like of int
        Initial selected set (must be non-empty).
    pool : array-like of int, optional
        Candidate indices.  Defaults to every index not in ``selected``.
    """

    def __init__(self, D, selected, pool=None):
        self._D = D
        selected = np.asarray(selected, dtype=np.int64)
        if pool is None:
            mask = np.ones(D.shape[0], dtype=bool)
            mask[selected] = False
            pool = np.flatnonzero(mask)
        self.pool = np.asarray(pool, dtype=np.int64)
        if len(selected):
            self.minima = D[np.ix_(selected, self.pool)].min(axis=0)
        else:
            self.minima = np.full(len(self.pool), np.inf)

    def __len__(self):
        return len(self.pool)

    def argmax(self) -> int:
        """
        Original index of the pool point farthest from the selected set.

        Ties go to the lowest original index (the pool is kept ascending).

        Raises
        ------
        InvalidArgument
            If the pool is empty.
        """
        if len(self.pool) == 0:
            raise InvalidArgument("No candidates left: the pool is empty.")
        return int(self.pool[int(np.argmax(self.minima))])

    def add(self, indices):
        """Move ``indices`` from the pool to the selected set."""
        indices = np.atleast_1d(np.asarray(indices, dtype=np.int64))
        keep = ~np.isin(self.pool, indices)
        self.pool = self.pool[keep]
        self.minima = self.minima[keep]
        if len(self.pool):
            new = self._D[np.ix_(indices, self.pool)].min(axis=0)
            np.minimum(self.minima, new, out=self.minima)


def selection_space(X, metric, pc=None, center=True, scale=False):
    """
    Coordinates used by the max-min selectors.

    Parameters
    ----------
    X : ndarray (n_samples, n_features)
    metric : Metric or str
    pc : int, float or None
        When given, distances are computed on the retained principal
        component scores (whitened for the Mahalanobis metric).
    center, scale : bool
        PCA preprocessing flags.

    Returns
    -------
    Z : ndarray (n_samples, n_dims)
        Euclidean distance between rows of ``Z`` realises ``metric``.
    scores : ndarray or None
        ``Z`` itself when a projection was requested, else None.
    """
    metric = Metric.parse(metric)
    if pc is None:
        return metric_space(X, metric), None
    projection = project(X, pc=pc, center=center, scale=scale)
    if metric is Metric.MAHALANOBIS:
        Z = projection.whiten()
    else:
        Z = projection.scores
    return Z, Z
