"""
SELECT (Shenk & Westerhaus) calibration sample selection.

Distances are Mahalanobis distances on the retained principal components,
divided by the number of components.  Each step selects the observation
with the most neighbours closer than ``d_min`` and removes it together with
those neighbours, so every selected observation stands for a dense
neighbourhood.

Reference: Shenk, J.S., and Westerhaus, M.O., 1991. Population Structuring
of Near Infrared Spectra and Modified Partial Least Squares Regression.
Crop Science 31, 1548-1555.
"""

from __future__ import annotations

import numpy as np

from .._base import _SelectorBase
from .._params import ShenkWestParams
from .._preprocessing import coerce_matrix, label_scores
from .._results import ShenkWestResult, complement
from ..distance import pairwise
from ..projection import project

# Normalised leverage above which an observation counts as an outlier
_OUTLIER_LEVERAGE = 3.0


def shenk_west(
    X,
    d_min=None,
    pc=0.95,
    threshold=0.6,
    rm_outlier=False,
    center=True,
    scale=False,
) -> ShenkWestResult:
    """
    Select representative samples with the SELECT algorithm.

    Parameters
    ----------
    X : array-like or DataFrame (n_samples, n_features)
    d_min : float
        Neighbourhood radius (Mahalanobis distance / number of components).
    pc : int or float, default 0.95
    threshold : float, default 0.6
        Stop once fewer than ``threshold * n_samples`` observations remain
        in the pool.
    rm_outlier : bool, default False
        Drop observations whose normalised leverage exceeds 3 before
        selecting; they are listed in ``removed_outliers`` and end up in
        ``test``.
    center, scale : bool
        PCA preprocessing flags.

    Returns
    -------
    result : ShenkWestResult
    """
    params = ShenkWestParams(
        d_min=d_min, pc=pc, threshold=threshold, rm_outlier=rm_outlier,
        center=center, scale=scale,
    )
    X, row_labels, _ = coerce_matrix(X)
    n_samples = X.shape[0]

    projection = project(X, pc=params.pc, center=params.center, scale=params.scale)
    Z = projection.whiten()
    n_pc = projection.n_components

    candidates = np.arange(n_samples, dtype=np.int64)
    removed_outliers = np.empty(0, dtype=np.int64)
    if params.rm_outlier:
        leverage = pairwise(Z, Z.mean(axis=0, keepdims=True)).ravel() / n_pc
        outlier = leverage > _OUTLIER_LEVERAGE
        removed_outliers = np.flatnonzero(outlier).astype(np.int64)
        candidates = candidates[~outlier]

    close = (pairwise(Z[candidates]) / n_pc) < params.d_min
    pool = np.arange(len(candidates))
    model = []
    while len(pool) and len(pool) / n_samples >= params.threshold:
        neighbours = close[np.ix_(pool, pool)]
        counts = neighbours.sum(axis=0)
        best = int(np.argmax(counts))
        model.append(int(candidates[pool[best]]))
        if counts[best] <= 1:
            break
        pool = pool[~neighbours[best]]

    model = np.array(model, dtype=np.int64)
    return ShenkWestResult(
        model=model,
        test=complement(model, n_samples),
        pc=label_scores(Z, row_labels),
        removed_outliers=removed_outliers,
    )


class ShenkWest(_SelectorBase):
    """
    SELECT selector as a scikit-learn estimator.

    Parameters are those of :func:`shenk_west`.
    """

    def __init__(
        self,
        d_min=None,
        pc=0.95,
        threshold=0.6,
        rm_outlier=False,
        center=True,
        scale=False,
    ):
        self.d_min = d_min
        self.pc = pc
        self.threshold = threshold
        self.rm_outlier = rm_outlier
        self.center = center
        self.scale = scale

    def _select(self, X):
        return shenk_west(X, **self.get_params())
