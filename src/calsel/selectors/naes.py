"""
k-means (Naes) calibration sample selection.

The data (or their principal component scores) are clustered into ``k``
groups with k-means and one observation is taken from every cluster.

Reference: Naes, T., 1987. The design of calibration in near infra-red
reflectance analysis by clustering. Journal of Chemometrics 1, 121-134.
"""

from __future__ import annotations

import warnings

import numpy as np
from sklearn.cluster import KMeans
from sklearn.utils import check_random_state

from .._base import _SelectorBase
from .._params import NaesParams
from .._preprocessing import coerce_matrix, label_scores
from .._results import NaesResult, complement
from .._warnings import CalselClampWarning
from ..distance import pairwise
from ..projection import project

_NEAREST, _FARTHEST, _RANDOM = 0, 1, 2


def naes(
    X,
    k=None,
    pc=None,
    iter_max=10,
    method=0,
    center=True,
    scale=False,
    random_state=None,
) -> NaesResult:
    """
    Select one sample per k-means cluster.

    Parameters
    ----------
    X : array-like or DataFrame (n_samples, n_features)
    k : int
        Number of clusters, >= 2.  Clamped to ``n_samples - 1``.
    pc : int or float, optional
        Cluster the principal component scores instead of ``X``.
    iter_max : int, default 10
        Maximum k-means iterations.
    method : {0, 1, 2} or {'nearest', 'farthest', 'random'}, default 0
        How each cluster's representative is chosen: closest to the cluster
        centre, farthest from the centre of the whole data set, or at random.
    center, scale : bool
        PCA preprocessing flags (only used with ``pc``).
    random_state : int, RandomState or None
        Seeds k-means and the random representative choice.

    Returns
    -------
    result : NaesResult
        ``model`` holds one index per non-empty cluster, in cluster order.
    """
    params = NaesParams(
        k=k, pc=pc, iter_max=iter_max, method=method,
        center=center, scale=scale, random_state=random_state,
    )
    X, row_labels, _ = coerce_matrix(X)
    n_samples = X.shape[0]

    k = params.k
    if k >= n_samples:
        warnings.warn(
            f"k={k} is not smaller than the number of observations "
            f"({n_samples}); using k={n_samples - 1}.",
            CalselClampWarning,
            stacklevel=2,
        )
        k = n_samples - 1

    scores = None
    Z = X
    if params.pc is not None:
        Z = scores = project(
            X, pc=params.pc, center=params.center, scale=params.scale
        ).scores

    rng = check_random_state(params.random_state)
    kmeans = KMeans(
        n_clusters=k,
        max_iter=params.iter_max,
        n_init=10,
        random_state=rng.randint(np.iinfo(np.int32).max),
    ).fit(Z)
    labels = kmeans.labels_
    centers = kmeans.cluster_centers_

    if params.method == _FARTHEST:
        to_center = pairwise(Z, Z.mean(axis=0, keepdims=True)).ravel()

    model = []
    for cluster in range(k):
        members = np.flatnonzero(labels == cluster)
        if len(members) == 0:
            continue
        if params.method == _NEAREST:
            d = pairwise(Z[members], centers[cluster:cluster + 1]).ravel()
            model.append(int(members[np.argmin(d)]))
        elif params.method == _FARTHEST:
            model.append(int(members[np.argmax(to_center[members])]))
        else:
            model.append(int(rng.choice(members)))

    model = np.array(model, dtype=np.int64)
    return NaesResult(
        model=model,
        test=complement(model, n_samples),
        pc=None if scores is None else label_scores(scores, row_labels),
        cluster=labels.astype(np.int64),
        centers=centers,
    )


class Naes(_SelectorBase):
    """
    k-means selector as a scikit-learn estimator.

    Parameters are those of :func:`naes`.  ``cluster_`` and ``centers_``
    expose the fitted clustering.
    """

    def __init__(
        self,
        k=None,
        pc=None,
        iter_max=10,
        method=0,
        center=True,
        scale=False,
        random_state=None,
    ):
        self.k = k
        self.pc = pc
        self.iter_max = iter_max
        self.method = method
        self.center = center
        self.scale = scale
        self.random_state = random_state

    def _select(self, X):
        return naes(X, **self.get_params())

    def fit(self, X, y=None):
        super().fit(X, y)
        self.cluster_ = self.result_.cluster
        self.centers_ = self.result_.centers
        return self
