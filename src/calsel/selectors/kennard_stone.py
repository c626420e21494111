"""
Kennard-Stone (CADEX) calibration sample selection.

Starts from the two most distant observations (or from a caller-supplied
``init`` set) and repeatedly adds the observation whose nearest selected
neighbour is farthest away -- the max-min criterion::

    d_selected = max_{i0 in pool} ( min_{i in model} d(i, i0) )

The "min over model" part is kept incrementally in a
:class:`~calsel.distance.RunningMinimum`, so after the O(n²) distance
matrix each step costs O(pool).

Reference: Kennard, R.W., and Stone, L.A., 1969. Computer aided design of
experiments. Technometrics 11, 137-148.
"""

from __future__ import annotations

import warnings

import numpy as np

from .._base import _SelectorBase
from .._errors import InvalidArgument
from .._params import KennardStoneParams
from .._preprocessing import check_indices, coerce_matrix, label_scores
from .._results import SelectionResult, complement
from .._warnings import CalselClampWarning
from ..distance import RunningMinimum, farthest_pair, pairwise, selection_space
from ..groups import coerce_groups, expand_selection


def ken_stone(
    X,
    k=None,
    metric='mahal',
    pc=None,
    group=None,
    init=None,
    center=True,
    scale=False,
) -> SelectionResult:
    """
    Select calibration samples with the Kennard-Stone algorithm.

    Parameters
    ----------
    X : array-like or DataFrame (n_samples, n_features)
        At least two columns.
    k : int
        Number of calibration samples, >= 2.  Values >= n_samples are
        clamped to ``n_samples - 1``.
    metric : {'mahal', 'euclid'}, default 'mahal'
        Mahalanobis distance is Euclidean distance on whitened principal
        component scores.
    pc : int or float, optional
        Compute distances in the space of the first ``pc`` principal
        components; a float in (0, 1) keeps the components explaining at
        least that fraction of the variance.
    group : array-like or GroupPartition, optional
        Group label per observation.  When one member is selected the whole
        group joins the calibration set, which can push ``len(model)``
        past ``k``.
    init : sequence of int, optional
        Indices placed in the calibration set first; the farthest-pair seed
        search is then skipped.  Must hold fewer than ``k`` indices.
    center, scale : bool
        PCA preprocessing flags (only used with ``pc``).

    Returns
    -------
    result : SelectionResult
        ``model`` in selection order, ``test`` the remaining rows, ``pc``
        the score matrix when ``pc`` was given.

    Examples
    --------
    >>> import numpy as np
    >>> rng = np.random.RandomState(0)
    >>> X = rng.randn(200, 2)
    >>> sel = ken_stone(X, k=10, metric='euclid')
    >>> len(sel.model)
    10
    """
    params = KennardStoneParams(
        k=k, metric=metric, pc=pc, group=group, init=init,
        center=center, scale=scale,
    )
    X, row_labels, _ = coerce_matrix(X, min_features=2)
    n_samples = X.shape[0]
    groups = coerce_groups(params.group, n_samples)

    k = params.k
    if k >= n_samples:
        warnings.warn(
            f"k={k} is not smaller than the number of observations "
            f"({n_samples}); using k={n_samples - 1}.",
            CalselClampWarning,
            stacklevel=2,
        )
        k = n_samples - 1

    if params.init is not None:
        seed = check_indices(params.init, n_samples, 'init')
        if len(seed) == 0:
            raise InvalidArgument("init must contain at least one index.")
        if len(seed) >= k:
            raise InvalidArgument(
                f"init holds {len(seed)} indices; it must hold fewer than k={k}."
            )

    Z, scores = selection_space(X, params.metric, params.pc, params.center, params.scale)
    D = pairwise(Z)

    if params.init is None:
        seed = np.array(farthest_pair(D), dtype=np.int64)

    model = list(expand_selection(seed, groups))
    running = RunningMinimum(D, model)

    while len(model) < k and len(running):
        picked = expand_selection(running.argmax(), groups)
        model.extend(picked.tolist())
        running.add(picked)

    model = np.array(model, dtype=np.int64)
    return SelectionResult(
        model=model,
        test=complement(model, n_samples),
        pc=None if scores is None else label_scores(scores, row_labels),
    )


class KennardStone(_SelectorBase):
    """
    Kennard-Stone selector as a scikit-learn estimator.

    Parameters are those of :func:`ken_stone`.

    Examples
    --------
    >>> from calsel import KennardStone
    >>> ks = KennardStone(k=30, metric='euclid').fit(X)
    >>> X_cal = X[ks.model_]
    """

    def __init__(
        self,
        k=None,
        metric='mahal',
        pc=None,
        group=None,
        init=None,
        center=True,
        scale=False,
    ):
        self.k = k
        self.metric = metric
        self.pc = pc
        self.group = group
        self.init = init
        self.center = center
        self.scale = scale

    def _select(self, X):
        return ken_stone(X, **self.get_params())
