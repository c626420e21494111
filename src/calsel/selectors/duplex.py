"""
DUPLEX selection of two balanced, disjoint subsets.

The pair of observations farthest apart is split between the calibration
and the validation set.  The sets then take turns: each turn the pool
point with the largest distance to its nearest already-selected point
(calibration and validation members alike) joins the set whose turn it is.
Both sets thus cover the data cloud with similar spread.

Reference: Snee, R.D., 1977. Validation of regression models: methods and
examples. Technometrics 19, 415-428.
"""

from __future__ import annotations

import warnings

import numpy as np

from .._base import _SelectorBase
from .._errors import ConfigurationError, InvalidArgument
from .._params import DuplexParams
from .._preprocessing import coerce_matrix, label_scores
from .._results import DuplexResult, complement
from .._warnings import CalselClampWarning
from ..distance import RunningMinimum, farthest_pair, pairwise, selection_space
from ..groups import coerce_groups, expand_selection


def duplex(
    X,
    k=None,
    metric='mahal',
    pc=None,
    group=None,
    center=True,
    scale=False,
) -> DuplexResult:
    """
    Select a calibration and a validation set with the DUPLEX algorithm.

    Parameters
    ----------
    X : array-like or DataFrame (n_samples, n_features)
    k : int
        Size of each set, >= 2.  Clamped to ``n_samples // 2``.
    metric : {'mahal', 'euclid'}, default 'mahal'
    pc : int or float, optional
        Work on principal component scores (see :func:`ken_stone`).
    group : array-like or GroupPartition, optional
        A pick brings its whole group into the same set.
    center, scale : bool
        PCA preprocessing flags (only used with ``pc``).

    Returns
    -------
    result : DuplexResult
        ``model`` (calibration) and ``test`` (validation) in selection
        order; ``unselected`` holds the rows neither set took.

    Raises
    ------
    ConfigurationError
        If the group of the first seed covers every observation.
    """
    params = DuplexParams(
        k=k, metric=metric, pc=pc, group=group, center=center, scale=scale,
    )
    X, row_labels, _ = coerce_matrix(X)
    n_samples = X.shape[0]
    groups = coerce_groups(params.group, n_samples)

    k = params.k
    half = n_samples // 2
    if k > half:
        if half < 2:
            raise InvalidArgument(
                f"duplex needs at least 4 observations, got {n_samples}."
            )
        warnings.warn(
            f"k={k} exceeds half the number of observations; using k={half}.",
            CalselClampWarning,
            stacklevel=2,
        )
        k = half

    Z, scores = selection_space(X, params.metric, params.pc, params.center, params.scale)
    D = pairwise(Z)

    first, second = farthest_pair(D)
    model = expand_selection(first, groups).tolist()
    running = RunningMinimum(D, model)
    if not len(running):
        raise ConfigurationError(
            "The group of the first calibration sample holds every "
            "observation; no validation set can be formed."
        )
    if second in model:
        second = running.argmax()
    picked = expand_selection(second, groups)
    test = picked.tolist()
    running.add(picked)

    sets = (model, test)
    turn = 0
    while len(running) and (len(model) < k or len(test) < k):
        dest = sets[turn] if len(sets[turn]) < k else sets[1 - turn]
        picked = expand_selection(running.argmax(), groups)
        dest.extend(picked.tolist())
        running.add(picked)
        turn = 1 - turn

    model = np.array(model, dtype=np.int64)
    test = np.array(test, dtype=np.int64)
    return DuplexResult(
        model=model,
        test=test,
        pc=None if scores is None else label_scores(scores, row_labels),
        unselected=complement(np.concatenate([model, test]), n_samples),
    )


class Duplex(_SelectorBase):
    """
    DUPLEX selector as a scikit-learn estimator.

    Parameters are those of :func:`duplex`.  After ``fit()``, ``model_`` is
    the calibration set and ``test_`` the validation set.
    """

    def __init__(
        self,
        k=None,
        metric='mahal',
        pc=None,
        group=None,
        center=True,
        scale=False,
    ):
        self.k = k
        self.metric = metric
        self.pc = pc
        self.group = group
        self.center = center
        self.scale = scale

    def _select(self, X):
        return duplex(X, **self.get_params())
