"""
Puchwein calibration sample selection.

1. Project the data on its principal components and whiten the scores.
2. Leverage ``H`` = Mahalanobis distance of each observation to the centre;
   observations are visited by decreasing leverage.
3. Pass ``m`` uses the limiting distance ``m * d_ini`` with
   ``d_ini = k * max(n_pc - 2, 1)``: take the remaining observation with
   the highest leverage, drop every observation within the limiting
   distance of it, repeat until the pool is empty.  The pool of pass ``m``
   is the candidate set of pass ``m - 1`` (all observations for the first
   pass), so the candidate sets are nested and never grow.
4. Passes continue until one keeps ``min_sel`` candidates or fewer.

Each pass is summarised by the sum of leverages of its candidates compared
with the sum expected for as many average observations.  Which pass to use
is left to the caller (``loop`` argument or :meth:`PuchweinResult.select`).

Reference: Puchwein, G., 1988. Selection of calibration samples for
near-infrared spectrometry by factor analysis of spectra. Analytical
Chemistry 60, 569-573.
"""

from __future__ import annotations

import numpy as np

from .._base import _SelectorBase
from .._errors import InvalidArgument
from .._params import PuchweinParams
from .._preprocessing import coerce_matrix, label_scores
from .._results import LeverageTrace, PuchweinResult, complement
from ..distance import pairwise, point_to_set
from ..projection import project


def _puchwein_pass(Z, order, limit):
    """Candidates of one pass, in leverage order."""
    pool = order
    selected = []
    while len(pool):
        head = pool[0]
        selected.append(head)
        pool = pool[point_to_set(Z, head, pool) > limit]
    return np.array(selected, dtype=np.int64)


def puchwein(
    X,
    k=0.2,
    pc=0.95,
    min_sel=5,
    loop=None,
    center=True,
    scale=False,
) -> PuchweinResult:
    """
    Run the Puchwein selection and report every pass.

    Parameters
    ----------
    X : array-like or DataFrame (n_samples, n_features)
    k : float, default 0.2
        Initial limiting-distance factor in (0, 1].  The number of passes
        grows as ``1 / k``: the radius reaches the largest leverage
        distance after about ``max(H) / d_ini`` passes, each costing up to
        O(candidates²) distance evaluations.  Very small factors (say
        below 0.01) make long traces.
    pc : int or float, default 0.95
        Number of principal components, or the variance fraction they must
        explain.
    min_sel : int, default 5
        Stop once a pass keeps this many candidates or fewer.
    loop : int, optional
        1-based pass whose candidates become ``model``.  Without it
        ``model`` and ``test`` are None; inspect ``leverage`` and call
        ``result.select(loop)``.
    center, scale : bool
        PCA preprocessing flags.

    Returns
    -------
    result : PuchweinResult
    """
    params = PuchweinParams(
        k=k, pc=pc, min_sel=min_sel, loop=loop, center=center, scale=scale,
    )
    X, row_labels, _ = coerce_matrix(X)
    n_samples = X.shape[0]

    projection = project(X, pc=params.pc, center=params.center, scale=params.scale)
    Z = projection.whiten()
    n_pc = projection.n_components

    leverage = pairwise(Z, Z.mean(axis=0, keepdims=True)).ravel()
    order = np.argsort(-leverage, kind='stable').astype(np.int64)
    d_ini = params.k * max(n_pc - 2, 1)

    loops = []
    candidates = order
    m = 1
    while True:
        candidates = _puchwein_pass(Z, candidates, m * d_ini)
        loops.append(candidates)
        if len(candidates) <= params.min_sel:
            break
        m += 1

    n_sel = np.array([len(sel) for sel in loops], dtype=np.int64)
    obs = np.array([leverage[sel].sum() for sel in loops])
    theor = leverage.sum() * n_sel / n_samples
    trace = LeverageTrace(
        loop=np.arange(1, len(loops) + 1),
        removed=n_samples - n_sel,
        obs=obs,
        theor=theor,
        diff=obs - theor,
    )

    model = test = None
    if params.loop is not None:
        if params.loop > len(loops):
            raise InvalidArgument(
                f"loop={params.loop} but only {len(loops)} pass(es) were run."
            )
        model = loops[params.loop - 1]
        test = complement(model, n_samples)

    return PuchweinResult(
        model=model,
        test=test,
        pc=label_scores(Z, row_labels),
        loops=loops,
        leverage=trace,
        loop_selected=params.loop,
        n_samples=n_samples,
    )


class Puchwein(_SelectorBase):
    """
    Puchwein selector as a scikit-learn estimator.

    Parameters are those of :func:`puchwein`.  ``fit()`` always records the
    full trace in ``leverage_`` and ``loops_``; ``model_`` / ``test_`` are
    None unless ``loop`` is set.
    """

    def __init__(
        self,
        k=0.2,
        pc=0.95,
        min_sel=5,
        loop=None,
        center=True,
        scale=False,
    ):
        self.k = k
        self.pc = pc
        self.min_sel = min_sel
        self.loop = loop
        self.center = center
        self.scale = scale

    def _select(self, X):
        return puchwein(X, **self.get_params())

    def fit(self, X, y=None):
        super().fit(X, y)
        self.loops_ = self.result_.loops
        self.leverage_ = self.result_.leverage
        return self
