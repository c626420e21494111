"""
Honigs calibration sample selection.

Works on the raw spectra rather than on distances.  Each iteration picks
the largest absolute absorbance left in the matrix; its row is a selected
sample and its column the "band used".  The selected spectrum is then
subtracted from every row, scaled so that the selected band becomes zero,
which removes the absorption feature it explains before the next pick.

Reference: Honigs D.E., Hieftje, G.M., Mark, H.L. and Hirschfeld, T.B.
1985. Unique-sample selection via Near-Infrared spectral subtraction.
Analytical Chemistry, 57, 2299-2303.
"""

from __future__ import annotations

import numpy as np

from .._base import _SelectorBase
from .._errors import InvalidArgument, NumericalError
from .._params import HonigsParams
from .._preprocessing import coerce_matrix
from .._results import HonigsResult, complement


def deflate(X, row, col) -> np.ndarray:
    """
    Subtract row ``row`` from every row, zeroing column ``col``.

    Each row ``i`` loses ``X[i, col] / X[row, col]`` times ``X[row]``.

    Raises
    ------
    NumericalError
        If the pivot ``X[row, col]`` is zero.
    """
    pivot = X[row, col]
    if pivot == 0.0:
        raise NumericalError(
            "Cannot deflate on a zero pivot: the remaining matrix is all zeros."
        )
    weights = X[:, col] / pivot
    return X - np.outer(weights, X[row])


def honigs(X, k=None, type='A') -> HonigsResult:
    """
    Select samples with the Honigs algorithm.

    Parameters
    ----------
    X : array-like or DataFrame (n_samples, n_features)
        Spectra, one per row.
    k : int
        Number of samples to select, at most ``min(n_samples, n_features)``.
    type : {'A', 'R'}, default 'A'
        ``'A'`` for absorbance; ``'R'`` for reflectance, converted with
        ``log(1 / R)`` first (values must be positive).

    Returns
    -------
    result : HonigsResult
        ``model`` in selection order and ``bands`` the column used at each
        step.
    """
    params = HonigsParams(k=k, type=type)
    X, _, _ = coerce_matrix(X)
    n_samples, n_features = X.shape

    if params.k > min(n_samples, n_features):
        raise InvalidArgument(
            f"k={params.k} exceeds min(n_samples, n_features)="
            f"{min(n_samples, n_features)}."
        )

    if params.type == 'R':
        if np.any(X <= 0):
            raise NumericalError("Reflectance values must be strictly positive.")
        A = np.log(1.0 / X)
    else:
        A = X.copy()

    rows = np.arange(n_samples, dtype=np.int64)
    cols = np.arange(n_features, dtype=np.int64)
    model = []
    bands = []
    for _ in range(params.k):
        r, c = np.unravel_index(int(np.argmax(np.abs(A))), A.shape)
        model.append(int(rows[r]))
        bands.append(int(cols[c]))
        A = deflate(A, r, c)
        A = np.delete(np.delete(A, r, axis=0), c, axis=1)
        rows = np.delete(rows, r)
        cols = np.delete(cols, c)

    model = np.array(model, dtype=np.int64)
    return HonigsResult(
        model=model,
        test=complement(model, n_samples),
        bands=np.array(bands, dtype=np.int64),
    )


class Honigs(_SelectorBase):
    """
    Honigs selector as a scikit-learn estimator.

    Parameters are those of :func:`honigs`.  ``bands_`` holds the column
    used for each selected sample.
    """

    def __init__(self, k=None, type='A'):
        self.k = k
        self.type = type

    def _select(self, X):
        return honigs(X, **self.get_params())

    def fit(self, X, y=None):
        super().fit(X, y)
        self.bands_ = self.result_.bands
        return self
