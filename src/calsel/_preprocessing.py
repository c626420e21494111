"""
Input coercion utilities for calsel.

All functions are pure (no class state).  Selectors delegate to them so that
validation is independently testable and the selector modules stay focused
on the selection loops.
"""

from __future__ import annotations

import numpy as np

from ._errors import InvalidArgument


def coerce_matrix(X_raw, min_features=1):
    """
    Coerce input data to a float64 matrix, remembering any labels.

    Parameters
    ----------
    X_raw : array-like or DataFrame (n_samples, n_features)
    min_features : int, default 1
        Minimum number of columns required.

    Returns
    -------
    X : ndarray (n_samples, n_features)
    row_labels : Index or None
        DataFrame index, when ``X_raw`` is a DataFrame.
    feature_names_in : list or None
        DataFrame column labels, when ``X_raw`` is a DataFrame.
    """
    if hasattr(X_raw, 'columns'):
        feature_names_in = list(X_raw.columns)
        row_labels = X_raw.index
    else:
        feature_names_in = None
        row_labels = None

    try:
        X = np.asarray(X_raw, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"X must be numeric: {exc}") from exc

    if X.ndim != 2:
        raise InvalidArgument(
            f"X must be a 2-D matrix, got an array with {X.ndim} dimension(s)."
        )
    if X.shape[1] < min_features:
        raise InvalidArgument(f"'X' must have at least {min_features} columns")
    if X.shape[0] < 2:
        raise InvalidArgument("'X' must have at least 2 rows")
    if not np.all(np.isfinite(X)):
        raise InvalidArgument("X contains missing or non-finite values.")

    return X, row_labels, feature_names_in


def label_scores(scores, row_labels):
    """
    Attach row labels to a score matrix.

    Returns ``scores`` unchanged when the input carried no labels, otherwise
    a DataFrame indexed like the input with columns ``PC1..PCp``.
    """
    if row_labels is None:
        return scores
    import pandas as pd

    columns = [f'PC{i + 1}' for i in range(scores.shape[1])]
    return pd.DataFrame(scores, index=row_labels, columns=columns)


def check_indices(indices, n_samples, name):
    """
    Validate a user-supplied index set and return it as an int64 array.

    Raises
    ------
    InvalidArgument
        On duplicates, out-of-range or non-integer entries.
    """
    arr = np.asarray(indices)
    if arr.ndim != 1:
        raise InvalidArgument(f"{name} must be a 1-D sequence of row indices.")
    if arr.size and not np.issubdtype(arr.dtype, np.integer):
        raise InvalidArgument(f"{name} must contain integer row indices.")
    arr = arr.astype(np.int64)
    if arr.size and (arr.min() < 0 or arr.max() >= n_samples):
        raise InvalidArgument(
            f"{name} contains indices outside [0, {n_samples - 1}]."
        )
    if len(np.unique(arr)) != len(arr):
        raise InvalidArgument(f"{name} contains duplicated indices.")
    return arr
