"""
_SelectorBase: shared estimator logic for the calsel selectors.

Subclasses implement ``_select(X)`` by calling their module's selection
function with the estimator's hyperparameters.  Everything else -- fitting,
fitted-attribute bookkeeping, scikit-learn parameter handling (``get_params``
/ ``set_params`` / ``clone``) -- lives here.

Constructor parameters are stored unmodified, as scikit-learn requires;
validation happens in ``fit()`` through the selector's params dataclass.
"""

from __future__ import annotations

import numpy as np
from sklearn.base import BaseEstimator

from ._errors import InvalidArgument


class _SelectorBase(BaseEstimator):
    """
    Base class for calibration-sample selectors.

    Fitted attributes
    -----------------
    result_ : SelectionResult (or subclass)
        Full output of the selection function.
    model_ : ndarray of int64
        Selected indices in selection order.
    test_ : ndarray of int64
        Complementary (or validation) indices.
    n_samples_fit_ : int
    n_features_in_ : int
    feature_names_in_ : ndarray of str
        Only set when ``X`` is a DataFrame.
    """

    # ------------------------------------------------------------------
    # Subclass interface
    # ------------------------------------------------------------------

    def _select(self, X):
        """Run the selection on ``X``.  Overridden by subclasses."""
        raise NotImplementedError(
            "_select must be implemented by a calsel selector."
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def fit(self, X, y=None):
        """
        Select samples from ``X``.

        Parameters
        ----------
        X : array-like or DataFrame (n_samples, n_features)
        y : ignored
            Selection is unsupervised; accepted for pipeline compatibility.

        Returns
        -------
        self
        """
        result = self._select(X)
        if hasattr(X, 'columns'):
            self.feature_names_in_ = np.asarray(X.columns, dtype=object)
        shape = np.shape(X)
        self.n_samples_fit_ = shape[0]
        self.n_features_in_ = shape[1]
        self.result_ = result
        self.model_ = result.model
        self.test_ = result.test
        return self

    def get_support(self, indices=False):
        """
        Rows chosen for calibration.

        Parameters
        ----------
        indices : bool, default False
            Return ``model_`` instead of a boolean mask over the fitted rows.
        """
        self._check_fitted()
        if self.model_ is None:
            raise InvalidArgument(
                "No calibration set was chosen during fit()."
            )
        if indices:
            return self.model_
        mask = np.zeros(self.n_samples_fit_, dtype=bool)
        mask[self.model_] = True
        return mask

    def _check_fitted(self):
        if not hasattr(self, 'result_'):
            raise ValueError("Selector must be fitted before calling this method.")
