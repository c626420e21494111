"""
Result containers returned by the selectors.

All results are frozen dataclasses holding plain arrays; they keep no
reference to the selector's working state.  Indices are 0-based row
positions into the input matrix.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

import numpy as np

from ._errors import InvalidArgument


def complement(model, n_samples) -> np.ndarray:
    """Ascending indices of ``range(n_samples)`` not in ``model``."""
    mask = np.ones(n_samples, dtype=bool)
    mask[np.asarray(model, dtype=np.int64)] = False
    return np.flatnonzero(mask).astype(np.int64)


@dataclass(frozen=True)
class SelectionResult:
    """
    Calibration / test split.

    Attributes
    ----------
    model : ndarray of int64
        Selected indices, in selection order.
    test : ndarray of int64
        Remaining indices, ascending.
    pc : ndarray, DataFrame or None
        Score matrix the selection ran on, when a projection was requested.
    """
    model: np.ndarray
    test: np.ndarray
    pc: Any = None


@dataclass(frozen=True)
class DuplexResult(SelectionResult):
    """
    DUPLEX output.

    ``model`` and ``test`` are both selected sets of (near) equal size;
    ``unselected`` holds the indices neither set took.
    """
    unselected: np.ndarray = field(default_factory=lambda: np.empty(0, dtype=np.int64))


@dataclass(frozen=True)
class ShenkWestResult(SelectionResult):
    """SELECT output; ``removed_outliers`` lists rows dropped before selection."""
    removed_outliers: np.ndarray = field(default_factory=lambda: np.empty(0, dtype=np.int64))


@dataclass(frozen=True)
class HonigsResult(SelectionResult):
    """Honigs output; ``bands[i]`` is the column used to pick ``model[i]``."""
    bands: np.ndarray = field(default_factory=lambda: np.empty(0, dtype=np.int64))


@dataclass(frozen=True)
class NaesResult(SelectionResult):
    """k-means selection output with cluster labels and centres."""
    cluster: Optional[np.ndarray] = None
    centers: Optional[np.ndarray] = None


@dataclass(frozen=True)
class LeverageTrace:
    """
    Per-pass Puchwein diagnostics (one entry per pass, 1-based ``loop``).

    ``obs`` is the summed leverage of the pass's candidates, ``theor`` the
    sum expected if candidates had average leverage; a large ``diff``
    indicates a pass that favours extreme samples.
    """
    loop: np.ndarray
    removed: np.ndarray
    obs: np.ndarray
    theor: np.ndarray
    diff: np.ndarray

    def __len__(self):
        return len(self.loop)

    def to_frame(self):
        """Return the trace as a pandas DataFrame."""
        import pandas as pd

        return pd.DataFrame({
            'loop': self.loop,
            'removed': self.removed,
            'obs': self.obs,
            'theor': self.theor,
            'diff': self.diff,
        })


@dataclass(frozen=True)
class PuchweinResult(SelectionResult):
    """
    Puchwein output.

    ``loops[m - 1]`` holds the candidates of pass ``m``.  ``model`` / ``test``
    are only populated when a pass was chosen (``loop_selected``); otherwise
    call :meth:`select` after inspecting ``leverage``.
    """
    loops: List[np.ndarray] = field(default_factory=list)
    leverage: Optional[LeverageTrace] = None
    loop_selected: Optional[int] = None
    n_samples: int = 0

    def select(self, loop: int) -> SelectionResult:
        """Return the calibration / test split of pass ``loop`` (1-based)."""
        if not 1 <= loop <= len(self.loops):
            raise InvalidArgument(
                f"loop must be in [1, {len(self.loops)}], got {loop!r}."
            )
        model = self.loops[loop - 1]
        return SelectionResult(
            model=model, test=complement(model, self.n_samples), pc=self.pc
        )
