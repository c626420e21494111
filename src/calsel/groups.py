"""
Grouped-observation handling.

A :class:`GroupPartition` maps every observation to exactly one group id.
Selectors use it to move whole groups at once, so that no group straddles
the calibration / validation boundary.
"""

from __future__ import annotations

import warnings

import numpy as np

from ._errors import ConfigurationError, InvalidArgument
from ._warnings import CalselGroupWarning


class GroupPartition:
    """
    Observation-index to group-id mapping.

    Parameters
    ----------
    labels : array-like (n_samples,)
        Group identifier of every observation.  Any hashable, sortable
        labels are accepted; they are factorised to integer codes.

    Attributes
    ----------
    labels : ndarray
        Distinct group labels, sorted.
    codes : ndarray of int64 (n_samples,)
        Position of each observation's label in ``labels``.
    """

    def __init__(self, labels):
        labels = np.asarray(labels)
        if labels.ndim != 1:
            raise InvalidArgument("group must be a 1-D sequence of labels.")
        self.labels, codes = np.unique(labels, return_inverse=True)
        self.codes = codes.astype(np.int64).ravel()

    def __len__(self):
        return len(self.codes)

    @property
    def n_groups(self) -> int:
        return len(self.labels)

    def check(self, n_samples):
        """Raise ConfigurationError unless the partition covers ``n_samples`` rows."""
        if len(self) != n_samples:
            raise ConfigurationError(
                f"length(group) should be equal to nrow(X): got {len(self)} "
                f"group labels for {n_samples} observations."
            )
        return self

    def expand(self, index) -> np.ndarray:
        """All observations sharing ``index``'s group, ``index`` included."""
        return np.flatnonzero(self.codes == self.codes[index])

    def expand_many(self, indices) -> np.ndarray:
        """Union of the groups of ``indices`` (sorted)."""
        indices = np.asarray(indices, dtype=np.int64)
        return np.flatnonzero(np.isin(self.codes, self.codes[indices]))


def coerce_groups(group, n_samples):
    """
    Normalise a ``group`` argument.

    Parameters
    ----------
    group : None, GroupPartition or array-like
    n_samples : int

    Returns
    -------
    GroupPartition or None

    Raises
    ------
    ConfigurationError
        On a length mismatch.
    """
    if group is None:
        return None
    if isinstance(group, GroupPartition):
        return group.check(n_samples)

    labels = np.asarray(group)
    if labels.ndim == 1 and not np.issubdtype(labels.dtype, np.integer):
        warnings.warn(
            "group labels are not integers; they have been coerced to "
            "integer group codes.",
            CalselGroupWarning,
            stacklevel=3,
        )
    return GroupPartition(labels).check(n_samples)


def expand_selection(indices, groups) -> np.ndarray:
    """
    Complete a selection with the remaining members of its groups.

    ``indices`` keep their order; group mates not already listed follow
    in ascending order.  Without a partition ``indices`` is returned as is.
    """
    indices = np.atleast_1d(np.asarray(indices, dtype=np.int64))
    if groups is None:
        return indices
    members = groups.expand_many(indices)
    extra = members[~np.isin(members, indices)]
    return np.concatenate([indices, extra])
