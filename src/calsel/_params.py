"""
Operation parameter containers for calsel.

One dataclass per selector.  They serve two purposes:

1. Validation: every selector function builds its params object first, so
   argument errors surface before any numerical work::

       ken_stone(X, k=1)   # InvalidArgument raised by KennardStoneParams

2. Reusable parameter sets for direct use::

       params = KennardStoneParams(k=30, metric='euclid', pc=0.99)
       result = ken_stone(X, **vars(params))
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral, Real
from typing import Any, Optional, Sequence, Union

from ._errors import InvalidArgument
from .distance import Metric


def _check_count(name, value, minimum):
    if value is None:
        raise InvalidArgument(f"'{name}' must be specified")
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidArgument(f"'{name}' must be an integer, got {value!r}.")
    if value < minimum:
        raise InvalidArgument(
            f"Invalid argument: '{name}' must be at least {minimum}, got {value}."
        )


def _check_pc(pc):
    if pc is None:
        return
    if isinstance(pc, bool) or not isinstance(pc, Real) or pc <= 0:
        raise InvalidArgument(
            f"pc must be an integer >= 1 or a fraction in (0, 1), got {pc!r}."
        )


@dataclass
class KennardStoneParams:
    """
    Parameters for ken_stone().

    Parameters
    ----------
    k : int
        Number of calibration samples (>= 2).
    metric : {'mahal', 'euclid'}, default 'mahal'
    pc : int or float, optional
        Work in principal-component space (count or variance fraction).
    group : array-like or GroupPartition, optional
        Observations sharing a label are selected together.
    init : sequence of int, optional
        Indices forced into the calibration set before the search starts.
    center, scale : bool
        PCA preprocessing flags.
    """

    k: Optional[int] = None
    metric: Union[str, Metric] = 'mahal'
    pc: Optional[float] = None
    group: Any = None
    init: Optional[Sequence[int]] = None
    center: bool = True
    scale: bool = False

    def __post_init__(self):
        _check_count('k', self.k, 2)
        self.metric = Metric.parse(self.metric)
        _check_pc(self.pc)


@dataclass
class DuplexParams:
    """
    Parameters for duplex().

    Parameters
    ----------
    k : int
        Size of each of the two selected sets (>= 2).
    metric : {'mahal', 'euclid'}, default 'mahal'
    pc : int or float, optional
    group : array-like or GroupPartition, optional
    center, scale : bool
    """

    k: Optional[int] = None
    metric: Union[str, Metric] = 'mahal'
    pc: Optional[float] = None
    group: Any = None
    center: bool = True
    scale: bool = False

    def __post_init__(self):
        _check_count('k', self.k, 2)
        self.metric = Metric.parse(self.metric)
        _check_pc(self.pc)


@dataclass
class PuchweinParams:
    """
    Parameters for puchwein().

    Parameters
    ----------
    k : float, default 0.2
        Initial limiting-distance factor, in (0, 1].
    pc : int or float, default 0.95
    min_sel : int, default 5
        Passes stop once a pass keeps ``min_sel`` candidates or fewer.
    loop : int, optional
        1-based pass whose candidates become the calibration set.
    center, scale : bool
    """

    k: float = 0.2
    pc: float = 0.95
    min_sel: int = 5
    loop: Optional[int] = None
    center: bool = True
    scale: bool = False

    def __post_init__(self):
        if isinstance(self.k, bool) or not isinstance(self.k, Real) or not 0 < self.k <= 1:
            raise InvalidArgument(f"'k' must be in (0, 1], got {self.k!r}.")
        _check_pc(self.pc)
        _check_count('min_sel', self.min_sel, 1)
        if self.loop is not None:
            _check_count('loop', self.loop, 1)


@dataclass
class ShenkWestParams:
    """
    Parameters for shenk_west().

    Parameters
    ----------
    d_min : float
        Neighbourhood radius in (dimension-normalised) Mahalanobis units.
    pc : int or float, default 0.95
    threshold : float, default 0.6
        Selection stops once the remaining fraction of the population falls
        below this value.
    rm_outlier : bool, default False
        Drop observations with normalised leverage above 3 first.
    center, scale : bool
    """

    d_min: Optional[float] = None
    pc: float = 0.95
    threshold: float = 0.6
    rm_outlier: bool = False
    center: bool = True
    scale: bool = False

    def __post_init__(self):
        if self.d_min is None:
            raise InvalidArgument("'d_min' must be specified")
        if isinstance(self.d_min, bool) or not isinstance(self.d_min, Real) or self.d_min <= 0:
            raise InvalidArgument(f"'d_min' must be positive, got {self.d_min!r}.")
        _check_pc(self.pc)
        if not 0 <= self.threshold <= 1:
            raise InvalidArgument(
                f"'threshold' must be in [0, 1], got {self.threshold!r}."
            )


_HONIGS_TYPES = {
    'a': 'A', 'absorbance': 'A',
    'r': 'R', 'reflectance': 'R',
}


@dataclass
class HonigsParams:
    """
    Parameters for honigs().

    Parameters
    ----------
    k : int
        Number of samples to select (>= 1).
    type : {'A', 'R'}, default 'A'
        Absorbance or reflectance data; reflectance is converted to
        ``log(1 / R)``.
    """

    k: Optional[int] = None
    type: str = 'A'

    def __post_init__(self):
        _check_count('k', self.k, 1)
        key = str(self.type).lower()
        if key not in _HONIGS_TYPES:
            raise InvalidArgument(
                f"Unknown type: {self.type!r}. Use 'A' (absorbance) or "
                "'R' (reflectance)."
            )
        self.type = _HONIGS_TYPES[key]


_NAES_METHODS = {
    0: 0, 'nearest': 0,
    1: 1, 'farthest': 1,
    2: 2, 'random': 2,
}


@dataclass
class NaesParams:
    """
    Parameters for naes().

    Parameters
    ----------
    k : int
        Number of clusters / samples (>= 2).
    pc : int or float, optional
    iter_max : int, default 10
        Maximum k-means iterations.
    method : {0, 1, 2} or {'nearest', 'farthest', 'random'}, default 0
        0: sample closest to each cluster centre;
        1: sample of each cluster farthest from the data centre;
        2: random sample of each cluster.
    center, scale : bool
    random_state : int, optional
    """

    k: Optional[int] = None
    pc: Optional[float] = None
    iter_max: int = 10
    method: Union[int, str] = 0
    center: bool = True
    scale: bool = False
    random_state: Optional[int] = None

    def __post_init__(self):
        _check_count('k', self.k, 2)
        _check_pc(self.pc)
        _check_count('iter_max', self.iter_max, 1)
        key = self.method.lower() if isinstance(self.method, str) else self.method
        if isinstance(key, bool) or key not in _NAES_METHODS:
            raise InvalidArgument(
                f"Unknown method: {self.method!r}. Use 0 ('nearest'), "
                "1 ('farthest') or 2 ('random')."
            )
        self.method = _NAES_METHODS[key]
