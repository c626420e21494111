"""
calsel: calibration sample selection
====================================

Choose representative subsets of a multivariate data set (typically NIR
spectra) for calibration and validation, using only the geometry of the
predictor space.

Primary API
-----------
    from calsel import ken_stone, duplex, KennardStone

    sel = ken_stone(X, k=30, metric='mahal', pc=0.99)
    X_cal, X_val = X[sel.model], X[sel.test]

    pair = duplex(X, k=15, metric='euclid')     # two balanced sets
    ks = KennardStone(k=30).fit(X)              # scikit-learn estimator

Algorithms
----------
- ``ken_stone`` / ``KennardStone`` -- Kennard-Stone (CADEX), max-min
- ``duplex`` / ``Duplex`` -- DUPLEX, two disjoint max-min sets
- ``puchwein`` / ``Puchwein`` -- leverage-ordered radius pruning
- ``shenk_west`` / ``ShenkWest`` -- SELECT, neighbourhood density
- ``honigs`` / ``Honigs`` -- spectral subtraction
- ``naes`` / ``Naes`` -- one sample per k-means cluster

Shared infrastructure: ``project`` (PCA), ``Metric`` and the distance
helpers, ``GroupPartition`` for observations that must stay together.
"""

from ._errors import CalselError, InvalidArgument, ConfigurationError, NumericalError
from ._warnings import CalselWarning, CalselClampWarning, CalselGroupWarning
from ._params import (
    KennardStoneParams,
    DuplexParams,
    PuchweinParams,
    ShenkWestParams,
    HonigsParams,
    NaesParams,
)
from ._results import (
    SelectionResult,
    DuplexResult,
    PuchweinResult,
    LeverageTrace,
    ShenkWestResult,
    HonigsResult,
    NaesResult,
)
from .distance import Metric, RunningMinimum, pairwise
from .projection import Projection, project
from .groups import GroupPartition
from .selectors import (
    KennardStone,
    ken_stone,
    Duplex,
    duplex,
    Puchwein,
    puchwein,
    ShenkWest,
    shenk_west,
    Honigs,
    honigs,
    Naes,
    naes,
    BUILTIN_SELECTORS,
    get_selector,
)

__version__ = '0.1.0'

__all__ = [
    # Selection functions
    'ken_stone',
    'duplex',
    'puchwein',
    'shenk_west',
    'honigs',
    'naes',
    # Estimators
    'KennardStone',
    'Duplex',
    'Puchwein',
    'ShenkWest',
    'Honigs',
    'Naes',
    'BUILTIN_SELECTORS',
    'get_selector',
    # Operation params
    'KennardStoneParams',
    'DuplexParams',
    'PuchweinParams',
    'ShenkWestParams',
    'HonigsParams',
    'NaesParams',
    # Results
    'SelectionResult',
    'DuplexResult',
    'PuchweinResult',
    'LeverageTrace',
    'ShenkWestResult',
    'HonigsResult',
    'NaesResult',
    # Infrastructure
    'Metric',
    'RunningMinimum',
    'pairwise',
    'Projection',
    'project',
    'GroupPartition',
    # Errors and warnings
    'CalselError',
    'InvalidArgument',
    'ConfigurationError',
    'NumericalError',
    'CalselWarning',
    'CalselClampWarning',
    'CalselGroupWarning',
]
