"""
calsel.selectors -- calibration sample selection algorithms.

Each module provides a selection function and the matching estimator::

    from calsel.selectors import ken_stone, KennardStone
    from calsel.selectors.duplex import duplex, Duplex

Estimators can also be looked up by name with :func:`get_selector`.
"""

from .._errors import InvalidArgument
from .kennard_stone import KennardStone, ken_stone
from .duplex import Duplex, duplex
from .puchwein import Puchwein, puchwein
from .shenk_west import ShenkWest, shenk_west
from .honigs import Honigs, honigs, deflate
from .naes import Naes, naes


# 'ks' and 'cadex' are aliases for kennard_stone, 'select' for shenk_west
BUILTIN_SELECTORS = {
    'kennard_stone': KennardStone,
    'ks': KennardStone,
    'cadex': KennardStone,
    'duplex': Duplex,
    'puchwein': Puchwein,
    'shenk_west': ShenkWest,
    'select': ShenkWest,
    'honigs': Honigs,
    'naes': Naes,
    'kmeans': Naes,
}


def get_selector(selector_name: str):
    """
    Get a built-in selector class by name.

    Parameters
    ----------
    selector_name : str
        One of: ``'kennard_stone'`` (``'ks'``, ``'cadex'``), ``'duplex'``,
        ``'puchwein'``, ``'shenk_west'`` (``'select'``), ``'honigs'``,
        ``'naes'`` (``'kmeans'``).

    Returns
    -------
    selector : type
        A :class:`~calsel._base._SelectorBase` subclass.

    Raises
    ------
    InvalidArgument
        If selector_name is not recognised.
    """
    if selector_name not in BUILTIN_SELECTORS:
        raise InvalidArgument(
            f"Unknown selector: {selector_name!r}. "
            f"Available selectors: {list(BUILTIN_SELECTORS.keys())}"
        )
    return BUILTIN_SELECTORS[selector_name]


__all__ = [
    'KennardStone', 'ken_stone',
    'Duplex', 'duplex',
    'Puchwein', 'puchwein',
    'ShenkWest', 'shenk_west',
    'Honigs', 'honigs', 'deflate',
    'Naes', 'naes',
    'BUILTIN_SELECTORS',
    'get_selector',
]
