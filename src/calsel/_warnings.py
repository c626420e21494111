"""
calsel warning class hierarchy.

All calsel-specific warnings inherit from ``CalselWarning`` so callers can
suppress the entire family with a single filter::

    import warnings
    from calsel import CalselWarning
    warnings.filterwarnings('ignore', category=CalselWarning)

Individual sub-classes can also be targeted::

    from calsel import CalselClampWarning
    warnings.filterwarnings('ignore', category=CalselClampWarning)
"""


class CalselWarning(UserWarning):
    """Base class for all calsel warnings."""


class CalselClampWarning(CalselWarning):
    """
    Warning emitted when a requested sample count cannot be honoured and is
    clamped to the largest admissible value (e.g. ``k >= n_samples``).
    """


class CalselGroupWarning(CalselWarning):
    """
    Warning emitted when group labels are not integer codes and have been
    factorised (mapped to consecutive integer group ids).
    """
