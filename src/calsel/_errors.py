"""
calsel exception hierarchy.

Every error raised by the selectors derives from ``CalselError``.  The
concrete classes also inherit from the matching builtin so existing
``except ValueError`` handlers (scikit-learn, pipelines) keep working.

- ``InvalidArgument`` -- bad parameter value, unknown metric or type,
  mismatched dimensions.
- ``ConfigurationError`` -- group partition does not match the data.
- ``NumericalError`` -- degenerate input that makes PCA whitening or
  deflation impossible (zero variance, zero pivot).
"""


class CalselError(Exception):
    """Base class for all calsel errors."""


class InvalidArgument(CalselError, ValueError):
    """A parameter is missing, out of range or not recognised."""


class ConfigurationError(CalselError, ValueError):
    """The grouping supplied does not fit the sample matrix."""


class NumericalError(CalselError, ArithmeticError):
    """The data is numerically degenerate for the requested operation."""
