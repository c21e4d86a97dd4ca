"""Exception hierarchy for the calibration pipeline.

Every failure raised by ``gravcal`` derives from ``CalibrationError`` so the
command-line front end can report any stage's failure with a single
``except`` clause. The concrete classes also inherit from the closest
built-in exception (``ValueError`` or ``ArithmeticError``) so that callers
using the library directly can catch them the usual way.

None of these errors are recoverable: the pipeline is a single linear run
and the first failure aborts it.
"""

__all__ = [
    "CalibrationError",
    "ConfigurationError",
    "DomainError",
    "EmptyEpochSetError",
    "EmptyInputError",
    "IngestionError",
    "InvalidIterationCountError",
    "InvalidThresholdError",
    "MissingInputError",
]


class CalibrationError(Exception):
    """Base class for every error raised by the calibration pipeline."""


class ConfigurationError(CalibrationError, ValueError):
    """A run-scoped configuration value is missing or out of range."""


class MissingInputError(ConfigurationError):
    """No input source identifier was given."""


class InvalidThresholdError(ConfigurationError):
    """The noise threshold is not a positive real number."""


class InvalidIterationCountError(ConfigurationError):
    """The iteration count is not a positive integer."""


class IngestionError(CalibrationError):
    """The input source is unreadable or holds malformed rows."""


class EmptyEpochSetError(CalibrationError, ValueError):
    """A stage that needs at least one epoch received none."""


# Name used by the filter and estimator contracts.
EmptyInputError = EmptyEpochSetError


class DomainError(CalibrationError, ArithmeticError):
    """A numeric operation was asked to leave its domain.

    Raised when an epoch's mean gravity magnitude equals the nominal
    gravitational constant exactly, which would divide by zero in the
    epoch weight.
    """
