"""Exception types raised by the aggregate engine."""


class AggregateError(Exception):
    """Base class for aggregate errors."""


class InvalidConfiguration(AggregateError, ValueError):
    """Raised when histogram scheme parameters are inconsistent."""


class InvalidArgument(AggregateError, ValueError):
    """Raised when an operation receives an unsupported argument."""


class InternalInvariantViolation(AggregateError, AssertionError):
    """Raised when a value has no covering bucket inside the scheme range."""
