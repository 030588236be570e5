class DrsaError(Exception):
    """Base class for errors raised by the approximation engine."""


class InvalidValueError(DrsaError, ValueError):
    """A value given at construction time breaks a precondition."""


class InvalidTypeError(InvalidValueError, TypeError):
    """An attribute (or other object) has a type that cannot be used in the given role."""


class InvalidSizeError(InvalidValueError):
    """A collection is too small (or too big) for the requested computation."""


class NullArgumentError(DrsaError, TypeError):
    """A required argument is ``None``."""


class UnsupportedOperationError(DrsaError, NotImplementedError):
    """The operation is not defined for the given configuration, or was called too early."""
