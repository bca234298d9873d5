"""Errors raised by the functional core."""


class ArgumentError(ValueError):
    """Raised when command-line input cannot be turned into parameters."""

    pass


class ArgumentParseError(ArgumentError):
    """Raised for a malformed or unrecognized value."""

    pass


class ValidationError(ArgumentError):
    """Raised for a well-formed value outside the accepted range."""

    pass


class InternalConsistencyError(RuntimeError):
    """Raised when an enum value reaches code with no case for it."""

    pass
