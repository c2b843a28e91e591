"""Error classes and helpers"""

__all__ = ["SprigError", "EvalError", "ValidationError", "ConfigError"]


class SprigError(Exception):
    """Base class for errors raised by sprig.

    Args:
        message: (str) Error description
        position: (SourcePosition | None) Where the failing node came from

    Attributes:
        message: (str) Error description
        position: (SourcePosition | None) Source position of the failing node
    """

    def __init__(self, message, position=None):
        self.message = message
        self.position = position
        super().__init__(message)

    def __str__(self):
        if self.position is None:
            return self.message
        location = str(self.position)
        if not location:
            return self.message
        return f"{location}: {self.message}"


class EvalError(SprigError):
    """Error while evaluating an expression."""


class ValidationError(SprigError):
    """Error found by the static validation pass."""


class ConfigError(SprigError):
    """Invalid configuration value."""
