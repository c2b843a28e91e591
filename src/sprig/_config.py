"""Process-wide settings for diagnostic printing.

The limits used when summarizing sequences in error messages are shared by
every diagnostic call site. They default to small values suited to one-line
messages and can be tuned through the environment:

    SPRIG_LIST_ELEMENTS_COUNT    maximum number of elements shown
    SPRIG_LIST_ELEMENTS_LENGTH   maximum characters in the summary

Public API
----------
print_limits()              → PrintLimits currently in effect
set_print_limits(...)       → override limits for this process
reset_print_limits()        → drop overrides, re-read the environment
"""

__all__ = ["PrintLimits", "print_limits", "set_print_limits", "reset_print_limits"]

import os
from dataclasses import dataclass

import sprig


DEFAULT_LIST_ELEMENTS_COUNT = 4
DEFAULT_LIST_ELEMENTS_LENGTH = 32

ENV_LIST_ELEMENTS_COUNT = "SPRIG_LIST_ELEMENTS_COUNT"
ENV_LIST_ELEMENTS_LENGTH = "SPRIG_LIST_ELEMENTS_LENGTH"


@dataclass(frozen=True)
class PrintLimits:
    """Truncation thresholds for abbreviated sequence printing.

    Attributes:
        max_count: (int) Most elements rendered before truncating
        max_length: (int) Most characters in the rendered summary
    """
    max_count: int = DEFAULT_LIST_ELEMENTS_COUNT
    max_length: int = DEFAULT_LIST_ELEMENTS_LENGTH

    def __post_init__(self):
        for name in ("max_count", "max_length"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise sprig.ConfigError(
                    f"{name} must be an integer, got {type(value).__name__}"
                )
        if self.max_count < 0:
            raise sprig.ConfigError(f"max_count must not be negative, got {self.max_count}")
        if self.max_length < 0:
            raise sprig.ConfigError(f"max_length must not be negative, got {self.max_length}")


_override = None


def _env_int(name, default):
    """Read a non-negative integer from the environment."""
    text = os.environ.get(name)
    if text is None or not text.strip():
        return default
    try:
        return int(text)
    except ValueError:
        raise sprig.ConfigError(f"{name} must be an integer, got {text!r}") from None


def print_limits():
    """Get the abbreviation limits currently in effect.

    Explicit overrides from `set_print_limits` win over the environment.

    Returns:
        (PrintLimits) Active limits
    """
    if _override is not None:
        return _override
    return PrintLimits(
        max_count=_env_int(ENV_LIST_ELEMENTS_COUNT, DEFAULT_LIST_ELEMENTS_COUNT),
        max_length=_env_int(ENV_LIST_ELEMENTS_LENGTH, DEFAULT_LIST_ELEMENTS_LENGTH),
    )


def set_print_limits(max_count=None, max_length=None):
    """Override the abbreviation limits for this process.

    Args:
        max_count: (int | None) New element limit, or keep the current one
        max_length: (int | None) New length limit, or keep the current one

    Returns:
        (PrintLimits) The previous limits, handy for restoring
    """
    global _override
    previous = print_limits()
    _override = PrintLimits(
        max_count=previous.max_count if max_count is None else max_count,
        max_length=previous.max_length if max_length is None else max_length,
    )
    return previous


def reset_print_limits():
    """Forget overrides so limits come from the environment again."""
    global _override
    _override = None
