"""Cooperative cancellation for long running evaluations."""

__all__ = ["CancelToken", "Cancelled"]

import threading
import time


class Cancelled(Exception):
    """Evaluation was stopped by its host.

    This is intentionally not a `SprigError`. Handlers that deal with
    evaluation failures must never absorb a cancellation.

    Attributes:
        reason: (str) Why the evaluation was stopped
    """

    def __init__(self, reason="evaluation cancelled"):
        self.reason = reason
        super().__init__(reason)


class CancelToken:
    """Shared flag the host raises to stop an evaluation.

    The engine calls `check` before evaluating every node. The token may be
    cancelled from another thread; the evaluating thread notices it at the
    next node boundary.

    Args:
        deadline: (float | None) Seconds from now after which the token
            counts as cancelled
    """

    def __init__(self, deadline=None):
        self._event = threading.Event()
        self._reason = None
        self._expires = None
        if deadline is not None:
            self._expires = time.monotonic() + deadline

    def cancel(self, reason="evaluation cancelled"):
        """Request cancellation. The first reason given is kept."""
        if self._reason is None:
            self._reason = reason
        self._event.set()

    @property
    def cancelled(self):
        """(bool) True once cancellation is pending."""
        if self._event.is_set():
            return True
        if self._expires is not None and time.monotonic() >= self._expires:
            self.cancel("deadline exceeded")
            return True
        return False

    def check(self):
        """Raise `Cancelled` if cancellation is pending."""
        if self.cancelled:
            raise Cancelled(self._reason)

    def __repr__(self):
        state = "cancelled" if self._event.is_set() else "active"
        return f"CancelToken({state})"
