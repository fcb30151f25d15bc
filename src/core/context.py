"""Request context threaded from callers down to the object store."""

import threading
import time
from dataclasses import dataclass, field

from src.exceptions import ContextCancelledError


@dataclass
class RequestContext:
    """
    Cancellation and deadline carrier for a single store read.

    The context is shared between the caller, which may cancel it from any
    thread, and the store, which checks it before doing work. Nothing in
    between may swallow the resulting ``ContextCancelledError``.
    """

    deadline: float | None = None
    _cancelled: threading.Event = field(
        default_factory=threading.Event, init=False, repr=False
    )

    @classmethod
    def background(cls) -> "RequestContext":
        """Context that is never cancelled and has no deadline."""
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float) -> "RequestContext":
        """Context whose deadline expires ``seconds`` from now."""
        return cls(deadline=time.monotonic() + seconds)

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline

    def raise_if_done(self) -> None:
        """Raise ContextCancelledError if cancelled or past the deadline."""
        if self.cancelled:
            raise ContextCancelledError("context cancelled")
        if self.expired:
            raise ContextCancelledError("deadline exceeded")
