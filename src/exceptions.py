"""
NodeClass Exception Classes

Typed errors raised while resolving NodeClass objects from an object store.
The converter itself never raises; every error here originates at the store
boundary and reaches the caller unchanged.
"""

from typing import Any


class NodeClassError(Exception):
    """Base exception for all NodeClass resolution errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.context = context or {}

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.error_code:
            base_msg = f"[{self.error_code}] {base_msg}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg = f"{base_msg} (Context: {context_str})"
        return base_msg


class NotFoundError(NodeClassError):
    """Raised when no object of the requested kind exists under a name."""

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(
            f"{kind} '{name}' not found",
            "NOT_FOUND",
            {"kind": kind, "name": name},
        )
        self.kind = kind
        self.name = name


class StoreError(NodeClassError):
    """Raised when the store cannot serve a read (I/O, parse, validation)."""

    def __init__(
        self,
        message: str,
        kind: str | None = None,
        name: str | None = None,
    ) -> None:
        context = {}
        if kind:
            context["kind"] = kind
        if name:
            context["name"] = name
        super().__init__(message, "STORE_ERROR", context)

    def get_recovery_hint(self) -> str:
        """Provide a helpful hint for fixing the store error."""
        if "name" in self.context:
            return (
                f"Check that the manifest for '{self.context['name']}' is valid "
                "and readable"
            )
        return "Check that the manifest directory is readable and well formed"


class ContextCancelledError(NodeClassError):
    """Raised when a request context is cancelled or its deadline expires."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            f"Request aborted: {reason}", "CONTEXT_CANCELLED", {"reason": reason}
        )
        self.reason = reason
