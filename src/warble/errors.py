"""Warble exception hierarchy.

Shared across the store, bindings, actions, and proxies so every module
raises and catches the same types.
"""


class WarbleError(Exception):
    """Base for all warble-specific errors."""


class ConfigurationError(WarbleError):
    """Raised when setup is invalid.

    Typically raised while binding operations, registering routes, or
    building a store, never while dispatching.
    """


class NoMatchingRoute(WarbleError):  # noqa: N818 — mirrors the HTTP "not found" naming
    """A simulated backend has no route for the requested address.

    This is a setup defect, not a runtime condition: imperative operations
    let it propagate instead of turning it into state.
    """

    def __init__(self, kind: str, address: str) -> None:
        self.kind = kind
        self.address = address
        super().__init__(f"No matching route for {kind} {address!r}")


class ServiceError(WarbleError):
    """A proxy call failed.

    Raised by both the simulated and the HTTP backend. ``status`` is the
    HTTP status code when the failure came from a response, ``None`` for
    transport failures and simulated rejections.
    """

    def __init__(self, detail: str, status: int | None = None) -> None:
        self.detail = detail
        self.status = status
        super().__init__(detail)

    @property
    def message(self) -> str:
        """Human-readable description stored in state on failure."""
        if self.status is not None:
            return f"{self.status}: {self.detail}"
        return self.detail
