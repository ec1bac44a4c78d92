from __future__ import annotations

from typing import Any, Dict, Mapping


class PlugconfError(Exception):
    """Base exception for plugconf."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class ResourceError(PlugconfError):
    """Base class for configuration source problems.

    Loaders never propagate these to their callers; they are logged and the
    affected source contributes nothing.
    """

    def __init__(
        self,
        message: str,
        *,
        resource: str | None = None,
        sources: list[str] | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        if resource:
            ctx["resource"] = resource
        if sources:
            ctx["sources"] = list(sources)
        super().__init__(message, context=ctx)


class ResourceNotFoundError(ResourceError, FileNotFoundError):
    """No file or search-path resource matched the requested name."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        ResourceError.__init__(self, message, **kwargs)
        FileNotFoundError.__init__(self, message)


class AmbiguousResourceError(ResourceError):
    """More than one resource matched where exactly one was expected."""


class ReadFailureError(ResourceError, OSError):
    """Reading or decoding a single source failed."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        ResourceError.__init__(self, message, **kwargs)
        OSError.__init__(self, message)


class ConfigValidationError(PlugconfError, ValueError):
    """Raised when the merged plugconf configuration fails schema validation."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        PlugconfError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


__all__ = [
    "PlugconfError",
    "ResourceError",
    "ResourceNotFoundError",
    "AmbiguousResourceError",
    "ReadFailureError",
    "ConfigValidationError",
]
