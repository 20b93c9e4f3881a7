from __future__ import annotations

from typing import Any, Dict, Mapping


class ReactorViewError(Exception):
    """Base exception for reactorview."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
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


class ConfigurationError(ReactorViewError, ValueError):
    """Raised when view options or configuration files are malformed."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ReactorViewError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class ReactorError(ReactorViewError):
    """Raised when the reactor cannot be discovered or loaded."""


class ReactorNotFoundError(ReactorError, FileNotFoundError):
    """Raised when the root descriptor of a reactor does not exist."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ReactorError.__init__(self, message, context=context)
        FileNotFoundError.__init__(self, message)


class ProjectSelectionError(ReactorError, ValueError):
    """Raised when a project selector does not match any reactor component."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ReactorError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class DescriptorWriteError(ReactorViewError, OSError):
    """Raised when a view descriptor cannot be persisted."""

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        if path:
            ctx.setdefault("path", path)
        ReactorViewError.__init__(self, message, context=ctx)
        OSError.__init__(self, message)
        self.path = path


__all__ = [
    "ReactorViewError",
    "ConfigurationError",
    "ReactorError",
    "ReactorNotFoundError",
    "ProjectSelectionError",
    "DescriptorWriteError",
]
