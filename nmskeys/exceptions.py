"""Custom exception hierarchy for nmskeys.

Exception Hierarchy:
    NmsKeysError (base)
    ├── DocumentLoadError - settings file missing, unreadable or not well-formed
    └── ConfigurationError - viewer preferences / config directory issues

Missing fields inside a single binding are never errors; the extractor
leaves them empty.

Usage:
    from nmskeys.exceptions import DocumentLoadError

    try:
        root = load_document(path)
    except DocumentLoadError as e:
        console.print(f"[red]{e}[/red]")
"""

from typing import Any, Optional


class NmsKeysError(Exception):
    """Base exception for all nmskeys errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., paths)
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# Document Errors
# =============================================================================


class DocumentLoadError(NmsKeysError):
    """The settings document could not be read or parsed."""

    def __init__(
        self,
        message: str = "Failed to load settings document",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = str(path)
        super().__init__(message, **context)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(NmsKeysError):
    """Configuration or settings error."""

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)
