"""
Exception hierarchy for docsguard.

All exceptions inherit from DocsGuardError for easy catching.
"""

from __future__ import annotations


class DocsGuardError(Exception):
    """Base exception for all docsguard errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigError(DocsGuardError):
    """Raised when configuration or the repository layout is invalid."""

    def __init__(self, message: str, config_key: str | None = None) -> None:
        super().__init__(message, {"config_key": config_key})
        self.config_key = config_key


class ManifestNotFoundError(DocsGuardError):
    """Raised when no tool manifest source is available."""


class ManifestParseError(DocsGuardError):
    """Raised when a tool manifest cannot be read or parsed."""

    def __init__(self, message: str, source: str | None = None, line: int | None = None) -> None:
        super().__init__(message, {"source": source, "line": line})
        self.source = source
        self.line = line


class ManifestFetchError(DocsGuardError):
    """Raised when a remote tool manifest cannot be fetched."""

    def __init__(self, message: str, url: str, status_code: int | None = None) -> None:
        super().__init__(message, {"url": url, "status_code": status_code})
        self.url = url
        self.status_code = status_code
