"""
Domain layer for docsguard.

Contains all core data structures with zero external dependencies
beyond Pydantic.
"""

from docsguard.domain.models import (
    FileHit,
    ManifestSource,
    ResolvedManifest,
    SourceKind,
)
from docsguard.domain.report import GuardrailsReport
from docsguard.domain.exceptions import (
    DocsGuardError,
    ConfigError,
    ManifestFetchError,
    ManifestNotFoundError,
    ManifestParseError,
)

__all__ = [
    # Models
    "FileHit",
    "ManifestSource",
    "ResolvedManifest",
    "SourceKind",
    # Reports
    "GuardrailsReport",
    # Exceptions
    "DocsGuardError",
    "ConfigError",
    "ManifestFetchError",
    "ManifestNotFoundError",
    "ManifestParseError",
]
