"""
docsguard: Documentation guardrails for the AdsGateway docs repository.

Checks that every MCP tool declared in mcp-tools.json is documented
under tools/, and that internal domains never leak into docs.

Usage:
    # CLI
    $ docsguard check

    # Python API
    from docsguard import run_guardrails

    report = run_guardrails()
    print(report.missing_tools)
"""

from docsguard.config import GuardrailsSettings
from docsguard.domain.models import FileHit, ManifestSource, SourceKind
from docsguard.domain.report import GuardrailsReport
from docsguard.engine.checker import GuardrailsChecker, run_guardrails

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Config
    "GuardrailsSettings",
    # Domain models
    "FileHit",
    "ManifestSource",
    "SourceKind",
    # Reports
    "GuardrailsReport",
    # Engine
    "GuardrailsChecker",
    "run_guardrails",
]
