"""
Engine layer for docsguard.

Contains manifest resolution and the documentation checks.
"""

from docsguard.engine.checker import GuardrailsChecker, run_guardrails
from docsguard.engine.resolver import ManifestResolver

__all__ = [
    "GuardrailsChecker",
    "ManifestResolver",
    "run_guardrails",
]
