"""
Renderers for docsguard.

Output formatters for guardrails reports: terminal and JSON.
"""

from docsguard.renderers.terminal import TerminalRenderer
from docsguard.renderers.json_renderer import JsonRenderer

__all__ = [
    "TerminalRenderer",
    "JsonRenderer",
]
