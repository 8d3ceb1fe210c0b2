"""
JSON renderer for docsguard.

Outputs machine-readable guardrails reports.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from docsguard.domain.report import GuardrailsReport


class JsonRenderer:
    """
    Renders guardrails reports as JSON.

    Provides machine-readable output for CI pipelines.
    """

    def __init__(self, indent: int = 2) -> None:
        """
        Initialize the JSON renderer.

        Args:
            indent: JSON indentation level.
        """
        self.indent = indent

    def render(self, report: GuardrailsReport) -> str:
        """
        Render a report as JSON string.

        Args:
            report: The report to render.

        Returns:
            JSON string.
        """
        return json.dumps(self.to_dict(report), indent=self.indent)

    def to_dict(self, report: GuardrailsReport) -> dict[str, Any]:
        """Convert a report to a dictionary."""
        source = report.manifest_source

        return {
            "passed": report.passed,
            "root": report.root,
            "manifest": (
                {"kind": source.kind.value, "location": source.location} if source else None
            ),
            "tool_count": len(report.tool_names),
            "tool_names": report.tool_names,
            "missing_tools": report.missing_tools,
            "banned_domains": [
                {
                    "file": h.file,
                    "line": h.line,
                    "domain": h.domain,
                    "text": h.text,
                }
                for h in report.banned_hits
            ],
            "files_scanned": {
                "tools": report.tool_files_scanned,
                "docs": report.doc_files_scanned,
            },
        }


def render_json(report: GuardrailsReport, **kwargs) -> str:
    """
    Convenience function to render a report as JSON.

    Args:
        report: The report to render.
        **kwargs: Options passed to JsonRenderer.

    Returns:
        JSON string.
    """
    renderer = JsonRenderer(**kwargs)
    return renderer.render(report)
