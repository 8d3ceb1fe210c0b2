"""
Unit tests for the terminal and JSON renderers.
"""

from __future__ import annotations

import io
import json

import pytest
from rich.console import Console

from docsguard.domain.models import FileHit, ManifestSource, SourceKind
from docsguard.domain.report import GuardrailsReport
from docsguard.renderers.json_renderer import JsonRenderer, render_json
from docsguard.renderers.terminal import TerminalRenderer


def capture_console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=200, no_color=True), buffer


@pytest.fixture
def failing_report() -> GuardrailsReport:
    return GuardrailsReport(
        root="/docs",
        tool_names=["list_campaigns", "search_ads"],
        missing_tools=["list_campaigns"],
        banned_hits=[
            FileHit(
                file="overview.mdx",
                line=3,
                domain="docs.adsgateway.io",
                text="See https://docs.adsgateway.io/guide for more.",
            )
        ],
    )


class TestTerminalRenderer:
    """Tests for TerminalRenderer."""

    def test_failure_goes_to_stderr(self, failing_report: GuardrailsReport) -> None:
        """Diagnostics are itemized on the error console only."""
        out, out_buf = capture_console()
        err, err_buf = capture_console()

        TerminalRenderer(console=out, err_console=err).render(failing_report)

        assert out_buf.getvalue() == ""
        lines = err_buf.getvalue().splitlines()
        assert lines == [
            "",
            "[guardrails] Missing tools documentation entries (tools/*.mdx):",
            "- list_campaigns",
            "",
            "[guardrails] Banned domains found:",
            "- docs.adsgateway.io in overview.mdx:3 :: See https://docs.adsgateway.io/guide for more.",
        ]

    def test_only_failing_categories_are_shown(self) -> None:
        out, _ = capture_console()
        err, err_buf = capture_console()
        report = GuardrailsReport(root="/docs", missing_tools=["search_ads"])

        TerminalRenderer(console=out, err_console=err).render(report)

        assert "Banned domains" not in err_buf.getvalue()
        assert "- search_ads" in err_buf.getvalue()

    def test_success_goes_to_stdout(self) -> None:
        """A pass prints one summary line on stdout."""
        out, out_buf = capture_console()
        err, err_buf = capture_console()
        report = GuardrailsReport(root="/docs", tool_names=["a", "b", "c"])

        TerminalRenderer(console=out, err_console=err).render(report)

        assert out_buf.getvalue() == "[guardrails] OK: 3 tools covered; no banned domains found.\n"
        assert err_buf.getvalue() == ""

    def test_markup_in_text_is_literal(self) -> None:
        """Brackets in doc text are printed verbatim."""
        out, _ = capture_console()
        err, err_buf = capture_console()
        hit = FileHit(file="a.md", line=1, domain="docs.adsgateway.io", text="[bold]docs.adsgateway.io[/bold]")
        report = GuardrailsReport(root="/docs", banned_hits=[hit])

        TerminalRenderer(console=out, err_console=err).render(report)

        assert "[bold]docs.adsgateway.io[/bold]" in err_buf.getvalue()

    def test_emoji_shortcodes_are_literal(self) -> None:
        """Shortcodes like :rocket: are reported exactly as written."""
        out, _ = capture_console()
        err, err_buf = capture_console()
        hit = FileHit(
            file="a.mdx",
            line=1,
            domain="status.adsgateway.io",
            text="Status :rocket: at https://status.adsgateway.io",
        )
        report = GuardrailsReport(root="/docs", missing_tools=[":white_check_mark:"], banned_hits=[hit])

        TerminalRenderer(console=out, err_console=err).render(report)

        output = err_buf.getvalue()
        assert "- :white_check_mark:" in output
        assert (
            "- status.adsgateway.io in a.mdx:1 :: Status :rocket: at https://status.adsgateway.io"
        ) in output
        assert "\U0001f680" not in output

    def test_render_failure(self) -> None:
        out, _ = capture_console()
        err, err_buf = capture_console()

        TerminalRenderer(console=out, err_console=err).render_failure(
            RuntimeError("boom"), show_traceback=False
        )

        assert err_buf.getvalue().splitlines() == ["", "[guardrails] Failed:", "boom"]


class TestJsonRenderer:
    """Tests for JsonRenderer."""

    def test_render(self, failing_report: GuardrailsReport) -> None:
        data = json.loads(JsonRenderer().render(failing_report))

        assert data["passed"] is False
        assert data["tool_count"] == 2
        assert data["missing_tools"] == ["list_campaigns"]
        assert data["banned_domains"] == [
            {
                "file": "overview.mdx",
                "line": 3,
                "domain": "docs.adsgateway.io",
                "text": "See https://docs.adsgateway.io/guide for more.",
            }
        ]
        assert data["manifest"] is None

    def test_manifest_source(self) -> None:
        report = GuardrailsReport(
            root="/docs",
            manifest_source=ManifestSource(kind=SourceKind.SIBLING, location="/x.json"),
        )

        data = json.loads(render_json(report, indent=None))

        assert data["manifest"] == {"kind": "sibling", "location": "/x.json"}
        assert data["passed"] is True
