"""
Terminal renderer using Rich.

Diagnostics go to stderr; the success summary goes to stdout.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from docsguard.domain.report import GuardrailsReport

PREFIX = "[guardrails]"


class TerminalRenderer:
    """
    Renders guardrails reports to the terminal using Rich.

    Each violation category gets its own itemized block so every issue
    can be located without re-running.
    """

    def __init__(
        self,
        console: Console | None = None,
        err_console: Console | None = None,
    ) -> None:
        """
        Initialize the terminal renderer.

        Args:
            console: Console for the success summary (stdout).
            err_console: Console for diagnostics (stderr).
        """
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def render(self, report: GuardrailsReport) -> None:
        """
        Render a guardrails report.

        Args:
            report: The report to render.
        """
        if report.missing_tools:
            self._render_missing_tools(report)

        if report.banned_hits:
            self._render_banned_hits(report)

        if report.passed:
            self._line(
                self.console,
                f"{PREFIX} OK: {len(report.tool_names)} tools covered; no banned domains found.",
                "green",
            )

    def render_failure(self, error: BaseException, show_traceback: bool = True) -> None:
        """
        Render an error that aborted the run.

        Must be called from inside the ``except`` block when a traceback
        is wanted.
        """
        self._line(self.err_console, "")
        self._line(self.err_console, f"{PREFIX} Failed:", "red bold")
        self._line(self.err_console, str(error))
        if show_traceback:
            self.err_console.print_exception()

    def _render_missing_tools(self, report: GuardrailsReport) -> None:
        self._line(self.err_console, "")
        self._line(
            self.err_console,
            f"{PREFIX} Missing tools documentation entries (tools/*.mdx):",
            "red bold",
        )
        for name in report.missing_tools:
            self._line(self.err_console, f"- {name}")

    def _render_banned_hits(self, report: GuardrailsReport) -> None:
        self._line(self.err_console, "")
        self._line(self.err_console, f"{PREFIX} Banned domains found:", "red bold")
        for hit in report.banned_hits:
            self._line(self.err_console, f"- {hit}")

    def _line(self, console: Console, text: str, style: str | None = None) -> None:
        # Report text is literal: no markup, no emoji shortcodes
        console.print(escape(text), style=style, highlight=False, emoji=False, soft_wrap=True)

