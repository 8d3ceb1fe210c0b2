"""
Main CLI entry point for docsguard.

Usage:
    docsguard check
    docsguard check --root ./docs --format json
    docsguard domains
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from docsguard import __version__
from docsguard.config import DEFAULT_TIMEOUT, ENV_MANIFEST_PATH, ENV_MANIFEST_URL

# Create the main Typer app
app = typer.Typer(
    name="docsguard",
    help="Documentation guardrails: tool coverage and banned domains.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()


class OutputFormat(str, Enum):
    """Output format options."""

    terminal = "terminal"
    json = "json"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"docsguard version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    Documentation guardrails for the docs repository.

    Checks that every tool in mcp-tools.json is documented under tools/
    and that no internal domains leak into documentation.

    Examples:

        docsguard check

        docsguard check --manifest-path ../gateway/mcp-tools.json

        docsguard check --format json
    """
    pass


@app.command()
def check(
    root: Annotated[
        Path,
        typer.Option(
            "--root",
            "-r",
            help="Documentation repository root.",
            file_okay=False,
        ),
    ] = Path("."),
    manifest_path: Annotated[
        Optional[str],
        typer.Option(
            "--manifest-path",
            help=(
                "Tool manifest file, relative to the current directory; "
                f"overrides {ENV_MANIFEST_PATH} (which is relative to --root)."
            ),
        ),
    ] = None,
    manifest_url: Annotated[
        Optional[str],
        typer.Option(
            "--manifest-url",
            help=f"Tool manifest URL; overrides {ENV_MANIFEST_URL}.",
        ),
    ] = None,
    format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
        ),
    ] = OutputFormat.terminal,
    timeout: Annotated[
        float,
        typer.Option(
            "--timeout",
            help="HTTP timeout in seconds for a remote manifest.",
            min=0.1,
        ),
    ] = DEFAULT_TIMEOUT,
    no_color: Annotated[
        bool,
        typer.Option(
            "--no-color",
            help="Disable colored output.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log manifest resolution and scan progress, and print tracebacks on failure.",
        ),
    ] = False,
) -> None:
    """
    Run the documentation guardrails.

    Fails when a manifest tool has no tools/*.mdx mention, or when a
    banned domain appears in any .md, .mdx or docs.json file.

    Examples:

        docsguard check

        docsguard check --root ../docs --verbose
    """
    from docsguard.config import GuardrailsSettings
    from docsguard.domain.exceptions import DocsGuardError
    from docsguard.engine.checker import run_guardrails
    from docsguard.logging import setup_logging
    from docsguard.renderers.json_renderer import JsonRenderer
    from docsguard.renderers.terminal import TerminalRenderer

    out = Console(no_color=no_color)
    err = Console(stderr=True, no_color=no_color)
    renderer = TerminalRenderer(console=out, err_console=err)

    setup_logging("DEBUG" if verbose else "WARNING", console=err)

    if manifest_path and manifest_path.strip():
        manifest_path = str(Path(manifest_path.strip()).resolve())

    try:
        settings = GuardrailsSettings.from_env(
            root=root.resolve(),
            manifest_path=manifest_path,
            manifest_url=manifest_url,
            timeout=timeout,
        )
        report = run_guardrails(settings)
    except DocsGuardError as e:
        renderer.render_failure(e, show_traceback=verbose)
        raise typer.Exit(1)
    except Exception as e:
        renderer.render_failure(e)
        raise typer.Exit(1)

    match format:
        case OutputFormat.terminal:
            renderer.render(report)

        case OutputFormat.json:
            typer.echo(JsonRenderer().render(report))

    if not report.passed:
        raise typer.Exit(report.exit_code)


@app.command()
def domains() -> None:
    """
    List the banned domains.

    These may not appear in any .md, .mdx or docs.json file.
    """
    from rich.table import Table

    from docsguard.engine.scanner import BANNED_DOMAINS

    table = Table(title="Banned Domains")
    table.add_column("Domain", style="cyan")

    for domain in BANNED_DOMAINS:
        table.add_row(domain)

    console.print(table)
    console.print(f"\nTotal: {len(BANNED_DOMAINS)} domains")


if __name__ == "__main__":
    app()
