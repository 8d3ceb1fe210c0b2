"""
Guardrails checker: the core of docsguard.

Runs the manifest resolver, the coverage check and the banned-domain
scan against one repository and aggregates the outcome into a report.
"""

from __future__ import annotations

import anyio

from docsguard.adapters.fs import FileSystemAdapter
from docsguard.adapters.http import HttpAdapter
from docsguard.config import TOOLS_DOCS_DIR, GuardrailsSettings
from docsguard.domain.exceptions import ConfigError
from docsguard.domain.report import GuardrailsReport
from docsguard.engine.coverage import check_tools_covered
from docsguard.engine.extractor import extract_tool_names
from docsguard.engine.resolver import ManifestResolver
from docsguard.engine.scanner import BANNED_DOMAINS, find_banned_domains
from docsguard.logging import get_logger

logger = get_logger(__name__)


def run_guardrails(settings: GuardrailsSettings | None = None) -> GuardrailsReport:
    """
    Run all documentation guardrails.

    This is the primary public API.

    Args:
        settings: Run settings. Defaults to settings read from the environment.

    Returns:
        GuardrailsReport with every violation found.

    Raises:
        ConfigError: If the tools/ directory is missing.
        ManifestNotFoundError: If no manifest source is available.
        ManifestParseError: If the manifest is unreadable or invalid JSON.
        ManifestFetchError: If the remote manifest cannot be fetched.

    Example:
        >>> report = run_guardrails()
        >>> if not report.passed:
        ...     sys.exit(report.exit_code)
    """
    checker = GuardrailsChecker(settings or GuardrailsSettings.from_env())
    return anyio.run(checker.check)


class GuardrailsChecker:
    """
    Checks a documentation repository against the guardrails.

    Both checks always run to completion so that every violation is
    reported in one pass.
    """

    def __init__(
        self,
        settings: GuardrailsSettings,
        fs: FileSystemAdapter | None = None,
        http: HttpAdapter | None = None,
        banned_domains: tuple[str, ...] = BANNED_DOMAINS,
    ) -> None:
        """
        Initialize the checker.

        Args:
            settings: Run settings.
            fs: Filesystem adapter (defaults to one rooted at settings.root).
            http: HTTP adapter used for remote manifests.
            banned_domains: Domains that must not appear in docs.
        """
        self.settings = settings
        self.fs = fs or FileSystemAdapter(settings.root)
        self.http = http or HttpAdapter(timeout=settings.timeout)
        self.banned_domains = banned_domains

    async def check(self) -> GuardrailsReport:
        """Run both checks and build the report."""
        root = self.settings.root
        tools_docs_root = self.settings.tools_docs_root

        if not self.fs.is_dir(tools_docs_root):
            raise ConfigError(
                f"Missing {TOOLS_DOCS_DIR}/ directory in docs repo.",
                config_key=TOOLS_DOCS_DIR,
            )

        resolver = ManifestResolver(self.settings, fs=self.fs, http=self.http)
        manifest = await resolver.resolve()
        tool_names = extract_tool_names(manifest.data)
        logger.info("Manifest %s declares %d tools", manifest.source, len(tool_names))

        tool_files, missing = check_tools_covered(tool_names, tools_docs_root, fs=self.fs)
        doc_files, hits = find_banned_domains(root, fs=self.fs, banned=self.banned_domains)

        return GuardrailsReport(
            root=str(root),
            manifest_source=manifest.source,
            tool_names=tool_names,
            missing_tools=missing,
            banned_hits=hits,
            tool_files_scanned=len(tool_files),
            doc_files_scanned=len(doc_files),
        )
