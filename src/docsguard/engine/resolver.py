"""
Manifest resolver: locates and loads mcp-tools.json.

Sources are tried in a fixed priority order and the first one
available wins:

1. Explicit path (MCP_TOOLS_JSON_PATH)
2. Sibling product checkout (../adsgpt-gateway/...)
3. Remote URL (MCP_TOOLS_JSON_URL)
4. Vendored copy (tooling/mcp-tools.json)
"""

from __future__ import annotations

from pathlib import Path

from docsguard.adapters.fs import FileSystemAdapter
from docsguard.adapters.http import HttpAdapter
from docsguard.config import (
    ENV_MANIFEST_PATH,
    ENV_MANIFEST_URL,
    VENDORED_MANIFEST_PATH,
    GuardrailsSettings,
)
from docsguard.domain.exceptions import ManifestNotFoundError
from docsguard.domain.models import ManifestSource, ResolvedManifest, SourceKind
from docsguard.logging import get_logger

logger = get_logger(__name__)


class ManifestResolver:
    """Resolves the tool manifest for a documentation repository."""

    def __init__(
        self,
        settings: GuardrailsSettings,
        fs: FileSystemAdapter | None = None,
        http: HttpAdapter | None = None,
    ) -> None:
        self.settings = settings
        self.fs = fs or FileSystemAdapter(settings.root)
        self.http = http or HttpAdapter(timeout=settings.timeout)

    async def resolve(self) -> ResolvedManifest:
        """
        Load the manifest from the first available source.

        Returns:
            The parsed manifest and where it came from.

        Raises:
            ManifestParseError: If the chosen source holds invalid JSON.
            ManifestFetchError: If the remote fetch fails.
            ManifestNotFoundError: If no source is available.
        """
        settings = self.settings

        if settings.manifest_path:
            path = Path(settings.manifest_path)
            if not path.is_absolute():
                path = settings.root / path
            return self._load_file(SourceKind.PATH, path)

        if self.fs.is_file(settings.sibling_manifest):
            return self._load_file(SourceKind.SIBLING, settings.sibling_manifest)

        if settings.manifest_url:
            url = settings.manifest_url
            logger.info("Fetching tool manifest from %s", url)
            data = await self.http.fetch_json(url, token=settings.token)
            return ResolvedManifest(
                source=ManifestSource(kind=SourceKind.URL, location=url),
                data=data,
            )

        if self.fs.is_file(settings.vendored_manifest):
            return self._load_file(SourceKind.VENDORED, settings.vendored_manifest)

        raise ManifestNotFoundError(
            "Unable to locate mcp-tools.json. "
            f"Set {ENV_MANIFEST_PATH} or {ENV_MANIFEST_URL}, "
            f"or add {VENDORED_MANIFEST_PATH.as_posix()}."
        )

    def _load_file(self, kind: SourceKind, path: Path) -> ResolvedManifest:
        logger.info("Loading tool manifest (%s) from %s", kind.value, path)
        return ResolvedManifest(
            source=ManifestSource(kind=kind, location=str(path)),
            data=self.fs.read_json(path),
        )
