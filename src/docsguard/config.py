"""
Runtime configuration for docsguard.

Settings come from environment variables; the CLI may override the
manifest path and URL.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

ENV_MANIFEST_PATH = "MCP_TOOLS_JSON_PATH"
ENV_MANIFEST_URL = "MCP_TOOLS_JSON_URL"
ENV_TOKENS = ("GITHUB_TOKEN", "GH_TOKEN")

# Layout conventions, relative to the repository root
TOOLS_DOCS_DIR = "tools"
SIBLING_MANIFEST_PATH = Path("..", "adsgpt-gateway", "fastmcp-server", "docs", "mcp-tools.json")
VENDORED_MANIFEST_PATH = Path("tooling", "mcp-tools.json")

USER_AGENT = "adsgateway-docs-guardrails"
DEFAULT_TIMEOUT = 30.0


class GuardrailsSettings(BaseModel):
    """Resolved settings for one guardrails run."""

    model_config = ConfigDict(frozen=True)

    root: Path = Field(default_factory=Path.cwd, description="Repository root")
    manifest_path: str | None = Field(
        default=None, description=f"Explicit manifest file ({ENV_MANIFEST_PATH})"
    )
    manifest_url: str | None = Field(
        default=None, description=f"Remote manifest URL ({ENV_MANIFEST_URL})"
    )
    token: str | None = Field(
        default=None, description="Bearer token for the manifest URL"
    )
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="HTTP timeout in seconds")

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: object,
    ) -> GuardrailsSettings:
        """
        Build settings from environment variables.

        Blank values count as unset. Keyword overrides that are not None
        replace the environment-derived value.

        Args:
            environ: Environment mapping (defaults to os.environ).
            **overrides: Explicit field values, e.g. from CLI options.

        Returns:
            GuardrailsSettings instance.
        """
        env = os.environ if environ is None else environ

        token = None
        for name in ENV_TOKENS:
            token = _clean(env.get(name))
            if token:
                break

        values: dict[str, object] = {
            "manifest_path": _clean(env.get(ENV_MANIFEST_PATH)),
            "manifest_url": _clean(env.get(ENV_MANIFEST_URL)),
            "token": token,
        }
        for key, value in overrides.items():
            if value is None:
                continue
            if isinstance(value, str):
                value = _clean(value)
                if value is None:
                    continue
            values[key] = value

        return cls(**values)

    @property
    def tools_docs_root(self) -> Path:
        """Directory holding per-tool documentation."""
        return self.root / TOOLS_DOCS_DIR

    @property
    def sibling_manifest(self) -> Path:
        """Manifest location when the product repo is checked out next door."""
        return self.root / SIBLING_MANIFEST_PATH

    @property
    def vendored_manifest(self) -> Path:
        """Manifest copy committed to this repository."""
        return self.root / VENDORED_MANIFEST_PATH


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None
