"""
Guardrails report model.

Aggregates the outcome of both checks for a single run.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from docsguard.domain.models import FileHit, ManifestSource


class GuardrailsReport(BaseModel):
    """
    Complete result of a guardrails run.

    Violations are collected in full; the pass/fail decision is made
    only once both checks have finished.
    """

    model_config = ConfigDict(frozen=True)

    root: str = Field(..., description="Repository root that was checked")
    manifest_source: ManifestSource | None = Field(
        default=None,
        description="Where the tool manifest came from",
    )
    tool_names: list[str] = Field(
        default_factory=list,
        description="Deduplicated, sorted tool names from the manifest",
    )
    missing_tools: list[str] = Field(
        default_factory=list,
        description="Tool names not mentioned in any tools/*.mdx file",
    )
    banned_hits: list[FileHit] = Field(
        default_factory=list,
        description="Every banned domain occurrence",
    )
    tool_files_scanned: int = Field(default=0, ge=0)
    doc_files_scanned: int = Field(default=0, ge=0)

    @property
    def passed(self) -> bool:
        """Whether the run found no violations at all."""
        return not self.missing_tools and not self.banned_hits

    @property
    def exit_code(self) -> int:
        """Exit code for CLI (0 = passed, 1 = failed)."""
        return 0 if self.passed else 1

    def hits_for_domain(self, domain: str) -> list[FileHit]:
        """Get banned-domain hits filtered by domain."""
        return [h for h in self.banned_hits if h.domain == domain]

    def to_json(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return self.model_dump(mode="json")
