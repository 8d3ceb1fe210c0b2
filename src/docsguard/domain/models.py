"""
Domain models for docsguard.

All models are Pydantic v2 and frozen: a guardrails run only ever
produces values, it never mutates them.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SourceKind(str, Enum):
    """Where a tool manifest was loaded from, in resolution order."""

    PATH = "path"
    SIBLING = "sibling"
    URL = "url"
    VENDORED = "vendored"


class ManifestSource(BaseModel):
    """Location a tool manifest was resolved from."""

    model_config = ConfigDict(frozen=True)

    kind: SourceKind = Field(..., description="Which resolution step produced the manifest")
    location: str = Field(..., description="Absolute file path or URL")

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.location}"


class ResolvedManifest(BaseModel):
    """
    A tool manifest together with its source.

    ``data`` is the raw JSON value: either a list of tool descriptors
    or an object holding them under ``tools``.
    """

    model_config = ConfigDict(frozen=True)

    source: ManifestSource
    data: Any = Field(default=None, description="Parsed JSON content")


class FileHit(BaseModel):
    """A banned domain found on a line of a documentation file."""

    model_config = ConfigDict(frozen=True)

    file: str = Field(..., description="Path relative to the repository root, POSIX form")
    line: int = Field(..., ge=1, description="1-indexed line number")
    domain: str = Field(..., description="The banned domain that matched")
    text: str = Field(..., description="The matching line, trimmed")

    def __str__(self) -> str:
        return f"{self.domain} in {self.file}:{self.line} :: {self.text}"
