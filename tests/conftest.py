"""
Pytest configuration and shared fixtures for docsguard tests.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from docsguard.config import ENV_MANIFEST_PATH, ENV_MANIFEST_URL, ENV_TOKENS, GuardrailsSettings


# --- Markers ---

def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


# --- Fixtures: Environment ---

@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's environment out of manifest resolution."""
    for name in (ENV_MANIFEST_PATH, ENV_MANIFEST_URL, *ENV_TOKENS):
        monkeypatch.delenv(name, raising=False)


# --- Fixtures: Sample Data ---

@pytest.fixture
def sample_manifest_json() -> dict[str, Any]:
    """A manifest in the object-with-tools shape."""
    return {
        "tools": [
            {"name": "search_ads", "description": "Search ads."},
            {"tool": "list_campaigns"},
            {"id": "get_report"},
        ]
    }


# --- Fixtures: Files ---

@pytest.fixture
def docs_repo(tmp_path: Path) -> Path:
    """
    An empty docs repository with a tools/ directory.

    The repo sits one level below tmp_path so the sibling checkout
    convention (../adsgpt-gateway/...) stays inside the sandbox.
    """
    root = tmp_path / "docs"
    (root / "tools").mkdir(parents=True)
    return root


@pytest.fixture
def write_file(docs_repo: Path) -> Callable[[str, str], Path]:
    """Write a text file relative to the docs repo."""

    def _write(relative: str, content: str) -> Path:
        path = docs_repo / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_manifest(docs_repo: Path) -> Callable[[Any, str], Path]:
    """Write a manifest JSON file relative to the docs repo."""

    def _write(data: Any, relative: str = "tooling/mcp-tools.json") -> Path:
        path = docs_repo / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sibling_manifest_path(docs_repo: Path) -> Path:
    """Where the sibling product checkout keeps its manifest."""
    return docs_repo.parent / "adsgpt-gateway" / "fastmcp-server" / "docs" / "mcp-tools.json"


@pytest.fixture
def settings(docs_repo: Path) -> GuardrailsSettings:
    """Settings rooted at the docs repo with no overrides."""
    return GuardrailsSettings(root=docs_repo)
