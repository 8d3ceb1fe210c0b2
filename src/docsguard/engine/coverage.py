"""
Coverage checker: every manifest tool must be documented.

A tool counts as documented when its name appears as a whole word,
case-insensitively, anywhere in at least one ``tools/**/*.mdx`` file.
"""

from __future__ import annotations

import re
from pathlib import Path

from docsguard.adapters.fs import FileSystemAdapter
from docsguard.logging import get_logger

logger = get_logger(__name__)


def tool_pattern(name: str) -> re.Pattern[str]:
    """Whole-word, case-insensitive pattern for a tool name."""
    return re.compile(
        rf"(?:^|[^a-z0-9_]){re.escape(name)}(?:[^a-z0-9_]|$)",
        re.IGNORECASE,
    )


def is_tool_doc(path: Path) -> bool:
    return path.name.endswith(".mdx")


def check_tools_covered(
    tool_names: list[str],
    tools_docs_root: Path,
    fs: FileSystemAdapter | None = None,
) -> tuple[list[Path], list[str]]:
    """
    Find tool names with no documentation.

    Args:
        tool_names: Names to look for, already sorted.
        tools_docs_root: Directory holding tool documentation.
        fs: Filesystem adapter to read through.

    Returns:
        Tuple of (scanned files, missing names). Missing names keep
        the order of ``tool_names``.
    """
    fs = fs or FileSystemAdapter(tools_docs_root)

    tool_files = fs.walk_files(tools_docs_root, is_tool_doc)
    corpus = [fs.read_text(path) for path in tool_files]
    logger.debug("Checking %d tools against %d docs", len(tool_names), len(tool_files))

    missing: list[str] = []
    for name in tool_names:
        pattern = tool_pattern(name)
        if not any(pattern.search(text) for text in corpus):
            missing.append(name)

    return tool_files, missing
