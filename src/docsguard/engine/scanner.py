"""
Banned-domain scanner.

Walks every documentation source in the repository and records each
line that mentions an internal domain.
"""

from __future__ import annotations

import re
from pathlib import Path

from docsguard.adapters.fs import FileSystemAdapter
from docsguard.domain.models import FileHit
from docsguard.logging import get_logger

logger = get_logger(__name__)

BANNED_DOMAINS: tuple[str, ...] = (
    "docs.adsgateway.io",
    "status.adsgateway.io",
)

# LF or CRLF only; other Unicode line breaks stay inside the line
_LINE_BREAK = re.compile(r"\r?\n")

# Surrounding whitespace, including a byte order mark
_TRIM = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def is_doc_source(path: Path) -> bool:
    """Whether a file is documentation source subject to the domain ban."""
    name = path.name
    return name.endswith(".mdx") or name.endswith(".md") or name == "docs.json"


def scan_text(
    text: str,
    file: str,
    banned: tuple[str, ...] = BANNED_DOMAINS,
) -> list[FileHit]:
    """
    Find banned domains in a single document.

    Args:
        text: Document contents.
        file: Path to report for hits.
        banned: Domains to look for (plain substring match).

    Returns:
        One hit per (line, domain) match.
    """
    hits: list[FileHit] = []

    for number, line in enumerate(_LINE_BREAK.split(text), 1):
        for domain in banned:
            if domain in line:
                hits.append(
                    FileHit(file=file, line=number, domain=domain, text=_TRIM.sub("", line))
                )

    return hits


def find_banned_domains(
    repo_root: Path,
    fs: FileSystemAdapter | None = None,
    banned: tuple[str, ...] = BANNED_DOMAINS,
) -> tuple[list[Path], list[FileHit]]:
    """
    Scan a repository for banned domains.

    Args:
        repo_root: Repository root to walk.
        fs: Filesystem adapter rooted at ``repo_root``.
        banned: Domains to look for.

    Returns:
        Tuple of (scanned files, hits).
    """
    fs = fs or FileSystemAdapter(repo_root)

    files = fs.walk_files(repo_root, is_doc_source)
    logger.debug("Scanning %d documentation files for banned domains", len(files))

    hits: list[FileHit] = []
    for path in files:
        hits.extend(scan_text(fs.read_text(path), fs.relative(path), banned))

    return files, hits
