"""
Filesystem adapter for docsguard.

Handles reading documentation files and manifests, and walking
documentation trees.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

from docsguard.domain.exceptions import ManifestParseError

FilePredicate = Callable[[Path], bool]


class FileSystemAdapter:
    """
    Adapter for filesystem operations.

    All filesystem I/O in docsguard goes through this adapter,
    making it easy to point at a temporary tree in tests.
    """

    def __init__(self, base_path: Path | None = None) -> None:
        """
        Initialize the filesystem adapter.

        Args:
            base_path: Base path for relative file operations.
        """
        self.base_path = base_path or Path.cwd()

    def read_json(self, path: Path | str) -> Any:
        """
        Read and parse a JSON file.

        Args:
            path: Path to the JSON file.

        Returns:
            Parsed JSON data.

        Raises:
            ManifestParseError: If the file can't be read or isn't valid JSON.
        """
        path = self._resolve_path(path)

        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise ManifestParseError(f"Manifest file not found: {path}", source=str(path))
        except PermissionError:
            raise ManifestParseError(f"Permission denied reading: {path}", source=str(path))
        except OSError as e:
            raise ManifestParseError(f"Error reading {path}: {e}", source=str(path))

        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise ManifestParseError(
                f"Invalid JSON in {path}: {e.msg}",
                source=str(path),
                line=e.lineno,
            )

    def read_text(self, path: Path | str) -> str:
        """
        Read a text file.

        Line endings are returned untranslated. Undecodable bytes are
        replaced rather than aborting the scan.

        Args:
            path: Path to the file.

        Returns:
            File contents.
        """
        path = self._resolve_path(path)
        return path.read_bytes().decode("utf-8", errors="replace")

    def exists(self, path: Path | str) -> bool:
        """Check if a path exists."""
        return self._resolve_path(path).exists()

    def is_file(self, path: Path | str) -> bool:
        """Check if path is a file."""
        return self._resolve_path(path).is_file()

    def is_dir(self, path: Path | str) -> bool:
        """Check if path is a directory."""
        return self._resolve_path(path).is_dir()

    def walk_files(self, directory: Path | str, predicate: FilePredicate) -> list[Path]:
        """
        Recursively list files under a directory.

        Every subdirectory is descended into; files are kept when
        ``predicate`` returns True. Entries are visited in name order
        so results are stable between runs.

        Args:
            directory: Directory to walk.
            predicate: Inclusion test applied to each file path.

        Returns:
            Matching file paths.
        """
        directory = self._resolve_path(directory)

        found: list[Path] = []
        for entry in sorted(directory.iterdir(), key=lambda p: p.name):
            if entry.is_dir() and not entry.is_symlink():
                found.extend(self.walk_files(entry, predicate))
            elif predicate(entry):
                found.append(entry)

        return found

    def relative(self, path: Path) -> str:
        """Render a path relative to base_path in POSIX form."""
        try:
            return path.relative_to(self.base_path).as_posix()
        except ValueError:
            return path.as_posix()

    def _resolve_path(self, path: Path | str) -> Path:
        """Resolve a path relative to base_path."""
        if isinstance(path, str):
            path = Path(path)

        if path.is_absolute():
            return path

        return self.base_path / path
