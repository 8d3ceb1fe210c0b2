"""
Adapters layer for docsguard.

Contains all infrastructure implementations: filesystem and HTTP.
"""

from docsguard.adapters.fs import FileSystemAdapter
from docsguard.adapters.http import HttpAdapter

__all__ = [
    "FileSystemAdapter",
    "HttpAdapter",
]
