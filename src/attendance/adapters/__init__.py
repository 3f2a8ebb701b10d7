"""Adapters - I/O implementations of ports."""

from .file_store import FileEntryStore

__all__ = [
    "FileEntryStore",
]
