"""File-based entry storage adapter."""

import json
import logging
from pathlib import Path

from attendance.core.entries import (
    AllEntries,
    Entry,
    Mutation,
    Query,
    apply_mutation,
    select_entries,
)
from attendance.errors import InputParseError, StoreFormatError, StoreIOError

logger = logging.getLogger(__name__)


class FileEntryStore:
    """
    File-based entry storage.

    Implements EntryStore protocol. The whole collection lives in one JSON
    file; every call loads it fresh, and every write rewrites it in full by
    writing a sibling ``.tmp`` file and renaming it over the store, so a
    failed write leaves the previous content in place.

    There is no locking. Two processes writing the same file at once race,
    and the last writer wins.
    """

    def __init__(self, path: Path | str, indent: int = 2):
        self.path = Path(path).expanduser()
        self.indent = indent

    def load(self) -> list[Entry]:
        """Load all entries. A missing file is an empty store."""
        try:
            content = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug(f"Store {self.path} does not exist, treating as empty")
            return []
        except OSError as e:
            raise StoreIOError(self.path, f"Failed to read store: {e}") from e
        except UnicodeDecodeError as e:
            raise StoreFormatError(self.path, f"Store is not valid UTF-8: {e}") from e

        entries = self._decode(content)
        logger.debug(f"Loaded {len(entries)} entries from {self.path}")
        return entries

    def read(self, query: Query = AllEntries()) -> list[Entry]:
        """Read entries matching a query. Never touches the file on disk."""
        return select_entries(self.load(), query)

    def write(self, mutation: Mutation) -> None:
        """Apply a mutation to the stored entries and overwrite the file."""
        entries = apply_mutation(self.load(), mutation)
        self._save(entries)

    def _decode(self, content: str) -> list[Entry]:
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise StoreFormatError(self.path, f"Store is not valid JSON: {e}") from e
        except RecursionError as e:
            raise StoreFormatError(self.path, "Store is nested too deeply") from e

        if not isinstance(data, list):
            raise StoreFormatError(self.path, "Store must contain a list of entries")

        entries = []
        for index, item in enumerate(data):
            if (
                not isinstance(item, dict)
                or not isinstance(item.get("date"), str)
                or not isinstance(item.get("subjects"), list)
                or not all(isinstance(s, str) for s in item["subjects"])
            ):
                raise StoreFormatError(self.path, f"Malformed entry at index {index}")
            try:
                entries.append(Entry.from_dict(item))
            except InputParseError as e:
                raise StoreFormatError(self.path, f"Invalid entry at index {index}: {e}") from e
        return entries

    def _save(self, entries: list[Entry]) -> None:
        try:
            content = json.dumps([e.to_dict() for e in entries], indent=self.indent) + "\n"
        except (TypeError, ValueError) as e:
            raise StoreFormatError(self.path, f"Failed to serialize store: {e}") from e

        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(content, encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as e:
            if tmp_path.exists():
                tmp_path.unlink()
            raise StoreIOError(self.path, f"Failed to write store: {e}") from e

        logger.debug(f"Saved {len(entries)} entries to {self.path}")
