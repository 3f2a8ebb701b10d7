"""Workflow layer between the CLI and the store.

Each function parses raw user text first, then performs exactly one store
operation. Nothing is written if any input fails to parse.
"""

from .adapters.file_store import FileEntryStore
from .config import Config
from .core import (
    AllEntries,
    ByDate,
    ByRange,
    BySubject,
    Date,
    DateRange,
    Entry,
    MergeAtDate,
    Subject,
    parse_subject_list,
)
from .ports import EntryStore


def get_store(config: Config) -> FileEntryStore:
    """Resolve the entry store from config."""
    return FileEntryStore(config.store_path, indent=config.indent)


def add_attendance(store: EntryStore, date_text: str, subjects_text: str) -> Entry:
    """Merge subjects into the entry for a date and return the stored entry."""
    target = Date.parse(date_text)
    subjects = parse_subject_list(subjects_text)
    store.write(MergeAtDate(target, subjects))
    return store.read(ByDate(target))[0]


def list_all(store: EntryStore) -> list[Entry]:
    return store.read(AllEntries())


def list_by_date(store: EntryStore, date_text: str) -> list[Entry]:
    return store.read(ByDate(Date.parse(date_text)))


def list_by_range(store: EntryStore, range_text: str) -> list[Entry]:
    return store.read(ByRange(DateRange.parse(range_text)))


def list_by_subject(store: EntryStore, subject_text: str) -> list[Entry]:
    return store.read(BySubject(Subject.parse(subject_text)))
