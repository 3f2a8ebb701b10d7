"""Pure attendance entry logic - no I/O dependencies."""

from dataclasses import dataclass, field

from .dates import Date, DateRange
from .subjects import Subject


@dataclass
class Entry:
    """The subjects attended on one date."""

    date: Date
    subjects: list[Subject] = field(default_factory=list)

    def add_subjects(self, subjects: list[Subject]) -> None:
        """Union new subjects into this entry, keeping first-seen order."""
        self.subjects = _dedupe(self.subjects + list(subjects))

    def to_dict(self) -> dict:
        """Serialize for the store file (date first, then subjects)."""
        return {
            "date": str(self.date),
            "subjects": [str(s) for s in self.subjects],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Entry":
        """Create Entry from a stored record. Raises InputParseError on bad values."""
        return cls(
            date=Date.parse(data["date"]),
            subjects=[Subject.parse(s) for s in data["subjects"]],
        )


# ============== Queries ==============


@dataclass(frozen=True)
class AllEntries:
    """Every entry, in stored order."""


@dataclass(frozen=True)
class ByDate:
    """Entries on exactly this date."""

    date: Date


@dataclass(frozen=True)
class ByRange:
    """Entries whose date lies within the range (inclusive)."""

    range: DateRange


@dataclass(frozen=True)
class BySubject:
    """Entries that include this subject."""

    subject: Subject


Query = AllEntries | ByDate | ByRange | BySubject


# ============== Mutations ==============


@dataclass(frozen=True)
class ReplaceAll:
    """Replace the whole store with these entries."""

    entries: list[Entry]


@dataclass(frozen=True)
class MergeAtDate:
    """Add subjects to the entry for a date, creating it if needed."""

    date: Date
    subjects: list[Subject]


Mutation = ReplaceAll | MergeAtDate


def _dedupe(subjects: list[Subject]) -> list[Subject]:
    return list(dict.fromkeys(subjects))


def select_entries(entries: list[Entry], query: Query) -> list[Entry]:
    """
    Filter entries according to a query, preserving input order.

    Pure function - no I/O.
    """
    match query:
        case AllEntries():
            return list(entries)
        case ByDate(date=target):
            return [e for e in entries if e.date == target]
        case ByRange(range=date_range):
            return [e for e in entries if date_range.contains(e.date)]
        case BySubject(subject=subject):
            return [e for e in entries if subject in e.subjects]
    raise TypeError(f"Unsupported query: {query!r}")


def normalize_entries(entries: list[Entry]) -> list[Entry]:
    """
    Merge entries sharing a date, dedupe subjects and sort ascending by date.

    Pure function - no I/O. Input entries are not modified.
    """
    by_date: dict[Date, Entry] = {}
    for entry in entries:
        existing = by_date.get(entry.date)
        if existing is None:
            by_date[entry.date] = Entry(entry.date, _dedupe(entry.subjects))
        else:
            existing.add_subjects(entry.subjects)
    return sorted(by_date.values(), key=lambda e: e.date)


def merge_at_date(entries: list[Entry], target: Date, subjects: list[Subject]) -> list[Entry]:
    """
    Union subjects into the entry for a date, or add a new entry.

    Pure function - no I/O. Returns the normalized collection.
    """
    return normalize_entries([*entries, Entry(target, list(subjects))])


def apply_mutation(entries: list[Entry], mutation: Mutation) -> list[Entry]:
    """
    Apply a mutation to the current entries and return the new collection.

    Pure function - no I/O.
    """
    match mutation:
        case ReplaceAll(entries=replacement):
            return normalize_entries(replacement)
        case MergeAtDate(date=target, subjects=subjects):
            return merge_at_date(entries, target, subjects)
    raise TypeError(f"Unsupported mutation: {mutation!r}")
