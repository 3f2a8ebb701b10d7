"""Functional core - pure business logic with no I/O."""

from .dates import Date, DateRange
from .subjects import Subject, parse_subject_list
from .entries import (
    AllEntries,
    ByDate,
    ByRange,
    BySubject,
    Entry,
    MergeAtDate,
    Mutation,
    Query,
    ReplaceAll,
    apply_mutation,
    merge_at_date,
    normalize_entries,
    select_entries,
)

__all__ = [
    # Dates
    "Date",
    "DateRange",
    # Subjects
    "Subject",
    "parse_subject_list",
    # Entries
    "Entry",
    "Query",
    "AllEntries",
    "ByDate",
    "ByRange",
    "BySubject",
    "Mutation",
    "ReplaceAll",
    "MergeAtDate",
    "select_entries",
    "normalize_entries",
    "merge_at_date",
    "apply_mutation",
]
