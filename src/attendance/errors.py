"""Error hierarchy for the attendance tracker.

Input parse errors carry a closed ``ParseErrorKind`` so callers can tell
failure causes apart without matching on message text. Store errors are split
into I/O failures and format failures; a missing store file is not an error.
"""

from enum import Enum
from pathlib import Path


class ParseErrorKind(Enum):
    """Why a piece of user input could not be parsed."""

    DATE_COMPONENT_COUNT = "date_component_count"
    INVALID_YEAR = "invalid_year"
    INVALID_MONTH = "invalid_month"
    INVALID_DAY = "invalid_day"
    YEAR_OUT_OF_RANGE = "year_out_of_range"
    MONTH_OUT_OF_RANGE = "month_out_of_range"
    DAY_OUT_OF_RANGE = "day_out_of_range"
    RANGE_MISSING_DELIMITER = "range_missing_delimiter"
    RANGE_START_AFTER_END = "range_start_after_end"
    UNKNOWN_SUBJECT = "unknown_subject"
    EMPTY_SUBJECT_LIST = "empty_subject_list"


class AttendanceError(Exception):
    """Base class for all attendance errors."""


class InputParseError(AttendanceError, ValueError):
    """User-supplied text is not a valid date, range or subject."""

    def __init__(self, kind: ParseErrorKind, text: str, message: str):
        self.kind = kind
        self.text = text
        super().__init__(f"{message}: {text!r}")


class StoreError(AttendanceError):
    """Base class for failures of the backing store file."""

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(f"{message} ({path})")


class StoreIOError(StoreError):
    """The store file exists but could not be read, or could not be written."""


class StoreFormatError(StoreError):
    """The store content could not be decoded or encoded."""
