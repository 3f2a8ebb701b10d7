"""Pure date domain logic - no I/O dependencies."""

from dataclasses import dataclass

from attendance.errors import InputParseError, ParseErrorKind

MAX_YEAR = 9999


def _parse_component(
    text: str, kind: ParseErrorKind, range_kind: ParseErrorKind, max_digits: int, name: str, source: str
) -> int:
    if not text or not (text.isascii() and text.isdigit()):
        raise InputParseError(kind, source, f"invalid {name}")
    # Leading zeros are allowed, but the value itself is bounded by max_digits
    significant = text.lstrip("0")
    if len(significant) > max_digits:
        raise InputParseError(range_kind, source, f"{name} has too many digits")
    return int(significant or "0")


def _check_bounds(year: int, month: int, day: int, source: str) -> None:
    if not 0 <= year <= MAX_YEAR:
        raise InputParseError(ParseErrorKind.YEAR_OUT_OF_RANGE, source, f"year must be 0..={MAX_YEAR}")
    if not 1 <= month <= 12:
        raise InputParseError(ParseErrorKind.MONTH_OUT_OF_RANGE, source, "month must be 1..=12")
    if not 1 <= day <= 31:
        raise InputParseError(ParseErrorKind.DAY_OUT_OF_RANGE, source, "day must be 1..=31")


@dataclass(frozen=True, order=True)
class Date:
    """
    A calendar date.

    Day is only checked against 1..31, never against the length of the month,
    so values like 2026-02-31 are accepted.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        _check_bounds(self.year, self.month, self.day, f"{self.year}-{self.month}-{self.day}")

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    @classmethod
    def parse(cls, text: str) -> "Date":
        """Parse a YYYY-MM-DD string."""
        parts = text.split("-")
        if len(parts) != 3:
            raise InputParseError(
                ParseErrorKind.DATE_COMPONENT_COUNT, text, "date must have exactly three components"
            )

        year = _parse_component(
            parts[0], ParseErrorKind.INVALID_YEAR, ParseErrorKind.YEAR_OUT_OF_RANGE, 4, "year", text
        )
        month = _parse_component(
            parts[1], ParseErrorKind.INVALID_MONTH, ParseErrorKind.MONTH_OUT_OF_RANGE, 2, "month", text
        )
        day = _parse_component(
            parts[2], ParseErrorKind.INVALID_DAY, ParseErrorKind.DAY_OUT_OF_RANGE, 2, "day", text
        )

        _check_bounds(year, month, day, text)
        return cls(year, month, day)


@dataclass(frozen=True)
class DateRange:
    """An inclusive range of dates with start <= end."""

    start: Date
    end: Date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InputParseError(
                ParseErrorKind.RANGE_START_AFTER_END,
                str(self),
                "start date must not be after the end date",
            )

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"

    @classmethod
    def parse(cls, text: str) -> "DateRange":
        """Parse a START..END string, splitting on the first '..'."""
        start_text, sep, end_text = text.partition("..")
        if not sep:
            raise InputParseError(
                ParseErrorKind.RANGE_MISSING_DELIMITER,
                text,
                "date range must be in format YYYY-MM-DD..YYYY-MM-DD",
            )
        return cls(Date.parse(start_text), Date.parse(end_text))

    def contains(self, target: Date) -> bool:
        """Check if a date falls within this range (inclusive)."""
        return self.start <= target <= self.end
