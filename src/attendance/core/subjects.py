"""Subject vocabulary - no I/O dependencies."""

from enum import Enum

from attendance.errors import InputParseError, ParseErrorKind


class Subject(Enum):
    """A subject that can be attended."""

    DMS = "Dms"
    TC = "Tc"
    MPI = "Mpi"
    DBMS = "Dbms"
    TOC = "Toc"
    DCCN = "Dccn"
    MPI_LAB = "MpiLab"
    DBMS_LAB = "DbmsLab"
    NP_LAB = "NpLab"
    LINUX_LAB = "LinuxLab"
    JAVA_LAB = "JavaLab"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "Subject":
        """Exact, case-sensitive lookup. No trimming is done here."""
        try:
            return cls(text)
        except ValueError:
            raise InputParseError(ParseErrorKind.UNKNOWN_SUBJECT, text, "subject not found") from None


def parse_subject_list(text: str) -> list[Subject]:
    """
    Parse a comma separated list like "Dms, Tc".

    Items are trimmed before lookup. Blank items are rejected.
    """
    subjects = []
    for item in text.split(","):
        item = item.strip()
        if not item:
            raise InputParseError(ParseErrorKind.EMPTY_SUBJECT_LIST, text, "subject list has an empty item")
        subjects.append(Subject.parse(item))
    return subjects
