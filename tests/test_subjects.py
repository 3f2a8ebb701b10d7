"""Tests for the subject vocabulary."""

import pytest

from attendance.core.subjects import Subject, parse_subject_list
from attendance.errors import InputParseError, ParseErrorKind


class TestSubject:
    @pytest.mark.parametrize("subject", list(Subject))
    def test_round_trip(self, subject):
        assert Subject.parse(str(subject)) is subject

    def test_known_identifiers(self):
        assert Subject.parse("Dms") is Subject.DMS
        assert Subject.parse("MpiLab") is Subject.MPI_LAB
        assert str(Subject.JAVA_LAB) == "JavaLab"

    @pytest.mark.parametrize("text", ["dms", "DMS", " Dms", "Dms ", "", "Physics"])
    def test_rejects_anything_else(self, text):
        with pytest.raises(InputParseError) as exc_info:
            Subject.parse(text)
        assert exc_info.value.kind == ParseErrorKind.UNKNOWN_SUBJECT


class TestParseSubjectList:
    def test_trims_items(self):
        assert parse_subject_list("Dms, Tc ,  Mpi") == [Subject.DMS, Subject.TC, Subject.MPI]

    def test_single_item(self):
        assert parse_subject_list("NpLab") == [Subject.NP_LAB]

    def test_keeps_duplicates_for_merge_to_handle(self):
        assert parse_subject_list("Dms,Dms") == [Subject.DMS, Subject.DMS]

    def test_unknown_item(self):
        with pytest.raises(InputParseError) as exc_info:
            parse_subject_list("Dms, Chemistry")
        assert exc_info.value.kind == ParseErrorKind.UNKNOWN_SUBJECT
        assert exc_info.value.text == "Chemistry"

    @pytest.mark.parametrize("text", ["", "Dms,", "Dms,,Tc", "  "])
    def test_empty_item(self, text):
        with pytest.raises(InputParseError) as exc_info:
            parse_subject_list(text)
        assert exc_info.value.kind == ParseErrorKind.EMPTY_SUBJECT_LIST
