"""Tests for the workflow layer."""

from unittest.mock import MagicMock

import pytest

from attendance.adapters.file_store import FileEntryStore
from attendance.config import Config
from attendance.core import Date, Entry, MergeAtDate, ReplaceAll, Subject
from attendance.errors import InputParseError, ParseErrorKind
from attendance.workflows import (
    add_attendance,
    get_store,
    list_all,
    list_by_date,
    list_by_range,
    list_by_subject,
)


@pytest.fixture
def store(tmp_path):
    return FileEntryStore(tmp_path / "store.json")


class TestGetStore:
    def test_uses_configured_path(self, tmp_path):
        store = get_store(Config(store_path=tmp_path / "a.json", indent=3))
        assert store.path == tmp_path / "a.json"
        assert store.indent == 3


class TestAddAttendance:
    def test_adds_to_empty_store(self, store):
        entry = add_attendance(store, "2026-01-01", "Dms, Tc")
        assert entry == Entry(Date(2026, 1, 1), [Subject.DMS, Subject.TC])
        assert list_all(store) == [entry]

    def test_merges_existing_date(self, store):
        store.write(
            ReplaceAll(
                [
                    Entry(Date(2026, 1, 1), [Subject.DMS, Subject.TC]),
                    Entry(Date(2026, 1, 3), [Subject.TOC]),
                ]
            )
        )
        add_attendance(store, "2026-01-01", "Mpi")

        result = list_by_date(store, "2026-01-01")
        assert len(result) == 1
        assert set(result[0].subjects) == {Subject.DMS, Subject.TC, Subject.MPI}
        assert list_by_date(store, "2026-01-03") == [Entry(Date(2026, 1, 3), [Subject.TOC])]

    def test_bad_date_writes_nothing(self):
        mock_store = MagicMock()
        with pytest.raises(InputParseError) as exc_info:
            add_attendance(mock_store, "2026-13-40", "Dms")
        assert exc_info.value.kind == ParseErrorKind.MONTH_OUT_OF_RANGE
        mock_store.write.assert_not_called()

    def test_bad_subject_writes_nothing(self):
        mock_store = MagicMock()
        with pytest.raises(InputParseError):
            add_attendance(mock_store, "2026-01-01", "Dms, Gym")
        mock_store.write.assert_not_called()

    def test_calls_store_with_merge(self):
        mock_store = MagicMock()
        mock_store.read.return_value = [Entry(Date(2026, 1, 1), [Subject.DMS])]
        add_attendance(mock_store, "2026-01-01", "Dms")
        mock_store.write.assert_called_once_with(MergeAtDate(Date(2026, 1, 1), [Subject.DMS]))


class TestListing:
    @pytest.fixture
    def populated(self, store):
        for day in ("2026-01-01", "2026-01-02", "2026-01-05"):
            add_attendance(store, day, "Dms")
        add_attendance(store, "2026-01-02", "Tc")
        return store

    def test_list_all_on_missing_store(self, store):
        assert list_all(store) == []

    def test_list_by_range(self, populated):
        result = list_by_range(populated, "2026-01-01..2026-01-02")
        assert [str(e.date) for e in result] == ["2026-01-01", "2026-01-02"]

    def test_list_by_subject(self, populated):
        result = list_by_subject(populated, "Tc")
        assert [str(e.date) for e in result] == ["2026-01-02"]

    def test_list_by_range_rejects_reversed(self, populated):
        with pytest.raises(InputParseError):
            list_by_range(populated, "2026-01-05..2026-01-01")

    def test_list_by_subject_rejects_unknown(self, populated):
        with pytest.raises(InputParseError):
            list_by_subject(populated, "tc")
