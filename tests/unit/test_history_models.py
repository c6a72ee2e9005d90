"""Unit tests for history records and parsing."""

import json
from datetime import UTC, datetime
from pathlib import Path

import pytest

from stillpoint.errors import HistoryFormatError
from stillpoint.history import HistoryEntry, load_history, parse_history, parse_timestamp


class TestParseTimestamp:
    """Tests for parse_timestamp."""

    def test_iso_with_z(self) -> None:
        """Test the JavaScript toISOString format."""
        assert parse_timestamp("2024-03-04T07:30:00.000Z") == datetime(
            2024, 3, 4, 7, 30, tzinfo=UTC
        )

    def test_naive_iso(self) -> None:
        """Test a local time without offset."""
        assert parse_timestamp("2024-03-04T07:30:00") == datetime(2024, 3, 4, 7, 30)

    def test_epoch_milliseconds(self) -> None:
        """Test epoch milliseconds."""
        assert parse_timestamp(1709537400000) == datetime(2024, 3, 4, 7, 30, tzinfo=UTC)

    def test_datetime_passthrough(self) -> None:
        """Test that datetimes are returned unchanged."""
        value = datetime(2024, 3, 4, 7, 30)
        assert parse_timestamp(value) is value

    @pytest.mark.parametrize("value", [None, "", "yesterday", True, [], {}])
    def test_unparseable(self, value: object) -> None:
        """Test values that cannot be interpreted."""
        assert parse_timestamp(value) is None


class TestHistoryEntryFromDict:
    """Tests for HistoryEntry.from_dict."""

    def test_snake_case(self) -> None:
        """Test stored records."""
        entry = HistoryEntry.from_dict(
            {
                "activity_id": "core-flow",
                "completed_at": datetime(2024, 3, 4, 7, 30),
                "duration_minutes": 15,
                "pre_mood": 2,
                "mood_improvement": 2,
                "energy_improvement": 1,
            }
        )

        assert entry == HistoryEntry("core-flow", datetime(2024, 3, 4, 7, 30), 15, 2, 2, 1)
        assert entry.is_valid

    def test_camel_case_session(self) -> None:
        """Test records exported by the mobile app."""
        entry = HistoryEntry.from_dict(
            {
                "sessionId": "morning-energizer",
                "completedAt": "2024-03-04T07:30:00.000Z",
                "duration": 5,
                "preMood": 2,
                "moodImprovement": 2,
            }
        )

        assert entry.activity_id == "morning-energizer"
        assert entry.completed_at == datetime(2024, 3, 4, 7, 30, tzinfo=UTC)
        assert entry.duration_minutes == 5
        assert entry.pre_mood == 2
        assert entry.mood_improvement == 2
        assert entry.energy_improvement is None

    def test_exercise_id(self) -> None:
        """Test breathing exercise records."""
        entry = HistoryEntry.from_dict(
            {"exerciseId": "box-breathing", "completedAt": "2024-03-04T22:00:00"}
        )

        assert entry.activity_id == "box-breathing"

    def test_bad_values_make_invalid_entry(self) -> None:
        """Test that bad fields never raise."""
        entry = HistoryEntry.from_dict(
            {"sessionId": "x", "completedAt": "not a date", "duration": "long", "preMood": "ok"}
        )

        assert entry.completed_at is None
        assert entry.duration_minutes == 0
        assert entry.pre_mood is None
        assert not entry.is_valid

    def test_missing_id(self) -> None:
        """Test a record without any activity id."""
        entry = HistoryEntry.from_dict({"completedAt": "2024-03-04T07:30:00"})

        assert entry.activity_id == ""
        assert not entry.is_valid

    def test_numeric_strings(self) -> None:
        """Test numbers stored as strings."""
        entry = HistoryEntry.from_dict(
            {"activity_id": "x", "completed_at": "2024-03-04T07:30:00", "duration_minutes": "12.5"}
        )

        assert entry.duration_minutes == 12.5

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), "NaN", "Infinity", "-Infinity"])
    def test_non_finite_numbers_dropped(self, value: object) -> None:
        """Test that NaN and infinite values are treated as missing."""
        entry = HistoryEntry.from_dict(
            {
                "sessionId": "x",
                "completedAt": "2024-03-04T07:30:00",
                "duration": value,
                "preMood": value,
                "moodImprovement": value,
                "energyImprovement": value,
            }
        )

        assert entry.duration_minutes == 0
        assert entry.pre_mood is None
        assert entry.mood_improvement is None
        assert entry.energy_improvement is None
        assert entry.is_valid

    def test_to_dict_round_trip(self) -> None:
        """Test that stored dictionaries read back unchanged."""
        entry = HistoryEntry("x", datetime(2024, 3, 4, 7, 30), 10, 3, -1, 0)

        assert HistoryEntry.from_dict(entry.to_dict()) == entry


class TestLoadHistory:
    """Tests for load_history."""

    def test_list(self, tmp_path: Path) -> None:
        """Test a file holding a list of records."""
        path = tmp_path / "history.json"
        path.write_text(
            json.dumps(
                [
                    {"sessionId": "a", "completedAt": "2024-03-04T07:30:00Z"},
                    {"exerciseId": "b", "completedAt": "2024-03-05T21:00:00Z"},
                ]
            )
        )

        assert [e.activity_id for e in load_history(path)] == ["a", "b"]

    @pytest.mark.parametrize("key", ["history", "practiceHistory"])
    def test_wrapped(self, tmp_path: Path, key: str) -> None:
        """Test a file holding an object with a history list."""
        path = tmp_path / "history.json"
        path.write_text(json.dumps({key: [{"sessionId": "a", "completedAt": "2024-03-04"}]}))

        assert len(load_history(path)) == 1

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file."""
        with pytest.raises(HistoryFormatError, match="not found"):
            load_history(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Test unparseable JSON."""
        path = tmp_path / "history.json"
        path.write_text("[{")

        with pytest.raises(HistoryFormatError):
            load_history(path)

    def test_non_finite_json_literals(self, tmp_path: Path) -> None:
        """Test the NaN and Infinity literals that json.load accepts."""
        path = tmp_path / "history.json"
        path.write_text(
            '[{"sessionId": "a", "completedAt": "2024-03-04T07:30:00", '
            '"duration": NaN, "moodImprovement": Infinity}]'
        )

        [entry] = load_history(path)

        assert entry.duration_minutes == 0
        assert entry.mood_improvement is None

    def test_not_a_list(self, tmp_path: Path) -> None:
        """Test JSON that holds no list of records."""
        path = tmp_path / "history.json"
        path.write_text(json.dumps({"sessions": 3}))

        with pytest.raises(HistoryFormatError):
            load_history(path)

    def test_parse_history_skips_non_mappings(self) -> None:
        """Test that stray values are dropped."""
        entries = parse_history([{"sessionId": "a"}, "oops", 3])  # type: ignore[list-item]

        assert [e.activity_id for e in entries] == ["a"]
