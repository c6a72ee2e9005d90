"""Unit tests for mood analytics."""

from datetime import datetime

import pytest

from stillpoint.engine import MoodTrend, summarize_mood
from stillpoint.errors import InvalidArgumentError
from stillpoint.history import HistoryEntry

NOW = datetime(2024, 3, 20, 12, 0)


class TestSummarizeMood:
    """Tests for summarize_mood."""

    def test_no_history(self) -> None:
        """Test an empty history."""
        summary = summarize_mood([], NOW)

        assert summary.trend is MoodTrend.INSUFFICIENT_DATA
        assert summary.total_sessions == 0
        assert summary.improvement_rate == 0

    def test_sessions_without_mood(self, entry) -> None:
        """Test sessions that recorded no mood."""
        summary = summarize_mood([entry("a", day=18), entry("b", day=19)], NOW)

        assert summary.trend is MoodTrend.INSUFFICIENT_DATA
        assert summary.total_sessions == 2
        assert summary.sessions_with_mood_data == 0

    def test_improving(self, entry) -> None:
        """Test an improving trend."""
        history = [
            entry("a", day=15, mood_improvement=2, energy_improvement=1),
            entry("b", day=16, mood_improvement=1, energy_improvement=2),
            entry("c", day=17, mood_improvement=0),
        ]

        summary = summarize_mood(history, NOW)

        assert summary.trend is MoodTrend.IMPROVING
        assert summary.average_mood_improvement == 1.0
        assert summary.average_energy_improvement == 1.0
        assert summary.sessions_with_mood_data == 3
        assert summary.improvement_rate == 67

    def test_declining(self, entry) -> None:
        """Test a declining trend."""
        history = [entry("a", day=15, mood_improvement=-1), entry("b", day=16, mood_improvement=-2)]

        summary = summarize_mood(history, NOW)

        assert summary.trend is MoodTrend.DECLINING
        assert summary.average_mood_improvement == -1.5
        assert summary.improvement_rate == 0

    def test_stable(self, entry) -> None:
        """Test a stable trend at the threshold."""
        history = [entry("a", day=15, mood_improvement=0.5), entry("b", day=16, mood_improvement=0.5)]

        assert summarize_mood(history, NOW).trend is MoodTrend.STABLE

    def test_rounds_to_two_decimals(self, entry) -> None:
        """Test rounding of averages."""
        history = [
            entry("a", day=15, mood_improvement=1),
            entry("b", day=16, mood_improvement=1),
            entry("c", day=17, mood_improvement=0),
        ]

        assert summarize_mood(history, NOW).average_mood_improvement == 0.67

    def test_window(self, entry) -> None:
        """Test that sessions outside the window are ignored."""
        history = [
            entry("old", day=1, mood_improvement=-3),
            entry("recent", day=18, mood_improvement=2),
        ]

        summary = summarize_mood(history, NOW, days=7)

        assert summary.total_sessions == 1
        assert summary.average_mood_improvement == 2.0

    def test_skips_malformed(self, entry) -> None:
        """Test that malformed entries do not count."""
        history = [entry("a", day=18, mood_improvement=1), HistoryEntry("b", None, mood_improvement=5)]

        summary = summarize_mood(history, NOW)

        assert summary.total_sessions == 1
        assert summary.average_mood_improvement == 1.0

    def test_skips_non_finite_mood(self, entry) -> None:
        """Test that NaN and infinite values are left out of the averages."""
        history = [
            entry("a", day=16, mood_improvement=1, energy_improvement=float("inf")),
            entry("b", day=17, mood_improvement=float("nan")),
            entry("c", day=18, mood_improvement=float("-inf")),
        ]

        summary = summarize_mood(history, NOW)

        assert summary.total_sessions == 3
        assert summary.sessions_with_mood_data == 1
        assert summary.average_mood_improvement == 1.0
        assert summary.average_energy_improvement == 0
        assert summary.trend is MoodTrend.IMPROVING

    def test_invalid_days(self) -> None:
        """Test that the window must be positive."""
        with pytest.raises(InvalidArgumentError):
            summarize_mood([], NOW, days=0)
