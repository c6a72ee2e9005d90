"""Contract tests for the practice history repository.

Tests the MongoDB repository contract for storing and reading history.
"""

from datetime import datetime

import pytest
from mongomock import MongoClient

from stillpoint.catalog import builtin_catalog
from stillpoint.engine import RecommendationCategory, Recommender
from stillpoint.history import HistoryEntry
from stillpoint.storage import MongoHistoryRepository


@pytest.fixture
def mock_db():
    """Create a mock MongoDB database for testing."""
    client = MongoClient()
    return client["stillpoint_test"]


@pytest.fixture
def repository(mock_db) -> MongoHistoryRepository:
    """Create MongoHistoryRepository with mock database."""
    return MongoHistoryRepository(mock_db)


def practice(activity_id: str, day: int, hour: int = 7, **kwargs: float) -> HistoryEntry:
    # Second precision avoids millisecond truncation in BSON dates
    return HistoryEntry(activity_id, datetime(2024, 3, day, hour, 0), 10, **kwargs)


class TestHistoryRepositoryInsert:
    """Contract tests for MongoHistoryRepository.insert()."""

    def test_insert_returns_document_id(self, repository: MongoHistoryRepository) -> None:
        """Test that insert returns a valid document ID."""
        doc_id = repository.insert(practice("core-flow", 4))

        assert isinstance(doc_id, str)
        assert len(doc_id) > 0

    def test_insert_stores_all_fields(self, repository: MongoHistoryRepository) -> None:
        """Test that insert persists every entry field."""
        entry = practice("core-flow", 4, pre_mood=2, mood_improvement=2, energy_improvement=1)

        doc_id = repository.insert(entry, user_id="alice")

        doc = repository._collection.find_one({"_id": doc_id})
        assert doc is not None
        assert doc["user_id"] == "alice"
        assert doc["activity_id"] == "core-flow"
        assert doc["completed_at"] == datetime(2024, 3, 4, 7, 0)
        assert doc["duration_minutes"] == 10
        assert doc["pre_mood"] == 2
        assert doc["mood_improvement"] == 2
        assert doc["energy_improvement"] == 1

    def test_insert_unique_ids(self, repository: MongoHistoryRepository) -> None:
        """Test that each insert gets its own ID."""
        entry = practice("core-flow", 4)

        assert repository.insert(entry) != repository.insert(entry)


class TestHistoryRepositoryRead:
    """Contract tests for reading history back."""

    def test_get_history_oldest_first(self, repository: MongoHistoryRepository) -> None:
        """Test that history is returned in completion order."""
        repository.insert(practice("b", 6))
        repository.insert(practice("a", 2))
        repository.insert(practice("c", 9))

        history = repository.get_history("default")

        assert [e.activity_id for e in history] == ["a", "b", "c"]
        assert all(isinstance(e, HistoryEntry) for e in history)

    def test_round_trip(self, repository: MongoHistoryRepository) -> None:
        """Test that a stored entry reads back equal."""
        entry = practice("core-flow", 4, pre_mood=3, mood_improvement=-1)
        repository.insert(entry)

        assert repository.get_history("default") == [entry]

    def test_users_isolated(self, repository: MongoHistoryRepository) -> None:
        """Test that users only see their own history."""
        repository.insert(practice("a", 2), user_id="alice")
        repository.insert(practice("b", 3), user_id="bob")

        assert [e.activity_id for e in repository.get_history("alice")] == ["a"]
        assert repository.get_history("carol") == []

    def test_get_since(self, repository: MongoHistoryRepository) -> None:
        """Test filtering by completion time."""
        repository.insert(practice("a", 2))
        repository.insert(practice("b", 5))
        repository.insert(practice("c", 8))

        recent = repository.get_since("default", datetime(2024, 3, 5, 0, 0))

        assert [e.activity_id for e in recent] == ["b", "c"]

    def test_count(self, repository: MongoHistoryRepository) -> None:
        """Test counting a user's entries."""
        repository.insert(practice("a", 2), user_id="alice")
        repository.insert(practice("b", 3), user_id="alice")

        assert repository.count("alice") == 2
        assert repository.count("bob") == 0

    def test_custom_collection(self, mock_db) -> None:
        """Test the collection name override."""
        repository = MongoHistoryRepository(mock_db, "sessions")
        repository.insert(practice("a", 2))

        assert mock_db["sessions"].count_documents({}) == 1


class TestHistoryRepositoryAsProvider:
    """Contract tests for feeding stored history to the recommender."""

    def test_recommend_from_stored_history(self, repository: MongoHistoryRepository) -> None:
        """Test a routine recommendation from stored morning practice."""
        for day, activity_id in enumerate(["core-flow", "sun-salutation", "box-breathing"], 1):
            repository.insert(practice(activity_id, day, hour=7), user_id="alice")

        recommender = Recommender(builtin_catalog())
        result = recommender.recommend(datetime(2024, 3, 10, 8, 0), repository.get_history("alice"))

        assert result.activity_id == "morning-energizer"
        assert result.category is RecommendationCategory.ROUTINE
