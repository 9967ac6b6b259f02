"""Shared fixtures for terminal-bible tests."""

from unittest.mock import MagicMock

import pytest

from terminal_bible.config import AppConfig
from terminal_bible.models import Verse, VerseEntry, VerseList, SingleVerse
from terminal_bible.services.favorites import FavoritesStore


@pytest.fixture
def favorites_path(tmp_path):
    """Temporary favorites file path (not created)."""
    return tmp_path / ".verse_favorites.json"


@pytest.fixture
def store(favorites_path):
    """FavoritesStore backed by a temporary file."""
    return FavoritesStore(favorites_path)


@pytest.fixture
def john_3_16():
    """Sample verse as stored in favorites."""
    return Verse(
        reference="John 3:16",
        translation="World English Bible",
        text="For God so loved the world, that he gave his one and only Son.",
    )


@pytest.fixture
def single_verse_payload():
    """Response body for a single-verse lookup."""
    return {
        "reference": "John 3:16",
        "text": "For God so loved the world, that he gave his one and only Son.\n",
        "translation_name": "World English Bible",
    }


@pytest.fixture
def verse_list_payload():
    """Response body for a multi-verse lookup (bible-api.com shape)."""
    return {
        "reference": "1 Thessalonians 1:2-3",
        "verses": [
            {
                "book_id": "1TH",
                "book_name": "1 Thessalonians",
                "chapter": 1,
                "verse": 2,
                "text": "We always give thanks to God for all of you.\n",
            },
            {
                "book_id": "1TH",
                "book_name": "1 Thessalonians",
                "chapter": 1,
                "verse": 3,
                "text": "remembering without ceasing your work of faith.\n",
            },
        ],
        "text": "We always give thanks to God for all of you.\nremembering without ceasing your work of faith.\n",
        "translation_id": "web",
        "translation_name": "World English Bible",
    }


@pytest.fixture
def john_passage():
    """VerseList returned by a successful 'john 3:16' lookup."""
    return VerseList(
        reference="John 3:16",
        translation="World English Bible",
        entries=[
            VerseEntry(
                book_name="John",
                chapter=3,
                verse=16,
                text="For God so loved the world, that he gave his one and only Son.\n",
            )
        ],
        text="For God so loved the world, that he gave his one and only Son.\n",
    )


@pytest.fixture
def psalm_passage():
    """SingleVerse passage."""
    return SingleVerse(
        reference="Psalms 23:1",
        translation="World English Bible",
        text="Yahweh is my shepherd: I shall lack nothing.\n",
    )


@pytest.fixture
def mock_fetcher(john_passage):
    """Verse fetcher stub returning John 3:16 for any query."""
    fetcher = MagicMock()
    fetcher.base_url = "https://bible-api.com"
    fetcher.fetch.return_value = john_passage
    return fetcher


@pytest.fixture
def app_config(tmp_path, favorites_path):
    """AppConfig pointing at temporary paths."""
    return AppConfig(
        api_base_url="https://bible-api.com",
        favorites_path=favorites_path,
        log_dir=tmp_path / "logs",
    )
