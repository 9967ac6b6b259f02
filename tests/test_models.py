"""Tests for verse and passage models."""

import pytest

from terminal_bible.models import SingleVerse, Verse, VerseEntry, VerseList, parse_passage


class TestVerse:
    """Tests for Verse serialization."""

    def test_to_dict_keys(self, john_3_16):
        """Favorites file keys are reference, translation, text."""
        assert list(john_3_16.to_dict()) == ["reference", "translation", "text"]

    def test_from_dict_missing_translation(self):
        """Translation is optional in stored entries."""
        verse = Verse.from_dict({"reference": "John 3:16", "text": "For God so loved"})

        assert verse.translation == ""

    def test_from_dict_requires_reference(self):
        with pytest.raises(KeyError):
            Verse.from_dict({"text": "orphan"})

    def test_key_is_lower_case(self):
        assert Verse("John 3:16", "", "").key == "john 3:16"


class TestParsePassage:
    """Tests for resolving API responses into passage variants."""

    def test_single_verse(self, single_verse_payload):
        passage = parse_passage(single_verse_payload)

        assert isinstance(passage, SingleVerse)
        assert passage.to_verse() == Verse(
            reference="John 3:16",
            translation="World English Bible",
            text="For God so loved the world, that he gave his one and only Son.",
        )

    def test_verse_list(self, verse_list_payload):
        passage = parse_passage(verse_list_payload)

        assert isinstance(passage, VerseList)
        assert passage.entries[1] == VerseEntry(
            book_name="1 Thessalonians",
            chapter=1,
            verse=3,
            text="remembering without ceasing your work of faith.\n",
        )

    def test_empty_verses_is_single(self, single_verse_payload):
        """An empty verses array falls back to the single-verse shape."""
        single_verse_payload["verses"] = []

        assert isinstance(parse_passage(single_verse_payload), SingleVerse)

    def test_verse_list_without_combined_text(self, verse_list_payload):
        """Without a combined text field, entries are joined."""
        del verse_list_payload["text"]

        verse = parse_passage(verse_list_payload).to_verse()

        assert verse.text == (
            "We always give thanks to God for all of you. "
            "remembering without ceasing your work of faith."
        )

    def test_missing_reference(self):
        with pytest.raises(KeyError):
            parse_passage({"text": "no reference"})

    def test_bad_verse_number(self, verse_list_payload):
        verse_list_payload["verses"][0]["verse"] = "two"

        with pytest.raises(ValueError):
            parse_passage(verse_list_payload)
