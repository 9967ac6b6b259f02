"""Data models for verses and passages.

Provides the Verse dataclass stored in the favorites file and the
SingleVerse / VerseList passage variants returned by the verse service.
"""

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass
class Verse:
    """A looked-up (or bookmarked) passage.

    Attributes:
        reference: Human-readable locator (e.g., "John 3:16")
        translation: Name of the translation the text came from
        text: Passage text
    """

    reference: str
    translation: str
    text: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Verse":
        """Create a Verse from a favorites file entry.

        Args:
            data: Dictionary with reference, translation and text keys

        Returns:
            Verse instance

        Raises:
            KeyError: If reference or text is missing
        """
        return cls(
            reference=str(data["reference"]),
            translation=str(data.get("translation") or ""),
            text=str(data["text"]),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert Verse to dictionary.

        Returns:
            Dictionary representation written to the favorites file
        """
        return {
            "reference": self.reference,
            "translation": self.translation,
            "text": self.text,
        }

    @property
    def key(self) -> str:
        """Case-insensitive identity of the verse."""
        return self.reference.lower()


@dataclass
class VerseEntry:
    """One verse inside a multi-verse passage."""

    book_name: str
    chapter: int
    verse: int
    text: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "VerseEntry":
        return cls(
            book_name=str(data["book_name"]),
            chapter=int(data["chapter"]),
            verse=int(data["verse"]),
            text=str(data["text"]),
        )


@dataclass
class SingleVerse:
    """Passage returned as one block of text."""

    reference: str
    translation: str
    text: str

    def to_verse(self) -> Verse:
        """Convert to the Verse kept as the last viewed passage."""
        return Verse(
            reference=self.reference,
            translation=self.translation,
            text=self.text.strip(),
        )


@dataclass
class VerseList:
    """Passage returned as a list of individual verses.

    Attributes:
        reference: Reference for the whole passage (e.g., "John 3:16-17")
        translation: Translation name
        entries: Verses in response order
        text: Combined passage text, if the service supplied one
    """

    reference: str
    translation: str
    entries: list[VerseEntry] = field(default_factory=list)
    text: str = ""

    def to_verse(self) -> Verse:
        """Convert to the Verse kept as the last viewed passage."""
        text = self.text.strip()
        if not text:
            text = " ".join(entry.text.strip() for entry in self.entries)
        return Verse(reference=self.reference, translation=self.translation, text=text)


Passage = Union[SingleVerse, VerseList]


def parse_passage(data: dict[str, Any]) -> Passage:
    """Resolve a verse service response into a passage variant.

    Args:
        data: Decoded JSON response body

    Returns:
        VerseList when the response carries a non-empty ``verses`` array,
        otherwise SingleVerse

    Raises:
        KeyError: If a required field is missing
        TypeError, ValueError: If a field has the wrong shape
    """
    reference = str(data["reference"])
    translation = str(data.get("translation_name") or "")

    verses = data.get("verses")
    if verses:
        return VerseList(
            reference=reference,
            translation=translation,
            entries=[VerseEntry.from_dict(v) for v in verses],
            text=str(data.get("text") or ""),
        )

    return SingleVerse(reference=reference, translation=translation, text=str(data["text"]))
