from __future__ import annotations

from dataclasses import dataclass, field

TOPICS = (
    "Daily Life",
    "School",
    "Travel",
    "Science",
    "Emotions",
    "Food",
    "Hobbies",
)

LEVELS = (
    "Grade 1 (초1-2 수준)",
    "Grade 2 (초3-4 수준)",
    "Grade 3 (초5-6 수준)",
)

# Wire name -> attribute name. Providers answer in camelCase.
_REQUIRED_FIELDS = {
    "term": "term",
    "definition": "definition",
    "example": "example",
    "partOfSpeech": "part_of_speech",
}


@dataclass(frozen=True)
class VocabularyEntry:
    term: str
    definition: str  # Korean meaning
    example: str
    part_of_speech: str
    pronunciation: str | None = None  # phonetic spelling, e.g. /æpəl/

    @classmethod
    def from_dict(cls, data: dict) -> VocabularyEntry | None:
        """Build an entry from a provider record, or None if it is unusable."""
        if not isinstance(data, dict):
            return None
        values = {}
        for wire, attr in _REQUIRED_FIELDS.items():
            value = data.get(wire, data.get(attr))
            if not isinstance(value, str) or not value.strip():
                return None
            values[attr] = value.strip()
        pronunciation = data.get("pronunciation")
        if not isinstance(pronunciation, str) or not pronunciation.strip():
            pronunciation = None
        else:
            pronunciation = pronunciation.strip()
        return cls(pronunciation=pronunciation, **values)

    def to_dict(self) -> dict:
        return {
            "term": self.term,
            "definition": self.definition,
            "example": self.example,
            "partOfSpeech": self.part_of_speech,
            "pronunciation": self.pronunciation,
        }


@dataclass
class QuizQuestion:
    word: VocabularyEntry
    options: list[str] = field(default_factory=list)
    correct_answer: str = ""
