"""Shared test fixtures."""
from __future__ import annotations

import json

import pytest

from vocab_master.models import VocabularyEntry


@pytest.fixture
def sample_words():
    """Four words with distinct Korean definitions."""
    return [
        VocabularyEntry("cat", "고양이", "The cat sleeps on the sofa.", "noun", "/kæt/"),
        VocabularyEntry("dog", "개", "My dog likes to run.", "noun", "/dɔːɡ/"),
        VocabularyEntry("sun", "해", "The sun is bright today.", "noun"),
        VocabularyEntry("moon", "달", "The moon is full tonight.", "noun", "/muːn/"),
    ]


@pytest.fixture
def many_words(sample_words):
    """Eight words, enough for every question to get three distractors."""
    return sample_words + [
        VocabularyEntry("book", "책", "I read a book.", "noun"),
        VocabularyEntry("run", "달리다", "We run every morning.", "verb"),
        VocabularyEntry("happy", "행복한", "She looks happy.", "adjective"),
        VocabularyEntry("quickly", "빠르게", "He ate quickly.", "adverb"),
    ]


@pytest.fixture
def word_list_json():
    """A valid provider reply for a two-word list."""
    return json.dumps({
        "words": [
            {
                "term": "pencil",
                "definition": "연필",
                "example": "I write with a pencil.",
                "partOfSpeech": "noun",
                "pronunciation": "/ˈpensl/",
            },
            {
                "term": "student",
                "definition": "학생",
                "example": "Every student has a desk.",
                "partOfSpeech": "noun",
            },
        ]
    }, ensure_ascii=False)
