"""Tests for data models."""
from __future__ import annotations

import dataclasses

import pytest

from vocab_master.models import LEVELS, TOPICS, QuizQuestion, VocabularyEntry


class TestConstants:
    def test_topics(self):
        assert len(TOPICS) == 7
        assert "School" in TOPICS

    def test_levels(self):
        assert len(LEVELS) == 3
        assert LEVELS[0].startswith("Grade 1")


class TestVocabularyEntry:
    def test_create(self):
        w = VocabularyEntry("cat", "고양이", "The cat sleeps.", "noun")
        assert w.term == "cat"
        assert w.definition == "고양이"
        assert w.pronunciation is None

    def test_immutable(self):
        w = VocabularyEntry("cat", "고양이", "The cat sleeps.", "noun")
        with pytest.raises(dataclasses.FrozenInstanceError):
            w.term = "dog"

    def test_from_camel_case(self):
        w = VocabularyEntry.from_dict({
            "term": "apple",
            "definition": "사과",
            "example": "I eat an apple.",
            "partOfSpeech": "noun",
            "pronunciation": "/ˈæpəl/",
        })
        assert w == VocabularyEntry("apple", "사과", "I eat an apple.", "noun", "/ˈæpəl/")

    def test_from_snake_case(self):
        w = VocabularyEntry.from_dict({
            "term": "run",
            "definition": "달리다",
            "example": "We run.",
            "part_of_speech": "verb",
        })
        assert w is not None
        assert w.part_of_speech == "verb"

    def test_strips_whitespace(self):
        w = VocabularyEntry.from_dict({
            "term": "  cat ",
            "definition": "고양이\n",
            "example": "A cat.",
            "partOfSpeech": "noun",
            "pronunciation": "  ",
        })
        assert w.term == "cat"
        assert w.definition == "고양이"
        assert w.pronunciation is None

    def test_missing_required_field(self):
        assert VocabularyEntry.from_dict({
            "term": "cat",
            "definition": "고양이",
            "partOfSpeech": "noun",
        }) is None

    def test_non_string_field(self):
        assert VocabularyEntry.from_dict({
            "term": 42,
            "definition": "고양이",
            "example": "A cat.",
            "partOfSpeech": "noun",
        }) is None

    def test_not_a_dict(self):
        assert VocabularyEntry.from_dict(["cat"]) is None

    def test_to_dict_uses_wire_names(self, sample_words):
        d = sample_words[0].to_dict()
        assert d["partOfSpeech"] == "noun"
        assert d["pronunciation"] == "/kæt/"
        assert VocabularyEntry.from_dict(d) == sample_words[0]


class TestQuizQuestion:
    def test_create(self, sample_words):
        q = QuizQuestion(sample_words[0], ["개", "고양이"], "고양이")
        assert q.correct_answer in q.options
        assert q.word.term == "cat"
