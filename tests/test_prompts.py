"""Tests for prompt templates."""
from __future__ import annotations

from vocab_master.models import LEVELS
from vocab_master.prompts import WORD_LIST_PROMPT, format_word_list_prompt


class TestWordListPrompt:
    def test_placeholders(self):
        for name in ("{topic}", "{level}", "{count}"):
            assert name in WORD_LIST_PROMPT

    def test_format(self):
        prompt = format_word_list_prompt("Emotions", LEVELS[2], 10)
        assert '"Emotions"' in prompt
        assert "(Level: Grade 3 (초5-6 수준))" in prompt
        assert "list of 10" in prompt

    def test_json_example_survives_formatting(self):
        prompt = format_word_list_prompt("Food", LEVELS[0])
        assert '"words": [' in prompt
        assert '"partOfSpeech": "noun"' in prompt
        assert "{{" not in prompt
