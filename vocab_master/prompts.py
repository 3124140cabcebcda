"""Prompt templates for word-list generation."""
from __future__ import annotations

WORD_LIST_PROMPT = """\
Generate a list of {count} English vocabulary words suitable for Middle School \
students (Level: {level}) related to the topic "{topic}".

For every word include:
- "term": the English word
- "definition": its meaning in Korean
- "example": a simple example sentence in English that uses the word
- "partOfSpeech": the part of speech (noun, verb, adjective, ...)
- "pronunciation": phonetic spelling, e.g. /æpəl/

Use {count} different words. Do not repeat a word or a Korean definition.

Respond in this exact JSON format only, with no other text:
{{
  "words": [
    {{
      "term": "apple",
      "definition": "사과",
      "example": "I eat an apple every morning.",
      "partOfSpeech": "noun",
      "pronunciation": "/ˈæpəl/"
    }}
  ]
}}
"""


def format_word_list_prompt(topic: str, level: str, count: int = 10) -> str:
    return WORD_LIST_PROMPT.format(topic=topic, level=level, count=count)
