"""Ask the LLM for a vocabulary list and turn its reply into entries."""
from __future__ import annotations

import json
import logging
import re
from typing import TYPE_CHECKING

from vocab_master.models import LEVELS, TOPICS, VocabularyEntry
from vocab_master.prompts import format_word_list_prompt
from vocab_master.providers.base import ProviderError

if TYPE_CHECKING:
    from vocab_master.providers.base import LLMProvider

_log = logging.getLogger("vocab_master.words")

MAX_WORDS = 10


def _extract_json(text: str) -> dict | list | None:
    """Extract a JSON value from an LLM reply, handling markdown code fences.

    Strips ``<think>`` blocks first.  Tries the whole reply, then a
    code-fenced value, then embedded ``{…}`` objects, preferring the *last*
    one since models sometimes draft partial JSON before the final answer.
    """
    text = re.sub(r"<think>.*?</think>", "", text, flags=re.DOTALL).strip()
    if not text:
        return None

    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    m = re.search(r"```(?:json)?\s*\n?([\[{].*?[\]}])\s*\n?```", text, re.DOTALL)
    if m:
        try:
            return json.loads(m.group(1))
        except json.JSONDecodeError:
            pass

    objects = _decode_objects(text)
    return objects[-1] if objects else None


def _decode_objects(text: str) -> list[dict]:
    """Decode every top-level ``{…}`` object embedded in *text*."""
    decoder = json.JSONDecoder()
    objects: list[dict] = []
    i = text.find("{")
    while i >= 0:
        try:
            obj, end = decoder.raw_decode(text, i)
        except json.JSONDecodeError:
            i = text.find("{", i + 1)
            continue
        objects.append(obj)
        i = text.find("{", end)
    return objects


def parse_word_list(text: str, limit: int = MAX_WORDS) -> list[VocabularyEntry]:
    """Parse an LLM reply into at most *limit* valid entries.

    Accepts ``{"words": [...]}`` or a bare array.  Records missing a
    required field are dropped.
    """
    data = _extract_json(text or "")
    if isinstance(data, dict):
        data = data.get("words")
    if not isinstance(data, list):
        return []

    entries: list[VocabularyEntry] = []
    for record in data:
        entry = VocabularyEntry.from_dict(record)
        if entry is None:
            _log.debug("Dropping malformed record: %r", record)
            continue
        entries.append(entry)
        if len(entries) >= limit:
            break
    return entries


async def generate_word_list(
    llm: LLMProvider,
    topic: str,
    level: str,
    count: int = MAX_WORDS,
) -> list[VocabularyEntry]:
    """Generate a word list for *topic* at *level*.

    Returns an empty list when the reply is empty, malformed, or the call
    fails.  ``ProviderError`` propagates so callers can report a missing
    key or unreachable service.
    """
    if topic not in TOPICS:
        raise ValueError(f"Unknown topic: {topic}")
    if level not in LEVELS:
        raise ValueError(f"Unknown level: {level}")
    count = max(1, min(count, MAX_WORDS))

    prompt = format_word_list_prompt(topic, level, count)
    try:
        text = await llm.generate(prompt, json_mode=True)
    except ProviderError:
        raise
    except Exception as e:
        _log.warning("Word generation failed (%s): %s", llm.name(), e)
        return []

    words = parse_word_list(text, limit=count)
    if not words:
        _log.warning("No usable words in %s reply for %r / %r", llm.name(), topic, level)
    else:
        _log.info("Generated %d words for %r / %r via %s", len(words), topic, level, llm.name())
    return words
