"""Pronunciation audio: synthesize once, serve from the cache directory."""
from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vocab_master.providers.base import TTSProvider

_log = logging.getLogger("vocab_master.audio")

AUDIO_ERROR_NOTICE = "오디오 재생 중 오류가 발생했습니다."


def sentence_hash(text: str) -> str:
    return hashlib.sha256(text.encode()).hexdigest()[:16]


async def get_or_create_audio(
    text: str,
    tts: TTSProvider,
    cache_dir: Path,
) -> Path | None:
    """Get cached audio or generate new TTS audio. Returns None on failure."""
    cache_dir.mkdir(parents=True, exist_ok=True)
    output_path = cache_dir / f"{sentence_hash(text)}.mp3"
    if output_path.exists() and output_path.stat().st_size > 0:
        return output_path

    try:
        await tts.synthesize(text, output_path)
    except Exception as e:
        _log.warning("TTS error (%s) for %r: %s", tts.name(), text, e)
        output_path.unlink(missing_ok=True)
        return None
    _log.info("Synthesized %r with %s", text, tts.name())
    return output_path
