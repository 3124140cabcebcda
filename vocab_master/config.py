from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from vocab_master.models import LEVELS, TOPICS

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.json"

DEFAULTS = {
    "llm_provider": "gemini",
    "llm_model": "gemini-2.5-flash",
    "tts_provider": "edge-tts",
    "tts_voice": "en-US-JennyNeural",
    "elevenlabs_model": "eleven_flash_v2_5",
    "ollama_url": "http://localhost:11434",
    "word_count": 10,
    "default_topic": TOPICS[1],
    "default_level": LEVELS[0],
    "audio_cache_dir": "audio_cache",
    "log_level": "INFO",
}


@dataclass
class Settings:
    llm_provider: str = DEFAULTS["llm_provider"]
    llm_model: str = DEFAULTS["llm_model"]
    tts_provider: str = DEFAULTS["tts_provider"]
    tts_voice: str = DEFAULTS["tts_voice"]
    elevenlabs_model: str = DEFAULTS["elevenlabs_model"]
    ollama_url: str = DEFAULTS["ollama_url"]
    word_count: int = DEFAULTS["word_count"]
    default_topic: str = DEFAULTS["default_topic"]
    default_level: str = DEFAULTS["default_level"]
    audio_cache_dir: str = DEFAULTS["audio_cache_dir"]
    log_level: str = DEFAULTS["log_level"]

    @property
    def project_root(self) -> Path:
        return Path(__file__).resolve().parent.parent

    @property
    def audio_cache_full_path(self) -> Path:
        # Absolute paths pass through unchanged
        return self.project_root / self.audio_cache_dir

    def to_dict(self) -> dict:
        return {
            "llm_provider": self.llm_provider,
            "llm_model": self.llm_model,
            "tts_provider": self.tts_provider,
            "tts_voice": self.tts_voice,
            "elevenlabs_model": self.elevenlabs_model,
            "ollama_url": self.ollama_url,
            "word_count": self.word_count,
            "default_topic": self.default_topic,
            "default_level": self.default_level,
            "audio_cache_dir": self.audio_cache_dir,
            "log_level": self.log_level,
        }


def load_settings() -> Settings:
    if CONFIG_PATH.exists():
        raw = json.loads(CONFIG_PATH.read_text())
        known = {f.name for f in Settings.__dataclass_fields__.values()}
        filtered = {k: v for k, v in raw.items() if k in known}
        return Settings(**filtered)
    return Settings()


def save_settings(settings: Settings) -> None:
    CONFIG_PATH.write_text(json.dumps(settings.to_dict(), indent=4, ensure_ascii=False) + "\n")
