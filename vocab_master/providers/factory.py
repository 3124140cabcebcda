"""Build the configured LLM and TTS providers."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vocab_master.config import Settings
    from vocab_master.providers.base import LLMProvider, TTSProvider


LLM_PROVIDERS = ("gemini", "ollama", "anthropic", "openai")
TTS_PROVIDERS = ("edge-tts", "elevenlabs")


def get_llm(s: Settings) -> LLMProvider:
    if s.llm_provider == "gemini":
        from vocab_master.providers.llm_gemini import GeminiProvider
        return GeminiProvider(model=s.llm_model)
    elif s.llm_provider == "ollama":
        from vocab_master.providers.llm_ollama import OllamaProvider
        return OllamaProvider(base_url=s.ollama_url, model=s.llm_model)
    elif s.llm_provider == "anthropic":
        from vocab_master.providers.llm_anthropic import AnthropicProvider
        return AnthropicProvider(model=s.llm_model)
    elif s.llm_provider == "openai":
        from vocab_master.providers.llm_openai import OpenAIProvider
        return OpenAIProvider(model=s.llm_model)
    raise ValueError(f"Unknown LLM provider: {s.llm_provider}")


def get_tts(s: Settings) -> TTSProvider:
    if s.tts_provider == "edge-tts":
        from vocab_master.providers.tts_edge import EdgeTTSProvider
        return EdgeTTSProvider(voice=s.tts_voice)
    elif s.tts_provider == "elevenlabs":
        from vocab_master.providers.tts_elevenlabs import ElevenLabsProvider
        return ElevenLabsProvider(voice_id=s.tts_voice, model_id=s.elevenlabs_model)
    raise ValueError(f"Unknown TTS provider: {s.tts_provider}")
