"""Tests for provider construction and credential checks."""
from __future__ import annotations

import pytest

from vocab_master.config import Settings
from vocab_master.providers.base import ProviderError
from vocab_master.providers.factory import get_llm, get_tts
from vocab_master.providers.llm_ollama import OllamaProvider
from vocab_master.providers.tts_edge import EdgeTTSProvider


@pytest.fixture
def no_keys(monkeypatch):
    for var in (
        "GEMINI_API_KEY",
        "GOOGLE_API_KEY",
        "OPENAI_API_KEY",
        "ANTHROPIC_API_KEY",
        "ELEVEN_LABS_API_KEY",
    ):
        monkeypatch.delenv(var, raising=False)


class TestGetLLM:
    def test_ollama(self):
        llm = get_llm(Settings(llm_provider="ollama", llm_model="qwen3:8b",
                               ollama_url="http://example:11434/"))
        assert isinstance(llm, OllamaProvider)
        assert llm.base_url == "http://example:11434"
        assert llm.name() == "ollama/qwen3:8b"

    def test_gemini(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "test-key")
        llm = get_llm(Settings())
        assert llm.name() == "gemini/gemini-2.5-flash"

    def test_openai(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "test-key")
        llm = get_llm(Settings(llm_provider="openai", llm_model="gpt-4o-mini"))
        assert llm.name() == "openai/gpt-4o-mini"

    def test_anthropic(self, monkeypatch):
        monkeypatch.setenv("ANTHROPIC_API_KEY", "test-key")
        llm = get_llm(Settings(llm_provider="anthropic", llm_model="claude-sonnet-4-20250514"))
        assert llm.name() == "anthropic/claude-sonnet-4-20250514"

    @pytest.mark.parametrize("provider", ["gemini", "openai", "anthropic"])
    def test_missing_key(self, no_keys, provider):
        with pytest.raises(ProviderError):
            get_llm(Settings(llm_provider=provider))

    def test_unknown(self):
        with pytest.raises(ValueError):
            get_llm(Settings(llm_provider="nope"))


class TestGetTTS:
    def test_edge(self):
        tts = get_tts(Settings(tts_voice="en-GB-SoniaNeural"))
        assert isinstance(tts, EdgeTTSProvider)
        assert tts.name() == "edge-tts/en-GB-SoniaNeural"

    def test_elevenlabs_missing_key(self, no_keys):
        with pytest.raises(ProviderError):
            get_tts(Settings(tts_provider="elevenlabs"))

    def test_unknown(self):
        with pytest.raises(ValueError):
            get_tts(Settings(tts_provider="nope"))


class TestOllamaProvider:
    @pytest.mark.asyncio
    async def test_unreachable_server(self):
        llm = OllamaProvider(base_url="http://127.0.0.1:9")
        with pytest.raises(ProviderError):
            await llm.generate("hello", json_mode=True)
