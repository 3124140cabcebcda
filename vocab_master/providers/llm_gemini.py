from __future__ import annotations

import logging
import os

from vocab_master.providers.base import LLMProvider, ProviderError

log = logging.getLogger("vocab_master.llm")


class GeminiProvider(LLMProvider):
    def __init__(self, model: str = "gemini-2.5-flash"):
        import google.generativeai as genai

        api_key = os.environ.get("GEMINI_API_KEY") or os.environ.get("GOOGLE_API_KEY")
        if not api_key:
            raise ProviderError("GEMINI_API_KEY is not set")
        genai.configure(api_key=api_key)
        self._genai = genai
        self.model = model

    async def generate(self, prompt: str, temperature: float = 0.7, json_mode: bool = False) -> str:
        config = self._genai.GenerationConfig(
            temperature=temperature,
            response_mime_type="application/json" if json_mode else "text/plain",
        )
        model = self._genai.GenerativeModel(self.model, generation_config=config)
        log.info("Sending prompt to %s (%d chars)", self.model, len(prompt))
        response = await model.generate_content_async(prompt)
        if not response.parts:
            return ""
        return response.text

    def name(self) -> str:
        return f"gemini/{self.model}"
