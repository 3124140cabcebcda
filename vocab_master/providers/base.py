from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class ProviderError(RuntimeError):
    """The provider cannot be used: missing credentials or service unreachable."""


class LLMProvider(ABC):
    @abstractmethod
    async def generate(self, prompt: str, temperature: float = 0.7, json_mode: bool = False) -> str:
        ...

    @abstractmethod
    def name(self) -> str:
        ...


class TTSProvider(ABC):
    @abstractmethod
    async def synthesize(self, text: str, output_path: Path) -> Path:
        ...

    @abstractmethod
    def name(self) -> str:
        ...
