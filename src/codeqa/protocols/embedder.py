"""Protocols for embedding and completion providers."""

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class EmbeddingProvider(Protocol):
    """Protocol for embedding providers.

    Allows swapping between hosted APIs (OpenAI), a local server (Ollama)
    and the offline hashed scheme.
    """

    def embed(self, text: str, timeout: float | None = None) -> np.ndarray:
        """Return the embedding vector for a single text."""
        ...


@runtime_checkable
class CompletionProvider(Protocol):
    """Protocol for chat completion providers."""

    def complete(
        self, system_prompt: str, user_prompt: str, timeout: float | None = None
    ) -> str:
        """Return the generated answer for a system/user prompt pair."""
        ...


@runtime_checkable
class AIProvider(EmbeddingProvider, CompletionProvider, Protocol):
    """A configured backend offering both capabilities."""

    @property
    def key(self) -> str:
        """Return the short provider key (e.g., 'openai')."""
        ...

    @property
    def name(self) -> str:
        """Return the display name shown to users."""
        ...
