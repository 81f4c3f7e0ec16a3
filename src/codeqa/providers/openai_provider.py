"""OpenAI-compatible providers (OpenAI and Groq)."""

import logging
from typing import Optional

import numpy as np
import openai
from openai import OpenAI

from codeqa.errors import EmbeddingError, GenerationFailed
from codeqa.providers.hashing import hashed_embedding

logger = logging.getLogger(__name__)


class OpenAIProvider:
    """Provider backed by the hosted OpenAI API.

    The SDK client is created lazily so that a missing key only fails the
    calls that need it.
    """

    key = "openai"
    name = "OpenAI"
    key_env_var = "OPENAI_API_KEY"

    BASE_URL: Optional[str] = None
    EMBEDDING_MODEL: Optional[str] = "text-embedding-3-small"
    CHAT_MODEL = "gpt-4o-mini"
    TEMPERATURE = 0.3
    MAX_TOKENS = 1500
    MAX_EMBED_CHARS = 8000

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float = 60.0,
        client: OpenAI | None = None,
    ):
        """Initialize the provider.

        Args:
            api_key: API key; the SDK falls back to its own env variable when None
            timeout: Default timeout in seconds for every request
            client: Pre-built client (used by tests)
        """
        self._api_key = api_key
        self._timeout = timeout
        self._client = client

    @property
    def client(self) -> OpenAI:
        """Lazy-create the SDK client on first access."""
        if self._client is None:
            self._client = OpenAI(
                api_key=self._api_key,
                base_url=self.BASE_URL,
                timeout=self._timeout,
            )
        return self._client

    @property
    def chat_model(self) -> str:
        return self.CHAT_MODEL

    def embed(self, text: str, timeout: float | None = None) -> np.ndarray:
        try:
            response = self.client.embeddings.create(
                model=self.EMBEDDING_MODEL,
                input=text[: self.MAX_EMBED_CHARS],
                timeout=timeout or self._timeout,
            )
        except openai.OpenAIError as exc:
            logger.error(f"{self.name} embedding error: {exc}")
            raise EmbeddingError(f"{self.name} embedding failed: {exc}") from exc

        return np.asarray(response.data[0].embedding, dtype=np.float64)

    def complete(
        self, system_prompt: str, user_prompt: str, timeout: float | None = None
    ) -> str:
        try:
            response = self.client.chat.completions.create(
                model=self.CHAT_MODEL,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=self.TEMPERATURE,
                max_tokens=self.MAX_TOKENS,
                timeout=timeout or self._timeout,
            )
        except openai.OpenAIError as exc:
            logger.error(f"{self.name} completion error: {exc}")
            raise GenerationFailed(f"Failed to generate answer: {exc}") from exc

        return response.choices[0].message.content or ""


class GroqProvider(OpenAIProvider):
    """Groq free tier, reached through its OpenAI-compatible endpoint.

    Groq serves no embedding model, so embeddings use the offline hashed
    scheme and never touch the network.
    """

    key = "groq"
    name = "Groq (Free Tier)"
    key_env_var = "GROQ_API_KEY"

    BASE_URL = "https://api.groq.com/openai/v1"
    EMBEDDING_MODEL = None
    CHAT_MODEL = "llama-3.1-8b-instant"

    def embed(self, text: str, timeout: float | None = None) -> np.ndarray:
        return hashed_embedding(text)
