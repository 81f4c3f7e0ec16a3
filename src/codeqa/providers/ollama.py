"""Ollama provider for a self-hosted model server."""

import logging
from typing import Any

import httpx
import numpy as np

from codeqa.errors import EmbeddingDegraded, GenerationFailed
from codeqa.providers.hashing import hashed_embedding

logger = logging.getLogger(__name__)


class OllamaProvider:
    """Provider that talks to a local Ollama server over HTTP.

    Embedding failures fall back to the hashed scheme so search keeps working
    without a live model. Completion failures are raised: there is no
    substitute for a generated answer.
    """

    key = "ollama"
    name = "Ollama (Local)"

    EMBEDDING_MODEL = "nomic-embed-text"
    CHAT_MODEL = "llama3.2"
    TEMPERATURE = 0.3
    MAX_EMBED_CHARS = 8000

    def __init__(
        self,
        base_url: str = "http://localhost:11434",
        timeout: float = 60.0,
        client: httpx.Client | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = client

    @property
    def client(self) -> httpx.Client:
        """Lazy-create the HTTP client on first access."""
        if self._client is None:
            self._client = httpx.Client(base_url=self.base_url, timeout=self._timeout)
        return self._client

    @property
    def chat_model(self) -> str:
        return self.CHAT_MODEL

    def _post(self, endpoint: str, payload: dict, timeout: float | None) -> Any:
        response = self.client.post(
            endpoint, json=payload, timeout=timeout or self._timeout
        )
        response.raise_for_status()
        return response.json()

    def embed(self, text: str, timeout: float | None = None) -> np.ndarray:
        try:
            data = self._post(
                "/api/embeddings",
                {"model": self.EMBEDDING_MODEL, "prompt": text[: self.MAX_EMBED_CHARS]},
                timeout,
            )
            vector = np.asarray(data["embedding"], dtype=np.float64)
            if vector.ndim != 1 or vector.size == 0:
                raise ValueError(f"unexpected embedding shape {vector.shape}")
            return vector
        except (httpx.HTTPError, KeyError, TypeError, ValueError) as exc:
            degraded = EmbeddingDegraded(
                f"Ollama embedding error: {exc}. Falling back to simple embedding"
            )
            logger.warning(degraded.message)
            return hashed_embedding(text)

    def complete(
        self, system_prompt: str, user_prompt: str, timeout: float | None = None
    ) -> str:
        try:
            data = self._post(
                "/api/chat",
                {
                    "model": self.CHAT_MODEL,
                    "messages": [
                        {"role": "system", "content": system_prompt},
                        {"role": "user", "content": user_prompt},
                    ],
                    "stream": False,
                    "options": {"temperature": self.TEMPERATURE},
                },
                timeout,
            )
            return data["message"]["content"]
        except (httpx.HTTPError, KeyError, TypeError, ValueError) as exc:
            logger.error(f"Ollama completion error: {exc}")
            raise GenerationFailed(
                "Ollama is not running. Start it with: ollama serve"
            ) from exc
