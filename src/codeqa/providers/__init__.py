"""Embedding and completion providers."""

from codeqa.providers.demo import DemoProvider
from codeqa.providers.hashing import DIMENSION, hashed_embedding
from codeqa.providers.ollama import OllamaProvider
from codeqa.providers.openai_provider import GroqProvider, OpenAIProvider
from codeqa.providers.registry import (
    ProviderKind,
    ProviderStatus,
    create_provider,
    provider_status,
)

__all__ = [
    "DIMENSION",
    "DemoProvider",
    "GroqProvider",
    "OllamaProvider",
    "OpenAIProvider",
    "ProviderKind",
    "ProviderStatus",
    "create_provider",
    "hashed_embedding",
    "provider_status",
]
