"""Provider selection and status reporting."""

import logging
from dataclasses import dataclass
from enum import Enum

from codeqa.config import Settings
from codeqa.protocols import AIProvider
from codeqa.providers.demo import DemoProvider
from codeqa.providers.ollama import OllamaProvider
from codeqa.providers.openai_provider import GroqProvider, OpenAIProvider

logger = logging.getLogger(__name__)


class ProviderKind(str, Enum):
    """The supported provider keys."""

    OPENAI = "openai"
    OLLAMA = "ollama"
    GROQ = "groq"
    DEMO = "demo"

    @classmethod
    def from_key(cls, key: str | None) -> "ProviderKind":
        """Resolve a provider key. Unknown or empty keys mean DEMO."""
        try:
            return cls((key or "").strip().lower())
        except ValueError:
            if key:
                logger.warning(f"Unknown AI provider '{key}', using demo mode")
            return cls.DEMO


def create_provider(settings: Settings) -> AIProvider:
    """Build the provider selected by the settings.

    This is the only place that dispatches on the provider kind.
    """
    kind = ProviderKind.from_key(settings.ai_provider)

    if kind is ProviderKind.OPENAI:
        return OpenAIProvider(
            api_key=settings.openai_api_key, timeout=settings.request_timeout
        )
    elif kind is ProviderKind.GROQ:
        return GroqProvider(
            api_key=settings.groq_api_key, timeout=settings.request_timeout
        )
    elif kind is ProviderKind.OLLAMA:
        return OllamaProvider(
            base_url=settings.ollama_base_url, timeout=settings.request_timeout
        )
    else:
        return DemoProvider()


@dataclass(frozen=True)
class ProviderStatus:
    """What the active provider is and whether it can be used."""

    provider: str
    name: str
    is_configured: bool
    message: str


def provider_status(settings: Settings) -> ProviderStatus:
    """Describe the configured provider for display."""
    kind = ProviderKind.from_key(settings.ai_provider)

    if kind is ProviderKind.OPENAI or kind is ProviderKind.GROQ:
        cls = OpenAIProvider if kind is ProviderKind.OPENAI else GroqProvider
        api_key = (
            settings.openai_api_key if kind is ProviderKind.OPENAI else settings.groq_api_key
        )
        if api_key:
            message = f"Using {cls.name} with {cls.CHAT_MODEL}"
        else:
            message = f"Missing {cls.key_env_var} environment variable"
        return ProviderStatus(kind.value, cls.name, bool(api_key), message)
    elif kind is ProviderKind.OLLAMA:
        return ProviderStatus(
            kind.value,
            OllamaProvider.name,
            True,
            f"Using Ollama at {settings.ollama_base_url}. Make sure Ollama is running.",
        )
    else:
        return ProviderStatus(
            kind.value,
            DemoProvider.name,
            True,
            "Demo mode - semantic search works, AI responses are simulated",
        )
