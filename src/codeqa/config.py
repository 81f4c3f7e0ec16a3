"""Process-wide configuration.

Built once at startup and passed explicitly to the components that need it.

Dependencies: pydantic, pydantic_settings
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings read from the environment (and an optional .env)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    ai_provider: str = Field(
        default="demo",
        description="Provider key: openai, ollama, groq or demo (unknown keys mean demo)",
    )
    openai_api_key: str | None = Field(default=None, description="OpenAI API key")
    groq_api_key: str | None = Field(default=None, description="Groq API key")
    ollama_base_url: str = Field(
        default="http://localhost:11434",
        description="Base URL of the local Ollama server",
    )
    request_timeout: float = Field(
        default=60.0,
        gt=0,
        description="Timeout in seconds for every provider call",
    )
    embed_workers: int = Field(
        default=1,
        ge=1,
        description="Worker threads used to embed chunks while indexing",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
