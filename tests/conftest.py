"""
Shared test fixtures.

Provides: settings isolated from the environment, parsed-file factory,
demo-provider engine and index
Dependencies: pytest
"""

import pytest

from codeqa.config import Settings
from codeqa.engine import Engine
from codeqa.indexing import ProjectIndex
from codeqa.parsers import parse_content
from codeqa.providers import DemoProvider
from codeqa.storage import InMemoryProjectStore

ENV_VARS = (
    "AI_PROVIDER",
    "OPENAI_API_KEY",
    "GROQ_API_KEY",
    "OLLAMA_BASE_URL",
    "REQUEST_TIMEOUT",
    "EMBED_WORKERS",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of the settings under test."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> Settings:
    """Provide demo-mode settings that ignore any .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def make_file():
    """Provide a factory building ParsedFile objects from text."""

    def _make(path: str, content: str):
        return parse_content(path, content)

    return _make


@pytest.fixture
def app_js(make_file):
    """Provide the 60-line app.js used across scenarios."""
    lines = ["function add(a,b){return a+b}"] * 3
    lines += [f"// note {i}: unrelated filler text about widgets and gadgets" for i in range(57)]
    return make_file("app.js", "\n".join(lines))


@pytest.fixture
def demo_index() -> ProjectIndex:
    """Provide an in-memory index using the demo provider."""
    return ProjectIndex(InMemoryProjectStore(), DemoProvider())


@pytest.fixture
def demo_engine(settings: Settings) -> Engine:
    """Provide an engine running in demo mode."""
    return Engine.from_settings(settings)
