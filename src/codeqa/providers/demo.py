"""Demo provider: offline embeddings and a templated answer."""

import re

import numpy as np

from codeqa.providers.hashing import hashed_embedding

_QUESTION = re.compile(r"Question:\s*(.+?)(?:\n|$)", re.IGNORECASE)
_FILE = re.compile(r"File:\s*(.+?)(?:\s+\(lines \d+-\d+\)\s*-*)?\s*$", re.MULTILINE)

MAX_LISTED_FILES = 3


def referenced_files(prompt: str) -> list[str]:
    """Return the distinct file paths named in a prompt's context blocks."""
    files: list[str] = []
    for match in _FILE.finditer(prompt):
        path = match.group(1).strip()
        if path and path not in files:
            files.append(path)
    return files


def demo_completion(user_prompt: str) -> str:
    """Build a simulated answer from the question and context in the prompt."""
    question_match = _QUESTION.search(user_prompt)
    question = question_match.group(1).strip() if question_match else "your question"
    files = referenced_files(user_prompt)[:MAX_LISTED_FILES]

    response = "## Demo Mode Response\n\n"
    response += f'I analyzed your codebase to answer: "{question}"\n\n'

    if files:
        response += "### Relevant Files Found:\n"
        for path in files:
            response += f"- `{path}`\n"
        response += "\n"

    response += "### Analysis:\n"
    response += "In **demo mode**, I'm providing a simulated response. "
    response += "The semantic search found relevant code sections based on keyword matching.\n\n"

    response += "To get AI-powered answers, configure one of these providers:\n\n"
    response += "1. **Ollama (Free, Local)**\n"
    response += "   - Install: `brew install ollama` or download from ollama.ai\n"
    response += "   - Run: `ollama serve` then `ollama pull llama3.2`\n"
    response += "   - Set: `AI_PROVIDER=ollama`\n\n"
    response += "2. **Groq (Free Tier)**\n"
    response += "   - Get API key from console.groq.com\n"
    response += "   - Set: `AI_PROVIDER=groq` and `GROQ_API_KEY=your-key`\n\n"
    response += "3. **OpenAI**\n"
    response += "   - Set: `AI_PROVIDER=openai` and `OPENAI_API_KEY=your-key`\n"
    return response


class DemoProvider:
    """Provider that never leaves the process."""

    key = "demo"
    name = "Demo Mode"

    def embed(self, text: str, timeout: float | None = None) -> np.ndarray:
        return hashed_embedding(text)

    def complete(
        self, system_prompt: str, user_prompt: str, timeout: float | None = None
    ) -> str:
        return demo_completion(user_prompt)
