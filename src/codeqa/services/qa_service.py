"""Question answering over an indexed project."""

import logging

from codeqa.errors import FileNotFound
from codeqa.indexing import ProjectIndex
from codeqa.models import Answer, FileExplanation, FileMetadata, RankedChunk, Reference
from codeqa.protocols import AIProvider

logger = logging.getLogger(__name__)

SEARCH_LIMIT = 8
PREVIEW_LINES = 5
MAX_SUGGESTIONS = 8

NO_RESULTS_MESSAGE = (
    "I couldn't find any relevant code in the codebase to answer your question. "
    "Please make sure the codebase is properly indexed."
)

ANSWER_SYSTEM_PROMPT = """You are a helpful code assistant analyzing a codebase. Your job is to answer questions about the code accurately and helpfully.

Guidelines:
- Always reference specific files and line numbers when discussing code
- Explain code in clear, understandable terms
- If you're not sure about something, say so
- Provide code examples when helpful
- Focus on the most relevant parts of the code for the question
- If asked about specific functions or features, explain what they do and how they work"""

ANSWER_USER_PROMPT = """Based on the following code context from the codebase, please answer this question:

Question: {question}

Code Context:
{context}

Please provide a clear, detailed answer with specific file and line references where applicable."""

EXPLAIN_SYSTEM_PROMPT = (
    "You are a code documentation expert. Analyze the given code file "
    "and provide a clear, structured explanation."
)

EXPLAIN_USER_PROMPT = """Please analyze and explain this {language} file:

File: {path}

```{language}
{content}
```

Provide:
1. A brief overview of what this file does
2. Key functions/classes and their purposes
3. How this file likely fits into the larger application
4. Any notable patterns or best practices used"""


def build_context(chunks: list[RankedChunk]) -> str:
    """Concatenate ranked chunks into the prompt context, in rank order."""
    context = ""
    for ranked in chunks:
        chunk = ranked.chunk
        context += f"\n--- File: {chunk.path} (lines {chunk.start_line}-{chunk.end_line}) ---\n"
        context += chunk.content
        context += "\n"
    return context


def confidence_for(similarity: float) -> str:
    """Map the top similarity score to a coarse confidence label."""
    if similarity > 0.8:
        return "high"
    if similarity > 0.6:
        return "medium"
    return "low"


def format_references(chunks: list[RankedChunk]) -> list[Reference]:
    return [
        Reference(
            file=r.chunk.path,
            file_name=r.chunk.file_name,
            start_line=r.chunk.start_line,
            end_line=r.chunk.end_line,
            language=r.chunk.language,
            folder=r.chunk.folder,
            similarity=round(r.similarity * 100),
            preview="\n".join(r.chunk.content.split("\n")[:PREVIEW_LINES]),
            is_summary=r.chunk.is_summary,
        )
        for r in chunks
    ]


class QAService:
    """Answers questions, explains files and suggests questions.

    Lookup errors are raised before the provider is called; completion
    errors from the provider propagate unchanged.
    """

    def __init__(self, index: ProjectIndex, provider: AIProvider, timeout: float | None = None):
        self.index = index
        self.provider = provider
        self.timeout = timeout

    def answer(
        self,
        project_id: str,
        question: str,
        language: str | None = None,
        folder: str | None = None,
        timeout: float | None = None,
    ) -> Answer:
        """Answer a question using the most relevant chunks of a project.

        Raises:
            ProjectNotFound: If the project is not indexed
            GenerationFailed: If the provider could not generate an answer
        """
        logger.info(f'Processing question for project {project_id}: "{question}"')

        chunks = self.index.search(
            project_id,
            question,
            language=language,
            folder=folder,
            limit=SEARCH_LIMIT,
            timeout=timeout,
        )
        if not chunks:
            return Answer(
                answer=NO_RESULTS_MESSAGE,
                references=[],
                confidence="low",
                relevant_files=[],
                provider=self.provider.name,
            )

        user_prompt = ANSWER_USER_PROMPT.format(
            question=question, context=build_context(chunks)
        )
        text = self.provider.complete(
            ANSWER_SYSTEM_PROMPT, user_prompt, timeout=timeout or self.timeout
        )

        return Answer(
            answer=text,
            references=format_references(chunks),
            confidence=confidence_for(chunks[0].similarity),
            relevant_files=list(dict.fromkeys(c.chunk.path for c in chunks)),
            provider=self.provider.name,
        )

    def explain_file(
        self, project_id: str, file_path: str, timeout: float | None = None
    ) -> FileExplanation:
        """Generate an explanation of one file in a project.

        Raises:
            ProjectNotFound: If the project is not indexed
            FileNotFound: If the path is not in the project
            GenerationFailed: If the provider could not generate an answer
        """
        file = next(
            (f for f in self.index.files(project_id) if f.path == file_path), None
        )
        if file is None:
            raise FileNotFound(file_path)

        user_prompt = EXPLAIN_USER_PROMPT.format(
            language=file.language, path=file.path, content=file.content
        )
        explanation = self.provider.complete(
            EXPLAIN_SYSTEM_PROMPT, user_prompt, timeout=timeout or self.timeout
        )

        return FileExplanation(
            explanation=explanation,
            file=FileMetadata(
                path=file.path,
                file_name=file.file_name,
                language=file.language,
                line_count=file.line_count,
                structures=file.structures,
            ),
            provider=self.provider.name,
        )

    def suggest_questions(self, project_id: str) -> list[str]:
        """Suggest questions from the languages and structures of a project."""
        files = self.index.files(project_id)
        if not files:
            return []

        kinds = {s.kind for f in files for s in f.structures}
        languages = {f.language for f in files}

        suggestions = [
            "What is the overall architecture of this codebase?",
            "What are the main entry points of this application?",
        ]
        if languages & {"javascript", "typescript", "python"}:
            suggestions.append("Where is the main configuration located?")
            suggestions.append("How is error handling implemented?")
        if "component" in kinds:
            suggestions.append("What are the main UI components in this project?")
        if "class" in kinds:
            suggestions.append("What are the main classes and their responsibilities?")
        if "interface" in kinds:
            suggestions.append("What data models or interfaces are defined?")
        suggestions.append("Where is authentication handled?")
        suggestions.append("How is data validation implemented?")

        return suggestions[:MAX_SUGGESTIONS]
