"""Best-effort structure scan over source text.

This is a line-oriented pattern matcher, not a parser. A line may match
several patterns (``export function App() { return <div/> }`` is both a
function and a component) and every match is reported.
"""

import re

from codeqa.models import CodeStructure

PATTERNS: dict[str, re.Pattern[str]] = {
    "function": re.compile(r"(?:export\s+)?(?:async\s+)?function\s+(\w+)"),
    "arrow_function": re.compile(
        r"(?:export\s+)?(?:const|let|var)\s+(\w+)\s*=\s*(?:async\s*)?\("
    ),
    "class": re.compile(r"(?:export\s+)?class\s+(\w+)"),
    "interface": re.compile(r"(?:export\s+)?interface\s+(\w+)"),
    "type": re.compile(r"(?:export\s+)?type\s+(\w+)"),
    "component": re.compile(
        r"(?:export\s+)?(?:default\s+)?(?:function|const)\s+(\w+).*(?:React|Component|=>.*<)"
    ),
}

# Python has its own keywords; `class` is already covered above.
PYTHON_PATTERNS: dict[str, re.Pattern[str]] = {
    "function": re.compile(r"^\s*(?:async\s+)?def\s+(\w+)"),
}


def extract_structures(content: str, extension: str = "") -> tuple[CodeStructure, ...]:
    """Scan content line by line and return every structure match.

    Args:
        content: Full file text
        extension: File extension (e.g. ".py"), used to add language patterns

    Returns:
        Structures in line order
    """
    patterns = dict(PATTERNS)
    if extension == ".py":
        patterns.update(PYTHON_PATTERNS)

    structures = []
    for index, line in enumerate(content.split("\n")):
        for kind, pattern in patterns.items():
            match = pattern.search(line)
            if match:
                structures.append(
                    CodeStructure(
                        kind=kind,
                        name=match.group(1),
                        line=index + 1,
                        line_content=line.strip(),
                    )
                )
    return tuple(structures)
