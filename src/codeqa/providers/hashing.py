"""Offline hashed bag-of-words embedding.

Used by the demo provider, by Groq (which has no embedding endpoint) and as
the fallback when a local Ollama server cannot be reached.
"""

import re

import numpy as np

DIMENSION = 384

_NON_WORD = re.compile(r"[^\w\s]")


def string_hash(token: str) -> int:
    """Deterministic 32-bit signed rolling hash (``h = h * 31 + c``).

    Python's built-in ``hash`` is salted per process, which would make
    vectors from two processes incomparable.
    """
    h = 0
    for char in token:
        h = (h * 31 + ord(char)) & 0xFFFFFFFF
    return h - 0x100000000 if h & 0x80000000 else h


def tokenize(text: str) -> list[str]:
    """Lower-case, strip punctuation and drop tokens of two characters or fewer."""
    words = _NON_WORD.sub(" ", text.lower()).split()
    return [w for w in words if len(w) > 2]


def hashed_embedding(text: str, dimension: int = DIMENSION) -> np.ndarray:
    """Embed text by hashing tokens into position-weighted buckets.

    Args:
        text: Text to embed
        dimension: Number of buckets

    Returns:
        L2-normalised vector, or all zeros when no token survives
    """
    embedding = np.zeros(dimension, dtype=np.float64)
    for index, token in enumerate(tokenize(text)):
        embedding[abs(string_hash(token)) % dimension] += 1 / (1 + index * 0.1)

    magnitude = np.linalg.norm(embedding)
    if magnitude > 0:
        embedding /= magnitude
    return embedding
