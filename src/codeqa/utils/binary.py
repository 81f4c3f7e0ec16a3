"""Binary content detection for uploaded source files."""

# Control characters other than tab, LF, FF and CR.
_CONTROL_BYTES = frozenset(range(0, 32)) - {9, 10, 12, 13}


def is_binary_content(content: bytes, sample_size: int = 8192) -> bool:
    """Detect if content is binary rather than source text.

    Null bytes are a strong binary indicator. Otherwise a sample that decodes
    as UTF-8 is text; anything else is binary when more than 30% of the
    sample is control characters or high bytes.

    Args:
        content: Raw file content
        sample_size: Number of bytes to sample from the start

    Returns:
        True if content appears to be binary
    """
    if not content:
        return False

    sample = content[:sample_size]
    if b"\x00" in sample:
        return True

    try:
        sample.decode("utf-8")
        return False
    except UnicodeDecodeError as exc:
        # A multi-byte sequence cut off by the sample boundary is still text.
        if exc.start >= len(sample) - 3 and exc.reason == "unexpected end of data":
            return False

    suspicious = sum(1 for byte in sample if byte in _CONTROL_BYTES or byte > 127)
    return (suspicious / len(sample)) > 0.30

