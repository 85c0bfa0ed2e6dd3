def to_upper(text: str) -> str:
    """Uppercase ASCII letters only; other characters pass through."""
    return "".join(chr(ord(ch) - 32) if "a" <= ch <= "z" else ch for ch in text)


def to_lower(text: str) -> str:
    """Lowercase ASCII letters only; other characters pass through."""
    return "".join(chr(ord(ch) + 32) if "A" <= ch <= "Z" else ch for ch in text)


def split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on a single-character delimiter.

    Empty segments (leading, trailing or between repeated delimiters) are
    dropped.

    Raises:
        ValueError: If ``delimiter`` is not exactly one character.
    """
    if len(delimiter) != 1:
        raise ValueError("Delimiter must be a single character")
    return [seg for seg in text.split(delimiter) if seg]
