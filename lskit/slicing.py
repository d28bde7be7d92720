"""Splitting, trimming and bounded copying of strings."""

from __future__ import annotations

__all__ = ["split", "strtrim", "substr", "strlcpy", "strlcat"]


def split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter``, dropping empty words."""
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValueError(f"expected a single-character delimiter, got {delimiter!r}")
    if delimiter == "\0":
        return [text] if text else []
    return [word for word in text.split(delimiter) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters of ``charset`` from both ends of ``text``.

    A NUL in ``charset`` ends the set.
    """
    members = charset.split("\0", 1)[0]
    if not members:
        return text
    return text.strip(members)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must be non-negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text and the full length of ``src``; the length
    exceeding ``size - 1`` signals truncation.
    """
    if size < 0:
        raise ValueError(f"expected a non-negative size, got {size}")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create. When
    ``dest`` already fills the buffer it is returned unchanged together
    with ``size + len(src)``.
    """
    if size < 0:
        raise ValueError(f"expected a non-negative size, got {size}")
    if len(dest) >= size:
        return dest, size + len(src)
    room = size - 1 - len(dest)
    return dest + src[:room], len(dest) + len(src)