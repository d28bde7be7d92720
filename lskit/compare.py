"""C-style string comparison and search.

Strings are treated as NUL-terminated. Anything after an embedded ``"\\0"``
is ignored, and the end of a string compares as code point 0.
"""

from __future__ import annotations

from collections.abc import Iterator
from itertools import chain, islice, zip_longest

from lskit.chars import toupper

__all__ = [
    "strcmp",
    "strcmp_ci",
    "strcmp_local",
    "strncmp",
    "strnstr",
    "strchr",
    "strrchr",
]

_NUL = "\0"


def _terminated(text: str) -> str:
    """Return ``text`` cut at its first NUL character."""
    return text.split(_NUL, 1)[0]


def _char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _pairs(s1: str, s2: str) -> Iterator[tuple[str, str]]:
    """Yield aligned characters, padding the shorter string with NULs.

    A final NUL pair marks the end of both strings.
    """
    pairs = zip_longest(_terminated(s1), _terminated(s2), fillvalue=_NUL)
    return chain(pairs, [(_NUL, _NUL)])


def _compare(s1: str, s2: str, limit: int | None) -> int:
    for a, b in islice(_pairs(s1, s2), limit):
        if a != b or a == _NUL:
            return ord(a) - ord(b)
    return 0


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; the result's sign orders them.

    The value is the code point difference at the first mismatch.
    """
    return _compare(s1, s2, None)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most the first ``n`` characters of two strings."""
    if n < 0:
        raise ValueError(f"expected a non-negative count, got {n}")
    if n == 0:
        return 0
    return _compare(s1, s2, n)


def _case_insensitive(s1: str, s2: str) -> int:
    s1 = _terminated(s1)
    s2 = _terminated(s2)
    if not s1:
        return -ord(toupper(s2[0])) if s2 else 0
    for a, b in zip_longest(s1, s2, fillvalue=_NUL):
        if a == _NUL:
            break
        upper_a = ord(toupper(a))
        upper_b = ord(toupper(b))
        if upper_a != upper_b:
            return upper_a - upper_b
    return 0


def strcmp_ci(s1: str, s2: str) -> int:
    """Compare two strings ignoring ASCII case.

    Comparison runs over the characters of ``s1`` only, so a string that is
    a prefix of ``s2`` compares equal to it.
    """
    return _case_insensitive(s1, s2)


def _is_dot_file(name: str) -> bool:
    return name.startswith(".") and name not in (".", "..")


def strcmp_local(s1: str, s2: str) -> int:
    """Compare file names ignoring case and one leading dot of hidden files.

    ``"."`` and ``".."`` keep their dots. Like :func:`strcmp_ci`, only the
    characters of the first name are walked.
    """
    s1 = _terminated(s1)
    s2 = _terminated(s2)
    if _is_dot_file(s1):
        s1 = s1[1:]
    if _is_dot_file(s2):
        s2 = s2[1:]
    return _case_insensitive(s1, s2)


def strnstr(big: str, little: str, length: int) -> int | None:
    """Find ``little`` within the first ``length`` characters of ``big``.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if length < 0:
        raise ValueError(f"expected a non-negative length, got {length}")
    little = _terminated(little)
    if not little:
        return 0
    if length == 0:
        return None
    big = _terminated(big)
    last_start = min(len(big), length - len(little) + 1)
    return next((i for i in range(last_start) if big.startswith(little, i)), None)


def strchr(text: str, c: str) -> int | None:
    """Index of the first ``c`` in ``text``, or None.

    Searching for NUL gives the index of the terminator, i.e. the length.
    """
    c = _char(c)
    text = _terminated(text)
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> int | None:
    """Index of the last ``c`` in ``text``, or None.

    Searching for NUL gives the index of the terminator, i.e. the length.
    """
    c = _char(c)
    text = _terminated(text)
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index