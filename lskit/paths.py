"""Joining and normalising path strings."""

from __future__ import annotations

__all__ = ["pathdup", "pathjoin", "strjoin"]


def pathdup(path: str) -> str:
    """Copy ``path`` without its trailing slashes.

    A path of at most two characters is kept as it is, so ``"/"`` and
    ``"//"`` survive unchanged.
    """
    result = path
    while len(result) > 2 and result.endswith("/"):
        result = result[:-1]
    return result


def pathjoin(base: str, name: str) -> str:
    """Join ``name`` onto ``base``, adding a slash only when needed."""
    if not base:
        raise ValueError("cannot join onto an empty base path")
    if base.endswith("/"):
        return strjoin(base, name)
    return f"{base}/{name}"


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second