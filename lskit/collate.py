"""File name collation that ignores punctuation, case and leading dots."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import cmp_to_key
from typing import Optional

from lskit.chars import isalnum, toupper
from lskit.compare import strcmp

__all__ = ["ls_strcmp", "sort_names"]

_Fold = Optional[Callable[[str], str]]


def _terminated(text: str) -> str:
    return text.split("\0", 1)[0]


def _folded(c: str, fold: _Fold) -> str:
    return fold(c) if fold is not None else c


def _code_at(text: str, index: int, fold: _Fold) -> int:
    return ord(_folded(text[index], fold)) if index < len(text) else 0


def _compare_offsets(s1: str, s2: str, fold: _Fold) -> tuple[int, int, bool]:
    """Walk both strings over their alphanumerics until they differ.

    Characters are compared after ``fold`` when one is given, as they are
    otherwise. Returns the stopping positions and whether any alphanumeric
    pair was seen.
    """
    i = j = 0
    seen_alnum = False
    while i < len(s1) and j < len(s2):
        if not isalnum(s1[i]):
            i += 1
            continue
        if not isalnum(s2[j]):
            j += 1
            continue
        seen_alnum = True
        if _folded(s1[i], fold) != _folded(s2[j], fold):
            break
        i += 1
        j += 1
    return i, j, seen_alnum


def ls_strcmp(s1: str, s2: str) -> int:
    """Compare two file names; a negative result sorts ``s1`` first.

    Leading dots and non-alphanumerics are ignored first, then case; ties
    put lower case before upper case, then fall back to a plain comparison
    and finally to the number of leading dots.
    """
    s1 = _terminated(s1)
    s2 = _terminated(s2)
    name1 = s1.lstrip(".")
    name2 = s2.lstrip(".")
    dots1 = len(s1) - len(name1)
    dots2 = len(s2) - len(name2)

    i, j, seen_alnum = _compare_offsets(name1, name2, toupper)
    diff = _code_at(name1, i, toupper) - _code_at(name2, j, toupper)
    if seen_alnum:
        if diff == 0:
            i, j, _ = _compare_offsets(name1, name2, None)
            diff = _code_at(name2, j, None) - _code_at(name1, i, None)
            if diff == 0:
                diff = strcmp(name1, name2)
                if diff == 0:
                    diff = dots2 - dots1
    elif diff == 0:
        diff = dots1 - dots2
    return diff


def sort_names(names: Iterable[str], reverse: bool = False) -> list[str]:
    """Return ``names`` ordered by :func:`ls_strcmp`."""
    return sorted(names, key=cmp_to_key(ls_strcmp), reverse=reverse)