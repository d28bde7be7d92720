"""Character classification, case mapping and integer/text conversions."""

from __future__ import annotations

from collections.abc import Iterable
from typing import overload

__all__ = [
    "atoi",
    "itoa",
    "itoa_dec",
    "isalnum",
    "isalpha",
    "isascii",
    "isdigit",
    "isprint",
    "toupper",
    "tolower",
    "is_in_set",
    "str_in_set",
]

_WHITESPACE = frozenset("\t\n\v\f\r ")
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: int | str) -> int:
    """Return the code point of a one-character string, or the int itself."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected a character or an integer code, not {type(c).__name__}")


def _in_range(c: int | str, low: str, high: str) -> bool:
    return ord(low) <= _code(c) <= ord(high)


def isalpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    return _in_range(c, "A", "Z") or _in_range(c, "a", "z")


def isdigit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return _in_range(c, "0", "9")


def isalnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


@overload
def toupper(c: str) -> str: ...
@overload
def toupper(c: int) -> int: ...
def toupper(c):
    """Map an ASCII lower-case letter to upper case; anything else is unchanged."""
    code = _code(c)
    if _in_range(code, "a", "z"):
        code -= _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


@overload
def tolower(c: str) -> str: ...
@overload
def tolower(c: int) -> int: ...
def tolower(c):
    """Map an ASCII upper-case letter to lower case; anything else is unchanged."""
    code = _code(c)
    if _in_range(code, "A", "Z"):
        code += _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. No digits at all gives 0.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    total = 0
    for ch in rest:
        if not isdigit(ch):
            break
        total = total * 10 + (ord(ch) - ord("0"))
    return sign * total


def itoa(number: int) -> str:
    """Render a signed integer in decimal."""
    if number < 0:
        return "-" + itoa_dec(-number)
    return itoa_dec(number)


def itoa_dec(number: int) -> str:
    """Render a non-negative integer in decimal."""
    if number < 0:
        raise ValueError(f"expected a non-negative number, got {number}")
    digits = []
    while True:
        number, digit = divmod(number, 10)
        digits.append(chr(ord("0") + digit))
        if number == 0:
            break
    return "".join(reversed(digits))


def is_in_set(c: str, charset: str) -> bool:
    """True if the single character ``c`` occurs in ``charset``.

    The NUL character is never a member, as it terminates the set.
    """
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    if c == "\0":
        return False
    return c in charset.split("\0", 1)[0]


def str_in_set(text: str, candidates: Iterable[str]) -> bool:
    """True if ``text`` equals one of ``candidates``."""
    return any(text == candidate for candidate in candidates)