"""String and character helpers with classic C-library semantics."""

from __future__ import annotations

from typing import Optional, Union

CharLike = Union[str, int]

_ATOI_SPACE = frozenset(" \t\n\v\f\r")


def _code(c: CharLike) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring trailing garbage.

    Leading whitespace is skipped and one optional sign is accepted.
    Text with no digits after that yields 0.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _ATOI_SPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and "0" <= text[pos] <= "9":
        pos += 1
    digits = text[start:pos]
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every character of ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Find ``needle`` lying entirely within the first ``n`` characters.

    Returns the index of the first match, 0 for an empty needle, or
    None when there is no match.
    """
    if not needle:
        return 0
    if n <= 0:
        return None
    index = haystack[:n].find(needle)
    return None if index < 0 else index


def _as_bytes(value: Union[str, bytes]) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def strncmp(a: Union[str, bytes], b: Union[str, bytes], n: int) -> int:
    """Compare at most ``n`` bytes as unsigned values.

    Returns the difference of the first differing bytes, or 0 when the
    compared prefixes are equal.
    """
    left = _as_bytes(a)
    right = _as_bytes(b)
    for i in range(max(n, 0)):
        ca = left[i] if i < len(left) else 0
        cb = right[i] if i < len(right) else 0
        if ca != cb:
            return ca - cb
        if ca == 0:
            break
    return 0


def isalpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: CharLike) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def tolower(c: CharLike) -> CharLike:
    """Lower-case an ASCII capital; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _same_kind(c, code)


def toupper(c: CharLike) -> CharLike:
    """Upper-case an ASCII small letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _same_kind(c, code)