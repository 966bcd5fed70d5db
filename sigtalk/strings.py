"""String searching, comparison, splitting, trimming and joining helpers."""

from __future__ import annotations

_NUL = "\0"


def _char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) % 256)


def _non_negative(name: str, value: int) -> int:
    value = int(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def find_char(text: str, c: int | str) -> int | None:
    """Index of the first ``c`` in ``text``, or None if absent.

    Integer codes are taken modulo 256. Searching for NUL yields ``len(text)``,
    the position of the terminator.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def rfind_char(text: str, c: int | str) -> int | None:
    """Index of the last ``c`` in ``text``, or None if absent.

    Searching for NUL yields ``len(text)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def compare(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns zero when they agree, otherwise the difference between the codes
    of the first differing characters; the end of a string counts as code 0.
    """
    n = _non_negative("n", n)
    for position in range(n):
        a = ord(s1[position]) if position < len(s1) else 0
        b = ord(s2[position]) if position < len(s2) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def compare_bytes(b1: bytes, b2: bytes, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns zero when they agree, otherwise the difference of the first
    differing byte values. Both buffers must hold at least ``n`` bytes.
    """
    n = _non_negative("n", n)
    if len(b1) < n or len(b2) < n:
        raise ValueError(f"both buffers must hold at least {n} bytes")
    for a, b in zip(b1[:n], b2[:n]):
        if a != b:
            return a - b
    return 0


def find_within(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` in ``haystack`` where the whole match lies in the
    first ``length`` characters, or None. An empty needle is found at 0."""
    length = _non_negative("length", length)
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    sep = _char(sep)
    return [piece for piece in text.split(sep) if piece]


def trim(text: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` from ``start``; empty when
    ``start`` lies at or past the end."""
    start = _non_negative("start", start)
    length = _non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def join(s1: str | None, s2: str | None) -> str | None:
    """Concatenate two strings, treating a missing one as empty.

    Returns None only when both are missing.
    """
    if s1 is None and s2 is None:
        return None
    return (s1 or "") + (s2 or "")