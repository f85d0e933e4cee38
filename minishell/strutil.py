"""Small string helpers used by the shell: whitespace tests, integer parsing and
formatting, splitting, trimming and bounded search and comparison."""

from __future__ import annotations

from itertools import islice, zip_longest

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")

INT_BITS = 32
LONG_LONG_BITS = 64


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement integer of ``bits`` bits."""
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def is_space(char: str) -> bool:
    """Return True when ``char`` is a space or one of the characters tab to carriage return."""
    return char in _WHITESPACE


def _parse_integer(text: str) -> int:
    rest = text.lstrip(" \t\n\v\f\r")
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if char not in _DIGITS:
            break
        digits.append(char)
    number = int("".join(digits)) if digits else 0
    return sign * number


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a signed 32-bit value.

    Leading whitespace is skipped and a single ``+`` or ``-`` is accepted.
    Parsing stops at the first non-digit; with no digits the result is 0.
    """
    return _wrap(_parse_integer(text), INT_BITS)


def atoll(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a signed 64-bit value."""
    return _wrap(_parse_integer(text), LONG_LONG_BITS)


def itoa(n: int) -> str:
    """Format a signed 32-bit integer in decimal."""
    low = -(1 << (INT_BITS - 1))
    high = (1 << (INT_BITS - 1)) - 1
    if not low <= n <= high:
        raise OverflowError(f"{n} does not fit in a signed {INT_BITS}-bit integer")
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be exactly one character")
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, charset: str | None) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``.

    A ``charset`` of None leaves the text unchanged.
    """
    if charset is None:
        return text
    return text.strip(charset)


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    Returns the index of the first match, or None. An empty needle matches at 0.
    """
    if not needle:
        return 0
    if length <= 0:
        return None
    position = haystack[:length].find(needle)
    return position if position >= 0 else None


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end gives the empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns 0 when equal, otherwise the difference of the code points at the
    first mismatch, where the end of a string counts as code point 0.
    """
    pairs = zip_longest(first, second, fillvalue="")
    for left, right in islice(pairs, max(n, 0)):
        if left != right:
            return (ord(left) if left else 0) - (ord(right) if right else 0)
    return 0