"""String problems: scanning windows, palindromes, parsing and building."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import chain, zip_longest

from .numbers import INT_MAX, INT_MIN

_DIGITS = "0123456789"


def longest_unique_substring_length(s: str) -> int:
    """Return the length of the longest run of ``s`` with no repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, char in enumerate(s):
        if char in last_seen:
            start = max(start, last_seen[char] + 1)
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring, the leftmost among equals."""
    if not s:
        return ""
    n = len(s)
    start, length = 0, 1

    def expand(left: int, right: int) -> None:
        nonlocal start, length
        while left >= 0 and right < n and s[left] == s[right]:
            if right - left + 1 > length:
                start, length = left, right - left + 1
            left -= 1
            right += 1

    for centre in range(n):
        expand(centre, centre)
        expand(centre, centre + 1)
    return s[start:start + length]


def zigzag_convert(s: str, num_rows: int) -> str:
    """Write ``s`` in a zigzag over ``num_rows`` rows and read it row by row."""
    if num_rows < 1:
        raise ValueError(f"num_rows must be at least 1, got {num_rows}")
    if num_rows == 1:
        return s
    rows: list[list[str]] = [[] for _ in range(num_rows)]
    row, step = 0, -1
    for char in s:
        rows[row].append(char)
        if row in (0, num_rows - 1):
            step = -step
        row += step
    return "".join(chain.from_iterable(rows))


def atoi(s: str) -> int:
    """Parse a leading integer the way C's atoi does, clamped to 32 bits.

    Leading spaces and one sign are allowed; parsing stops at the first
    non-digit, and text with no digits gives 0.
    """
    text = s.lstrip(" ")
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    value = 0
    for char in text:
        if char not in _DIGITS:
            break
        value = value * 10 + int(char)
        if sign * value > INT_MAX:
            return INT_MAX
        if sign * value < INT_MIN:
            return INT_MIN
    return sign * value


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string in ``strs``."""
    if not strs or not strs[0]:
        return ""
    prefix: list[str] = []
    for chars in zip(*strs):
        if any(char != chars[0] for char in chars):
            break
        prefix.append(chars[0])
    return "".join(prefix)


def add_binary(a: str, b: str) -> str:
    """Add two binary numerals, keeping the width of the longer one."""
    for digits in (a, b):
        if set(digits) - {"0", "1"}:
            raise ValueError(f"not a binary numeral: {digits!r}")
    out: list[str] = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry += int(x) + int(y)
        out.append(str(carry & 1))
        carry >>= 1
    if carry:
        out.append("1")
    return "".join(reversed(out))


def repeated_string_match(a: str, b: str) -> int:
    """Return the fewest copies of ``a`` whose concatenation contains ``b``.

    Returns -1 when no number of copies does.
    """
    if not a:
        raise ValueError("a must not be empty")
    count = max(1, -(-len(b) // len(a)))
    if b in a * count:
        return count
    if b in a * (count + 1):
        return count + 1
    return -1