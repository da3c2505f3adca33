"""Integer and numeric puzzles."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``; 0 if the result leaves 32-bit range."""
    sign = -1 if x < 0 else 1
    reversed_value = sign * int(str(abs(x))[::-1])
    return reversed_value if INT_MIN <= reversed_value <= INT_MAX else 0


def is_palindrome_number(x: int) -> bool:
    """Tell whether ``x`` reads the same backwards; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def power(x: float, n: int) -> float:
    """Raise ``x`` to the integer power ``n`` by repeated squaring."""
    result = 1.0
    base = float(x)
    remaining = abs(n)
    while remaining:
        if remaining & 1:
            result *= base
        base *= base
        remaining >>= 1
    return result if n >= 0 else 1.0 / result


def _next_permutation(chars: list[str]) -> bool:
    """Advance ``chars`` to its next lexicographic order in place.

    When it is already the last, reset it to the first and return False.
    """
    i = len(chars) - 2
    while i >= 0 and chars[i] >= chars[i + 1]:
        i -= 1
    if i < 0:
        chars.reverse()
        return False
    j = len(chars) - 1
    while chars[j] <= chars[i]:
        j -= 1
    chars[i], chars[j] = chars[j], chars[i]
    chars[i + 1:] = reversed(chars[i + 1:])
    return True


def permutation_sequence(n: int, k: int) -> str:
    """Return the k-th permutation, counted from 1, of the digits ``1..n``.

    Past the last permutation the sequence wraps back to the first.
    """
    chars = list("".join(str(i) for i in range(1, n + 1)))
    for _ in range(k - 1):
        if not _next_permutation(chars):
            break
    return "".join(chars)


def climb_stairs(n: int) -> int:
    """Count the ways to climb ``n`` stairs taking one or two steps at a time."""
    one_back, two_back = 1, 2
    for _ in range(2, n):
        one_back, two_back = two_back, one_back + two_back
    return two_back if n >= 2 else one_back


def fib(n: int) -> int:
    """Return the n-th Fibonacci number, with fib(0) == 0 and fib(1) == 1."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def sum_of_multiples(n: int) -> int:
    """Sum the numbers in ``1..n`` divisible by 3, 5 or 7."""
    return sum(i for i in range(1, n + 1) if i % 3 == 0 or i % 5 == 0 or i % 7 == 0)