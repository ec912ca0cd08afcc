"""Small exercises on integers and digit strings."""

from __future__ import annotations


def is_power_of_four(n: int) -> bool:
    """Tell whether ``n`` is 4 raised to some non-negative integer power."""
    if n <= 0:
        return False
    while n % 4 == 0:
        n //= 4
    return n == 1


def maximum_69_number(num: int) -> int:
    """Turn the most significant 6 of ``num`` into a 9; other numbers stay as they are."""
    if num <= 0:
        return num
    return int(str(num).replace("6", "9", 1))


def largest_good_integer(num: str) -> str:
    """Return the largest run of three equal characters in ``num``, or ``""``."""
    triples = (
        num[start : start + 3]
        for start in range(len(num) - 2)
        if num[start] == num[start + 1] == num[start + 2]
    )
    return max(triples, default="")