"""Binary search over the answer space for rate and deadline problems."""

from __future__ import annotations

from typing import Callable, Optional, Sequence


def _smallest_passing(lo: int, hi: int, passes: Callable[[int], bool]) -> Optional[int]:
    """Return the least value in ``[lo, hi]`` accepted by a monotone ``passes``."""
    answer: Optional[int] = None
    while lo <= hi:
        mid = (lo + hi) // 2
        if passes(mid):
            answer = mid
            hi = mid - 1
        else:
            lo = mid + 1
    return answer


def _rounds_needed(amounts: Sequence[int], rate: int) -> int:
    """Sum of ceil(amount / rate), where an empty amount still costs one round."""
    return sum(-(-amount // rate) or 1 for amount in amounts)


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the slowest eating speed that finishes all ``piles`` within ``h`` hours.

    Each pile takes ceil(pile / speed) hours, and at least one hour.
    """
    fastest = max([1, *piles])
    speed = _smallest_passing(
        1, fastest, lambda rate: _rounds_needed(piles, rate) <= h
    )
    if speed is None:
        raise ValueError("the piles cannot be finished within h hours")
    return speed


def smallest_divisor(nums: Sequence[int], threshold: int) -> int:
    """Return the least divisor whose rounded-up quotients sum to at most ``threshold``.

    When no divisor qualifies, the largest candidate, ``max(nums)``, is returned.
    """
    largest = max([1, *nums])
    divisor = _smallest_passing(
        1, largest, lambda rate: _rounds_needed(nums, rate) <= threshold
    )
    return largest if divisor is None else divisor


def _bouquets_ready(day: int, bloom_day: Sequence[int], m: int, k: int) -> bool:
    bouquets = 0
    flowers = 0
    for bloom in bloom_day:
        flowers = flowers + 1 if bloom <= day else 0
        if k <= flowers:
            bouquets += 1
            flowers = 0
        if m <= bouquets:
            return True
    return False


def min_days(bloom_day: Sequence[int], m: int, k: int) -> int:
    """Return the first day on which ``m`` bouquets of ``k`` adjacent flowers exist.

    Returns -1 when there are fewer than ``m * k`` flowers.
    """
    if m * k > len(bloom_day):
        return -1
    if not bloom_day:
        raise ValueError("bloom_day must not be empty")
    day = _smallest_passing(
        min(bloom_day),
        max(bloom_day),
        lambda candidate: _bouquets_ready(candidate, bloom_day, m, k),
    )
    if day is None:
        raise ValueError("the bouquets can never be made")
    return day