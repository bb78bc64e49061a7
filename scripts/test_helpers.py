"""
Reference implementations and data generators shared by the FastString tests.

The baselines below only slice and compare `bytes` objects, so they stay
independent from the scanning loops under test, while following the same
rules for default and out-of-range `start` indices.
"""

import itertools
from random import choice, randint
from typing import Iterator, List, Optional


def baseline_find_byte(haystack: bytes, target: int, start: Optional[int], reverse: bool) -> Optional[int]:
    count = len(haystack)
    if start is not None and not 0 <= start < count:
        return None
    matches = [i for i, byte in enumerate(haystack) if byte == target]
    if reverse:
        limit = count - 1 if start is None else start
        candidates = [i for i in matches if i <= limit]
        return max(candidates) if candidates else None
    limit = 0 if start is None else start
    candidates = [i for i in matches if i >= limit]
    return min(candidates) if candidates else None


def baseline_find_substring(haystack: bytes, needle: bytes, start: Optional[int], reverse: bool) -> Optional[int]:
    if len(needle) > len(haystack):
        return None
    last = len(haystack) - len(needle)
    if start is not None and not 0 <= start <= last:
        return None
    if reverse and start is not None and len(haystack[: start + 1]) < len(needle):
        return None
    matches = [i for i in range(last + 1) if haystack[i : i + len(needle)] == needle]
    if reverse:
        limit = last if start is None else start
        candidates = [i for i in matches if i <= limit]
        return max(candidates) if candidates else None
    limit = 0 if start is None else start
    candidates = [i for i in matches if i >= limit]
    return min(candidates) if candidates else None


def baseline_positions(haystack: bytes, needle: bytes) -> List[int]:
    if len(needle) > len(haystack):
        return []
    return [i for i in range(len(haystack) - len(needle) + 1) if haystack[i : i + len(needle)] == needle]


def all_strings(alphabet: bytes, length: int) -> Iterator[bytes]:
    """Yield every byte string of exactly `length` symbols drawn from `alphabet`."""
    for symbols in itertools.product(alphabet, repeat=length):
        yield bytes(symbols)


def get_random_bytes(length: Optional[int] = None, variability: Optional[int] = None) -> bytes:
    """Random bytes from the first `variability` lowercase ASCII letters, or any byte value."""
    if length is None:
        length = randint(3, 300)
    if variability is None:
        return bytes(randint(0, 255) for _ in range(length))
    alphabet = b"abcdefghijklmnopqrstuvwxyz"[:variability]
    return bytes(choice(alphabet) for _ in range(length))
