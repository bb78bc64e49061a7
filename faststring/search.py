"""
Forward and backward scans for single bytes and byte substrings.

Every search returns the offset of a match start or `None`. An optional
`start` must be a position where a match could begin:

    find_byte:       0 <= start < byte_count
    find_substring:  0 <= start <= byte_count - needle_length

in either direction. A backward substring scan additionally needs room for
a whole needle inside `[0, start]`, that is `start >= needle_length - 1`.
Any other `start` yields `None`, so no scan ever reads outside the haystack.
Backward scans treat `start` as the highest candidate and default to the
last one.

Enumerations (`positions` and friends) re-run the forward primitive from
one byte past the previous match start, so overlapping occurrences are all
reported in increasing order.
"""

from typing import List, Optional

from faststring import fast_string


def _check_byte(target: int) -> None:
    if not isinstance(target, int):
        raise TypeError(f"Expected an integer byte value, got {type(target).__name__}")
    if not 0 <= target <= 255:
        raise ValueError("byte must be in range(0, 256)")


def _check_start(start: Optional[int]) -> None:
    if start is not None and not isinstance(start, int):
        raise TypeError(f"Expected an integer start index or None, got {type(start).__name__}")


def _check_char(character: str) -> None:
    if not isinstance(character, str):
        raise TypeError(f"Expected a native string, got {type(character).__name__}")
    if len(character) != 1:
        raise ValueError(f"Expected a single character, got a string of length {len(character)}")


def _matches_at(buffer: bytes, needle: bytes, index: int) -> bool:
    for offset, byte in enumerate(needle):
        if buffer[index + offset] != byte:
            return False
    return True


def find_byte(haystack, target: int, start: Optional[int] = None, reverse: bool = False) -> Optional[int]:
    """Locate a single byte value.

    Args:
        haystack: the `FastString` (or anything convertible) to scan.
        target: byte value in `range(256)`.
        start: first index to inspect, defaults to `0` going forward and
            to `byte_count - 1` going backward.
        reverse: scan towards the beginning and return the rightmost match.

    Returns:
        Offset of the match or `None`.
    """
    haystack = fast_string.as_fast_string(haystack)
    _check_byte(target)
    _check_start(start)
    buffer = haystack.buffer
    count = haystack.byte_count

    if reverse:
        index = count - 1 if start is None else start
        if index >= count:
            return None
        while index >= 0:
            if buffer[index] == target:
                return index
            index -= 1
    else:
        index = 0 if start is None else start
        if index < 0:
            return None
        while index < count:
            if buffer[index] == target:
                return index
            index += 1
    return None


def find_substring(haystack, needle, start: Optional[int] = None, reverse: bool = False) -> Optional[int]:
    """Locate a byte substring.

    Args:
        haystack: the `FastString` (or anything convertible) to scan.
        needle: `FastString`, `str` (UTF-8) or bytes-like value. An empty
            needle matches at the effective start.
        start: lowest candidate match start going forward (default `0`),
            highest one going backward (default `byte_count - len(needle)`).
            Backward, a `start` below `len(needle) - 1` finds nothing.
        reverse: scan towards the beginning and return the rightmost match.

    Returns:
        Offset of the match start or `None`.
    """
    haystack = fast_string.as_fast_string(haystack)
    needle = fast_string.as_fast_string(needle)
    _check_start(start)
    if needle.byte_count > haystack.byte_count:
        return None

    last = haystack.byte_count - needle.byte_count
    if start is not None and not 0 <= start <= last:
        return None
    # Going backward, `[0, start]` must be wide enough to hold the whole needle
    if reverse and start is not None and start < needle.byte_count - 1:
        return None

    buffer = haystack.buffer
    pattern = needle.buffer
    if reverse:
        candidates = range(last if start is None else start, -1, -1)
    else:
        candidates = range(0 if start is None else start, last + 1)
    for index in candidates:
        if _matches_at(buffer, pattern, index):
            return index
    return None


def find_char(haystack, character: str, start: Optional[int] = None, reverse: bool = False) -> Optional[int]:
    """Locate one native character by its UTF-8 bytes, which may be several."""
    _check_char(character)
    return find_substring(haystack, character, start, reverse)


def byte_positions(haystack, target: int) -> List[int]:
    haystack = fast_string.as_fast_string(haystack)
    result = []
    match = find_byte(haystack, target)
    while match is not None:
        result.append(match)
        match = find_byte(haystack, target, match + 1)
    return result


def positions(haystack, needle) -> List[int]:
    """Return the start offsets of all, possibly overlapping, occurrences of `needle`."""
    haystack = fast_string.as_fast_string(haystack)
    needle = fast_string.as_fast_string(needle)
    result = []
    match = find_substring(haystack, needle)
    while match is not None:
        result.append(match)
        match = find_substring(haystack, needle, match + 1)
    return result


def char_positions(haystack, character: str) -> List[int]:
    _check_char(character)
    return positions(haystack, character)


def contains(haystack, needle) -> bool:
    return find_substring(haystack, needle) is not None


def contains_byte(haystack, target: int) -> bool:
    return find_byte(haystack, target) is not None


def contains_char(haystack, character: str) -> bool:
    return find_char(haystack, character) is not None


def has_prefix(haystack, prefix) -> bool:
    """Check the leading bytes. Every string starts with the empty prefix."""
    haystack = fast_string.as_fast_string(haystack)
    prefix = fast_string.as_fast_string(prefix)
    if prefix.byte_count < 1:
        return True
    if haystack.byte_count < prefix.byte_count:
        return False
    return _matches_at(haystack.buffer, prefix.buffer, 0)


def has_suffix(haystack, suffix) -> bool:
    """Check the trailing bytes. Every string ends with the empty suffix."""
    haystack = fast_string.as_fast_string(haystack)
    suffix = fast_string.as_fast_string(suffix)
    if haystack.byte_count < suffix.byte_count:
        return False
    if suffix.byte_count < 1:
        return True
    return _matches_at(haystack.buffer, suffix.buffer, haystack.byte_count - suffix.byte_count)
