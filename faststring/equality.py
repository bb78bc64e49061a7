"""
Byte-wise equality.

Both comparisons only rely on the `byte_count` and `buffer` attributes of
their `FastString` arguments, and reject differing lengths before reading
a single byte. Plain `str` and bytes-like arguments are wrapped first, the
same way the search functions accept them.
"""

from faststring import fast_string


def _same_bytes(lhs, rhs) -> bool:
    for left, right in zip(lhs, rhs):
        if left != right:
            return False
    return True


def equals(a, b) -> bool:
    """Check whether two `FastString` values hold identical bytes."""
    a = fast_string.as_fast_string(a)
    b = fast_string.as_fast_string(b)
    if a.byte_count != b.byte_count:
        return False
    return _same_bytes(a.buffer, b.buffer)


def equals_native(a, b: str) -> bool:
    """Check whether a `FastString` holds exactly the UTF-8 encoding of `b`.

    The length check uses the UTF-8 byte count, not the number of code
    points. Strings with lone surrogates have no UTF-8 form and never match.
    """
    a = fast_string.as_fast_string(a)
    if not isinstance(b, str):
        raise TypeError(f"Expected a native string, got {type(b).__name__}")
    try:
        encoded = b.encode("utf-8")
    except UnicodeEncodeError:
        return False
    if a.byte_count != len(encoded):
        return False
    return _same_bytes(a.buffer, encoded)
