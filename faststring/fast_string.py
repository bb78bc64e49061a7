"""
Immutable byte-exact string type.

A `FastString` owns one `bytes` object and exposes it as a sequence of raw
byte values: `len()` is the byte count, indexing returns integers, and no
operation ever looks at code points, graphemes or the current locale.
Native `str` values are accepted everywhere and are always taken as their
UTF-8 encoding.
"""

from typing import Iterator, Union

from faststring import equality, search

NeedleLike = Union["FastString", str, bytes, bytearray, memoryview]


def _to_bytes(source) -> bytes:
    if isinstance(source, FastString):
        return source._buffer
    if isinstance(source, str):
        return source.encode("utf-8")
    if isinstance(source, bytes):
        return source
    # `bytes(5)` would silently produce five zero bytes
    if isinstance(source, int):
        raise TypeError(f"Expected a string or a bytes-like object, got {type(source).__name__}")
    try:
        view = memoryview(source)
    except TypeError:
        raise TypeError(f"Expected a string or a bytes-like object, got {type(source).__name__}") from None
    with view:
        return view.tobytes()


def as_fast_string(value: NeedleLike) -> "FastString":
    """Wrap `value` into a `FastString`, returning it unchanged if it already is one."""
    if isinstance(value, FastString):
        return value
    return FastString(value)


class FastString:
    """Read-only sequence of raw bytes with byte-wise search and comparison.

    Args:
        source: a `str` (UTF-8 encoded), any object exporting the buffer
            protocol (`bytes`, `bytearray`, `memoryview`, NumPy arrays), or
            another `FastString`. The content is copied once.
    """

    __slots__ = ("_buffer",)

    def __init__(self, source: NeedleLike = b""):
        self._buffer = _to_bytes(source)

    @property
    def byte_count(self) -> int:
        return len(self._buffer)

    @property
    def buffer(self) -> bytes:
        return self._buffer

    def __len__(self) -> int:
        return len(self._buffer)

    def __getitem__(self, key):
        if isinstance(key, slice):
            return FastString(self._buffer[key])
        return self._buffer[key]

    def __iter__(self) -> Iterator[int]:
        return iter(self._buffer)

    def __bytes__(self) -> bytes:
        return self._buffer

    def __str__(self) -> str:
        return self._buffer.decode("utf-8")

    def __repr__(self) -> str:
        return f"FastString({self._buffer!r})"

    # Equal to both `str` and `bytes` values, which never share hashes
    __hash__ = None

    def __eq__(self, other) -> bool:
        if isinstance(other, FastString):
            return equality.equals(self, other)
        if isinstance(other, str):
            return equality.equals_native(self, other)
        if isinstance(other, (bytes, bytearray, memoryview)):
            return equality.equals(self, FastString(other))
        return NotImplemented

    def __contains__(self, needle) -> bool:
        if isinstance(needle, int):
            return search.contains_byte(self, needle)
        return search.contains(self, needle)

    def decode(self, encoding: str = "utf-8", errors: str = "strict") -> str:
        return self._buffer.decode(encoding, errors)

    # Method forms of the module-level operations

    def equals(self, other: Union["FastString", str]) -> bool:
        if isinstance(other, str):
            return equality.equals_native(self, other)
        return equality.equals(self, as_fast_string(other))

    def find_byte(self, target: int, start=None, reverse: bool = False):
        return search.find_byte(self, target, start, reverse)

    def find_substring(self, needle: NeedleLike, start=None, reverse: bool = False):
        return search.find_substring(self, needle, start, reverse)

    def find_char(self, character: str, start=None, reverse: bool = False):
        return search.find_char(self, character, start, reverse)

    def byte_positions(self, target: int):
        return search.byte_positions(self, target)

    def positions(self, needle: NeedleLike):
        return search.positions(self, needle)

    def char_positions(self, character: str):
        return search.char_positions(self, character)

    def contains(self, needle: NeedleLike) -> bool:
        return search.contains(self, needle)

    def contains_byte(self, target: int) -> bool:
        return search.contains_byte(self, target)

    def contains_char(self, character: str) -> bool:
        return search.contains_char(self, character)

    def has_prefix(self, prefix: NeedleLike) -> bool:
        return search.has_prefix(self, prefix)

    def has_suffix(self, suffix: NeedleLike) -> bool:
        return search.has_suffix(self, suffix)
