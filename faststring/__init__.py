"""
FastString: byte-exact strings with predictable search and comparison.

    import faststring as fs

    text = fs.FastString("hello world")
    text.find_substring("world")            # 6
    fs.positions("abcabc", "abc")           # [0, 3]
    fs.find_byte(b"a\\nb\\n", ord("\\n"), reverse=True)  # 3
"""

from faststring.fast_string import FastString, as_fast_string
from faststring.equality import equals, equals_native
from faststring.search import (
    find_byte,
    find_substring,
    find_char,
    byte_positions,
    positions,
    char_positions,
    contains,
    contains_byte,
    contains_char,
    has_prefix,
    has_suffix,
)

__version__ = "1.0.0"

__all__ = [
    "FastString",
    "as_fast_string",
    "equals",
    "equals_native",
    "find_byte",
    "find_substring",
    "find_char",
    "byte_positions",
    "positions",
    "char_positions",
    "contains",
    "contains_byte",
    "contains_char",
    "has_prefix",
    "has_suffix",
]
