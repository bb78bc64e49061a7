import sys

from faststring import FastString


def read_contents(file_path: str) -> FastString:
    """Load a whole file, or standard input for "-", as raw bytes."""
    if file_path == "-":
        return FastString(sys.stdin.buffer.read())
    with open(file_path, "rb") as f:
        return FastString(f.read())
