# /// script
# dependencies = [
#   "faststring",
#   "fire",
#   "tqdm",
# ]
# ///
"""
FastString search benchmark script.

Compares the byte-by-byte scans of FastString against the native `bytes`
methods, forward and backward, for substrings and single bytes.

Example usage:

    # Benchmark with a file
    python scripts/bench_search.py --haystack_path leipzig1M.txt

    # Benchmark with synthetic data
    python scripts/bench_search.py --haystack_pattern "hello world " --haystack_length 100000
"""

import time
import random
from typing import List

import fire
from tqdm import tqdm

from faststring import FastString


def log(name: str, haystack, patterns, operator: callable):
    a = time.time_ns()
    matches = 0
    for pattern in tqdm(patterns, desc=name, unit="needles", leave=False):
        matches += operator(haystack, pattern)
    b = time.time_ns()
    bytes_length = len(haystack) * len(patterns)
    secs = (b - a) / 1e9
    mb_per_sec = bytes_length / (1e6 * secs)
    print(f"{name}: took {secs:.4f} seconds ~ {mb_per_sec:.3f} MB/s, {matches:,} matches")


def find_all(haystack: bytes, pattern: bytes) -> int:
    count, start = 0, 0
    while True:
        index = haystack.find(pattern, start)
        if index == -1:
            break
        count += 1
        start = index + 1
    return count


def rfind_all(haystack: bytes, pattern: bytes) -> int:
    count, end = 0, len(haystack)
    while True:
        index = haystack.rfind(pattern, 0, end)
        if index == -1:
            break
        count += 1
        end = index + len(pattern) - 1
    return count


def positions_all(haystack: FastString, pattern: bytes) -> int:
    return len(haystack.positions(pattern))


def reverse_positions_all(haystack: FastString, pattern: bytes) -> int:
    count = 0
    index = haystack.find_substring(pattern, reverse=True)
    while index is not None:
        count += 1
        start = index - 1
        if start >= len(pattern) - 1:
            index = haystack.find_substring(pattern, start, reverse=True)
        else:
            # Starts that close to the front are rejected, rescan the short head instead
            index = haystack[: start + len(pattern)].find_substring(pattern, reverse=True)
    return count


def byte_find_all(haystack: bytes, target: int) -> int:
    return find_all(haystack, bytes([target]))


def byte_positions_all(haystack: FastString, target: int) -> int:
    return len(haystack.byte_positions(target))


def log_functionality(tokens: List[bytes], native: bytes, fast: FastString):
    log("bytes.find", native, tokens, find_all)
    log("FastString.positions", fast, tokens, positions_all)
    log("bytes.rfind", native, tokens, rfind_all)
    log("FastString.find_substring(reverse=True)", fast, tokens, reverse_positions_all)

    separators = list(b" \t\n\r")
    log("bytes.find(byte)", native, separators, byte_find_all)
    log("FastString.byte_positions", fast, separators, byte_positions_all)


def bench(
    haystack_path: str = None,
    haystack_pattern: str = None,
    haystack_length: int = None,
    needles: int = 20,
):
    """Run search benchmarks over a file or a repeated synthetic pattern."""
    if haystack_path:
        with open(haystack_path, "rb") as f:
            native: bytes = f.read()
    else:
        haystack_length = int(haystack_length)
        pattern = haystack_pattern.encode("utf-8")
        repetitions = haystack_length // len(pattern)
        native: bytes = pattern * repetitions

    fast = FastString(native)
    tokens = native.split()
    total_tokens = len(tokens)
    mean_token_length = sum(len(t) for t in tokens) / total_tokens

    print(f"Prepared {total_tokens:,} tokens of {mean_token_length:.2f} mean length!")

    tokens = random.sample(tokens, min(needles, total_tokens))
    log_functionality(tokens, native, fast)


if __name__ == "__main__":
    fire.Fire(bench)
