#!/usr/bin/env python3

import os
import argparse
from typing import List

import faststring
from faststring import FastString

from cli import read_contents

NEWLINE = ord("\n")
WHITESPACE = frozenset(b" \t\n\r\v\f")


def parse_arguments():
    parser = argparse.ArgumentParser(
        description="Print newline, word, and byte counts for each FILE, and a total line if more than one FILE is \
        specified. A word is a non-zero-length sequence of bytes delimited by ASCII white space."
    )
    parser.add_argument("files", nargs="*", default=["-"], help="Files to process")
    parser.add_argument("-c", "--bytes", action="store_true", help="print the byte counts")
    parser.add_argument("-l", "--lines", action="store_true", help="print the newline counts")
    parser.add_argument(
        "-L",
        "--max-line-length",
        action="store_true",
        help="print the length of the longest line in bytes",
    )
    parser.add_argument("-w", "--words", action="store_true", help="print the word counts")
    parser.add_argument(
        "--files0-from",
        metavar="filename",
        help="Read input from the files specified by NUL-terminated names in file F",
    )
    parser.add_argument("--version", action="version", version=faststring.__version__)
    return parser.parse_args()


def count_words(contents: FastString) -> int:
    words, in_word = 0, False
    for byte in contents:
        if byte in WHITESPACE:
            in_word = False
        elif not in_word:
            in_word = True
            words += 1
    return words


def max_line_length(contents: FastString, newlines: List[int]) -> int:
    longest, line_start = 0, 0
    for line_end in newlines + [contents.byte_count]:
        longest = max(longest, line_end - line_start)
        line_start = line_end + 1
    return longest


def wc(file_path, args):
    try:
        contents = read_contents(file_path)
    except FileNotFoundError:
        return f"No such file: {file_path}", False

    counts = {}
    newlines = contents.byte_positions(NEWLINE) if args.lines or args.max_line_length else []
    if args.lines:
        counts["line_count"] = len(newlines)
    if args.words:
        counts["word_count"] = count_words(contents)
    if args.bytes:
        counts["byte_count"] = contents.byte_count
    if args.max_line_length:
        counts["max_line_length"] = max_line_length(contents, newlines)
    return counts, True


def format_output(counts, args, just):
    selected_counts = []
    if args.lines:
        selected_counts.append(counts["line_count"])
    if args.words:
        selected_counts.append(counts["word_count"])
    if args.bytes:
        selected_counts.append(counts["byte_count"])
    if args.max_line_length:
        selected_counts.append(counts.get("max_line_length", 0))

    return " ".join(str(count).rjust(just) for count in selected_counts)


def get_files_from(fn):
    contents = read_contents(fn)
    names = []
    start = 0
    for separator in contents.byte_positions(0) + [contents.byte_count]:
        name = os.fsdecode(bytes(contents[start:separator]))
        if os.path.isfile(name):
            names.append(name)
        start = separator + 1
    return names


def main():
    args = parse_arguments()
    total_counts = {
        "line_count": 0,
        "word_count": 0,
        "max_line_length": 0,
        "byte_count": 0,
    }
    if not any([args.lines, args.words, args.bytes, args.max_line_length]):
        args.lines = True
        args.words = True
        args.bytes = True

    if args.files0_from and args.files == ["-"]:
        args.files = get_files_from(args.files0_from)
        if len(args.files) == 0:
            return

    # Column width follows the largest input, like GNU wc
    sizes = [os.stat(fn).st_size for fn in args.files if os.path.isfile(fn)]
    just = max((len(str(size)) for size in sizes), default=1)

    for file_path in args.files:
        counts, success = wc(file_path, args)
        if success:
            for key in total_counts.keys():
                if key == "max_line_length":
                    total_counts[key] = max(total_counts[key], counts.get(key, 0))
                else:
                    total_counts[key] += counts.get(key, 0)
            output = format_output(counts, args, just) + f" {file_path}"
            print(output)
        else:
            print(counts)

    if len(args.files) > 1:
        total_output = format_output(total_counts, args, just) + " total"
        print(total_output)


if __name__ == "__main__":
    main()
