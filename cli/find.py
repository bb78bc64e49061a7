#!/usr/bin/env python3

import argparse
import os
import sys
from typing import List

import faststring
from faststring import FastString

from cli import read_contents


def parse_arguments():
    parser = argparse.ArgumentParser(
        description="Print the byte offset of every occurrence of NEEDLE in each FILE, one per line. \
        Occurrences may overlap. With more than one FILE, every line is prefixed with the file name."
    )
    parser.add_argument("needle", help="Byte sequence to search for")
    parser.add_argument("files", nargs="*", default=["-"], help='Files to process, "-" for standard input')
    parser.add_argument("-f", "--first", action="store_true", help="print only the first occurrence")
    parser.add_argument("-r", "--reverse", action="store_true", help="print only the last occurrence")
    parser.add_argument("-c", "--count", action="store_true", help="print the number of occurrences")
    parser.add_argument(
        "-x",
        "--hex",
        action="store_true",
        help="read NEEDLE as hexadecimal digits, like '0d0a' for CRLF",
    )
    parser.add_argument("--version", action="version", version=faststring.__version__)
    return parser.parse_args()


def parse_needle(needle: str, is_hex: bool) -> FastString:
    if is_hex:
        return FastString(bytes.fromhex(needle))
    # Recover the exact command-line bytes, even if they are not valid UTF-8
    return FastString(os.fsencode(needle))


def find_offsets(contents: FastString, needle: FastString, first: bool, reverse: bool) -> List[int]:
    if first or reverse:
        match = contents.find_substring(needle, reverse=reverse)
        return [] if match is None else [match]
    return contents.positions(needle)


def main():
    args = parse_arguments()
    try:
        needle = parse_needle(args.needle, args.hex)
    except ValueError:
        print(f"Invalid hexadecimal needle: {args.needle}")
        sys.exit(2)

    show_names = len(args.files) > 1
    for file_path in args.files:
        try:
            contents = read_contents(file_path)
        except FileNotFoundError:
            print(f"No such file: {file_path}")
            continue

        prefix = f"{file_path}:" if show_names else ""
        offsets = find_offsets(contents, needle, args.first, args.reverse)
        if args.count:
            print(f"{prefix}{len(offsets)}")
            continue
        for offset in offsets:
            print(f"{prefix}{offset}")


if __name__ == "__main__":
    main()
