#!/usr/bin/env python3

import argparse
import os

import faststring
from faststring import FastString

from cli import read_contents


def parse_arguments():
    parser = argparse.ArgumentParser(
        description="Output pieces of FILE to PREFIX0, PREFIX1, ...; default size is 1000 lines, and default PREFIX is 'x'."
    )
    parser.add_argument("file", nargs="?", default="-", help='File to process, "-" for standard input')
    parser.add_argument("prefix", nargs="?", default="x", help='Output file prefix, default is "x"')
    parser.add_argument(
        "-l",
        "--lines",
        type=int,
        default=1000,
        help="Number of lines per output file, default is 1000",
    )
    parser.add_argument(
        "-t",
        "--separator",
        default="\n",
        help="Use SEP instead of newline as the record separator; '\\0' (zero) specifies the NUL character",
    )
    parser.add_argument(
        "-n",
        "--number",
        type=int,
        default=None,
        help="Generate N output files based on size of input",
    )
    parser.add_argument("--version", action="version", version=faststring.__version__)
    return parser.parse_args()


def write_part(output_path: str, part: FastString) -> None:
    with open(output_path, "wb") as f:
        f.write(bytes(part))


def split_by_number(contents: FastString, output_prefix: str, number_of_files: int) -> None:
    total_length = len(contents)
    chunk_size = total_length // number_of_files
    for file_part in range(number_of_files):
        start = file_part * chunk_size
        end = start + chunk_size if file_part < number_of_files - 1 else total_length
        write_part(f"{output_prefix}{file_part}", contents[start:end])


def split_by_records(contents: FastString, output_prefix: str, separator: FastString, records_per_file: int) -> None:
    total_length = len(contents)
    current_position = 0
    file_part = 0

    while current_position < total_length:
        end = current_position
        for _ in range(records_per_file):
            separator_position = contents.find_substring(separator, end)
            if separator_position is None:
                end = total_length
                break
            end = separator_position + len(separator)

        write_part(f"{output_prefix}{file_part}", contents[current_position:end])
        file_part += 1
        current_position = end


def split_file(file_path, lines_per_file, output_prefix, separator, number_of_files):
    if separator == "\\0":
        separator = "\0"
    separator = FastString(os.fsencode(separator))
    if len(separator) == 0:
        print("The separator must not be empty")
        return
    if lines_per_file < 1 or (number_of_files is not None and number_of_files < 1):
        print("The number of lines and files must be positive")
        return

    try:
        contents = read_contents(file_path)
        if number_of_files is not None:
            split_by_number(contents, output_prefix, number_of_files)
        else:
            split_by_records(contents, output_prefix, separator, lines_per_file)
    except FileNotFoundError:
        print(f"No such file: {file_path}")
    except OSError as e:
        print(f"An error occurred: {e}")
        print("Usage example: fs_split [-l LINES] [file] [prefix]")


def main():
    args = parse_arguments()
    split_file(args.file, args.lines, args.prefix, args.separator, args.number)


if __name__ == "__main__":
    main()
