"""Count the whitespace-separated words in a text file."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

SAMPLE_TEXT = "rrr pal pardhan"


def count_file_words(path: str) -> int:
    """Number of whitespace-separated words in the file at ``path``."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        return sum(len(line.split()) for line in handle)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Write the sample text to a file, then report how many words it holds."""
    parser = argparse.ArgumentParser(
        prog="wordcount", description="Write a sample file and count its words."
    )
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    try:
        with open(args.path, "w", encoding="utf-8") as handle:
            handle.write(SAMPLE_TEXT)
        count = count_file_words(args.path)
    except OSError:
        print("Failed to open file", file=sys.stderr)
        return 1
    print("Open successfully")
    print(f"Words in this file: {count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())