"""Depth-first web crawler that downloads pages with wget."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
import time
from typing import Iterator, Optional, Sequence

from crawlkit.hashtable import HashTable
from crawlkit.strings import reverse, starts_with

_URL_TERMINATORS = "\"'<>"
_DEFAULT_MAX_DEPTH = 100


def _scan_urls(text: str) -> Iterator[str]:
    """Yield every absolute ``https://`` link and every ``/``-rooted path."""
    position = 0
    length = len(text)
    while position < length:
        if text.startswith("https://", position) or text.startswith("/", position):
            end = position
            while end < length and not (
                text[end].isspace() or text[end] in _URL_TERMINATORS
            ):
                end += 1
            yield text[position:end]
            position = end
        else:
            position += 1


class Crawler:
    """Downloads a page, records it and follows the links found in it."""

    def __init__(self, url: str, path: str, max_depth: int) -> None:
        self.url = url
        self.path = os.path.join(os.getcwd(), path)
        self.file = ""
        self.max_depth = max_depth
        self.table = HashTable(2)

    def crawl(self, url: str, depth: int) -> None:
        """Download ``url``, record where it was saved and follow its links."""
        command = self.build_command(url)
        file_name = command[2]
        try:
            subprocess.run(command, check=False)
        except OSError as exc:
            print(f"could not run {command[0]}: {exc}", file=sys.stderr)
        self.table.insert(file_name, url)
        self.show()
        self.read(file_name, depth, self.url)

    def build_command(self, url: str) -> list[str]:
        """The wget command line that saves ``url`` under a fresh file name."""
        name = self.unique_name()
        self.file = name
        command = ["wget", "-O", os.path.join(self.path, name), url]
        print(" ".join(command))
        return command

    def unique_name(self) -> str:
        """A file name made of the current epoch seconds, digits reversed."""
        return reverse(str(int(time.time()))) + ".html"

    def read(self, file_name: str, depth: int, root_url: str) -> None:
        """Read a downloaded page and crawl the links it holds."""
        try:
            with open(file_name, encoding="utf-8", errors="replace") as handle:
                text = handle.read()
        except OSError:
            print(f"could not open file: {file_name}")
            return
        self.extract_urls(text, depth, root_url)

    def extract_urls(self, text: str, depth: int, root_url: str) -> None:
        """Crawl every link in ``text`` one level deeper.

        Paths starting with ``/`` are joined to ``root_url``.  Nothing is
        followed once ``depth`` has reached the crawler's maximum depth.
        """
        if depth >= self.max_depth:
            return
        for link in _scan_urls(text):
            if starts_with(link, "/"):
                base = root_url[:-1] if root_url.endswith("/") else root_url
                self.crawl(base + link, depth + 1)
            else:
                self.crawl(link, depth + 1)

    def show(self) -> None:
        """Print every recorded URL and the file it was saved to."""
        print("\n\nfree\n")
        self.table.print_all()
        print("\n\nfree\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="crawlkit", description="Crawl a site starting from a URL."
    )
    parser.add_argument("url", help="start URL (http:// or https://)")
    parser.add_argument("directory", help="directory for downloaded pages")
    args = parser.parse_args(argv)

    if not (starts_with(args.url, "http://") or starts_with(args.url, "https://")):
        print("Wrong Url")
        return 1
    if not os.path.exists(args.directory):
        try:
            os.mkdir(args.directory)
        except OSError:
            pass
        else:
            print("Folder created successfully.")
    crawler = Crawler(args.url, args.directory, _DEFAULT_MAX_DEPTH)
    crawler.crawl(args.url, 0)
    return 0


if __name__ == "__main__":
    sys.exit(main())