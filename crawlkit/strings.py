"""Small string helpers used by the crawler."""

from __future__ import annotations

from typing import Optional

_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_LOWER = "abcdefghijklmnopqrstuvwxyz"
_TO_LOWER = str.maketrans(_UPPER, _LOWER)
_TO_UPPER = str.maketrans(_LOWER, _UPPER)

_NON_HTML_SUFFIXES = (".pdf", ".jpg", ".png", ".css", ".js")


def str_cmp(p: str, q: str) -> bool:
    """True when both strings are identical."""
    return p == q


def lower(text: str) -> str:
    """Convert ASCII capitals to lower case."""
    return text.translate(_TO_LOWER)


def upper(text: str) -> str:
    """Convert ASCII small letters to upper case."""
    return text.translate(_TO_UPPER)


def find_first_index(text: str, chars: str) -> int:
    """Index of the first occurrence of ``chars[0]`` in ``text``, or -1."""
    if not chars:
        return -1
    return text.find(chars[0])


def reverse(text: str) -> str:
    return text[::-1]


def is_html_link(url: str) -> bool:
    """False for links to PDFs, images, stylesheets and scripts."""
    return not url.endswith(_NON_HTML_SUFFIXES)


def count_words(text: str) -> int:
    """Number of words separated by one or more spaces."""
    return sum(1 for word in text.split(" ") if word)


def find_substring(
    needle: Optional[str], haystack: Optional[str], ignore_case: bool
) -> int:
    """Position of ``needle`` in ``haystack``, or -1.

    An empty or missing needle, or one longer than the haystack, gives -1.
    """
    if needle is None or haystack is None:
        return -1
    if ignore_case:
        needle, haystack = lower(needle), lower(haystack)
    if not needle or len(needle) > len(haystack):
        return -1
    return haystack.find(needle)


def starts_with(text: str, prefix: str) -> bool:
    return text.startswith(prefix)