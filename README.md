# crawlkit

A small depth-first web crawler, together with the linked list, hash table and
string helpers it is built from, and a tiny word-counting command.

## Installation

```
pip install .
```

Crawling fetches every page by running `wget`, which must be installed and on
your `PATH`.

## Crawling

```
crawlkit https://example.com pages
```

The first argument must start with `http://` or `https://`; anything else
prints `Wrong Url` and the command exits with status 1. The second argument
names a directory, relative to the current directory. It is created if it is
missing (printing `Folder created successfully.`).

For each page the crawler:

1. prints and runs `wget -O <directory>/<name> <url>`, where `<name>` is the
   current time in epoch seconds with its digits reversed, followed by `.html`;
2. records the URL and the saved file in its hash table and prints the whole
   table;
3. reads the saved file and follows the links in it, one level deeper.

Links are every run of text starting with `https://` or `/`, ending at
whitespace or at `"`, `'`, `<` or `>`. Links starting with `/` are joined onto
the start URL (a trailing `/` on the start URL is dropped first). Plain
`http://` links inside pages are not followed. The command line crawler stops
following links at depth 100.

From Python:

```python
from crawlkit.crawler import Crawler

crawler = Crawler("https://example.com", "pages", 3)
crawler.crawl("https://example.com", 0)
```

`Crawler.build_command(url)` returns the `wget` argument list without running
it, `Crawler.unique_name()` returns the next file name, and
`Crawler.extract_urls(text, depth, root_url)` crawls the links found in a
piece of text.

### What the crawler does not do

It keeps no set of visited pages, so a page linked from several places is
downloaded again each time, and it does not restrict itself to the start
site. It does not fetch anything itself: without `wget` no pages are saved,
and pages downloaded within the same second share a file name. It does not
read `robots.txt`, filter out images or scripts, or throttle its requests.

## Counting words in a file

```
crawlkit-wordcount [path]
```

This writes the sample text `rrr pal pardhan` to `path` (default
`input.txt`), reads it back and prints `Open successfully` followed by
`Words in this file: 3`. If the file cannot be written or read it prints
`Failed to open file` and exits with status 1.

From Python, `crawlkit.wordcount.count_file_words(path)` returns the number of
whitespace-separated words in any file.

## Building blocks

- `crawlkit.linkedlist.LinkedList` is a singly linked list of `Node` objects,
  each holding a `value`, a `key` and `next`. It supports `insert_at_front`,
  `insert_at_end`, `delete_first`, `delete_at(index)` (an index past the end
  is ignored; a negative index or an empty list raises `IndexError`),
  `is_empty`, `len()`, iteration over its nodes, and `show(key)`, which prints
  the nodes with that key.
- `crawlkit.hashtable.HashTable(size)` is a chained hash table of
  `LinkedList` buckets. Integer keys hash by value, string keys by the sum of
  their character codes; other keys raise `TypeError`. Once more than 70% of
  its buckets are in use, the next `insert` doubles the table first.
  `traverse(key)` prints the entries under a key and `print_all()` prints
  every occupied bucket.
- `crawlkit.strings` holds the text helpers: `starts_with`, `str_cmp`,
  `lower`, `upper` (ASCII letters only), `find_first_index`, `reverse`,
  `is_html_link` (false for `.pdf`, `.jpg`, `.png`, `.css` and `.js`),
  `count_words` (space-separated words) and
  `find_substring(needle, haystack, ignore_case)`, which returns the position
  or -1.

```python
from crawlkit.hashtable import HashTable

table = HashTable(4)
table.insert("Apple", "A")
table.insert("Banana", "B")
table.traverse("A")   # prints: key: A  value: Apple
```

## Tests

```
pip install .[test]
pytest
```