[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crawlkit"
version = "0.1.0"
description = "A small depth-first web crawler with a chained hash table, linked list and string helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["crawler", "wget", "hashtable", "linked-list", "strings", "word-count"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Indexing/Search",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
crawlkit = "crawlkit.crawler:main"
crawlkit-wordcount = "crawlkit.wordcount:main"

[tool.hatch.build.targets.wheel]
packages = ["crawlkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
