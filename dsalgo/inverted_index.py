"""An inverted index over the text files below a directory."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field
from operator import attrgetter

logger = logging.getLogger(__name__)


def tokenize(text: str) -> list[str]:
    """Split text into words at runs of whitespace."""
    return text.split()


@dataclass
class InvertTerm:
    """Where one word occurs in one document."""

    docid: str
    freqs: int = 0
    locations: list[int] = field(default_factory=list)


@dataclass
class InvertList:
    """The postings of one word, one term per document in insertion order."""

    terms: list[InvertTerm] = field(default_factory=list)

    def add_term(self, docid: str, location: int) -> None:
        """Record one occurrence of the word in docid at location."""
        for term in self.terms:
            if term.docid == docid:
                term.freqs += 1
                term.locations.append(location)
                return
        self.terms.append(InvertTerm(docid, 1, [location]))

    def __iter__(self) -> Iterator[InvertTerm]:
        return iter(self.terms)


class InvertIndex:
    """Maps words to the documents that contain them."""

    def __init__(self, suffix: str = "") -> None:
        self.suffix = suffix
        self.files: list[str] = []
        self._index: dict[str, InvertList] = {}

    def set_search_path(self, path: str | os.PathLike) -> None:
        """Index every file below path whose name ends with the suffix."""
        root = os.fspath(path)
        if not os.path.isdir(root):
            raise NotADirectoryError(root)
        found = []
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames.sort()
            found.extend(
                os.path.join(dirpath, name)
                for name in sorted(filenames)
                if name.endswith(self.suffix)
            )
        for file_path in found:
            try:
                self.add_file(file_path)
            except OSError as exc:
                logger.warning("cannot read %s: %s", file_path, exc)

    def add_file(self, path: str | os.PathLike) -> None:
        """Index the words of one file; locations count words from 1."""
        docid = os.fspath(path)
        with open(docid, encoding="utf-8", errors="replace") as handle:
            location = 0
            for line in handle:
                for word in tokenize(line):
                    location += 1
                    self._index.setdefault(word, InvertList()).add_term(docid, location)
        self.files.append(docid)

    def query(self, phrase: str) -> list[InvertTerm]:
        """Return the terms of the documents holding every known word of phrase.

        Words absent from the index are ignored. For several words the
        result is ordered by document and carries the first word's term.
        """
        words = tokenize(phrase)
        lists = [self._index[word] for word in words if word in self._index]
        if not lists:
            return []
        if len(words) == 1:
            return list(lists[0].terms)
        shared = list(lists[0].terms)
        for other in lists[1:]:
            shared.sort(key=attrgetter("docid"))
            theirs = {term.docid for term in other.terms}
            shared = [term for term in shared if term.docid in theirs]
        return shared


def main(argv: list[str] | None = None) -> int:
    """Index a directory, then answer queries read line by line from stdin."""
    parser = argparse.ArgumentParser(description="Search words in indexed files.")
    parser.add_argument("path", help="directory to index")
    parser.add_argument("--suffix", default=".cpp", help="file name suffix to index")
    args = parser.parse_args(argv)

    index = InvertIndex(args.suffix)
    try:
        index.set_search_path(args.path)
    except NotADirectoryError:
        print(f"not a directory: {args.path}", file=sys.stderr)
        return 1

    for line in sys.stdin:
        if not tokenize(line):
            continue
        terms = index.query(line)
        if not terms:
            print("no matching content found")
        for term in terms:
            print(f"{term.docid} freqs:{term.freqs}")
    return 0