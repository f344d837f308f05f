"""Rank the words of a corpus by frequency, grouped by word length."""

from __future__ import annotations

import argparse
import re
from collections import Counter, defaultdict
from collections.abc import Iterable, Iterator
from pathlib import Path

DEFAULT_CORPUS = "shakespeare-cleaned5.txt"
MISSING = "-"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Parse a leading integer the lenient way; anything else is zero."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class WordRankTable:
    """Word occurrence counts, ranked within each word length.

    Rank 0 is the most frequent word of a given length; ties are broken
    by ordinary string order, the smaller word ranking first.
    """

    def __init__(self) -> None:
        self._counts: defaultdict[int, Counter[str]] = defaultdict(Counter)
        self._ranked: dict[int, list[str]] | None = None

    def add(self, word: str) -> None:
        """Record one occurrence of ``word``."""
        self._counts[len(word)][word] += 1
        self._ranked = None

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> WordRankTable:
        """Build a table from lines holding one word each."""
        table = cls()
        for line in lines:
            table.add(line.split("\n", 1)[0])
        return table

    @classmethod
    def from_file(cls, path: str | Path) -> WordRankTable:
        """Build a table from a file holding one word per line."""
        with open(path, encoding="utf-8") as handle:
            return cls.from_lines(handle)

    def _ranking(self) -> dict[int, list[str]]:
        if self._ranked is None:
            self._ranked = {
                length: sorted(counts, key=lambda word, c=counts: (-c[word], word))
                for length, counts in self._counts.items()
            }
        return self._ranked

    def rank(self, word: str) -> int:
        """Return the rank of ``word`` among words of its length."""
        ranked = self._ranking().get(len(word), [])
        try:
            return ranked.index(word)
        except ValueError:
            raise KeyError(word) from None

    def lookup(self, length: int, rank: int) -> str | None:
        """Return the word of ``length`` holding ``rank``, or None."""
        ranked = self._ranking().get(length, [])
        if 0 <= rank < len(ranked):
            return ranked[rank]
        return None


def answer_queries(table: WordRankTable, lines: Iterable[str]) -> Iterator[str]:
    """Answer ``"<length> <rank>"`` queries with a word or ``"-"``."""
    for line in lines:
        fields = line.split()
        if not fields:
            continue
        if len(fields) < 2:
            raise ValueError(f"malformed query: {line!r}")
        length = _atoi(fields[0])
        rank = _atoi(" ".join(fields[1:]))
        word = table.lookup(length, rank)
        yield MISSING if word is None else word


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Find the word of a given length at a given frequency rank."
    )
    parser.add_argument("input", help="file of '<length> <rank>' queries")
    parser.add_argument("output", help="file to write the answers to")
    parser.add_argument(
        "--corpus", default=DEFAULT_CORPUS, help="word list, one word per line"
    )
    args = parser.parse_args(argv)

    table = WordRankTable.from_file(args.corpus)
    with open(args.input, encoding="utf-8") as queries, open(
        args.output, "w", encoding="utf-8"
    ) as out:
        for answer in answer_queries(table, queries):
            out.write(answer + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())