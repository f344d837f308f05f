"""Count the distinct words falling in a lexicographic range."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator


class _Node:
    __slots__ = ("key", "left", "right", "height", "size")

    def __init__(self, key: str) -> None:
        self.key = key
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.height = 1
        self.size = 1


def _height(node: _Node | None) -> int:
    return node.height if node else 0


def _size(node: _Node | None) -> int:
    return node.size if node else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))
    node.size = 1 + _size(node.left) + _size(node.right)


def _balance(node: _Node) -> int:
    return _height(node.left) - _height(node.right)


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _insert(node: _Node | None, key: str) -> _Node:
    if node is None:
        return _Node(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    else:
        node.right = _insert(node.right, key)
    _update(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class WordTree:
    """Balanced search tree of distinct words with subtree sizes."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def insert(self, word: str) -> bool:
        """Add ``word``; return False if it was already present."""
        if word in self:
            return False
        self._root = _insert(self._root, word)
        return True

    def __contains__(self, word: object) -> bool:
        node = self._root
        while node is not None:
            if word == node.key:
                return True
            node = node.left if word < node.key else node.right
        return False

    def __len__(self) -> int:
        return _size(self._root)

    def __iter__(self) -> Iterator[str]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def height(self) -> int:
        """Return the height of the tree; an empty tree has height 0."""
        return _height(self._root)

    def _count_below(self, key: str, inclusive: bool) -> int:
        total = 0
        node = self._root
        while node is not None:
            if node.key < key or (inclusive and node.key == key):
                total += _size(node.left) + 1
                node = node.right
            else:
                node = node.left
        return total

    def count_range(self, begin: str, end: str) -> int:
        """Count the words ``w`` with ``begin <= w <= end``."""
        if begin > end:
            return 0
        return self._count_below(end, True) - self._count_below(begin, False)


def run_commands(lines: Iterable[str]) -> Iterator[int]:
    """Run ``i <word>`` and ``r <begin> <end>`` commands, yielding counts."""
    tree = WordTree()
    for line in lines:
        fields = line.split()
        if not fields:
            continue
        command = fields[0]
        if command == "i":
            if len(fields) > 1:
                tree.insert(fields[1])
        elif command == "r":
            begin = fields[1] if len(fields) > 1 else ""
            end = fields[2] if len(fields) > 2 else ""
            yield tree.count_range(begin, end)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Insert words and count how many fall within ranges."
    )
    parser.add_argument("input", help="file of 'i <word>' and 'r <a> <b>' commands")
    parser.add_argument("output", help="file to write the counts to")
    args = parser.parse_args(argv)

    with open(args.input, encoding="utf-8") as commands, open(
        args.output, "w", encoding="utf-8"
    ) as out:
        for count in run_commands(commands):
            out.write(f"{count}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())