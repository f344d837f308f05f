"""Shortest chains of co-starring actors between two actors."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import NamedTuple

DEFAULT_MOVIES = "cleaned_movielist.txt"
NOT_PRESENT = "Not present"


class Step(NamedTuple):
    """One hop of a path: the shared movie and the actor reached."""

    movie: str
    actor: str


def _tokens(line: str) -> list[str]:
    return [token for token in line.replace("\n", " ").split(" ") if token]


class ActorGraph:
    """Undirected graph of actors joined by the movies they share."""

    def __init__(self) -> None:
        self._adjacency: dict[str, list[Step]] = {}

    def add_edge(self, actor: str, movie: str, other_actor: str) -> None:
        """Join two actors through ``movie`` in both directions."""
        self._adjacency.setdefault(actor, []).append(Step(movie, other_actor))
        self._adjacency.setdefault(other_actor, []).append(Step(movie, actor))

    def add_movie(self, movie: str, actors: Iterable[str]) -> None:
        """Join every pair of actors in the cast of ``movie``."""
        cast = list(actors)
        for index, actor in enumerate(cast):
            for other in cast[:index]:
                self.add_edge(actor, movie, other)

    def __contains__(self, actor: object) -> bool:
        return actor in self._adjacency

    def shortest_path(self, start: str, end: str) -> list[Step] | None:
        """Return the steps of a shortest path, or None if unreachable.

        Raises KeyError if ``start`` is not in the graph.
        """
        if start not in self._adjacency:
            raise KeyError(start)
        queue = deque([start])
        visited = {start}
        predecessor: dict[str, tuple[str, Step]] = {}
        while queue:
            current = queue.popleft()
            if current == end:
                path: list[Step] = []
                node = end
                while node != start:
                    node, step = predecessor[node][0], predecessor[node][1]
                    path.append(step)
                path.reverse()
                return path
            for step in self._adjacency[current]:
                if step.actor not in visited:
                    visited.add(step.actor)
                    predecessor[step.actor] = (current, step)
                    queue.append(step.actor)
        return None

    def describe_path(self, start: str, end: str) -> str:
        """Render a shortest path as text, or ``"Not present"``."""
        if start == end:
            return start
        if start not in self or end not in self:
            return NOT_PRESENT
        path = self.shortest_path(start, end)
        if path is None:
            return NOT_PRESENT
        return start + "".join(f" -({step.movie})- {step.actor}" for step in path)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> ActorGraph:
        """Build a graph from lines of ``"<movie> <actor> <actor> ..."``."""
        graph = cls()
        for line in lines:
            tokens = _tokens(line)
            if tokens:
                graph.add_movie(tokens[0], tokens[1:])
        return graph

    @classmethod
    def from_file(cls, path: str | Path) -> ActorGraph:
        """Build a graph from a movie list file."""
        with open(path, encoding="utf-8") as handle:
            return cls.from_lines(handle)


def answer_queries(graph: ActorGraph, lines: Iterable[str]) -> Iterator[str]:
    """Answer ``"<actor> <actor>"`` queries with a rendered path."""
    for line in lines:
        tokens = _tokens(line)
        if not tokens:
            continue
        if len(tokens) < 2:
            raise ValueError(f"malformed query: {line!r}")
        yield graph.describe_path(tokens[0], tokens[1])


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Find the shortest chain of co-stars between two actors."
    )
    parser.add_argument("input", help="file of '<actor> <actor>' queries")
    parser.add_argument("output", help="file to write the paths to")
    parser.add_argument(
        "--movies", default=DEFAULT_MOVIES, help="movie list, one movie per line"
    )
    args = parser.parse_args(argv)

    graph = ActorGraph.from_file(args.movies)
    with open(args.input, encoding="utf-8") as queries, open(
        args.output, "w", encoding="utf-8"
    ) as out:
        for answer in answer_queries(graph, queries):
            out.write(answer + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())