"""LAN Party: triangles and the largest clique in a network."""

from __future__ import annotations

import argparse
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import combinations

from .file_io import lines_from_file


def _computer_name(text: str) -> str:
    if len(text) < 2:
        raise ValueError(f"Computers should have 2-character names: {text!r}")
    return text[:2]


@dataclass(frozen=True)
class ComputerGraph:
    """Undirected connections between computers."""

    data: dict[str, frozenset[str]]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> ComputerGraph:
        graph: defaultdict[str, set[str]] = defaultdict(set)
        for line in lines:
            first, separator, second = line.partition("-")
            if not separator:
                raise ValueError(
                    f"Computer names should be split by a single dash: {line!r}"
                )
            c1, c2 = _computer_name(first), _computer_name(second)
            graph[c1].add(c2)
            graph[c2].add(c1)
        return cls({name: frozenset(links) for name, links in graph.items()})

    def find_threeway_games(self, initial: str) -> set[tuple[str, str, str]]:
        """Sorted triangles containing a computer whose name starts with initial."""
        threeways: set[tuple[str, str, str]] = set()
        for c1, links in self.data.items():
            if not c1.startswith(initial):
                continue
            for c2, c3 in combinations(links, 2):
                if c3 in self.data[c2]:
                    a, b, c = sorted((c1, c2, c3))
                    threeways.add((a, b, c))
        return threeways

    def _pruned_bron_kerbosch(
        self, clique: set[str], candidates: set[str], largest_found: int
    ) -> set[str] | None:
        if len(clique) + len(candidates) <= largest_found:
            return None
        if not candidates:
            return clique

        next_clique = set(clique)
        best: set[str] | None = None
        future_candidates = set(candidates)
        for candidate in list(candidates):
            largest = len(best) if best is not None else 0
            next_clique.add(candidate)
            found = self._pruned_bron_kerbosch(
                set(next_clique), future_candidates & self.data[candidate], largest
            )
            if found is not None and len(found) > largest:
                best = found
            next_clique.discard(candidate)
            future_candidates.discard(candidate)
        return best

    def largest_clique(self) -> set[str]:
        """A largest set of computers all connected to each other."""
        clique = self._pruned_bron_kerbosch(set(), set(self.data), 0)
        if clique is None:
            raise ValueError("The graph has no computers.")
        return clique


def part1(path: str) -> int:
    return len(ComputerGraph.from_lines(lines_from_file(path)).find_threeway_games("t"))


def part2(path: str) -> str:
    graph = ComputerGraph.from_lines(lines_from_file(path))
    return ",".join(sorted(graph.largest_clique()))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 23.")
    parser.add_argument("path", nargs="?", default="input/input23.txt")
    args = parser.parse_args(argv)
    print("Answer to part 1:")
    print(part1(args.path))
    print("Answer to part 2:")
    print(part2(args.path))