"""Keypad Conundrum: chains of robots typing on keypads."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Mapping
from itertools import pairwise, permutations

from .file_io import lines_from_file

Coordinate = tuple[int, int]

_START_KEY = "A"

_NUMERIC_LAYOUT: dict[str, Coordinate] = {
    "7": (0, 3),
    "8": (1, 3),
    "9": (2, 3),
    "4": (0, 2),
    "5": (1, 2),
    "6": (2, 2),
    "1": (0, 1),
    "2": (1, 1),
    "3": (2, 1),
    "0": (1, 0),
    "A": (2, 0),
}

_DIRECTIONAL_LAYOUT: dict[str, Coordinate] = {
    "^": (1, 1),
    "A": (2, 1),
    "<": (0, 0),
    "v": (1, 0),
    ">": (2, 0),
}

_STEPS: dict[str, Coordinate] = {
    ">": (1, 0),
    "<": (-1, 0),
    "^": (0, 1),
    "v": (0, -1),
}


class Keypad:
    """A keypad, optionally operated by a robot controlled from another keypad.

    Sequences are strings of key characters; results are strings of
    directional keys typed on the outermost keypad.
    """

    def __init__(
        self,
        layout: Mapping[str, Coordinate],
        directional: bool,
        controller: Keypad | None = None,
    ) -> None:
        self._layout = dict(layout)
        self._valid = frozenset(self._layout.values())
        self._directional = directional
        self.controller = controller
        self._sequences: dict[tuple[str, str], str] = {}
        self._lengths: dict[tuple[str, str], int] = {}

    def _position(self, key: str) -> Coordinate:
        try:
            return self._layout[key]
        except KeyError:
            raise ValueError(f"Key {key!r} is not on this keypad.") from None

    def _transitions(self, sequence: str) -> Iterator[tuple[str, str]]:
        for key in sequence:
            self._position(key)
        return pairwise(_START_KEY + sequence)

    def _is_valid_path(self, start: Coordinate, moves: Iterable[str]) -> bool:
        x, y = start
        if (x, y) not in self._valid:
            return False
        for move in moves:
            dx, dy = _STEPS[move]
            x, y = x + dx, y + dy
            if (x, y) not in self._valid:
                return False
        return True

    def _key_sequences(self, start: str, end: str) -> set[str]:
        """All shortest move sequences, ending in A, that avoid the gap."""
        start_pos = self._position(start)
        end_x, end_y = self._position(end)
        dx, dy = end_x - start_pos[0], end_y - start_pos[1]
        horizontal = (">" if dx >= 0 else "<") * abs(dx)
        vertical = ("^" if dy >= 0 else "v") * abs(dy)
        return {
            "".join(moves) + "A"
            for moves in set(permutations(horizontal + vertical))
            if self._is_valid_path(start_pos, moves)
        }

    def _min_for_transition(self, transition: tuple[str, str]) -> str:
        cached = self._sequences.get(transition)
        if cached is not None:
            return cached
        if self.controller is None:
            if not self._directional:
                raise ValueError(
                    f"Cannot convert key {transition[1]!r} to a directional key."
                )
            best = transition[1]
        else:
            candidates = [
                self.controller.min_for_sequence(seq)
                for seq in self._key_sequences(*transition)
            ]
            if not candidates:
                raise ValueError("No transition should be impossible.")
            best = min(candidates, key=lambda seq: (len(seq), seq))
        self._sequences[transition] = best
        return best

    def _min_len_for_transition(self, transition: tuple[str, str]) -> int:
        cached = self._lengths.get(transition)
        if cached is not None:
            return cached
        if self.controller is None:
            length = 1
        else:
            lengths = [
                self.controller.min_len_for_sequence(seq)
                for seq in self._key_sequences(*transition)
            ]
            if not lengths:
                raise ValueError("No transition should be impossible.")
            length = min(lengths)
        self._lengths[transition] = length
        return length

    def min_for_sequence(self, sequence: str) -> str:
        """A shortest sequence of outermost key presses typing the sequence here."""
        return "".join(
            self._min_for_transition(transition)
            for transition in self._transitions(sequence)
        )

    def min_len_for_sequence(self, sequence: str) -> int:
        """Length of a shortest sequence of outermost presses typing the sequence."""
        return sum(
            self._min_len_for_transition(transition)
            for transition in self._transitions(sequence)
        )


def numeric_keypad(controller: Keypad | None = None) -> Keypad:
    """The door's numeric keypad."""
    return Keypad(_NUMERIC_LAYOUT, False, controller)


def directional_keypad(controller: Keypad | None = None) -> Keypad:
    """A directional keypad with arrows and A."""
    return Keypad(_DIRECTIONAL_LAYOUT, True, controller)


def _load_data(path: str) -> tuple[list[str], list[int]]:
    codes = list(lines_from_file(path))
    numeric_parts = [int(code[:3]) for code in codes]
    return codes, numeric_parts


def part1(path: str) -> int:
    codes, numeric_parts = _load_data(path)
    handheld = directional_keypad()
    freezing = directional_keypad(handheld)
    radiated = directional_keypad(freezing)
    depressurised = numeric_keypad(radiated)
    return sum(
        len(depressurised.min_for_sequence(code)) * number
        for code, number in zip(codes, numeric_parts)
    )


def part2(path: str) -> int:
    codes, numeric_parts = _load_data(path)
    keypad = directional_keypad()
    for _ in range(25):
        keypad = directional_keypad(keypad)
    number_pad = numeric_keypad(keypad)
    return sum(
        number_pad.min_len_for_sequence(code) * number
        for code, number in zip(codes, numeric_parts)
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 21.")
    parser.add_argument("path", nargs="?", default="input/input21.txt")
    args = parser.parse_args(argv)
    print("Answer to part 1:")
    print(part1(args.path))
    print("Answer to part 2:")
    print(part2(args.path))