"""Print Queue: ordering rules for safety manual updates."""

from __future__ import annotations

import argparse
from collections import defaultdict
from collections.abc import Iterable, Sequence

from .file_io import lines_from_file

RuleSet = dict[int, set[int]]
Update = list[int]


def parse_input(lines: Iterable[str]) -> tuple[RuleSet, list[Update]]:
    """Split the input into page ordering rules and updates.

    Rules come first as ``a|b`` lines; after the first blank line every
    non-blank line is a comma-separated update.
    """
    rules: defaultdict[int, set[int]] = defaultdict(set)
    updates: list[Update] = []
    reading_rules = True
    for row in lines:
        if not row:
            reading_rules = False
            continue
        if reading_rules:
            before, after = (int(number) for number in row.split("|"))
            rules[before].add(after)
        else:
            updates.append([int(number) for number in row.split(",")])
    return dict(rules), updates


def middle_page(update: Sequence[int]) -> int:
    return update[len(update) // 2]


def is_valid(update: Sequence[int], rules: RuleSet) -> bool:
    """Whether no page appears after a page that must follow it."""
    if len(update) < 3:
        return True
    previous_pages: set[int] = set()
    for page in update:
        if not previous_pages.isdisjoint(rules.get(page, ())):
            return False
        previous_pages.add(page)
    return True


def fix_update(update: Sequence[int], rules: RuleSet) -> Update:
    """Return the update with its pages swapped into an order obeying the rules."""
    fixed = list(update)
    needs_sorting = True
    while needs_sorting:
        needs_sorting = False
        for left in range(len(fixed) - 1):
            for right in range(left, len(fixed)):
                if fixed[left] in rules.get(fixed[right], ()):
                    fixed[left], fixed[right] = fixed[right], fixed[left]
                    needs_sorting = True
    return fixed


def part1(path: str) -> int:
    rules, updates = parse_input(lines_from_file(path))
    return sum(middle_page(update) for update in updates if is_valid(update, rules))


def part2(path: str) -> int:
    rules, updates = parse_input(lines_from_file(path))
    return sum(
        middle_page(fix_update(update, rules))
        for update in updates
        if not is_valid(update, rules)
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 5.")
    parser.add_argument("path", nargs="?", default="input/input05.txt")
    args = parser.parse_args(argv)
    print("Answer to part 1:")
    print(part1(args.path))
    print("Answer to part 2:")
    print(part2(args.path))