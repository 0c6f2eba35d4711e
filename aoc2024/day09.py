"""Disk Fragmenter: compacting files on a dense disk map."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

from .file_io import lines_from_file


@dataclass(frozen=True)
class FileBlock:
    """A run of blocks belonging to one file."""

    id: int
    size: int


@dataclass(frozen=True)
class FreeBlock:
    """A run of free blocks."""

    size: int


DataBlock = FileBlock | FreeBlock


def partial_checksum(file_id: int, start: int, size: int) -> int:
    """Checksum contribution of a file run starting at the given block."""
    return file_id * sum(range(start, start + size))


def checksum(disk: Sequence[DataBlock]) -> int:
    total = 0
    seeker = 0
    for block in disk:
        if isinstance(block, FileBlock):
            total += partial_checksum(block.id, seeker, block.size)
        seeker += block.size
    return total


def compressed(disk: Sequence[DataBlock]) -> list[DataBlock]:
    """Move file blocks one at a time from the end into the leftmost free space."""
    left = 0
    right = len(disk) - 1
    result: list[DataBlock] = []
    free_left: int | None = None
    file_left: int | None = None

    while left < right:
        left_block, right_block = disk[left], disk[right]
        if isinstance(right_block, FreeBlock):
            right -= 1
            continue
        if isinstance(left_block, FileBlock):
            result.append(left_block)
            left += 1
            continue

        free_size = left_block.size if free_left is None else free_left
        file_size = right_block.size if file_left is None else file_left
        movable = min(free_size, file_size)
        result.append(FileBlock(right_block.id, movable))

        if free_size == movable:
            left += 1
            free_left = None
        else:
            free_left = free_size - movable

        if file_size == movable:
            right -= 1
            file_left = None
        else:
            file_left = file_size - movable

    if file_left is not None:
        block = disk[right]
        if isinstance(block, FileBlock):
            result.append(FileBlock(block.id, file_left))
    elif isinstance(disk[left], FileBlock):
        result.append(disk[left])

    return result


def defrag_compress(disk: Sequence[DataBlock]) -> list[DataBlock]:
    """Move whole files, highest position first, into the leftmost gap that fits."""
    blocks = list(disk)
    right = len(blocks) - 1
    while right > 0:
        block = blocks[right]
        if isinstance(block, FreeBlock):
            right -= 1
            continue
        for left in range(right):
            gap = blocks[left]
            if not isinstance(gap, FreeBlock) or gap.size < block.size:
                continue
            blocks[right] = FreeBlock(block.size)
            blocks[left] = block
            remaining = gap.size - block.size
            if remaining > 0:
                blocks.insert(left + 1, FreeBlock(remaining))
                right += 1
            break
        right -= 1
    return blocks


def blocks_from_string(text: str) -> list[DataBlock]:
    """Parse a dense disk map; characters other than digits are skipped."""
    sizes = [int(char) for char in text if char in "0123456789"]
    return [
        FileBlock(idx // 2, size) if idx % 2 == 0 else FreeBlock(size)
        for idx, size in enumerate(sizes)
    ]


def _first_line(path: str) -> str:
    line = next(lines_from_file(path), None)
    if line is None:
        raise ValueError("No input found.")
    return line


def part1(path: str) -> int:
    return checksum(compressed(blocks_from_string(_first_line(path))))


def part2(path: str) -> int:
    return checksum(defrag_compress(blocks_from_string(_first_line(path))))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 9.")
    parser.add_argument("path", nargs="?", default="input/input09.txt")
    args = parser.parse_args(argv)
    print("Answer to part 1:")
    print(part1(args.path))
    print("Answer to part 2:")
    print(part2(args.path))