from aoc2024.day03 import compute_sum, enabled_instructions, part1, part2

EXAMPLE1 = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))\n"
EXAMPLE2 = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))\n"


def test_compute_sum():
    assert compute_sum("mul(100,002)") == 200
    assert compute_sum("mul (100,002)lkdsjflshalasjf") == 0
    assert compute_sum("mul(mul(10,7)40,200)mul(10,3)") == 100


def test_part1(tmp_path):
    path = tmp_path / "input03.txt.test1"
    path.write_text(EXAMPLE1)
    assert part1(str(path)) == 161


def test_part2(tmp_path):
    path = tmp_path / "input03.txt.test2"
    path.write_text(EXAMPLE2)
    assert part2(str(path)) == 48


def test_disabled_until_end():
    assert enabled_instructions("mul(1,2)don't()mul(3,4)") == "mul(1,2)"


def test_disabled_spans_joined_lines(tmp_path):
    path = tmp_path / "lines.txt"
    path.write_text("mul(2,3)don't()\nmul(4,5)do()mul(1,1)\n")
    assert part2(str(path)) == compute_sum("mul(2,3)mul(1,1)")