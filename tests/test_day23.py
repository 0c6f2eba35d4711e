import pytest

from aoc2024.day23 import ComputerGraph, part1, part2

EXAMPLE = """kh-tc
qp-kh
de-cg
ka-co
yn-aq
qp-ub
cg-tb
vc-aq
tb-ka
wh-tc
yn-cg
kh-ub
ta-co
de-co
tc-td
tb-wq
wh-td
ta-ka
td-qp
aq-cg
wq-ub
ub-vc
de-ta
wq-aq
wq-vc
wh-yn
ka-de
kh-ta
co-tc
wh-qp
tb-vc
td-yn
"""


@pytest.fixture
def example_path(tmp_path):
    path = tmp_path / "input23.txt"
    path.write_text(EXAMPLE)
    return str(path)


def test_part1(example_path):
    assert part1(example_path) == 7


def test_part2(example_path):
    assert part2(example_path) == "co,de,ka,ta"


def test_threeway_games():
    graph = ComputerGraph.from_lines(EXAMPLE.splitlines())
    assert graph.find_threeway_games("t") == {
        ("co", "de", "ta"),
        ("co", "ka", "ta"),
        ("de", "ka", "ta"),
        ("qp", "td", "wh"),
        ("tb", "vc", "wq"),
        ("tc", "td", "wh"),
        ("td", "wh", "yn"),
    }


def test_graph_is_symmetric():
    graph = ComputerGraph.from_lines(["ab-cd"])
    assert graph.data == {"ab": frozenset({"cd"}), "cd": frozenset({"ab"})}


def test_missing_dash_raises():
    with pytest.raises(ValueError):
        ComputerGraph.from_lines(["abcd"])


def test_short_name_raises():
    with pytest.raises(ValueError):
        ComputerGraph.from_lines(["a-cd"])


def test_empty_graph_has_no_clique():
    with pytest.raises(ValueError):
        ComputerGraph.from_lines([]).largest_clique()