import pytest

from aoc2024.day19 import (
    PatternTrie,
    Stripe,
    load_input,
    part1,
    part2,
    pattern_from_word,
)

EXAMPLE = """\
r, wr, b, g, bwu, rb, gb, br

brwrr
bggr
gbbr
rrbgbr
ubwu
bwurrg
brgr
bbrgwb
"""


@pytest.fixture
def example_path(tmp_path):
    path = tmp_path / "input19.txt"
    path.write_text(EXAMPLE)
    return str(path)


def trie_from_string(pattern_string):
    trie = PatternTrie()
    for word in pattern_string.split(","):
        trie.insert(pattern_from_word(word))
    return trie


def test_trie():
    trie = PatternTrie()
    empty = pattern_from_word("")
    b = pattern_from_word("b")
    w = pattern_from_word("w")
    r = pattern_from_word("r")
    bw = pattern_from_word("bw")
    wr = pattern_from_word("wr")
    br = pattern_from_word("br")
    bwr = pattern_from_word("bwr")

    assert trie.contains(empty)
    for p in [b, w, r, bw, wr, br, bwr]:
        assert not trie.contains(p)

    trie.insert(bw)
    assert trie.contains(bw)
    for p in [b, w, r, wr, br, bwr]:
        assert not trie.contains(p)

    trie.insert(bwr)
    assert trie.contains(bw)
    assert trie.contains(bwr)
    for p in [b, w, r, wr, br]:
        assert not trie.contains(p)


@pytest.mark.parametrize("word", ["gu", "bwu", "brb", "bwrr", "brbrrgubw"])
def test_can_make(word):
    trie = trie_from_string("g, u, bw, brb, rr")
    assert trie.can_make(pattern_from_word(word))


@pytest.mark.parametrize("word", ["bgu", "gurb"])
def test_cannot_make(word):
    trie = trie_from_string("g, u, bw, brb, rr")
    assert not trie.can_make(pattern_from_word(word))


def test_ways_to_make():
    trie = trie_from_string("r, wr, b, g, bwu, rb, gb, br")
    assert trie.ways_to_make(pattern_from_word("brwrr")) == 2
    assert trie.ways_to_make(pattern_from_word("gbbr")) == 4
    assert trie.ways_to_make(pattern_from_word("ubwu")) == 0


def test_pattern_from_word():
    assert pattern_from_word(" wub ") == (Stripe.WHITE, Stripe.BLUE, Stripe.BLACK)


def test_pattern_from_word_invalid():
    with pytest.raises(ValueError):
        pattern_from_word("wx")


def test_load_input(example_path):
    trie, designs = load_input(example_path)
    assert len(designs) == 8
    assert trie.contains(pattern_from_word("bwu"))
    assert not trie.contains(pattern_from_word("bw"))


def test_part1(example_path):
    assert part1(example_path) == 6


def test_part2(example_path):
    assert part2(example_path) == 16