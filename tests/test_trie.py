import pytest

from dsalgo.trie import Trie

WORDS = [
    "hello", "hello", "helloo", "hel", "hel", "hel",
    "china", "ch", "ch", "heword", "hellw",
]


@pytest.fixture
def trie():
    t = Trie()
    for w in WORDS:
        t.add(w)
    return t


@pytest.mark.parametrize(
    "word, expected",
    [("hello", 2), ("helloo", 1), ("hel", 3), ("china", 1), ("ch", 2)],
)
def test_query_counts(trie, word, expected):
    assert trie.query(word) == expected


def test_query_missing(trie):
    assert trie.query("he") == 0
    assert trie.query("zebra") == 0


def test_words_in_preorder(trie):
    assert trie.words() == sorted(set(WORDS))


def test_prefix_search(trie):
    assert trie.with_prefix("he") == ["hel", "hello", "helloo", "hellw", "heword"]
    assert trie.with_prefix("hel") == ["hel", "hello", "helloo", "hellw"]
    assert trie.with_prefix("x") == []
    assert trie.with_prefix("") == trie.words()


def test_remove_leaf_word(trie):
    trie.remove("hellw")
    assert trie.query("hellw") == 0
    assert trie.words() == sorted(set(WORDS) - {"hellw"})
    assert trie.query("hello") == 2


def test_remove_word_with_descendants(trie):
    trie.remove("hel")
    assert trie.query("hel") == 0
    assert trie.query("hello") == 2
    assert "hel" not in trie.words()


def test_remove_keeps_shared_prefix_word(trie):
    trie.remove("china")
    assert trie.query("china") == 0
    assert trie.query("ch") == 2
    assert trie.with_prefix("c") == ["ch"]


def test_remove_missing_is_noop(trie):
    before = trie.words()
    trie.remove("hexagon")
    trie.remove("he")
    assert trie.words() == before
    assert trie.query("hello") == 2


def test_remove_only_word_empties_trie():
    t = Trie()
    t.add("abc")
    t.remove("abc")
    assert t.words() == []
    assert t.with_prefix("a") == []