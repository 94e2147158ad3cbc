import pytest

from dsakit.trie import Trie

WORDS = ["hello", "he", "apple", "aple", "news"]


@pytest.fixture
def trie():
    t = Trie()
    for word in WORDS:
        t.insert(word)
    return t


@pytest.mark.parametrize("word", WORDS)
def test_inserted_words_are_found(trie, word):
    assert trie.search(word) is True


@pytest.mark.parametrize("word", ["hel", "new", "ap", "h"])
def test_prefixes_are_not_words(trie, word):
    assert trie.search(word) is False


@pytest.mark.parametrize("word", ["hellos", "banana", "newsy"])
def test_unknown_words_are_missing(trie, word):
    assert trie.search(word) is False


def test_empty_string_only_after_insert():
    t = Trie()
    assert t.search("") is False
    t.insert("")
    assert t.search("") is True


def test_prefix_becomes_word_when_inserted(trie):
    assert trie.search("hel") is False
    trie.insert("hel")
    assert trie.search("hel") is True
    assert trie.search("hello") is True


def test_empty_trie_finds_nothing():
    assert Trie().search("hello") is False