import pytest

from tokscope.trie import Trie, WordNotFoundError


def test_inserted_word_is_word():
    trie = Trie()
    trie.insert("hello")
    assert trie.is_word("hello")


def test_prefix_is_contained_but_not_a_word():
    trie = Trie(["hello"])
    assert trie.contains("hel")
    assert not trie.is_word("hel")


def test_missing_word_not_contained():
    trie = Trie(["hello"])
    assert not trie.contains("help")
    assert not trie.is_word("help")


def test_empty_prefix_is_contained():
    trie = Trie(["abc"])
    assert trie.contains("")
    assert not trie.is_word("")


def test_empty_trie_contains_nothing():
    trie = Trie()
    assert not trie.contains("a")


def test_split_into_words():
    trie = Trie(["cat", "dog"])
    assert trie.split_longest("catdog") == ["cat", "dog"]


def test_split_prefers_longest_word():
    trie = Trie(["car", "cart"])
    assert trie.split_longest("cart") == ["cart"]


def test_split_drops_incomplete_tail():
    trie = Trie(["cat", "dog"])
    assert trie.split_longest("catdo") == ["cat"]


def test_split_accepts_list_of_letters():
    trie = Trie(["ab", "cd"])
    assert trie.split_longest(list("abcd")) == ["ab", "cd"]


def test_split_raises_when_letters_leave_tree():
    trie = Trie(["cat"])
    with pytest.raises(WordNotFoundError):
        trie.split_longest("cow")


def test_character_outside_alphabet_rejected():
    trie = Trie()
    with pytest.raises(ValueError):
        trie.insert("Hello")


def test_round_trip_many_words():
    words = ["apple", "app", "banana", "band", "bandana"]
    trie = Trie(words)
    assert all(trie.is_word(word) for word in words)
    assert not trie.is_word("ban")