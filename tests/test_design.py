import pytest

from blind75.design import MedianFinder, Trie, WordDictionary


def test_trie_sequence():
    trie = Trie()
    trie.insert("apple")
    assert trie.search("apple") is True
    assert trie.search("app") is False
    assert trie.starts_with("app") is True
    trie.insert("app")
    assert trie.search("app") is True


def test_trie_missing_prefix():
    trie = Trie()
    trie.insert("apple")
    assert trie.starts_with("b") is False
    assert trie.search("apples") is False


@pytest.fixture
def dictionary():
    words = WordDictionary()
    for word in ("bad", "dad", "mad"):
        words.add_word(word)
    return words


@pytest.mark.parametrize(
    "pattern, expected",
    [("pad", False), ("bad", True), (".ad", True), ("b..", True), ("..x", False)],
)
def test_word_dictionary_search(dictionary, pattern, expected):
    assert dictionary.search(pattern) is expected


def test_word_dictionary_partial_word_not_found(dictionary):
    assert dictionary.search("ba") is False


def test_word_dictionary_empty_search_on_empty_store():
    assert WordDictionary().search("") is True


def test_median_finder():
    finder = MedianFinder()
    finder.add_num(1)
    finder.add_num(2)
    assert finder.find_median() == 1.5
    finder.add_num(3)
    assert finder.find_median() == 2.0


def test_median_finder_unsorted_stream():
    finder = MedianFinder()
    for num in (5, 15, 1, 3):
        finder.add_num(num)
    assert finder.find_median() == 4.0


def test_median_finder_empty_raises():
    with pytest.raises(ValueError):
        MedianFinder().find_median()