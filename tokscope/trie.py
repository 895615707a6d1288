"""A prefix tree over a fixed 52-character alphabet starting at 'a'."""

from __future__ import annotations

from collections.abc import Iterable

ALPHABET_SIZE = 52
_BASE = ord("a")


class WordNotFoundError(LookupError):
    """Raised when a letter sequence leaves the tree."""


def _slot(char: str) -> str:
    offset = ord(char) - _BASE
    if not 0 <= offset < ALPHABET_SIZE:
        raise ValueError(f"character {char!r} is outside the trie's alphabet")
    return char


class _Node:
    __slots__ = ("children", "word_end")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.word_end = False


class Trie:
    """A set of words stored as shared prefixes."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _Node()
        for word in words:
            self.insert(word)

    def _walk(self, word: str) -> _Node | None:
        node = self._root
        for char in word:
            node = node.children.get(_slot(char))
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        """Add ``word`` to the tree."""
        node = self._root
        for char in word:
            node = node.children.setdefault(_slot(char), _Node())
        node.word_end = True

    def contains(self, word: str) -> bool:
        """Return whether ``word`` is a prefix of some stored word."""
        return self._walk(word) is not None

    def is_word(self, word: str) -> bool:
        """Return whether ``word`` itself was inserted."""
        node = self._walk(word)
        return node is not None and node.word_end

    def split_longest(self, letters: Iterable[str]) -> list[str]:
        """Split ``letters`` into stored words, each taken as long as possible.

        A word is cut off only where it ends and no longer word continues it.
        Trailing letters that do not complete a word are dropped. Raises
        WordNotFoundError when the letters leave the tree.
        """
        node = self._root
        results: list[str] = []
        collected: list[str] = []
        for char in letters:
            child = node.children.get(_slot(char))
            if child is None:
                raise WordNotFoundError("word not found")
            node = child
            collected.append(char)
            if node.word_end and not node.children:
                results.append("".join(collected))
                collected.clear()
                node = self._root
        return results