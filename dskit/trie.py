"""Prefix tree over lower-case ASCII words."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

__all__ = ["TrieNode", "Trie"]

ALPHABET = string.ascii_lowercase


@dataclass(eq=False)
class TrieNode:
    """One node of a trie: its children by letter and an end-of-word flag."""

    children: dict[str, "TrieNode"] = field(default_factory=dict)
    is_end_word: bool = False

    def has_children(self) -> bool:
        """Return whether any letter continues past this node."""
        return bool(self.children)


def _normalise(key: str) -> str:
    """Lower-case ``key`` and check that it uses only the letters a-z."""
    lowered = key.lower()
    for char in lowered:
        if char not in ALPHABET:
            raise ValueError(f"unsupported character {char!r} in {key!r}")
    return lowered


class Trie:
    """Trie of case-insensitive words made of the letters a-z."""

    def __init__(self, keys: Optional[Iterable[str]] = None) -> None:
        self.root = TrieNode()
        for key in keys or ():
            self.insert(key)

    def insert(self, key: str) -> None:
        """Add ``key``; an empty key is ignored."""
        if not key:
            return
        node = self.root
        for char in _normalise(key):
            node = node.children.setdefault(char, TrieNode())
        node.is_end_word = True

    def _find(self, key: str) -> Optional[TrieNode]:
        node: Optional[TrieNode] = self.root
        for char in key:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def search(self, key: str) -> bool:
        """Return whether ``key`` was stored as a whole word."""
        if not key:
            return False
        node = self._find(_normalise(key))
        return node is not None and node.is_end_word

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.search(key)

    def delete(self, key: str) -> None:
        """Remove ``key`` and prune nodes no other word needs.

        Raises ValueError for an empty key and KeyError if ``key`` is not stored.
        """
        if not key:
            raise ValueError("cannot delete an empty key")
        word = _normalise(key)
        if not self.search(word):
            raise KeyError(key)

        path: list[tuple[TrieNode, str]] = []
        node = self.root
        for char in word:
            path.append((node, char))
            node = node.children[char]

        node.is_end_word = False
        if node.has_children():
            return
        for parent, char in reversed(path):
            del parent.children[char]
            if parent.is_end_word or parent.has_children() or parent is self.root:
                break

    def word_count(self) -> int:
        """Return the number of stored words."""
        return sum(1 for _ in self._walk(self.root, ""))

    def words(self) -> list[str]:
        """Return all stored words in alphabetical order."""
        return list(self._walk(self.root, ""))

    @classmethod
    def _walk(cls, node: TrieNode, prefix: str) -> Iterator[str]:
        if node.is_end_word:
            yield prefix
        for char in sorted(node.children):
            yield from cls._walk(node.children[char], prefix + char)

    def can_form(self, word: str) -> bool:
        """Return whether ``word`` splits into a stored word followed by another."""
        text = _normalise(word)
        node = self.root
        for position, char in enumerate(text):
            child = node.children.get(char)
            if child is None:
                return False
            if child.is_end_word and self.search(text[position + 1:]):
                return True
            node = child
        return False