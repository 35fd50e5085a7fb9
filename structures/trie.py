"""
Prefix tree (trie) over strings.

The tree only grows: words are inserted, never removed. Queries walk the
character path from the root and never allocate nodes.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from typing_extensions import Self


@dataclass
class TrieNode:
    """One character step. At most one child per distinct character."""

    children: dict[str, "TrieNode"] = field(default_factory=dict)
    terminal: bool = False


class PrefixTree:
    """
    Incremental string set answering exact and prefix membership.

    Example:
        >>> trie = PrefixTree.from_words(["car", "cart"])
        >>> trie.search("car"), trie.search("ca")
        (True, False)
        >>> trie.starts_with("ca")
        True
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._size = 0

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Self:
        trie = cls()
        for word in words:
            trie.insert(word)
        return trie

    def __len__(self) -> int:
        """Number of distinct words stored."""
        return self._size

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def _walk(self, path: str) -> TrieNode | None:
        """Returns the node spelled by path, or None if it is missing."""
        node = self._root
        for char in path:
            child = node.children.get(char)
            if child is None:
                return None
            node = child
        return node

    def insert(self, word: str) -> None:
        """Adds word, creating missing nodes. Re-inserting is a no-op."""
        node = self._root
        for char in word:
            child = node.children.get(char)
            if child is None:
                child = TrieNode()
                node.children[char] = child
            node = child
        if not node.terminal:
            node.terminal = True
            self._size += 1

    def search(self, word: str) -> bool:
        """True iff word was inserted verbatim."""
        node = self._walk(word)
        return node is not None and node.terminal

    def starts_with(self, prefix: str) -> bool:
        """True iff some inserted word begins with prefix."""
        return self._walk(prefix) is not None

    def words_with_prefix(self, prefix: str) -> tuple[str, ...]:
        """Returns every stored word beginning with prefix, sorted."""
        start = self._walk(prefix)
        if start is None:
            return ()

        words: list[str] = []
        stack = [(start, prefix)]
        while stack:
            node, spelled = stack.pop()
            if node.terminal:
                words.append(spelled)
            for char, child in node.children.items():
                stack.append((child, spelled + char))
        return tuple(sorted(words))
