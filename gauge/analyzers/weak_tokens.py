"""
Weak Token Index
=================

Prefix tree (trie) holding the dictionary of known-weak substrings such
as ``"1234"`` or ``"qwerty"``.

Each node maps a single character to its child node and carries a
terminal marker. A parent exclusively owns its children; nodes hold no
back-references since only insertion and exact lookup are needed.

The index is built once from the dictionary and only read afterwards,
so it may be shared by any number of concurrent analyses.

References:
    - Fredkin, E. (1960). Trie Memory. Communications of the ACM, 3(9).
"""

from __future__ import annotations

from typing import Iterable, Iterator


class _TrieNode:
    """A single trie node: character -> child, plus a terminal marker."""

    __slots__ = ("children", "terminal")

    def __init__(self) -> None:
        self.children: dict[str, _TrieNode] = {}
        self.terminal = False


class WeakTokenIndex:
    """Exact-membership index over the weak-token dictionary.

    Usage::

        index = WeakTokenIndex(["1234", "password"])
        index.contains("1234")     # True
        index.contains("12345")    # False
        "pass" in index            # False (prefix only)
    """

    def __init__(self, tokens: Iterable[str] = ()) -> None:
        self._root = _TrieNode()
        self._tokens: list[str] = []
        for token in tokens:
            self.insert(token)

    def insert(self, token: str) -> None:
        """Store *token* verbatim.

        Args:
            token: A non-empty, already lower-cased weak token.

        Raises:
            ValueError: If *token* is empty.
        """
        if not token:
            raise ValueError("weak tokens must be non-empty strings")

        node = self._root
        for ch in token:
            child = node.children.get(ch)
            if child is None:
                child = _TrieNode()
                node.children[ch] = child
            node = child

        if not node.terminal:
            node.terminal = True
            self._tokens.append(token)

    def contains(self, token: str) -> bool:
        """Return ``True`` iff *token* was inserted verbatim."""
        node = self._root
        for ch in token:
            node = node.children.get(ch)
            if node is None:
                return False
        return node.terminal

    @property
    def tokens(self) -> tuple[str, ...]:
        """Stored tokens in insertion order."""
        return tuple(self._tokens)

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and self.contains(token)

    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"WeakTokenIndex({list(self._tokens)!r})"
