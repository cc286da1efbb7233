"""Trie over a fixed alphabet with Aho-Corasick suffix links."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Union

Symbol = Union[int, str]


def _code(symbol: Symbol) -> int:
    return ord(symbol) if isinstance(symbol, str) else symbol


@dataclass
class TrieNode:
    """A trie node; ``goto`` is filled by :meth:`Trie.calc_suffix_link`."""

    children: list
    goto: list
    parent: int | None = None
    suffix_link: int | None = None


@dataclass
class Trie:
    """Trie of words over ``sigma`` symbols; node 0 is the root."""

    sigma: int
    nodes: list = field(default_factory=list, init=False)
    words: list = field(default_factory=list, init=False)
    bfs_order: list = field(default_factory=list, init=False)

    def __init__(self, sigma: int) -> None:
        if sigma <= 0:
            raise ValueError("alphabet size must be positive")
        self.sigma = sigma
        self.nodes = []
        self.words = []
        self.bfs_order = []
        self.new_node()

    def new_node(self) -> int:
        self.nodes.append(TrieNode([None] * self.sigma, [None] * self.sigma))
        return len(self.nodes) - 1

    def __getitem__(self, i: int) -> TrieNode:
        return self.nodes[i]

    def __len__(self) -> int:
        return len(self.nodes)

    def add(self, s: Iterable[Symbol], offset: Symbol = 0) -> int:
        """Insert a word, record its end node and return it."""
        p = 0
        for symbol in s:
            p = self.add_single(p, symbol, offset)
        self.words.append(p)
        return p

    def add_single(self, p: int, c: Symbol, offset: Symbol = 0) -> int:
        """Child of ``p`` along symbol ``c``, created if missing."""
        code = _code(c) - _code(offset)
        if not 0 <= code < self.sigma:
            raise ValueError(f"symbol {c!r} is outside the alphabet")
        node = self.nodes[p]
        child = node.children[code]
        if child is None:
            child = self.new_node()
            self.nodes[child].parent = p
            node.children[code] = child
        return child

    def calc_suffix_link(self) -> None:
        """Fill suffix links, goto transitions and the BFS order."""
        nodes = self.nodes
        order = [0]
        queue = deque([0])
        while queue:
            u = queue.popleft()
            node = nodes[u]
            for j, v in enumerate(node.children):
                if v is None:
                    node.goto[j] = nodes[node.suffix_link].goto[j] if u > 0 else 0
                else:
                    node.goto[j] = v
                    nodes[v].suffix_link = nodes[node.suffix_link].goto[j] if u > 0 else 0
                    order.append(v)
                    queue.append(v)
        self.bfs_order = order