"""
Connection edge extraction.

Walks a connection token chain and emits one undirected edge for every
pair of atoms written next to each other. Branch arms start from the atom
before the branch, and whatever follows the branch attaches to that same
atom again::

    1-2(3)4   ->   (0, 1), (1, 2), (1, 3)
"""

from __future__ import annotations

from typing import Iterable

from inchipy.connection.tokens import iter_sub_tokens
from inchipy.connection.tree import AtomToken, ConnectionToken, build_connection_tree
from inchipy.exceptions import IllegalStartingTokenError, SelfLoopError
from inchipy.options import IndexPolicy
from inchipy.types import Edge


class _EdgeCollector:
    """Accumulates canonical 0-based edges while walking a chain."""

    __slots__ = ("edges", "text")

    def __init__(self, text: str | None = None) -> None:
        self.edges: set[Edge] = set()
        self.text = text

    def add(self, left: int, right: int) -> None:
        """Add the edge between two 1-based atoms."""
        if left == right:
            raise SelfLoopError(left, self.text)
        a, b = left - 1, right - 1
        self.edges.add((a, b) if a < b else (b, a))

    def walk(self, current: int | None, token: ConnectionToken) -> int:
        """Apply one token and return the atom the chain continues from."""
        if isinstance(token, AtomToken):
            if current is not None:
                self.add(current, token.index)
            return token.index

        if current is None:
            raise IllegalStartingTokenError(token, self.text)
        for arm in token.arms:
            arm_atom = current
            for sub_token in arm:
                arm_atom = self.walk(arm_atom, sub_token)
        return current


def extract_edges(tokens: Iterable[ConnectionToken], text: str | None = None) -> list[Edge]:
    """Extract edges from a connection token chain.

    Args:
        tokens: Top-level chain from :func:`build_connection_tree`.
        text: Layer text for error messages.

    Returns:
        Unique (min, max) 0-based pairs in ascending order.

    Raises:
        SelfLoopError: If an atom would be bonded to itself, directly or
            as the first atom of a branch arm.
        IllegalStartingTokenError: If the chain starts with a branch.
    """
    collector = _EdgeCollector(text)
    current: int | None = None
    for token in tokens:
        current = collector.walk(current, token)
    return sorted(collector.edges)


def connection_edges(text: str, policy: IndexPolicy = IndexPolicy.U16) -> list[Edge]:
    """Lex, fold and walk one connection layer component.

    Example:
        >>> connection_edges("1-2(3)4")
        [(0, 1), (1, 2), (1, 3)]
    """
    tree = build_connection_tree(iter_sub_tokens(text, policy), text)
    return extract_edges(tree, text)
