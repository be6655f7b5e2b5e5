"""
Connection token tree.

Folds the flat sub-token stream into atoms and branches. A branch holds
one or more arms; each arm is a chain that hangs off the atom written
just before the opening parenthesis::

    1-2(3,4)5   ->   Atom(1) Atom(2) Branch([[Atom(3)], [Atom(4)]]) Atom(5)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Union

from inchipy.connection.tokens import ConnectionSubToken, SubTokenKind
from inchipy.exceptions import (
    ClosingBracketBeforeOpeningBracketError,
    CommaBeforeAnyEdgeError,
    IllegalStartingTokenError,
    UnexpectedEndOfInputError,
)


@dataclass(frozen=True, slots=True)
class AtomToken:
    """An atom, by its 1-based index."""

    index: int

    def __str__(self) -> str:
        return str(self.index)


@dataclass(frozen=True, slots=True)
class BranchToken:
    """Alternative chains off one base atom."""

    arms: tuple[tuple["ConnectionToken", ...], ...]

    def __str__(self) -> str:
        return "(" + ",".join(_render_chain(arm) for arm in self.arms) + ")"


ConnectionToken = Union[AtomToken, BranchToken]


def _render_chain(tokens: Iterable[ConnectionToken]) -> str:
    parts: list[str] = []
    last_was_atom = False
    for token in tokens:
        is_atom = isinstance(token, AtomToken)
        if last_was_atom and is_atom:
            parts.append("-")
        parts.append(str(token))
        last_was_atom = is_atom
    return "".join(parts)


class ConnectionTreeBuilder:
    """Recursive-descent builder over a sub-token stream.

    The stream is pulled lazily and shared by every nesting level, so a
    nested branch consumes exactly the tokens up to its own ')'.
    """

    __slots__ = ("_tokens", "_text")

    def __init__(self, sub_tokens: Iterable[ConnectionSubToken], text: str | None = None) -> None:
        self._tokens: Iterator[ConnectionSubToken] = iter(sub_tokens)
        self._text = text

    def build(self) -> list[ConnectionToken]:
        """Build the top-level chain.

        Raises:
            ClosingBracketBeforeOpeningBracketError: On ')' with no open branch.
            CommaBeforeAnyEdgeError: On ',' with no open branch.
            IllegalStartingTokenError: If the chain starts with '-'.
            UnexpectedEndOfInputError: If a branch is never closed.
        """
        chain: list[ConnectionToken] = []
        for sub in self._tokens:
            kind = sub.kind
            if kind is SubTokenKind.INDEX:
                chain.append(AtomToken(sub.index))
            elif kind is SubTokenKind.DASH:
                if not chain:
                    raise IllegalStartingTokenError(sub, self._text, sub.position)
            elif kind is SubTokenKind.OPEN_PAREN:
                chain.append(self._read_branch(sub))
            elif kind is SubTokenKind.CLOSE_PAREN:
                raise ClosingBracketBeforeOpeningBracketError(self._text, sub.position)
            else:
                raise CommaBeforeAnyEdgeError(self._text, sub.position)
        return chain

    def _read_branch(self, opener: ConnectionSubToken) -> BranchToken:
        arms: list[tuple[ConnectionToken, ...]] = []
        arm: list[ConnectionToken] = []
        for sub in self._tokens:
            kind = sub.kind
            if kind is SubTokenKind.INDEX:
                arm.append(AtomToken(sub.index))
            elif kind is SubTokenKind.DASH:
                continue
            elif kind is SubTokenKind.OPEN_PAREN:
                arm.append(self._read_branch(sub))
            elif kind is SubTokenKind.COMMA:
                if not arm:
                    raise CommaBeforeAnyEdgeError(self._text, sub.position)
                arms.append(tuple(arm))
                arm = []
            else:
                # This ')' has no branch of its own: it closes ours
                arms.append(tuple(arm))
                return BranchToken(tuple(arms))
        raise UnexpectedEndOfInputError(opener, self._text, opener.position)


def build_connection_tree(
    sub_tokens: Iterable[ConnectionSubToken],
    text: str | None = None,
) -> list[ConnectionToken]:
    """Fold sub-tokens into a chain of atoms and branches.

    Example:
        >>> from inchipy.connection.tokens import iter_sub_tokens
        >>> [str(t) for t in build_connection_tree(iter_sub_tokens("1-2(3,4)5"))]
        ['1', '2', '(3,4)', '5']
    """
    return ConnectionTreeBuilder(sub_tokens, text).build()


def iter_atoms(tokens: Iterable[ConnectionToken]) -> Iterator[int]:
    """Yield every 1-based atom index in a chain, depth first."""
    for token in tokens:
        if isinstance(token, AtomToken):
            yield token.index
        else:
            for arm in token.arms:
                yield from iter_atoms(arm)
