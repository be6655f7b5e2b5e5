"""
Connection layer sub-token lexer.

Splits connection layer text such as ``1-2(3,4)5`` into atom indices and
the four punctuation marks ``( ) , -``. Every punctuation mark must be
followed immediately by an atom index.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Final, Iterator

from inchipy.exceptions import (
    IllegalConsecutiveTokensError,
    InvalidCharacterError,
    UnexpectedEndOfInputError,
)
from inchipy.lexer import Cursor
from inchipy.options import IndexPolicy


class SubTokenKind(Enum):
    """Kinds of connection layer sub-tokens."""

    OPEN_PAREN = "("
    CLOSE_PAREN = ")"
    COMMA = ","
    DASH = "-"
    INDEX = "index"


@dataclass(frozen=True, slots=True)
class ConnectionSubToken:
    """A single connection layer sub-token.

    Attributes:
        kind: Token kind.
        index: 1-based atom index for INDEX tokens, else None.
        position: Offset in the layer text (not part of equality).
    """

    kind: SubTokenKind
    index: int | None = None
    position: int = field(default=0, compare=False)

    @property
    def is_index(self) -> bool:
        return self.kind is SubTokenKind.INDEX

    def __str__(self) -> str:
        if self.kind is SubTokenKind.INDEX:
            return str(self.index)
        return self.kind.value


_PUNCTUATION: Final[dict[str, SubTokenKind]] = {
    "(": SubTokenKind.OPEN_PAREN,
    ")": SubTokenKind.CLOSE_PAREN,
    ",": SubTokenKind.COMMA,
    "-": SubTokenKind.DASH,
}


def _lex_one(cur: Cursor, limit: int) -> ConnectionSubToken:
    """Lex one sub-token without checking what follows it."""
    start = cur.position
    if cur.peek_is_digit():
        return ConnectionSubToken(SubTokenKind.INDEX, cur.read_index(limit), start)
    char = cur.next()
    kind = _PUNCTUATION.get(char)
    if kind is None:
        raise InvalidCharacterError(char, cur.text, start)
    return ConnectionSubToken(kind, position=start)


def iter_sub_tokens(
    text: str,
    policy: IndexPolicy = IndexPolicy.U16,
) -> Iterator[ConnectionSubToken]:
    """Lazily lex connection layer text into sub-tokens.

    Args:
        text: One component of the connection layer, without ``c`` or ``n*``.
        policy: Index width; larger indices fail.

    Yields:
        Sub-tokens in text order.

    Raises:
        InvalidCharacterError: On characters other than digits and ``(),-``.
        NumericOverflowError: On indices wider than the policy allows.
        ZeroIndexError: On atom index 0.
        IllegalConsecutiveTokensError: If punctuation is not followed by a digit.
        UnexpectedEndOfInputError: If punctuation ends the text.

    Example:
        >>> [str(t) for t in iter_sub_tokens("1-2(3)")]
        ['1', '-', '2', '(', '3', ')']
    """
    cur = Cursor(text)
    limit = policy.max_value
    while not cur.is_eof():
        token = _lex_one(cur, limit)
        if token.is_index:
            yield token
            continue
        if cur.is_eof():
            raise UnexpectedEndOfInputError(token, text, token.position)
        if not cur.peek_is_digit():
            illegal = _lex_one(cur, limit)
            raise IllegalConsecutiveTokensError(token, illegal, text, illegal.position)
        yield token
