"""
Hydrogen layer sub-token lexer.

The hydrogen layer mixes fixed hydrogen entries and mobile groups::

    1,5-10H2,2-4H3,(H,11,12)

Outside a group, digits are atom indices or ranges and ``H<n>`` closes a
fixed entry. A group opens with ``(H<n>[-],`` and lists plain atom indices
up to ``)``. The lexer tracks whether it is inside a group, since the same
characters mean different things there.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Final, Iterator

from inchipy.exceptions import InvalidCharacterError
from inchipy.lexer import Cursor
from inchipy.options import IndexPolicy

MAX_HYDROGEN_COUNT: Final[int] = 255


class HydrogenTokenKind(Enum):
    """Kinds of hydrogen layer sub-tokens."""

    INDEX = "index"
    RANGE = "range"
    COMMA = ","
    FIXED_H = "H"
    MOBILE_OPENER = "(H"
    CLOSE_PAREN = ")"


@dataclass(frozen=True, slots=True)
class HydrogenSubToken:
    """A single hydrogen layer sub-token.

    Attributes:
        kind: Token kind.
        value: Atom index (INDEX), range start (RANGE) or hydrogen count
            (FIXED_H, MOBILE_OPENER).
        end: Range end for RANGE tokens.
        charged: Charge flag for MOBILE_OPENER tokens.
        position: Offset in the component text (not part of equality).
    """

    kind: HydrogenTokenKind
    value: int | None = None
    end: int | None = None
    charged: bool = False
    position: int = field(default=0, compare=False)

    def __str__(self) -> str:
        kind = self.kind
        if kind is HydrogenTokenKind.INDEX:
            return str(self.value)
        if kind is HydrogenTokenKind.RANGE:
            return f"{self.value}-{self.end}"
        if kind is HydrogenTokenKind.FIXED_H:
            return "H" if self.value == 1 else f"H{self.value}"
        if kind is HydrogenTokenKind.MOBILE_OPENER:
            count = "" if self.value == 1 else str(self.value)
            return f"(H{count}{'-' if self.charged else ''},"
        return kind.value


class HydrogenLexer:
    """Lazily pulled, stateful hydrogen layer lexer.

    Example:
        >>> [str(t) for t in HydrogenLexer("1,3-4H2,(H-,2,5)")]
        ['1', ',', '3-4', 'H2', ',', '(H-,', '2', ',', '5', ')']
    """

    __slots__ = ("_cursor", "_limit", "_in_mobile")

    def __init__(self, text: str, policy: IndexPolicy = IndexPolicy.U16) -> None:
        self._cursor = Cursor(text)
        self._limit = policy.max_value
        self._in_mobile = False

    @property
    def in_mobile(self) -> bool:
        """Whether the lexer is inside a mobile hydrogen group."""
        return self._in_mobile

    @property
    def text(self) -> str:
        return self._cursor.text

    def __iter__(self) -> Iterator[HydrogenSubToken]:
        return self

    def __next__(self) -> HydrogenSubToken:
        cur = self._cursor
        if cur.is_eof():
            raise StopIteration
        start = cur.position

        if cur.peek_is_digit():
            # Zero indices are reported by the component builder
            value = cur.read_index(self._limit, one_based=False)
            if self._in_mobile or cur.peek() != "-":
                return HydrogenSubToken(HydrogenTokenKind.INDEX, value, position=start)
            dash = cur.position
            cur.next()
            if not cur.peek_is_digit():
                char = cur.peek()
                if char is None:
                    raise InvalidCharacterError("-", cur.text, dash)
                raise InvalidCharacterError(char, cur.text, cur.position)
            end = cur.read_index(self._limit, one_based=False)
            return HydrogenSubToken(HydrogenTokenKind.RANGE, value, end, position=start)

        char = cur.next()
        if char == ",":
            return HydrogenSubToken(HydrogenTokenKind.COMMA, position=start)

        if self._in_mobile:
            if char == ")":
                self._in_mobile = False
                return HydrogenSubToken(HydrogenTokenKind.CLOSE_PAREN, position=start)
            raise InvalidCharacterError(char, cur.text, start)

        if char == "H":
            count = self._read_count()
            return HydrogenSubToken(HydrogenTokenKind.FIXED_H, count, position=start)

        if char == "(":
            cur.expect("H")
            count = self._read_count()
            charged = cur.peek() == "-"
            if charged:
                cur.next()
            cur.expect(",")
            self._in_mobile = True
            return HydrogenSubToken(
                HydrogenTokenKind.MOBILE_OPENER, count, charged=charged, position=start
            )

        raise InvalidCharacterError(char, cur.text, start)

    def _read_count(self) -> int:
        """Read an optional hydrogen count, defaulting to 1."""
        if not self._cursor.peek_is_digit():
            return 1
        return self._cursor.read_index(MAX_HYDROGEN_COUNT)


def iter_hydrogen_tokens(
    text: str,
    policy: IndexPolicy = IndexPolicy.U16,
) -> Iterator[HydrogenSubToken]:
    """Lex one hydrogen layer component into sub-tokens.

    Raises:
        InvalidCharacterError: On characters not allowed at that point.
        NumericOverflowError: On indices wider than the policy allows or
            hydrogen counts above 255.
        ZeroIndexError: On a zero hydrogen count.
        UnexpectedEndOfInputError: If a group opener is cut short.
    """
    return HydrogenLexer(text, policy)
