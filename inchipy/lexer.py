"""
Character cursor and numeric index lexer.

Both layer tokenizers pull characters through a :class:`Cursor`, and
every atom index or hydrogen count goes through :meth:`Cursor.read_index`
so the zero and overflow rules are enforced in one place.
"""

from __future__ import annotations

from typing import Callable

from inchipy.exceptions import (
    InvalidCharacterError,
    NumericOverflowError,
    UnexpectedEndOfInputError,
    ZeroIndexError,
)


class Cursor:
    """Low-level layer text cursor.

    Provides character-by-character access to a layer substring with
    lookahead capability.
    """

    __slots__ = ("_string", "_pos")

    def __init__(self, string: str) -> None:
        self._string = string
        self._pos = 0

    @property
    def text(self) -> str:
        """The full string being read."""
        return self._string

    @property
    def position(self) -> int:
        """Current position in the string."""
        return self._pos

    @property
    def remaining(self) -> str:
        """Remaining unparsed string."""
        return self._string[self._pos:]

    def peek(self, offset: int = 0) -> str | None:
        """Look at character at current position + offset without consuming.

        Returns:
            Character at position, or None if past end.
        """
        pos = self._pos + offset
        if pos >= len(self._string):
            return None
        return self._string[pos]

    def peek_is_digit(self) -> bool:
        char = self.peek()
        return char is not None and is_ascii_digit(char)

    def next(self) -> str | None:
        """Consume and return the next character, or None if at end."""
        if self._pos >= len(self._string):
            return None
        char = self._string[self._pos]
        self._pos += 1
        return char

    def read_while(self, predicate: Callable[[str], bool]) -> str:
        """Read characters while predicate is true and return them."""
        start = self._pos
        while self._pos < len(self._string) and predicate(self._string[self._pos]):
            self._pos += 1
        return self._string[start:self._pos]

    def read_digits(self) -> str:
        return self.read_while(is_ascii_digit)

    def read_index(self, limit: int, *, one_based: bool = True) -> int:
        """Read a run of ASCII digits as a bounded unsigned integer.

        Never consumes anything but digits.

        Args:
            limit: Largest accepted value.
            one_based: Reject zero when True.

        Returns:
            The parsed number.

        Raises:
            UnexpectedEndOfInputError: If the input is exhausted.
            InvalidCharacterError: If the cursor is not on a digit.
            NumericOverflowError: If the number exceeds limit.
            ZeroIndexError: If one_based and the number is zero.
        """
        start = self._pos
        digits = self.read_digits()
        if not digits:
            char = self.peek()
            if char is None:
                raise UnexpectedEndOfInputError(None, self._string, start)
            raise InvalidCharacterError(char, self._string, start)
        value = int(digits)
        if value > limit:
            raise NumericOverflowError(value, limit, self._string, start)
        if one_based and value == 0:
            raise ZeroIndexError(text=self._string, position=start)
        return value

    def is_eof(self) -> bool:
        """Check if at end of string."""
        return self._pos >= len(self._string)

    def expect(self, char: str) -> None:
        """Consume expected character or raise error.

        Raises:
            UnexpectedEndOfInputError: If at end of string.
            InvalidCharacterError: If next character doesn't match.
        """
        actual = self.next()
        if actual is None:
            raise UnexpectedEndOfInputError(None, self._string, self._pos)
        if actual != char:
            raise InvalidCharacterError(actual, self._string, self._pos - 1)


def is_ascii_digit(char: str) -> bool:
    # str.isdigit accepts non-ASCII digits such as '²'
    return "0" <= char <= "9"
