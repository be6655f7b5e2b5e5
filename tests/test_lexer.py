"""Tests for the character cursor and numeric index lexer."""

import pytest

from inchipy.exceptions import (
    InvalidCharacterError,
    NumericOverflowError,
    UnexpectedEndOfInputError,
    ZeroIndexError,
)
from inchipy.lexer import Cursor, is_ascii_digit
from inchipy.options import IndexPolicy, ParserOptions


class TestCursor:
    """Test character access."""

    def test_peek_does_not_consume(self):
        cur = Cursor("ab")
        assert cur.peek() == "a"
        assert cur.peek(1) == "b"
        assert cur.peek(2) is None
        assert cur.position == 0

    def test_next_consumes(self):
        cur = Cursor("ab")
        assert cur.next() == "a"
        assert cur.next() == "b"
        assert cur.next() is None
        assert cur.is_eof()

    def test_read_while(self):
        cur = Cursor("123abc")
        assert cur.read_digits() == "123"
        assert cur.remaining == "abc"

    def test_expect(self):
        cur = Cursor("H,")
        cur.expect("H")
        with pytest.raises(InvalidCharacterError) as exc_info:
            cur.expect("-")
        assert exc_info.value.character == ","

    def test_expect_at_end(self):
        with pytest.raises(UnexpectedEndOfInputError):
            Cursor("").expect("H")

    def test_non_ascii_digits_are_not_digits(self):
        assert is_ascii_digit("7")
        assert not is_ascii_digit("²")


class TestReadIndex:
    """Test bounded unsigned integer lexing."""

    def test_reads_digit_run_only(self):
        cur = Cursor("42-3")
        assert cur.read_index(65535) == 42
        assert cur.peek() == "-"

    def test_zero_rejected_when_one_based(self):
        with pytest.raises(ZeroIndexError):
            Cursor("0").read_index(65535)

    def test_zero_allowed_otherwise(self):
        assert Cursor("0").read_index(65535, one_based=False) == 0

    def test_overflow(self):
        with pytest.raises(NumericOverflowError) as exc_info:
            Cursor("65536").read_index(65535)
        assert exc_info.value.value == 65536
        assert exc_info.value.limit == 65535

    def test_limit_is_inclusive(self):
        assert Cursor("65535").read_index(65535) == 65535

    def test_not_on_digit(self):
        with pytest.raises(InvalidCharacterError):
            Cursor("x1").read_index(10)

    def test_error_points_at_number(self):
        with pytest.raises(ZeroIndexError) as exc_info:
            cur = Cursor("12,0")
            cur.read_index(100)
            cur.next()
            cur.read_index(100)
        assert exc_info.value.position == 3


class TestIndexPolicy:
    """Test the configurable index width."""

    def test_u16(self):
        assert IndexPolicy.U16.max_value == 65535
        assert IndexPolicy.U16.fits(65535)
        assert not IndexPolicy.U16.fits(65536)

    def test_word(self):
        assert IndexPolicy.WORD.max_value == 2**64 - 1

    def test_check(self):
        assert IndexPolicy.U16.check(10) == 10
        with pytest.raises(NumericOverflowError):
            IndexPolicy.U16.check(70000)

    def test_invalid_width(self):
        with pytest.raises(ValueError):
            IndexPolicy("none", 0)

    def test_default_options(self):
        options = ParserOptions()
        assert options.index_policy is IndexPolicy.U16
        assert options.allowed_versions == ("1S", "1")

    def test_options_need_a_version(self):
        with pytest.raises(ValueError):
            ParserOptions(allowed_versions=())
