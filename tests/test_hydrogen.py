"""Tests for the hydrogen layer decoder."""

from __future__ import annotations

import pytest

from inchipy.exceptions import (
    AtomIndexOutOfBoundsError,
    FormulaMixtureMismatchError,
    IllegalConsecutiveTokensError,
    IllegalStartingTokenError,
    InvalidCharacterError,
    InvalidRangeError,
    NumericOverflowError,
    UnexpectedEndOfInputError,
    ZeroAtomIndexError,
    ZeroIndexError,
)
from inchipy.formula import parse_formula
from inchipy.hydrogen import (
    HydrogenLexer,
    HydrogenSubToken,
    HydrogenTokenKind,
    iter_hydrogen_tokens,
    parse_hydrogen_component,
    parse_hydrogen_layer,
)
from inchipy.types import HydrogenComponent, MobileHydrogenGroup


def token_strings(text: str) -> list[str]:
    return [str(token) for token in HydrogenLexer(text)]


class TestHydrogenLexer:
    """Test context-sensitive hydrogen tokenization."""

    def test_fixed_entries(self):
        assert token_strings("1,5-10H2,3H") == ["1", ",", "5-10", "H2", ",", "3", "H"]

    def test_function_form(self):
        assert [str(t) for t in iter_hydrogen_tokens("(H,1,2)")] == ["(H,", "1", ",", "2", ")"]

    def test_fixed_h_default_count(self):
        tokens = list(HydrogenLexer("2H"))
        assert tokens[1] == HydrogenSubToken(HydrogenTokenKind.FIXED_H, 1)

    def test_range_token(self):
        tokens = list(HydrogenLexer("7-10H"))
        assert tokens[0] == HydrogenSubToken(HydrogenTokenKind.RANGE, 7, 10)

    def test_mobile_opener(self):
        tokens = list(HydrogenLexer("(H2-,1,2)"))
        assert tokens[0] == HydrogenSubToken(
            HydrogenTokenKind.MOBILE_OPENER, 2, charged=True
        )
        assert [t.kind for t in tokens[1:]] == [
            HydrogenTokenKind.INDEX,
            HydrogenTokenKind.COMMA,
            HydrogenTokenKind.INDEX,
            HydrogenTokenKind.CLOSE_PAREN,
        ]

    def test_tracks_group_state(self):
        lexer = HydrogenLexer("(H,1)2H")
        assert not lexer.in_mobile
        next(lexer)
        assert lexer.in_mobile
        next(lexer)
        next(lexer)
        assert not lexer.in_mobile
        assert [str(t) for t in lexer] == ["2", "H"]

    @pytest.mark.parametrize("text,character", [
        ("1X", "X"),
        ("1-H", "H"),
        (")", ")"),
        ("(H,1-2)", "-"),
        ("(H,1H)", "H"),
        ("(H,2*)", "*"),
        ("(X,1)", "X"),
        ("(H;1)", ";"),
        ("1-", "-"),
    ])
    def test_invalid_character(self, text, character):
        with pytest.raises(InvalidCharacterError) as exc_info:
            list(HydrogenLexer(text))
        assert exc_info.value.character == character

    def test_truncated_opener(self):
        with pytest.raises(UnexpectedEndOfInputError):
            list(HydrogenLexer("(H2"))

    def test_count_overflow(self):
        with pytest.raises(NumericOverflowError):
            list(HydrogenLexer("1H256"))
        assert str(list(HydrogenLexer("1H255"))[1]) == "H255"

    def test_zero_count(self):
        with pytest.raises(ZeroIndexError):
            list(HydrogenLexer("1H0"))


class TestHydrogenComponent:
    """Test building fixed and mobile hydrogen assignments."""

    def test_single_fixed(self):
        assert parse_hydrogen_component("1H2", 1) == HydrogenComponent((2,), ())

    def test_charged_mobile_group(self):
        component = parse_hydrogen_component("(H-,1,2)", 2)
        assert component.fixed_h == (0, 0)
        assert component.mobile_groups == (MobileHydrogenGroup(1, True, (0, 1)),)

    def test_range(self):
        component = parse_hydrogen_component("7-10H", 10)
        assert component.fixed_h == (0, 0, 0, 0, 0, 0, 1, 1, 1, 1)

    def test_mixed_entries(self):
        component = parse_hydrogen_component("2-3,5H,1H3,(H2,4,6,4)", 6)
        assert component.fixed_h == (3, 1, 1, 0, 1, 0)
        assert component.mobile_groups == (MobileHydrogenGroup(2, False, (3, 5)),)
        assert component.total_fixed == 6
        assert component.total_mobile == 2
        assert component.total_hydrogens == 8

    def test_several_groups(self):
        component = parse_hydrogen_component("(H,1,2),(H,3,4)", 4)
        assert [g.atoms for g in component.mobile_groups] == [(0, 1), (2, 3)]
        assert str(component.mobile_groups[0]) == "(H,1,2)"

    def test_empty(self):
        assert parse_hydrogen_component("", 3) == HydrogenComponent((0, 0, 0))

    def test_fixed_h_length(self):
        component = parse_hydrogen_component("1H", 5)
        assert len(component.fixed_h) == component.num_atoms == 5

    def test_zero_atom_index(self):
        with pytest.raises(ZeroAtomIndexError):
            parse_hydrogen_component("0H", 2)

    def test_zero_atom_index_in_group(self):
        with pytest.raises(ZeroAtomIndexError):
            parse_hydrogen_component("(H,0,1)", 2)

    def test_out_of_bounds(self):
        with pytest.raises(AtomIndexOutOfBoundsError) as exc_info:
            parse_hydrogen_component("4H", 2)
        assert exc_info.value.index == 4
        assert exc_info.value.num_atoms == 2

    def test_range_out_of_bounds(self):
        with pytest.raises(AtomIndexOutOfBoundsError):
            parse_hydrogen_component("1-3H", 2)

    def test_reversed_range(self):
        with pytest.raises(InvalidRangeError) as exc_info:
            parse_hydrogen_component("5-3H", 12)
        assert (exc_info.value.start, exc_info.value.end) == (5, 3)

    def test_unclosed_group(self):
        with pytest.raises(UnexpectedEndOfInputError):
            parse_hydrogen_component("(H,1,2", 2)

    def test_atoms_without_h(self):
        with pytest.raises(UnexpectedEndOfInputError):
            parse_hydrogen_component("1H,2", 2)

    def test_h_without_atoms(self):
        with pytest.raises(IllegalStartingTokenError):
            parse_hydrogen_component("H2", 2)

    def test_empty_group(self):
        with pytest.raises(IllegalConsecutiveTokensError):
            parse_hydrogen_component("(H,)", 2)

    def test_group_while_atoms_pending(self):
        with pytest.raises(IllegalConsecutiveTokensError):
            parse_hydrogen_component("1,(H,1,2)", 2)


class TestHydrogenLayer:
    """Test mixture handling in the hydrogen layer."""

    def test_single_component(self, ethanol_formula):
        layer = parse_hydrogen_layer("3H,2H2,1H3", ethanol_formula.cursor())
        assert layer == (HydrogenComponent((3, 2, 1)),)

    def test_mixture(self):
        layer = parse_hydrogen_layer("3H,2H2,1H3;1H2", parse_formula("C2H6O.H2O").cursor())
        assert [c.fixed_h for c in layer] == [(3, 2, 1), (2,)]

    def test_repetition(self):
        cursor = parse_formula("2ClH.Zn").cursor()
        layer = parse_hydrogen_layer("2*1H;", cursor)
        assert len(layer) == 3
        assert layer[0] == layer[1] == HydrogenComponent((1,))
        assert layer[0] is not layer[1]
        assert layer[2] == HydrogenComponent((0,))
        assert cursor.remaining == 0

    def test_repeated_groups_are_copies(self, make_formula):
        layer = parse_hydrogen_layer("2*(H,1,2)", make_formula(2, 2).cursor())
        assert layer[0].mobile_groups == layer[1].mobile_groups
        assert layer[0].mobile_groups[0] is not layer[1].mobile_groups[0]

    def test_hydrogen_molecule(self):
        layer = parse_hydrogen_layer("1H", parse_formula("H2").cursor())
        assert layer[0].fixed_h == (1,)

    def test_fewer_components_than_formula(self):
        with pytest.raises(FormulaMixtureMismatchError):
            parse_hydrogen_layer("1H", parse_formula("CH4.C2H6").cursor())

    def test_more_components_than_formula(self):
        with pytest.raises(FormulaMixtureMismatchError):
            parse_hydrogen_layer("1H4;1H4", parse_formula("CH4").cursor())

    def test_repetition_needs_equal_atom_counts(self, make_formula):
        with pytest.raises(FormulaMixtureMismatchError):
            parse_hydrogen_layer("2*1H", make_formula(1, 2).cursor())
