"""
Hydrogen component builder.

Turns the tokens of one hydrogen layer component into a fixed hydrogen
count per atom plus the list of mobile hydrogen groups.
"""

from __future__ import annotations

from inchipy.exceptions import (
    AtomIndexOutOfBoundsError,
    IllegalConsecutiveTokensError,
    IllegalStartingTokenError,
    InvalidRangeError,
    UnexpectedEndOfInputError,
    ZeroAtomIndexError,
)
from inchipy.hydrogen.tokens import HydrogenLexer, HydrogenSubToken, HydrogenTokenKind
from inchipy.options import IndexPolicy
from inchipy.types import HydrogenComponent, MobileHydrogenGroup


def _check_atom(index: int, num_atoms: int, text: str) -> int:
    """Validate a 1-based atom index and return it 0-based."""
    if index == 0:
        raise ZeroAtomIndexError(text)
    if index > num_atoms:
        raise AtomIndexOutOfBoundsError(index, num_atoms, text)
    return index - 1


def parse_hydrogen_component(
    text: str,
    num_atoms: int,
    policy: IndexPolicy = IndexPolicy.U16,
) -> HydrogenComponent:
    """Decode one hydrogen layer component.

    Args:
        text: Component text without the ``n*`` prefix. May be empty.
        num_atoms: Atom count of the matching subformula.
        policy: Index width.

    Returns:
        Component with ``num_atoms`` fixed counts and its mobile groups.

    Raises:
        ZeroAtomIndexError: On atom index 0.
        AtomIndexOutOfBoundsError: On atom indices above num_atoms.
        InvalidRangeError: On ranges whose start exceeds their end.
        UnexpectedEndOfInputError: If a group is left open or atoms are
            listed without a closing ``H``.
        IllegalStartingTokenError: If ``H`` follows no atoms.
        IllegalConsecutiveTokensError: On empty groups, or a group opened
            while atoms still wait for their ``H``.

    Example:
        >>> parse_hydrogen_component("1,3H2,(H,2,4)", 4).fixed_h
        (2, 0, 2, 0)
    """
    fixed_h = [0] * num_atoms
    mobile_groups: list[MobileHydrogenGroup] = []

    # 0-based atoms waiting for their H token
    pending: list[int] = []
    last_pending: HydrogenSubToken | None = None

    opener: HydrogenSubToken | None = None
    group_atoms: list[int] = []

    for token in HydrogenLexer(text, policy):
        kind = token.kind

        if opener is not None:
            if kind is HydrogenTokenKind.INDEX:
                atom = _check_atom(token.value, num_atoms, text)
                if atom not in group_atoms:
                    group_atoms.append(atom)
            elif kind is HydrogenTokenKind.CLOSE_PAREN:
                if not group_atoms:
                    raise IllegalConsecutiveTokensError(opener, token, text, token.position)
                mobile_groups.append(
                    MobileHydrogenGroup(opener.value, opener.charged, tuple(group_atoms))
                )
                opener = None
                group_atoms = []
            # commas only separate group atoms
            continue

        if kind is HydrogenTokenKind.INDEX:
            pending.append(_check_atom(token.value, num_atoms, text))
            last_pending = token
        elif kind is HydrogenTokenKind.RANGE:
            start, end = token.value, token.end
            _check_atom(start, num_atoms, text)
            _check_atom(end, num_atoms, text)
            if start > end:
                raise InvalidRangeError(start, end, text)
            pending.extend(range(start - 1, end))
            last_pending = token
        elif kind is HydrogenTokenKind.FIXED_H:
            if not pending:
                raise IllegalStartingTokenError(token, text, token.position)
            for atom in pending:
                fixed_h[atom] = token.value
            pending = []
            last_pending = None
        elif kind is HydrogenTokenKind.MOBILE_OPENER:
            if pending:
                raise IllegalConsecutiveTokensError(last_pending, token, text, token.position)
            opener = token
            group_atoms = []

    if opener is not None:
        raise UnexpectedEndOfInputError(opener, text, len(text))
    if pending:
        raise UnexpectedEndOfInputError(last_pending, text, len(text))

    return HydrogenComponent(tuple(fixed_h), tuple(mobile_groups))
