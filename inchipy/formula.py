"""
InChI formula layer.

The formula layer lists one subformula per mixture component, separated
by '.', each optionally preceded by a repetition count::

    C2H6O            ethanol
    C2H6O.H2O        ethanol and water
    2ClH.Zn          two hydrogen chlorides and zinc

Repetition counts are expanded, so ``2ClH.Zn`` yields three subformulas.
The connection and hydrogen layers consume these subformulas in order
through a :class:`SubformulaCursor`, one cursor per layer.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator

from inchipy.elements import CARBON, HYDROGEN, get_element
from inchipy.exceptions import FormulaError, NotHillOrderedError, UnknownElementError
from inchipy.lexer import Cursor

_UNBOUNDED = sys.maxsize


@dataclass(frozen=True, slots=True)
class Subformula:
    """Element composition of one mixture component.

    Attributes:
        counts: (symbol, count) pairs in formula order.
    """

    counts: tuple[tuple[str, int], ...]

    def __str__(self) -> str:
        return "".join(
            symbol if count == 1 else f"{symbol}{count}"
            for symbol, count in self.counts
        )

    def count_of(self, symbol: str) -> int:
        for element, count in self.counts:
            if element == symbol:
                return count
        return 0

    @property
    def num_hydrogens(self) -> int:
        return self.count_of(HYDROGEN.symbol)

    @property
    def num_non_hydrogens(self) -> int:
        return sum(count for symbol, count in self.counts if symbol != HYDROGEN.symbol)

    @property
    def num_atoms(self) -> int:
        """Number of skeletal atoms numbered by the connection layer.

        This is the non-hydrogen atom count, except for hydrogen-only
        subformulas such as H2, whose single skeletal atom is a hydrogen.
        """
        heavy = self.num_non_hydrogens
        if heavy == 0 and self.num_hydrogens > 0:
            return 1
        return heavy


@dataclass(frozen=True, slots=True)
class InchiFormula:
    """Parsed formula layer.

    Attributes:
        text: Formula layer text as given.
        subformulas: One entry per component, repetitions expanded.
    """

    text: str
    subformulas: tuple[Subformula, ...]

    def __len__(self) -> int:
        return len(self.subformulas)

    def __iter__(self) -> Iterator[Subformula]:
        return iter(self.subformulas)

    @property
    def number_of_mixtures(self) -> int:
        return len(self.subformulas)

    def cursor(self) -> "SubformulaCursor":
        """Fresh cursor positioned at the first subformula."""
        return SubformulaCursor(self.subformulas)


class SubformulaCursor:
    """Explicit, independently advanced position in a subformula sequence."""

    __slots__ = ("_subformulas", "_pos")

    def __init__(self, subformulas: tuple[Subformula, ...]) -> None:
        self._subformulas = subformulas
        self._pos = 0

    def __len__(self) -> int:
        return len(self._subformulas)

    @property
    def consumed(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._subformulas) - self._pos

    def next(self) -> Subformula | None:
        """Consume and return the next subformula, or None when exhausted."""
        if self._pos >= len(self._subformulas):
            return None
        subformula = self._subformulas[self._pos]
        self._pos += 1
        return subformula


def parse_formula(text: str) -> InchiFormula:
    """Parse an InChI formula layer.

    Args:
        text: Formula layer text without surrounding slashes.

    Returns:
        Parsed formula.

    Raises:
        FormulaError: On empty or malformed components.
        UnknownElementError: On symbols missing from the element table.
        NotHillOrderedError: If a component is not in Hill order.

    Example:
        >>> [str(s) for s in parse_formula("2ClH.Zn")]
        ['ClH', 'ClH', 'Zn']
    """
    if not text:
        raise FormulaError("Empty molecular formula", text)

    subformulas: list[Subformula] = []
    offset = 0
    for component in text.split("."):
        repetitions, subformula = _parse_component(component, text, offset)
        subformulas.extend([subformula] * repetitions)
        offset += len(component) + 1

    return InchiFormula(text=text, subformulas=tuple(subformulas))


def _parse_component(component: str, text: str, offset: int) -> tuple[int, Subformula]:
    if not component:
        raise FormulaError("Empty formula component", text, offset)

    cur = Cursor(component)
    repetitions = 1
    if cur.peek_is_digit():
        repetitions = cur.read_index(_UNBOUNDED)

    counts: list[tuple[str, int]] = []
    while not cur.is_eof():
        start = cur.position
        char = cur.next()
        if not char.isascii() or not char.isupper():
            raise FormulaError(
                f"Expected element symbol, got '{char}'", text, offset + start
            )
        symbol = char + cur.read_while(lambda c: c.isascii() and c.islower())
        if get_element(symbol) is None:
            raise UnknownElementError(symbol, text, offset + start)
        count = cur.read_index(_UNBOUNDED) if cur.peek_is_digit() else 1
        counts.append((symbol, count))

    if not counts:
        raise FormulaError("Formula component has no elements", text, offset)

    symbols = [symbol for symbol, _ in counts]
    if len(set(symbols)) != len(symbols):
        raise FormulaError(
            f"Formula component '{component}' repeats an element", text, offset
        )
    if symbols != _hill_order(symbols):
        raise NotHillOrderedError(
            f"Formula component '{component}' is not in Hill order", text, offset
        )

    return repetitions, Subformula(tuple(counts))


def _hill_order(symbols: list[str]) -> list[str]:
    """Hill order: C, then H, then the rest alphabetically; without carbon
    everything is alphabetical.
    """
    if CARBON.symbol not in symbols:
        return sorted(symbols)
    head = [s for s in symbols if s == CARBON.symbol]
    head += [s for s in symbols if s == HYDROGEN.symbol]
    rest = sorted(s for s in symbols if s not in (CARBON.symbol, HYDROGEN.symbol))
    return head + rest
