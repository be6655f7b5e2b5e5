"""
Hydrogen sublayer assembler.

Pairs each ';'-separated entry of the hydrogen layer with the next
subformula, the same way the connection layer does.
"""

from __future__ import annotations

import logging

from inchipy.exceptions import FormulaMixtureMismatchError
from inchipy.formula import SubformulaCursor
from inchipy.hydrogen.component import parse_hydrogen_component
from inchipy.layers import HYDROGEN_PREFIX, split_components
from inchipy.options import DEFAULT_OPTIONS, ParserOptions
from inchipy.types import HydrogenComponent, HydrogensSubLayer

LOG = logging.getLogger(__name__)


def parse_hydrogen_layer(
    text: str,
    subformulas: SubformulaCursor,
    options: ParserOptions = DEFAULT_OPTIONS,
) -> HydrogensSubLayer:
    """Decode a whole hydrogen layer.

    Args:
        text: Layer text after the ``h`` prefix.
        subformulas: Cursor over the formula's subformulas; advanced by one
            per decoded component.
        options: Parser options.

    Returns:
        One component per mixture, in formula order. Repeated components
        are independent copies.

    Raises:
        FormulaMixtureMismatchError: If the layer describes more or fewer
            components than the formula, or a repeat spans subformulas with
            different atom counts.
        NumericOverflowError: If a subformula has more atoms than the index
            width allows.

    Example:
        >>> from inchipy.formula import parse_formula
        >>> layer = parse_hydrogen_layer("3H,2H2,1H3", parse_formula("C2H6O").cursor())
        >>> layer[0].fixed_h
        (3, 2, 1)
    """
    policy = options.index_policy
    components = split_components(text)
    expected = len(subformulas)
    found = sum(component.repetitions for component in components)
    result: list[HydrogenComponent] = []

    for component in components:
        subformula = subformulas.next()
        if subformula is None:
            raise FormulaMixtureMismatchError(expected, found, HYDROGEN_PREFIX, text)

        num_atoms = policy.check(subformula.num_atoms, text)
        decoded = parse_hydrogen_component(component.body, num_atoms, policy)
        result.append(decoded)

        if component.repetitions > 1:
            LOG.debug(
                f"Repeating hydrogen component '{component.body}' "
                f"{component.repetitions} times"
            )
        for _ in range(component.repetitions - 1):
            repeated = subformulas.next()
            if repeated is None or repeated.num_atoms != num_atoms:
                raise FormulaMixtureMismatchError(expected, found, HYDROGEN_PREFIX, text)
            result.append(decoded.copy())

    if subformulas.remaining:
        raise FormulaMixtureMismatchError(expected, found, HYDROGEN_PREFIX, text)

    LOG.debug(f"Decoded hydrogen layer into {len(result)} components")
    return tuple(result)
