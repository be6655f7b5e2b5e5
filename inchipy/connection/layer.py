"""
Atom connection layer assembler.

Builds one :class:`~inchipy.types.MolecularGraph` per mixture component,
pairing each ';'-separated entry of the layer with the next subformula.
"""

from __future__ import annotations

import logging

from inchipy.connection.edges import extract_edges
from inchipy.connection.tokens import iter_sub_tokens
from inchipy.connection.tree import build_connection_tree, iter_atoms
from inchipy.exceptions import AtomIndexOutOfBoundsError, FormulaMixtureMismatchError
from inchipy.formula import Subformula, SubformulaCursor
from inchipy.layers import CONNECTION_PREFIX, split_components
from inchipy.options import DEFAULT_OPTIONS, ParserOptions
from inchipy.types import AtomConnectionLayer, MolecularGraph

LOG = logging.getLogger(__name__)


def parse_molecular_graph(
    text: str,
    subformula: Subformula,
    options: ParserOptions = DEFAULT_OPTIONS,
) -> MolecularGraph:
    """Decode one connection layer component.

    Args:
        text: Component text without the ``n*`` prefix. May be empty for
            single-atom components.
        subformula: Matching subformula; gives the vertex count.
        options: Parser options.

    Raises:
        NumericOverflowError: If the atom or edge count exceeds the index width.
        AtomIndexOutOfBoundsError: If an atom index exceeds the vertex count.

    Example:
        >>> from inchipy.formula import parse_formula
        >>> ethanol = parse_formula("C2H6O").subformulas[0]
        >>> parse_molecular_graph("1-2-3", ethanol).edges
        ((0, 1), (1, 2))
    """
    policy = options.index_policy
    num_vertices = policy.check(subformula.num_atoms, text)
    tree = build_connection_tree(iter_sub_tokens(text, policy), text)
    edges = extract_edges(tree, text)
    for atom in iter_atoms(tree):
        if atom > num_vertices:
            raise AtomIndexOutOfBoundsError(atom, num_vertices, text)
    policy.check(len(edges), text)
    return MolecularGraph.from_edges(num_vertices, edges, text)


def parse_connection_layer(
    text: str,
    subformulas: SubformulaCursor,
    options: ParserOptions = DEFAULT_OPTIONS,
) -> AtomConnectionLayer:
    """Decode a whole connection layer.

    Args:
        text: Layer text after the ``c`` prefix.
        subformulas: Cursor over the formula's subformulas; advanced by one
            per decoded component.
        options: Parser options.

    Returns:
        One graph per component, in formula order. Repeated components are
        independent copies.

    Raises:
        FormulaMixtureMismatchError: If the layer describes more or fewer
            components than the formula, or a repeat spans subformulas with
            different atom counts.
    """
    components = split_components(text)
    expected = len(subformulas)
    found = sum(component.repetitions for component in components)
    graphs: list[MolecularGraph] = []

    for component in components:
        subformula = subformulas.next()
        if subformula is None:
            raise FormulaMixtureMismatchError(expected, found, CONNECTION_PREFIX, text)

        graph = parse_molecular_graph(component.body, subformula, options)
        graphs.append(graph)

        if component.repetitions > 1:
            LOG.debug(
                f"Repeating connection component '{component.body}' "
                f"{component.repetitions} times"
            )
        for _ in range(component.repetitions - 1):
            repeated = subformulas.next()
            if repeated is None or repeated.num_atoms != graph.num_vertices:
                raise FormulaMixtureMismatchError(expected, found, CONNECTION_PREFIX, text)
            graphs.append(graph.copy())

    if subformulas.remaining:
        raise FormulaMixtureMismatchError(expected, found, CONNECTION_PREFIX, text)

    LOG.debug(f"Decoded connection layer into {len(graphs)} graphs")
    return tuple(graphs)
