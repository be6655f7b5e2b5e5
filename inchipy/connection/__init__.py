"""Atom connection layer ('c') decoding."""

from inchipy.connection.tokens import ConnectionSubToken, SubTokenKind, iter_sub_tokens
from inchipy.connection.tree import (
    AtomToken,
    BranchToken,
    ConnectionToken,
    ConnectionTreeBuilder,
    build_connection_tree,
    iter_atoms,
)
from inchipy.connection.edges import connection_edges, extract_edges
from inchipy.connection.layer import parse_connection_layer, parse_molecular_graph

__all__ = [
    "ConnectionSubToken",
    "SubTokenKind",
    "iter_sub_tokens",
    "AtomToken",
    "BranchToken",
    "ConnectionToken",
    "ConnectionTreeBuilder",
    "build_connection_tree",
    "iter_atoms",
    "connection_edges",
    "extract_edges",
    "parse_connection_layer",
    "parse_molecular_graph",
]
