"""Hydrogen layer ('h') decoding."""

from inchipy.hydrogen.tokens import (
    MAX_HYDROGEN_COUNT,
    HydrogenLexer,
    HydrogenSubToken,
    HydrogenTokenKind,
    iter_hydrogen_tokens,
)
from inchipy.hydrogen.component import parse_hydrogen_component
from inchipy.hydrogen.layer import parse_hydrogen_layer

__all__ = [
    "MAX_HYDROGEN_COUNT",
    "HydrogenLexer",
    "HydrogenSubToken",
    "HydrogenTokenKind",
    "iter_hydrogen_tokens",
    "parse_hydrogen_component",
    "parse_hydrogen_layer",
]
