"""
InChI string parser.

This module decodes a full InChI string::

    InChI=1S/C2H6O/c1-2-3/h3H,2H2,1H3

into an :class:`~inchipy.types.InChI`. The main layer (formula, atom
connections, hydrogens) is decoded; the charge, stereochemistry, isotope,
fixed hydrogen and reconnected layers are checked for a known prefix and
kept as text.

Decoding is a pure function of the input string: parsers share no state,
so separate strings can be decoded concurrently.
"""

from __future__ import annotations

import logging
from typing import Final

from inchipy.connection.layer import parse_connection_layer
from inchipy.exceptions import (
    MissingForwardSlashError,
    MissingPrefixError,
    MissingVersionPrefixError,
    UnimplementedFeatureError,
    UnrecognizedLayerPrefixError,
)
from inchipy.formula import parse_formula
from inchipy.hydrogen.layer import parse_hydrogen_layer
from inchipy.layers import (
    CONNECTION_PREFIX,
    HYDROGEN_PREFIX,
    KNOWN_LAYER_PREFIXES,
    PROTON_PREFIX,
    strip_prefix,
)
from inchipy.options import DEFAULT_OPTIONS, ParserOptions
from inchipy.types import InChI, MainLayer

LOG = logging.getLogger(__name__)

INCHI_PREFIX: Final[str] = "InChI="
LAYER_SEPARATOR: Final[str] = "/"


def parse_main_layer(
    text: str,
    options: ParserOptions = DEFAULT_OPTIONS,
) -> tuple[MainLayer, list[str]]:
    """Decode the formula, connection and hydrogen layers.

    Args:
        text: Everything after ``InChI=<version>/``.
        options: Parser options.

    Returns:
        The main layer and the remaining '/'-separated layer texts.
        A single trailing '/' is ignored.

    Example:
        >>> main, rest = parse_main_layer("C2H6O/c1-2-3/h3H,2H2,1H3/q+1")
        >>> main.connections[0].edges, rest
        (((0, 1), (1, 2)), ['q+1'])
    """
    segments = text.split(LAYER_SEPARATOR)
    if len(segments) > 1 and segments[-1] == "":
        segments.pop()

    formula = parse_formula(segments[0])
    pos = 1

    connections = None
    if pos < len(segments) and segments[pos].startswith(CONNECTION_PREFIX):
        layer = strip_prefix(segments[pos], CONNECTION_PREFIX)
        connections = parse_connection_layer(layer, formula.cursor(), options)
        pos += 1

    hydrogens = None
    if pos < len(segments) and segments[pos].startswith(HYDROGEN_PREFIX):
        layer = strip_prefix(segments[pos], HYDROGEN_PREFIX)
        hydrogens = parse_hydrogen_layer(layer, formula.cursor(), options)
        pos += 1

    return MainLayer(formula, connections, hydrogens), segments[pos:]


class InchiParser:
    """InChI string parser.

    Example:
        >>> inchi = InchiParser("InChI=1S/CH4/h1H4").parse()
        >>> inchi.hydrogens[0].fixed_h
        (4,)

    For convenience, use the module-level `parse()` function:
        >>> from inchipy import parse
        >>> inchi = parse("InChI=1S/CH4/h1H4")
    """

    def __init__(self, inchi: str, options: ParserOptions | None = None) -> None:
        """Initialize parser with an InChI string.

        Args:
            inchi: Full InChI string, including the 'InChI=' prefix.
            options: Parser options; defaults to 16-bit indices and both
                standard and non-standard versions.
        """
        self._inchi = inchi
        self._options = options if options is not None else DEFAULT_OPTIONS

    def parse(self) -> InChI:
        """Parse the InChI string.

        Returns:
            Decoded InChI.

        Raises:
            ParseError: On any malformed layer; the subclass names the problem.
            UnimplementedFeatureError: For proton-only InChIs.
        """
        text = self._inchi
        if not text.startswith(INCHI_PREFIX):
            raise MissingPrefixError(f"Missing '{INCHI_PREFIX}' prefix", text, 0)
        pos = len(INCHI_PREFIX)

        version = self._match_version(text[pos:])
        if version is None:
            raise MissingVersionPrefixError("Missing version prefix", text, pos)
        pos += len(version)

        if not text.startswith(LAYER_SEPARATOR, pos):
            raise MissingForwardSlashError(
                "Missing '/' before the formula layer", text, pos
            )
        pos += 1

        if text.startswith(PROTON_PREFIX, pos):
            raise UnimplementedFeatureError("proton-only InChIs")

        main_layer, remaining = parse_main_layer(text[pos:], self._options)

        extra_layers: list[tuple[str, str]] = []
        for segment in remaining:
            if not segment:
                raise UnrecognizedLayerPrefixError(LAYER_SEPARATOR, text)
            prefix = segment[0]
            if prefix not in KNOWN_LAYER_PREFIXES:
                raise UnrecognizedLayerPrefixError(prefix, text)
            extra_layers.append((prefix, segment[1:]))

        if extra_layers:
            LOG.debug(
                f"Keeping {len(extra_layers)} undecoded layers: "
                f"{''.join(prefix for prefix, _ in extra_layers)}"
            )
        return InChI(version, main_layer, tuple(extra_layers))

    def _match_version(self, text: str) -> str | None:
        for version in self._options.allowed_versions:
            if text.startswith(version):
                return version
        return None


def parse(inchi: str, options: ParserOptions | None = None) -> InChI:
    """Parse an InChI string.

    This is a convenience function that creates an InchiParser and
    calls parse().

    Args:
        inchi: InChI string to parse.
        options: Optional parser options.

    Returns:
        Decoded InChI.

    Raises:
        ParseError: If the InChI is invalid.

    Example:
        >>> inchi = parse("InChI=1S/C2H6O/c1-2-3/h3H,2H2,1H3")
        >>> inchi.connections[0].edges
        ((0, 1), (1, 2))
    """
    return InchiParser(inchi, options).parse()
