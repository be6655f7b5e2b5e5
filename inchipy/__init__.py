"""
Inchipy - Pure Python InChI layer decoder.

A zero-dependency library that decodes the main layer of an InChI
(formula, atom connections, hydrogens) into immutable Python values.

    >>> from inchipy import parse
    >>> inchi = parse("InChI=1S/C2H6O/c1-2-3/h3H,2H2,1H3")
    >>> inchi.connections[0].edges
    ((0, 1), (1, 2))
    >>> inchi.hydrogens[0].fixed_h
    (3, 2, 1)

Submodules:
    inchipy.connection - Atom connection layer ('c')
    inchipy.hydrogen   - Hydrogen layer ('h')
"""

__version__ = "0.1.0"

# Core types
from inchipy.types import (
    InChI,
    MainLayer,
    MolecularGraph,
    HydrogenComponent,
    MobileHydrogenGroup,
)
from inchipy.formula import InchiFormula, Subformula, SubformulaCursor, parse_formula

# Configuration
from inchipy.options import IndexPolicy, ParserOptions

# Parsing
from inchipy.parser import parse, parse_main_layer, InchiParser

# Exceptions
from inchipy.exceptions import InchiError, ParseError, UnimplementedFeatureError

# Submodules
from inchipy import connection, hydrogen

__all__ = [
    # Types
    "InChI", "MainLayer", "MolecularGraph", "HydrogenComponent", "MobileHydrogenGroup",
    # Formula
    "InchiFormula", "Subformula", "SubformulaCursor", "parse_formula",
    # Configuration
    "IndexPolicy", "ParserOptions",
    # Parsing
    "parse", "parse_main_layer", "InchiParser",
    # Exceptions
    "InchiError", "ParseError", "UnimplementedFeatureError",
    # Submodules
    "connection", "hydrogen",
]
