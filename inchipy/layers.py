"""
Layer prefixes and component splitting shared by the layer decoders.

The connection and hydrogen layers both list one entry per mixture
component separated by ';'. An entry may start with ``n*`` to stand for
``n`` consecutive identical components.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Final

from inchipy.exceptions import WrongPrefixError
from inchipy.lexer import Cursor

CONNECTION_PREFIX: Final[str] = "c"
HYDROGEN_PREFIX: Final[str] = "h"
PROTON_PREFIX: Final[str] = "p"

# c = connections, h = H atoms, q = charge, p = protons,
# b = double bond stereo, t = tetrahedral stereo, m = stereo type,
# s = stereo bond notation, i = isotopes, f = fixed H, r = reconnected
KNOWN_LAYER_PREFIXES: Final[frozenset[str]] = frozenset("chqpbtmsifr")

COMPONENT_SEPARATOR: Final[str] = ";"
REPETITION_MARK: Final[str] = "*"


@dataclass(frozen=True, slots=True)
class LayerComponent:
    """One ';'-separated entry of a layer.

    Attributes:
        repetitions: Number of components this entry stands for.
        body: Entry text after the ``n*`` prefix.
        offset: Position of body within the layer text.
    """

    repetitions: int
    body: str
    offset: int


def strip_prefix(text: str, prefix: str) -> str:
    """Remove a single-character layer prefix.

    Raises:
        WrongPrefixError: If text does not start with prefix.
    """
    if not text.startswith(prefix):
        raise WrongPrefixError(prefix, text)
    return text[len(prefix):]


def split_components(text: str) -> list[LayerComponent]:
    """Split de-prefixed layer text into components.

    Example:
        >>> [(c.repetitions, c.body) for c in split_components("2*1-2;1H")]
        [(2, '1-2'), (1, '1H')]
    """
    components: list[LayerComponent] = []
    offset = 0
    for entry in text.split(COMPONENT_SEPARATOR):
        repetitions, skip = _read_repetitions(entry)
        components.append(LayerComponent(repetitions, entry[skip:], offset + skip))
        offset += len(entry) + 1
    return components


def _read_repetitions(entry: str) -> tuple[int, int]:
    """Return (repetitions, characters consumed) for an optional ``n*``."""
    cur = Cursor(entry)
    if not cur.peek_is_digit():
        return 1, 0
    digits = cur.read_digits()
    if cur.peek() != REPETITION_MARK:
        return 1, 0
    # Let the numeric lexer report zero and overflow
    repetitions = Cursor(digits).read_index(sys.maxsize)
    return repetitions, len(digits) + 1
