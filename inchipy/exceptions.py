"""Custom exceptions for inchipy."""

from __future__ import annotations

from typing import Any


class InchiError(Exception):
    """Base exception for InChI decoding errors."""
    pass


class ParseError(InchiError):
    """Error during InChI parsing."""

    def __init__(self, message: str, text: str | None = None, position: int | None = None):
        self.message = message
        self.text = text
        self.position = position

        if text is not None and position is not None:
            super().__init__(f"{message}\n  {text}\n  {' ' * position}^")
        elif text is not None:
            super().__init__(f"{message} in: {text}")
        else:
            super().__init__(message)


class UnimplementedFeatureError(InchiError):
    """Valid InChI using a feature this library does not decode."""

    def __init__(self, feature: str):
        self.feature = feature
        super().__init__(f"Unimplemented feature: {feature}")


# Structural errors

class MissingPrefixError(ParseError):
    """The 'InChI=' prefix is missing."""


class MissingVersionPrefixError(ParseError):
    """The version prefix ('1S' or '1') is missing."""


class MissingForwardSlashError(ParseError):
    """A layer is not introduced by '/'."""


class WrongPrefixError(ParseError):
    """A layer does not start with the expected prefix character."""

    def __init__(self, expected: str, text: str | None = None):
        self.expected = expected
        super().__init__(f"Expected layer prefix '{expected}'", text, 0 if text else None)


class UnrecognizedLayerPrefixError(ParseError):
    """A layer starts with an unknown prefix character."""

    def __init__(self, prefix: str, text: str | None = None):
        self.prefix = prefix
        super().__init__(f"Unrecognized layer prefix: '{prefix}'", text)


# Formula errors

class FormulaError(ParseError):
    """Invalid molecular formula layer."""


class NotHillOrderedError(FormulaError):
    """Formula elements are not in Hill order."""


class UnknownElementError(FormulaError):
    """Formula references an element symbol that does not exist."""

    def __init__(self, symbol: str, text: str | None = None, position: int | None = None):
        self.symbol = symbol
        super().__init__(f"Unknown element symbol: '{symbol}'", text, position)


# Lexical errors

class InvalidCharacterError(ParseError):
    """Unexpected character in a layer."""

    def __init__(self, character: str, text: str | None = None, position: int | None = None):
        self.character = character
        super().__init__(f"Invalid character encountered: '{character}'", text, position)


class NumericOverflowError(ParseError):
    """A number does not fit the configured index width."""

    def __init__(self, value: int, limit: int, text: str | None = None, position: int | None = None):
        self.value = value
        self.limit = limit
        super().__init__(f"Number {value} exceeds limit {limit}", text, position)


# Grammatical errors

class IllegalConsecutiveTokensError(ParseError):
    """A punctuation token is followed by something other than an index."""

    def __init__(self, previous: Any, illegal: Any, text: str | None = None, position: int | None = None):
        self.previous = previous
        self.illegal = illegal
        super().__init__(
            f"Illegal consecutive tokens: '{previous}' followed by '{illegal}'",
            text,
            position,
        )


class UnexpectedEndOfInputError(ParseError):
    """Input ended while a token still expected a continuation."""

    def __init__(self, token: Any = None, text: str | None = None, position: int | None = None):
        self.token = token
        if token is None:
            message = "Unexpected end of input"
        else:
            message = f"Unexpected end of input after '{token}'"
        super().__init__(message, text, position)


class ClosingBracketBeforeOpeningBracketError(ParseError):
    """A ')' appeared with no open branch."""

    def __init__(self, text: str | None = None, position: int | None = None):
        super().__init__("There was a closing bracket before an open one", text, position)


class CommaBeforeAnyEdgeError(ParseError):
    """A ',' appeared outside a branch or before the arm had any atom."""

    def __init__(self, text: str | None = None, position: int | None = None):
        super().__init__("Comma before any edge was added", text, position)


class IllegalStartingTokenError(ParseError):
    """A component starts with a token that cannot begin a chain."""

    def __init__(self, token: Any, text: str | None = None, position: int | None = None):
        self.token = token
        super().__init__(f"Illegal starting token: '{token}'", text, position)


# Semantic errors

class SelfLoopError(ParseError):
    """An atom is bonded to itself. ``atom`` is the 1-based index."""

    def __init__(self, atom: int, text: str | None = None):
        self.atom = atom
        super().__init__(f"Self loop detected: {atom}", text)


class ZeroIndexError(ParseError):
    """A 1-based number was zero."""

    def __init__(self, message: str = "Index cannot be zero", text: str | None = None, position: int | None = None):
        super().__init__(message, text, position)


class ZeroAtomIndexError(ZeroIndexError):
    """A hydrogen layer atom index was zero."""

    def __init__(self, text: str | None = None):
        super().__init__("Atom index cannot be zero", text)


class AtomIndexOutOfBoundsError(ParseError):
    """A 1-based atom index exceeds the component's atom count."""

    def __init__(self, index: int, num_atoms: int, text: str | None = None):
        self.index = index
        self.num_atoms = num_atoms
        super().__init__(
            f"Atom index {index} out of bounds for component with {num_atoms} atoms",
            text,
        )


class InvalidRangeError(ParseError):
    """An atom range whose start is greater than its end."""

    def __init__(self, start: int, end: int, text: str | None = None):
        self.start = start
        self.end = end
        super().__init__(f"Invalid atom range: {start}-{end}", text)


# Cross-layer errors

class FormulaMixtureMismatchError(ParseError):
    """A layer's components do not line up with the formula's subformulas."""

    def __init__(self, expected: int, found: int | None = None, layer: str = "c", text: str | None = None):
        self.expected = expected
        self.found = found
        self.layer = layer
        if found is None:
            message = (
                f"Molecular formula contains {expected} mixtures but "
                f"layer '{layer}' does not match"
            )
        else:
            message = (
                f"Molecular formula contains {expected} mixtures but "
                f"layer '{layer}' describes {found}"
            )
        super().__init__(message, text)
