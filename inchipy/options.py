"""
Parser configuration.

The index policy fixes the width of atom indices accepted in the
connection and hydrogen layers. 16-bit indices cover every compound in
public databases; the word-sized policy is there for synthetic inputs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Final

from inchipy.exceptions import NumericOverflowError

STANDARD_VERSION: Final[str] = "1S"
NON_STANDARD_VERSION: Final[str] = "1"


@dataclass(frozen=True, slots=True)
class IndexPolicy:
    """Unsigned integer width used for atom indices and edge counts.

    Attributes:
        name: Short label, e.g. "u16".
        bits: Width in bits.
    """

    name: str
    bits: int

    U16: ClassVar["IndexPolicy"]
    WORD: ClassVar["IndexPolicy"]

    def __post_init__(self) -> None:
        if self.bits <= 0:
            raise ValueError(f"Index width must be positive, got {self.bits}")

    @property
    def max_value(self) -> int:
        """Largest representable index."""
        return (1 << self.bits) - 1

    def fits(self, value: int) -> bool:
        return 0 <= value <= self.max_value

    def check(self, value: int, text: str | None = None) -> int:
        """Return value unchanged, or raise if it does not fit.

        Raises:
            NumericOverflowError: If value exceeds max_value.
        """
        if not self.fits(value):
            raise NumericOverflowError(value, self.max_value, text)
        return value


IndexPolicy.U16 = IndexPolicy("u16", 16)
IndexPolicy.WORD = IndexPolicy("word", 64)


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Options shared by every layer decoder of one parse.

    Attributes:
        index_policy: Width of atom indices.
        allowed_versions: Version prefixes accepted after 'InChI='.
            Checked in order, so '1S' must come before '1'.
    """

    index_policy: IndexPolicy = IndexPolicy.U16
    allowed_versions: tuple[str, ...] = field(
        default=(STANDARD_VERSION, NON_STANDARD_VERSION)
    )

    def __post_init__(self) -> None:
        if not self.allowed_versions:
            raise ValueError("At least one InChI version must be allowed")


DEFAULT_OPTIONS: Final[ParserOptions] = ParserOptions()
