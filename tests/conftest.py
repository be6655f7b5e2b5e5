"""Test configuration and fixtures for inchipy tests."""

import pytest

from inchipy.formula import InchiFormula, Subformula, parse_formula


@pytest.fixture
def make_formula():
    """Factory for formulas of carbon-only subformulas with the given atom counts."""

    def factory(*num_atoms: int) -> InchiFormula:
        return InchiFormula(
            text=".".join(f"C{n}" for n in num_atoms),
            subformulas=tuple(Subformula((("C", n),)) for n in num_atoms),
        )

    return factory


@pytest.fixture
def ethanol_formula() -> InchiFormula:
    return parse_formula("C2H6O")


@pytest.fixture
def valid_inchis() -> list[str]:
    """Real InChIs covering branches, rings, mixtures and mobile hydrogens."""
    return [
        "InChI=1S/CH4/h1H4",
        "InChI=1S/H2O/h1H2",
        "InChI=1S/C2H6O/c1-2-3/h3H,2H2,1H3",
        "InChI=1S/C6H6/c1-2-4-6-5-3-1/h1-6H",
        "InChI=1S/C2H4O2/c1-2(3)4/h1H3,(H,3,4)",
        "InChI=1S/C5H12/c1-5(2,3)4/h1-4H3",
        "InChI=1S/C2H6O.H2O/c1-2-3;/h3H,2H2,1H3;1H2",
        "InChI=1S/2ClH.Zn/h2*1H;/q;;+2/p-2",
        "InChI=1S/C6H12O6/c7-1-2-3(8)4(9)5(10)6(11)12-2/h2-11H,1H2",
        "InChI=1S/C9H8O4/c1-6(10)13-8-5-3-2-4-7(8)9(11)12/h2-5H,1H3,(H,11,12)",
        "InChI=1S/C8H10N4O2/c1-10-4-9-6-5(10)7(13)12(3)8(14)11(6)2/h4H,1-3H3",
        "InChI=1S/C2H6O/c1-2-3/h3H,2H2,1H3/q+1/b2-3",
    ]


@pytest.fixture
def invalid_inchis() -> list[str]:
    """InChIs that must fail to decode."""
    return [
        "1S/C2H6O/c1-2-3/h3H,2H2,1H3",
        "InChI=/C2H6O/c1-2-3/h3H,2H2,1H3",
        "InChI=1SC2H6O/c1-2-3/h3H,2H2,1H3",
        "InChI=1S/C2OH6/",
        "InChI=1S/C2H6O/c1)/",
        "InChI=1S/C2H6O/c1-1-3",
        "InChI=1S/C2H6/c1-2/h4H",
        "InChI=1S/CH4/xGARBAGE",
        "InChI=1S/CH4.C2H6/h1H",
    ]
