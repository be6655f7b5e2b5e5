"""Cross-check decoded structures against RDKit's InChI reader."""

import pytest

from inchipy import parse

rdkit = pytest.importorskip("rdkit")
from rdkit import Chem


NEUTRAL_FIXED_H = [
    "InChI=1S/CH4/h1H4",
    "InChI=1S/H2O/h1H2",
    "InChI=1S/C2H6O/c1-2-3/h3H,2H2,1H3",
    "InChI=1S/C6H6/c1-2-4-6-5-3-1/h1-6H",
    "InChI=1S/C5H12/c1-5(2,3)4/h1-4H3",
    "InChI=1S/C2H6O.H2O/c1-2-3;/h3H,2H2,1H3;1H2",
    "InChI=1S/C6H12O6/c7-1-2-3(8)4(9)5(10)6(11)12-2/h2-11H,1H2",
    "InChI=1S/C8H10N4O2/c1-10-4-9-6-5(10)7(13)12(3)8(14)11(6)2/h4H,1-3H3",
]

MOBILE_OR_CHARGED = [
    "InChI=1S/C2H4O2/c1-2(3)4/h1H3,(H,3,4)",
    "InChI=1S/C9H8O4/c1-6(10)13-8-5-3-2-4-7(8)9(11)12/h2-5H,1H3,(H,11,12)",
    "InChI=1S/2ClH.Zn/h2*1H;/q;;+2/p-2",
]


def reference_mol(inchi: str):
    mol = Chem.MolFromInchi(inchi)
    assert mol is not None, f"RDKit could not read {inchi}"
    return mol


class TestAgainstRDKit:
    """Compare atom, bond and hydrogen counts with RDKit."""

    @pytest.mark.parametrize("inchi", NEUTRAL_FIXED_H + MOBILE_OR_CHARGED)
    def test_atom_and_bond_counts(self, inchi):
        decoded = parse(inchi)
        mol = reference_mol(inchi)
        assert sum(s.num_atoms for s in decoded.formula) == mol.GetNumAtoms()
        if decoded.connections is not None:
            num_edges = sum(g.num_edges for g in decoded.connections)
            assert num_edges == mol.GetNumBonds()

    @pytest.mark.parametrize("inchi", NEUTRAL_FIXED_H)
    def test_hydrogen_counts(self, inchi):
        decoded = parse(inchi)
        mol = reference_mol(inchi)
        expected = sum(atom.GetTotalNumHs() for atom in mol.GetAtoms())
        assert sum(h.total_hydrogens for h in decoded.hydrogens) == expected

    @pytest.mark.parametrize("inchi", NEUTRAL_FIXED_H)
    def test_per_atom_hydrogens(self, inchi):
        """Fixed hydrogen counts agree with RDKit atom by atom, up to ordering."""
        decoded = parse(inchi)
        mol = reference_mol(inchi)
        fixed_h = [h for component in decoded.hydrogens for h in component.fixed_h]
        assert sorted(fixed_h) == sorted(atom.GetTotalNumHs() for atom in mol.GetAtoms())
