"""
Decoded InChI data types.

All values are immutable and built once per decode. Atom indices are
0-based everywhere in this module; the 1-based numbering of the InChI text
is converted when the layers are read.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Iterator

from inchipy.exceptions import AtomIndexOutOfBoundsError, SelfLoopError

if TYPE_CHECKING:
    from inchipy.formula import InchiFormula


Edge = tuple[int, int]


@dataclass(frozen=True, slots=True)
class MolecularGraph:
    """Undirected skeleton of one mixture component.

    Attributes:
        num_vertices: Number of skeletal (non-hydrogen) atoms.
        edges: Canonical (min, max) pairs, ascending and unique.

    Example:
        >>> g = MolecularGraph.from_edges(3, [(1, 0), (1, 2)])
        >>> g.edges
        ((0, 1), (1, 2))
        >>> list(g.neighbors(1))
        [0, 2]
    """

    num_vertices: int
    edges: tuple[Edge, ...] = ()

    @classmethod
    def from_edges(
        cls,
        num_vertices: int,
        edges: Iterable[Edge],
        text: str | None = None,
    ) -> "MolecularGraph":
        """Build a graph from 0-based pairs in any order.

        Pairs are canonicalized, deduplicated and sorted.

        Raises:
            SelfLoopError: If a pair joins an atom to itself.
            AtomIndexOutOfBoundsError: If an endpoint is not below num_vertices.
        """
        canonical: set[Edge] = set()
        for a, b in edges:
            if a == b:
                raise SelfLoopError(a + 1, text)
            for atom in (a, b):
                if not 0 <= atom < num_vertices:
                    raise AtomIndexOutOfBoundsError(atom + 1, num_vertices, text)
            canonical.add((a, b) if a < b else (b, a))
        return cls(num_vertices, tuple(sorted(canonical)))

    def __len__(self) -> int:
        """Return number of vertices."""
        return self.num_vertices

    @property
    def num_edges(self) -> int:
        return len(self.edges)

    def has_edge(self, a: int, b: int) -> bool:
        """Check whether a and b are bonded, in either order."""
        pair = (a, b) if a < b else (b, a)
        return pair in self.edges

    def neighbors(self, atom: int) -> Iterator[int]:
        """Iterate over indices of atoms bonded to atom, ascending."""
        found = []
        for a, b in self.edges:
            if a == atom:
                found.append(b)
            elif b == atom:
                found.append(a)
        return iter(sorted(found))

    def degree(self, atom: int) -> int:
        return sum(1 for _ in self.neighbors(atom))

    def adjacency(self) -> list[list[int]]:
        """Symmetric adjacency lists, one per vertex."""
        adj: list[list[int]] = [[] for _ in range(self.num_vertices)]
        for a, b in self.edges:
            adj[a].append(b)
            adj[b].append(a)
        for neighbors in adj:
            neighbors.sort()
        return adj

    def copy(self) -> "MolecularGraph":
        """Value-equal graph that shares no containers with this one."""
        return MolecularGraph(self.num_vertices, tuple((a, b) for a, b in self.edges))


@dataclass(frozen=True, slots=True)
class MobileHydrogenGroup:
    """Hydrogens shared among a set of candidate atoms.

    Attributes:
        count: Number of mobile hydrogens (1-255).
        charged: True when the group carries a negative charge ('H-').
        atoms: 0-based candidate atoms, in text order without repeats.
    """

    count: int
    charged: bool
    atoms: tuple[int, ...]

    def __str__(self) -> str:
        head = "H" if self.count == 1 else f"H{self.count}"
        if self.charged:
            head += "-"
        return "(" + ",".join([head, *(str(a + 1) for a in self.atoms)]) + ")"


@dataclass(frozen=True, slots=True)
class HydrogenComponent:
    """Hydrogen assignment of one mixture component.

    Attributes:
        fixed_h: Fixed hydrogen count per atom, one entry per atom.
        mobile_groups: Mobile hydrogen groups in text order.
    """

    fixed_h: tuple[int, ...]
    mobile_groups: tuple[MobileHydrogenGroup, ...] = ()

    @property
    def num_atoms(self) -> int:
        return len(self.fixed_h)

    @property
    def total_fixed(self) -> int:
        return sum(self.fixed_h)

    @property
    def total_mobile(self) -> int:
        return sum(group.count for group in self.mobile_groups)

    @property
    def total_hydrogens(self) -> int:
        """Fixed plus mobile hydrogen count."""
        return self.total_fixed + self.total_mobile

    def copy(self) -> "HydrogenComponent":
        """Value-equal component that shares no containers with this one."""
        return HydrogenComponent(
            tuple(h for h in self.fixed_h),
            tuple(
                MobileHydrogenGroup(g.count, g.charged, tuple(a for a in g.atoms))
                for g in self.mobile_groups
            ),
        )


AtomConnectionLayer = tuple[MolecularGraph, ...]
HydrogensSubLayer = tuple[HydrogenComponent, ...]


@dataclass(frozen=True, slots=True)
class MainLayer:
    """Formula, connection and hydrogen layers.

    Attributes:
        formula: Parsed formula layer.
        connections: One graph per component, or None without a 'c' layer.
        hydrogens: One component per mixture, or None without an 'h' layer.
    """

    formula: "InchiFormula"
    connections: AtomConnectionLayer | None = None
    hydrogens: HydrogensSubLayer | None = None

    @property
    def number_of_mixtures(self) -> int:
        return self.formula.number_of_mixtures


@dataclass(frozen=True, slots=True)
class InChI:
    """Decoded InChI.

    Attributes:
        version: Version prefix, '1S' for standard InChI.
        main_layer: Decoded main layer.
        extra_layers: (prefix, text) of the layers after the main layer,
            kept undecoded.
    """

    version: str
    main_layer: MainLayer
    extra_layers: tuple[tuple[str, str], ...] = field(default=())

    @property
    def is_standard(self) -> bool:
        return self.version.endswith("S")

    @property
    def formula(self) -> "InchiFormula":
        return self.main_layer.formula

    @property
    def connections(self) -> AtomConnectionLayer | None:
        return self.main_layer.connections

    @property
    def hydrogens(self) -> HydrogensSubLayer | None:
        return self.main_layer.hydrogens

    def layer(self, prefix: str) -> str | None:
        """Undecoded text of an extra layer (without its prefix), if present."""
        for layer_prefix, text in self.extra_layers:
            if layer_prefix == prefix:
                return text
        return None
