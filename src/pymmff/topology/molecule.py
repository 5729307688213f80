"""
In-memory molecular graph.

A small concrete :class:`MolecularGraph` for building typed molecules by
hand: atoms with MMFF types, bonds with formal orders and aromaticity,
and explicitly declared rings.
"""
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from pymmff.core import atom_types

from .graph import MolecularGraph, Ring

# Last atomic number of each periodic-table row
_ROW_ENDS = (2, 10, 18, 36, 54, 86, 118)


def period_of(atomic_number: int) -> int:
    """
    Periodic-table row of an element.

    Args:
        atomic_number: Atomic number Z (>= 1).

    Returns:
        Row number, 1 for H and He.

    Raises:
        ValueError: If ``atomic_number`` is not a known element.
    """
    if atomic_number < 1:
        raise ValueError(f"Atomic number must be positive, got {atomic_number}")
    for row, last in enumerate(_ROW_ENDS, start=1):
        if atomic_number <= last:
            return row
    raise ValueError(f"Unknown element with atomic number {atomic_number}")


class Molecule(MolecularGraph):
    """
    Hand-built molecule implementing the molecular-graph interface.

    Example:
        >>> mol = Molecule()
        >>> c1, c2 = mol.add_atom(1), mol.add_atom(1)
        >>> mol.add_bond(c1, c2)
        >>> mol.bonds()
        [(0, 1)]
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._types: List[int] = []
        self._periods: List[int] = []
        self._neighbors: List[List[int]] = []
        self._bonds: Dict[FrozenSet[int], Tuple[int, bool]] = {}
        self._rings: List[Ring] = []

    def add_atom(self, type_number: int, period: Optional[int] = None) -> int:
        """
        Add an atom and return its index.

        Args:
            type_number: MMFF atom type (1..99).
            period: Periodic-table row. Derived from the type's element
                when omitted.

        Raises:
            ValueError: If ``period`` is omitted and cannot be derived.
        """
        if period is None:
            record = atom_types.get(type_number)
            if record is None or record.atomic_number == 0:
                raise ValueError(
                    f"Cannot derive period for atom type {type_number}; pass it explicitly"
                )
            period = period_of(record.atomic_number)

        self._types.append(type_number)
        self._periods.append(period)
        self._neighbors.append([])
        return len(self._types) - 1

    def add_bond(self, i: int, j: int, order: int = 1, aromatic: bool = False) -> None:
        """
        Bond atoms i and j.

        Raises:
            ValueError: On self-bonds, unknown atoms or non-positive order.
        """
        if i == j:
            raise ValueError("Cannot bond an atom to itself")
        for index in (i, j):
            if index < 0 or index >= len(self._types):
                raise ValueError(f"Atom index {index} out of range")
        if order < 1:
            raise ValueError(f"Bond order must be positive, got {order}")

        key = frozenset((i, j))
        if key not in self._bonds:
            self._neighbors[i].append(j)
            self._neighbors[j].append(i)
        self._bonds[key] = (order, aromatic)

    def add_ring(self, atoms: Iterable[int], aromatic: bool = False) -> Ring:
        """Declare a ring over ``atoms``."""
        ring = Ring(frozenset(atoms), aromatic)
        if ring.size < 3:
            raise ValueError(f"A ring needs at least 3 atoms, got {ring.size}")
        self._rings.append(ring)
        return ring

    def set_type(self, index: int, type_number: int) -> None:
        self._types[index] = type_number

    # ------------------------------------------------------------------ #
    #  MolecularGraph interface
    # ------------------------------------------------------------------ #

    def num_atoms(self) -> int:
        return len(self._types)

    def type_number(self, index: int) -> int:
        return self._types[index]

    def period(self, index: int) -> int:
        return self._periods[index]

    def neighbors(self, index: int) -> List[int]:
        return list(self._neighbors[index])

    def is_bonded(self, i: int, j: int) -> bool:
        return frozenset((i, j)) in self._bonds

    def bond_order(self, i: int, j: int) -> int:
        bond = self._bonds.get(frozenset((i, j)))
        return bond[0] if bond else 0

    def is_aromatic_bond(self, i: int, j: int) -> bool:
        bond = self._bonds.get(frozenset((i, j)))
        return bool(bond and bond[1])

    def rings(self, index: int) -> List[Ring]:
        return [ring for ring in self._rings if index in ring.atoms]

    def __len__(self) -> int:
        return self.num_atoms()

    def __repr__(self) -> str:
        return f"Molecule(name={self.name!r}, atoms={self.num_atoms()}, bonds={len(self._bonds)})"
