"""
Abstract molecular-graph interface consumed by the parameter engine.

The parameter engine never walks coordinates or perceives rings itself;
it only asks the questions defined by :class:`MolecularGraph`. Any
toolkit molecule can be adapted by implementing these methods.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import FrozenSet, Iterator, List, Optional, Sequence, Tuple

from pymmff.core import AtomTypeRecord, atom_types


@dataclass(frozen=True)
class Ring:
    """
    A ring of atoms as reported by the molecular graph.

    Attributes:
        atoms: Indices of the ring atoms.
        aromatic: Whether the ring is aromatic under MMFF rules.
    """
    atoms: FrozenSet[int]
    aromatic: bool = False

    @property
    def size(self) -> int:
        return len(self.atoms)

    def contains(self, *indices: int) -> bool:
        """True if every index in ``indices`` is a ring member."""
        return all(i in self.atoms for i in indices)


class MolecularGraph(ABC):
    """
    Minimal capability interface over a typed molecule (Strategy Pattern).

    Atoms are addressed by integer index. Every atom carries an MMFF
    type number and the periodic-table row of its element.

    Example:
        >>> from pymmff.topology import Molecule
        >>> mol = Molecule()
        >>> c = mol.add_atom(1)
        >>> h = mol.add_atom(5)
        >>> mol.add_bond(c, h)
        >>> mol.atom(c).is_bonded_to(mol.atom(h))
        True
    """

    @abstractmethod
    def num_atoms(self) -> int:
        """Return the number of atoms."""
        pass

    @abstractmethod
    def type_number(self, index: int) -> int:
        """Return the MMFF type number assigned to atom ``index``."""
        pass

    @abstractmethod
    def period(self, index: int) -> int:
        """Return the periodic-table row (1 for H) of atom ``index``."""
        pass

    @abstractmethod
    def neighbors(self, index: int) -> Sequence[int]:
        """Return indices of atoms bonded to atom ``index``."""
        pass

    @abstractmethod
    def bond_order(self, i: int, j: int) -> int:
        """Return the formal bond order between i and j (0 if not bonded)."""
        pass

    @abstractmethod
    def is_aromatic_bond(self, i: int, j: int) -> bool:
        """Return True if the bond i-j is aromatic."""
        pass

    @abstractmethod
    def rings(self, index: int) -> Sequence[Ring]:
        """Return the rings that contain atom ``index``."""
        pass

    def is_bonded(self, i: int, j: int) -> bool:
        return j in self.neighbors(i)

    def bonds(self) -> List[Tuple[int, int]]:
        """
        Get all bonds as (i, j) tuples with i < j.

        Returns:
            List of bonded index pairs.
        """
        pairs = []
        for i in range(self.num_atoms()):
            for j in self.neighbors(i):
                if i < j:
                    pairs.append((i, j))
        return pairs

    def atom(self, index: int) -> "MmffAtom":
        if index < 0 or index >= self.num_atoms():
            raise IndexError(f"Atom index {index} out of range")
        return MmffAtom(self, index)

    def atoms(self) -> Iterator["MmffAtom"]:
        for index in range(self.num_atoms()):
            yield MmffAtom(self, index)


@dataclass(frozen=True)
class MmffAtom:
    """
    A typed atom viewed through its molecular graph.

    Attributes:
        graph: The owning molecular graph.
        index: Atom index within ``graph``.
    """
    graph: MolecularGraph
    index: int

    @property
    def type_number(self) -> int:
        return self.graph.type_number(self.index)

    @property
    def period(self) -> int:
        return self.graph.period(self.index)

    @property
    def parameters(self) -> Optional[AtomTypeRecord]:
        """Static atom-type record, or None for an out-of-range type."""
        return atom_types.get(self.type_number)

    def neighbors(self) -> List["MmffAtom"]:
        return [MmffAtom(self.graph, i) for i in self.graph.neighbors(self.index)]

    def is_bonded_to(self, other: "MmffAtom") -> bool:
        return self.graph.is_bonded(self.index, other.index)

    def rings(self) -> Sequence[Ring]:
        return self.graph.rings(self.index)
