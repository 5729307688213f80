"""
Static MMFF94 atom-type properties.

This module provides the per-type property table (the MMFFPROP rows)
used by the bond, angle and torsion classifiers, and a small registry
for looking records up by type number.
"""
from dataclasses import dataclass
from typing import Dict, Iterator, Optional

import numpy as np

MAX_ATOM_TYPE = 99

# Columns: aspec, crd, val, pilp, mltb, arom, lin, sbmb (row index = type - 1)
_ATOM_PROPERTIES = np.array([
    [6, 4, 4, 0, 0, 0, 0, 0],
    [6, 3, 4, 0, 2, 0, 0, 1],
    [6, 3, 4, 0, 2, 0, 0, 1],
    [6, 2, 4, 0, 3, 0, 1, 1],
    [1, 1, 1, 0, 0, 0, 0, 0],
    [8, 2, 2, 1, 0, 0, 0, 0],
    [8, 1, 2, 0, 2, 0, 0, 0],
    [7, 3, 3, 1, 0, 0, 0, 0],
    [7, 2, 3, 0, 2, 0, 0, 1],
    [7, 3, 3, 1, 1, 0, 0, 0],
    [9, 1, 1, 1, 0, 0, 0, 0],
    [17, 1, 1, 1, 0, 0, 0, 0],
    [35, 1, 1, 1, 0, 0, 0, 0],
    [53, 1, 1, 1, 0, 0, 0, 0],
    [16, 2, 2, 1, 0, 0, 0, 0],
    [16, 1, 2, 0, 2, 0, 0, 0],
    [16, 3, 4, 0, 2, 0, 0, 0],
    [16, 4, 4, 0, 0, 0, 0, 0],
    [14, 4, 4, 0, 0, 0, 0, 0],
    [6, 4, 4, 0, 0, 0, 0, 0],
    [1, 1, 1, 0, 0, 0, 0, 0],
    [6, 4, 4, 0, 0, 0, 0, 0],
    [1, 1, 1, 0, 0, 0, 0, 0],
    [1, 1, 1, 0, 0, 0, 0, 0],
    [15, 4, 4, 0, 0, 0, 0, 0],
    [15, 3, 3, 1, 0, 0, 0, 0],
    [1, 1, 1, 0, 0, 0, 0, 0],
    [1, 1, 1, 0, 0, 0, 0, 0],
    [1, 1, 1, 0, 0, 0, 0, 0],
    [6, 3, 4, 0, 2, 0, 0, 1],
    [1, 1, 1, 0, 0, 0, 0, 0],
    [8, 1, 12, 1, 1, 0, 0, 0],
    [1, 1, 1, 0, 0, 0, 0, 0],
    [7, 4, 4, 0, 0, 0, 0, 0],
    [8, 1, 1, 1, 1, 0, 0, 0],
    [1, 1, 1, 0, 0, 0, 0, 0],
    [6, 3, 4, 0, 2, 1, 0, 1],
    [7, 2, 3, 0, 2, 1, 0, 0],
    [7, 3, 3, 1, 1, 1, 0, 1],
    [7, 3, 3, 1, 0, 0, 0, 0],
    [6, 3, 4, 0, 1, 0, 0, 0],
    [7, 1, 3, 0, 3, 0, 0, 0],
    [7, 3, 3, 1, 0, 0, 0, 0],
    [16, 2, 2, 1, 1, 1, 0, 0],
    [7, 3, 4, 0, 2, 0, 0, 0],
    [7, 2, 3, 0, 2, 0, 0, 0],
    [7, 1, 2, 0, 2, 0, 0, 0],
    [7, 2, 2, 0, 0, 0, 0, 0],
    [8, 3, 3, 0, 0, 0, 0, 0],
    [1, 1, 1, 0, 0, 0, 0, 0],
    [8, 2, 3, 0, 2, 0, 0, 0],
    [1, 1, 1, 0, 0, 0, 0, 0],
    [7, 2, 4, 0, 2, 0, 1, 0],
    [7, 3, 4, 0, 2, 0, 0, 1],
    [7, 3, 34, 0, 1, 0, 0, 0],
    [7, 3, 34, 0, 1, 0, 0, 0],
    [6, 3, 4, 0, 2, 0, 0, 1],
    [7, 3, 4, 0, 1, 1, 0, 1],
    [8, 2, 2, 1, 1, 1, 0, 0],
    [6, 1, 3, 0, 3, 0, 0, 0],
    [7, 2, 4, 0, 3, 0, 1, 0],
    [7, 2, 2, 1, 0, 0, 0, 0],
    [6, 3, 4, 0, 2, 1, 0, 1],
    [6, 3, 4, 0, 2, 1, 0, 1],
    [7, 2, 3, 0, 2, 1, 0, 0],
    [7, 2, 3, 0, 2, 1, 0, 0],
    [7, 3, 4, 0, 2, 0, 0, 1],
    [7, 4, 4, 0, 0, 0, 0, 0],
    [7, 3, 4, 0, 1, 1, 0, 0],
    [8, 2, 2, 1, 0, 0, 0, 0],
    [1, 1, 1, 0, 0, 0, 0, 0],
    [16, 1, 1, 1, 1, 0, 0, 0],
    [16, 3, 3, 0, 0, 0, 0, 0],
    [16, 2, 4, 0, 2, 0, 0, 0],
    [15, 2, 3, 0, 2, 0, 0, 1],
    [7, 2, 2, 1, 0, 0, 0, 0],
    [17, 4, 4, 0, 0, 0, 0, 0],
    [6, 3, 4, 0, 2, 1, 0, 1],
    [7, 2, 3, 0, 2, 1, 0, 0],
    [6, 3, 4, 0, 2, 0, 0, 1],
    [7, 3, 4, 0, 1, 1, 0, 1],
    [7, 3, 4, 0, 1, 1, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0],
    [26, 0, 0, 0, 0, 0, 0, 0],
    [26, 0, 0, 0, 0, 0, 0, 0],
    [9, 0, 0, 0, 0, 0, 0, 0],
    [17, 0, 0, 0, 0, 0, 0, 0],
    [35, 0, 0, 0, 0, 0, 0, 0],
    [3, 0, 0, 0, 0, 0, 0, 0],
    [11, 0, 0, 0, 0, 0, 0, 0],
    [19, 0, 0, 0, 0, 0, 0, 0],
    [30, 0, 0, 0, 0, 0, 0, 0],
    [20, 0, 0, 0, 0, 0, 0, 0],
    [29, 0, 0, 0, 0, 0, 0, 0],
    [29, 0, 0, 0, 0, 0, 0, 0],
    [12, 0, 0, 0, 0, 0, 0, 0],
], dtype=np.int16)


@dataclass(frozen=True)
class AtomTypeRecord:
    """
    Immutable property row for one MMFF atom type.

    Attributes:
        type_number: MMFF symbolic type number (1..99).
        atomic_number: Atomic number of the element (``aspec``).
        crd: Number of explicit connections.
        val: Total bond count, counting multiplicity.
        pilp: 1 if the atom has a pi lone pair.
        mltb: Multiple-bond designation (0, 1, 2 or 3).
        arom: True if the type is aromatic.
        lin: True if the type is linear.
        sbmb: True if the type can take part in a single bond between
            two multiple-bonded atoms.

    Example:
        >>> from pymmff.core import atom_types
        >>> atom_types[37].arom
        True
    """
    type_number: int
    atomic_number: int
    crd: int
    val: int
    pilp: int
    mltb: int
    arom: bool
    lin: bool
    sbmb: bool


class AtomTypeRegistry:
    """
    Registry of the static atom-type records (Singleton pattern).

    The table is immutable, so a single shared instance is enough.
    Lookups outside 1..99 yield ``None`` rather than raising.
    """

    _instance: Optional["AtomTypeRegistry"] = None
    _initialized: bool = False

    def __new__(cls) -> "AtomTypeRegistry":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if not AtomTypeRegistry._initialized:
            self._records: Dict[int, AtomTypeRecord] = {}
            self._initialize_table()
            AtomTypeRegistry._initialized = True

    def _initialize_table(self) -> None:
        for index, row in enumerate(_ATOM_PROPERTIES):
            aspec, crd, val, pilp, mltb, arom, lin, sbmb = (int(v) for v in row)
            self._records[index + 1] = AtomTypeRecord(
                type_number=index + 1,
                atomic_number=aspec,
                crd=crd,
                val=val,
                pilp=pilp,
                mltb=mltb,
                arom=bool(arom),
                lin=bool(lin),
                sbmb=bool(sbmb),
            )

    def get(self, type_number: int) -> Optional[AtomTypeRecord]:
        """
        Get the record for a type number.

        Args:
            type_number: MMFF atom type.

        Returns:
            The record, or None if ``type_number`` is outside 1..99.
        """
        if type_number < 1 or type_number > MAX_ATOM_TYPE:
            return None
        return self._records.get(type_number)

    @property
    def table(self) -> np.ndarray:
        """Read-only view of the raw property array."""
        view = _ATOM_PROPERTIES.view()
        view.flags.writeable = False
        return view

    def __contains__(self, type_number: int) -> bool:
        return self.get(type_number) is not None

    def __getitem__(self, type_number: int) -> AtomTypeRecord:
        record = self.get(type_number)
        if record is None:
            raise KeyError(f"Atom type {type_number} not in 1..{MAX_ATOM_TYPE}")
        return record

    def __iter__(self) -> Iterator[AtomTypeRecord]:
        return iter(self._records[t] for t in sorted(self._records))

    def __len__(self) -> int:
        return len(self._records)


# Module-level convenience instance (Singleton)
atom_types = AtomTypeRegistry()
