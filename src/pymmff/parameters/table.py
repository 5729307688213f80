"""
In-memory MMFF parameter table.

One mapping per term kind. Bonded kinds are keyed by the canonical
integer index from :mod:`pymmff.parameters.indexing`; van der Waals and
partial-charge rows are keyed by atom type; charge and default
stretch-bend rows are kept in file order and scanned linearly.

The table is append-only while it is being loaded and read-only once
:meth:`ParameterTable.freeze` has been called.
"""
from typing import Dict, List, Optional

from pymmff.core import (
    MAX_ATOM_TYPE,
    AngleBendParameters,
    BondStrechParameters,
    ChargeParameters,
    DefaultStrechBendParameters,
    OutOfPlaneBendParameters,
    PartialChargeParameters,
    StrechBendParameters,
    TorsionParameters,
    VanDerWaalsParameters,
)

from . import indexing
from .indexing import TermKind


class ParameterTable:
    """
    Parsed MMFF parameters for one data source.

    Attributes:
        source: Identifier of the data source the table was loaded from.

    Example:
        >>> table = ParameterTable("inline")
        >>> table.add_bond_strech(0, 5, 1, BondStrechParameters(4.766, 1.093))
        >>> table.freeze()
        >>> table.bond_strech(0, 1, 5).r0
        1.093
    """

    def __init__(self, source: str = "") -> None:
        self.source = source
        self._frozen = False
        self._bond_strech: Dict[int, BondStrechParameters] = {}
        self._angle_bend: Dict[int, AngleBendParameters] = {}
        self._strech_bend: Dict[int, StrechBendParameters] = {}
        self._default_strech_bend: List[DefaultStrechBendParameters] = []
        self._out_of_plane: Dict[int, OutOfPlaneBendParameters] = {}
        self._torsion: Dict[int, TorsionParameters] = {}
        self._van_der_waals: Dict[int, VanDerWaalsParameters] = {}
        self._charge: List[ChargeParameters] = []
        self._partial_charge: Dict[int, PartialChargeParameters] = {}

    # ------------------------------------------------------------------ #
    #  Lifecycle
    # ------------------------------------------------------------------ #

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Make the table read-only. Further ``add_*`` calls raise."""
        self._frozen = True

    def _writable(self) -> None:
        if self._frozen:
            raise RuntimeError(f"Parameter table for '{self.source}' is read-only")

    def counts(self) -> Dict[TermKind, int]:
        """Number of stored rows per term kind."""
        return {
            TermKind.BOND_STRECH: len(self._bond_strech),
            TermKind.ANGLE_BEND: len(self._angle_bend),
            TermKind.STRECH_BEND: len(self._strech_bend),
            TermKind.DEFAULT_STRECH_BEND: len(self._default_strech_bend),
            TermKind.OUT_OF_PLANE_BEND: len(self._out_of_plane),
            TermKind.TORSION: len(self._torsion),
            TermKind.VAN_DER_WAALS: len(self._van_der_waals),
            TermKind.CHARGE: len(self._charge),
            TermKind.PARTIAL_CHARGE: len(self._partial_charge),
        }

    def __len__(self) -> int:
        return sum(self.counts().values())

    def __repr__(self) -> str:
        return f"ParameterTable(source={self.source!r}, rows={len(self)}, frozen={self._frozen})"

    # ------------------------------------------------------------------ #
    #  Insertion (last write wins on key collisions)
    # ------------------------------------------------------------------ #

    def add_bond_strech(self, bond_type: int, a: int, b: int, params: BondStrechParameters) -> None:
        self._writable()
        a, b = indexing.canonical_bond(a, b)
        self._bond_strech[indexing.bond_strech_index(bond_type, a, b)] = params

    def add_angle_bend(self, angle_type: int, a: int, b: int, c: int, params: AngleBendParameters) -> None:
        self._writable()
        a, b, c = indexing.canonical_angle(a, b, c)
        self._angle_bend[indexing.angle_bend_index(angle_type, a, b, c)] = params

    def add_strech_bend(
        self, strech_bend_type: int, a: int, b: int, c: int, params: StrechBendParameters
    ) -> None:
        self._writable()
        key = indexing.strech_bend_index(strech_bend_type, a, b, c)
        self._strech_bend[key] = params

    def add_default_strech_bend(self, params: DefaultStrechBendParameters) -> None:
        self._writable()
        self._default_strech_bend.append(params)

    def add_out_of_plane(self, a: int, b: int, c: int, d: int, params: OutOfPlaneBendParameters) -> None:
        self._writable()
        a, b, c, d = indexing.canonical_out_of_plane(a, b, c, d)
        self._out_of_plane[indexing.out_of_plane_index(a, b, c, d)] = params

    def add_torsion(
        self, torsion_type: int, a: int, b: int, c: int, d: int, params: TorsionParameters
    ) -> None:
        self._writable()
        a, b, c, d = indexing.canonical_torsion(a, b, c, d)
        key = indexing.torsion_index(torsion_type, a, b, c, d)
        self._torsion[key] = params

    def add_van_der_waals(self, type_number: int, params: VanDerWaalsParameters) -> None:
        self._writable()
        self._van_der_waals[type_number] = params

    def add_charge(self, params: ChargeParameters) -> None:
        self._writable()
        self._charge.append(params)

    def add_partial_charge(self, type_number: int, params: PartialChargeParameters) -> None:
        self._writable()
        self._partial_charge[type_number] = params

    # ------------------------------------------------------------------ #
    #  Lookup by classification and atom types (None on miss)
    # ------------------------------------------------------------------ #

    def bond_strech(self, bond_type: int, a: int, b: int) -> Optional[BondStrechParameters]:
        a, b = indexing.canonical_bond(a, b)
        try:
            key = indexing.bond_strech_index(bond_type, a, b)
        except ValueError:
            return None
        return self._bond_strech.get(key)

    def angle_bend(self, angle_type: int, a: int, b: int, c: int) -> Optional[AngleBendParameters]:
        a, b, c = indexing.canonical_angle(a, b, c)
        try:
            key = indexing.angle_bend_index(angle_type, a, b, c)
        except ValueError:
            return None
        return self._angle_bend.get(key)

    def strech_bend(self, strech_bend_type: int, a: int, b: int, c: int) -> Optional[StrechBendParameters]:
        try:
            key = indexing.strech_bend_index(strech_bend_type, a, b, c)
        except ValueError:
            return None
        return self._strech_bend.get(key)

    def default_strech_bend(self, row_a: int, row_b: int, row_c: int) -> Optional[StrechBendParameters]:
        for entry in self._default_strech_bend:
            if entry.matches(row_a, row_b, row_c):
                return entry.parameters
        return None

    def out_of_plane(self, a: int, b: int, c: int, d: int) -> Optional[OutOfPlaneBendParameters]:
        a, b, c, d = indexing.canonical_out_of_plane(a, b, c, d)
        try:
            key = indexing.out_of_plane_index(a, b, c, d)
        except ValueError:
            return None
        return self._out_of_plane.get(key)

    def torsion(self, torsion_type: int, a: int, b: int, c: int, d: int) -> Optional[TorsionParameters]:
        a, b, c, d = indexing.canonical_torsion(a, b, c, d)
        try:
            key = indexing.torsion_index(torsion_type, a, b, c, d)
        except ValueError:
            return None
        return self._torsion.get(key)

    def van_der_waals(self, type_number: int) -> Optional[VanDerWaalsParameters]:
        return self._van_der_waals.get(type_number)

    def charge(self, bond_type: int, a: int, b: int) -> Optional[ChargeParameters]:
        for entry in self._charge:
            if entry.matches(bond_type, a, b):
                return entry
        return None

    def partial_charge(self, type_number: int) -> Optional[PartialChargeParameters]:
        return self._partial_charge.get(type_number)

    @staticmethod
    def valid_atom_type(type_number: int) -> bool:
        return 1 <= type_number <= MAX_ATOM_TYPE
