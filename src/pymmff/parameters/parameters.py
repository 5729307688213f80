"""
MMFF parameter access for force-field setup.

:class:`MmffParameters` is the facade a force field talks to: it owns a
shared reference to one loaded :class:`ParameterTable`, classifies each
requested term from the molecular topology, and looks the term up,
stepping down through equivalent types where MMFF allows it.

Every lookup returns a parameter record or None. Nothing here raises
for a missing table, a missing entry or an out-of-range atom type.
"""
import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from pymmff.core import (
    AngleBendParameters,
    AtomTypeRecord,
    BondStrechParameters,
    ChargeParameters,
    OutOfPlaneBendParameters,
    PartialChargeParameters,
    StrechBendParameters,
    TorsionParameters,
    VanDerWaalsParameters,
    atom_types,
)
from pymmff.topology import MmffAtom

from . import classifier
from .cache import ParametersCache, default_cache
from .loader import TableLoader
from .resolver import EquivalenceResolver
from .table import ParameterTable

logger = logging.getLogger(__name__)


class MmffParameters:
    """
    Parameter lookups for MMFF94 terms.

    Attributes:
        cache: Cache shared with other MmffParameters instances.
        loader: Reader used by :meth:`read` and :meth:`read_stream`.
        file_name: Source of the currently loaded table ("" if none).
        error_string: Message describing the most recent failure.

    Example:
        >>> from pymmff.parameters import MmffParameters, ParametersCache
        >>> params = MmffParameters(ParametersCache())
        >>> params.read("mmff94.prm")
        True
        >>> params.bond_strech_parameters(mol.atom(0), mol.atom(1))
        BondStrechParameters(kb=4.258, r0=1.508)
    """

    def __init__(
        self,
        cache: Optional[ParametersCache] = None,
        loader: Optional[TableLoader] = None,
    ) -> None:
        self.cache = cache if cache is not None else default_cache()
        self.loader = loader if loader is not None else TableLoader(self.cache)
        self.file_name = ""
        self.error_string = ""
        self._table: Optional[ParameterTable] = None
        self._resolver: Optional[EquivalenceResolver] = None

    # ------------------------------------------------------------------ #
    #  Loading
    # ------------------------------------------------------------------ #

    @property
    def table(self) -> Optional[ParameterTable]:
        return self._table

    @property
    def is_loaded(self) -> bool:
        return self._table is not None

    def read(self, file_name: Union[str, Path]) -> bool:
        """
        Load parameters from ``file_name``, reusing a cached table.

        The previously held table (if any) is released first and the
        previous file name and error are cleared.

        Returns:
            True on success; False with :attr:`error_string` set otherwise.
        """
        self._reset()

        result = self.loader.load(file_name)
        if not result.ok:
            self.error_string = result.error or ""
            return False

        self.file_name = str(file_name)
        self._set_table(result.value)
        return True

    def read_stream(self, stream: Iterable[str], source_id: str) -> bool:
        """Load parameters from an open text stream identified by ``source_id``."""
        self._reset()

        result = self.loader.load_stream(stream, source_id)
        if not result.ok:
            self.error_string = result.error or ""
            return False

        self.file_name = source_id
        self._set_table(result.value)
        return True

    def use_table(self, table: ParameterTable) -> None:
        """Use an already-built table (it is frozen if it is not already)."""
        table.freeze()
        self.file_name = table.source
        self._set_table(table)

    def _reset(self) -> None:
        self._set_table(None)
        self.file_name = ""
        self.error_string = ""

    def _set_table(self, table: Optional[ParameterTable]) -> None:
        self._table = table
        self._resolver = EquivalenceResolver(table) if table is not None else None

    # ------------------------------------------------------------------ #
    #  Static atom properties
    # ------------------------------------------------------------------ #

    def atom_parameters(self, atom: MmffAtom) -> Optional[AtomTypeRecord]:
        """Static property row for the atom's type; None outside 1..99."""
        return atom_types.get(atom.type_number)

    # ------------------------------------------------------------------ #
    #  Bonded terms
    # ------------------------------------------------------------------ #

    def bond_strech_parameters(self, a: MmffAtom, b: MmffAtom) -> Optional[BondStrechParameters]:
        if self._table is None:
            return None
        return self._table.bond_strech(classifier.bond_type(a, b), a.type_number, b.type_number)

    def empirical_bond_strech_parameters(self, a: MmffAtom, b: MmffAtom) -> Optional[BondStrechParameters]:
        """Empirical bond-stretch rules are not tabulated; always None."""
        return None

    def angle_bend_parameters(self, a: MmffAtom, b: MmffAtom, c: MmffAtom) -> Optional[AngleBendParameters]:
        if self._table is None:
            return None
        return self._table.angle_bend(
            classifier.angle_type(a, b, c), a.type_number, b.type_number, c.type_number
        )

    def strech_bend_parameters(self, a: MmffAtom, b: MmffAtom, c: MmffAtom) -> Optional[StrechBendParameters]:
        """
        Explicit stretch-bend parameters for a-b-c.

        Callers fall back to :meth:`default_strech_bend_parameters` when
        this returns None.
        """
        if self._table is None:
            return None
        return self._table.strech_bend(
            classifier.strech_bend_type(a, b, c), a.type_number, b.type_number, c.type_number
        )

    def default_strech_bend_parameters(
        self, a: MmffAtom, b: MmffAtom, c: MmffAtom
    ) -> Optional[StrechBendParameters]:
        """Stretch-bend parameters chosen by the periodic-table rows of a, b, c."""
        if self._table is None:
            return None
        return self._table.default_strech_bend(a.period - 1, b.period - 1, c.period - 1)

    def out_of_plane_bending_parameters(
        self, a: MmffAtom, b: MmffAtom, c: MmffAtom, d: MmffAtom
    ) -> Optional[OutOfPlaneBendParameters]:
        """Out-of-plane parameters for centre ``b`` with outer atoms a, c, d."""
        if self._resolver is None:
            return None
        return self._resolver.out_of_plane(a.type_number, b.type_number, c.type_number, d.type_number)

    def torsion_parameters(
        self, a: MmffAtom, b: MmffAtom, c: MmffAtom, d: MmffAtom
    ) -> Optional[TorsionParameters]:
        if self._resolver is None:
            return None
        return self._resolver.torsion(
            classifier.torsion_type(a, b, c, d),
            a.type_number, b.type_number, c.type_number, d.type_number,
        )

    # ------------------------------------------------------------------ #
    #  Non-bonded terms
    # ------------------------------------------------------------------ #

    def van_der_waals_parameters(self, atom: MmffAtom) -> Optional[VanDerWaalsParameters]:
        if self._table is None:
            return None
        return self._table.van_der_waals(atom.type_number)

    def charge_parameters(self, a: MmffAtom, b: MmffAtom) -> Optional[ChargeParameters]:
        """Bond-charge increment for the directed pair a -> b."""
        if self._table is None:
            return None
        return self._table.charge(classifier.bond_type(a, b), a.type_number, b.type_number)

    def partial_charge_parameters(self, atom: MmffAtom) -> Optional[PartialChargeParameters]:
        if self._table is None:
            return None
        return self._table.partial_charge(atom.type_number)
