"""
Parameter record shapes, one per MMFF term kind.

Records are produced by the table loader and handed out read-only by
:class:`pymmff.parameters.MmffParameters`.
"""
from __future__ import annotations

from dataclasses import dataclass


# ------------------------------------------------------------------ #
#  Bonded terms
# ------------------------------------------------------------------ #


@dataclass(frozen=True)
class BondStrechParameters:
    """Bond stretching: force constant ``kb`` and reference length ``r0``."""

    kb: float
    r0: float


@dataclass(frozen=True)
class AngleBendParameters:
    """Angle bending: force constant ``ka`` and reference angle ``theta0`` (degrees)."""

    ka: float
    theta0: float


@dataclass(frozen=True)
class StrechBendParameters:
    """Stretch-bend coupling for the i-j-k and k-j-i directions."""

    kba_ijk: float
    kba_kji: float


@dataclass(frozen=True)
class DefaultStrechBendParameters:
    """Stretch-bend constants keyed by the periodic-table rows of i, j, k."""

    row_a: int
    row_b: int
    row_c: int
    parameters: StrechBendParameters

    def matches(self, row_a: int, row_b: int, row_c: int) -> bool:
        return (self.row_a, self.row_b, self.row_c) == (row_a, row_b, row_c)


@dataclass(frozen=True)
class OutOfPlaneBendParameters:
    """Out-of-plane bending force constant ``koop``."""

    koop: float


@dataclass(frozen=True)
class TorsionParameters:
    """Three-term Fourier torsion coefficients."""

    v1: float
    v2: float
    v3: float


# ------------------------------------------------------------------ #
#  Non-bonded terms
# ------------------------------------------------------------------ #


@dataclass(frozen=True)
class VanDerWaalsParameters:
    """
    Buffered 14-7 van der Waals parameters for one atom type.

    Attributes:
        alpha: Atomic polarizability.
        n: Slater-Kirkwood effective electron count.
        a: Scale factor ``A``.
        g: Scale factor ``G``.
        da: Donor/acceptor flag: ``'D'``, ``'A'`` or ``'-'``.
    """

    alpha: float
    n: float
    a: float
    g: float
    da: str = "-"


@dataclass(frozen=True)
class ChargeParameters:
    """Bond-charge increment for a directed (bond_type, type_a, type_b) pair."""

    bond_type: int
    type_a: int
    type_b: int
    bci: float

    def matches(self, bond_type: int, type_a: int, type_b: int) -> bool:
        return (self.bond_type, self.type_a, self.type_b) == (bond_type, type_a, type_b)


@dataclass(frozen=True)
class PartialChargeParameters:
    """Partial bond-charge increment and formal-charge adjustment."""

    pbci: float
    fcadj: float
