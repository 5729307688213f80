"""
Core module for pymmff.

This module provides:
- AtomTypeRecord and the static atom-type registry (1..99)
- EquivalenceRow and equivalent_type() for step-down lookups
- Parameter record dataclasses for every MMFF term kind
- Result, the tagged success/failure value
- The pymmff exception hierarchy
"""

from .atom_types import MAX_ATOM_TYPE, AtomTypeRecord, AtomTypeRegistry, atom_types
from .equivalence import EquivalenceRow, equivalence_row, equivalent_type
from .exceptions import (
    ConfigurationError,
    MmffError,
    ParameterSourceError,
    UnknownForceFieldError,
    UnknownFormatError,
)
from .records import (
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
from .result import Result

__all__ = [
    # Atom types
    "MAX_ATOM_TYPE",
    "AtomTypeRecord",
    "AtomTypeRegistry",
    "atom_types",
    # Equivalence
    "EquivalenceRow",
    "equivalence_row",
    "equivalent_type",
    # Records
    "BondStrechParameters",
    "AngleBendParameters",
    "StrechBendParameters",
    "DefaultStrechBendParameters",
    "OutOfPlaneBendParameters",
    "TorsionParameters",
    "VanDerWaalsParameters",
    "ChargeParameters",
    "PartialChargeParameters",
    # Results and errors
    "Result",
    "MmffError",
    "ParameterSourceError",
    "UnknownFormatError",
    "UnknownForceFieldError",
    "ConfigurationError",
]
