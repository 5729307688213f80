"""
Force-field module.

This module provides:
- Registry and the module-level force_fields / formats registries
- MmffForceField: term enumeration and parameter resolution
- Term and SetupReport result types
"""

from pymmff.parameters import TableLoader

from .mmff import MmffForceField, SetupReport, Term
from .registry import Registry, force_fields, formats

force_fields.register("mmff", MmffForceField)
formats.register("mmff", TableLoader)

__all__ = [
    "Registry",
    "force_fields",
    "formats",
    "MmffForceField",
    "SetupReport",
    "Term",
]
