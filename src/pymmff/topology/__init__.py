"""
Topology module: the molecular-graph collaborator.

This module provides:
- MolecularGraph ABC: the questions the parameter engine asks of a molecule
- Ring and MmffAtom value types
- Molecule: a hand-built in-memory implementation
"""

from .graph import MmffAtom, MolecularGraph, Ring
from .molecule import Molecule, period_of

__all__ = [
    "MolecularGraph",
    "MmffAtom",
    "Ring",
    "Molecule",
    "period_of",
]
