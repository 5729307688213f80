"""
MMFF parameter resolution.

This module provides:
- Index encoding and canonical term ordering (indexing)
- Topology classification of bond/angle/stretch-bend/torsion terms (classifier)
- ParameterTable, TableLoader and the shared ParametersCache
- EquivalenceResolver for step-down out-of-plane and torsion lookups
- MmffParameters, the facade used during force-field setup
"""

from . import classifier, indexing
from .cache import ParametersCache, default_cache
from .indexing import RADIX, TermKind
from .loader import Section, TableLoader
from .parameters import MmffParameters
from .resolver import EquivalenceResolver, out_of_plane_candidates, torsion_candidates
from .table import ParameterTable

__all__ = [
    # Submodules
    "classifier",
    "indexing",
    # Keys
    "RADIX",
    "TermKind",
    # Tables
    "ParameterTable",
    "Section",
    "TableLoader",
    "ParametersCache",
    "default_cache",
    # Lookup
    "EquivalenceResolver",
    "out_of_plane_candidates",
    "torsion_candidates",
    "MmffParameters",
]
