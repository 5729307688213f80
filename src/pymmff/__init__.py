"""
pymmff - MMFF94 parameter resolution.

Loads tabulated MMFF94 parameters, classifies molecular interaction
terms by topology, and resolves each term's parameters with the force
field's step-down rules.

Main features:
- Forgiving reader for sectioned MMFF parameter files
- Canonical integer keys for bond, angle, stretch-bend, out-of-plane
  and torsion terms
- Bond/angle/stretch-bend/torsion type classification
- Equivalent-type step-down for out-of-plane and torsion terms
- Thread-safe cache sharing parsed tables between force fields
- YAML configuration
"""

__version__ = "0.1.0"
__author__ = "pymmff Team"
