#!/usr/bin/env python3
"""
Example 2: Equivalent-Type Step-Down

Shows the order in which MMFF retries out-of-plane and torsion lookups
with more general atom types, and which step of propane's C-C-C-H
torsion finally finds parameters.

Usage:
    python examples/02_equivalence_stepdown.py
"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pymmff.core import equivalence_row
from pymmff.data import sample_parameters_path
from pymmff.parameters import (
    MmffParameters,
    ParametersCache,
    classifier,
    out_of_plane_candidates,
    torsion_candidates,
)
from pymmff.topology import Molecule


def main():
    print("=" * 60)
    print("EQUIVALENT-TYPE STEP-DOWN")
    print("=" * 60)

    for type_number in (1, 5, 37):
        row = equivalence_row(type_number)
        print(f"type {type_number:3d}: levels 3/4/5 -> {row.level3}, {row.level4}, {row.level5}")

    print("\nOut-of-plane candidates for 37-2-5-1:")
    for types in out_of_plane_candidates(37, 2, 5, 1):
        print(f"  {types}")

    params = MmffParameters(ParametersCache())
    if not params.read(sample_parameters_path()):
        print(f"Could not read parameters: {params.error_string}")
        return 1

    mol = Molecule("propane")
    carbons = [mol.add_atom(1) for _ in range(3)]
    mol.add_bond(carbons[0], carbons[1])
    mol.add_bond(carbons[1], carbons[2])
    h = mol.add_atom(5)
    mol.add_bond(carbons[2], h)

    a, b, c, d = (mol.atom(i) for i in (*carbons, h))
    tt = classifier.torsion_type(a, b, c, d)
    print(f"\nTorsion 1-1-1-5 (torsion type {tt}), candidates in order:")
    for key in torsion_candidates(tt, 1, 1, 1, 5):
        hit = params.table.torsion(*key)
        print(f"  {key}: {hit if hit is not None else 'miss'}")
        if hit is not None:
            break

    print(f"\nResolved: {params.torsion_parameters(a, b, c, d)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
