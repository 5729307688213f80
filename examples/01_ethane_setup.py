#!/usr/bin/env python3
"""
Example 1: Ethane Parameter Setup

Builds ethane with MMFF atom types, loads the bundled parameter subset
and resolves the parameters of every bonded and non-bonded term.

Types:
    1 = CR (sp3 carbon), 5 = HC (hydrogen on carbon)

Usage:
    python examples/01_ethane_setup.py
"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import logging

from pymmff.data import sample_parameters_path
from pymmff.forcefield import force_fields
from pymmff.parameters import TermKind
from pymmff.topology import Molecule


def build_ethane() -> Molecule:
    mol = Molecule("ethane")
    c1 = mol.add_atom(1)
    c2 = mol.add_atom(1)
    mol.add_bond(c1, c2)
    for carbon in (c1, c1, c1, c2, c2, c2):
        mol.add_bond(carbon, mol.add_atom(5))
    return mol


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("ETHANE PARAMETER SETUP")
    print("=" * 60)

    ff = force_fields.create("mmff").unwrap()
    if not ff.read_parameters(sample_parameters_path()):
        print(f"Could not read parameters: {ff.error_string}")
        return 1

    mol = build_ethane()
    print(f"\nMolecule: {mol}")

    report = ff.setup(mol)
    print(f"\n{report.message}\n")

    for kind in TermKind:
        terms = report.of_kind(kind)
        if not terms:
            continue
        print(f"{kind.value} ({len(terms)})")
        for term in terms[:3]:
            tag = " [default]" if term.default else ""
            print(f"  {term.atoms}: {term.parameters}{tag}")
        if len(terms) > 3:
            print(f"  ... {len(terms) - 3} more")

    if report.missing:
        print(f"\nMissing parameters for {len(report.missing)} term(s):")
        for term in report.missing:
            print(f"  {term.kind.value} {term.atoms}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
