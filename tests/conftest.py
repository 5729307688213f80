"""
Shared pytest fixtures for pymmff tests.

Provides a minimal MMFF-format parameter text with one row per section
and builders for small typed molecules.
"""
from pathlib import Path
from typing import Callable

import pytest

from pymmff.data import sample_parameters_path
from pymmff.parameters import MmffParameters, ParametersCache, TableLoader
from pymmff.topology import Molecule

ONE_ROW_PER_SECTION = """\
# one row per section
0 1 5 4.766 1.093
$ empirical bond stretch
1 6 1.380 4.770
$ angle bend
0 1 1 5 0.636 110.549
$ stretch-bend
1 2 2 3 0.250 0.075
$ default stretch-bend
0 1 1 0.100 0.300
$ out-of-plane
1 2 1 1 0.030
$ torsion
0 5 1 1 5 0.284 -1.386 0.314
$ van der Waals
5 0.250 0.800 4.200 1.209 D
$ charge
0 1 5 0.0000
$ partial charge
0 37 -0.127 0.000
$ end
"""


@pytest.fixture
def cache() -> ParametersCache:
    """Isolated cache per test."""
    return ParametersCache()


@pytest.fixture
def loader(cache: ParametersCache) -> TableLoader:
    return TableLoader(cache)


@pytest.fixture
def write_params(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write parameter text to a file under tmp_path and return its path."""

    def _write(text: str, name: str = "params.prm") -> Path:
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write


@pytest.fixture
def sample_parameters(cache: ParametersCache) -> MmffParameters:
    """MmffParameters loaded from the bundled parameter subset."""
    params = MmffParameters(cache)
    assert params.read(sample_parameters_path()), params.error_string
    return params


def build_ethane() -> Molecule:
    """H3C-CH3 with MMFF types 1 (CR) and 5 (HC)."""
    mol = Molecule("ethane")
    c1 = mol.add_atom(1)
    c2 = mol.add_atom(1)
    mol.add_bond(c1, c2)
    for carbon in (c1, c1, c1, c2, c2, c2):
        h = mol.add_atom(5)
        mol.add_bond(carbon, h)
    return mol


def build_ethylene() -> Molecule:
    """H2C=CH2 with MMFF types 2 (C=C) and 5 (HC)."""
    mol = Molecule("ethylene")
    c1 = mol.add_atom(2)
    c2 = mol.add_atom(2)
    mol.add_bond(c1, c2, order=2)
    for carbon in (c1, c1, c2, c2):
        h = mol.add_atom(5)
        mol.add_bond(carbon, h)
    return mol


def build_propane() -> Molecule:
    """CH3-CH2-CH3."""
    mol = Molecule("propane")
    carbons = [mol.add_atom(1) for _ in range(3)]
    mol.add_bond(carbons[0], carbons[1])
    mol.add_bond(carbons[1], carbons[2])
    for carbon, n_h in zip(carbons, (3, 2, 3)):
        for _ in range(n_h):
            mol.add_bond(carbon, mol.add_atom(5))
    return mol


def build_butadiene() -> Molecule:
    """C1=C2-C3=C4 heavy-atom skeleton (type 2) with one H on C4 (index 4)."""
    mol = Molecule("butadiene")
    c = [mol.add_atom(2) for _ in range(4)]
    mol.add_bond(c[0], c[1], order=2)
    mol.add_bond(c[1], c[2], order=1)
    mol.add_bond(c[2], c[3], order=2)
    h = mol.add_atom(5)
    mol.add_bond(c[3], h)
    return mol


def build_ring(size: int, type_number: int, aromatic: bool = False, order: int = 1) -> Molecule:
    """A bare ring of ``size`` atoms, all of ``type_number``."""
    mol = Molecule(f"ring{size}")
    atoms = [mol.add_atom(type_number) for _ in range(size)]
    for i in range(size):
        mol.add_bond(atoms[i], atoms[(i + 1) % size], order=order, aromatic=aromatic)
    mol.add_ring(atoms, aromatic=aromatic)
    return mol


@pytest.fixture
def ethane() -> Molecule:
    return build_ethane()


@pytest.fixture
def ethylene() -> Molecule:
    return build_ethylene()


@pytest.fixture
def propane() -> Molecule:
    return build_propane()


@pytest.fixture
def butadiene() -> Molecule:
    return build_butadiene()


@pytest.fixture
def make_ring() -> Callable[..., Molecule]:
    """Factory fixture wrapping :func:`build_ring`."""
    return build_ring


@pytest.fixture
def one_row_text() -> str:
    return ONE_ROW_PER_SECTION
