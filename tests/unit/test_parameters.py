"""
Unit tests for MmffParameters lookups against the bundled parameter subset.
"""
import pytest

from pymmff.core import BondStrechParameters, StrechBendParameters
from pymmff.data import sample_parameters_path
from pymmff.parameters import MmffParameters, ParameterTable, TableLoader
from pymmff.topology import Molecule


class TestLoading:
    """Tests for reading parameter sources."""

    def test_read_sample(self, sample_parameters) -> None:
        assert sample_parameters.is_loaded
        assert sample_parameters.file_name == str(sample_parameters_path())
        assert sample_parameters.table.frozen

    def test_instances_share_table(self, cache) -> None:
        first = MmffParameters(cache)
        second = MmffParameters(cache)
        assert first.read(sample_parameters_path())
        assert second.read(sample_parameters_path())
        assert first.table is second.table

    def test_read_failure(self, cache, tmp_path) -> None:
        params = MmffParameters(cache)
        assert not params.read(tmp_path / "missing.prm")
        assert "cannot open source" in params.error_string
        assert not params.is_loaded

    def test_failed_read_drops_previous_table(self, sample_parameters, tmp_path) -> None:
        assert not sample_parameters.read(tmp_path / "missing.prm")
        assert sample_parameters.table is None

    def test_read_stream(self, cache, one_row_text) -> None:
        params = MmffParameters(cache)
        assert params.read_stream(one_row_text.splitlines(), "inline")
        assert params.file_name == "inline"

    def test_read_stream_failure(self, cache) -> None:
        def failing():
            yield "0 1 5 4.766 1.093\n"
            raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")

        params = MmffParameters(cache)
        assert not params.read_stream(failing(), "bad")
        assert "cannot read source" in params.error_string
        assert not params.is_loaded

    def test_successful_read_clears_previous_error(self, cache, tmp_path) -> None:
        params = MmffParameters(cache)
        assert not params.read(tmp_path / "missing.prm")
        assert params.read(sample_parameters_path())
        assert params.error_string == ""

    def test_failed_read_clears_file_name(self, sample_parameters, tmp_path) -> None:
        assert not sample_parameters.read(tmp_path / "missing.prm")
        assert sample_parameters.file_name == ""

    def test_custom_loader_is_used(self, cache, one_row_text) -> None:
        loader = TableLoader(cache)
        params = MmffParameters(cache, loader=loader)
        assert params.read_stream(one_row_text.splitlines(), "inline")
        assert params.loader is loader

    def test_use_table_freezes(self, cache) -> None:
        table = ParameterTable("manual")
        params = MmffParameters(cache)
        params.use_table(table)
        assert table.frozen
        assert params.file_name == "manual"


class TestNoTable:
    """Every lookup answers None before a table is loaded."""

    def test_all_none(self, cache, ethane) -> None:
        params = MmffParameters(cache)
        c0, c1, h = ethane.atom(0), ethane.atom(1), ethane.atom(2)
        assert params.bond_strech_parameters(c0, c1) is None
        assert params.angle_bend_parameters(h, c0, c1) is None
        assert params.strech_bend_parameters(h, c0, c1) is None
        assert params.default_strech_bend_parameters(h, c0, c1) is None
        assert params.out_of_plane_bending_parameters(h, c0, c1, h) is None
        assert params.torsion_parameters(h, c0, c1, ethane.atom(5)) is None
        assert params.van_der_waals_parameters(h) is None
        assert params.charge_parameters(c0, h) is None
        assert params.partial_charge_parameters(h) is None

    def test_atom_parameters_need_no_table(self, cache, ethane) -> None:
        assert MmffParameters(cache).atom_parameters(ethane.atom(0)).atomic_number == 6


class TestAtomParameters:
    """Tests for atom_parameters bounds."""

    @pytest.mark.parametrize("type_number", [0, 100, 136])
    def test_out_of_range(self, sample_parameters, type_number: int) -> None:
        mol = Molecule()
        index = mol.add_atom(type_number, period=2)
        assert sample_parameters.atom_parameters(mol.atom(index)) is None

    @pytest.mark.parametrize("type_number", [1, 5, 99])
    def test_in_range(self, sample_parameters, type_number: int) -> None:
        mol = Molecule()
        index = mol.add_atom(type_number, period=2)
        assert sample_parameters.atom_parameters(mol.atom(index)).type_number == type_number


class TestBondedLookups:
    """Tests for bonded-term lookups."""

    def test_bond_strech(self, sample_parameters, ethane) -> None:
        c0, c1, h = ethane.atom(0), ethane.atom(1), ethane.atom(2)
        assert sample_parameters.bond_strech_parameters(c0, c1) == BondStrechParameters(4.258, 1.508)
        assert sample_parameters.bond_strech_parameters(c0, h) == sample_parameters.bond_strech_parameters(h, c0)

    def test_bond_strech_uses_bond_type(self, sample_parameters, butadiene) -> None:
        # c1-c2 has bond type 1 and there is no "1 2 2" row
        assert sample_parameters.bond_strech_parameters(butadiene.atom(1), butadiene.atom(2)) is None
        assert sample_parameters.bond_strech_parameters(butadiene.atom(0), butadiene.atom(1)).r0 == 1.333

    def test_empirical_bond_strech_not_tabulated(self, sample_parameters, ethane) -> None:
        assert sample_parameters.empirical_bond_strech_parameters(ethane.atom(0), ethane.atom(1)) is None

    def test_angle_bend_symmetric(self, sample_parameters, ethane) -> None:
        c0, c1, h = ethane.atom(0), ethane.atom(1), ethane.atom(2)
        forward = sample_parameters.angle_bend_parameters(h, c0, c1)
        assert forward.ka == 0.636
        assert sample_parameters.angle_bend_parameters(c1, c0, h) == forward

    def test_strech_bend_directional(self, sample_parameters, ethane) -> None:
        c0, c1, h = ethane.atom(0), ethane.atom(1), ethane.atom(2)
        assert sample_parameters.strech_bend_parameters(c1, c0, h) == StrechBendParameters(0.227, 0.070)
        assert sample_parameters.strech_bend_parameters(h, c0, c1) is None

    def test_default_strech_bend_by_row(self, sample_parameters, ethane) -> None:
        c0, h2, h3 = ethane.atom(0), ethane.atom(2), ethane.atom(3)
        assert sample_parameters.default_strech_bend_parameters(h2, c0, h3) == StrechBendParameters(0.150, 0.150)

    def test_out_of_plane(self, sample_parameters, ethylene) -> None:
        c0, c1 = ethylene.atom(0), ethylene.atom(1)
        h2, h3 = ethylene.atom(2), ethylene.atom(3)
        koop = sample_parameters.out_of_plane_bending_parameters(h2, c0, c1, h3).koop
        assert koop == 0.006
        assert sample_parameters.out_of_plane_bending_parameters(c1, c0, h3, h2).koop == koop

    def test_torsion_exact(self, sample_parameters, ethane) -> None:
        params = sample_parameters.torsion_parameters(ethane.atom(2), ethane.atom(0), ethane.atom(1), ethane.atom(5))
        assert params.v3 == 0.314

    def test_torsion_wildcard(self, sample_parameters, propane) -> None:
        h_on_c2 = next(n for n in propane.atom(2).neighbors() if n.type_number == 5)
        params = sample_parameters.torsion_parameters(
            propane.atom(0), propane.atom(1), propane.atom(2), h_on_c2
        )
        assert params.v3 == 0.300


class TestNonBondedLookups:
    """Tests for van der Waals and charge lookups."""

    def test_van_der_waals(self, sample_parameters, ethane) -> None:
        assert sample_parameters.van_der_waals_parameters(ethane.atom(2)).alpha == 0.250

    def test_charge_is_directed(self, sample_parameters, ethylene) -> None:
        c0, h = ethylene.atom(0), ethylene.atom(2)
        assert sample_parameters.charge_parameters(c0, h).bci == 0.15
        assert sample_parameters.charge_parameters(h, c0) is None

    def test_partial_charge(self, sample_parameters, ethylene) -> None:
        assert sample_parameters.partial_charge_parameters(ethylene.atom(0)).pbci == -0.135
