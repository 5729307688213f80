"""
Unit tests for the MMFF parameter file reader.
"""
import pytest

from pymmff.core import (
    AngleBendParameters,
    BondStrechParameters,
    OutOfPlaneBendParameters,
    PartialChargeParameters,
    StrechBendParameters,
    TorsionParameters,
    VanDerWaalsParameters,
)
from pymmff.parameters import TableLoader
from pymmff.parameters.indexing import TermKind
from pymmff.parameters.loader import Section


@pytest.fixture
def parsed(one_row_text):
    return TableLoader().parse(one_row_text.splitlines(), "inline")


class TestSection:
    """Tests for Section ordering."""

    def test_next_follows_file_order(self) -> None:
        assert Section.BOND_STRECH.next() is Section.EMPIRICAL_BOND_STRECH
        assert Section.PARTIAL_CHARGE.next() is Section.END

    def test_end_is_terminal(self) -> None:
        assert Section.END.next() is Section.END


class TestParse:
    """Tests for parsing one row of every section."""

    def test_bond_strech(self, parsed) -> None:
        assert parsed.bond_strech(0, 1, 5) == BondStrechParameters(kb=4.766, r0=1.093)
        assert parsed.bond_strech(0, 5, 1) == BondStrechParameters(kb=4.766, r0=1.093)

    def test_angle_bend(self, parsed) -> None:
        expected = AngleBendParameters(ka=0.636, theta0=110.549)
        assert parsed.angle_bend(0, 1, 1, 5) == expected
        assert parsed.angle_bend(0, 5, 1, 1) == expected

    def test_strech_bend_is_directional(self, parsed) -> None:
        assert parsed.strech_bend(1, 2, 2, 3) == StrechBendParameters(kba_ijk=0.250, kba_kji=0.075)
        assert parsed.strech_bend(1, 3, 2, 2) is None

    def test_default_strech_bend(self, parsed) -> None:
        assert parsed.default_strech_bend(0, 1, 1) == StrechBendParameters(0.100, 0.300)
        assert parsed.default_strech_bend(1, 1, 0) is None

    def test_out_of_plane(self, parsed) -> None:
        assert parsed.out_of_plane(1, 2, 1, 1) == OutOfPlaneBendParameters(koop=0.030)

    def test_torsion(self, parsed) -> None:
        assert parsed.torsion(0, 5, 1, 1, 5) == TorsionParameters(0.284, -1.386, 0.314)

    def test_van_der_waals(self, parsed) -> None:
        assert parsed.van_der_waals(5) == VanDerWaalsParameters(0.250, 0.800, 4.200, 1.209, "D")

    def test_charge(self, parsed) -> None:
        entry = parsed.charge(0, 1, 5)
        assert entry is not None
        assert entry.bci == 0.0
        assert parsed.charge(0, 5, 1) is None

    def test_partial_charge_uses_second_field(self, parsed) -> None:
        assert parsed.partial_charge(37) == PartialChargeParameters(pbci=-0.127, fcadj=0.0)
        assert parsed.partial_charge(0) is None

    def test_empirical_rows_ignored(self, parsed) -> None:
        assert parsed.counts()[TermKind.BOND_STRECH] == 1

    def test_table_is_frozen(self, parsed) -> None:
        assert parsed.frozen
        with pytest.raises(RuntimeError):
            parsed.add_van_der_waals(1, VanDerWaalsParameters(1.0, 1.0, 1.0, 1.0))

    def test_every_section_has_one_row(self, parsed) -> None:
        assert set(parsed.counts().values()) == {1}


class TestForgivingParse:
    """Malformed input is skipped or zero-filled, never fatal."""

    def test_single_field_row_skipped(self) -> None:
        table = TableLoader().parse(["7", "0 1 5 4.766 1.093"])
        assert table.counts()[TermKind.BOND_STRECH] == 1

    def test_missing_numbers_read_as_zero(self) -> None:
        table = TableLoader().parse(["0 1 5 4.766"])
        assert table.bond_strech(0, 1, 5) == BondStrechParameters(kb=4.766, r0=0.0)

    def test_unparsable_numbers_read_as_zero(self) -> None:
        table = TableLoader().parse(["0 1 5 abc 1.093"])
        assert table.bond_strech(0, 1, 5) == BondStrechParameters(kb=0.0, r0=1.093)

    def test_comments_ignored(self) -> None:
        table = TableLoader().parse(["# 0 1 1 4.258 1.508", "0 1 5 4.766 1.093"])
        assert len(table) == 1

    def test_unencodable_row_skipped(self) -> None:
        table = TableLoader().parse(["0 1 200 4.766 1.093", "0 1 5 4.766 1.093"])
        assert len(table) == 1

    def test_large_atom_types_skipped(self) -> None:
        lines = ["$", "$", "$", "$", "$", "$", "$",
                 "100 0.250 0.800 4.200 1.209 D",
                 "5 0.250 0.800 4.200 1.209",
                 "$", "$",
                 "0 100 -0.127 0.000"]
        table = TableLoader().parse(lines)
        assert table.van_der_waals(100) is None
        assert table.van_der_waals(5).da == "-"
        assert table.counts()[TermKind.PARTIAL_CHARGE] == 0

    def test_last_row_wins(self) -> None:
        table = TableLoader().parse(["0 1 5 4.766 1.093", "0 5 1 5.000 1.100"])
        assert table.bond_strech(0, 1, 5) == BondStrechParameters(kb=5.0, r0=1.1)
        assert len(table) == 1

    def test_parsing_stops_at_end(self) -> None:
        lines = ["0 1 5 4.766 1.093"] + ["$"] * 10 + ["0 1 1 4.258 1.508"]
        table = TableLoader().parse(lines)
        assert table.bond_strech(0, 1, 1) is None


class TestLoad:
    """Tests for loading from files through the cache."""

    def test_load_file(self, loader, write_params, one_row_text) -> None:
        path = write_params(one_row_text)
        result = loader.load(path)
        assert result.ok
        assert result.value.source == str(path)

    def test_missing_file_fails(self, loader, cache, tmp_path) -> None:
        missing = tmp_path / "absent.prm"
        result = loader.load(missing)
        assert not result.ok
        assert "cannot open source" in result.error
        assert loader.error_string == result.error
        assert str(missing) not in cache

    def test_second_load_returns_cached_table(self, loader, write_params, one_row_text) -> None:
        path = write_params(one_row_text)
        first = loader.load(path).value
        second = loader.load(path).value
        assert first is second

    def test_load_without_cache_reparses(self, write_params, one_row_text) -> None:
        path = write_params(one_row_text)
        loader = TableLoader()
        assert loader.load(path).value is not loader.load(path).value

    def test_load_stream(self, loader, cache, one_row_text) -> None:
        result = loader.load_stream(one_row_text.splitlines(), "stream-1")
        assert result.ok
        assert cache.get("stream-1") is result.value


def _failing_stream():
    yield "0 1 5 4.766 1.093\n"
    raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")


class TestUnreadableStream:
    """Read errors inside a stream come back as failed Results."""

    def test_decode_error(self, loader, cache) -> None:
        result = loader.load_stream(_failing_stream(), "bad-stream")
        assert not result.ok
        assert "cannot read source" in result.error
        assert loader.error_string == result.error
        assert "bad-stream" not in cache

    def test_decode_error_without_cache(self) -> None:
        result = TableLoader().load_stream(_failing_stream(), "bad-stream")
        assert not result.ok

    def test_undecodable_file_handle(self, loader, tmp_path) -> None:
        path = tmp_path / "binary.prm"
        path.write_bytes(b"0 1 5 4.766 1.093\n\xff\xfe\n")
        with open(path, encoding="utf-8") as handle:
            result = loader.load_stream(handle, str(path))
        assert not result.ok
        assert "cannot read source" in result.error

    def test_os_error(self, loader) -> None:
        def broken():
            raise OSError("device gone")
            yield  # generator that fails on first read

        result = loader.load_stream(broken(), "broken")
        assert not result.ok
        assert "device gone" in result.error

    def test_retry_after_failure(self, loader, one_row_text) -> None:
        assert not loader.load_stream(_failing_stream(), "retry").ok
        assert loader.load_stream(one_row_text.splitlines(), "retry").ok
