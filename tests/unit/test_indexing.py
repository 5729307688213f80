"""
Unit tests for canonical ordering and key encoding.
"""
import itertools

import numpy as np
import pytest

from pymmff.parameters import indexing
from pymmff.parameters.indexing import RADIX


class TestCanonicalOrdering:
    """Tests for the canonical_* functions."""

    def test_bond_ascending(self) -> None:
        assert indexing.canonical_bond(5, 1) == (1, 5)
        assert indexing.canonical_bond(1, 5) == (1, 5)

    def test_angle_outer_ascending_centre_fixed(self) -> None:
        assert indexing.canonical_angle(37, 2, 5) == (5, 2, 37)
        assert indexing.canonical_angle(5, 2, 37) == (5, 2, 37)

    def test_strech_bend_not_reordered(self) -> None:
        assert indexing.canonical_strech_bend(5, 1, 1) == (5, 1, 1)
        assert indexing.canonical_strech_bend(1, 1, 5) == (1, 1, 5)

    def test_out_of_plane_outer_sorted(self) -> None:
        for a, c, d in itertools.permutations((5, 37, 2)):
            assert indexing.canonical_out_of_plane(a, 37, c, d) == (2, 37, 5, 37)

    def test_out_of_plane_idempotent(self) -> None:
        once = indexing.canonical_out_of_plane(9, 3, 4, 1)
        assert indexing.canonical_out_of_plane(*once) == once

    def test_out_of_plane_sorts_where_pairwise_swaps_would_not(self) -> None:
        # swapping a with d, then c with d, would give (3, 9, 1, 2)
        assert indexing.canonical_out_of_plane(2, 9, 1, 3) == (1, 9, 2, 3)

    def test_torsion_reversed_when_centres_descend(self) -> None:
        assert indexing.canonical_torsion(5, 6, 1, 21) == (21, 1, 6, 5)

    def test_torsion_equal_centres_orders_outer(self) -> None:
        assert indexing.canonical_torsion(37, 2, 2, 5) == (5, 2, 2, 37)
        assert indexing.canonical_torsion(5, 2, 2, 37) == (5, 2, 2, 37)

    def test_torsion_ordered_unchanged(self) -> None:
        assert indexing.canonical_torsion(21, 1, 6, 5) == (21, 1, 6, 5)


class TestKeyFormulas:
    """Keys follow the documented positional formulas."""

    def test_bond(self) -> None:
        assert indexing.bond_strech_index(1, 2, 3) == 2 * (2 * 136 + 3) + 1

    def test_angle(self) -> None:
        assert indexing.angle_bend_index(4, 1, 2, 3) == 9 * (2 * 136 ** 2 + 1 * 136 + 3) + 4

    def test_strech_bend(self) -> None:
        assert indexing.strech_bend_index(11, 1, 2, 3) == 12 * (2 * 136 ** 2 + 136 + 3) + 11

    def test_out_of_plane(self) -> None:
        assert indexing.out_of_plane_index(1, 2, 3, 4) == 2 * 136 ** 3 + 1 * 136 ** 2 + 3 * 136 + 4

    def test_torsion(self) -> None:
        expected = 6 * (2 * 136 ** 3 + 3 * 136 ** 2 + 1 * 136 + 4) + 5
        assert indexing.torsion_index(5, 1, 2, 3, 4) == expected

    def test_wildcard_type_zero_is_encodable(self) -> None:
        assert indexing.torsion_index(0, 0, 1, 1, 0) == 6 * (136 ** 3 + 136 ** 2)

    @pytest.mark.parametrize(
        "call",
        [
            lambda: indexing.bond_strech_index(2, 1, 1),
            lambda: indexing.angle_bend_index(9, 1, 1, 1),
            lambda: indexing.strech_bend_index(12, 1, 1, 1),
            lambda: indexing.torsion_index(6, 1, 1, 1, 1),
            lambda: indexing.torsion_index(-1, 1, 1, 1, 1),
            lambda: indexing.out_of_plane_index(1, RADIX, 1, 1),
            lambda: indexing.bond_strech_index(0, -1, 1),
        ],
    )
    def test_out_of_range_rejected(self, call) -> None:
        with pytest.raises(ValueError):
            call()


class TestInjectivity:
    """Distinct valid inputs never share a key."""

    def test_bond_exhaustive(self) -> None:
        keys = {
            indexing.bond_strech_index(bt, a, b)
            for bt in range(2)
            for a in range(RADIX)
            for b in range(RADIX)
        }
        assert len(keys) == 2 * RADIX * RADIX

    def test_angle_small_grid(self) -> None:
        types = range(0, 100, 7)
        keys = [
            indexing.angle_bend_index(at, a, b, c)
            for at in range(9)
            for a, b, c in itertools.product(types, repeat=3)
        ]
        assert len(keys) == len(set(keys))

    def test_torsion_decodes_uniquely(self) -> None:
        """Random valid torsions decode back to their inputs."""
        rng = np.random.default_rng(7)
        samples = np.column_stack([
            rng.integers(0, 6, 2000),
            rng.integers(0, 100, (2000, 4)),
        ])
        for tt, a, b, c, d in samples.tolist():
            key = indexing.torsion_index(tt, a, b, c, d)
            packed, decoded_tt = divmod(key, 6)
            packed, decoded_d = divmod(packed, RADIX)
            packed, decoded_a = divmod(packed, RADIX)
            decoded_b, decoded_c = divmod(packed, RADIX)
            assert (decoded_tt, decoded_a, decoded_b, decoded_c, decoded_d) == (tt, a, b, c, d)

    def test_out_of_plane_small_grid(self) -> None:
        types = range(0, 100, 11)
        keys = [indexing.out_of_plane_index(*t) for t in itertools.product(types, repeat=4)]
        assert len(keys) == len(set(keys))

    def test_strech_bend_directional(self) -> None:
        assert indexing.strech_bend_index(1, 1, 1, 5) != indexing.strech_bend_index(1, 5, 1, 1)
