"""
Canonical ordering and integer keys for MMFF parameter lookup.

Every bonded term is reduced to a single integer key. Endpoint types are
first put in canonical order so that a term read in either direction
maps to the same key, then packed positionally in base ``RADIX``. The
classification (bond/angle/stretch-bend/torsion type) occupies the
lowest digit, scaled by the number of classes of that kind.
"""
from enum import Enum
from typing import Tuple

RADIX = 136

BOND_CLASSES = 2
ANGLE_CLASSES = 9
STRECH_BEND_CLASSES = 12
TORSION_CLASSES = 6


class TermKind(Enum):
    """MMFF interaction term kinds, in parameter-file section order."""

    BOND_STRECH = "bond_strech"
    ANGLE_BEND = "angle_bend"
    STRECH_BEND = "strech_bend"
    DEFAULT_STRECH_BEND = "default_strech_bend"
    OUT_OF_PLANE_BEND = "out_of_plane_bend"
    TORSION = "torsion"
    VAN_DER_WAALS = "van_der_waals"
    CHARGE = "charge"
    PARTIAL_CHARGE = "partial_charge"


def _check_types(*types: int) -> None:
    for t in types:
        if t < 0 or t >= RADIX:
            raise ValueError(f"Atom type {t} outside encodable range 0..{RADIX - 1}")


def _check_class(kind: str, value: int, count: int) -> None:
    if value < 0 or value >= count:
        raise ValueError(f"{kind} type must be in 0..{count - 1}, got {value}")


# ------------------------------------------------------------------ #
#  Canonical ordering
# ------------------------------------------------------------------ #


def canonical_bond(a: int, b: int) -> Tuple[int, int]:
    """Order the two bond types ascending."""
    return (a, b) if a <= b else (b, a)


def canonical_angle(a: int, b: int, c: int) -> Tuple[int, int, int]:
    """Order the outer types ascending; the centre ``b`` is unchanged."""
    return (a, b, c) if a <= c else (c, b, a)


def canonical_strech_bend(a: int, b: int, c: int) -> Tuple[int, int, int]:
    """Stretch-bend constants are direction-specific, so no reordering."""
    return (a, b, c)


def canonical_out_of_plane(a: int, b: int, c: int, d: int) -> Tuple[int, int, int, int]:
    """
    Sort the three outer types (a, c, d) ascending around centre ``b``.

    The out-of-plane term is symmetric in its three outer atoms. This is
    a full sort on purpose rather than the two conditional swaps
    (a with d if a > c, then c with d if c > d) used by other MMFF
    readers: those swaps can leave the outer types unsorted, so
    re-canonicalizing a canonical tuple could change its key.
    """
    a, c, d = sorted((a, c, d))
    return (a, b, c, d)


def canonical_torsion(a: int, b: int, c: int, d: int) -> Tuple[int, int, int, int]:
    """
    Orient a torsion so its central pair is ascending.

    If the centres are out of order the whole torsion is reversed; if
    they are equal the outer pair decides the direction.
    """
    if b > c:
        return (d, c, b, a)
    if b == c and a > d:
        return (d, b, c, a)
    return (a, b, c, d)


# ------------------------------------------------------------------ #
#  Key encoding (inputs must already be canonical)
# ------------------------------------------------------------------ #


def bond_strech_index(bond_type: int, a: int, b: int) -> int:
    """
    Key for a bond-stretch term.

    Args:
        bond_type: MMFF bond type (0 or 1).
        a: First atom type.
        b: Second atom type.

    Returns:
        ``2 * (a * R + b) + bond_type``.

    Raises:
        ValueError: If any argument is outside its encodable range.
    """
    _check_class("Bond", bond_type, BOND_CLASSES)
    _check_types(a, b)
    return BOND_CLASSES * (a * RADIX + b) + bond_type


def angle_bend_index(angle_type: int, a: int, b: int, c: int) -> int:
    """Key for an angle-bend term: ``9 * (b R^2 + a R + c) + angle_type``."""
    _check_class("Angle", angle_type, ANGLE_CLASSES)
    _check_types(a, b, c)
    return ANGLE_CLASSES * (b * RADIX ** 2 + a * RADIX + c) + angle_type


def strech_bend_index(strech_bend_type: int, a: int, b: int, c: int) -> int:
    """Key for a stretch-bend term: ``12 * (b R^2 + a R + c) + type``."""
    _check_class("Stretch-bend", strech_bend_type, STRECH_BEND_CLASSES)
    _check_types(a, b, c)
    return STRECH_BEND_CLASSES * (b * RADIX ** 2 + a * RADIX + c) + strech_bend_type


def out_of_plane_index(a: int, b: int, c: int, d: int) -> int:
    """Key for an out-of-plane term centred on ``b``."""
    _check_types(a, b, c, d)
    return b * RADIX ** 3 + a * RADIX ** 2 + c * RADIX + d


def torsion_index(torsion_type: int, a: int, b: int, c: int, d: int) -> int:
    """Key for a torsion term: ``6 * (b R^3 + c R^2 + a R + d) + type``."""
    _check_class("Torsion", torsion_type, TORSION_CLASSES)
    _check_types(a, b, c, d)
    return TORSION_CLASSES * (
        b * RADIX ** 3 + c * RADIX ** 2 + a * RADIX + d
    ) + torsion_type
