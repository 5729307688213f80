"""
MMFF94 equivalent atom types (the MMFFDEF step-down table).

When no exact out-of-plane or torsion parameters exist for a set of
atom types, the lookup is retried with each type replaced by a more
general one. Levels 1 and 2 are the type itself; levels 3, 4 and 5
are increasingly coarse classes. A level-5 value of 0 is the MMFF
wildcard type.
"""
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np

# Columns: type, level 2, level 3, level 4, level 5
_EQUIVALENT_TYPES = np.array([
    [1, 1, 1, 1, 0],
    [2, 2, 2, 1, 0],
    [3, 3, 3, 1, 0],
    [4, 4, 4, 1, 0],
    [5, 5, 5, 5, 0],
    [6, 6, 6, 6, 0],
    [7, 7, 7, 6, 0],
    [8, 8, 8, 8, 0],
    [9, 9, 9, 8, 0],
    [10, 10, 10, 8, 0],
    [11, 11, 11, 11, 0],
    [12, 12, 12, 12, 0],
    [13, 13, 13, 13, 0],
    [14, 14, 14, 14, 0],
    [15, 15, 15, 15, 0],
    [16, 16, 16, 15, 0],
    [17, 17, 17, 15, 0],
    [18, 18, 18, 15, 0],
    [19, 19, 19, 19, 0],
    [20, 20, 1, 1, 0],
    [21, 21, 21, 5, 0],
    [22, 22, 22, 1, 0],
    [23, 23, 23, 5, 0],
    [24, 24, 24, 5, 0],
    [25, 25, 25, 25, 0],
    [26, 26, 26, 25, 0],
    [27, 27, 28, 5, 0],
    [28, 28, 28, 5, 0],
    [29, 29, 29, 5, 0],
    [30, 30, 2, 1, 0],
    [31, 31, 31, 31, 0],
    [32, 32, 7, 6, 0],
    [33, 33, 21, 5, 0],
    [34, 34, 8, 8, 0],
    [35, 35, 6, 6, 0],
    [36, 36, 36, 5, 0],
    [37, 37, 2, 1, 0],
    [38, 38, 9, 8, 0],
    [39, 39, 10, 8, 0],
    [40, 40, 10, 8, 0],
    [41, 41, 3, 1, 0],
    [42, 42, 42, 8, 0],
    [43, 43, 10, 8, 0],
    [44, 44, 16, 15, 0],
    [45, 45, 10, 8, 0],
    [46, 46, 9, 8, 0],
    [47, 47, 42, 8, 0],
    [48, 48, 9, 8, 0],
    [49, 49, 6, 6, 0],
    [50, 50, 21, 5, 0],
    [51, 51, 7, 6, 0],
    [52, 52, 21, 5, 0],
    [53, 53, 42, 8, 0],
    [54, 54, 9, 8, 0],
    [55, 55, 10, 8, 0],
    [56, 56, 10, 8, 0],
    [57, 57, 2, 1, 0],
    [58, 58, 10, 8, 0],
    [59, 59, 6, 6, 0],
    [60, 60, 4, 1, 0],
    [61, 61, 42, 8, 0],
    [62, 62, 10, 8, 0],
    [63, 63, 2, 1, 0],
    [64, 64, 2, 1, 0],
    [65, 65, 9, 8, 0],
    [66, 66, 9, 8, 0],
    [67, 67, 9, 8, 0],
    [68, 68, 8, 8, 0],
    [69, 69, 9, 8, 0],
    [70, 70, 70, 70, 70],
    [71, 71, 5, 5, 0],
    [72, 72, 16, 15, 0],
    [73, 73, 18, 15, 0],
    [74, 74, 17, 15, 0],
    [75, 75, 26, 25, 0],
    [76, 76, 9, 8, 0],
    [77, 77, 12, 12, 0],
    [78, 78, 2, 1, 0],
    [79, 79, 9, 8, 0],
    [80, 80, 2, 1, 0],
    [81, 81, 10, 8, 0],
    [82, 82, 9, 8, 0],
    [87, 87, 87, 87, 87],
    [88, 88, 88, 88, 88],
    [89, 89, 89, 89, 89],
    [90, 90, 90, 90, 90],
    [91, 91, 91, 91, 91],
    [92, 92, 92, 92, 92],
    [93, 93, 93, 93, 93],
    [94, 94, 94, 94, 94],
    [95, 95, 95, 95, 95],
    [96, 96, 96, 96, 96],
    [97, 97, 97, 97, 97],
    [98, 98, 98, 98, 98],
    [99, 99, 99, 99, 99],
], dtype=np.int16)

MIN_LEVEL = 1
MAX_LEVEL = 5


@dataclass(frozen=True)
class EquivalenceRow:
    """
    Generalized forms of one primary atom type.

    Attributes:
        type_number: The primary MMFF type.
        level2: Level-2 equivalent (the type itself in MMFF94).
        level3: Level-3 equivalent.
        level4: Level-4 equivalent.
        level5: Level-5 equivalent (0 is the wildcard type).
    """
    type_number: int
    level2: int
    level3: int
    level4: int
    level5: int

    def at_level(self, level: int) -> int:
        """Return the equivalent type at ``level`` (1..5)."""
        if level < 3:
            return self.type_number
        return (self.level3, self.level4, self.level5)[level - 3]


_ROWS: Dict[int, EquivalenceRow] = {
    int(row[0]): EquivalenceRow(*(int(v) for v in row)) for row in _EQUIVALENT_TYPES
}


def equivalence_row(type_number: int) -> Optional[EquivalenceRow]:
    """Return the equivalence row for ``type_number`` or None."""
    return _ROWS.get(type_number)


def equivalent_type(type_number: int, level: int) -> Optional[int]:
    """
    Generalize an atom type to the given equivalence level.

    Args:
        type_number: MMFF atom type.
        level: Equivalence level, 1..5.

    Returns:
        ``type_number`` for levels below 3; the level-3/4/5 class for
        higher levels; None if the type has no equivalence row.

    Raises:
        ValueError: If ``level`` is outside 1..5.

    Example:
        >>> equivalent_type(37, 3)
        2
        >>> equivalent_type(37, 5)
        0
    """
    if level < MIN_LEVEL or level > MAX_LEVEL:
        raise ValueError(f"Equivalence level must be in 1..5, got {level}")
    if level < 3:
        return type_number
    row = _ROWS.get(type_number)
    if row is None:
        return None
    return row.at_level(level)


def known_types() -> Tuple[int, ...]:
    """Primary types that have an equivalence row, ascending."""
    return tuple(sorted(_ROWS))
