"""
Step-down lookup for out-of-plane and torsion parameters.

When a table has no entry for the exact atom types of a term, MMFF
retries with the outer atom types replaced by their equivalents at
fixed levels, in a fixed order. The first hit wins. Bond, angle,
stretch-bend and non-bonded lookups never step down.
"""
import logging
from typing import Iterator, Optional, Tuple

from pymmff.core import OutOfPlaneBendParameters, TorsionParameters, equivalent_type

from .table import ParameterTable

logger = logging.getLogger(__name__)

# Levels applied to the three outer atoms (centre fixed)
OUT_OF_PLANE_LEVELS = (3, 4, 5)

# (level for a, level for d, force torsion type 0)
TORSION_STEPS = (
    (3, 5, False),
    (5, 3, False),
    (5, 5, False),
    (5, 5, True),
)


def out_of_plane_candidates(a: int, b: int, c: int, d: int) -> Iterator[Tuple[int, int, int, int]]:
    """
    Yield the type tuples tried for an out-of-plane term, in order.

    The exact types come first, then levels 3, 4 and 5. The sequence
    stops early if an outer type has no equivalence row.
    """
    yield (a, b, c, d)
    for level in OUT_OF_PLANE_LEVELS:
        outer = (equivalent_type(a, level), equivalent_type(c, level), equivalent_type(d, level))
        if None in outer:
            return
        ga, gc, gd = outer
        yield (ga, b, gc, gd)


def torsion_candidates(
    torsion_type: int, a: int, b: int, c: int, d: int
) -> Iterator[Tuple[int, int, int, int, int]]:
    """
    Yield the (torsion type, a, b, c, d) tuples tried for a torsion, in order.

    The last step keeps the level-5 outer types but forces the torsion
    type to 0, the force field's catch-all.
    """
    yield (torsion_type, a, b, c, d)
    for level_a, level_d, generic in TORSION_STEPS:
        ga = equivalent_type(a, level_a)
        gd = equivalent_type(d, level_d)
        if ga is None or gd is None:
            return
        yield (0 if generic else torsion_type, ga, b, c, gd)


class EquivalenceResolver:
    """
    Resolves out-of-plane and torsion parameters with step-down fallback.

    Attributes:
        table: The parameter table searched.
    """

    def __init__(self, table: ParameterTable) -> None:
        self.table = table

    def out_of_plane(self, a: int, b: int, c: int, d: int) -> Optional[OutOfPlaneBendParameters]:
        """
        Out-of-plane parameters for outer types a, c, d around centre b.

        Returns:
            The first entry found, or None if every step misses.
        """
        for step, types in enumerate(out_of_plane_candidates(a, b, c, d)):
            params = self.table.out_of_plane(*types)
            if params is not None:
                if step:
                    logger.debug("Out-of-plane %s resolved at step %d as %s", (a, b, c, d), step, types)
                return params
        return None

    def torsion(self, torsion_type: int, a: int, b: int, c: int, d: int) -> Optional[TorsionParameters]:
        """
        Torsion parameters for a-b-c-d with the given torsion type.

        Returns:
            The first entry found, or None if every step misses.
        """
        for step, key in enumerate(torsion_candidates(torsion_type, a, b, c, d)):
            params = self.table.torsion(*key)
            if params is not None:
                if step:
                    logger.debug("Torsion %s resolved at step %d as %s", (a, b, c, d), step, key)
                return params
        return None
