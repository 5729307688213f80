"""
Topology classification of MMFF interaction terms.

Pure functions mapping the atoms of a term to the small integer
"type" codes that select among parameter variants: bond type 0-1,
angle type 0-8, stretch-bend type 0-11 and torsion type 0-5.
"""
from pymmff.topology import MmffAtom

# (ring context, bond-type sum) -> angle type
_ANGLE_TYPES = {
    "acyclic": (0, 1, 2),
    "ring4": (4, 7, 8),
    "ring3": (3, 5, 6),
}

# angle type -> stretch-bend type, for angles whose code does not
# depend on which flanking bond carries bond type 1
_FIXED_STRECH_BEND_TYPES = {0: 0, 2: 3, 3: 5, 4: 4, 6: 8, 8: 11}

# angle type -> (type when i-j has bond type 1, type when j-k has it)
_DIRECTED_STRECH_BEND_TYPES = {1: (1, 2), 5: (6, 7), 7: (9, 10)}


def bond_type(a: MmffAtom, b: MmffAtom) -> int:
    """
    MMFF bond type of the bond a-b.

    Returns 1 for a formal, non-aromatic single bond between two atoms
    whose types both carry the ``sbmb`` flag or both carry ``arom``;
    0 otherwise (including unbonded pairs and untyped atoms).
    """
    pa = a.parameters
    pb = b.parameters
    if pa is None or pb is None:
        return 0

    graph = a.graph
    if graph.bond_order(a.index, b.index) != 1:
        return 0
    if graph.is_aromatic_bond(a.index, b.index):
        return 0

    if pa.sbmb and pb.sbmb:
        return 1
    if pa.arom and pb.arom:
        return 1
    return 0


def _ring_context(a: MmffAtom, b: MmffAtom, c: MmffAtom) -> str:
    if a.is_bonded_to(c):
        return "ring3"
    for neighbor in a.neighbors():
        if neighbor.index == b.index:
            continue
        if neighbor.is_bonded_to(c):
            return "ring4"
    return "acyclic"


def angle_type(a: MmffAtom, b: MmffAtom, c: MmffAtom) -> int:
    """
    MMFF angle type of the angle a-b-c (``b`` central).

    Three-membered ring context (a bonded to c) takes priority over
    four-membered ring context (a neighbour of a, other than b, bonded
    to c), which takes priority over the acyclic case. Within each
    context the code depends on the sum of the two flanking bond types.
    """
    bond_type_sum = bond_type(a, b) + bond_type(b, c)
    return _ANGLE_TYPES[_ring_context(a, b, c)][bond_type_sum]


def strech_bend_type(a: MmffAtom, b: MmffAtom, c: MmffAtom) -> int:
    """
    MMFF stretch-bend type of the angle a-b-c.

    0 means no explicit entry applies and the default stretch-bend
    parameters (by periodic-table row) should be used.
    """
    angle = angle_type(a, b, c)

    if angle in _FIXED_STRECH_BEND_TYPES:
        return _FIXED_STRECH_BEND_TYPES[angle]

    first, second = _DIRECTED_STRECH_BEND_TYPES[angle]
    if bond_type(a, b) == 1:
        return first
    if bond_type(b, c) == 1:
        return second
    return 0


def torsion_type(a: MmffAtom, b: MmffAtom, c: MmffAtom, d: MmffAtom) -> int:
    """
    MMFF torsion type of the torsion a-b-c-d.

    4 if a and d are bonded (four-membered ring); 5 if all four atoms
    share a non-aromatic five-membered ring; 1 if b-c has bond type 1;
    2 if a-b or c-d has bond type 1; 0 otherwise.
    """
    if a.is_bonded_to(d):
        return 4

    for ring in a.rings():
        if ring.size == 5 and ring.contains(b.index, c.index, d.index) and not ring.aromatic:
            return 5

    if bond_type(b, c) == 1:
        return 1
    if bond_type(a, b) == 1 or bond_type(c, d) == 1:
        return 2
    return 0
