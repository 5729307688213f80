"""
MMFF94 force-field setup.

Enumerates the bonded and non-bonded terms of a typed molecule and
resolves parameters for each one. Energy evaluation is left to the
caller; this module only decides which parameters every term uses and
which terms have none.
"""
import logging
from dataclasses import dataclass, field
from itertools import combinations
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from pymmff.parameters import MmffParameters, ParametersCache, TermKind
from pymmff.topology import MmffAtom, MolecularGraph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Term:
    """
    One interaction term and its resolved parameters.

    Attributes:
        kind: Term kind.
        atoms: Atom indices in term order.
        parameters: Parameter record, or None if unresolved.
        default: True if the parameters came from a fallback rule
            (default stretch-bend by periodic row, reversed or
            partial-charge bond increments).
    """
    kind: TermKind
    atoms: Tuple[int, ...]
    parameters: Any = None
    default: bool = False

    @property
    def resolved(self) -> bool:
        return self.parameters is not None


@dataclass
class SetupReport:
    """
    Outcome of :meth:`MmffForceField.setup`.

    Attributes:
        terms: Every resolved term.
        missing: Terms for which no parameters were found.
        message: Human-readable summary.
    """
    terms: List[Term] = field(default_factory=list)
    missing: List[Term] = field(default_factory=list)
    message: str = ""

    @property
    def ok(self) -> bool:
        return not self.missing

    def count(self, kind: TermKind) -> int:
        return sum(1 for term in self.terms if term.kind is kind)

    def of_kind(self, kind: TermKind) -> List[Term]:
        return [term for term in self.terms if term.kind is kind]


class MmffForceField:
    """
    MMFF94 force field bound to one parameter table.

    Attributes:
        parameters: Parameter lookups used during setup.

    Example:
        >>> ff = MmffForceField()
        >>> ff.read_parameters("mmff94.prm")
        True
        >>> report = ff.setup(molecule)
        >>> report.ok, report.count(TermKind.TORSION)
        (True, 9)
    """

    name = "mmff"

    def __init__(
        self,
        parameters: Optional[MmffParameters] = None,
        cache: Optional[ParametersCache] = None,
    ) -> None:
        self.parameters = parameters if parameters is not None else MmffParameters(cache)

    @property
    def error_string(self) -> str:
        return self.parameters.error_string

    def read_parameters(self, file_name: Union[str, Path]) -> bool:
        return self.parameters.read(file_name)

    def setup(self, molecule: MolecularGraph) -> SetupReport:
        """
        Resolve parameters for every term of ``molecule``.

        Args:
            molecule: Typed molecular graph.

        Returns:
            SetupReport listing resolved and missing terms.
        """
        report = SetupReport()
        if not self.parameters.is_loaded:
            report.message = "No MMFF parameters loaded"
            return report

        atoms = list(molecule.atoms())
        for term in self._terms(molecule, atoms):
            if term.resolved:
                report.terms.append(term)
            else:
                report.missing.append(term)

        counts: Dict[TermKind, int] = {}
        for term in report.terms:
            counts[term.kind] = counts.get(term.kind, 0) + 1
        summary = ", ".join(f"{kind.value}={n}" for kind, n in counts.items())
        report.message = f"Resolved {len(report.terms)} terms ({summary}); {len(report.missing)} missing"

        if report.missing:
            logger.warning("MMFF setup: %d term(s) without parameters", len(report.missing))
        logger.info("MMFF setup: %s", report.message)
        return report

    # ------------------------------------------------------------------ #
    #  Term enumeration
    # ------------------------------------------------------------------ #

    def _terms(self, molecule: MolecularGraph, atoms: List[MmffAtom]):
        yield from self._bond_terms(molecule, atoms)
        yield from self._angle_terms(molecule, atoms)
        yield from self._out_of_plane_terms(molecule, atoms)
        yield from self._torsion_terms(molecule, atoms)
        yield from self._atom_terms(atoms)

    def _bond_terms(self, molecule: MolecularGraph, atoms: List[MmffAtom]):
        p = self.parameters
        for i, j in molecule.bonds():
            a, b = atoms[i], atoms[j]
            yield Term(TermKind.BOND_STRECH, (i, j), p.bond_strech_parameters(a, b))
            yield self._charge_term(a, b)

    def _charge_term(self, a: MmffAtom, b: MmffAtom) -> Term:
        p = self.parameters
        atoms = (a.index, b.index)

        params = p.charge_parameters(a, b)
        if params is not None:
            return Term(TermKind.CHARGE, atoms, params.bci)

        reverse = p.charge_parameters(b, a)
        if reverse is not None:
            return Term(TermKind.CHARGE, atoms, -reverse.bci, default=True)

        pa = p.partial_charge_parameters(a)
        pb = p.partial_charge_parameters(b)
        if pa is not None and pb is not None:
            return Term(TermKind.CHARGE, atoms, pa.pbci - pb.pbci, default=True)
        return Term(TermKind.CHARGE, atoms)

    def _angle_terms(self, molecule: MolecularGraph, atoms: List[MmffAtom]):
        p = self.parameters
        for j in range(len(atoms)):
            for i, k in combinations(sorted(molecule.neighbors(j)), 2):
                a, b, c = atoms[i], atoms[j], atoms[k]
                yield Term(TermKind.ANGLE_BEND, (i, j, k), p.angle_bend_parameters(a, b, c))

                params = p.strech_bend_parameters(a, b, c)
                if params is not None:
                    yield Term(TermKind.STRECH_BEND, (i, j, k), params)
                else:
                    yield Term(
                        TermKind.STRECH_BEND, (i, j, k),
                        p.default_strech_bend_parameters(a, b, c), default=True,
                    )

    def _out_of_plane_terms(self, molecule: MolecularGraph, atoms: List[MmffAtom]):
        p = self.parameters
        for j in range(len(atoms)):
            neighbors = sorted(molecule.neighbors(j))
            if len(neighbors) != 3:
                continue
            i, k, l = neighbors
            for a, c, d in ((i, k, l), (i, l, k), (k, l, i)):
                params = p.out_of_plane_bending_parameters(atoms[a], atoms[j], atoms[c], atoms[d])
                yield Term(TermKind.OUT_OF_PLANE_BEND, (a, j, c, d), params)

    def _torsion_terms(self, molecule: MolecularGraph, atoms: List[MmffAtom]):
        p = self.parameters
        for j, k in molecule.bonds():
            for i in sorted(molecule.neighbors(j)):
                if i == k:
                    continue
                for l in sorted(molecule.neighbors(k)):
                    if l == j or l == i:
                        continue
                    params = p.torsion_parameters(atoms[i], atoms[j], atoms[k], atoms[l])
                    yield Term(TermKind.TORSION, (i, j, k, l), params)

    def _atom_terms(self, atoms: List[MmffAtom]):
        p = self.parameters
        for atom in atoms:
            yield Term(TermKind.VAN_DER_WAALS, (atom.index,), p.van_der_waals_parameters(atom))
