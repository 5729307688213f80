"""
Reader for sectioned MMFF parameter text files.

File layout:
    - Lines starting with ``$`` end the current section and start the
      next one. Sections appear in the fixed order of :class:`Section`;
      entering ``END`` stops parsing.
    - Lines starting with ``#`` are comments.
    - Any other line is a whitespace-separated row whose fields are
      interpreted positionally according to the current section.

Parsing is deliberately forgiving: rows with fewer than two fields are
skipped, missing or unparsable numeric fields read as zero, and rows
that cannot be encoded are dropped. Only an unreadable source fails
the load.
"""
import logging
from enum import IntEnum
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, TextIO, Union

from pymmff.core import (
    MAX_ATOM_TYPE,
    AngleBendParameters,
    BondStrechParameters,
    ChargeParameters,
    DefaultStrechBendParameters,
    OutOfPlaneBendParameters,
    ParameterSourceError,
    PartialChargeParameters,
    Result,
    StrechBendParameters,
    TorsionParameters,
    VanDerWaalsParameters,
)

from .cache import ParametersCache
from .table import ParameterTable

logger = logging.getLogger(__name__)

SourceLike = Union[str, Path]


class Section(IntEnum):
    """Parameter-file sections, in file order."""

    BOND_STRECH = 0
    EMPIRICAL_BOND_STRECH = 1
    ANGLE_BEND = 2
    STRECH_BEND = 3
    DEFAULT_STRECH_BEND = 4
    OUT_OF_PLANE_BEND = 5
    TORSION = 6
    VAN_DER_WAALS = 7
    CHARGE = 8
    PARTIAL_CHARGE = 9
    END = 10

    def next(self) -> "Section":
        """The section entered on the next ``$`` marker."""
        if self is Section.END:
            return Section.END
        return Section(self + 1)


def _int(fields: List[str], position: int) -> int:
    try:
        return int(fields[position])
    except (IndexError, ValueError):
        return 0


def _float(fields: List[str], position: int) -> float:
    try:
        return float(fields[position])
    except (IndexError, ValueError):
        return 0.0


def _text(fields: List[str], position: int, default: str = "") -> str:
    if position < len(fields) and fields[position]:
        return fields[position]
    return default


class _SectionParser:
    """Parse state for one pass over a parameter source."""

    def __init__(self, table: ParameterTable) -> None:
        self.table = table
        self.section = Section.BOND_STRECH
        self.skipped = 0
        self._handlers: Dict[Section, Callable[[List[str]], None]] = {
            Section.BOND_STRECH: self._bond_strech,
            Section.EMPIRICAL_BOND_STRECH: self._ignore,
            Section.ANGLE_BEND: self._angle_bend,
            Section.STRECH_BEND: self._strech_bend,
            Section.DEFAULT_STRECH_BEND: self._default_strech_bend,
            Section.OUT_OF_PLANE_BEND: self._out_of_plane,
            Section.TORSION: self._torsion,
            Section.VAN_DER_WAALS: self._van_der_waals,
            Section.CHARGE: self._charge,
            Section.PARTIAL_CHARGE: self._partial_charge,
        }

    def feed(self, line: str, line_number: int) -> bool:
        """
        Consume one line.

        Returns:
            False once the END section has been entered.
        """
        if line.startswith("$"):
            self.section = self.section.next()
            logger.debug("Line %d: entering section %s", line_number, self.section.name)
            return self.section is not Section.END

        if line.startswith("#"):
            return True

        fields = line.split()
        if len(fields) < 2:
            if fields:
                self.skipped += 1
                logger.debug("Line %d: skipping row with %d field(s)", line_number, len(fields))
            return True

        try:
            self._handlers[self.section](fields)
        except ValueError as e:
            self.skipped += 1
            logger.debug("Line %d: skipping row in %s: %s", line_number, self.section.name, e)
        return True

    # ------------------------------------------------------------------ #
    #  Row handlers
    # ------------------------------------------------------------------ #

    def _ignore(self, fields: List[str]) -> None:
        pass

    def _bond_strech(self, f: List[str]) -> None:
        self.table.add_bond_strech(
            _int(f, 0), _int(f, 1), _int(f, 2),
            BondStrechParameters(kb=_float(f, 3), r0=_float(f, 4)),
        )

    def _angle_bend(self, f: List[str]) -> None:
        self.table.add_angle_bend(
            _int(f, 0), _int(f, 1), _int(f, 2), _int(f, 3),
            AngleBendParameters(ka=_float(f, 4), theta0=_float(f, 5)),
        )

    def _strech_bend(self, f: List[str]) -> None:
        self.table.add_strech_bend(
            _int(f, 0), _int(f, 1), _int(f, 2), _int(f, 3),
            StrechBendParameters(kba_ijk=_float(f, 4), kba_kji=_float(f, 5)),
        )

    def _default_strech_bend(self, f: List[str]) -> None:
        self.table.add_default_strech_bend(
            DefaultStrechBendParameters(
                row_a=_int(f, 0),
                row_b=_int(f, 1),
                row_c=_int(f, 2),
                parameters=StrechBendParameters(kba_ijk=_float(f, 3), kba_kji=_float(f, 4)),
            )
        )

    def _out_of_plane(self, f: List[str]) -> None:
        self.table.add_out_of_plane(
            _int(f, 0), _int(f, 1), _int(f, 2), _int(f, 3),
            OutOfPlaneBendParameters(koop=_float(f, 4)),
        )

    def _torsion(self, f: List[str]) -> None:
        self.table.add_torsion(
            _int(f, 0), _int(f, 1), _int(f, 2), _int(f, 3), _int(f, 4),
            TorsionParameters(v1=_float(f, 5), v2=_float(f, 6), v3=_float(f, 7)),
        )

    def _van_der_waals(self, f: List[str]) -> None:
        type_number = _int(f, 0)
        if type_number > MAX_ATOM_TYPE:
            raise ValueError(f"atom type {type_number} exceeds {MAX_ATOM_TYPE}")
        self.table.add_van_der_waals(
            type_number,
            VanDerWaalsParameters(
                alpha=_float(f, 1),
                n=_float(f, 2),
                a=_float(f, 3),
                g=_float(f, 4),
                da=_text(f, 5, "-")[0],
            ),
        )

    def _charge(self, f: List[str]) -> None:
        self.table.add_charge(
            ChargeParameters(bond_type=_int(f, 0), type_a=_int(f, 1), type_b=_int(f, 2), bci=_float(f, 3))
        )

    def _partial_charge(self, f: List[str]) -> None:
        # Field 0 is the row's species code; the atom type is field 1.
        type_number = _int(f, 1)
        if type_number > MAX_ATOM_TYPE:
            raise ValueError(f"atom type {type_number} exceeds {MAX_ATOM_TYPE}")
        self.table.add_partial_charge(
            type_number, PartialChargeParameters(pbci=_float(f, 2), fcadj=_float(f, 3))
        )


class TableLoader:
    """
    Loads MMFF parameter files into shared :class:`ParameterTable` objects.

    A loader is bound to a :class:`ParametersCache`; repeated loads of
    the same source return the cached table without re-parsing. The
    most recent failure message is kept in :attr:`error_string`.

    Attributes:
        cache: Cache of parsed tables, or None to always re-parse.
        error_string: Message for the last failed load ("" if none).

    Example:
        >>> loader = TableLoader(ParametersCache())
        >>> result = loader.load("mmff94.prm")
        >>> if result.ok:
        ...     table = result.value
    """

    name = "mmff"

    def __init__(self, cache: Optional[ParametersCache] = None) -> None:
        self.cache = cache
        self.error_string = ""

    def load(self, source: SourceLike) -> Result[ParameterTable]:
        """
        Load the parameter file at ``source``.

        Args:
            source: Path of the parameter file; its string form is the
                cache key.

        Returns:
            A successful Result holding the (possibly cached) table, or
            a failed Result if the file cannot be opened.
        """
        source_id = str(source)

        try:
            if self.cache is None:
                table = self._parse_file(source_id)
            else:
                table = self.cache.get_or_create(source_id, lambda: self._parse_file(source_id))
        except ParameterSourceError as e:
            self.error_string = str(e)
            logger.warning("Cannot load MMFF parameters: %s", e)
            return Result.failure(self.error_string)
        return Result.success(table)

    def load_stream(self, stream: Iterable[str], source_id: str) -> Result[ParameterTable]:
        """
        Parse an already-open text stream and cache it under ``source_id``.

        Returns the cached table instead if ``source_id`` is already cached,
        and a failed Result if the stream cannot be read or decoded.
        """
        try:
            if self.cache is None:
                table = self._parse_stream(stream, source_id)
            else:
                table = self.cache.get_or_create(
                    source_id, lambda: self._parse_stream(stream, source_id)
                )
        except ParameterSourceError as e:
            self.error_string = str(e)
            logger.warning("Cannot load MMFF parameters: %s", e)
            return Result.failure(self.error_string)
        return Result.success(table)

    def _parse_stream(self, stream: Iterable[str], source_id: str) -> ParameterTable:
        try:
            return self.parse(stream, source_id)
        except (OSError, UnicodeDecodeError) as e:
            raise ParameterSourceError(source_id, f"cannot read source ({e})") from e

    def parse(self, lines: Iterable[str], source_id: str = "") -> ParameterTable:
        """
        Parse parameter text into a new, frozen table (no caching).

        Args:
            lines: Any iterable of text lines (file object, list, ...).
            source_id: Identifier recorded on the table.
        """
        table = ParameterTable(source_id)
        parser = _SectionParser(table)

        for line_number, line in enumerate(lines, start=1):
            if not parser.feed(line, line_number):
                break

        table.freeze()
        logger.info(
            "Parsed MMFF parameters from %s: %d rows (%d skipped)",
            source_id or "<stream>", len(table), parser.skipped,
        )
        return table

    def _parse_file(self, source_id: str) -> ParameterTable:
        try:
            handle: TextIO = open(source_id, "r", encoding="utf-8", errors="replace")
        except OSError as e:
            raise ParameterSourceError(source_id, f"cannot open source ({e.strerror})") from e

        with handle:
            logger.info("Reading MMFF parameters from %s", source_id)
            return self._parse_stream(handle, source_id)
