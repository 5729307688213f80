"""
Shared cache of parsed parameter tables.

Force-field instances that read the same parameter source share one
:class:`ParameterTable`. The cache holds one reference per source; every
force field using the table holds another, so a table replaced in the
cache stays alive until its last user lets go of it.
"""
import logging
import threading
from typing import Callable, Dict, List, Optional

from .table import ParameterTable

logger = logging.getLogger(__name__)


class ParametersCache:
    """
    Thread-safe mapping from source identifier to a loaded table.

    Tables are published only once fully parsed and frozen, so a reader
    sees either nothing or a complete table. Concurrent loads of the
    same source are serialized so the source is parsed once.

    Example:
        >>> cache = ParametersCache()
        >>> table = cache.get_or_create("mmff94.prm", lambda: loader.parse(lines))
        >>> cache.get("mmff94.prm") is table
        True
    """

    def __init__(self) -> None:
        self._tables: Dict[str, ParameterTable] = {}
        self._lock = threading.Lock()
        self._source_locks: Dict[str, threading.Lock] = {}

    def get(self, source_id: str) -> Optional[ParameterTable]:
        """Return the cached table for ``source_id`` or None."""
        with self._lock:
            table = self._tables.get(source_id)
        if table is not None:
            logger.debug("Parameter cache hit for %s", source_id)
        return table

    def store(self, source_id: str, table: ParameterTable) -> None:
        """
        Publish ``table`` under ``source_id``, replacing any previous entry.

        The table is frozen before it becomes visible.
        """
        table.freeze()
        with self._lock:
            previous = self._tables.get(source_id)
            self._tables[source_id] = table
        if previous is not None and previous is not table:
            logger.debug("Replaced cached parameters for %s", source_id)
        else:
            logger.debug("Cached parameters for %s", source_id)

    def get_or_create(self, source_id: str, factory: Callable[[], ParameterTable]) -> ParameterTable:
        """
        Return the cached table, building and storing it on a miss.

        Only one caller builds a given source at a time; others wait
        and then receive the stored table. Exceptions from ``factory``
        propagate and leave the cache unchanged.
        """
        table = self.get(source_id)
        if table is not None:
            return table

        with self._lock:
            source_lock = self._source_locks.setdefault(source_id, threading.Lock())

        with source_lock:
            table = self.get(source_id)
            if table is None:
                table = factory()
                self.store(source_id, table)
        return table

    def release(self, source_id: str) -> bool:
        """Drop the cache's reference to ``source_id``. Returns True if present."""
        with self._lock:
            table = self._tables.pop(source_id, None)
            self._source_locks.pop(source_id, None)
        if table is not None:
            logger.debug("Released cached parameters for %s", source_id)
        return table is not None

    def clear(self) -> None:
        with self._lock:
            self._tables.clear()
            self._source_locks.clear()

    def sources(self) -> List[str]:
        with self._lock:
            return sorted(self._tables)

    def __contains__(self, source_id: str) -> bool:
        with self._lock:
            return source_id in self._tables

    def __len__(self) -> int:
        with self._lock:
            return len(self._tables)


_default_cache: Optional[ParametersCache] = None
_default_cache_lock = threading.Lock()


def default_cache() -> ParametersCache:
    """Process-wide cache used when no cache is passed explicitly."""
    global _default_cache
    with _default_cache_lock:
        if _default_cache is None:
            _default_cache = ParametersCache()
        return _default_cache
