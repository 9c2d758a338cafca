"""Linear undo/redo history of whole-store snapshots."""

from __future__ import annotations

from ..logging_config import get_logger
from .store import EMPTY_STORE, TimeKeyedStore

logger = get_logger("history")

MAX_HISTORY_SIZE = 50


class HistoryManager:
    """Bounded list of snapshots with a cursor.

    Recording from the middle of the list drops everything after the cursor;
    there is no redo tree. Once more than ``max_size`` snapshots are held the
    oldest one is evicted.
    """

    def __init__(
        self, initial: TimeKeyedStore | None = None, *, max_size: int = MAX_HISTORY_SIZE
    ) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self._snapshots: list[TimeKeyedStore] = [initial if initial is not None else EMPTY_STORE]
        self._cursor = 0

    @property
    def current(self) -> TimeKeyedStore:
        return self._snapshots[self._cursor]

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._snapshots) - 1

    def record(self, snapshot: TimeKeyedStore) -> None:
        del self._snapshots[self._cursor + 1 :]
        self._snapshots.append(snapshot)
        if len(self._snapshots) > self.max_size:
            evicted = len(self._snapshots) - self.max_size
            del self._snapshots[:evicted]
            logger.debug("Evicted oldest history entries", extra={"evicted": evicted})
        self._cursor = len(self._snapshots) - 1

    def undo(self) -> TimeKeyedStore | None:
        if not self.can_undo:
            return None
        self._cursor -= 1
        return self.current

    def redo(self) -> TimeKeyedStore | None:
        if not self.can_redo:
            return None
        self._cursor += 1
        return self.current

    def reset(self) -> None:
        """Record an empty store as a new, undoable step."""

        self.record(EMPTY_STORE)

    def replace(self, snapshot: TimeKeyedStore) -> None:
        """Start a new history whose only entry is ``snapshot`` (used after loading)."""

        self._snapshots = [snapshot]
        self._cursor = 0

    def __len__(self) -> int:
        return len(self._snapshots)


__all__ = ["HistoryManager", "MAX_HISTORY_SIZE"]
