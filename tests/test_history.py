"""Undo/redo history tests."""

from __future__ import annotations

import pytest

from budgetgrid.services.history import HistoryManager
from budgetgrid.services.store import EMPTY_STORE, TimeKeyedStore


def _snapshot(n: int) -> TimeKeyedStore:
    return EMPTY_STORE.with_set("food", 0, float(n))


def test_starts_with_single_empty_snapshot():
    history = HistoryManager()

    assert len(history) == 1
    assert history.current == EMPTY_STORE
    assert not history.can_undo
    assert not history.can_redo


def test_record_undo_redo_walks_the_list():
    history = HistoryManager()
    history.record(_snapshot(1))
    history.record(_snapshot(2))

    assert history.undo() == _snapshot(1)
    assert history.undo() == EMPTY_STORE
    assert history.undo() is None
    assert history.cursor == 0

    assert history.redo() == _snapshot(1)
    assert history.redo() == _snapshot(2)
    assert history.redo() is None
    assert history.cursor == 2


def test_snapshots_are_kept_by_reference():
    history = HistoryManager()
    snap = _snapshot(1)

    history.record(snap)

    assert history.current is snap


def test_sixty_snapshots_keep_the_newest_fifty():
    history = HistoryManager(_snapshot(1))
    for n in range(2, 61):
        history.record(_snapshot(n))

    assert len(history) == 50
    assert history.current == _snapshot(60)

    for _ in range(49):
        assert history.undo() is not None
    assert history.current == _snapshot(11)

    # 50th undo and beyond are no-ops
    assert history.undo() is None
    assert history.undo() is None
    assert history.current == _snapshot(11)
    assert history.cursor == 0


def test_recording_after_undo_discards_redo_branch():
    history = HistoryManager()
    history.record(_snapshot(1))
    history.record(_snapshot(2))

    history.undo()
    history.record(_snapshot(3))

    assert history.redo() is None
    assert len(history) == 3
    assert history.current == _snapshot(3)
    assert history.undo() == _snapshot(1)


def test_reset_is_an_undoable_step():
    history = HistoryManager()
    history.record(_snapshot(1))

    history.reset()

    assert history.current == EMPTY_STORE
    assert history.undo() == _snapshot(1)


def test_replace_starts_a_fresh_history():
    history = HistoryManager()
    history.record(_snapshot(1))
    history.record(_snapshot(2))

    history.replace(_snapshot(9))

    assert len(history) == 1
    assert history.current == _snapshot(9)
    assert not history.can_undo


def test_max_size_must_be_positive():
    with pytest.raises(ValueError):
        HistoryManager(max_size=0)
