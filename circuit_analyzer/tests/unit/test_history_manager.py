"""Tests for the snapshot/undo stack and bounded operation log."""

import pytest
from circuit_analyzer.controllers.history_manager import DEFAULT_LOG_CAPACITY, HistoryManager
from circuit_analyzer.errors import SettingsError
from circuit_analyzer.models.component import ComponentData


def _snap(*ids):
    return tuple(ComponentData(i, "Resistor", 100.0, "SERIES") for i in ids)


class TestUndoStack:
    def test_initial_state(self):
        manager = HistoryManager()
        assert not manager.can_undo()
        assert manager.get_undo_count() == 0
        assert manager.get_log() == []

    def test_undo_empty_returns_none(self):
        manager = HistoryManager()
        assert manager.undo() is None
        assert manager.get_undo_count() == 0

    def test_lifo_order(self):
        manager = HistoryManager()
        manager.snapshot(_snap())
        manager.snapshot(_snap(1))
        manager.snapshot(_snap(1, 2))
        assert manager.undo() == _snap(1, 2)
        assert manager.undo() == _snap(1)
        assert manager.undo() == ()
        assert manager.undo() is None

    def test_snapshot_copies_input(self):
        manager = HistoryManager()
        components = list(_snap(1))
        manager.snapshot(components)
        components.append(ComponentData(2, "Inductor", 1.0, "PARALLEL"))
        assert manager.undo() == _snap(1)

    def test_unbounded_by_default(self):
        manager = HistoryManager()
        for i in range(500):
            manager.snapshot(_snap(i))
        assert manager.get_undo_count() == 500

    def test_max_depth_drops_oldest(self):
        manager = HistoryManager(max_depth=3)
        for i in range(1, 6):
            manager.snapshot(_snap(i))
        assert manager.get_undo_count() == 3
        assert [manager.undo() for _ in range(3)] == [_snap(5), _snap(4), _snap(3)]

    @pytest.mark.parametrize("kwargs", [{"max_depth": 0}, {"log_capacity": 0}])
    def test_invalid_limits_raise(self, kwargs):
        with pytest.raises(SettingsError):
            HistoryManager(**kwargs)


class TestOperationLog:
    def test_default_capacity(self):
        assert DEFAULT_LOG_CAPACITY == 20
        assert HistoryManager().log_capacity == 20

    def test_insertion_order(self):
        manager = HistoryManager()
        manager.log("first")
        manager.log("second")
        assert manager.get_log() == ["first", "second"]

    def test_eviction_after_21_entries(self):
        manager = HistoryManager()
        for i in range(1, 22):
            manager.log(f"op {i}")
        entries = manager.get_log()
        assert len(entries) == 20
        assert "op 1" not in entries
        assert entries[0] == "op 2"
        assert entries[-1] == "op 21"

    def test_get_log_returns_copy(self):
        manager = HistoryManager()
        manager.log("only")
        manager.get_log().append("tampered")
        assert manager.get_log() == ["only"]

    def test_log_independent_of_undo(self):
        manager = HistoryManager()
        manager.snapshot(_snap())
        manager.log("Added")
        manager.undo()
        assert manager.get_log() == ["Added"]
