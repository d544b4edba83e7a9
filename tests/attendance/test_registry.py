from __future__ import annotations

from datetime import timedelta

from distribution_admin.attendance.editor import AttendanceEditor
from distribution_admin.attendance.registry import EditorRegistry
from tests.fakes import ANCHOR, TODAY, FakeAttendanceRepo


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def new_editor():
    return AttendanceEditor(FakeAttendanceRepo(), anchor=ANCHOR, today_provider=lambda: TODAY)


def test_same_key_returns_same_editor():
    registry = EditorRegistry()

    first = registry.get_or_create("a", new_editor)

    assert registry.get_or_create("a", new_editor) is first
    assert len(registry) == 1


def test_discard_removes_editor():
    registry = EditorRegistry()
    registry.get_or_create("a", new_editor)

    registry.discard("a")
    registry.discard("missing")

    assert len(registry) == 0


def test_idle_editors_are_evicted():
    clock = FakeClock()
    registry = EditorRegistry(max_idle=timedelta(hours=1), clock=clock)
    stale = registry.get_or_create("old", new_editor)
    registry.get_or_create("busy", new_editor)

    clock.now = 3000
    registry.get_or_create("busy", new_editor)
    clock.now = 4000
    registry.get_or_create("new", new_editor)

    assert len(registry) == 2
    assert registry.get_or_create("old", new_editor) is not stale
