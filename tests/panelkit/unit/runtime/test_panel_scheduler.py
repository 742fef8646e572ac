from __future__ import annotations

import pytest

from panelkit.runtime.scheduler import Scheduler


def test_scheduler_call_later_runs_when_due() -> None:
    scheduler = Scheduler()
    calls: list[str] = []
    scheduler.call_later(0.2, lambda: calls.append("once"))

    assert scheduler.advance(0.1) == 0
    assert calls == []
    assert scheduler.advance(0.1) == 1
    assert calls == ["once"]
    assert scheduler.queued_task_count == 0


def test_scheduler_runs_due_tasks_in_order() -> None:
    scheduler = Scheduler()
    calls: list[str] = []
    scheduler.call_later(0.3, lambda: calls.append("late"))
    scheduler.call_later(0.1, lambda: calls.append("early"))
    scheduler.call_later(0.1, lambda: calls.append("early-second"))

    assert scheduler.advance(0.5) == 3
    assert calls == ["early", "early-second", "late"]
    assert scheduler.now_seconds == pytest.approx(0.5)


def test_scheduler_task_scheduled_from_callback_waits_for_next_due_time() -> None:
    scheduler = Scheduler()
    calls: list[str] = []

    def first() -> None:
        calls.append("first")
        scheduler.call_later(0.2, lambda: calls.append("second"))

    scheduler.call_later(0.1, first)
    assert scheduler.advance(0.1) == 1
    assert calls == ["first"]
    assert scheduler.advance(0.2) == 1
    assert calls == ["first", "second"]


def test_scheduler_validates_time_arguments() -> None:
    scheduler = Scheduler()
    with pytest.raises(ValueError):
        scheduler.call_later(-0.1, lambda: None)
    with pytest.raises(ValueError):
        scheduler.advance(-1.0)
    scheduler.advance(1.0)
    with pytest.raises(ValueError):
        scheduler.run_due(0.5)
