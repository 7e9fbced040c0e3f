from src.memory_match.services.scheduler import Scheduler

from .conftest import FakeClock, pending_tasks


def test_runs_due_tasks_in_order() -> None:
    clock = FakeClock()
    scheduler = Scheduler(clock=clock)
    calls: list[str] = []
    scheduler.call_later(1.0, lambda: calls.append("late"))
    scheduler.call_later(0.4, lambda: calls.append("early"))
    scheduler.call_later(0.4, lambda: calls.append("early-2"))
    assert scheduler.run_pending() == 0
    clock.advance(0.5)
    assert scheduler.run_pending() == 2
    assert calls == ["early", "early-2"]
    assert scheduler.run_pending(now=1.0) == 1
    assert calls == ["early", "early-2", "late"]


def test_cancelled_tasks_never_run() -> None:
    clock = FakeClock()
    scheduler = Scheduler(clock=clock)
    calls: list[int] = []
    task = scheduler.call_later(0.1, lambda: calls.append(1))
    scheduler.call_later(0.2, lambda: calls.append(2))
    task.cancel()
    assert len(pending_tasks(scheduler)) == 1
    scheduler.cancel_all()
    clock.advance(1)
    assert scheduler.run_pending() == 0
    assert calls == []


def test_tasks_scheduled_from_callbacks_catch_up() -> None:
    clock = FakeClock()
    scheduler = Scheduler(clock=clock)
    fired: list[float] = []

    def _repeat(due: float) -> None:
        fired.append(due)
        if due < 3.0:
            scheduler.call_at(due + 1.0, lambda: _repeat(due + 1.0))

    scheduler.call_at(1.0, lambda: _repeat(1.0))
    clock.advance(5.0)
    assert scheduler.run_pending() == 3
    assert fired == [1.0, 2.0, 3.0]


def test_negative_delay_runs_immediately() -> None:
    clock = FakeClock(10.0)
    scheduler = Scheduler(clock=clock)
    calls: list[int] = []
    scheduler.call_later(-5, lambda: calls.append(1))
    assert scheduler.run_pending() == 1
    assert calls == [1]
