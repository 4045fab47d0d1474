from __future__ import annotations

from studysprint.engine import DailyLog, DayStatus, Task, compute_day_progress, compute_day_status
from studysprint.engine.progress import round_half_up


def _task(task_id: str, minutes: int = 30, required: bool = False, order: int = 0) -> Task:
    return Task(id=task_id, title=task_id, category="Backend", estimated_minutes=minutes, required=required, order=order)


def test_empty_day_is_all_zero() -> None:
    progress = compute_day_progress([], ["anything"])

    assert progress.minutes_planned == 0
    assert progress.percent == 0
    assert progress.total_tasks == 0


def test_progress_counts_minutes_and_required() -> None:
    tasks = [_task("a", 60, required=True), _task("b", 30), _task("c", 30, required=True)]

    progress = compute_day_progress(tasks, ["a", "b"])

    assert progress.minutes_planned == 120
    assert progress.minutes_done == 90
    assert progress.percent == 75
    assert progress.total_tasks == 3
    assert progress.completed_tasks == 2
    assert progress.required_tasks == 2
    assert progress.completed_required_tasks == 1


def test_unknown_ids_are_ignored() -> None:
    tasks = [_task("task-1", 45)]

    assert compute_day_progress(tasks, ["task-1", "unknown"]) == compute_day_progress(tasks, ["task-1"])


def test_percent_rounds_half_up() -> None:
    # 1/8 of the minutes is 12.5%.
    tasks = [_task("a", 10), _task("b", 70)]

    assert compute_day_progress(tasks, ["a"]).percent == 13
    assert round_half_up(2.5) == 3
    assert round_half_up(0.49) == 0


def test_percent_is_100_only_when_everything_is_done() -> None:
    tasks = [_task("a", 100), _task("b", 1)]

    assert compute_day_progress(tasks, ["a"]).percent == 99
    assert compute_day_progress(tasks, ["a", "b"]).percent == 100
    assert compute_day_progress(tasks, []).percent == 0


def test_status_future_and_today() -> None:
    tasks = [_task("a", required=True)]

    assert compute_day_status("2024-01-05", tasks, None, "2024-01-04") is DayStatus.FUTURE
    assert compute_day_status("2024-01-04", tasks, None, "2024-01-04") is DayStatus.TODAY
    done_log = DailyLog(date="2024-01-04", completed_task_ids=("a",))
    assert compute_day_status("2024-01-04", tasks, done_log, "2024-01-04") is DayStatus.TODAY


def test_status_for_past_days() -> None:
    tasks = [_task("a", required=True), _task("b", required=True), _task("c")]
    today = "2024-01-10"

    def status(*completed: str) -> DayStatus:
        log = DailyLog(date="2024-01-02", completed_task_ids=completed)
        return compute_day_status("2024-01-02", tasks, log, today)

    assert status("a", "b") is DayStatus.DONE
    assert status("c") is DayStatus.PARTIAL
    assert status("a") is DayStatus.PARTIAL
    assert status() is DayStatus.BEHIND
    assert compute_day_status("2024-01-02", tasks, None, today) is DayStatus.BEHIND


def test_past_day_without_required_tasks_is_never_done() -> None:
    tasks = [_task("opt")]
    today = "2024-01-10"

    assert compute_day_status("2024-01-02", tasks, None, today) is DayStatus.BEHIND
    log = DailyLog(date="2024-01-02", completed_task_ids=("opt",))
    assert compute_day_status("2024-01-02", tasks, log, today) is DayStatus.PARTIAL
    assert compute_day_status("2024-01-02", [], None, today) is DayStatus.BEHIND
