from __future__ import annotations

from studysprint.engine import DailyLog, DayStatus, PlanDaySnapshot, Task, build_generated_days


def _task(task_id: str, order: int, required: bool = True) -> Task:
    return Task(id=task_id, title=task_id, category="Review", estimated_minutes=20, required=required, order=order)


def test_days_are_dated_from_start_and_scored() -> None:
    plan_days = [
        PlanDaySnapshot(day_index=2, tasks=(_task("b", 0),), day_id="day-2", title="Second"),
        PlanDaySnapshot(day_index=1, tasks=(_task("a2", 1), _task("a1", 0)), day_id="day-1", title="First"),
        PlanDaySnapshot(day_index=3, tasks=(_task("c", 0),), day_id="day-3", title="Third"),
    ]
    logs = {"2024-12-31": DailyLog(date="2024-12-31", completed_task_ids=("a1", "a2"))}

    days = build_generated_days("2024-12-31", plan_days, logs, "2025-01-01")

    assert [day.date for day in days] == ["2024-12-31", "2025-01-01", "2025-01-02"]
    assert [day.status for day in days] == [DayStatus.DONE, DayStatus.TODAY, DayStatus.FUTURE]
    assert [task.id for task in days[0].tasks] == ["a1", "a2"]
    assert days[0].progress.percent == 100
    assert days[0].xp == 2 * 15 + 50
    assert days[1].xp == 0
    assert days[0].day_id == "day-1"
    assert days[0].title == "First"


def test_empty_plan_generates_nothing() -> None:
    assert build_generated_days("2024-01-01", [], {}, "2024-01-01") == []
