from __future__ import annotations

from studysprint.engine import DailyLog, GeneratedDay, Task, compute_charts_series


def _task(task_id: str, minutes: int) -> Task:
    return Task(id=task_id, title=task_id, category="Frontend", estimated_minutes=minutes)


def _three_days() -> list[GeneratedDay]:
    return [
        GeneratedDay(day_index=1, date="2024-01-01", tasks=(_task("t1", 60),)),
        GeneratedDay(day_index=2, date="2024-01-02", tasks=(_task("t2", 60),)),
        GeneratedDay(day_index=3, date="2024-01-03", tasks=(_task("t3", 60),)),
    ]


def test_series_scenario() -> None:
    logs = {
        "2024-01-01": DailyLog(date="2024-01-01", completed_task_ids=("t1",), hours_spent=1.5),
        "2024-01-02": DailyLog(date="2024-01-02", completed_task_ids=("t2",), hours_spent=2),
    }

    series = compute_charts_series(_three_days(), logs, "2024-01-03")

    assert series.progress[1].cumulative == 120
    assert series.burndown[0].remaining == 120
    assert series.daily[2].completed == 0
    assert [point.target for point in series.progress] == [60, 120, 180]
    assert [point.ideal for point in series.burndown] == [120, 60, 0]
    assert [point.hours_spent for point in series.daily] == [1.5, 2, 0]
    assert [point.label for point in series.daily] == ["Day 1", "Day 2", "Day 3"]


def test_series_lengths_match_day_count() -> None:
    series = compute_charts_series(_three_days(), {}, "2024-01-01")

    assert len(series.progress) == len(series.burndown) == len(series.daily) == 3
    assert series.burndown[-1].remaining == 180


def test_empty_plan_yields_empty_series() -> None:
    series = compute_charts_series([], {}, "2024-01-01")

    assert series.progress == []
    assert series.burndown == []
    assert series.daily == []


def test_series_are_ordered_by_day_index() -> None:
    days = list(reversed(_three_days()))

    series = compute_charts_series(days, {}, "2024-01-03")

    assert [point.day_index for point in series.progress] == [1, 2, 3]


def test_reference_lines_round_each_point_independently() -> None:
    # 100 minutes over 3 days: 33.33, 66.67, 100.
    days = [
        GeneratedDay(day_index=1, date="2024-01-01", tasks=(_task("a", 50),)),
        GeneratedDay(day_index=2, date="2024-01-02", tasks=(_task("b", 25),)),
        GeneratedDay(day_index=3, date="2024-01-03", tasks=(_task("c", 25),)),
    ]

    series = compute_charts_series(days, {}, "2024-01-01")

    assert [point.target for point in series.progress] == [33, 67, 100]
    assert [point.ideal for point in series.burndown] == [67, 33, 0]
    assert [point.planned for point in series.daily] == [50, 25, 25]
