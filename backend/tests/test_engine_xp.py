from __future__ import annotations

from studysprint.engine import DailyLog, GeneratedDay, Task, compute_day_xp, compute_total_xp, level_for_xp
from studysprint.engine.xp import XP_PER_LEVEL


def _task(task_id: str, required: bool) -> Task:
    return Task(id=task_id, title=task_id, category="Writing", estimated_minutes=25, required=required)


def test_single_required_task_earns_day_bonus() -> None:
    assert compute_day_xp([_task("r", True)], ["r"]) == 65


def test_optional_task_does_not_block_bonus() -> None:
    tasks = [_task("r1", True), _task("r2", True), _task("o", False)]

    assert compute_day_xp(tasks, ["r1", "r2"]) == 80
    assert compute_day_xp(tasks, ["r1", "r2", "o"]) == 90


def test_incomplete_required_withholds_bonus() -> None:
    tasks = [_task("r1", True), _task("r2", True)]

    assert compute_day_xp(tasks, ["r1"]) == 15


def test_day_without_required_tasks_never_gets_bonus() -> None:
    tasks = [_task("o1", False), _task("o2", False)]

    assert compute_day_xp(tasks, ["o1", "o2"]) == 20
    assert compute_day_xp(tasks, []) == 0


def test_total_xp_uses_each_days_own_log() -> None:
    days = [
        GeneratedDay(day_index=1, date="2024-03-01", tasks=(_task("a", True),)),
        GeneratedDay(day_index=2, date="2024-03-02", tasks=(_task("b", False),)),
        GeneratedDay(day_index=3, date="2024-03-03", tasks=(_task("c", True),)),
    ]
    logs = {
        "2024-03-01": DailyLog(date="2024-03-01", completed_task_ids=("a",)),
        "2024-03-02": DailyLog(date="2024-03-02", completed_task_ids=("b", "c")),
    }

    # "c" was completed on day 2's date, so day 3 earns nothing for it.
    assert compute_total_xp(days, logs) == 65 + 10


def test_level_for_xp() -> None:
    start = level_for_xp(0)
    assert (start.level, start.xp_into_level, start.xp_for_next_level) == (1, 0, XP_PER_LEVEL)

    mid = level_for_xp(1234)
    assert (mid.level, mid.xp_into_level, mid.xp_for_next_level) == (3, 234, 266)

    assert level_for_xp(500).level == 2
