from __future__ import annotations

from studysprint.engine import DailyLog, GeneratedDay, compute_streak


def _days(*dates: str) -> list[GeneratedDay]:
    return [GeneratedDay(day_index=index, date=date) for index, date in enumerate(dates, start=1)]


def _log(date: str, count: int) -> DailyLog:
    return DailyLog(date=date, completed_task_ids=tuple(f"{date}-{n}" for n in range(count)))


def test_streak_counts_consecutive_days_ending_today() -> None:
    days = _days("2024-01-01", "2024-01-02", "2024-01-03")
    logs = {day.date: _log(day.date, 1) for day in days}

    assert compute_streak(days, logs, 1, "2024-01-03") == 3


def test_gap_before_today_breaks_streak() -> None:
    days = _days("2024-01-01", "2024-01-02", "2024-01-03")
    logs = {
        "2024-01-01": _log("2024-01-01", 2),
        "2024-01-02": _log("2024-01-02", 0),
        "2024-01-03": _log("2024-01-03", 2),
    }

    assert compute_streak(days, logs, 2, "2024-01-03") == 1


def test_missing_log_breaks_streak() -> None:
    days = _days("2024-01-01", "2024-01-02", "2024-01-03")
    logs = {"2024-01-01": _log("2024-01-01", 3), "2024-01-03": _log("2024-01-03", 3)}

    assert compute_streak(days, logs, 1, "2024-01-03") == 1


def test_today_short_of_threshold_keeps_prior_streak() -> None:
    days = _days("2024-01-01", "2024-01-02", "2024-01-03")
    logs = {
        "2024-01-01": _log("2024-01-01", 1),
        "2024-01-02": _log("2024-01-02", 1),
    }

    assert compute_streak(days, logs, 1, "2024-01-03") == 2


def test_threshold_is_applied() -> None:
    days = _days("2024-01-01", "2024-01-02")
    logs = {day.date: _log(day.date, 2) for day in days}

    assert compute_streak(days, logs, 3, "2024-01-02") == 0
    assert compute_streak(days, logs, 2, "2024-01-02") == 2


def test_future_days_are_ignored() -> None:
    days = _days("2024-01-01", "2024-01-02", "2024-01-03")
    logs = {day.date: _log(day.date, 1) for day in days}

    assert compute_streak(days, logs, 1, "2024-01-02") == 2


def test_no_elapsed_days_means_no_streak() -> None:
    assert compute_streak(_days("2024-02-01"), {}, 1, "2024-01-15") == 0
    assert compute_streak([], {}, 1, "2024-01-15") == 0
