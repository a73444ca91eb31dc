# tests/test_formatters.py

from __future__ import annotations

import locale
from datetime import datetime, timedelta

from minimado_cli.formatters import (
    format_relative_date,
    format_response,
    format_tags,
    format_task_list,
    select_tasks,
)
from minimado_cli.models import TagRef, Task


def _task(text: str, now: datetime, *, completed: bool = False, days_ago: int = 2, **extra) -> Task:
    return Task.model_validate({
        "text": text,
        "completed": completed,
        "createdAt": (now - timedelta(days=days_ago)).isoformat(),
        **extra,
    })


# ---------------------------------------------------------------------------
# format_relative_date
# ---------------------------------------------------------------------------

def test_exactly_one_day_ago(now) -> None:
    assert format_relative_date(now - timedelta(hours=24), now) == "1 day ago"


def test_three_days_ago(now) -> None:
    assert format_relative_date(now - timedelta(days=3), now) == "3 days ago"


def test_partial_days_round_up(now) -> None:
    assert format_relative_date(now - timedelta(hours=25), now) == "2 days ago"
    assert format_relative_date(now - timedelta(hours=1), now) == "1 day ago"


def test_week_or_more_shows_absolute_date(now) -> None:
    moment = now - timedelta(days=10)
    result = format_relative_date(moment, now)

    assert "ago" not in result
    assert result == moment.astimezone().strftime("%x")


def test_zero_difference_shows_absolute_date(now) -> None:
    assert "ago" not in format_relative_date(now, now)


def test_naive_timestamp_is_treated_as_utc(now) -> None:
    naive = (now - timedelta(days=3)).replace(tzinfo=None)
    assert format_relative_date(naive, now) == "3 days ago"


# ---------------------------------------------------------------------------
# format_tags
# ---------------------------------------------------------------------------

def test_format_tags_empty_or_missing() -> None:
    assert format_tags([]) is None
    assert format_tags(None) is None


def test_format_tags_mixes_strings_and_objects() -> None:
    assert format_tags(["urgent", TagRef(name="home")]) == "urgent, home"


def test_format_tags_nameless_object_is_unknown() -> None:
    assert format_tags([TagRef()]) == "unknown"


def test_raw_tag_shapes_are_normalized_at_the_boundary(now) -> None:
    task = _task("t", now, tags=["urgent", {"name": "home"}, {}, 42])
    assert format_tags(task.tags) == "urgent, home, unknown, unknown"


def test_null_tags_become_empty(now) -> None:
    assert _task("t", now, tags=None).tags == []


# ---------------------------------------------------------------------------
# select_tasks / format_task_list
# ---------------------------------------------------------------------------

def test_select_tasks_hides_completed_by_default(now) -> None:
    tasks = [
        _task("a", now),
        _task("b", now, completed=True),
        _task("c", now),
    ]

    assert [t.text for t in select_tasks(tasks, show_all=False)] == ["a", "c"]
    assert [t.text for t in select_tasks(tasks, show_all=True)] == ["a", "b", "c"]


def test_format_task_list_no_tasks() -> None:
    assert format_task_list([]) == "📝 No tasks found!"


def test_format_task_list_all_completed(now) -> None:
    tasks = [_task("done", now, completed=True)]

    assert format_task_list(tasks, show_all=False, now=now) == "🎉 No incomplete tasks! You're all caught up!"
    assert "done" in format_task_list(tasks, show_all=True, now=now)


def test_format_task_list_incomplete_entries(now) -> None:
    tasks = [
        _task("Buy milk", now, days_ago=1, tags=["errands", {"name": "home"}]),
        _task("Old one", now, completed=True),
        _task("Call mom", now, days_ago=3),
    ]

    output = format_task_list(tasks, show_all=False, now=now)

    assert "📋 Incomplete tasks (2):" in output
    assert "1. ⏳ Buy milk" in output
    assert "   Created: 1 day ago" in output
    assert "   Tags: errands, home" in output
    assert "2. ⏳ Call mom" in output
    assert "   Created: 3 days ago" in output
    assert "Old one" not in output


def test_format_task_list_all_shows_completion(now) -> None:
    tasks = [
        _task("Open", now),
        _task(
            "Shipped",
            now,
            completed=True,
            days_ago=5,
            completedAt=(now - timedelta(days=2)).isoformat(),
        ),
    ]

    output = format_task_list(tasks, show_all=True, now=now)
    lines = output.splitlines()

    assert "📋 All tasks (2):" in output
    assert lines.index("1. ⏳ Open") < lines.index("2. ✅ Shipped")
    assert "   Completed: 2 days ago" in lines
    assert "Tags:" not in output


def test_format_response_pretty_prints_json() -> None:
    assert format_response({"id": 1}) == '{\n  "id": 1\n}'
    assert format_response("plain text") == "plain text"


def test_absolute_date_follows_active_locale(now) -> None:
    moment = now - timedelta(days=10)
    saved = locale.setlocale(locale.LC_TIME)
    try:
        locale.setlocale(locale.LC_TIME, "C")
        assert format_relative_date(moment, now) == moment.astimezone().strftime("%m/%d/%y")
    finally:
        locale.setlocale(locale.LC_TIME, saved)
