"""
Output formatting for task lists.

LEARNING NOTES:
- Separating formatting from data models follows "separation of concerns"
- The models know what the data IS; formatters know how to DISPLAY it
- Every formatter returns a plain string: main.py decides where to print it,
  and tests can assert on the text without capturing stdout

Each formatter takes already-validated models (see models.py), so there is
no shape-checking of raw JSON here.
"""

import json
import math
from datetime import datetime, timezone
from typing import Any, Iterable, Sequence

from .models import TagRef, Task

SECONDS_PER_DAY = 24 * 60 * 60


def _as_aware(moment: datetime) -> datetime:
    # Naive timestamps are assumed to be UTC
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def format_relative_date(moment: datetime, now: datetime | None = None) -> str:
    """
    Describe how long ago a timestamp was.

    Partial days round up, so 25 hours ago is "2 days ago". A difference of
    0 days or of a week or more shows the calendar date instead.

    Args:
        moment: The point in time to describe
        now: Reference time (defaults to the current time)

    Returns:
        "1 day ago", "<N> days ago" or a locale-formatted date
    """
    moment = _as_aware(moment)
    now = _as_aware(now) if now is not None else datetime.now(timezone.utc)

    diff_seconds = abs((now - moment).total_seconds())
    diff_days = math.ceil(diff_seconds / SECONDS_PER_DAY)

    if diff_days == 1:
        return "1 day ago"
    if 1 < diff_days < 7:
        return f"{diff_days} days ago"
    return moment.astimezone().strftime("%x")


def format_tags(tags: Sequence[str | TagRef] | None) -> str | None:
    """
    Join tag names with ", ".

    Returns:
        None when there are no tags; entries with no name show as "unknown"
    """
    if not tags:
        return None
    return ", ".join(_tag_name(tag) for tag in tags)


def _tag_name(tag: Any) -> str:
    if isinstance(tag, str):
        return tag
    if isinstance(tag, TagRef) and tag.name:
        return tag.name
    return "unknown"


def select_tasks(tasks: Iterable[Task], show_all: bool) -> list[Task]:
    """Keep source order; drop completed tasks unless show_all is set."""
    if show_all:
        return list(tasks)
    return [task for task in tasks if not task.completed]


def format_task_list(
    tasks: Sequence[Task],
    show_all: bool = False,
    now: datetime | None = None,
) -> str:
    """
    Format tasks as a numbered list for the terminal.

    Two different empty states are reported: the user has no tasks at all,
    or everything left after filtering is already done.

    Args:
        tasks: Tasks in server order
        show_all: Include completed tasks
        now: Reference time for relative dates (defaults to now)

    Returns:
        The text to print
    """
    if not tasks:
        return "📝 No tasks found!"

    selected = select_tasks(tasks, show_all)
    if not selected:
        return "🎉 No incomplete tasks! You're all caught up!"

    heading = "All tasks" if show_all else "Incomplete tasks"
    lines: list[str] = ["", f"📋 {heading} ({len(selected)}):", ""]

    for i, task in enumerate(selected, start=1):
        status = "✅" if task.completed else "⏳"
        lines.append(f"{i}. {status} {task.text}")
        lines.append(f"   Created: {format_relative_date(task.created_at, now)}")

        if task.completed and task.completed_at:
            lines.append(f"   Completed: {format_relative_date(task.completed_at, now)}")

        tags = format_tags(task.tags)
        if tags:
            lines.append(f"   Tags: {tags}")

        lines.append("")

    return "\n".join(lines)


def format_response(body: Any, indent: int = 2) -> str:
    """Pretty-print the add-task response body."""
    if isinstance(body, str):
        return body
    return json.dumps(body, indent=indent, ensure_ascii=False)
