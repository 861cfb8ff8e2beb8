"""Pure grouping and sorting logic - no I/O dependencies."""

import locale
import re
from dataclasses import dataclass, field, replace

from .tasks import BoardData, Task, User

STATUS_ORDER = ["Backlog", "Todo", "In progress", "Done"]
GROUP_BY_CHOICES = ("status", "priority", "user")
SORT_BY_CHOICES = ("priority", "title")
UNKNOWN = "Unknown"

_NON_ALNUM = re.compile(r"[^a-z0-9]")

GroupKey = str | int


@dataclass(frozen=True)
class UserInfo:
    """Display attributes of a user."""

    name: str
    available: bool


@dataclass(frozen=True)
class BoardSnapshot:
    """Everything the board pipeline reads. Changes produce a new snapshot."""

    data: BoardData = field(default_factory=BoardData)
    group_by: str = "status"
    sort_by: str = "priority"

    def with_data(self, data: BoardData) -> "BoardSnapshot":
        return replace(self, data=data)

    def with_grouping(self, group_by: str) -> "BoardSnapshot":
        return replace(self, group_by=group_by)

    def with_sorting(self, sort_by: str) -> "BoardSnapshot":
        return replace(self, sort_by=sort_by)


def build_user_index(users: list[User] | tuple[User, ...]) -> dict[str, UserInfo]:
    """Map user id (as a string) to display attributes. Later duplicates win."""
    return {str(u.id): UserInfo(name=u.name, available=u.available) for u in users}


def lookup_user(user_index: dict[str, UserInfo], user_id) -> UserInfo | None:
    """Resolve a task's userId; 1 and "1" name the same user."""
    if user_id is None:
        return None
    return user_index.get(str(user_id))


def _hashable(key):
    # Unhashable values (lists, dicts) bucket under their string form
    try:
        hash(key)
    except TypeError:
        return str(key)
    return key


def group_key(task: Task, group_by: str, user_index: dict[str, UserInfo]) -> GroupKey:
    """Key a task is bucketed under for the given grouping mode."""
    match group_by:
        case "status":
            return _hashable(task.status)
        case "priority":
            return _hashable(task.priority)
        case "user":
            info = lookup_user(user_index, task.user_id)
            return (info.name if info else "") or UNKNOWN
        case _:
            return UNKNOWN


def group_tasks(
    tasks: list[Task] | tuple[Task, ...],
    group_by: str,
    user_index: dict[str, UserInfo],
) -> dict[GroupKey, list[Task]]:
    """
    Partition tasks into buckets, keeping input order within each bucket.

    Pure function - no I/O. Status and priority values are used verbatim,
    even when malformed.
    """
    grouped: dict[GroupKey, list[Task]] = {}
    for task in tasks:
        grouped.setdefault(group_key(task, group_by, user_index), []).append(task)
    return grouped


def priority_value(task: Task) -> float:
    """Numeric priority for ordering; missing or non-numeric values count as 0."""
    value = task.priority
    if isinstance(value, (int, float)):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0


def _title_key(task: Task) -> tuple[str, str]:
    title = "" if task.title is None else str(task.title)
    return (locale.strxfrm(title.casefold()), locale.strxfrm(title))


def sort_tasks(tasks: list[Task], sort_by: str) -> list[Task]:
    """
    Order tasks within a bucket.

    priority: highest first, ties keep input order.
    title: ascending, locale-aware.
    Anything else leaves the order untouched.
    """
    match sort_by:
        case "priority":
            return sorted(tasks, key=priority_value, reverse=True)
        case "title":
            return sorted(tasks, key=_title_key)
        case _:
            return list(tasks)


def _status_rank(key: GroupKey) -> int:
    # Statuses outside the canonical list rank before all of them
    return STATUS_ORDER.index(key) if key in STATUS_ORDER else -1


def sort_groups(
    grouped: dict[GroupKey, list[Task]],
    group_by: str,
    sort_by: str,
) -> list[tuple[GroupKey, list[Task]]]:
    """
    Sort tasks inside each bucket, then order the buckets.

    Buckets follow STATUS_ORDER when grouping by status. Every other mode
    compares keys as strings, so priority 10 sorts before 2.
    """
    groups = [(key, sort_tasks(tasks, sort_by)) for key, tasks in grouped.items()]
    if group_by == "status":
        return sorted(groups, key=lambda g: _status_rank(g[0]))
    return sorted(groups, key=lambda g: str(g[0]))


def group_label(key: GroupKey, group_by: str) -> str:
    """Column heading for a group key."""
    return f"Priority {key}" if group_by == "priority" else str(key)


def format_group_key(key: GroupKey, group_by: str) -> str:
    """Selector-safe slug for a group key: "In Progress" -> "in-progress"."""
    return _NON_ALNUM.sub("-", group_label(key, group_by).strip().lower())


def build_board(snapshot: BoardSnapshot) -> list[tuple[GroupKey, list[Task]]]:
    """
    Run the full pipeline: user index, grouping, sorting.

    Pure function - no I/O. Empty data yields an empty list.
    """
    user_index = build_user_index(snapshot.data.users)
    grouped = group_tasks(snapshot.data.tasks, snapshot.group_by, user_index)
    return sort_groups(grouped, snapshot.group_by, snapshot.sort_by)
