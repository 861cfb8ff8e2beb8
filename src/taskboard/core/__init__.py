"""Functional core - pure board logic with no I/O."""

from .tasks import Task, User, BoardData
from .board import (
    BoardSnapshot,
    UserInfo,
    build_user_index,
    group_tasks,
    sort_tasks,
    sort_groups,
    format_group_key,
    build_board,
)
from .cards import Card, Column, build_columns, format_board, board_to_dict

__all__ = [
    # Tasks
    "Task",
    "User",
    "BoardData",
    # Board pipeline
    "BoardSnapshot",
    "UserInfo",
    "build_user_index",
    "group_tasks",
    "sort_tasks",
    "sort_groups",
    "format_group_key",
    "build_board",
    # Cards
    "Card",
    "Column",
    "build_columns",
    "format_board",
    "board_to_dict",
]
