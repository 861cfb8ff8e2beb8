"""Board state shared by the CLI commands.

Holds the current snapshot, performs the single fetch, and re-derives the
columns from whatever data is held. Fetch failures leave the board empty.
"""

import logging

from .adapters.quicksell_api import FetchFailure, QuicksellAdapter
from .config import Config, load_config
from .core.board import BoardSnapshot, build_board
from .core.cards import Column, build_columns
from .ports.board_source import BoardSource

logger = logging.getLogger(__name__)


class BoardState:
    """Top-level board state: one snapshot, replaced wholesale on every change."""

    def __init__(self, source: BoardSource, group_by: str = "status", sort_by: str = "priority"):
        self._source = source
        self._loaded = False
        self.snapshot = BoardSnapshot(group_by=group_by, sort_by=sort_by)

    @property
    def loaded(self) -> bool:
        return self._loaded

    def load(self) -> None:
        """Fetch once. On failure, log and keep the empty data."""
        if self._loaded:
            return
        self._loaded = True
        try:
            data = self._source.fetch()
        except FetchFailure as e:
            logger.error(f"There was a problem fetching the board: {e}")
            return
        self.snapshot = self.snapshot.with_data(data)

    def set_group_by(self, group_by: str) -> None:
        self.snapshot = self.snapshot.with_grouping(group_by)

    def set_sort_by(self, sort_by: str) -> None:
        self.snapshot = self.snapshot.with_sorting(sort_by)

    def groups(self):
        return build_board(self.snapshot)

    def columns(self) -> list[Column]:
        return build_columns(self.snapshot)


def open_board(
    config: Config | None = None,
    group_by: str | None = None,
    sort_by: str | None = None,
) -> BoardState:
    """Build a BoardState from config (options override it) and load it."""
    config = config or load_config()
    state = BoardState(
        QuicksellAdapter(config),
        group_by=group_by or config.group_by,
        sort_by=sort_by or config.sort_by,
    )
    state.load()
    return state
