"""Tests for the board state shell."""

import logging
from unittest.mock import MagicMock, patch

import pytest

from taskboard.adapters.quicksell_api import FetchFailure, QuicksellAdapter
from taskboard.board import BoardState, open_board
from taskboard.config import Config
from taskboard.core.tasks import BoardData, Task, User


@pytest.fixture
def data():
    return BoardData(
        tasks=(
            Task(id=1, title="B", status="Todo", priority=2, user_id="u1"),
            Task(id=2, title="A", status="Todo", priority=5, user_id="u2"),
            Task(id=3, title="C", status="Done", priority=1, user_id="u1"),
        ),
        users=(
            User(id="u1", name="Alice", available=True),
            User(id="u2", name="Bob", available=False),
        ),
    )


@pytest.fixture
def source(data):
    source = MagicMock()
    source.fetch.return_value = data
    return source


class TestBoardState:
    def test_empty_before_load(self, source):
        state = BoardState(source)
        assert state.loaded is False
        assert state.groups() == []
        assert state.columns() == []

    def test_load_replaces_data(self, source, data):
        state = BoardState(source)
        state.load()
        assert state.snapshot.data is data
        assert [key for key, _ in state.groups()] == ["Todo", "Done"]

    def test_load_fetches_once(self, source):
        state = BoardState(source)
        state.load()
        state.load()
        source.fetch.assert_called_once()

    def test_fetch_failure_is_logged_and_board_stays_empty(self, source, caplog):
        source.fetch.side_effect = FetchFailure("boom")
        state = BoardState(source)

        with caplog.at_level(logging.ERROR, logger="taskboard.board"):
            state.load()

        assert state.loaded is True
        assert state.groups() == []
        assert "boom" in caplog.text

    def test_malformed_payload_is_logged_and_board_stays_empty(self, caplog):
        session = MagicMock()
        session.get.return_value.json.return_value = {"tickets": [1, 2], "users": []}
        state = BoardState(QuicksellAdapter(Config(), session=session))

        with caplog.at_level(logging.ERROR, logger="taskboard.board"):
            state.load()

        assert state.groups() == []
        assert "Unexpected payload shape" in caplog.text

    def test_source_needs_only_fetch(self, data):
        class StaticSource:
            def fetch(self):
                return data

        state = BoardState(StaticSource(), group_by="priority")
        state.load()
        assert [key for key, _ in state.groups()] == [1, 2, 5]

    def test_control_changes_rebuild(self, source):
        state = BoardState(source)
        state.load()
        before = state.snapshot

        state.set_group_by("user")
        state.set_sort_by("title")

        assert before.group_by == "status"
        assert [key for key, _ in state.groups()] == ["Alice", "Bob"]
        assert [t.title for t in dict(state.groups())["Alice"]] == ["B", "C"]


class TestOpenBoard:
    @patch("taskboard.board.QuicksellAdapter")
    def test_uses_config_modes(self, mock_cls, data):
        mock_cls.return_value.fetch.return_value = data
        state = open_board(Config(group_by="priority", sort_by="title"))
        assert state.snapshot.group_by == "priority"
        assert state.snapshot.sort_by == "title"
        assert state.loaded is True

    @patch("taskboard.board.QuicksellAdapter")
    def test_options_override_config(self, mock_cls, data):
        mock_cls.return_value.fetch.return_value = data
        state = open_board(Config(group_by="priority"), group_by="user")
        assert state.snapshot.group_by == "user"
