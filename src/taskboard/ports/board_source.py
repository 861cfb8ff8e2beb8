"""Board source interface."""

from typing import Protocol

from taskboard.core.tasks import BoardData


class BoardSource(Protocol):
    """Interface for fetching tickets and users from any backend."""

    def fetch(self) -> BoardData:
        """Fetch tickets and users. Raises FetchFailure on any error."""
        ...
