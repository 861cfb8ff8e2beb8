"""Quicksell API adapter - HTTP client for board fetching."""

import logging

import requests

from taskboard.config import Config, load_config
from taskboard.core.tasks import BoardData

logger = logging.getLogger(__name__)


class FetchFailure(Exception):
    """Raised when the board cannot be fetched or decoded."""

    pass


class QuicksellAdapter:
    """
    Quicksell API adapter.

    Implements BoardSource protocol. One GET per call, no retries.
    No business logic - just I/O.
    """

    def __init__(self, config: Config | None = None, session: requests.Session | None = None):
        self.config = config or load_config()
        self._session = session or requests.Session()

    def fetch_raw(self) -> dict:
        """GET the endpoint and return the decoded JSON object."""
        logger.debug("Fetching board from %s", self.config.endpoint)
        try:
            resp = self._session.get(self.config.endpoint, timeout=self.config.timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as e:
            raise FetchFailure(f"Request to {self.config.endpoint} failed: {e}") from e
        except ValueError as e:
            raise FetchFailure(f"Response body is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise FetchFailure(f"Expected a JSON object, got {type(data).__name__}")
        return data

    def fetch(self) -> BoardData:
        """Fetch tickets and users."""
        payload = self.fetch_raw()
        try:
            data = BoardData.from_api(payload)
        except (AttributeError, TypeError) as e:
            raise FetchFailure(f"Unexpected payload shape: {e}") from e
        logger.debug("Fetched %d tickets, %d users", len(data.tasks), len(data.users))
        return data
