"""Ports - interfaces/protocols for external dependencies."""

from .board_source import BoardSource

__all__ = [
    "BoardSource",
]
