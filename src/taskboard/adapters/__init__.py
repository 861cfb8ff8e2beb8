"""Adapters - I/O implementations of ports."""

from .quicksell_api import QuicksellAdapter, FetchFailure

__all__ = [
    "QuicksellAdapter",
    "FetchFailure",
]
