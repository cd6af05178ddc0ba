"""Presentation layer: view-data mapping and the headlines state machine."""

from .controller import HeadlinesController
from .debouncer import Debouncer
from .mapper import UNKNOWN_SOURCE, HeadlinesViewDataMapper
from .topics import Topic

__all__ = [
    "Debouncer",
    "HeadlinesController",
    "HeadlinesViewDataMapper",
    "Topic",
    "UNKNOWN_SOURCE",
]
