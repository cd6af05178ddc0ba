"""Data models for NewsFlash."""

from .article import Article, ArticleSource, ArticlesEnvelope
from .state import LoadKind, ScreenState, ScreenStatus
from .view_data import ArticleDetails, HeadlineItem

__all__ = [
    "Article",
    "ArticleSource",
    "ArticlesEnvelope",
    "ArticleDetails",
    "HeadlineItem",
    "LoadKind",
    "ScreenState",
    "ScreenStatus",
]
