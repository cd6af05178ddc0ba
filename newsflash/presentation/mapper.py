"""Article to headline item mapping."""

from datetime import datetime
from typing import Callable, Optional

import httpx
import pendulum

from ..models import Article, HeadlineItem

UNKNOWN_SOURCE = "Unknown Source"


def parse_absolute_url(value: Optional[str]) -> Optional[str]:
    """Return ``value`` normalized if it is an absolute http(s) URL, else None."""
    if not value or not value.strip():
        return None
    try:
        url = httpx.URL(value.strip())
    except httpx.InvalidURL:
        return None
    if url.scheme not in ("http", "https") or not url.host:
        return None
    return str(url)


def humanize_published(
    published_at: Optional[datetime], now: Optional[pendulum.DateTime] = None
) -> Optional[str]:
    """
    Relative time such as "3 hours ago" or "in 2 days".

    Args:
        published_at: Publication timestamp, naive values are taken as UTC
        now: Reference time, defaults to the current time

    Returns:
        Humanized difference, or None without a timestamp
    """
    if published_at is None:
        return None
    reference = now if now is not None else pendulum.now()
    return pendulum.format_diff(pendulum.instance(published_at).diff(reference))


class HeadlinesViewDataMapper:
    """Map fetched articles to display-ready headline items."""

    def __init__(
        self,
        unknown_source: str = UNKNOWN_SOURCE,
        now: Callable[[], pendulum.DateTime] = pendulum.now,
    ) -> None:
        self.unknown_source = unknown_source
        self.now = now

    def map(self, article: Article) -> HeadlineItem:
        return HeadlineItem(
            id=article.id,
            title=article.title,
            source=article.source.name or self.unknown_source,
            image_url=parse_absolute_url(article.image),
            published_relative=humanize_published(article.published_at, self.now()),
            article_url=parse_absolute_url(article.url),
            summary=article.description,
            content=article.content,
        )
