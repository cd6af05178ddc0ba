"""Article models decoded from the news API."""

import hashlib
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ArticleSource(BaseModel):
    """Publisher of an article."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = Field(None, description="Publisher display name")
    url: Optional[str] = Field(None, description="Publisher home page")


class Article(BaseModel):
    """Article as returned by the news API."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = Field(..., description="Article title")
    description: Optional[str] = Field(None, description="Short description")
    content: Optional[str] = Field(None, description="Truncated article body")
    url: Optional[str] = Field(None, description="Article URL")
    image: Optional[str] = Field(None, description="Lead image URL")
    published_at: Optional[datetime] = Field(
        None, alias="publishedAt", description="Publication timestamp"
    )
    source: ArticleSource = Field(default_factory=ArticleSource)

    @property
    def id(self) -> str:
        """List identity: the URL, or a hash of title and publication time."""
        if self.url:
            return self.url
        published = self.published_at.isoformat() if self.published_at else ""
        digest = hashlib.sha256(f"{self.title}|{published}".encode()).hexdigest()
        return f"article-{digest[:16]}"


class ArticlesEnvelope(BaseModel):
    """Top-level response body of the search and top-headlines endpoints."""

    model_config = ConfigDict(populate_by_name=True)

    total_articles: Optional[int] = Field(
        None, alias="totalArticles", description="Total matches on the server"
    )
    articles: List[Article] = Field(..., description="Returned articles, server order")
