"""Display-ready models for the headlines list and detail screens."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class HeadlineItem(BaseModel):
    """One row of the headlines list."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Stable list identity")
    title: str = Field(..., description="Article title")
    source: str = Field(..., description="Publisher name or placeholder")
    image_url: Optional[str] = Field(None, description="Absolute lead image URL")
    published_relative: Optional[str] = Field(None, description="Humanized publication time")
    article_url: Optional[str] = Field(None, description="Absolute article URL")
    summary: Optional[str] = Field(None, description="Article description")
    content: Optional[str] = Field(None, description="Article body excerpt")


class ArticleDetails:
    """Read-only projection of a headline item for the detail screen."""

    def __init__(self, item: HeadlineItem) -> None:
        self._item = item

    @property
    def title(self) -> str:
        return self._item.title

    @property
    def source(self) -> str:
        return self._item.source

    @property
    def image_url(self) -> Optional[str]:
        return self._item.image_url

    @property
    def published_relative(self) -> Optional[str]:
        return self._item.published_relative

    @property
    def summary(self) -> Optional[str]:
        return self._item.summary

    @property
    def content(self) -> Optional[str]:
        return self._item.content

    @property
    def article_url(self) -> Optional[str]:
        return self._item.article_url

    @property
    def share_text(self) -> str:
        """Text handed to a share action: title plus link when there is one."""
        if self.article_url:
            return f"{self.title}\n{self.article_url}"
        return self.title
