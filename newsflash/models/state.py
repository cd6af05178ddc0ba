"""Screen state published by the headlines controller."""

from enum import Enum
from typing import Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..errors import PresentationError
from .view_data import HeadlineItem


class LoadKind(str, Enum):
    """What triggered a load."""

    INITIAL = "initial"
    REFRESH = "refresh"
    SEARCH = "search"


class ScreenStatus(str, Enum):
    """Top-level screen status."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


class ScreenState(BaseModel):
    """Exactly one of idle, loading(kind), loaded(items) or error(category)."""

    model_config = ConfigDict(frozen=True)

    status: ScreenStatus = Field(..., description="Current status")
    kind: Optional[LoadKind] = Field(None, description="Load trigger while loading")
    items: Tuple[HeadlineItem, ...] = Field(default=(), description="Items when loaded")
    error: Optional[PresentationError] = Field(None, description="Error category on failure")

    @classmethod
    def idle(cls) -> "ScreenState":
        return cls(status=ScreenStatus.IDLE)

    @classmethod
    def loading(cls, kind: LoadKind) -> "ScreenState":
        return cls(status=ScreenStatus.LOADING, kind=kind)

    @classmethod
    def loaded(cls, items: Sequence[HeadlineItem]) -> "ScreenState":
        return cls(status=ScreenStatus.LOADED, items=tuple(items))

    @classmethod
    def failed(cls, error: PresentationError) -> "ScreenState":
        return cls(status=ScreenStatus.ERROR, error=error)

    @property
    def is_idle(self) -> bool:
        return self.status is ScreenStatus.IDLE

    @property
    def is_loading(self) -> bool:
        return self.status is ScreenStatus.LOADING

    def __str__(self) -> str:
        if self.status is ScreenStatus.LOADING:
            return f"loading({self.kind.value})"
        if self.status is ScreenStatus.LOADED:
            return f"loaded({len(self.items)} items)"
        if self.status is ScreenStatus.ERROR:
            return f"error({self.error.value})"
        return self.status.value
