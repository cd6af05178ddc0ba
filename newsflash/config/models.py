"""Configuration models."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class ApiConfig(BaseModel):
    """News API connection settings."""

    base_host: str = Field("gnews.io/api/v4", description="API host and base path, without scheme")
    token_env: Optional[str] = Field("GNEWS_API_KEY", description="Environment variable for the API token")
    token: Optional[str] = Field(None, description="API token (prefer token_env)")
    timeout: float = Field(30.0, description="Request timeout in seconds", gt=0, le=120)

    @field_validator("base_host")
    @classmethod
    def strip_scheme(cls, v: str) -> str:
        """Accept hosts pasted with a scheme or trailing slash."""
        for prefix in ("https://", "http://"):
            if v.startswith(prefix):
                v = v[len(prefix):]
        v = v.rstrip("/")
        if not v:
            raise ValueError("base_host must not be empty")
        return v


class FeedConfig(BaseModel):
    """Headlines feed behaviour."""

    language: str = Field("en", description="Two-letter language code", min_length=2, max_length=2)
    country: Optional[str] = Field(None, description="Two-letter country code for top headlines")
    max_articles: int = Field(50, description="Result cap per request", ge=1, le=100)
    debounce_seconds: float = Field(0.5, description="Quiet period before a typed search runs", ge=0.0, le=5.0)

    @field_validator("language", "country")
    @classmethod
    def lowercase_code(cls, v: Optional[str]) -> Optional[str]:
        return v.lower() if v else v


class ConfigModel(BaseModel):
    """Main configuration model."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    feed: FeedConfig = Field(default_factory=FeedConfig)
