"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreSettings(BaseModel):
    """Comment store (PocketBase) configuration."""

    base_url: str = "http://localhost:8090"
    collection: str = "comments"

    # Applied by the HTTP client; the comment core itself never times out
    timeout_seconds: float = 10.0

    # Batch size used when walking every page of a post's comments
    page_size: int = 200

    user_agent: str = "remarks/1.0"

    @computed_field
    @property
    def records_url(self) -> str:
        """URL of the records endpoint for the comments collection."""
        return f"{self.base_url.rstrip('/')}/api/collections/{self.collection}/records"


class CommentSettings(BaseModel):
    """Comment loading and display configuration."""

    # How long a fetched comment list is served from the cache
    freshness_window_seconds: int = 300

    # Number of posts kept in the in-process cache
    cache_max_posts: int = 128

    # Replies nested deeper than this are still rendered but cannot be replied to
    max_display_depth: int = 3


class GateSettings(BaseModel):
    """Submission rate limit configuration."""

    # Minimum time between two successful submissions, across all posts
    rate_limit_seconds: int = 30

    # Where the last submission timestamp survives restarts
    state_path: Path = Path.home() / ".remarks" / "gate.json"


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested values:

        STORE__BASE_URL=https://nainong.me
        GATE__RATE_LIMIT_SECONDS=60
        COMMENTS__MAX_DISPLAY_DEPTH=5
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    store: StoreSettings = StoreSettings()
    comments: CommentSettings = CommentSettings()
    gate: GateSettings = GateSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @property
    def freshness_window_ms(self) -> int:
        """Cache freshness window in milliseconds."""
        return self.comments.freshness_window_seconds * 1000

    @property
    def rate_limit_ms(self) -> int:
        """Submission rate limit window in milliseconds."""
        return self.gate.rate_limit_seconds * 1000
