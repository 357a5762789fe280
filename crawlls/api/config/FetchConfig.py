"""Fetch configuration."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MIN_CONTENT_LENGTH = 100

DEFAULT_EXTERNAL_DOMAINS = [
    "youtube.com",
    "youtu.be",
    "vimeo.com",
    "twitch.tv",
    "dailymotion.com",
    "tiktok.com",
]

DEFAULT_TRACKING_PARAMS = [
    "utm_source",
    "utm_medium",
    "utm_campaign",
    "utm_term",
    "utm_content",
    "fbclid",
    "gclid",
    "mc_cid",
    "mc_eid",
    "ref_src",
]


class FetchConfig(BaseModel):
    """Settings for downloading pages and converting them to markdown."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    timeout_secs: float = Field(30.0, gt=0, description="Timeout for download and conversion")
    min_content_length: int = Field(
        DEFAULT_MIN_CONTENT_LENGTH, gt=0, description="Shortest markdown accepted as a rendered page"
    )
    external_domains: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXTERNAL_DOMAINS),
        description="Domains opened externally instead of cached",
    )
    tracking_params: list[str] = Field(
        default_factory=lambda: list(DEFAULT_TRACKING_PARAMS),
        description="Query parameters excluded from the cache key",
    )
    user_agent: str = Field("crawlls/0.1", description="User-Agent header for downloads")
