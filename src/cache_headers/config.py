"""
Configuration utilities for cache_headers
"""
import json
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .types import CacheHeadersConfig


DEFAULT_HEADER_NAME = "Cache-Control"
CDN_CACHE_CONTROL = "CDN-Cache-Control"
VERCEL_CDN_CACHE_CONTROL = "Vercel-CDN-Cache-Control"
CLOUDFLARE_CDN_CACHE_CONTROL = "Cloudflare-CDN-Cache-Control"


DEFAULT_CACHE_HEADERS_CONFIG = CacheHeadersConfig(
    header_names=[DEFAULT_HEADER_NAME],
    log_suppressed=True,
)


def merge_cache_headers_config(
    config: Optional[CacheHeadersConfig] = None,
) -> CacheHeadersConfig:
    """Merge user config with defaults."""
    if config is None:
        return CacheHeadersConfig(
            header_names=list(DEFAULT_CACHE_HEADERS_CONFIG.header_names),
            log_suppressed=DEFAULT_CACHE_HEADERS_CONFIG.log_suppressed,
        )

    return CacheHeadersConfig(
        header_names=list(config.header_names)
        if config.header_names
        else list(DEFAULT_CACHE_HEADERS_CONFIG.header_names),
        log_suppressed=config.log_suppressed,
    )


def split_header_names(value: str) -> List[str]:
    """
    Split a header name list, dropping blanks.

    Accepts a JSON array (``["Cache-Control", "CDN-Cache-Control"]``) or a
    comma-separated string.
    """
    value = value.strip()
    if value.startswith("["):
        try:
            names = json.loads(value)
        except json.JSONDecodeError:
            names = None
        if isinstance(names, list):
            return [str(name).strip() for name in names if str(name).strip()]
    return [name.strip() for name in value.split(",") if name.strip()]


class CacheHeadersSettings(BaseSettings):
    """Cache header settings loaded from environment variables."""

    HEADER_NAMES: str = DEFAULT_HEADER_NAME
    """Response headers to manage: JSON array or comma-separated."""

    LOG_SUPPRESSED: bool = True

    model_config = SettingsConfigDict(
        env_prefix="CACHE_HEADERS_",
        case_sensitive=True,
        env_file=None,
        extra="ignore",
    )

    def to_config(self) -> CacheHeadersConfig:
        """Build a merged CacheHeadersConfig from these settings."""
        return merge_cache_headers_config(
            CacheHeadersConfig(
                header_names=split_header_names(self.HEADER_NAMES),
                log_suppressed=self.LOG_SUPPRESSED,
            )
        )


@lru_cache()
def get_settings() -> CacheHeadersSettings:
    """Get cached settings instance."""
    return CacheHeadersSettings()
