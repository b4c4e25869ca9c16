"""
FastAPI integration for cache_headers.

Builds a HeaderController for every request from the incoming request
headers and the response headers of the endpoint.
"""
import logging
from typing import Any, Callable, Optional

from fastapi import Request, Response

from ..config import get_settings, merge_cache_headers_config
from ..controller import HeaderController
from ..types import CacheHeadersConfig

logger = logging.getLogger(__name__)


def install_cache_headers(
    app: Any,
    *header_names: str,
    config: Optional[CacheHeadersConfig] = None,
) -> CacheHeadersConfig:
    """
    Store the cache header configuration on ``app.state``.

    Args:
        app: FastAPI application.
        header_names: Response headers to manage. Overrides config.header_names.
        config: Base configuration.

    Returns:
        The merged configuration used by get_cache_headers().

    Example:
        app = FastAPI()
        install_cache_headers(app, "Cache-Control", "CDN-Cache-Control")

        @app.get("/")
        async def index(cache: HeaderController = Depends(get_cache_headers)):
            cache.set_public()
            cache.set_s_maxage(120)
            return {"message": "Hello World"}
    """
    resolved = merge_cache_headers_config(config)
    if header_names:
        resolved.header_names = list(header_names)

    app.state.cache_headers_config = resolved
    logger.info(f"Cache headers configured: {', '.join(resolved.header_names)}")
    return resolved


def cache_headers(
    *header_names: str,
    config: Optional[CacheHeadersConfig] = None,
) -> Callable[..., HeaderController]:
    """
    FastAPI dependency factory for a HeaderController.

    Args:
        header_names: Response headers to manage. Default: Cache-Control.
        config: Base configuration.

    Returns:
        Dependency function that returns a request-scoped HeaderController.

    Example:
        from fastapi import Depends, FastAPI
        from cache_headers.integrations.fastapi import cache_headers

        cdn_cache = cache_headers("CDN-Cache-Control")

        @app.get("/items/{id}")
        async def get_item(id: str, cache: HeaderController = Depends(cdn_cache)):
            cache.set_public()
            cache.set_s_maxage(60)
            return {"id": id}
    """
    resolved = merge_cache_headers_config(config)
    if header_names:
        resolved.header_names = list(header_names)

    def _cache_headers(request: Request, response: Response) -> HeaderController:
        return HeaderController(request.headers, response.headers, config=resolved)

    return _cache_headers


def get_cache_headers(request: Request, response: Response) -> HeaderController:
    """
    FastAPI dependency using the configuration installed on the app.

    Falls back to CACHE_HEADERS_* environment settings when
    install_cache_headers() was not called.
    """
    config = getattr(request.app.state, "cache_headers_config", None)
    if config is None:
        config = get_settings().to_config()
    return HeaderController(request.headers, response.headers, config=config)
