"""
FastAPI example for cache_headers.

Two styles:
- /cdn routes append directives through the request-aware setters, which
  skip anything the request's own Cache-Control rules out.
- /api routes read the request directives and assign a full DirectiveSet.

Run with:
    uvicorn examples.fastapi_app:app --reload
"""
import logging
import os
from datetime import datetime

from fastapi import APIRouter, Depends, FastAPI

from cache_headers import (
    CDN_CACHE_CONTROL,
    DEFAULT_HEADER_NAME,
    VERCEL_CDN_CACHE_CONTROL,
    DirectiveSet,
    HeaderController,
)
from cache_headers.integrations.fastapi import (
    cache_headers,
    get_cache_headers,
    install_cache_headers,
)

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if os.getenv("DEBUG") else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


app = FastAPI(title="cache-headers-example")
install_cache_headers(app, DEFAULT_HEADER_NAME, CDN_CACHE_CONTROL, VERCEL_CDN_CACHE_CONTROL)

cdn = APIRouter()
api = APIRouter()

browser_cache = cache_headers(DEFAULT_HEADER_NAME)


@cdn.get("/")
async def cdn_index(cache: HeaderController = Depends(browser_cache)):
    """Public response, shared caches keep it for two minutes."""
    cache.set_public()
    cache.set_s_maxage(120)
    return {"message": "Hello World", "timestamp": datetime.now().isoformat()}


@cdn.get("/{id}")
async def cdn_item(id: str, cache: HeaderController = Depends(browser_cache)):
    cache.set_public()
    cache.set_s_maxage(60)
    return {"id": id, "timestamp": datetime.now().isoformat()}


@api.get("/")
async def api_index(cache: HeaderController = Depends(get_cache_headers)):
    logger.info(f"{DEFAULT_HEADER_NAME}: {cache.get(DEFAULT_HEADER_NAME)}")
    cache.assign(
        DEFAULT_HEADER_NAME,
        DirectiveSet().set_public().set_s_maxage(120).set_max_age(60),
    )
    return {"message": "Hello World", "timestamp": datetime.now().isoformat()}


@api.get("/all")
async def api_all(cache: HeaderController = Depends(get_cache_headers)):
    logger.info(f"{DEFAULT_HEADER_NAME}: {cache.get(DEFAULT_HEADER_NAME)}")
    cache.assign(
        DEFAULT_HEADER_NAME,
        DirectiveSet().set_public().set_s_maxage(120).set_max_age(60),
    )
    return {"message": "Got All", "timestamp": datetime.now().isoformat()}


@api.get("/{id}")
async def api_item(id: str, cache: HeaderController = Depends(get_cache_headers)):
    logger.info(f"{DEFAULT_HEADER_NAME}: {cache.get(DEFAULT_HEADER_NAME)}")
    cache.assign(DEFAULT_HEADER_NAME, DirectiveSet().set_private().set_max_age(60))
    return {"id": id, "timestamp": datetime.now().isoformat()}


app.include_router(cdn, prefix="/cdn", tags=["cdn"])
app.include_router(api, prefix="/api", tags=["api"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("examples.fastapi_app:app", host="0.0.0.0", port=3000)
