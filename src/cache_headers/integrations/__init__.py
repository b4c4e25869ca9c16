"""
Framework integrations for cache_headers.
"""
from .fastapi import (
    cache_headers,
    get_cache_headers,
    install_cache_headers,
)

__all__ = [
    "cache_headers",
    "get_cache_headers",
    "install_cache_headers",
]
