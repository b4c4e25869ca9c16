"""
Cache-Control family response headers.

Parses, builds and conditionally applies Cache-Control, CDN-Cache-Control
and similar headers based on the directives the request already declared.
"""
from .types import (
    CacheHeadersConfig,
    Directive,
    DirectiveKind,
    DirectiveValue,
    DIRECTIVE_KINDS,
    HeaderName,
    Target,
)
from .directives import (
    DirectiveSet,
    parse_cache_control,
    build_cache_control,
)
from .config import (
    DEFAULT_HEADER_NAME,
    CDN_CACHE_CONTROL,
    VERCEL_CDN_CACHE_CONTROL,
    CLOUDFLARE_CDN_CACHE_CONTROL,
    DEFAULT_CACHE_HEADERS_CONFIG,
    merge_cache_headers_config,
    CacheHeadersSettings,
    get_settings,
)
from .controller import (
    HeaderController,
    SUPPRESSED_BY,
    format_directive,
    get_header_value,
)


__all__ = [
    # Types
    "CacheHeadersConfig",
    "Directive",
    "DirectiveKind",
    "DirectiveValue",
    "DIRECTIVE_KINDS",
    "HeaderName",
    "Target",
    # Directive sets
    "DirectiveSet",
    "parse_cache_control",
    "build_cache_control",
    # Config
    "DEFAULT_HEADER_NAME",
    "CDN_CACHE_CONTROL",
    "VERCEL_CDN_CACHE_CONTROL",
    "CLOUDFLARE_CDN_CACHE_CONTROL",
    "DEFAULT_CACHE_HEADERS_CONFIG",
    "merge_cache_headers_config",
    "CacheHeadersSettings",
    "get_settings",
    # Controller
    "HeaderController",
    "SUPPRESSED_BY",
    "format_directive",
    "get_header_value",
]

__version__ = "1.0.0"
