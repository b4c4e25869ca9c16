"""
Request-aware Cache-Control header controller.

Applies directives to one or more response headers (browser, CDN, edge)
unless the matching request header already declared a directive that
rules them out.
"""
import logging
from typing import Dict, FrozenSet, List, Mapping, MutableMapping, Optional, Sequence, Tuple

from .config import merge_cache_headers_config
from .directives import DirectiveSet
from .types import (
    CacheHeadersConfig,
    Directive,
    DirectiveKind,
    HeaderName,
    Target,
)

logger = logging.getLogger(__name__)


SUPPRESSED_BY: Dict[Directive, FrozenSet[Directive]] = {
    Directive.MAX_AGE: frozenset({Directive.NO_STORE}),
    Directive.S_MAXAGE: frozenset({Directive.NO_STORE, Directive.PRIVATE}),
    Directive.NO_CACHE: frozenset({Directive.NO_STORE}),
    Directive.NO_STORE: frozenset(),
    Directive.NO_TRANSFORM: frozenset(),
    Directive.MUST_REVALIDATE: frozenset({Directive.NO_STORE}),
    Directive.PROXY_REVALIDATE: frozenset({Directive.NO_STORE, Directive.PRIVATE}),
    Directive.MUST_UNDERSTAND: frozenset({Directive.NO_STORE}),
    Directive.PRIVATE: frozenset({Directive.NO_STORE, Directive.PUBLIC}),
    Directive.PUBLIC: frozenset({Directive.NO_STORE, Directive.PRIVATE}),
    Directive.IMMUTABLE: frozenset({Directive.NO_STORE}),
    Directive.STALE_WHILE_REVALIDATE: frozenset({Directive.NO_STORE}),
    Directive.STALE_IF_ERROR: frozenset({Directive.NO_STORE}),
}
"""Request-side directives that veto setting a given response directive."""


def get_header_value(headers: Mapping[str, str], key: str) -> Optional[str]:
    """
    Get header value case-insensitively.

    Mappings with ``getlist`` (Starlette ``Headers``) may carry the header on
    several lines; those values are joined with ", ".
    """
    getlist = getattr(headers, "getlist", None)
    if callable(getlist):
        values = getlist(key)
        if values:
            return ", ".join(values)
    value = headers.get(key)
    if value is not None:
        return value
    lower_key = key.lower()
    for k, v in headers.items():
        if k.lower() == lower_key:
            return v
    return None


def format_directive(directive: Directive, value: Optional[int] = None) -> str:
    """Format a single directive token (``public`` or ``max-age=60``)."""
    if directive.kind == DirectiveKind.NUMERIC:
        return f"{directive.value}={value}"
    return directive.value


class HeaderController:
    """
    Per-request controller for Cache-Control family response headers.

    Parses the configured request headers once at construction and appends
    directives to the matching response headers, skipping any directive the
    request already rules out. Writes are append-only: calling the same
    setter twice for a header writes the token twice.

    Example:
        controller = HeaderController(
            request.headers,
            response.headers,
            ["Cache-Control", "CDN-Cache-Control"],
        )
        controller.set_public()
        controller.set_s_maxage(120, target="CDN-Cache-Control")
    """

    def __init__(
        self,
        request_headers: Mapping[str, str],
        response_headers: MutableMapping[str, str],
        header_names: Optional[Sequence[str]] = None,
        config: Optional[CacheHeadersConfig] = None,
    ) -> None:
        self._config = merge_cache_headers_config(config)
        names = list(header_names) if header_names else self._config.header_names

        normalized: List[HeaderName] = []
        for name in names:
            header = HeaderName(name)
            if header not in normalized:
                normalized.append(header)

        self._header_names: Tuple[HeaderName, ...] = tuple(normalized)
        self._response_headers = response_headers
        self._request_directives: Dict[HeaderName, DirectiveSet] = {
            header: DirectiveSet.parse(get_header_value(request_headers, header))
            for header in self._header_names
        }

    @property
    def header_names(self) -> Tuple[HeaderName, ...]:
        """Configured header names, lower-cased, in configuration order."""
        return self._header_names

    @property
    def response_headers(self) -> MutableMapping[str, str]:
        """Outbound header map this controller writes to."""
        return self._response_headers

    def resolve_targets(self, target: Target = None) -> List[HeaderName]:
        """
        Resolve a target selector to header names.

        Args:
            target: None for every configured header, a single header name,
                or a sequence of names. Duplicates in a sequence are kept.

        Returns:
            Lower-cased header names in order.
        """
        if target is None:
            return list(self._header_names)
        if isinstance(target, str):
            return [HeaderName(target)]
        return [HeaderName(name) for name in target]

    def request_directives(self, header_name: str) -> DirectiveSet:
        """Request-side directives for a header (empty if not configured)."""
        return self._request_directives.get(HeaderName(header_name)) or DirectiveSet()

    def is_suppressed(self, directive: Directive, header_name: str) -> bool:
        """Check whether the request side of a header vetoes a directive."""
        requested = self.request_directives(header_name)
        return any(veto in requested for veto in SUPPRESSED_BY[directive])

    def append(self, header_name: str, token: str) -> None:
        """Append a directive token to a response header."""
        key = HeaderName(header_name)
        current = self._response_headers.get(key)
        self._response_headers[key] = f"{current}, {token}" if current else token

    def apply(
        self,
        directive: Directive,
        value: Optional[int] = None,
        target: Target = None,
    ) -> List[HeaderName]:
        """
        Append a directive to every target header that does not suppress it.

        Args:
            directive: Directive to write.
            value: Seconds for numeric directives; ignored for boolean ones.
            target: Header selector, see resolve_targets().

        Returns:
            Headers that were written.
        """
        token = format_directive(directive, value)
        written: List[HeaderName] = []

        for header in self.resolve_targets(target):
            if self.is_suppressed(directive, header):
                if self._config.log_suppressed:
                    logger.debug(f"Suppressed {token} on {header}: request declared conflicting directive")
                continue
            self.append(header, token)
            written.append(header)

        return written

    def get(self, header_name: str) -> DirectiveSet:
        """
        Get a copy of the request-side directives for a configured header.

        Raises:
            KeyError: If the header is not configured.
        """
        header = HeaderName(header_name)
        if header not in self._request_directives:
            raise KeyError(f"Header '{header_name}' not configured")
        return self._request_directives[header].copy()

    def assign(self, header_name: str, directives: DirectiveSet) -> None:
        """
        Replace a configured response header with a full directive set.

        No suppression is applied.

        Raises:
            KeyError: If the header is not configured.
        """
        header = HeaderName(header_name)
        if header not in self._request_directives:
            raise KeyError(f"Header '{header_name}' not configured")
        self._response_headers[header] = directives.to_string()

    def set_max_age(self, max_age: int, target: Target = None) -> List[HeaderName]:
        return self.apply(Directive.MAX_AGE, max_age, target)

    def set_s_maxage(self, s_maxage: int, target: Target = None) -> List[HeaderName]:
        return self.apply(Directive.S_MAXAGE, s_maxage, target)

    def set_no_cache(self, target: Target = None) -> List[HeaderName]:
        return self.apply(Directive.NO_CACHE, target=target)

    def set_no_store(self, target: Target = None) -> List[HeaderName]:
        return self.apply(Directive.NO_STORE, target=target)

    def set_no_transform(self, target: Target = None) -> List[HeaderName]:
        return self.apply(Directive.NO_TRANSFORM, target=target)

    def set_must_revalidate(self, target: Target = None) -> List[HeaderName]:
        return self.apply(Directive.MUST_REVALIDATE, target=target)

    def set_proxy_revalidate(self, target: Target = None) -> List[HeaderName]:
        return self.apply(Directive.PROXY_REVALIDATE, target=target)

    def set_must_understand(self, target: Target = None) -> List[HeaderName]:
        return self.apply(Directive.MUST_UNDERSTAND, target=target)

    def set_private(self, target: Target = None) -> List[HeaderName]:
        return self.apply(Directive.PRIVATE, target=target)

    def set_public(self, target: Target = None) -> List[HeaderName]:
        return self.apply(Directive.PUBLIC, target=target)

    def set_immutable(self, target: Target = None) -> List[HeaderName]:
        return self.apply(Directive.IMMUTABLE, target=target)

    def set_stale_while_revalidate(self, seconds: int, target: Target = None) -> List[HeaderName]:
        return self.apply(Directive.STALE_WHILE_REVALIDATE, seconds, target)

    def set_stale_if_error(self, seconds: int, target: Target = None) -> List[HeaderName]:
        return self.apply(Directive.STALE_IF_ERROR, seconds, target)
