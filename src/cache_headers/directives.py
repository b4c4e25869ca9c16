"""
Cache-Control directive set: parsing, typed access and serialization.
"""
import logging
from dataclasses import dataclass, replace
from typing import Dict, Iterator, List, Optional, Tuple, Union

from .types import Directive, DirectiveKind, DirectiveValue

logger = logging.getLogger(__name__)


def _parse_seconds(raw: Optional[str]) -> Optional[int]:
    """Parse a delta-seconds value, returning None if unusable."""
    if raw is None:
        return None
    value = raw.strip().strip('"')
    if not value.isdecimal():
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _as_directive(directive: Union[Directive, str]) -> Directive:
    if isinstance(directive, Directive):
        return directive
    found = Directive.lookup(directive)
    if found is None:
        raise KeyError(f"Unknown Cache-Control directive '{directive}'")
    return found


@dataclass
class DirectiveSet:
    """
    Mutable set of Cache-Control directives.

    Every field is ``None`` when the directive is unset. Boolean directives
    hold ``True``/``False``, numeric directives hold integer seconds. Field
    order is the canonical serialization order.

    Example:
        header = DirectiveSet().set_public().set_s_maxage(120).set_max_age(60)
        str(header)  # "max-age=60, s-maxage=120, public"
    """

    max_age: Optional[int] = None
    """Maximum age in seconds."""

    s_maxage: Optional[int] = None
    """Shared cache maximum age in seconds."""

    no_cache: Optional[bool] = None
    """Response must be revalidated before use."""

    no_store: Optional[bool] = None
    """Response must not be stored."""

    no_transform: Optional[bool] = None
    """Intermediaries must not transform the payload."""

    must_revalidate: Optional[bool] = None
    """Stale response must be revalidated."""

    proxy_revalidate: Optional[bool] = None
    """Shared caches must revalidate a stale response."""

    must_understand: Optional[bool] = None
    """Cache only if the status code semantics are understood."""

    private: Optional[bool] = None
    """Response is user-specific (private cache only)."""

    public: Optional[bool] = None
    """Response may be stored by shared caches."""

    immutable: Optional[bool] = None
    """Response body will not change while fresh."""

    stale_while_revalidate: Optional[int] = None
    """Seconds a stale response may be served while revalidating."""

    stale_if_error: Optional[int] = None
    """Seconds a stale response may be served on upstream error."""

    @classmethod
    def parse(cls, header_value: Optional[str]) -> "DirectiveSet":
        """
        Parse a Cache-Control header value.

        Unknown directives are dropped, numeric directives without a usable
        value stay unset, and a repeated directive keeps the last value.
        """
        directives = cls()

        if not header_value:
            return directives

        for part in header_value.split(","):
            part = part.strip().lower()
            if not part:
                continue

            if "=" in part:
                key, raw_value = part.split("=", 1)
            else:
                key, raw_value = part, None

            directive = Directive.lookup(key)
            if directive is None:
                logger.debug(f"Ignoring unknown Cache-Control directive: {key!r}")
                continue

            if directive.kind == DirectiveKind.BOOLEAN:
                directives.set(directive, True)
                continue

            seconds = _parse_seconds(raw_value)
            if seconds is None:
                logger.debug(f"Ignoring {directive.value} without usable value: {raw_value!r}")
                continue
            directives.set(directive, seconds)

        return directives

    def get(self, directive: Union[Directive, str]) -> Optional[DirectiveValue]:
        """Return the stored value, or None when the directive is unset."""
        return getattr(self, _as_directive(directive).attr)

    def set(
        self, directive: Union[Directive, str], value: Optional[DirectiveValue]
    ) -> "DirectiveSet":
        """Set a directive value; None clears it."""
        setattr(self, _as_directive(directive).attr, value)
        return self

    def __getitem__(self, directive: Union[Directive, str]) -> Optional[DirectiveValue]:
        return self.get(directive)

    def __setitem__(
        self, directive: Union[Directive, str], value: Optional[DirectiveValue]
    ) -> None:
        self.set(directive, value)

    def __delitem__(self, directive: Union[Directive, str]) -> None:
        self.set(directive, None)

    def __contains__(self, directive: object) -> bool:
        if not isinstance(directive, (Directive, str)):
            return False
        found = directive if isinstance(directive, Directive) else Directive.lookup(directive)
        if found is None:
            return False
        return _emit_value(found, self.get(found)) is not None

    def set_max_age(self, value: Optional[int]) -> "DirectiveSet":
        return self.set(Directive.MAX_AGE, value)

    def set_s_maxage(self, value: Optional[int]) -> "DirectiveSet":
        return self.set(Directive.S_MAXAGE, value)

    def set_no_cache(self, value: Optional[bool] = True) -> "DirectiveSet":
        return self.set(Directive.NO_CACHE, value)

    def set_no_store(self, value: Optional[bool] = True) -> "DirectiveSet":
        return self.set(Directive.NO_STORE, value)

    def set_no_transform(self, value: Optional[bool] = True) -> "DirectiveSet":
        return self.set(Directive.NO_TRANSFORM, value)

    def set_must_revalidate(self, value: Optional[bool] = True) -> "DirectiveSet":
        return self.set(Directive.MUST_REVALIDATE, value)

    def set_proxy_revalidate(self, value: Optional[bool] = True) -> "DirectiveSet":
        return self.set(Directive.PROXY_REVALIDATE, value)

    def set_must_understand(self, value: Optional[bool] = True) -> "DirectiveSet":
        return self.set(Directive.MUST_UNDERSTAND, value)

    def set_private(self, value: Optional[bool] = True) -> "DirectiveSet":
        return self.set(Directive.PRIVATE, value)

    def set_public(self, value: Optional[bool] = True) -> "DirectiveSet":
        return self.set(Directive.PUBLIC, value)

    def set_immutable(self, value: Optional[bool] = True) -> "DirectiveSet":
        return self.set(Directive.IMMUTABLE, value)

    def set_stale_while_revalidate(self, value: Optional[int]) -> "DirectiveSet":
        return self.set(Directive.STALE_WHILE_REVALIDATE, value)

    def set_stale_if_error(self, value: Optional[int]) -> "DirectiveSet":
        return self.set(Directive.STALE_IF_ERROR, value)

    def items(self) -> Iterator[Tuple[Directive, DirectiveValue]]:
        """Yield (directive, value) for every emitted directive, in canonical order."""
        for directive in Directive:
            value = _emit_value(directive, self.get(directive))
            if value is not None:
                yield directive, value

    def to_dict(self) -> Dict[str, DirectiveValue]:
        """Return emitted directives keyed by header token."""
        return {directive.value: value for directive, value in self.items()}

    def copy(self) -> "DirectiveSet":
        return replace(self)

    def is_empty(self) -> bool:
        return next(self.items(), None) is None

    def to_string(self) -> str:
        """Serialize to a header value in canonical directive order."""
        parts: List[str] = []

        for directive, value in self.items():
            if directive.kind == DirectiveKind.BOOLEAN:
                parts.append(directive.value)
            else:
                parts.append(f"{directive.value}={value}")

        return ", ".join(parts)

    def __str__(self) -> str:
        return self.to_string()


def _emit_value(directive: Directive, value: Optional[DirectiveValue]) -> Optional[DirectiveValue]:
    """Return the value to serialize, or None if the directive is not emitted."""
    if directive.kind == DirectiveKind.BOOLEAN:
        return True if value is True else None
    # bool is an int subclass; only real integers carry seconds
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def parse_cache_control(header: Optional[str]) -> DirectiveSet:
    """Parse Cache-Control header into directives."""
    return DirectiveSet.parse(header)


def build_cache_control(directives: DirectiveSet) -> str:
    """Build Cache-Control header from directives."""
    return directives.to_string()

