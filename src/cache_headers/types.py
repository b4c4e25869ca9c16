"""
Types for Cache-Control family response headers.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Union


class DirectiveKind(str, Enum):
    """Value kind of a Cache-Control directive."""

    BOOLEAN = "boolean"
    NUMERIC = "numeric"


class Directive(str, Enum):
    """
    Supported Cache-Control directives.

    Declaration order is the canonical serialization order.
    """

    MAX_AGE = "max-age"
    S_MAXAGE = "s-maxage"
    NO_CACHE = "no-cache"
    NO_STORE = "no-store"
    NO_TRANSFORM = "no-transform"
    MUST_REVALIDATE = "must-revalidate"
    PROXY_REVALIDATE = "proxy-revalidate"
    MUST_UNDERSTAND = "must-understand"
    PRIVATE = "private"
    PUBLIC = "public"
    IMMUTABLE = "immutable"
    STALE_WHILE_REVALIDATE = "stale-while-revalidate"
    STALE_IF_ERROR = "stale-if-error"

    @property
    def kind(self) -> DirectiveKind:
        """Fixed value kind of this directive."""
        return DIRECTIVE_KINDS[self]

    @property
    def attr(self) -> str:
        """Attribute name used on DirectiveSet (``max-age`` -> ``max_age``)."""
        return self.value.replace("-", "_")

    @classmethod
    def lookup(cls, name: str) -> Optional["Directive"]:
        """Return the directive for a header token, or None if unknown."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None


DIRECTIVE_KINDS: Dict[Directive, DirectiveKind] = {
    Directive.MAX_AGE: DirectiveKind.NUMERIC,
    Directive.S_MAXAGE: DirectiveKind.NUMERIC,
    Directive.NO_CACHE: DirectiveKind.BOOLEAN,
    Directive.NO_STORE: DirectiveKind.BOOLEAN,
    Directive.NO_TRANSFORM: DirectiveKind.BOOLEAN,
    Directive.MUST_REVALIDATE: DirectiveKind.BOOLEAN,
    Directive.PROXY_REVALIDATE: DirectiveKind.BOOLEAN,
    Directive.MUST_UNDERSTAND: DirectiveKind.BOOLEAN,
    Directive.PRIVATE: DirectiveKind.BOOLEAN,
    Directive.PUBLIC: DirectiveKind.BOOLEAN,
    Directive.IMMUTABLE: DirectiveKind.BOOLEAN,
    Directive.STALE_WHILE_REVALIDATE: DirectiveKind.NUMERIC,
    Directive.STALE_IF_ERROR: DirectiveKind.NUMERIC,
}


DirectiveValue = Union[bool, int]
"""Value held by a directive: bool for boolean kinds, int seconds for numeric."""


class HeaderName(str):
    """Header name normalized to lower case once, at construction."""

    def __new__(cls, name: str) -> "HeaderName":
        if isinstance(name, HeaderName):
            return name
        return super().__new__(cls, name.strip().lower())

    def __repr__(self) -> str:
        return f"HeaderName({str.__repr__(self)})"


Target = Optional[Union[str, Sequence[str]]]
"""Target header selector: None (all configured), one name, or several."""


@dataclass
class CacheHeadersConfig:
    """Configuration for cache header control."""

    header_names: List[str] = field(default_factory=lambda: ["Cache-Control"])
    """Response headers to manage. Default: ['Cache-Control']."""

    log_suppressed: bool = True
    """Whether to log suppressed directive mutations at debug level."""
