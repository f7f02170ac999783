"""Tag registry mapping line markers to HTML tag names.

The registry is the single source of truth for which markers exist, what
literal prefix introduces each one, and which tag it renders as.

Thread Safety:
TagRegistry is immutable after creation. Safe to share.
Use TagRegistryBuilder for mutable construction.

Example:
    >>> registry = create_default_registry()
    >>> registry.opening_tag(Marker.HEADER2)
    '<h2>'
    >>> registry.closing_tag(Marker.BOLD)
    '</b>'
    >>> registry.has_marker("##")
    True
"""

from __future__ import annotations

from dataclasses import dataclass

from linemark.errors import RegistryError
from linemark.tokens import Marker
from linemark.utils.logger import get_logger

logger = get_logger(__name__)

FALLBACK_TAG = "p"


@dataclass(frozen=True, slots=True)
class TagEntry:
    """One registered marker.

    Attributes:
        marker: Block kind this entry describes
        tag: HTML tag name without angle brackets (e.g., "h1")
        prefix: Literal line prefix that introduces the marker, or None
            for markers that are never detected (the paragraph fallback)
        token: Whitespace-delimited form of the marker (e.g., "##")
    """

    marker: Marker
    tag: str
    prefix: str | None = None
    token: str | None = None


class TagRegistry:
    """Immutable registry of marker to tag mappings.

    Lookups for markers that were never registered degrade to the "p"
    fallback instead of failing.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_entries", "_by_marker", "_by_token")

    def __init__(
        self,
        entries: tuple[TagEntry, ...],
        by_marker: dict[Marker, TagEntry],
        by_token: dict[str, TagEntry],
    ) -> None:
        """Initialize registry with pre-built mappings.

        Use TagRegistryBuilder to create instances.
        """
        self._entries = entries
        self._by_marker = by_marker
        self._by_token = by_token

    def tag_for(self, marker: Marker) -> str:
        """Get the bare tag name for a marker ("p" if unregistered)."""
        entry = self._by_marker.get(marker)
        return entry.tag if entry is not None else FALLBACK_TAG

    def opening_tag(self, marker: Marker) -> str:
        """Get the opening tag for a marker, e.g. ``<h1>``."""
        return f"<{self.tag_for(marker)}>"

    def closing_tag(self, marker: Marker) -> str:
        """Get the closing tag for a marker, e.g. ``</h1>``."""
        return f"</{self.tag_for(marker)}>"

    def prefix_for(self, marker: Marker) -> str | None:
        """Get the literal line prefix for a marker.

        Returns:
            Prefix string, or None if the marker is unregistered or is
            never detected from a prefix
        """
        entry = self._by_marker.get(marker)
        return entry.prefix if entry is not None else None

    def has_marker(self, candidate_token: str) -> bool:
        """Check whether a whitespace-delimited token names a marker.

        Args:
            candidate_token: Token such as "#" or "---"

        Returns:
            True if the token is registered
        """
        return candidate_token in self._by_token

    @property
    def markers(self) -> tuple[Marker, ...]:
        """Get all registered markers in registration order."""
        return tuple(entry.marker for entry in self._entries)

    @property
    def entries(self) -> tuple[TagEntry, ...]:
        """Get all registered entries."""
        return self._entries

    def __contains__(self, marker: object) -> bool:
        """Support 'marker in registry' syntax."""
        return marker in self._by_marker

    def __len__(self) -> int:
        """Number of registered markers."""
        return len(self._entries)


class TagRegistryBuilder:
    """Mutable builder for TagRegistry.

    Example:
        >>> builder = TagRegistryBuilder()
        >>> builder.register(Marker.HEADER1, "h1", prefix="# ", token="#")
        >>> registry = builder.build()
    """

    __slots__ = ("_entries", "_by_marker", "_by_token", "_prefixes")

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._entries: list[TagEntry] = []
        self._by_marker: dict[Marker, TagEntry] = {}
        self._by_token: dict[str, TagEntry] = {}
        self._prefixes: set[str] = set()

    def register(
        self,
        marker: Marker,
        tag: str,
        *,
        prefix: str | None = None,
        token: str | None = None,
    ) -> TagRegistryBuilder:
        """Register a marker.

        Args:
            marker: Marker to register
            tag: HTML tag name (without angle brackets)
            prefix: Literal line prefix that introduces the marker
            token: Whitespace-delimited marker token for has_marker()

        Returns:
            Self for chaining

        Raises:
            RegistryError: If the tag is empty, or the marker, prefix or
                token is already registered
        """
        if not tag or tag.strip() != tag:
            raise RegistryError(f"invalid tag name {tag!r}", marker)

        if marker in self._by_marker:
            raise RegistryError("already registered", marker)

        if prefix is not None:
            if not prefix:
                raise RegistryError("prefix must not be empty", marker)
            if prefix in self._prefixes:
                raise RegistryError(f"prefix {prefix!r} already registered", marker)

        if token is not None and token in self._by_token:
            raise RegistryError(f"token {token!r} already registered", marker)

        entry = TagEntry(marker=marker, tag=tag, prefix=prefix, token=token)
        self._entries.append(entry)
        self._by_marker[marker] = entry
        if prefix is not None:
            self._prefixes.add(prefix)
        if token is not None:
            self._by_token[token] = entry

        logger.debug("Registered %s -> <%s> (prefix=%r)", marker.name, tag, prefix)
        return self

    def build(self) -> TagRegistry:
        """Build immutable registry.

        Returns:
            Immutable TagRegistry
        """
        return TagRegistry(
            entries=tuple(self._entries),
            by_marker=dict(self._by_marker),
            by_token=dict(self._by_token),
        )


def create_default_registry() -> TagRegistry:
    """Create registry with the built-in markers.

    Returns:
        Registry covering headers 1-3, horizontal rule, bold and paragraph
    """
    return (
        TagRegistryBuilder()
        .register(Marker.HEADER1, "h1", prefix="# ", token="#")
        .register(Marker.HEADER2, "h2", prefix="## ", token="##")
        .register(Marker.HEADER3, "h3", prefix="### ", token="###")
        .register(Marker.HORIZONTAL_RULE, "hr", prefix="---", token="---")
        .register(Marker.BOLD, "b", prefix="** ", token="**")
        .register(Marker.PARAGRAPH, FALLBACK_TAG)
        .build()
    )


__all__ = [
    "FALLBACK_TAG",
    "TagEntry",
    "TagRegistry",
    "TagRegistryBuilder",
    "create_default_registry",
]
