"""Append-only document sink for rendered fragments.

Follows the StringBuilder pattern: fragments are appended to a list and
joined once at the end.

Thread Safety:
DocumentBuilder instances are local to each render call.
No shared mutable state.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Fragment:
    """One rendered ``<tag>content</tag>`` unit.

    Immutable once produced.
    """

    opening: str
    content: str
    closing: str

    def __str__(self) -> str:
        return f"{self.opening}{self.content}{self.closing}"


class DocumentBuilder:
    """Ordered sequence of rendered fragments.

    Each append() call records one fragment, even when its parts are
    empty. Fragments are never reordered, deduplicated or truncated.

    Usage:
            >>> doc = DocumentBuilder().append("<h1>", "Hello", "</h1>")
            >>> doc = doc.append("<p>", "", "</p>")
            >>> doc.render()
            '<h1>Hello</h1><p></p>'
            >>> len(doc)
            2

    Thread Safety:
        Instance is local to each render call.
        No shared mutable state.

    """

    __slots__ = ("_fragments",)

    def __init__(self) -> None:
        """Initialize empty document."""
        self._fragments: list[str] = []

    def append(self, *parts: str) -> DocumentBuilder:
        """Append one fragment built from the given parts.

        Args:
            *parts: Strings concatenated in call order

        Returns:
            self for method chaining
        """
        self._fragments.append("".join(parts))
        return self

    def append_fragment(self, fragment: Fragment) -> DocumentBuilder:
        """Append a rendered Fragment.

        Returns:
            self for method chaining
        """
        self._fragments.append(str(fragment))
        return self

    def render(self) -> str:
        """Concatenate all fragments with no separators."""
        return "".join(self._fragments)

    @property
    def fragments(self) -> tuple[str, ...]:
        """Rendered fragments in append order."""
        return tuple(self._fragments)

    def __len__(self) -> int:
        """Return number of fragments (not total length)."""
        return len(self._fragments)

    def __bool__(self) -> bool:
        """Return True if any fragment has been appended."""
        return bool(self._fragments)
