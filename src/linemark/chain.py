"""Chain of line handlers.

Each handler owns one marker. A line is offered to the handlers in order;
the first whose prefix matches strips it, renders one fragment into the
document and stops propagation. The chain ends in a paragraph handler
that consumes anything left, so every line yields exactly one fragment.

Handler order fixes precedence and is built by build_chain():

    HEADER1 -> HEADER2 -> HEADER3 -> HORIZONTAL_RULE [-> BOLD] -> PARAGRAPH

Thread Safety:
Handlers and chains hold only immutable references (the registry).
Per-line state lives in LineElement; per-render state in DocumentBuilder.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from linemark.classifier import DEFAULT_ORDER, LineClassifier
from linemark.document import Fragment
from linemark.registry import create_default_registry
from linemark.tokens import Marker

if TYPE_CHECKING:
    from linemark.document import DocumentBuilder
    from linemark.registry import TagRegistry


@dataclass(slots=True)
class LineElement:
    """A line travelling through the chain.

    ``text`` loses its matched prefix when a handler consumes the line.
    """

    text: str
    lineno: int = 1


class Handler(Protocol):
    """Protocol for chain links."""

    marker: Marker

    def handle(self, element: LineElement, document: DocumentBuilder) -> bool:
        """Render the element if it belongs to this handler.

        Returns:
            True if consumed (one fragment appended), False to pass it on
        """
        ...


def render_fragment(registry: TagRegistry, marker: Marker, content: str) -> Fragment:
    """Wrap content in the marker's opening and closing tags."""
    return Fragment(
        opening=registry.opening_tag(marker),
        content=content,
        closing=registry.closing_tag(marker),
    )


class LineHandler:
    """Prefix-matching handler for a single marker."""

    __slots__ = ("marker", "prefix", "_classifier", "_registry")

    def __init__(self, marker: Marker, registry: TagRegistry) -> None:
        self.marker = marker
        self.prefix = registry.prefix_for(marker)
        self._classifier = LineClassifier(registry, (marker,))
        self._registry = registry

    def handle(self, element: LineElement, document: DocumentBuilder) -> bool:
        if self.prefix is None:
            return False
        result = self._classifier.classify(element.text)
        if result.marker is not self.marker:
            return False
        element.text = result.content
        document.append_fragment(render_fragment(self._registry, self.marker, result.content))
        return True

    def __repr__(self) -> str:
        return f"LineHandler({self.marker.name}, prefix={self.prefix!r})"


class ParagraphHandler:
    """Terminal handler: renders whatever reaches it as a paragraph."""

    __slots__ = ("marker", "_registry")

    def __init__(self, registry: TagRegistry) -> None:
        self.marker = Marker.PARAGRAPH
        self._registry = registry

    def handle(self, element: LineElement, document: DocumentBuilder) -> bool:
        document.append_fragment(render_fragment(self._registry, self.marker, element.text))
        return True


class ResponsibilityChain:
    """Ordered handlers terminated by a paragraph fallback.

    The chain has no cross-line state: each handle() call starts a fresh
    traversal from the head.
    """

    __slots__ = ("_handlers", "_terminal")

    def __init__(self, handlers: tuple[Handler, ...], terminal: Handler) -> None:
        self._handlers = handlers
        self._terminal = terminal

    @property
    def handlers(self) -> tuple[Handler, ...]:
        """Non-terminal handlers in precedence order."""
        return self._handlers

    @property
    def terminal(self) -> Handler:
        return self._terminal

    @property
    def order(self) -> tuple[Marker, ...]:
        """Markers in the order lines are offered to them, fallback last."""
        return (*(h.marker for h in self._handlers), self._terminal.marker)

    def handle(self, element: LineElement, document: DocumentBuilder) -> Marker:
        """Route one line through the chain.

        Returns:
            Marker of the handler that consumed the line
        """
        for handler in self._handlers:
            if handler.handle(element, document):
                return handler.marker
        self._terminal.handle(element, document)
        return self._terminal.marker


def build_chain(
    registry: TagRegistry | None = None,
    *,
    bold_enabled: bool = False,
) -> ResponsibilityChain:
    """Build a caller-owned chain.

    Args:
        registry: Tag registry (default markers if None)
        bold_enabled: Add the "** " bold handler before the paragraph fallback

    Returns:
        New ResponsibilityChain. Cheap to build; no instance is shared.
    """
    if registry is None:
        registry = create_default_registry()

    order = DEFAULT_ORDER + ((Marker.BOLD,) if bold_enabled else ())
    handlers = tuple(
        LineHandler(marker, registry)
        for marker in order
        if registry.prefix_for(marker) is not None
    )
    return ResponsibilityChain(handlers, ParagraphHandler(registry))


__all__ = [
    "Handler",
    "LineElement",
    "LineHandler",
    "ParagraphHandler",
    "ResponsibilityChain",
    "build_chain",
    "render_fragment",
]
