"""Markdown to HTML rendering.

Splits the whole input into lines, routes each line through a fresh
ResponsibilityChain and returns the concatenated fragments. The input is
re-parsed in full on every call.

Thread Safety:
Each call builds its own chain and DocumentBuilder. A single
MarkdownRenderer can be shared across threads.

Line Endings:
With ``normalize_newlines`` (the default) CRLF is converted to LF before
splitting. Otherwise lines are split on LF only and a trailing "\\r" is
rendered as part of the content.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from linemark.chain import LineElement, build_chain
from linemark.config import get_render_config
from linemark.document import DocumentBuilder
from linemark.registry import create_default_registry
from linemark.tokens import Marker
from linemark.utils.logger import get_logger

if TYPE_CHECKING:
    from linemark.config import RenderConfig
    from linemark.registry import TagRegistry

logger = get_logger(__name__)

# Immutable, shared by every renderer without an explicit registry
_DEFAULT_REGISTRY = create_default_registry()


def split_lines(text: str, *, normalize_newlines: bool = True) -> list[str]:
    """Split input on newline characters.

    Always yields at least one line: ``""`` splits to ``[""]``.
    """
    if normalize_newlines:
        text = text.replace("\r\n", "\n")
    return text.split("\n")


class MarkdownRenderer:
    """Render line-oriented markdown to an HTML fragment string.

    Usage:
        >>> renderer = MarkdownRenderer()
        >>> renderer.to_html("# A\\n\\nB")
        '<h1>A</h1><p></p><p>B</p>'

    Thread Safety:
        Holds only immutable references. All per-render state is created
        inside to_html().
    """

    __slots__ = ("_config", "_registry")

    def __init__(
        self,
        registry: TagRegistry | None = None,
        config: RenderConfig | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            registry: Tag registry; falls back to config.tag_registry, then
                the default registry
            config: Render config; the active context config is read at
                render time when None
        """
        self._config = config
        self._registry = registry

    @property
    def config(self) -> RenderConfig:
        """Config used for the next render."""
        return self._config if self._config is not None else get_render_config()

    def _resolve_registry(self, config: RenderConfig) -> TagRegistry:
        if self._registry is not None:
            return self._registry
        if config.tag_registry is not None:
            return config.tag_registry
        return _DEFAULT_REGISTRY

    def render_document(self, text: str) -> DocumentBuilder:
        """Render into a fresh document and return it.

        Args:
            text: Markdown source (any string)

        Returns:
            DocumentBuilder holding one fragment per input line
        """
        config = self.config
        registry = self._resolve_registry(config)
        chain = build_chain(registry, bold_enabled=config.bold_enabled)
        document = DocumentBuilder()

        lines = split_lines(text, normalize_newlines=config.normalize_newlines)
        logger.debug("Rendering %d line(s)", len(lines))

        for lineno, line in enumerate(lines, start=1):
            marker = chain.handle(LineElement(line, lineno), document)
            if marker is Marker.PARAGRAPH and line.startswith("#"):
                logger.debug("Line %d: unrecognized heading marker, rendered as paragraph", lineno)

        return document

    def to_html(self, text: str) -> str:
        """Render markdown text to an HTML fragment string.

        Never raises for any string input.
        """
        return self.render_document(text).render()

    def __call__(self, text: str) -> str:
        return self.to_html(text)


__all__ = ["MarkdownRenderer", "split_lines"]
