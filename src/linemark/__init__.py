"""
linemark — line-oriented Markdown to HTML

Renders a small markdown dialect one line at a time: headers, horizontal
rules, optional bold blocks and paragraphs. Every line yields exactly one
HTML fragment, and rendering never raises.

Quick Start:
    >>> from linemark import to_html
    >>> to_html("# Hello")
    '<h1>Hello</h1>'

    >>> # Or use the Markdown class
    >>> from linemark import Markdown
    >>> md = Markdown(bold=True)
    >>> md("** Loud\\nquiet")
    '<b>Loud</b><p>quiet</p>'

Custom Tags:
    >>> from linemark import Marker, TagRegistryBuilder
    >>> registry = (
    ...     TagRegistryBuilder()
    ...     .register(Marker.HEADER1, "h2", prefix="# ", token="#")
    ...     .build()
    ... )
    >>> to_html("# Demoted", registry=registry)
    '<h2>Demoted</h2>'
"""

from linemark.chain import (
    LineElement,
    LineHandler,
    ParagraphHandler,
    ResponsibilityChain,
    build_chain,
)
from linemark.classifier import Classification, LineClassifier, match_prefix
from linemark.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from linemark.document import DocumentBuilder, Fragment
from linemark.errors import ConfigError, LinemarkError, RegistryError
from linemark.registry import (
    TagEntry,
    TagRegistry,
    TagRegistryBuilder,
    create_default_registry,
)
from linemark.renderer import MarkdownRenderer
from linemark.tokens import Marker

__version__ = "0.1.0"


def to_html(
    text: str,
    *,
    registry: TagRegistry | None = None,
    config: RenderConfig | None = None,
) -> str:
    """Render markdown text to an HTML fragment string.

    Args:
        text: Markdown source
        registry: Custom tag registry (uses defaults if None)
        config: Render config (uses the active context config if None)

    Returns:
        HTML string, one fragment per input line

    Example:
        >>> to_html("# A\\n\\nB")
        '<h1>A</h1><p></p><p>B</p>'
    """
    return MarkdownRenderer(registry=registry, config=config).to_html(text)


class Markdown:
    """High-level callable renderer.

    Usage:
        >>> md = Markdown()
        >>> md("---")
        '<hr></hr>'

    Thread Safety:
        Holds only an immutable config and registry. Safe to call
        concurrently from different threads.

    """

    __slots__ = ("_config", "_renderer")

    def __init__(
        self,
        *,
        bold: bool = False,
        normalize_newlines: bool = True,
        registry: TagRegistry | None = None,
    ) -> None:
        """Initialize Markdown processor.

        Args:
            bold: Recognize "** " lines as bold blocks
            normalize_newlines: Convert CRLF to LF before splitting
            registry: Custom tag registry (uses defaults if None)
        """
        self._config = RenderConfig(
            bold_enabled=bold,
            normalize_newlines=normalize_newlines,
            tag_registry=registry,
        )
        self._renderer = MarkdownRenderer(config=self._config)

    @property
    def config(self) -> RenderConfig:
        return self._config

    def __call__(self, text: str) -> str:
        """Render markdown text to HTML."""
        return self._renderer.to_html(text)

    def render_document(self, text: str) -> DocumentBuilder:
        """Render into a document so individual fragments can be inspected."""
        return self._renderer.render_document(text)


__all__ = [
    "Classification",
    "ConfigError",
    "DocumentBuilder",
    "Fragment",
    "LineClassifier",
    "LineElement",
    "LineHandler",
    "LinemarkError",
    "Markdown",
    "MarkdownRenderer",
    "Marker",
    "ParagraphHandler",
    "RegistryError",
    "RenderConfig",
    "ResponsibilityChain",
    "TagEntry",
    "TagRegistry",
    "TagRegistryBuilder",
    "__version__",
    "build_chain",
    "create_default_registry",
    "get_render_config",
    "match_prefix",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
    "to_html",
]
