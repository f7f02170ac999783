"""ContextVar-based render configuration for linemark.

Config is set once per Markdown instance (or per context) and read by the
renderer when no explicit config is passed.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from linemark.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(bold_enabled=True)):
        html = to_html("** loud")

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from linemark.errors import ConfigError

if TYPE_CHECKING:
    from linemark.registry import TagRegistry


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        bold_enabled: Recognize "** " lines as bold blocks
        normalize_newlines: Convert CRLF to LF before splitting. When False,
            a trailing "\\r" stays in the line content.
        tag_registry: Custom tag registry (default markers if None)

    """

    bold_enabled: bool = False
    normalize_newlines: bool = True
    tag_registry: TagRegistry | None = None

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> RenderConfig:
        """Create RenderConfig from dictionary.

        Unknown keys are silently ignored.

        Raises:
            ConfigError: If a boolean option has a non-boolean value

        Example:
            >>> RenderConfig.from_dict({"bold_enabled": True, "other": 1}).bold_enabled
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        for key in ("bold_enabled", "normalize_newlines"):
            if key in filtered and not isinstance(filtered[key], bool):
                raise ConfigError(key, f"expected bool, got {type(filtered[key]).__name__}")
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (thread-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context.

    Only affects the current thread's context.
    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the module-level default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(bold_enabled=True)):
        ...     get_render_config().bold_enabled
        True

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
