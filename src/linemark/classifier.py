"""Line classification by ordered prefix matching.

A line matches a marker iff it starts with that marker's literal prefix.
The matched prefix is removed and the remainder is kept verbatim (no
further trimming). Prefixes can overlap ("#" is a prefix of "##"), so
candidates are tried in order and callers list the more specific ones
first.

Example:
    >>> classifier = LineClassifier(create_default_registry())
    >>> classifier.classify("## Title")
    Classification(marker=<Marker.HEADER2: 2>, content='Title')
    >>> classifier.classify("plain")
    Classification(marker=<Marker.PARAGRAPH: 6>, content='plain')
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from linemark.tokens import Marker

if TYPE_CHECKING:
    from linemark.registry import TagRegistry

# Precedence used when no explicit order is given
DEFAULT_ORDER: tuple[Marker, ...] = (
    Marker.HEADER1,
    Marker.HEADER2,
    Marker.HEADER3,
    Marker.HORIZONTAL_RULE,
)


def match_prefix(line: str, prefix: str) -> tuple[bool, str]:
    """Test a line against a literal prefix.

    Args:
        line: One input line
        prefix: Literal prefix such as "# " or "---"

    Returns:
        (True, remainder) on match, otherwise (False, line)
    """
    if line and prefix and line.startswith(prefix):
        return True, line[len(prefix) :]
    return False, line


@dataclass(frozen=True, slots=True)
class Classification:
    """Result of classifying one line."""

    marker: Marker
    content: str


class LineClassifier:
    """Pick the marker that prefixes a line.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_candidates",)

    def __init__(
        self,
        registry: TagRegistry,
        markers: Iterable[Marker] = DEFAULT_ORDER,
    ) -> None:
        """Initialize classifier.

        Markers without a registered prefix are skipped.

        Args:
            registry: Registry supplying each marker's prefix
            markers: Candidate markers, most specific first
        """
        candidates: list[tuple[Marker, str]] = []
        for marker in markers:
            prefix = registry.prefix_for(marker)
            if prefix is not None:
                candidates.append((marker, prefix))
        self._candidates = tuple(candidates)

    @property
    def candidates(self) -> tuple[tuple[Marker, str], ...]:
        """(marker, prefix) pairs in the order they are tried."""
        return self._candidates

    def classify(self, line: str) -> Classification:
        """Classify one line.

        Returns:
            The first matching marker with its prefix stripped, or
            PARAGRAPH with the line unchanged
        """
        for marker, prefix in self._candidates:
            matched, rest = match_prefix(line, prefix)
            if matched:
                return Classification(marker, rest)
        return Classification(Marker.PARAGRAPH, line)


__all__ = [
    "Classification",
    "DEFAULT_ORDER",
    "LineClassifier",
    "match_prefix",
]
