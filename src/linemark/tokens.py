"""Marker definitions for the linemark line classifier.

Each input line maps to exactly one Marker. PARAGRAPH is the fallback and
is never detected from a prefix; it applies when nothing else does.

Thread Safety:
Marker is an enum (inherently immutable).

"""

from enum import Enum, auto


class Marker(Enum):
    """Block kinds recognized at the start of a line."""

    HEADER1 = auto()  # "# "
    HEADER2 = auto()  # "## "
    HEADER3 = auto()  # "### "
    HORIZONTAL_RULE = auto()  # "---"
    BOLD = auto()  # "** "
    PARAGRAPH = auto()  # fallback


__all__ = ["Marker"]
