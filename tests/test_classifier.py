"""Tests for ordered-prefix line classification."""

import pytest

from linemark import Classification, LineClassifier, Marker, create_default_registry, match_prefix
from linemark.classifier import DEFAULT_ORDER


@pytest.fixture
def classifier() -> LineClassifier:
    return LineClassifier(create_default_registry())


class TestMatchPrefix:
    """match_prefix() primitive."""

    def test_match_strips_prefix_only(self) -> None:
        assert match_prefix("# Hello", "# ") == (True, "Hello")

    def test_remainder_not_trimmed(self) -> None:
        assert match_prefix("#   spaced  ", "# ") == (True, "  spaced  ")

    def test_no_match_returns_line(self) -> None:
        assert match_prefix("Hello", "# ") == (False, "Hello")

    def test_empty_line_never_matches(self) -> None:
        assert match_prefix("", "# ") == (False, "")

    def test_empty_prefix_never_matches(self) -> None:
        assert match_prefix("text", "") == (False, "text")

    def test_line_equal_to_prefix(self) -> None:
        assert match_prefix("---", "---") == (True, "")

    def test_bare_hash_without_space(self) -> None:
        assert match_prefix("#", "# ") == (False, "#")


class TestLineClassifier:
    """LineClassifier.classify()."""

    @pytest.mark.parametrize(
        ("line", "marker", "content"),
        [
            ("# Hello", Marker.HEADER1, "Hello"),
            ("## Title", Marker.HEADER2, "Title"),
            ("### Sub", Marker.HEADER3, "Sub"),
            ("---", Marker.HORIZONTAL_RULE, ""),
            ("----", Marker.HORIZONTAL_RULE, "-"),
            ("--- after", Marker.HORIZONTAL_RULE, " after"),
            ("plain text", Marker.PARAGRAPH, "plain text"),
            ("#NoSpace", Marker.PARAGRAPH, "#NoSpace"),
            ("#### Four", Marker.PARAGRAPH, "#### Four"),
            ("", Marker.PARAGRAPH, ""),
            ("   ", Marker.PARAGRAPH, "   "),
            (" # indented", Marker.PARAGRAPH, " # indented"),
        ],
    )
    def test_classify(
        self, classifier: LineClassifier, line: str, marker: Marker, content: str
    ) -> None:
        assert classifier.classify(line) == Classification(marker, content)

    def test_bold_not_in_default_order(self, classifier: LineClassifier) -> None:
        assert classifier.classify("** loud").marker is Marker.PARAGRAPH

    def test_bold_when_listed(self) -> None:
        classifier = LineClassifier(create_default_registry(), (*DEFAULT_ORDER, Marker.BOLD))
        assert classifier.classify("** loud") == Classification(Marker.BOLD, "loud")

    def test_line_without_space_is_untouched(self, classifier: LineClassifier) -> None:
        result = classifier.classify("word")
        assert result.marker is Marker.PARAGRAPH
        assert result.content == "word"

    def test_candidates_order(self, classifier: LineClassifier) -> None:
        assert classifier.candidates == (
            (Marker.HEADER1, "# "),
            (Marker.HEADER2, "## "),
            (Marker.HEADER3, "### "),
            (Marker.HORIZONTAL_RULE, "---"),
        )

    def test_markers_without_prefix_skipped(self) -> None:
        classifier = LineClassifier(create_default_registry(), (Marker.PARAGRAPH, Marker.HEADER1))
        assert classifier.candidates == ((Marker.HEADER1, "# "),)

    def test_first_listed_wins_on_overlap(self) -> None:
        """Overlapping prefixes resolve by candidate order."""
        from linemark import TagRegistryBuilder

        registry = (
            TagRegistryBuilder()
            .register(Marker.HORIZONTAL_RULE, "hr", prefix="-")
            .register(Marker.HEADER1, "h1", prefix="--")
            .build()
        )
        short_first = LineClassifier(registry, (Marker.HORIZONTAL_RULE, Marker.HEADER1))
        long_first = LineClassifier(registry, (Marker.HEADER1, Marker.HORIZONTAL_RULE))
        assert short_first.classify("--x") == Classification(Marker.HORIZONTAL_RULE, "-x")
        assert long_first.classify("--x") == Classification(Marker.HEADER1, "x")
