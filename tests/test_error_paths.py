"""Error-path and malformed input tests.

Rendering is total: every input degrades to paragraph output instead of
raising. Exceptions exist only for construction-time mistakes.
"""

import pytest

from linemark import ConfigError, LinemarkError, Marker, RegistryError, to_html

# =========================================================================
# Exception hierarchy and formatting
# =========================================================================


class TestRegistryError:
    """Verify RegistryError formatting and hierarchy."""

    def test_message_only(self) -> None:
        err = RegistryError("bad")
        assert str(err) == "bad"
        assert err.marker is None

    def test_with_marker(self) -> None:
        err = RegistryError("already registered", Marker.BOLD)
        assert str(err) == "Marker 'BOLD': already registered"
        assert err.message == "already registered"

    def test_is_linemark_error(self) -> None:
        assert isinstance(RegistryError("x"), LinemarkError)


class TestConfigError:
    def test_format(self) -> None:
        err = ConfigError("bold_enabled", "expected bool")
        assert str(err) == "Config 'bold_enabled': expected bool"

    def test_is_linemark_error(self) -> None:
        assert isinstance(ConfigError("k", "m"), LinemarkError)


# =========================================================================
# Graceful degradation
# =========================================================================


class TestMalformedInput:
    """Inputs that look like markers but are not."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("", "<p></p>"),
            (" ", "<p> </p>"),
            ("\t", "<p>\t</p>"),
            ("#", "<p>#</p>"),
            ("#x", "<p>#x</p>"),
            ("-- -", "<p>-- -</p>"),
            ("**", "<p>**</p>"),
            ("nospace", "<p>nospace</p>"),
            ("\n", "<p></p><p></p>"),
            ("\x00", "<p>\x00</p>"),
        ],
    )
    def test_degrades_to_paragraph(self, source: str, expected: str) -> None:
        assert to_html(source) == expected

    def test_very_long_line(self) -> None:
        line = "# " + "x" * 100_000
        assert to_html(line) == f"<h1>{'x' * 100_000}</h1>"

    def test_many_lines(self) -> None:
        source = "\n".join(["---"] * 5_000)
        assert to_html(source) == "<hr></hr>" * 5_000
