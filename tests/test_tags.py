"""Tests for presentational marker helpers."""

import pytest

from sicompass_tutorial.tags import MARKERS, extract_content, find_marker, strip_markers


def _marker(name: str):
    return next(m for m in MARKERS if m.name == name)


class TestFindMarker:
    """Tests for find_marker."""

    def test_plain_text(self) -> None:
        """Test that text without markers has none."""
        assert find_marker("Happy navigating!") is None

    @pytest.mark.parametrize(
        ("text", "name"),
        [
            ("<input>name</input>", "input"),
            ("<radio>alphanumerically</radio>", "radio"),
            ("<checked>chronologically", "checked"),
            ("<checkbox>show hidden files", "checkbox"),
            ("<link>file browser</link> jumps", "link"),
            ("<image>logo.png</image>", "image"),
        ],
    )
    def test_detects(self, text: str, name: str) -> None:
        """Test detection of each marker."""
        marker = find_marker(text)
        assert marker is not None
        assert marker.name == name

    def test_checkbox_checked_before_checkbox(self) -> None:
        """Test that the longer checkbox marker is preferred."""
        marker = find_marker("<checkbox checked>done")
        assert marker is not None
        assert marker.name == "checkbox_checked"

    def test_unclosed_radio(self) -> None:
        """Test that a radio marker only needs its opening tag."""
        marker = find_marker("<radio>alphabetically")
        assert marker is not None
        assert marker.name == "radio"

    def test_required_close_missing(self) -> None:
        """Test that an input marker without its closing tag is ignored."""
        assert find_marker("<input>unterminated") is None


class TestExtractContent:
    """Tests for extract_content."""

    def test_enclosed(self) -> None:
        """Test content between open and close tags."""
        assert extract_content("go <link>file browser</link> now", _marker("link")) == (
            "file browser"
        )

    def test_optional_close(self) -> None:
        """Test content after an unclosed checkbox tag."""
        assert extract_content("<checkbox checked>done", _marker("checkbox_checked")) == "done"

    def test_unclosed_radio(self) -> None:
        """Test content after an unclosed radio tag."""
        assert extract_content("<radio>alphabetically", _marker("radio")) == "alphabetically"

    def test_absent(self) -> None:
        """Test that a missing marker yields None."""
        assert extract_content("plain", _marker("image")) is None


class TestStripMarkers:
    """Tests for strip_markers."""

    def test_plain_unchanged(self) -> None:
        """Test that text without markers is returned as-is."""
        assert strip_markers("Press : to enter command mode.") == "Press : to enter command mode."

    def test_strips_closed_marker(self) -> None:
        """Test removing both tags while keeping the content."""
        assert strip_markers("<link>file browser</link>: open the file browser.") == (
            "file browser: open the file browser."
        )

    def test_strips_open_only(self) -> None:
        """Test removing an unclosed marker."""
        assert strip_markers("<checkbox>show hidden files") == "show hidden files"

    def test_strips_unclosed_radio(self) -> None:
        """Test that a radio marker without its closing tag is removed."""
        assert strip_markers("<radio>alphabetically") == "alphabetically"

    def test_strips_unclosed_input(self) -> None:
        """Test that an input open tag is removed even without a closing tag."""
        assert strip_markers("<input>unterminated") == "unterminated"

    def test_closed_radio(self) -> None:
        """Test removing both radio tags."""
        assert strip_markers("<radio>chronologically</radio> order") == "chronologically order"

    def test_keeps_surrounding_text(self) -> None:
        """Test that text around the marker is kept."""
        assert strip_markers("name: <input>value</input>!") == "name: value!"
