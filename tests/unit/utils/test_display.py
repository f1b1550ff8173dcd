"""Tests for display helpers."""

from podnotes.utils.display import (
    format_duration,
    format_rating,
    truncate_text,
    truncate_url,
)


class TestTruncate:
    """Tests for truncate_text and truncate_url."""

    def test_short_text_unchanged(self):
        """Test text under the limit is untouched."""
        assert truncate_text("short", 10) == "short"

    def test_long_text_truncated(self):
        """Test long text is cut with an ellipsis."""
        result = truncate_text("a" * 100, 20)
        assert len(result) <= 20
        assert result.endswith("...")

    def test_url_scheme_dropped(self):
        """Test the scheme is removed first."""
        assert truncate_url("https://example.com/ep1", 50) == "example.com/ep1"

    def test_long_url_keeps_head_and_tail(self):
        """Test long URLs are cut in the middle."""
        url = "https://www.youtube.com/watch?v=" + "x" * 60 + "END"
        result = truncate_url(url, 30)

        assert len(result) == 30
        assert result.startswith("www.youtube")
        assert result.endswith("END")
        assert "..." in result


class TestFormatters:
    """Tests for duration and rating formatting."""

    def test_format_duration(self):
        """Test minutes and hours formatting."""
        assert format_duration(None) == "-"
        assert format_duration(45) == "45m"
        assert format_duration(75) == "1h 15m"
        assert format_duration(0) == "0m"

    def test_format_rating(self):
        """Test star rendering."""
        assert format_rating(None) == "-"
        assert format_rating(3) == "★★★☆☆"
