"""
Unit tests for the extract module.

This module tests the delimited extraction helper, covering hits, misses
of either marker, search offsets and the lack of nesting awareness.
"""

from rss_feed_generator.core.extract import NOT_FOUND, Extraction, extract


def test_extract_returns_trimmed_text_and_offsets() -> None:
    """Test that the text between the markers is stripped and offsets are absolute."""
    result = extract("x [ hello ] y", "[", "]")

    assert result == Extraction("hello", 3, 10)
    assert result.found


def test_extract_end_offset_is_index_of_end_marker() -> None:
    """Test that the end offset points at the first character of the end marker."""
    source = "<h2>Title</h2>"
    text, start, end = extract(source, "<h2>", "</h2>")

    assert text == "Title"
    assert start == 4
    assert end == source.index("</h2>")


def test_extract_missing_start_marker() -> None:
    """Test that a missing start marker yields the not-found result."""
    result = extract("no markers here", "[", "]")

    assert result == NOT_FOUND
    assert result.end == -1
    assert not result.found


def test_extract_missing_end_marker_keeps_start_offset() -> None:
    """Test that a missing end marker is a miss even though the start matched."""
    result = extract("a[b", "[", "]")

    assert result == Extraction("", 2, -1)
    assert not result.found


def test_extract_searches_from_offset() -> None:
    """Test that occurrences before the offset are ignored."""
    assert extract("[a] [b]", "[", "]", 1) == Extraction("b", 5, 6)


def test_extract_start_only_before_offset() -> None:
    """Test that a start marker located only before the offset is not found."""
    assert not extract("[a]", "[", "]", 1).found


def test_extract_empty_region() -> None:
    """Test that adjacent markers produce a found, empty result."""
    result = extract("<p></p>", "<p>", "</p>")

    assert result.found
    assert result.text == ""


def test_extract_is_not_nesting_aware() -> None:
    """Test that the first end marker wins, even inside a nested element."""
    result = extract("<a><b></b></a>", "<a>", "</")

    assert result.text == "<b>"
    assert result.end == 6
