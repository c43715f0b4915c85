import pytest

from agendasub.excerpt import entries_in_range, extract_text_for_range, format_excerpt_range
from agendasub.segment_grouper import group_entries
from agendasub.srt_parser import parse_srt
from agendasub.stats import summarize

MEETING = (
    "1\n00:00:01,000 --> 00:00:04,000\nThe session is open.\n\n"
    "2\n00:00:04,500 --> 00:00:09,000\nFirst item: the school budget.\n\n"
    "3\n00:00:20,000 --> 00:00:25,250\nQuestions from the floor.\n"
)


def test_summarize_counts_and_duration() -> None:
    entries = parse_srt(MEETING)
    grouped = group_entries(entries, max_gap_seconds=2.0, min_duration_seconds=30.0)
    stats = summarize(entries, grouped)
    assert stats.total_entries == 3
    assert stats.grouped_entries == 2
    assert stats.total_duration == pytest.approx(24.25)
    assert stats.to_dict() == {
        "totalEntries": 3,
        "groupedEntries": 2,
        "totalDuration": pytest.approx(24.25),
    }


def test_summarize_without_grouping_and_when_empty() -> None:
    entries = parse_srt(MEETING)
    assert summarize(entries, entries).grouped_entries == 3
    empty = summarize([], [])
    assert (empty.total_entries, empty.grouped_entries, empty.total_duration) == (0, 0, 0.0)


def test_extract_text_for_range_includes_touching_entries() -> None:
    entries = parse_srt(MEETING)
    assert extract_text_for_range(entries, 4.0, 20.0) == (
        "The session is open.\nFirst item: the school budget.\nQuestions from the floor."
    )
    assert [e.index for e in entries_in_range(entries, 5.0, 6.0)] == [2]


def test_extract_text_for_range_without_overlap() -> None:
    assert extract_text_for_range(parse_srt(MEETING), 10.0, 19.9) == ""


def test_format_excerpt_range() -> None:
    assert format_excerpt_range(61.9, 3725.2) == "00:01:01 - 01:02:05"
    assert format_excerpt_range(0, 90, snippet_count=3) == "00:00:00 - 00:01:30 (3 snippets)"
