from dataclasses import replace

from agendasub.models import TimedEntry
from agendasub.segment_grouper import group_entries
from agendasub.srt_parser import parse_srt
from agendasub.timecode import format_time_srt

HELLO_WORLD = (
    "1\n00:00:00,000 --> 00:00:02,000\nHello\n\n"
    "2\n00:00:02,500 --> 00:00:05,000\nWorld\n"
)


def _entry(index: int, start: float, end: float, text: str = "") -> TimedEntry:
    return TimedEntry(
        index=index,
        start_time=format_time_srt(start),
        end_time=format_time_srt(end),
        start_sec=start,
        end_sec=end,
        text=text or f"line {index}",
    )


def test_empty_input_gives_no_segments() -> None:
    assert group_entries([]) == []


def test_small_gap_and_short_segment_merge_into_one() -> None:
    segments = group_entries(parse_srt(HELLO_WORLD), max_gap_seconds=1.0, min_duration_seconds=100.0)
    assert len(segments) == 1
    (segment,) = segments
    assert segment.start_sec == 0
    assert segment.end_sec == 5.0
    assert segment.start_time == "00:00:00,000"
    assert segment.end_time == "00:00:05,000"
    assert segment.text == "Hello\nWorld"
    assert segment.index == 1


def test_gap_above_threshold_keeps_entries_apart() -> None:
    entries = parse_srt(HELLO_WORLD)
    segments = group_entries(entries, max_gap_seconds=0.1)
    assert segments == entries


def test_zero_gap_merges_at_zero_threshold() -> None:
    entries = [_entry(1, 0.0, 2.0), _entry(2, 2.0, 4.0)]
    segments = group_entries(entries, max_gap_seconds=0.0, min_duration_seconds=30.0)
    assert len(segments) == 1
    assert segments[0].end_sec == 4.0


def test_gap_just_above_threshold_does_not_merge() -> None:
    entries = [_entry(1, 0.0, 2.0), _entry(2, 2.0001, 4.0)]
    segments = group_entries(entries, max_gap_seconds=0.0, min_duration_seconds=30.0)
    assert len(segments) == 2


def test_negative_gap_counts_as_small() -> None:
    entries = [_entry(1, 0.0, 3.0), _entry(2, 2.0, 4.0)]
    segments = group_entries(entries, max_gap_seconds=0.5)
    assert len(segments) == 1
    assert segments[0].end_sec == 4.0


def test_unreachable_minimum_gives_single_segment() -> None:
    entries = [_entry(i, i * 3.0, i * 3.0 + 2.5) for i in range(1, 50)]
    segments = group_entries(entries, max_gap_seconds=1.0, min_duration_seconds=10_000.0)
    assert len(segments) == 1
    assert segments[0].start_sec == entries[0].start_sec
    assert segments[0].end_sec == entries[-1].end_sec
    assert segments[0].text == "\n".join(e.text for e in entries)


def test_segment_stops_growing_once_minimum_is_reached() -> None:
    # 0-10, 10-20, 20-31 reaches 31s; the next close entry starts a new segment
    entries = [
        _entry(1, 0.0, 10.0),
        _entry(2, 10.0, 20.0),
        _entry(3, 20.0, 31.0),
        _entry(4, 31.0, 35.0),
        _entry(5, 35.5, 40.0),
    ]
    segments = group_entries(entries, max_gap_seconds=2.0, min_duration_seconds=30.0)
    assert [(s.start_sec, s.end_sec) for s in segments] == [(0.0, 31.0), (31.0, 40.0)]
    assert segments[1].index == 4


def test_long_first_entry_is_never_extended() -> None:
    entries = [_entry(1, 0.0, 45.0), _entry(2, 45.0, 46.0)]
    segments = group_entries(entries)
    assert segments == entries


def test_zero_length_entries_still_merge() -> None:
    entries = [_entry(1, 5.0, 5.0), _entry(2, 5.0, 5.0), _entry(3, 6.0, 7.0)]
    segments = group_entries(entries)
    assert len(segments) == 1
    assert (segments[0].start_sec, segments[0].end_sec) == (5.0, 7.0)


def test_grouping_is_idempotent_for_long_segments() -> None:
    entries = [_entry(i, i * 10.0, i * 10.0 + 9.5) for i in range(12)]
    once = group_entries(entries, max_gap_seconds=2.0, min_duration_seconds=30.0)
    assert all(s.duration >= 30.0 for s in once[:-1])
    long_only = [s for s in once if s.duration >= 30.0]
    assert group_entries(long_only, max_gap_seconds=2.0, min_duration_seconds=30.0) == long_only


def test_input_entries_are_not_modified() -> None:
    entries = parse_srt(HELLO_WORLD)
    snapshot = [replace(e) for e in entries]
    group_entries(entries, max_gap_seconds=1.0, min_duration_seconds=100.0)
    assert entries == snapshot


def test_segment_order_follows_entry_order() -> None:
    entries = [_entry(1, 0.0, 1.0), _entry(2, 10.0, 11.0), _entry(3, 20.0, 21.0)]
    segments = group_entries(entries, max_gap_seconds=1.0)
    assert [s.index for s in segments] == [1, 2, 3]
    starts = [s.start_sec for s in segments]
    assert starts == sorted(starts)
