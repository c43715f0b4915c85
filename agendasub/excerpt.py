"""Pulls transcript text for a topic's playback range."""

from typing import List, Optional, Sequence

from .models import TimedEntry
from .timecode import format_clock


def entries_in_range(
    entries: Sequence[TimedEntry],
    start_sec: float,
    end_sec: float
) -> List[TimedEntry]:
    """Returns the entries overlapping [start_sec, end_sec], endpoints included."""
    return [e for e in entries if e.end_sec >= start_sec and e.start_sec <= end_sec]


def extract_text_for_range(
    entries: Sequence[TimedEntry],
    start_sec: float,
    end_sec: float
) -> str:
    """
    Joins the text of every entry that overlaps the given range.

    Args:
        entries: Parsed entries (or segments) in transcript order.
        start_sec: Range start in seconds.
        end_sec: Range end in seconds.

    Returns:
        The newline-joined text, or an empty string if nothing overlaps.
    """
    return "\n".join(e.text for e in entries_in_range(entries, start_sec, end_sec))


def format_excerpt_range(
    start_sec: float,
    end_sec: float,
    snippet_count: Optional[int] = None
) -> str:
    """Builds the 'HH:MM:SS - HH:MM:SS' label stored with a topic excerpt."""
    label = f"{format_clock(start_sec)} - {format_clock(end_sec)}"
    if snippet_count is not None:
        label += f" ({snippet_count} snippets)"
    return label
