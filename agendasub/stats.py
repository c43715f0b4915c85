"""Aggregate statistics over parsed and grouped entries."""

from typing import Sequence

from .models import ParseStats, TimedEntry


def summarize(entries: Sequence[TimedEntry], result: Sequence[TimedEntry]) -> ParseStats:
    """
    Computes the stats reported with a parse result.

    Args:
        entries: The entries as parsed from the transcript.
        result: What is returned to the caller (grouped segments, or the
            entries themselves when grouping was skipped).

    Returns:
        ParseStats; total_duration spans the first entry's start to the last
        entry's end and is 0.0 for an empty transcript.
    """
    total_duration = entries[-1].end_sec - entries[0].start_sec if entries else 0.0
    return ParseStats(
        total_entries=len(entries),
        grouped_entries=len(result),
        total_duration=total_duration,
    )
