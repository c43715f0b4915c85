"""Merges consecutive subtitle entries into topic-length segments."""

import logging
from dataclasses import dataclass, field, replace
from functools import reduce
from typing import List, Optional, Sequence

from .models import Segment, TimedEntry

logger = logging.getLogger(__name__)

DEFAULT_MAX_GAP_SECONDS = 2.0
DEFAULT_MIN_DURATION_SECONDS = 30.0


@dataclass
class _GroupingState:
    closed: List[Segment] = field(default_factory=list)
    open_segment: Optional[Segment] = None


def should_merge(
    open_segment: Segment,
    entry: TimedEntry,
    max_gap_seconds: float,
    min_duration_seconds: float
) -> bool:
    """
    Decides whether ``entry`` extends the open segment.

    The segment keeps growing only while the gap to the next entry is at
    most ``max_gap_seconds`` and the segment is still shorter than
    ``min_duration_seconds``. A segment that has just reached the minimum
    stops absorbing entries even when the next gap is tiny. Negative gaps
    (overlapping cues) count as small gaps.
    """
    gap = entry.start_sec - open_segment.end_sec
    current_duration = open_segment.end_sec - open_segment.start_sec
    return gap <= max_gap_seconds and current_duration < min_duration_seconds


def merge(open_segment: Segment, entry: TimedEntry) -> Segment:
    return replace(
        open_segment,
        end_time=entry.end_time,
        end_sec=entry.end_sec,
        text=f"{open_segment.text}\n{entry.text}",
    )


def group_entries(
    entries: Sequence[TimedEntry],
    max_gap_seconds: float = DEFAULT_MAX_GAP_SECONDS,
    min_duration_seconds: float = DEFAULT_MIN_DURATION_SECONDS
) -> List[Segment]:
    """
    Greedily merges consecutive entries in a single left-to-right pass.

    Args:
        entries: Entries in transcript order.
        max_gap_seconds: Largest gap (seconds) that still allows a merge.
        min_duration_seconds: Duration at which a segment stops growing.

    Returns:
        Segments in the same order as the entries. Input entries are not
        modified.
    """
    def step(state: _GroupingState, entry: TimedEntry) -> _GroupingState:
        if state.open_segment is None:
            return _GroupingState(state.closed, entry)
        if should_merge(state.open_segment, entry, max_gap_seconds, min_duration_seconds):
            return _GroupingState(state.closed, merge(state.open_segment, entry))
        state.closed.append(state.open_segment)
        return _GroupingState(state.closed, entry)

    final = reduce(step, entries, _GroupingState())
    segments = final.closed
    if final.open_segment is not None:
        segments.append(final.open_segment)

    logger.info(
        f"Grouped {len(entries)} entries into {len(segments)} segments "
        f"(max_gap={max_gap_seconds}s, min_duration={min_duration_seconds}s)."
    )
    return segments
