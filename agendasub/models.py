"""Data models for agendasub."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


@dataclass(frozen=True)
class TimedEntry:
    """A single subtitle cue, or a run of merged cues."""
    index: int
    start_time: str  # Verbatim timestamp from the transcript
    end_time: str
    start_sec: float
    end_sec: float
    text: str

    @property
    def duration(self) -> float:
        return self.end_sec - self.start_sec

    def to_dict(self) -> dict:
        """Returns the camelCase record used by the leads application."""
        return {
            "index": self.index,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "startSec": self.start_sec,
            "endSec": self.end_sec,
            "text": self.text,
        }


# A segment has the same shape as an entry: start from its first entry,
# end from its last, text newline-joined.
Segment = TimedEntry


class SkipReason(Enum):
    """Why a transcript block did not produce an entry."""
    TOO_FEW_LINES = "block has fewer than 2 non-blank lines"
    INVALID_INDEX = "first line is not an integer index"
    INVALID_TIME_LINE = "second line is not a 'start --> end' time line"


@dataclass(frozen=True)
class BlockOutcome:
    """Result of parsing one block: either an entry or a skip reason."""
    entry: Optional[TimedEntry] = None
    skip_reason: Optional[SkipReason] = None
    block: str = ""

    @property
    def ok(self) -> bool:
        return self.entry is not None


@dataclass(frozen=True)
class ParseStats:
    """Aggregate numbers reported alongside the parsed entries."""
    total_entries: int
    grouped_entries: int
    total_duration: float

    def to_dict(self) -> dict:
        return {
            "totalEntries": self.total_entries,
            "groupedEntries": self.grouped_entries,
            "totalDuration": self.total_duration,
        }


@dataclass
class ParseResult:
    """Holds the structured output of one parse-and-group run."""
    stats: ParseStats
    entries: List[TimedEntry] = field(default_factory=list)
    grouped: bool = False
    source_name: Optional[str] = None  # File name, when read from disk

    def to_dict(self) -> dict:
        return {
            "success": True,
            "fileName": self.source_name,
            "grouped": self.grouped,
            "stats": self.stats.to_dict(),
            "entries": [entry.to_dict() for entry in self.entries],
        }
