"""Conversions between SRT timestamps and second offsets."""

import math
import re

# HH:MM:SS,mmm or HH:MM:SS.mmm, fixed width, ASCII digits only
TIMECODE_PATTERN = r"[0-9]{2}:[0-9]{2}:[0-9]{2}[,.][0-9]{3}"
_TIMECODE_RE = re.compile(r"([0-9]{2}):([0-9]{2}):([0-9]{2})[,.]([0-9]{3})")


def parse_time_to_seconds(value: str) -> float:
    """
    Converts an SRT timestamp into seconds.

    Malformed input is not an error: anything that does not contain a
    ``HH:MM:SS,mmm`` (or ``.mmm``) timestamp yields ``0.0``.

    Args:
        value: Timestamp text, e.g. "00:01:02,500".

    Returns:
        The offset in seconds as a float.
    """
    match = _TIMECODE_RE.search(value or "")
    if not match:
        return 0.0
    hours, minutes, seconds, millis = (int(group) for group in match.groups())
    return hours * 3600 + minutes * 60 + seconds + millis / 1000


def format_time_srt(seconds: float) -> str:
    """
    Formats seconds into SRT time format HH:MM:SS,ms.

    Args:
        seconds: Time in seconds.

    Returns:
        Formatted time string.
    """
    if seconds < 0:
        seconds = 0.0 # Ensure non-negative time
    milliseconds = round(seconds * 1000)
    hrs = milliseconds // 3600000
    milliseconds %= 3600000
    mins = milliseconds // 60000
    milliseconds %= 60000
    secs = milliseconds // 1000
    milliseconds %= 1000
    return f"{hrs:02d}:{mins:02d}:{secs:02d},{milliseconds:03d}"


def format_clock(seconds: float) -> str:
    """Formats seconds as HH:MM:SS, dropping the fractional part."""
    if seconds < 0:
        seconds = 0.0
    hrs = math.floor(seconds / 3600)
    mins = math.floor((seconds % 3600) / 60)
    secs = math.floor(seconds % 60)
    return f"{hrs:02d}:{mins:02d}:{secs:02d}"
