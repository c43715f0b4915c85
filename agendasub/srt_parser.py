"""Parses SRT transcripts into ordered timed entries."""

import logging
import os
import re
from typing import List

from .exceptions import FileSystemError
from .models import BlockOutcome, SkipReason, TimedEntry
from .timecode import TIMECODE_PATTERN, parse_time_to_seconds

logger = logging.getLogger(__name__)

# One or more whitespace-only lines separate blocks
_BLOCK_SEPARATOR_RE = re.compile(r"\n(?:[^\S\n]*\n)+")
_INDEX_RE = re.compile(r"^[+-]?[0-9]+")
_TIME_LINE_RE = re.compile(
    rf"({TIMECODE_PATTERN})\s*-->\s*({TIMECODE_PATTERN})"
)


def normalize_newlines(content: str) -> str:
    """Unifies line endings to '\\n' and drops a leading byte order mark."""
    if content.startswith("\ufeff"):
        content = content[1:]
    return content.replace("\r\n", "\n").replace("\r", "\n")


def split_blocks(content: str) -> List[str]:
    """Splits transcript text into non-empty blank-line separated blocks."""
    blocks = _BLOCK_SEPARATOR_RE.split(normalize_newlines(content))
    return [block for block in blocks if block.strip()]


def _parse_index(line: str):
    match = _INDEX_RE.match(line.strip())
    return int(match.group(0)) if match else None


def parse_block(block: str) -> BlockOutcome:
    """
    Parses a single index/time/text block.

    Args:
        block: Block text with newlines already normalized.

    Returns:
        A BlockOutcome carrying either the TimedEntry or the reason the
        block was skipped.
    """
    lines = [line for line in block.split("\n") if line.strip()]
    if len(lines) < 2:
        return BlockOutcome(skip_reason=SkipReason.TOO_FEW_LINES, block=block)

    index = _parse_index(lines[0])
    if index is None:
        return BlockOutcome(skip_reason=SkipReason.INVALID_INDEX, block=block)

    time_match = _TIME_LINE_RE.search(lines[1].strip())
    if not time_match:
        return BlockOutcome(skip_reason=SkipReason.INVALID_TIME_LINE, block=block)

    start_time, end_time = time_match.group(1), time_match.group(2)
    entry = TimedEntry(
        index=index,
        start_time=start_time,
        end_time=end_time,
        start_sec=parse_time_to_seconds(start_time),
        end_sec=parse_time_to_seconds(end_time),
        text="\n".join(lines[2:]),
    )
    return BlockOutcome(entry=entry, block=block)


def parse_blocks(content: str) -> List[BlockOutcome]:
    """Parses every block of a transcript, keeping skipped blocks too."""
    return [parse_block(block) for block in split_blocks(content)]


def parse_srt(content: str) -> List[TimedEntry]:
    """
    Parses SRT text into timed entries, in the order they appear.

    Malformed blocks are skipped (and logged at DEBUG level); an input with
    no well-formed block gives an empty list. Deciding whether that is an
    error is left to the caller.

    Args:
        content: The full transcript text.

    Returns:
        A list of TimedEntry objects.
    """
    entries: List[TimedEntry] = []
    skipped = 0
    for outcome in parse_blocks(content):
        if outcome.ok:
            entries.append(outcome.entry)
            continue
        skipped += 1
        first_line = outcome.block.strip().split("\n", 1)[0]
        logger.debug(f"Skipping block starting with '{first_line[:40]}': {outcome.skip_reason.value}")

    logger.info(f"Parsed {len(entries)} subtitle entries ({skipped} malformed blocks skipped).")
    return entries


def read_srt_file(file_path: str) -> str:
    """
    Reads a transcript file as UTF-8 text (a leading BOM is dropped).

    Args:
        file_path: Path to the .srt file.

    Returns:
        The file content.

    Raises:
        FileNotFoundError: If the file does not exist.
        FileSystemError: If the file cannot be read or decoded.
    """
    if not os.path.isfile(file_path):
        raise FileNotFoundError(f"Transcript file not found: {file_path}")
    try:
        with open(file_path, "r", encoding="utf-8-sig") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read transcript {file_path}: {e}")
        raise FileSystemError(f"Could not read transcript {file_path}: {e}") from e
