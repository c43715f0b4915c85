"""Orchestrates the transcript parse, group and summarize pipeline."""

import logging
import os
import time
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .exceptions import AgendaSubError, FileSystemError, NoEntriesError
from .models import ParseResult
from .segment_grouper import DEFAULT_MAX_GAP_SECONDS, DEFAULT_MIN_DURATION_SECONDS, group_entries
from .srt_parser import parse_srt, read_srt_file
from .stats import summarize
from .subtitle_formatter import get_formatter
from .utils import ensure_dir_exists, output_base_name

logger = logging.getLogger(__name__)

NO_ENTRIES_MESSAGE = "No valid SRT entries found"


@dataclass(frozen=True)
class GroupingOptions:
    """Caller-supplied switches for one parse run."""
    group: bool = False
    max_gap_seconds: float = DEFAULT_MAX_GAP_SECONDS
    min_duration_seconds: float = DEFAULT_MIN_DURATION_SECONDS


class TranscriptProcessor:
    """
    Turns transcript text into a ParseResult.

    Each call works on its own input only, so one processor can be shared
    between threads.
    """

    def __init__(self, options: Optional[GroupingOptions] = None):
        """
        Initializes the TranscriptProcessor.

        Args:
            options: Grouping switches; defaults to no grouping.
        """
        self.options = options or GroupingOptions()

    def process(self, content: str, source_name: Optional[str] = None) -> ParseResult:
        """
        Parses the transcript, optionally groups it, and computes stats.

        Args:
            content: The full transcript text.
            source_name: File name to report in the result record.

        Returns:
            The ParseResult.

        Raises:
            NoEntriesError: If no block of the transcript is well formed.
        """
        entries = parse_srt(content)
        if not entries:
            logger.warning(f"{NO_ENTRIES_MESSAGE} in {source_name or 'transcript'}.")
            raise NoEntriesError(NO_ENTRIES_MESSAGE)

        if self.options.group:
            result_entries = group_entries(
                entries,
                max_gap_seconds=self.options.max_gap_seconds,
                min_duration_seconds=self.options.min_duration_seconds,
            )
        else:
            result_entries = entries

        return ParseResult(
            stats=summarize(entries, result_entries),
            entries=result_entries,
            grouped=self.options.group,
            source_name=source_name,
        )

    def process_file(self, file_path: str) -> ParseResult:
        """
        Reads and processes a single .srt file.

        Args:
            file_path: Path to the transcript.

        Returns:
            The ParseResult, with source_name set to the file's base name.

        Raises:
            AgendaSubError: For any reading or processing errors.
            FileNotFoundError: If the transcript is not found.
        """
        start_time = time.time()
        logger.info(f"--- Processing transcript: {file_path} ---")
        try:
            content = read_srt_file(file_path)
            result = self.process(content, source_name=os.path.basename(file_path))
        except (AgendaSubError, FileNotFoundError) as e:
            logger.error(f"Processing failed for {file_path}: {e}", exc_info=False)
            raise
        except Exception as e:
            logger.critical(f"An unexpected error occurred while processing {file_path}: {e}", exc_info=True)
            raise AgendaSubError(f"An unexpected error occurred: {e}") from e

        logger.info(
            f"Finished {file_path} in {time.time() - start_time:.2f}s: "
            f"{result.stats.total_entries} entries, {result.stats.grouped_entries} returned, "
            f"{result.stats.total_duration:.3f}s of transcript."
        )
        return result

    def write_outputs(
        self,
        result: ParseResult,
        output_dir: str,
        formats: Iterable[str] = ("json",)
    ) -> List[str]:
        """
        Writes the result in each requested format.

        Files are named after the source transcript: ``<name>.segments.json``
        and ``<name>.segments.srt`` for grouped results, ``<name>.entries.*``
        otherwise.

        Returns:
            The paths written.

        Raises:
            ConfigurationError: For unknown format names.
            FormattingError: If a file cannot be written.
            FileSystemError: If output_dir is unusable.
        """
        formatters = [get_formatter(name) for name in formats]
        try:
            ensure_dir_exists(output_dir)
        except ValueError as e:
            raise FileSystemError(str(e)) from e

        base_name = output_base_name(result.source_name or "transcript")
        kind = "segments" if result.grouped else "entries"
        written = []
        for formatter in formatters:
            path = os.path.join(output_dir, f"{base_name}.{kind}.{formatter.extension}")
            formatter.write(result, path)
            written.append(path)
        return written
