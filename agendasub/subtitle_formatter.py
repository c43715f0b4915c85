"""Writes parse results to disk as JSON records or SRT files."""

import json
import logging
from abc import ABC, abstractmethod

from .models import ParseResult
from .exceptions import ConfigurationError, FormattingError
from .timecode import format_time_srt

logger = logging.getLogger(__name__)

class ResultFormatter(ABC):
    """Abstract base class for result writers."""

    extension = ""

    @abstractmethod
    def render(self, result: ParseResult) -> str:
        """Returns the text that write() puts on disk."""

    def write(self, result: ParseResult, output_path: str) -> None:
        """
        Renders the result and writes it to output_path as UTF-8.

        Args:
            result: The parse result (entries or grouped segments).
            output_path: The path to save the file to.

        Raises:
            FormattingError: If rendering or writing fails.
        """
        try:
            content = self.render(result)
        except (TypeError, ValueError) as e:
            logger.error(f"Could not render result for {output_path}: {e}", exc_info=True)
            raise FormattingError(f"Could not render result: {e}") from e
        try:
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(content)
        except OSError as e:
            logger.error(f"Failed to write {output_path}: {e}", exc_info=True)
            raise FormattingError(f"Could not write {output_path}: {e}") from e
        logger.info(f"Wrote {len(result.entries)} entries to {output_path}")


class JSONFormatter(ResultFormatter):
    """The record returned to the leads application: stats plus entries."""

    extension = "json"

    def render(self, result: ParseResult) -> str:
        return json.dumps(result.to_dict(), ensure_ascii=False, indent=2) + "\n"


class SRTFormatter(ResultFormatter):
    """Writes entries back out as SubRip text, renumbered from 1."""

    extension = "srt"

    def render(self, result: ParseResult) -> str:
        blocks = []
        for subtitle_index, entry in enumerate(result.entries, start=1):
            start_time_str = format_time_srt(entry.start_sec)
            end_time_str = format_time_srt(entry.end_sec)
            blocks.append(f"{subtitle_index}\n{start_time_str} --> {end_time_str}\n{entry.text}\n")
        return "\n".join(blocks)


_FORMATTERS = {
    JSONFormatter.extension: JSONFormatter,
    SRTFormatter.extension: SRTFormatter,
}


def get_formatter(name: str) -> ResultFormatter:
    """
    Resolves an output format name ('json' or 'srt').

    Raises:
        ConfigurationError: For unknown format names.
    """
    formatter_cls = _FORMATTERS.get(name.lower())
    if formatter_cls is None:
        raise ConfigurationError(f"Unsupported output format '{name}'. Choose from: {', '.join(sorted(_FORMATTERS))}.")
    return formatter_cls()
