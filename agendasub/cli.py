"""Command-Line Interface handler for agendasub."""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .config_loader import ConfigLoader, validate_threshold
from .log_setup import setup_logging
from .excerpt import entries_in_range, extract_text_for_range, format_excerpt_range
from .subtitle_formatter import JSONFormatter
from .transcript_processor import GroupingOptions, TranscriptProcessor
from .exceptions import AgendaSubError, ConfigurationError

logger = logging.getLogger(__name__) # Get logger for this module

class CLIHandler:
    """Parses arguments and runs the transcript pipeline for one file."""

    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Creates the argument parser for the CLI."""
        parser = argparse.ArgumentParser(
            prog="agendasub",
            description="agendasub: Parse council meeting SRT transcripts into timed entries and topic-length segments.",
            formatter_class=argparse.ArgumentDefaultsHelpFormatter # Show defaults in help
        )
        parser.add_argument(
            "-i", "--input",
            required=True,
            help="Path to the input .srt transcript."
        )
        # Either result files or a range excerpt
        destination = parser.add_mutually_exclusive_group()
        destination.add_argument(
            "-o", "--output-dir",
            default=None,
            help="Directory to write result files to. The JSON record is printed to stdout when omitted."
        )
        parser.add_argument(
            "-c", "--config",
            default="config.yaml",
            help="Path to the configuration YAML file. Built-in defaults apply if it does not exist."
        )
        group_toggle = parser.add_mutually_exclusive_group()
        group_toggle.add_argument(
            "--group",
            dest="group",
            action="store_true",
            default=None,
            help="Merge consecutive entries into segments (overrides config)."
        )
        group_toggle.add_argument(
            "--no-group",
            dest="group",
            action="store_false",
            help="Return the raw entries (overrides config)."
        )
        parser.add_argument(
            "--max-gap",
            type=float,
            default=None, # Default taken from config
            help="Largest gap in seconds that still merges two entries."
        )
        parser.add_argument(
            "--min-duration",
            type=float,
            default=None, # Default taken from config
            help="Duration in seconds at which a segment stops growing."
        )
        parser.add_argument(
            "--format",
            dest="formats",
            action="append",
            choices=["json", "srt"],
            default=None,
            help="Output format for --output-dir; repeat for several (default from config: json)."
        )
        destination.add_argument(
            "--range",
            nargs=2,
            type=float,
            metavar=("START", "END"),
            default=None,
            help="Print the transcript text overlapping START..END seconds instead of the JSON record."
        )
        parser.add_argument(
            "--log-level",
            default="INFO",
            choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
            help="Set the logging level for console and file output."
        )
        return parser

    def _grouping_options(self, args: argparse.Namespace, config: dict) -> GroupingOptions:
        """Merges CLI overrides over the config file values."""
        options = ConfigLoader.grouping_options(config)
        return GroupingOptions(
            group=options.group if args.group is None else args.group,
            max_gap_seconds=options.max_gap_seconds if args.max_gap is None
            else validate_threshold('--max-gap', args.max_gap),
            min_duration_seconds=options.min_duration_seconds if args.min_duration is None
            else validate_threshold('--min-duration', args.min_duration),
        )

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Parses arguments, sets up logging, loads config, and runs the processor."""
        args = self.parser.parse_args(argv)

        # --- Setup Logging ---
        log_level = getattr(logging, args.log_level.upper(), logging.INFO)
        setup_logging(log_level=log_level, log_dir=None) # Console only until config is read

        # --- Load Configuration ---
        try:
            config_loader = ConfigLoader()
            config = config_loader.load_optional(args.config)
            options = self._grouping_options(args, config)
            formats = args.formats or config_loader.output_formats(config)
        except ConfigurationError as e:
            logger.critical(f"Invalid configuration: {e}")
            sys.exit(1)

        setup_logging(
            log_level=log_level,
            log_dir=config.get('log_dir', 'logs'),
            log_file=config.get('log_file', 'agendasub.log')
        )

        if not os.path.isfile(args.input):
            logger.critical(f"Input transcript not found or is not a file: {args.input}")
            sys.exit(1)

        try:
            processor = TranscriptProcessor(options)
            result = processor.process_file(args.input)

            if args.range:
                start_sec, end_sec = args.range
                matched = entries_in_range(result.entries, start_sec, end_sec)
                print(format_excerpt_range(start_sec, end_sec, len(matched)))
                print(extract_text_for_range(result.entries, start_sec, end_sec))
            elif args.output_dir:
                for path in processor.write_outputs(result, args.output_dir, formats):
                    logger.info(f"Result written to: {path}")
            else:
                sys.stdout.write(JSONFormatter().render(result))

            sys.exit(0)

        except AgendaSubError as e:
            # Catch errors originating from our application logic
            logger.error(f"An agendasub error occurred: {e}")
            sys.exit(1)
        except KeyboardInterrupt:
            logger.warning("Process interrupted by user (Ctrl+C). Exiting.")
            sys.exit(1)
        except Exception as e:
            logger.critical(f"An unexpected critical error occurred at the top level: {e}", exc_info=True)
            sys.exit(2) # Use a different exit code for unexpected crashes


def main() -> None:
    CLIHandler().run()
