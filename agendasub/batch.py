"""Batch processing: parse every transcript in a directory."""

import argparse
import logging
import os
import sys
import time
from typing import List, Optional, Tuple

# Progress bar library
from tqdm import tqdm

from .config_loader import ConfigLoader
from .log_setup import setup_logging
from .subtitle_formatter import get_formatter
from .transcript_processor import TranscriptProcessor
from .exceptions import AgendaSubError, ConfigurationError, FileSystemError
from .utils import ensure_dir_exists

logger = logging.getLogger(__name__)

OUTPUT_SUBDIR = "Segments"


def find_transcripts(input_dir: str) -> List[str]:
    """
    Finds all .srt files in the input directory, sorted by file name.

    Args:
        input_dir: The directory to search for transcripts.

    Returns:
        Sorted list of transcript paths.

    Raises:
        FileNotFoundError: If the input directory doesn't exist.
        ValueError: If the input path is not a directory.
    """
    if not os.path.exists(input_dir):
        raise FileNotFoundError(f"Input directory not found: {input_dir}")
    if not os.path.isdir(input_dir):
        raise ValueError(f"Input path is not a directory: {input_dir}")

    transcripts = []
    logger.info(f"Scanning directory for SRT files: {input_dir}")
    for filename in sorted(os.listdir(input_dir)):
        # Case-insensitive check for .srt extension
        if filename.lower().endswith(".srt"):
            filepath = os.path.join(input_dir, filename)
            if os.path.isfile(filepath):
                transcripts.append(filepath)

    logger.info(f"Found {len(transcripts)} SRT files.")
    return transcripts


def process_directory(
    input_dir: str,
    processor: TranscriptProcessor,
    formats: List[str],
    output_dir: Optional[str] = None,
    show_progress: bool = True
) -> Tuple[int, int]:
    """
    Processes each transcript in turn; one failure does not stop the batch.

    Returns:
        (files_processed, files_failed)

    Raises:
        FileNotFoundError, ValueError: If input_dir is unusable.
        FileSystemError: If the output directory cannot be created.
    """
    transcripts = find_transcripts(input_dir)
    output_dir = output_dir or os.path.join(input_dir, OUTPUT_SUBDIR)
    ensure_dir_exists(output_dir)

    files_processed = 0
    files_failed = 0

    with tqdm(total=len(transcripts), unit="file", desc="Starting Batch", disable=not show_progress) as pbar:
        for transcript_path in transcripts:
            filename = os.path.basename(transcript_path)
            pbar.set_description(f"Processing: {filename[:30]}")
            try:
                result = processor.process_file(transcript_path)
                processor.write_outputs(result, output_dir, formats)
                files_processed += 1
            except (AgendaSubError, FileNotFoundError) as e:
                logger.error(f"Failed to process '{filename}': {e}")
                files_failed += 1
            finally:
                pbar.update(1)

    return files_processed, files_failed


def run_batch_processing(argv: Optional[List[str]] = None) -> None:
    """Parses arguments, sets up, and runs the batch transcript parsing."""
    parser = argparse.ArgumentParser(
        prog="agendasub-batch",
        description="agendasub Batch: Parse every .srt transcript in a directory.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "-i", "--input-dir",
        required=True,
        help="Directory containing the .srt transcripts."
    )
    parser.add_argument(
        "-o", "--output-dir",
        default=None,
        help=f"Directory for result files (default: <input-dir>/{OUTPUT_SUBDIR})."
    )
    parser.add_argument(
        "-c", "--config",
        default="config.yaml",
        help="Path to the configuration YAML file."
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level for console and file output."
    )
    args = parser.parse_args(argv)

    log_level = getattr(logging, args.log_level.upper(), logging.INFO)
    setup_logging(log_level=log_level, log_dir=None)

    try:
        config_loader = ConfigLoader()
        config = config_loader.load_optional(args.config)
        options = config_loader.grouping_options(config)
        formats = config_loader.output_formats(config)
        for name in formats:
            get_formatter(name)
    except ConfigurationError as e:
        logger.critical(f"Failed to load configuration: {e}")
        sys.exit(1)

    setup_logging(
        log_level=log_level,
        log_dir=config.get('log_dir', 'logs'),
        log_file=config.get('log_file', 'agendasub_batch.log') # Separate log file for batch runs
    )

    batch_start_time = time.time()
    try:
        processed, failed = process_directory(
            args.input_dir,
            TranscriptProcessor(options),
            formats,
            output_dir=args.output_dir,
        )
    except (FileNotFoundError, ValueError, FileSystemError) as e:
        logger.critical(f"Input or output directory error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.warning("Batch process interrupted by user (Ctrl+C). Exiting.")
        sys.exit(1)

    total = processed + failed
    logger.info(f"--- Batch Finished in {time.time() - batch_start_time:.2f} seconds ---")
    logger.info(f"Successfully processed: {processed}/{total} transcripts")
    logger.info(f"Failed: {failed}/{total} transcripts")

    sys.exit(1 if failed > 0 else 0)
