"""Utility functions for agendasub."""

import os
import logging
from .exceptions import FileSystemError

logger = logging.getLogger(__name__)

def ensure_dir_exists(dir_path: str) -> str:
    """
    Creates ``dir_path`` (and parents) unless it already exists.

    Args:
        dir_path: The directory that output or log files will be written to.

    Returns:
        The same path, for chaining into os.path.join.

    Raises:
        ValueError: If dir_path is empty.
        FileSystemError: If the path is a file or cannot be created.
    """
    if not dir_path:
        raise ValueError("Directory path cannot be empty.")
    if os.path.isdir(dir_path):
        return dir_path
    if os.path.exists(dir_path):
        raise FileSystemError(f"Output path exists but is not a directory: {dir_path}")
    try:
        os.makedirs(dir_path, exist_ok=True)
    except OSError as e:
        logger.error(f"Could not create directory {dir_path}: {e}", exc_info=True)
        raise FileSystemError(f"Could not create directory {dir_path}: {e}") from e
    logger.info(f"Created directory: {dir_path}")
    return dir_path

def output_base_name(source_path: str) -> str:
    """Returns the file name of a transcript path without its extension."""
    return os.path.splitext(os.path.basename(source_path))[0]
