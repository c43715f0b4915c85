"""Handles loading configuration from YAML files."""

import yaml
import os
import math
import logging
from typing import Any, List, Optional

from .exceptions import ConfigurationError
from .segment_grouper import DEFAULT_MAX_GAP_SECONDS, DEFAULT_MIN_DURATION_SECONDS
from .transcript_processor import GroupingOptions

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_FORMATS = ["json"]


def validate_threshold(name: str, value: Any) -> float:
    """
    Converts a grouping threshold to float and checks it is usable.

    Raises:
        ConfigurationError: If the value is not a finite, non-negative number.
    """
    if isinstance(value, bool):
        raise ConfigurationError(f"'{name}' must be a number, got a boolean.")
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"'{name}' must be a number, got {value!r}.") from e
    if math.isnan(number) or math.isinf(number) or number < 0:
        raise ConfigurationError(f"'{name}' must be a finite, non-negative number, got {value!r}.")
    return number


class ConfigLoader:
    """Loads configuration settings from a YAML file."""

    def load_config(self, config_path: str) -> dict:
        """
        Loads configuration from the specified YAML file path.

        Args:
            config_path: The path to the YAML configuration file.

        Returns:
            A dictionary containing the loaded configuration settings.

        Raises:
            FileNotFoundError: If the configuration file does not exist.
            ConfigurationError: If the file cannot be parsed as YAML or
                              if there are other reading errors.
        """
        logger.info(f"Loading configuration from: {config_path}")
        if not os.path.exists(config_path):
            logger.error(f"Configuration file not found at path: {config_path}")
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        if not os.path.isfile(config_path):
            raise ConfigurationError(f"Configuration path is not a file: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Error parsing YAML configuration file {config_path}: {e}")
            raise ConfigurationError(f"Invalid YAML format in {config_path}: {e}") from e
        except OSError as e:
            logger.error(f"Error reading configuration file {config_path}: {e}", exc_info=True)
            raise ConfigurationError(f"Could not read configuration file {config_path}: {e}") from e

        if config is None:
            # An empty file means "use the defaults"
            return {}
        if not isinstance(config, dict):
            raise ConfigurationError(f"Invalid YAML structure in {config_path}. Root must be a mapping (dictionary).")
        logger.info(f"Configuration loaded successfully from {config_path}")
        return config

    def load_optional(self, config_path: Optional[str]) -> dict:
        """Like load_config, but a missing file gives an empty config."""
        if not config_path or not os.path.exists(config_path):
            logger.info(f"No configuration file at {config_path}; using built-in defaults.")
            return {}
        return self.load_config(config_path)

    @staticmethod
    def grouping_options(config: dict) -> GroupingOptions:
        """
        Builds GroupingOptions from the 'group', 'max_gap_seconds' and
        'min_duration_seconds' keys, falling back to the defaults.

        Raises:
            ConfigurationError: If a threshold is invalid.
        """
        group = config.get('group', False)
        if not isinstance(group, bool):
            raise ConfigurationError(f"'group' must be true or false, got {group!r}.")
        return GroupingOptions(
            group=group,
            max_gap_seconds=validate_threshold(
                'max_gap_seconds', config.get('max_gap_seconds', DEFAULT_MAX_GAP_SECONDS)),
            min_duration_seconds=validate_threshold(
                'min_duration_seconds', config.get('min_duration_seconds', DEFAULT_MIN_DURATION_SECONDS)),
        )

    @staticmethod
    def output_formats(config: dict) -> List[str]:
        formats = config.get('output_formats', DEFAULT_OUTPUT_FORMATS)
        if isinstance(formats, str):
            formats = [formats]
        if not isinstance(formats, list) or not all(isinstance(f, str) for f in formats):
            raise ConfigurationError(f"'output_formats' must be a list of format names, got {formats!r}.")
        return [f.lower() for f in formats]
