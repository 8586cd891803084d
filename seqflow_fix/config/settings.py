"""
Configuration management for the sequenceFlow fixer.
"""

import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..constants import BPMN_SUFFIXES
from ..persister import DEFAULT_FIXED_PREFIX

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class ProcessingConfig:
    """Processing configuration."""
    suffixes: List[str] = field(default_factory=lambda: list(BPMN_SUFFIXES))
    max_concurrent_jobs: int = 1
    skip_fixed_outputs: bool = True  # Ignore fixed_* files when scanning directories


@dataclass
class OutputConfig:
    """Output configuration."""
    fixed_prefix: str = DEFAULT_FIXED_PREFIX
    pretty_print: bool = True


@dataclass
class AppConfig:
    """Main application configuration."""
    processing: ProcessingConfig = field(default_factory=ProcessingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log_level: str = "INFO"
    log_file: Optional[str] = None


class ConfigError(ValueError):
    """The configuration file cannot be used."""


def _section(value, name: str) -> dict:
    """Return a mapping section of the config, {} when it is empty."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{name}: expected a mapping, got {type(value).__name__}")
    return value


def _positive_int(value, name: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{name}: expected an integer, got {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{name}: expected an integer, got {value!r}") from None
    if number < 1:
        raise ConfigError(f"{name}: must be at least 1, got {number}")
    return number


def _suffixes(value) -> List[str]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list) or not all(isinstance(s, str) for s in value):
        raise ConfigError(f"processing.suffixes: expected a list of strings, got {value!r}")
    return [s.lower() for s in value]


def _log_level(value) -> str:
    if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
        raise ConfigError(f"log_level: expected one of {', '.join(LOG_LEVELS)}, got {value!r}")
    return value.upper()


def load_config(config_path: Path) -> AppConfig:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config.yaml file

    Returns:
        AppConfig instance (defaults if the file does not exist)
    """
    if not config_path.exists():
        # Return default configuration
        return AppConfig()

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"{config_path}: invalid YAML: {e}") from e
    except OSError as e:
        raise ConfigError(f"{config_path}: cannot be read: {e}") from e

    data = _section(data, str(config_path))

    # Parse processing config
    proc_data = _section(data.get('processing'), 'processing')
    processing_config = ProcessingConfig(
        suffixes=_suffixes(proc_data.get('suffixes', BPMN_SUFFIXES)),
        max_concurrent_jobs=_positive_int(proc_data.get('max_concurrent_jobs', 1), 'processing.max_concurrent_jobs'),
        skip_fixed_outputs=proc_data.get('skip_fixed_outputs', True)
    )

    # Parse output config
    out_data = _section(data.get('output'), 'output')
    output_config = OutputConfig(
        fixed_prefix=out_data.get('fixed_prefix', DEFAULT_FIXED_PREFIX),
        pretty_print=out_data.get('pretty_print', True)
    )

    return AppConfig(
        processing=processing_config,
        output=output_config,
        log_level=_log_level(data.get('log_level', 'INFO')),
        log_file=data.get('log_file')
    )
