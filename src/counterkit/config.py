# Copyright 2026 Pennyworth Technologies, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Configuration system for counterkit.

Provides hierarchical configuration with precedence:
1. CLI flags (highest)
2. Environment variables
3. Project config (./.counterkit.json)
4. Global config (~/.counterkit_config.json)
5. Hardcoded defaults (lowest)
"""

from __future__ import annotations

import copy
import json
import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from counterkit.numeric import COUNT_TYPES
from counterkit.sources import VALID_SPLIT_MODES

logger = logging.getLogger(__name__)

# Valid values for enums
VALID_COUNT_TYPES = tuple(COUNT_TYPES)
VALID_OUTPUT_FORMATS = ("json", "text")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Hardcoded defaults
DEFAULT_COUNT_TYPE = "int"
DEFAULT_OUTPUT_FORMAT = "json"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_SPLIT = "words"

# Environment variable names
ENV_COUNT_TYPE = "COUNTERKIT_COUNT_TYPE"
ENV_OUTPUT_FORMAT = "COUNTERKIT_OUTPUT_FORMAT"
ENV_QUIET = "COUNTERKIT_QUIET"
ENV_LOG_LEVEL = "COUNTERKIT_LOG_LEVEL"
ENV_SPLIT = "COUNTERKIT_SPLIT"
ENV_TOP = "COUNTERKIT_TOP"

GLOBAL_CONFIG_NAME = ".counterkit_config.json"
PROJECT_CONFIG_NAME = ".counterkit.json"


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    pass


class ConfigLoadError(Exception):
    """Raised when configuration file cannot be loaded."""

    pass


def _data_keys(data: dict[str, Any]) -> set[str]:
    # Template files carry "_comment_*" keys next to the real ones
    return {k for k in data if not k.startswith("_comment")}


def _check_unknown(cls: type, data: dict[str, Any], section: str) -> None:
    known_fields = {f.name for f in fields(cls)}
    unknown = _data_keys(data) - known_fields
    if unknown:
        raise ConfigValidationError(
            f"Unknown fields in {section} config: {', '.join(sorted(unknown))}"
        )


def _check_types(section: str, **values: tuple[Any, type]) -> None:
    for name, (value, expected) in values.items():
        if not isinstance(value, expected):
            raise ConfigValidationError(
                f"{section}.{name} must be {expected.__name__}, got {value!r}"
            )


@dataclass
class DefaultsConfig:
    """Default output and numeric settings."""

    count_type: str = DEFAULT_COUNT_TYPE
    output_format: str = DEFAULT_OUTPUT_FORMAT
    quiet: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    def validate(self) -> None:
        """Validate configuration values."""
        _check_types(
            "defaults",
            count_type=(self.count_type, str),
            output_format=(self.output_format, str),
            quiet=(self.quiet, bool),
            log_level=(self.log_level, str),
        )
        if self.count_type not in VALID_COUNT_TYPES:
            raise ConfigValidationError(
                f"Invalid count_type '{self.count_type}'. "
                f"Valid values: {', '.join(VALID_COUNT_TYPES)}"
            )
        if self.output_format not in VALID_OUTPUT_FORMATS:
            raise ConfigValidationError(
                f"Invalid output_format '{self.output_format}'. "
                f"Valid values: {', '.join(VALID_OUTPUT_FORMATS)}"
            )
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ConfigValidationError(
                f"Invalid log_level '{self.log_level}'. "
                f"Valid values: {', '.join(VALID_LOG_LEVELS)}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "count_type": self.count_type,
            "output_format": self.output_format,
            "quiet": self.quiet,
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], strict: bool = False) -> "DefaultsConfig":
        """Create from dictionary."""
        if strict:
            _check_unknown(cls, data, "defaults")

        return cls(
            count_type=data.get("count_type", DEFAULT_COUNT_TYPE),
            output_format=data.get("output_format", DEFAULT_OUTPUT_FORMAT),
            quiet=data.get("quiet", False),
            log_level=data.get("log_level", DEFAULT_LOG_LEVEL),
        )


@dataclass
class CountingConfig:
    """How items are split and how results are ranked."""

    split: str = DEFAULT_SPLIT
    case_sensitive: bool = True
    top: int | None = None
    ordered: bool = True  # break count ties by item

    def validate(self) -> None:
        """Validate counting values."""
        _check_types(
            "counting",
            split=(self.split, str),
            case_sensitive=(self.case_sensitive, bool),
            ordered=(self.ordered, bool),
        )
        if self.top is not None and (isinstance(self.top, bool) or not isinstance(self.top, int)):
            raise ConfigValidationError(f"top must be an integer, got {self.top!r}")
        if self.split not in VALID_SPLIT_MODES:
            raise ConfigValidationError(
                f"Invalid split '{self.split}'. "
                f"Valid values: {', '.join(VALID_SPLIT_MODES)}"
            )
        if self.top is not None and self.top <= 0:
            raise ConfigValidationError(f"top must be positive, got {self.top}")

    def to_dict(self, exclude_none: bool = False) -> dict[str, Any]:
        """Convert to dictionary."""
        result = {
            "split": self.split,
            "case_sensitive": self.case_sensitive,
            "top": self.top,
            "ordered": self.ordered,
        }
        if exclude_none:
            return {k: v for k, v in result.items() if v is not None}
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any], strict: bool = False) -> "CountingConfig":
        """Create from dictionary."""
        if strict:
            _check_unknown(cls, data, "counting")

        return cls(
            split=data.get("split", DEFAULT_SPLIT),
            case_sensitive=data.get("case_sensitive", True),
            top=data.get("top"),
            ordered=data.get("ordered", True),
        )


@dataclass
class CounterkitConfig:
    """Main configuration container."""

    version: str = "1"
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    counting: CountingConfig = field(default_factory=CountingConfig)

    def validate(self) -> None:
        """Validate entire configuration."""
        self.defaults.validate()
        self.counting.validate()

    def to_dict(self, exclude_none: bool = False) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "version": self.version,
            "defaults": self.defaults.to_dict(),
            "counting": self.counting.to_dict(exclude_none),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], strict: bool = False) -> "CounterkitConfig":
        """Create from dictionary."""
        if strict:
            unknown = _data_keys(data) - {"version", "defaults", "counting"}
            if unknown:
                raise ConfigValidationError(
                    f"Unknown fields in config: {', '.join(sorted(unknown))}"
                )

        for section in ("defaults", "counting"):
            if not isinstance(data.get(section, {}), dict):
                raise ConfigValidationError(
                    f"Section '{section}' must be an object, got {data[section]!r}"
                )

        return cls(
            version=data.get("version", "1"),
            defaults=DefaultsConfig.from_dict(data.get("defaults", {}), strict),
            counting=CountingConfig.from_dict(data.get("counting", {}), strict),
        )


def get_global_config_path() -> Path:
    """Get path to global config file."""
    return Path.home() / GLOBAL_CONFIG_NAME


def get_project_config_path(project_dir: Path | None = None) -> Path:
    """Get path to project config file (current directory by default)."""
    return (project_dir or Path.cwd()) / PROJECT_CONFIG_NAME


def load_config_file(path: Path, strict: bool = False) -> CounterkitConfig:
    """Load configuration from a JSON file.

    Args:
        path: Path to the config file
        strict: If True, fail on unknown fields

    Returns:
        CounterkitConfig instance (defaults if the file does not exist)

    Raises:
        ConfigLoadError: If file cannot be read or parsed
        ConfigValidationError: If strict=True and unknown fields found
    """
    if not path.exists():
        return CounterkitConfig()

    try:
        content = path.read_text()
    except PermissionError as e:
        raise ConfigLoadError(f"Permission denied reading {path}: {e}")
    except OSError as e:
        raise ConfigLoadError(f"Error reading {path}: {e}")

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigLoadError(f"Invalid JSON in {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigLoadError(f"Expected a JSON object in {path}")

    logger.debug(f"Loaded config from {path}")
    return CounterkitConfig.from_dict(data, strict=strict)


def merge_configs(*configs: CounterkitConfig) -> CounterkitConfig:
    """Merge multiple configs with later configs taking precedence.

    Values left at their defaults in later configs do NOT override earlier
    values, so partial configs layer properly.

    Args:
        *configs: Configs to merge (first is base, last has highest priority)

    Returns:
        Merged CounterkitConfig
    """
    if not configs:
        return CounterkitConfig()

    result = copy.deepcopy(configs[0])

    for config in configs[1:]:
        # Merge defaults (only non-default values)
        if config.defaults.count_type != DEFAULT_COUNT_TYPE:
            result.defaults.count_type = config.defaults.count_type
        if config.defaults.output_format != DEFAULT_OUTPUT_FORMAT:
            result.defaults.output_format = config.defaults.output_format
        if config.defaults.quiet:
            result.defaults.quiet = config.defaults.quiet
        if config.defaults.log_level != DEFAULT_LOG_LEVEL:
            result.defaults.log_level = config.defaults.log_level

        # Merge counting
        if config.counting.split != DEFAULT_SPLIT:
            result.counting.split = config.counting.split
        if not config.counting.case_sensitive:
            result.counting.case_sensitive = False
        if config.counting.top is not None:
            result.counting.top = config.counting.top
        if not config.counting.ordered:
            result.counting.ordered = False

    return result


def apply_env_overrides(config: CounterkitConfig) -> CounterkitConfig:
    """Apply environment variable overrides to config.

    Args:
        config: Base configuration

    Returns:
        New config with env var overrides applied

    Raises:
        ConfigValidationError: If env var value is invalid
    """
    result = copy.deepcopy(config)

    if count_type := os.environ.get(ENV_COUNT_TYPE):
        result.defaults.count_type = count_type

    if output_format := os.environ.get(ENV_OUTPUT_FORMAT):
        result.defaults.output_format = output_format

    if quiet := os.environ.get(ENV_QUIET):
        result.defaults.quiet = quiet.lower() in ("true", "1", "yes")

    if log_level := os.environ.get(ENV_LOG_LEVEL):
        result.defaults.log_level = log_level.upper()

    if split := os.environ.get(ENV_SPLIT):
        result.counting.split = split

    if top_str := os.environ.get(ENV_TOP):
        try:
            result.counting.top = int(top_str)
        except ValueError:
            raise ConfigValidationError(
                f"{ENV_TOP} must be an integer, got '{top_str}'"
            )

    return result


def get_config(project_dir: Path | None = None) -> CounterkitConfig:
    """Load and merge configuration from all sources.

    Loads in order (later sources override earlier):
    1. Hardcoded defaults
    2. Global config (~/.counterkit_config.json)
    3. Project config (./.counterkit.json)
    4. Environment variables

    Args:
        project_dir: Directory holding the project config (cwd if None)

    Returns:
        Merged configuration with all overrides applied
    """
    base_config = CounterkitConfig()
    global_config = load_config_file(get_global_config_path())
    project_config = load_config_file(get_project_config_path(project_dir))

    merged = merge_configs(base_config, global_config, project_config)
    return apply_env_overrides(merged)


def generate_config_template() -> dict[str, Any]:
    """Generate a config template dictionary.

    Returns:
        Dictionary suitable for JSON serialization
    """
    return {
        "version": "1",
        "_comment_version": "Config file format version",
        "defaults": {
            "count_type": DEFAULT_COUNT_TYPE,
            "_comment_count_type": f"Numeric type of counts. Valid: {', '.join(VALID_COUNT_TYPES)}",
            "output_format": DEFAULT_OUTPUT_FORMAT,
            "_comment_output_format": f"Output format. Valid: {', '.join(VALID_OUTPUT_FORMATS)}",
            "quiet": False,
            "_comment_quiet": "Suppress non-essential output",
            "log_level": DEFAULT_LOG_LEVEL,
            "_comment_log_level": f"Logging level. Valid: {', '.join(VALID_LOG_LEVELS)}",
        },
        "counting": {
            "split": DEFAULT_SPLIT,
            "_comment_split": f"How 'count' splits its input. Valid: {', '.join(VALID_SPLIT_MODES)}",
            "case_sensitive": True,
            "_comment_case_sensitive": "Set to false to case-fold items before counting",
            "top": None,
            "_comment_top": "Only report the N most common items (null for all)",
            "ordered": True,
            "_comment_ordered": "Break count ties by item so output is deterministic",
        },
    }


def generate_config_template_string() -> str:
    """Generate a config template as a formatted JSON string."""
    return json.dumps(generate_config_template(), indent=2)
