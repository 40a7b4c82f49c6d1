"""Run options and global configuration.

Run options come from single-letter command line switches, optionally
combined with default switches read from the global config.json.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import TYPE_CHECKING, Any

import structlog

from best.infrastructure.normalize import (
    DEFAULT_DELIMITER,
    NormalizationConfig,
    normalize,
)
from best.infrastructure.paths import PathResolver

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = [
    "FLAG_LETTERS",
    "GlobalConfig",
    "InvalidOptionError",
    "MissingArgumentError",
    "OperatingMode",
    "Options",
    "OptionsError",
    "WalkWithoutTypeError",
    "build_query",
    "load_global_config",
    "parse_flag_letters",
]

logger = structlog.get_logger()

# Current schema version - increment when making breaking changes
# v1: Initial schema with delimiter and default_flags
SCHEMA_VERSION = "1"

# Maximum config file size (1MB)
MAX_CONFIG_SIZE = 1 * 1024 * 1024

# Switch letter -> Options field
FLAG_LETTERS: dict[str, str] = {
    "f": "include_files",
    "d": "include_directories",
    "w": "walk_subdirectories",
    "p": "print_full_path",
    "e": "fail_if_no_result",
    "c": "case_sensitive",
    "r": "replace_dots",
    "s": "strip_whitespace",
    "i": "require_substring",
}


class OptionsError(Exception):
    """Raised when the command line is invalid."""


class InvalidOptionError(OptionsError):
    """Raised for an unrecognized switch letter."""

    def __init__(self, option: str) -> None:
        super().__init__(f"Invalid option: {option}")
        self.option = option


class MissingArgumentError(OptionsError):
    """Raised when no usable query was given."""

    def __init__(self) -> None:
        super().__init__("Missing argument.")


class WalkWithoutTypeError(OptionsError):
    """Raised when -w is given without -f or -d."""

    def __init__(self) -> None:
        super().__init__("Option -w requires option -f and/or option -d.")


class OperatingMode(str, Enum):
    """Where candidates are read from."""

    STDIN = "stdin"
    FILES = "files"


@dataclass(frozen=True)
class Options:
    """Immutable run options, one field per switch letter."""

    include_files: bool = False
    include_directories: bool = False
    walk_subdirectories: bool = False
    print_full_path: bool = False
    fail_if_no_result: bool = False
    case_sensitive: bool = False
    replace_dots: bool = False
    strip_whitespace: bool = False
    require_substring: bool = False

    @property
    def mode(self) -> OperatingMode:
        """Operating mode implied by the file selection switches."""
        if self.include_files or self.include_directories or self.walk_subdirectories:
            return OperatingMode.FILES
        return OperatingMode.STDIN

    def merged(self, other: Options) -> Options:
        """Return options with every switch set in either operand."""
        return replace(
            self,
            **{
                f.name: getattr(self, f.name) or getattr(other, f.name)
                for f in fields(self)
            },
        )

    def validate(self) -> Options:
        """Check switch combinations.

        Returns:
            The same options, for chaining.

        Raises:
            WalkWithoutTypeError: If walking without -f or -d.
        """
        if self.walk_subdirectories and not (
            self.include_files or self.include_directories
        ):
            raise WalkWithoutTypeError()
        return self

    def normalization(self, delimiter: str = DEFAULT_DELIMITER) -> NormalizationConfig:
        """Build the normalization config these options describe."""
        return NormalizationConfig(
            fold_case=not self.case_sensitive,
            replace_delimiter=self.replace_dots,
            strip_whitespace=self.strip_whitespace,
            delimiter=delimiter,
        )


def parse_flag_letters(letters: str) -> Options:
    """Parse a run of switch letters such as "fdw".

    Args:
        letters: Switch letters, with or without a leading hyphen.

    Returns:
        Options with the named switches set.

    Raises:
        InvalidOptionError: If a letter is not a known switch.
    """
    values: dict[str, bool] = {}
    for letter in letters.lstrip("-"):
        field_name = FLAG_LETTERS.get(letter)
        if field_name is None:
            raise InvalidOptionError(letter)
        values[field_name] = True
    return Options(**values)


def build_query(words: Sequence[str] | None, config: NormalizationConfig) -> str:
    """Join positional words into the normalized query.

    Args:
        words: Positional command line arguments.
        config: Normalization shared with the candidates.

    Returns:
        Normalized, non-empty query.

    Raises:
        MissingArgumentError: If there are no words or the query normalizes
            to an empty string.
    """
    if not words:
        raise MissingArgumentError()

    query = normalize(" ".join(words), config)
    if not query:
        raise MissingArgumentError()
    return query


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration for best.

    Attributes:
        delimiter: Character replaced with a space by the -r switch.
        default_flags: Switch letters applied to every run.
    """

    delimiter: str = DEFAULT_DELIMITER
    default_flags: str = ""

    @property
    def default_options(self) -> Options:
        """Options implied by default_flags."""
        return parse_flag_letters(self.default_flags)


def load_global_config(resolver: PathResolver | None = None) -> GlobalConfig:
    """Load global configuration from a JSON file.

    Gracefully handles missing files, invalid JSON, and oversized files.
    Returns default config if file doesn't exist or is invalid.

    Args:
        resolver: Path resolver (defaults to a resolver for $BEST_HOME).

    Returns:
        GlobalConfig instance (uses defaults if file missing or invalid).
    """
    if resolver is None:
        resolver = PathResolver()

    path = resolver.global_config()

    if not path.exists():
        logger.debug("config_not_found", path=str(path))
        return GlobalConfig()

    try:
        file_size = path.stat().st_size
        if file_size > MAX_CONFIG_SIZE:
            logger.warning(
                "config_too_large",
                path=str(path),
                size=file_size,
                max_size=MAX_CONFIG_SIZE,
            )
            return GlobalConfig()

        content = path.read_text(encoding="utf-8")
        data = json.loads(content)

        version = data.get("version")
        if version and version != SCHEMA_VERSION:
            logger.warning(
                "config_version_mismatch",
                path=str(path),
                expected=SCHEMA_VERSION,
                found=version,
            )

        return _dict_to_config(data)

    except json.JSONDecodeError as e:
        logger.warning("config_invalid_json", path=str(path), error=str(e))
        return GlobalConfig()
    except (AttributeError, TypeError, ValueError, OptionsError) as e:
        logger.warning("config_parse_error", path=str(path), error=str(e))
        return GlobalConfig()
    except OSError as e:
        logger.warning("config_read_error", path=str(path), error=str(e))
        return GlobalConfig()


def _dict_to_config(data: dict[str, Any]) -> GlobalConfig:
    """Convert dict to GlobalConfig.

    Args:
        data: Dict from JSON.

    Returns:
        GlobalConfig instance.

    Raises:
        TypeError: If a field has an invalid type.
        ValueError: If the delimiter is not a single character.
        InvalidOptionError: If default_flags holds an unknown letter.
        WalkWithoutTypeError: If default_flags has w without f or d.
    """
    delimiter = data.get("delimiter", DEFAULT_DELIMITER)
    default_flags = data.get("default_flags", "")

    if not isinstance(delimiter, str) or not isinstance(default_flags, str):
        raise TypeError("delimiter and default_flags must be strings")
    if len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character: {delimiter!r}")

    # Fail early on unknown letters and on -w without -f or -d
    parse_flag_letters(default_flags).validate()

    return GlobalConfig(delimiter=delimiter, default_flags=default_flags)
