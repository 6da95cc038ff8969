"""Engine configuration loaded from YAML.

Parse-once pattern: the YAML file is parsed into a typed, validated
EngineConfig at the boundary. Defaults apply when no file is given.

Example file:

    context_lines: 3
    max_input_lines: 10000
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

DEFAULT_CONTEXT_LINES = 3
DEFAULT_MAX_INPUT_LINES = 10000


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or is invalid."""

    pass


# ============================================================
# Domain Models
# ============================================================


@dataclass(frozen=True)
class EngineConfig:
    """Settings for the diff engine.

    Attributes:
        context_lines: Unchanged lines kept around each change in a hunk
        max_input_lines: Largest line count accepted on either side before
            the quadratic diff is attempted
    """

    context_lines: int = DEFAULT_CONTEXT_LINES
    max_input_lines: int = DEFAULT_MAX_INPUT_LINES

    def __post_init__(self) -> None:
        if not _is_int(self.context_lines) or self.context_lines < 0:
            raise ConfigError(f"context_lines must be a non-negative integer, got {self.context_lines!r}")
        if not _is_int(self.max_input_lines) or self.max_input_lines <= 0:
            raise ConfigError(f"max_input_lines must be a positive integer, got {self.max_input_lines!r}")

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict | None) -> EngineConfig:
        """Build a config from a parsed YAML mapping.

        Args:
            data: Raw dictionary from YAML, or None for defaults

        Returns:
            Validated EngineConfig instance

        Raises:
            ConfigError: If the mapping has unknown keys or invalid values
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration must be a mapping, got {type(data).__name__}")

        unknown = sorted(set(data) - {"context_lines", "max_input_lines"})
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        return cls(
            context_lines=data.get("context_lines", DEFAULT_CONTEXT_LINES),
            max_input_lines=data.get("max_input_lines", DEFAULT_MAX_INPUT_LINES),
        )

    @classmethod
    def from_file(cls, path: str | Path) -> EngineConfig:
        """Load a config from a YAML file.

        Raises:
            ConfigError: If the file is missing, unreadable, or invalid
        """
        try:
            text = Path(path).read_text()
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e

        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e

        return cls.from_dict(data)

    @classmethod
    def load(cls, path: str | Path | None = None) -> EngineConfig:
        """Load from `path` when given, otherwise return defaults."""
        if path is None:
            return cls()
        return cls.from_file(path)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
