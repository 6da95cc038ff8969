"""Infrastructure components for diffengine.

This layer handles everything outside the pure diff pipeline:
- YAML configuration loading
- Logging setup for the CLI
- Reading content and diff text from files or stdin
- Rendering results as JSON or text
"""

from .config import ConfigError, EngineConfig
from .diff_io import (
    format_result_as_json,
    format_result_as_text,
    read_optional_file,
    read_text,
    read_text_from_file,
    read_text_from_stdin,
)
from .logging_config import setup_logging

__all__ = [
    "ConfigError",
    "EngineConfig",
    "format_result_as_json",
    "format_result_as_text",
    "read_optional_file",
    "read_text",
    "read_text_from_file",
    "read_text_from_stdin",
    "setup_logging",
]
