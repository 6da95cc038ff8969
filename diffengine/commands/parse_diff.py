"""Parse diff command.

Thin command that orchestrates diff parsing infrastructure.
Reads unified diff text (e.g. from git diff) from stdin or a file and outputs
the structured chunk model with per-line old/new line numbers.
"""

from __future__ import annotations

import sys

from diffengine.infrastructure.config import ConfigError, EngineConfig
from diffengine.infrastructure.diff_io import (
    format_result_as_json,
    format_result_as_text,
    read_text,
)
from diffengine.services.diff_service import DiffService


def cmd_parse_diff(
    input_file: str | None = None,
    file_id: str = "",
    output_format: str = "json",
    config_file: str | None = None,
) -> int:
    """Parse unified diff text and output the structured diff.

    Thin command that:
    1. Loads configuration
    2. Reads diff text from stdin or file
    3. Parses it into the domain model
    4. Outputs JSON or text format

    Args:
        input_file: Optional path to read diff from. If None, reads from stdin.
        file_id: Identifier recorded on the result (defaults to input_file)
        output_format: Output format - 'json' (default) or 'text' for debugging
        config_file: Optional YAML configuration file

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    # --------------------------------------------------------
    # 1. Load configuration
    # --------------------------------------------------------
    try:
        config = EngineConfig.load(config_file)
    except ConfigError as e:
        print(str(e), file=sys.stderr)
        return 1

    # --------------------------------------------------------
    # 2. Read diff input
    # --------------------------------------------------------
    try:
        diff_text = read_text(input_file)
    except FileNotFoundError:
        print(f"Input file not found: {input_file}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Failed to read diff: {e}", file=sys.stderr)
        return 1

    # --------------------------------------------------------
    # 3. Parse into domain model
    # --------------------------------------------------------
    service = DiffService(config)
    result = service.parse_external_unified_diff(file_id or input_file or "-", diff_text)

    # --------------------------------------------------------
    # 4. Output in requested format
    # --------------------------------------------------------
    if output_format == "text":
        print(format_result_as_text(result))
    else:
        print(format_result_as_json(result))

    return 0
