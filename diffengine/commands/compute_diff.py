"""Compute diff command.

Thin command that diffs two versions of a file from disk. Either version may
be left out: no old file means the file is new, no new file means it was
deleted.
"""

from __future__ import annotations

import sys

from diffengine.infrastructure.config import ConfigError, EngineConfig
from diffengine.infrastructure.diff_io import (
    format_result_as_json,
    format_result_as_text,
    read_optional_file,
)
from diffengine.services.diff_service import DiffService, InputTooLargeError


def cmd_compute_diff(
    old_file: str | None = None,
    new_file: str | None = None,
    file_id: str = "",
    output_format: str = "json",
    config_file: str | None = None,
) -> int:
    """Diff two versions of a file and output the result.

    Args:
        old_file: Path to the previous version, or None if the file is new
        new_file: Path to the current version, or None if the file was deleted
        file_id: Identifier recorded on the result (defaults to the new path)
        output_format: 'json' (default), 'text', or 'unified' for raw hunks
        config_file: Optional YAML configuration file

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    if old_file is None and new_file is None:
        print("At least one of --old-file or --new-file is required", file=sys.stderr)
        return 1

    try:
        config = EngineConfig.load(config_file)
    except ConfigError as e:
        print(str(e), file=sys.stderr)
        return 1

    try:
        old_content = read_optional_file(old_file)
        new_content = read_optional_file(new_file)
    except FileNotFoundError as e:
        print(f"Input file not found: {e.filename}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Failed to read input: {e}", file=sys.stderr)
        return 1

    file_id = file_id or new_file or old_file or "-"
    service = DiffService(config)

    try:
        service.ensure_within_bound(file_id, old_content, new_content)
    except InputTooLargeError as e:
        print(str(e), file=sys.stderr)
        return 1

    if output_format == "unified":
        text = service.snapshot_unified_diff(old_content, new_content)
        sys.stdout.write(text)
        return 0

    result = service.diff_snapshot(file_id, old_content, new_content)
    if output_format == "text":
        print(format_result_as_text(result))
    else:
        print(format_result_as_json(result))

    return 0
