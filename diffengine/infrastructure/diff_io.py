"""Infrastructure for reading diff inputs and rendering results.

Handles reading file contents or diff text from stdin or files and
converting DiffResult models to JSON or human-readable text.
"""

from __future__ import annotations

import io
import json
import sys
from pathlib import Path

from diffengine.domain.diff import DiffResult


# ============================================================
# Input Functions
# ============================================================


def read_text_from_stdin() -> str:
    """Read text content from stdin.

    Line endings are kept as-is, the same as read_text_from_file().

    Returns:
        Raw content as a string
    """
    stream = io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8", newline="")
    try:
        return stream.read()
    finally:
        # Leave sys.stdin usable after the wrapper goes away
        stream.detach()


def read_text_from_file(path: str | Path) -> str:
    """Read text content from a file.

    Args:
        path: Path to the file

    Returns:
        Raw content as a string

    Raises:
        FileNotFoundError: If the file doesn't exist
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def read_text(input_file: str | None = None) -> str:
    """Read text content from stdin or a file.

    Args:
        input_file: Optional path to read from. If None, reads from stdin.

    Returns:
        Raw content as a string
    """
    if input_file is None:
        return read_text_from_stdin()
    return read_text_from_file(input_file)


def read_optional_file(path: str | None) -> str | None:
    """Read a file version that may not exist.

    Returns:
        File contents, or None when no path was given
    """
    if path is None:
        return None
    return read_text_from_file(path)


# ============================================================
# Output Functions
# ============================================================


def format_result_as_json(result: DiffResult) -> str:
    """Format a DiffResult as JSON for the rendering layer."""
    return json.dumps(result.to_dict(), indent=2)


def format_result_as_text(result: DiffResult) -> str:
    """Format a DiffResult as human-readable text for debugging.

    Args:
        result: Structured diff for one file

    Returns:
        Text representation showing chunks and their line ranges
    """
    if result.is_empty:
        return f"{result.file}: no changes"

    lines = [
        f"File: {result.file}",
        f"Chunks: {len(result.chunks)} (+{result.stats.additions} -{result.stats.deletions})",
        "",
    ]

    for i, chunk in enumerate(result.chunks, 1):
        lines.append(f"Chunk {i}: {chunk.display_header}")
        lines.append(f"  Old: lines {chunk.old_start}-{chunk.old_start + chunk.old_count - 1} ({chunk.old_count} lines)")
        lines.append(f"  New: lines {chunk.new_start}-{chunk.new_start + chunk.new_count - 1} ({chunk.new_count} lines)")
        lines.append(f"  Changes: +{chunk.stats.additions} -{chunk.stats.deletions}")
        lines.append("")

    return "\n".join(lines)
