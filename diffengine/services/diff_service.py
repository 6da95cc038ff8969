"""Diff service.

Core service for building structured diffs. Composes the change classifier,
unified formatter and unified parser; it never builds hunks itself, so
computed diffs and diffs read from external tools go through the same
parser and come out in the same model.
"""

from __future__ import annotations

import logging

from diffengine.domain.change import has_changes, split_lines
from diffengine.domain.diff import DiffResult
from diffengine.infrastructure.config import EngineConfig
from diffengine.services.change_classifier import classify_changes
from diffengine.services.unified_formatter import (
    format_deleted_file,
    format_new_file,
    format_unified_diff,
)
from diffengine.services.unified_parser import parse_unified_diff

logger = logging.getLogger(__name__)


class InputTooLargeError(Exception):
    """Raised when content exceeds the configured line bound."""

    pass


class DiffService:
    """Core service for structured diff generation.

    Every operation is a pure function of its arguments and the injected
    config. None of them raise for empty or malformed input; the worst case
    is an empty DiffResult.
    """

    def __init__(self, config: EngineConfig | None = None):
        """Initialize with engine configuration.

        Args:
            config: Engine settings (default: EngineConfig())
        """
        self.config = config or EngineConfig()

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    def generate_unified_diff(self, old_content: str, new_content: str) -> str:
        """Generate unified diff hunks between two versions of a file.

        Returns:
            Hunk text, or an empty string when nothing changed
        """
        if old_content == new_content:
            return ""

        old = split_lines(old_content)
        new = split_lines(new_content)
        logger.debug("Diffing %d old line(s) against %d new line(s)", len(old), len(new))

        ops = classify_changes(old, new)
        if not has_changes(ops):
            return ""
        return format_unified_diff(ops, context=self.config.context_lines)

    def compute_structured_diff(self, file: str, old_content: str, new_content: str) -> DiffResult:
        """Generate a structured diff from content comparison.

        Args:
            file: Identifier of the file being compared
            old_content: Previous version of the file
            new_content: Current version of the file

        Returns:
            DiffResult; no chunks when the contents are identical
        """
        if old_content == new_content:
            return DiffResult.empty(file)
        return parse_unified_diff(file, self.generate_unified_diff(old_content, new_content))

    def structured_diff_for_new_file(self, file: str, content: str) -> DiffResult:
        """Generate a structured diff showing every line of a new file as added."""
        return parse_unified_diff(file, format_new_file(content))

    def structured_diff_for_deleted_file(self, file: str, content: str) -> DiffResult:
        """Generate a structured diff showing every line of a deleted file as removed."""
        return parse_unified_diff(file, format_deleted_file(content))

    def parse_external_unified_diff(self, file: str, diff_text: str) -> DiffResult:
        """Parse unified diff text produced by an external tool such as git diff."""
        return parse_unified_diff(file, diff_text)

    def diff_snapshot(
        self,
        file: str,
        old_content: str | None,
        new_content: str | None,
    ) -> DiffResult:
        """Diff a file against a previously captured snapshot.

        Args:
            file: Identifier of the file being compared
            old_content: Snapshot content, or None if the file had no snapshot
            new_content: Current content, or None if the file no longer exists

        Returns:
            New-file diff when there is no snapshot, deleted-file diff when
            the file is gone or empty now, otherwise a content comparison
        """
        return parse_unified_diff(file, self.snapshot_unified_diff(old_content, new_content))

    def snapshot_unified_diff(self, old_content: str | None, new_content: str | None) -> str:
        """Unified diff text for diff_snapshot(), with the same new/deleted file cases."""
        if old_content is None:
            return format_new_file(new_content or "")

        if not new_content:
            return format_deleted_file(old_content)

        return self.generate_unified_diff(old_content, new_content)

    def exceeds_input_bound(self, *contents: str | None) -> bool:
        """Check if any content has more lines than config.max_input_lines."""
        limit = self.config.max_input_lines
        return any(
            content is not None and len(split_lines(content)) > limit
            for content in contents
        )

    def ensure_within_bound(self, file: str, *contents: str | None) -> None:
        """Reject contents too large for the quadratic diff.

        Raises:
            InputTooLargeError: If any content exceeds config.max_input_lines
        """
        if self.exceeds_input_bound(*contents):
            raise InputTooLargeError(
                f"{file} exceeds the limit of {self.config.max_input_lines} lines per version"
            )
