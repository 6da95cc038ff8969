"""Parse unified diff text into the structured chunk model.

Accepts both diffs produced by the unified formatter and raw output from
external tools (git diff, gh pr diff). Parsing is lenient: file headers,
index lines and "\\ No newline at end of file" markers are skipped, lines
outside any hunk are dropped, and nothing here raises for malformed input.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from diffengine.domain.change import split_lines
from diffengine.domain.diff import DiffChunk, DiffLine, DiffLineType, DiffResult, DiffStats

logger = logging.getLogger(__name__)

HUNK_HEADER_PATTERN = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@(.*)$")

METADATA_PREFIXES = ("diff --git", "index ", "---", "+++", "\\")


# ============================================================
# Chunk Accumulator
# ============================================================


@dataclass
class _ChunkBuilder:
    """Mutable accumulator for the hunk currently being parsed.

    The remaining counts come from the header. They are only used to tell
    a "---"/"+++" body line apart from a file header; stats and line
    numbers always come from the lines actually present.
    """

    header: str
    old_start: int
    new_start: int
    old_remaining: int
    new_remaining: int
    old_line: int = 0
    new_line: int = 0
    lines: list[DiffLine] = field(default_factory=list)

    @classmethod
    def from_header(cls, header: str) -> _ChunkBuilder | None:
        match = HUNK_HEADER_PATTERN.match(header)
        if not match:
            return None

        try:
            old_start = int(match.group(1))
            new_start = int(match.group(3))
            old_count = int(match.group(2)) if match.group(2) is not None else 1
            new_count = int(match.group(4)) if match.group(4) is not None else 1
        except ValueError:
            # Digit runs beyond the interpreter's int conversion limit
            return None

        return cls(
            header=header,
            old_start=old_start,
            new_start=new_start,
            old_remaining=old_count,
            new_remaining=new_count,
            old_line=old_start,
            new_line=new_start,
        )

    def claims(self, line: str) -> bool:
        """Check if a line that looks like a file header belongs to this hunk."""
        if line.startswith("---"):
            return self.old_remaining > 0
        if line.startswith("+++"):
            return self.new_remaining > 0
        return False

    def add(self, line: str) -> None:
        if line.startswith("+"):
            self.lines.append(
                DiffLine(
                    line_type=DiffLineType.ADDITION,
                    content=line[1:],
                    new_line_number=self.new_line,
                )
            )
            self.new_line += 1
            self.new_remaining -= 1
        elif line.startswith("-"):
            self.lines.append(
                DiffLine(
                    line_type=DiffLineType.DELETION,
                    content=line[1:],
                    old_line_number=self.old_line,
                )
            )
            self.old_line += 1
            self.old_remaining -= 1
        else:
            self.lines.append(
                DiffLine(
                    line_type=DiffLineType.CONTEXT,
                    content=line[1:] if line.startswith(" ") else line,
                    old_line_number=self.old_line,
                    new_line_number=self.new_line,
                )
            )
            self.old_line += 1
            self.new_line += 1
            self.old_remaining -= 1
            self.new_remaining -= 1

    def build(self) -> DiffChunk:
        lines = tuple(self.lines)
        return DiffChunk(
            header=self.header,
            old_start=self.old_start,
            new_start=self.new_start,
            lines=lines,
            stats=DiffStats.from_lines(lines),
        )


# ============================================================
# Public API
# ============================================================


def is_hunk_header(line: str) -> bool:
    return _ChunkBuilder.from_header(line) is not None


def parse_unified_diff(file: str, diff_text: str) -> DiffResult:
    """Parse unified diff text into a DiffResult.

    Args:
        file: Identifier of the file the diff belongs to
        diff_text: Unified diff text, possibly with git file headers

    Returns:
        DiffResult with one chunk per hunk header; empty for empty or
        blank input
    """
    if not diff_text or not diff_text.strip():
        return DiffResult.empty(file)

    chunks: list[DiffChunk] = []
    current: _ChunkBuilder | None = None
    skipped = 0

    for line in split_lines(diff_text):
        if line.startswith("@@"):
            if current is not None:
                chunks.append(current.build())
            current = _ChunkBuilder.from_header(line)
            if current is None:
                logger.debug("Ignoring malformed hunk header in %s: %r", file, line)
            continue

        if current is not None and current.claims(line):
            current.add(line)
            continue

        if line.startswith(METADATA_PREFIXES):
            if line.startswith("diff --git") and current is not None:
                # A new file section ends the current hunk.
                chunks.append(current.build())
                current = None
            continue

        if current is None:
            skipped += 1
            continue

        current.add(line)

    if current is not None:
        chunks.append(current.build())

    if skipped:
        logger.debug("Skipped %d line(s) outside any hunk in %s", skipped, file)

    return DiffResult.from_chunks(file, chunks)
