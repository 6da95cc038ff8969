"""Domain models for structured diffs.

Parse-once pattern: unified diff text is parsed into these immutable models
at the boundary. The rendering layer anchors comments and highlights to the
line numbers carried on each DiffLine, so every line knows its position on
each side of the change where it exists.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


# ============================================================
# Domain Models
# ============================================================


class DiffLineType(Enum):
    """Type of line in a diff chunk."""

    ADDITION = "addition"
    DELETION = "deletion"
    CONTEXT = "context"


_PREFIXES = {
    DiffLineType.ADDITION: "+",
    DiffLineType.DELETION: "-",
    DiffLineType.CONTEXT: " ",
}


@dataclass(frozen=True)
class DiffLine:
    """A single line from a diff chunk with its line numbers.

    Attributes:
        line_type: Whether this is an added, deleted, or context line
        content: The line content (without the +/-/space prefix)
        old_line_number: 1-based line number in the old file (None for additions)
        new_line_number: 1-based line number in the new file (None for deletions)
    """

    line_type: DiffLineType
    content: str
    old_line_number: int | None = None
    new_line_number: int | None = None

    @property
    def is_changed(self) -> bool:
        """Check if this line represents a change (added or deleted)."""
        return self.line_type is not DiffLineType.CONTEXT

    @property
    def prefix(self) -> str:
        return _PREFIXES[self.line_type]

    @property
    def anchor_line_number(self) -> int:
        """Line number a comment on this line attaches to.

        New-side number where the line exists in the new file, otherwise
        the old-side number (deleted lines).
        """
        if self.new_line_number is not None:
            return self.new_line_number
        return self.old_line_number or 0

    def to_dict(self) -> dict:
        return {
            "type": self.line_type.value,
            "content": self.content,
            "old_line_number": self.old_line_number,
            "new_line_number": self.new_line_number,
        }


@dataclass(frozen=True)
class DiffStats:
    """Addition and deletion counts for a chunk or a whole file."""

    additions: int = 0
    deletions: int = 0

    @classmethod
    def from_lines(cls, lines: tuple[DiffLine, ...]) -> DiffStats:
        return cls(
            additions=sum(1 for line in lines if line.line_type is DiffLineType.ADDITION),
            deletions=sum(1 for line in lines if line.line_type is DiffLineType.DELETION),
        )

    def __add__(self, other: DiffStats) -> DiffStats:
        return DiffStats(
            additions=self.additions + other.additions,
            deletions=self.deletions + other.deletions,
        )

    @property
    def total(self) -> int:
        return self.additions + self.deletions

    def to_dict(self) -> dict:
        return {"additions": self.additions, "deletions": self.deletions}


@dataclass(frozen=True)
class DiffChunk:
    """A single hunk of a diff.

    old_start and new_start are the first line numbers the chunk covers on
    each side, leading context included. Stats only count this chunk's
    own additions and deletions.
    """

    header: str
    old_start: int
    new_start: int
    lines: tuple[DiffLine, ...] = ()
    stats: DiffStats = field(default_factory=DiffStats)

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    @property
    def old_count(self) -> int:
        """Number of lines this chunk covers in the old file."""
        return sum(1 for line in self.lines if line.line_type is not DiffLineType.ADDITION)

    @property
    def new_count(self) -> int:
        """Number of lines this chunk covers in the new file."""
        return sum(1 for line in self.lines if line.line_type is not DiffLineType.DELETION)

    @property
    def display_header(self) -> str:
        """Header recomputed from the chunk's actual lines.

        Chunks that start at old line 0 come from a file that did not exist
        before and are labelled as a new file.
        """
        if self.old_start == 0:
            return "New file"
        return f"@@ -{self.old_start},{self.old_count} +{self.new_start},{self.new_count} @@"

    def get_added_lines(self) -> list[DiffLine]:
        return [line for line in self.lines if line.line_type is DiffLineType.ADDITION]

    def get_deleted_lines(self) -> list[DiffLine]:
        return [line for line in self.lines if line.line_type is DiffLineType.DELETION]

    def get_context_lines(self) -> list[DiffLine]:
        return [line for line in self.lines if line.line_type is DiffLineType.CONTEXT]

    def to_dict(self) -> dict:
        return {
            "header": self.header,
            "old_start": self.old_start,
            "new_start": self.new_start,
            "lines": [line.to_dict() for line in self.lines],
            "stats": self.stats.to_dict(),
        }


@dataclass(frozen=True)
class DiffResult:
    """Structured diff for one file.

    Use DiffService to build instances from file contents or from unified
    diff text. Aggregate stats are the sum of the chunk stats.
    """

    file: str
    chunks: tuple[DiffChunk, ...] = ()
    stats: DiffStats = field(default_factory=DiffStats)

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def empty(cls, file: str) -> DiffResult:
        """Result for a file with no changes."""
        return cls(file=file)

    @classmethod
    def from_chunks(cls, file: str, chunks: list[DiffChunk] | tuple[DiffChunk, ...]) -> DiffResult:
        """Build a result whose aggregate stats are summed from its chunks."""
        stats = DiffStats()
        for chunk in chunks:
            stats = stats + chunk.stats
        return cls(file=file, chunks=tuple(chunks), stats=stats)

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        """Check if the diff contains no chunks."""
        return not self.chunks

    def find_line(
        self,
        new_line_number: int | None = None,
        old_line_number: int | None = None,
    ) -> DiffLine | None:
        """Find the diff line shown for a line number on one side.

        Exactly one of new_line_number or old_line_number should be given.

        Returns:
            The matching DiffLine, or None if no chunk shows that line
        """
        for chunk in self.chunks:
            for line in chunk.lines:
                if new_line_number is not None and line.new_line_number == new_line_number:
                    return line
                if old_line_number is not None and line.old_line_number == old_line_number:
                    return line
        return None

    def to_dict(self) -> dict:
        """Convert the result to a dictionary for JSON serialization."""
        return {
            "file": self.file,
            "chunks": [chunk.to_dict() for chunk in self.chunks],
            "stats": self.stats.to_dict(),
        }
