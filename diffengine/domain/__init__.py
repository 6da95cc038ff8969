"""Domain models for diffengine."""

from diffengine.domain.change import ChangeOp, ChangeType, split_lines
from diffengine.domain.diff import (
    DiffChunk,
    DiffLine,
    DiffLineType,
    DiffResult,
    DiffStats,
)

__all__ = [
    "ChangeOp",
    "ChangeType",
    "DiffChunk",
    "DiffLine",
    "DiffLineType",
    "DiffResult",
    "DiffStats",
    "split_lines",
]
