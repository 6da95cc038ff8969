"""Domain models for line-level change operations.

Content is split into line sequences once at the boundary; every later
stage of the pipeline works on tuples of lines and ChangeOp values.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ============================================================
# Line Sequences
# ============================================================


def split_lines(content: str) -> tuple[str, ...]:
    """Split file content into its lines.

    A single trailing line terminator does not produce an empty trailing
    line, so "a\\nb\\n" and "a\\nb" both give ("a", "b"). Empty content is
    the empty sequence, while "\\n" is one empty line.

    Args:
        content: Raw file contents

    Returns:
        Tuple of lines without their terminators
    """
    if not content:
        return ()
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return tuple(lines)


# ============================================================
# Domain Models
# ============================================================


class ChangeType(Enum):
    """Kind of edit applied to a single line."""

    EQUAL = "equal"
    DELETE = "delete"
    INSERT = "insert"


@dataclass(frozen=True)
class ChangeOp:
    """One step of an edit script turning the old lines into the new lines."""

    change_type: ChangeType
    line: str

    @classmethod
    def equal(cls, line: str) -> ChangeOp:
        return cls(ChangeType.EQUAL, line)

    @classmethod
    def delete(cls, line: str) -> ChangeOp:
        return cls(ChangeType.DELETE, line)

    @classmethod
    def insert(cls, line: str) -> ChangeOp:
        return cls(ChangeType.INSERT, line)

    @property
    def is_change(self) -> bool:
        """Check if this op deletes or inserts a line."""
        return self.change_type is not ChangeType.EQUAL


def old_lines(ops: tuple[ChangeOp, ...] | list[ChangeOp]) -> tuple[str, ...]:
    """Project an edit script onto the old side (Delete + Equal ops)."""
    return tuple(op.line for op in ops if op.change_type is not ChangeType.INSERT)


def new_lines(ops: tuple[ChangeOp, ...] | list[ChangeOp]) -> tuple[str, ...]:
    """Project an edit script onto the new side (Insert + Equal ops)."""
    return tuple(op.line for op in ops if op.change_type is not ChangeType.DELETE)


def has_changes(ops: tuple[ChangeOp, ...] | list[ChangeOp]) -> bool:
    """Check if an edit script deletes or inserts anything."""
    return any(op.is_change for op in ops)
