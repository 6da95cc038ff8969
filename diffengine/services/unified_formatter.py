"""Serialize edit scripts as unified diff text.

The formatter is a left-to-right fold over the ChangeOp sequence. All
running bookkeeping (line positions on both sides, the open hunk and the
pending trailing context) lives in an immutable FormatterState that each
step replaces, so every step can be exercised on its own.

Hunk layout:
- A change opens a hunk with up to `context` preceding Equal lines.
- Equal lines after a change collect as trailing context. Once `context`
  of them are pending, the formatter looks `context` ops further ahead:
  another change there merges into the same hunk, otherwise the hunk is
  closed.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

from diffengine.domain.change import ChangeOp, ChangeType, split_lines

CONTEXT_LINES = 3

NEW_FILE_TRAILER = "New file"
DELETED_FILE_TRAILER = "Deleted file"


# ============================================================
# Formatter State
# ============================================================


@dataclass(frozen=True)
class OpenHunk:
    """A hunk being assembled, with its rendered body lines."""

    old_start: int
    new_start: int
    lines: tuple[str, ...] = ()
    old_count: int = 0
    new_count: int = 0

    def with_context(self, lines: Sequence[str]) -> OpenHunk:
        """Append already-prefixed context lines, counting them on both sides."""
        return replace(
            self,
            lines=self.lines + tuple(lines),
            old_count=self.old_count + len(lines),
            new_count=self.new_count + len(lines),
        )

    def with_change(self, op: ChangeOp) -> OpenHunk:
        if op.change_type is ChangeType.DELETE:
            return replace(self, lines=self.lines + (f"-{op.line}",), old_count=self.old_count + 1)
        return replace(self, lines=self.lines + (f"+{op.line}",), new_count=self.new_count + 1)

    @property
    def header(self) -> str:
        # A side with no lines is addressed by the line before the hunk.
        old_start = self.old_start if self.old_count else self.old_start - 1
        new_start = self.new_start if self.new_count else self.new_start - 1
        return f"@@ -{old_start},{self.old_count} +{new_start},{self.new_count} @@"

    def render(self) -> str:
        return self.header + "\n" + "\n".join(self.lines) + "\n"


@dataclass(frozen=True)
class FormatterState:
    """Running state threaded through the formatting fold.

    Attributes:
        old_line: Old-side line number of the next op to consume
        new_line: New-side line number of the next op to consume
        hunk: The hunk being assembled, or None between hunks
        trailing: Context lines pending after the last change of `hunk`
        rendered: Text of every hunk closed so far
    """

    old_line: int = 1
    new_line: int = 1
    hunk: OpenHunk | None = None
    trailing: tuple[str, ...] = ()
    rendered: tuple[str, ...] = ()

    @property
    def text(self) -> str:
        return "".join(self.rendered)


# ============================================================
# Fold Steps
# ============================================================


def _flush_trailing(state: FormatterState) -> FormatterState:
    if state.hunk is None or not state.trailing:
        return replace(state, trailing=())
    return replace(state, hunk=state.hunk.with_context(state.trailing), trailing=())


def _close_hunk(state: FormatterState) -> FormatterState:
    state = _flush_trailing(state)
    if state.hunk is None:
        return state
    return replace(state, hunk=None, rendered=state.rendered + (state.hunk.render(),))


def _open_hunk(state: FormatterState, ops: Sequence[ChangeOp], index: int, context: int) -> FormatterState:
    leading = [
        f" {op.line}"
        for op in ops[max(0, index - context):index]
        if op.change_type is ChangeType.EQUAL
    ]
    hunk = OpenHunk(
        old_start=state.old_line - len(leading),
        new_start=state.new_line - len(leading),
    ).with_context(leading)
    return replace(state, hunk=hunk)


def _change_ahead(ops: Sequence[ChangeOp], index: int, context: int) -> bool:
    return any(op.is_change for op in ops[index + 1:index + 1 + context])


def advance(
    state: FormatterState,
    ops: Sequence[ChangeOp],
    index: int,
    context: int = CONTEXT_LINES,
) -> FormatterState:
    """Consume ops[index] and return the next formatter state.

    Args:
        state: State before consuming the op
        ops: The full edit script (needed for leading context and lookahead)
        index: Position of the op to consume
        context: Number of unchanged lines kept around each change

    Returns:
        State after consuming the op
    """
    op = ops[index]

    if op.change_type is ChangeType.EQUAL:
        if state.hunk is not None:
            if context:
                state = replace(state, trailing=state.trailing + (f" {op.line}",))
            if len(state.trailing) >= context:
                if _change_ahead(ops, index, context):
                    state = _flush_trailing(state)
                else:
                    state = _close_hunk(state)
        return replace(state, old_line=state.old_line + 1, new_line=state.new_line + 1)

    state = _flush_trailing(state)
    if state.hunk is None:
        state = _open_hunk(state, ops, index, context)
    state = replace(state, hunk=state.hunk.with_change(op))

    if op.change_type is ChangeType.DELETE:
        return replace(state, old_line=state.old_line + 1)
    return replace(state, new_line=state.new_line + 1)


def finish(state: FormatterState) -> FormatterState:
    """Close any open hunk, keeping whatever trailing context is pending."""
    return _close_hunk(state)


# ============================================================
# Public API
# ============================================================


def format_unified_diff(ops: Sequence[ChangeOp], context: int = CONTEXT_LINES) -> str:
    """Render an edit script as unified diff hunks.

    Args:
        ops: Edit script from classify_changes()
        context: Number of unchanged lines kept around each change

    Returns:
        Hunk text (headers and prefixed lines, newline terminated), or an
        empty string when the script contains no changes
    """
    if context < 0:
        raise ValueError(f"context must not be negative: {context}")

    state = FormatterState()
    for index in range(len(ops)):
        state = advance(state, ops, index, context)
    return finish(state).text


def format_new_file(content: str) -> str:
    """Render a whole file as a single all-addition hunk.

    Returns:
        "@@ -0,0 +1,N @@ New file" followed by every line prefixed with "+",
        or an empty string for empty content
    """
    lines = split_lines(content)
    if not lines:
        return ""
    body = "\n".join(f"+{line}" for line in lines)
    return f"@@ -0,0 +1,{len(lines)} @@ {NEW_FILE_TRAILER}\n{body}\n"


def format_deleted_file(content: str) -> str:
    """Render a whole file as a single all-deletion hunk.

    Returns:
        "@@ -1,N +0,0 @@ Deleted file" followed by every line prefixed with
        "-", or an empty string for empty content
    """
    lines = split_lines(content)
    if not lines:
        return ""
    body = "\n".join(f"-{line}" for line in lines)
    return f"@@ -1,{len(lines)} +0,0 @@ {DELETED_FILE_TRAILER}\n{body}\n"
