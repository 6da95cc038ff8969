"""Edit script construction from two line sequences and their LCS."""

from __future__ import annotations

from collections.abc import Sequence

from diffengine.domain.change import ChangeOp
from diffengine.services.sequence_matcher import longest_common_subsequence


def classify_changes(
    old: Sequence[str],
    new: Sequence[str],
    lcs: Sequence[str] | None = None,
) -> list[ChangeOp]:
    """Walk both sequences against their LCS and emit an edit script.

    At each LCS element, every old line before its match is deleted, then
    every new line before its match is inserted, then the matched line is
    kept as Equal. Deletions therefore come before insertions within each
    changed block.

    Args:
        old: Lines of the old version
        new: Lines of the new version
        lcs: Their longest common subsequence; computed when not given

    Returns:
        Ordered ChangeOp list whose Delete+Equal lines are `old` and whose
        Insert+Equal lines are `new`
    """
    if lcs is None:
        lcs = longest_common_subsequence(old, new)

    ops: list[ChangeOp] = []
    old_idx = new_idx = lcs_idx = 0

    while old_idx < len(old) or new_idx < len(new):
        target = lcs[lcs_idx] if lcs_idx < len(lcs) else None
        progressed = False

        while old_idx < len(old) and (target is None or old[old_idx] != target):
            ops.append(ChangeOp.delete(old[old_idx]))
            old_idx += 1
            progressed = True

        while new_idx < len(new) and (target is None or new[new_idx] != target):
            ops.append(ChangeOp.insert(new[new_idx]))
            new_idx += 1
            progressed = True

        if target is not None and old_idx < len(old) and new_idx < len(new):
            ops.append(ChangeOp.equal(old[old_idx]))
            old_idx += 1
            new_idx += 1
            lcs_idx += 1
            progressed = True

        if not progressed:
            # LCS element missing from one side; nothing left to match.
            lcs_idx = len(lcs)

    return ops
