"""Longest common subsequence of two line sequences.

Classic dynamic programming over an (m+1) x (n+1) table of match lengths.
The whole table is kept for backtracking, so time and space are both
O(m * n); callers bound input size before getting here.
"""

from __future__ import annotations

from collections.abc import Sequence


def build_lcs_table(old: Sequence[str], new: Sequence[str]) -> list[list[int]]:
    """Build the table of LCS lengths for every pair of prefixes.

    table[i][j] is the LCS length of old[:i] and new[:j].
    """
    m = len(old)
    n = len(new)
    table = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(1, m + 1):
        row = table[i]
        prev_row = table[i - 1]
        old_line = old[i - 1]
        for j in range(1, n + 1):
            if old_line == new[j - 1]:
                row[j] = prev_row[j - 1] + 1
            else:
                row[j] = max(prev_row[j], row[j - 1])

    return table


def longest_common_subsequence(old: Sequence[str], new: Sequence[str]) -> tuple[str, ...]:
    """Compute the longest common subsequence of two line sequences.

    Backtracks from (m, n). Matching lines always take the diagonal. When
    the lines differ, the walk moves up the old axis only if that keeps a
    strictly longer subsequence, and otherwise (ties included) moves left
    along the new axis. For old ["a", "b"] and new ["b", "a"] this gives
    ("b",).

    Args:
        old: Lines of the old version
        new: Lines of the new version

    Returns:
        Tuple of the common lines in order; empty if either side is empty
    """
    if not old or not new:
        return ()

    table = build_lcs_table(old, new)
    result: list[str] = []
    i = len(old)
    j = len(new)

    while i > 0 and j > 0:
        if old[i - 1] == new[j - 1]:
            result.append(old[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1

    result.reverse()
    return tuple(result)
