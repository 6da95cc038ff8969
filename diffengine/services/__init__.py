"""Services for diffengine.

The diff pipeline runs sequence_matcher -> change_classifier ->
unified_formatter -> unified_parser. DiffService composes the stages and
receives its configuration via constructor injection.
"""

from diffengine.services.change_classifier import classify_changes
from diffengine.services.diff_service import DiffService, InputTooLargeError
from diffengine.services.sequence_matcher import longest_common_subsequence
from diffengine.services.unified_formatter import (
    CONTEXT_LINES,
    format_deleted_file,
    format_new_file,
    format_unified_diff,
)
from diffengine.services.unified_parser import parse_unified_diff

__all__ = [
    "CONTEXT_LINES",
    "DiffService",
    "InputTooLargeError",
    "classify_changes",
    "format_deleted_file",
    "format_new_file",
    "format_unified_diff",
    "longest_common_subsequence",
    "parse_unified_diff",
]
