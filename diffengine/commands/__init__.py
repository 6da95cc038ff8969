"""CLI command implementations."""

from diffengine.commands.compute_diff import cmd_compute_diff
from diffengine.commands.parse_diff import cmd_parse_diff

__all__ = ["cmd_compute_diff", "cmd_parse_diff"]
