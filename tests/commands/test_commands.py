"""Tests for the CLI commands and entry point.

Tests cover:
- compute-diff with both versions, new files and deleted files
- parse-diff from files and stdin
- Output formats
- Error exit codes for missing files, bad config and oversize input
"""

from __future__ import annotations

import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest.mock import patch

from diffengine.__main__ import main
from diffengine.commands.compute_diff import cmd_compute_diff
from diffengine.commands.parse_diff import cmd_parse_diff

SAMPLE_DIFF = (
    "diff --git a/app.py b/app.py\n"
    "--- a/app.py\n"
    "+++ b/app.py\n"
    "@@ -1,3 +1,3 @@\n"
    " a\n"
    "-b\n"
    "+B\n"
    " c\n"
)


def _stdin(text: str) -> io.TextIOWrapper:
    return io.TextIOWrapper(io.BytesIO(text.encode("utf-8")), encoding="utf-8")


class _CommandTestCase(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def write(self, name: str, text: str) -> str:
        path = self.tmp / name
        path.write_text(text)
        return str(path)

    def run_command(self, func, **kwargs) -> tuple[int, str, str]:
        stdout = io.StringIO()
        stderr = io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            code = func(**kwargs)
        return code, stdout.getvalue(), stderr.getvalue()


# ------------------------------------------------------------------
# Tests: compute-diff
# ------------------------------------------------------------------


class TestComputeDiffCommand(_CommandTestCase):

    def test_json_output(self):
        old = self.write("old.py", "a\nb\nc\n")
        new = self.write("new.py", "a\nB\nc\n")
        code, out, _ = self.run_command(cmd_compute_diff, old_file=old, new_file=new, file_id="app.py")

        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertEqual(data["file"], "app.py")
        self.assertEqual(data["stats"], {"additions": 1, "deletions": 1})
        self.assertEqual(len(data["chunks"]), 1)

    def test_file_id_defaults_to_new_path(self):
        old = self.write("old.py", "a\n")
        new = self.write("new.py", "b\n")
        _, out, _ = self.run_command(cmd_compute_diff, old_file=old, new_file=new)
        self.assertEqual(json.loads(out)["file"], new)

    def test_new_file(self):
        new = self.write("new.py", "a\nb\nc\n")
        code, out, _ = self.run_command(cmd_compute_diff, new_file=new)
        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertEqual(data["stats"], {"additions": 3, "deletions": 0})
        self.assertEqual(data["chunks"][0]["old_start"], 0)

    def test_deleted_file(self):
        old = self.write("old.py", "a\nb\n")
        code, out, _ = self.run_command(cmd_compute_diff, old_file=old)
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out)["stats"], {"additions": 0, "deletions": 2})

    def test_unified_output(self):
        old = self.write("old.py", "a\nb\nc\n")
        new = self.write("new.py", "a\nB\nc\n")
        code, out, _ = self.run_command(
            cmd_compute_diff, old_file=old, new_file=new, output_format="unified"
        )
        self.assertEqual(code, 0)
        self.assertEqual(out, "@@ -1,3 +1,3 @@\n a\n-b\n+B\n c\n")

    def test_unified_output_for_new_file(self):
        new = self.write("new.py", "a\nb\n")
        code, out, _ = self.run_command(cmd_compute_diff, new_file=new, output_format="unified")
        self.assertEqual(code, 0)
        self.assertEqual(out, "@@ -0,0 +1,2 @@ New file\n+a\n+b\n")

    def test_unified_output_for_deleted_file(self):
        old = self.write("old.py", "a\nb\n")
        code, out, _ = self.run_command(cmd_compute_diff, old_file=old, output_format="unified")
        self.assertEqual(code, 0)
        self.assertEqual(out, "@@ -1,2 +0,0 @@ Deleted file\n-a\n-b\n")

    def test_text_output_without_changes(self):
        old = self.write("old.py", "same\n")
        code, out, _ = self.run_command(
            cmd_compute_diff, old_file=old, new_file=old, file_id="same.py", output_format="text"
        )
        self.assertEqual(code, 0)
        self.assertIn("same.py: no changes", out)

    def test_requires_a_file(self):
        code, _, err = self.run_command(cmd_compute_diff)
        self.assertEqual(code, 1)
        self.assertIn("--old-file or --new-file", err)

    def test_missing_file(self):
        code, _, err = self.run_command(
            cmd_compute_diff, old_file=str(self.tmp / "nope.py"), new_file=self.write("new.py", "a")
        )
        self.assertEqual(code, 1)
        self.assertIn("Input file not found", err)

    def test_input_too_large(self):
        config = self.write("engine.yaml", "max_input_lines: 2\n")
        new = self.write("new.py", "a\nb\nc\n")
        code, _, err = self.run_command(cmd_compute_diff, new_file=new, config_file=config)
        self.assertEqual(code, 1)
        self.assertIn("exceeds the limit of 2 lines", err)

    def test_invalid_config(self):
        config = self.write("engine.yaml", "context_lines: -1\n")
        new = self.write("new.py", "a\n")
        code, _, err = self.run_command(cmd_compute_diff, new_file=new, config_file=config)
        self.assertEqual(code, 1)
        self.assertIn("context_lines", err)

    def test_context_lines_from_config(self):
        config = self.write("engine.yaml", "context_lines: 0\n")
        old = self.write("old.py", "a\nb\nc\n")
        new = self.write("new.py", "a\nB\nc\n")
        _, out, _ = self.run_command(
            cmd_compute_diff, old_file=old, new_file=new, config_file=config, output_format="unified"
        )
        self.assertEqual(out, "@@ -2,1 +2,1 @@\n-b\n+B\n")


# ------------------------------------------------------------------
# Tests: parse-diff
# ------------------------------------------------------------------


class TestParseDiffCommand(_CommandTestCase):

    def test_from_file(self):
        path = self.write("change.diff", SAMPLE_DIFF)
        code, out, _ = self.run_command(cmd_parse_diff, input_file=path, file_id="app.py")

        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertEqual(data["file"], "app.py")
        lines = data["chunks"][0]["lines"]
        self.assertEqual([line["type"] for line in lines], ["context", "deletion", "addition", "context"])
        self.assertEqual(lines[2]["new_line_number"], 2)

    def test_from_stdin(self):
        with patch("sys.stdin", _stdin(SAMPLE_DIFF)):
            code, out, _ = self.run_command(cmd_parse_diff)
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out)["stats"], {"additions": 1, "deletions": 1})

    def test_stdin_keeps_line_endings_like_file_input(self):
        crlf_diff = SAMPLE_DIFF.replace("\n", "\r\n")
        path = self.tmp / "crlf.diff"
        path.write_bytes(crlf_diff.encode("utf-8"))

        _, from_file, _ = self.run_command(cmd_parse_diff, input_file=str(path), file_id="app.py")
        with patch("sys.stdin", _stdin(crlf_diff)):
            _, from_stdin, _ = self.run_command(cmd_parse_diff, file_id="app.py")

        self.assertEqual(from_stdin, from_file)
        lines = json.loads(from_stdin)["chunks"][0]["lines"]
        self.assertEqual(lines[1]["content"], "b\r")

    def test_text_output(self):
        path = self.write("change.diff", SAMPLE_DIFF)
        code, out, _ = self.run_command(cmd_parse_diff, input_file=path, output_format="text")
        self.assertEqual(code, 0)
        self.assertIn("Chunk 1: @@ -1,3 +1,3 @@", out)
        self.assertIn("Changes: +1 -1", out)

    def test_empty_input(self):
        path = self.write("empty.diff", "")
        code, out, _ = self.run_command(cmd_parse_diff, input_file=path, file_id="x")
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out), {"file": "x", "chunks": [], "stats": {"additions": 0, "deletions": 0}})

    def test_missing_file(self):
        code, _, err = self.run_command(cmd_parse_diff, input_file=str(self.tmp / "missing.diff"))
        self.assertEqual(code, 1)
        self.assertIn("Input file not found", err)


# ------------------------------------------------------------------
# Tests: entry point
# ------------------------------------------------------------------


class TestMain(_CommandTestCase):

    def test_no_command_prints_help(self):
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            code = main([])
        self.assertEqual(code, 1)
        self.assertIn("compute-diff", stdout.getvalue())

    def test_parse_diff_dispatch(self):
        path = self.write("change.diff", SAMPLE_DIFF)
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            code = main(["parse-diff", "--input-file", path, "--file-id", "app.py"])
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(stdout.getvalue())["file"], "app.py")

    def test_compute_diff_dispatch(self):
        old = self.write("old.py", "a\n")
        new = self.write("new.py", "a\nb\n")
        config = self.write("engine.yaml", "context_lines: 3\n")
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            code = main(["--config", config, "compute-diff", "--old-file", old, "--new-file", new, "--format", "unified"])
        self.assertEqual(code, 0)
        self.assertEqual(stdout.getvalue(), "@@ -1,1 +1,2 @@\n a\n+b\n")


if __name__ == "__main__":
    unittest.main()
