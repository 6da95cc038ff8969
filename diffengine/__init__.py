"""Line-oriented diff engine with a structured, line-addressable change model.

Converts two versions of a text file into chunks of addition, deletion and
context lines, each carrying its old/new line numbers, and reads and writes
the unified diff text used by git.

Usage:
    python -m diffengine <command> [options]
    diffengine <command> [options]

Structure:
    diffengine/
    ├── __main__.py          # Entry point dispatcher
    ├── domain/              # Immutable models (parse-once pattern)
    │   ├── change.py        # ChangeOp edit script, line splitting
    │   └── diff.py          # DiffLine, DiffChunk, DiffResult
    ├── services/            # Diff algorithms and the DiffService facade
    │   ├── sequence_matcher.py
    │   ├── change_classifier.py
    │   ├── unified_formatter.py
    │   ├── unified_parser.py
    │   └── diff_service.py
    ├── infrastructure/      # Config, logging, input and output
    └── commands/            # Thin command orchestrators
        ├── compute_diff.py
        └── parse_diff.py
"""

__version__ = "0.1.0"
