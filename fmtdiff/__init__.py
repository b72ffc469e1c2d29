"""
fmtdiff: formatter diff output -> text edits.

This package provides:
- ANSI color stripping for formatter output
- Diff report interpretation (per-file hunks -> edit operations)
- Formatter subprocess runner and FormatService facade
- In-memory edit application
"""

from fmtdiff.domain.schemas.diff import EditOperation, Hunk
from fmtdiff.domain.schemas.format import OutputMode
from fmtdiff.domain.tools.ansi import strip_color_codes
from fmtdiff.domain.tools.apply_edits import apply_edits
from fmtdiff.domain.tools.diff_interpreter import interpret

__all__ = [
    "EditOperation",
    "Hunk",
    "OutputMode",
    "strip_color_codes",
    "apply_edits",
    "interpret",
]
