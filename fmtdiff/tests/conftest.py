import stat
import sys
from pathlib import Path

import pytest


def write_fake_formatter(directory: Path, body: str) -> Path:
    """Create an executable shell script standing in for the formatter"""
    script = directory / "fake-rustfmt"
    script.write_text("#!/bin/sh\n" + body)
    script.chmod(script.stat().st_mode | stat.S_IEXEC | stat.S_IXGRP | stat.S_IXOTH)
    return script


posix_only = pytest.mark.skipif(sys.platform == "win32", reason="uses /bin/sh scripts")


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    src = tmp_path / "main.rs"
    src.write_text("fn main(){\nlet x=1;\n}\n")
    return src


@pytest.fixture
def diff_formatter(tmp_path: Path) -> Path:
    """Fake formatter printing a colored diff report for its last argument"""
    body = (
        'for last; do :; done\n'
        'if [ "$1" != "--write-mode=diff" ]; then echo "bad mode $1" >&2; exit 2; fi\n'
        'printf "\\033[1mDiff of %s:\\033[0m\\n" "$last"\n'
        'printf "Diff at line 1\\n"\n'
        'printf "\\033[31m-fn main(){\\342\\217\\216\\033[0m\\n"\n'
        'printf "\\033[31m-let x=1;\\342\\217\\216\\033[0m\\n"\n'
        'printf "\\033[32m+fn main() {\\342\\217\\216\\033[0m\\n"\n'
        'printf "\\033[32m+    let x = 1;\\342\\217\\216\\033[0m\\n"\n'
        'printf " }\\342\\217\\216\\n"\n'
    )
    return write_fake_formatter(tmp_path, body)
