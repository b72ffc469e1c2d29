from __future__ import annotations

import os


def normalize_path(path: str, *, resolve_symlinks: bool = True) -> str:
    """
    비교용 경로 정규화.
    - 절대경로 + normpath (trailing separator 제거 포함)
    - resolve_symlinks=True 이면 realpath
    - case-insensitive 플랫폼(Windows)에서는 normcase
    """
    p = (path or "").strip()
    if not p:
        return ""
    p = os.path.expanduser(p)
    p = os.path.realpath(p) if resolve_symlinks else os.path.abspath(p)
    p = os.path.normpath(p)
    return os.path.normcase(p)


def same_path(a: str, b: str, *, resolve_symlinks: bool = True) -> bool:
    if not a or not b:
        return False
    return normalize_path(a, resolve_symlinks=resolve_symlinks) == normalize_path(
        b, resolve_symlinks=resolve_symlinks
    )
