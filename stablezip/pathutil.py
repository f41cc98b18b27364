from __future__ import annotations

import os

from .errors import EntryNameError


def norm_path(p: str) -> str:
    """Normalize entry names to a canonical forward-slash form.

    Rules:
    - Convert backslashes to slashes
    - Strip leading/trailing slashes
    - Remove empty and '.' segments
    - Reject '..' segments and names that end up empty
    """
    raw = p
    p = p.replace("\\", "/").strip("/")
    parts = [q for q in p.split("/") if q not in ("", ".")]
    for q in parts:
        if q == "..":
            raise EntryNameError(f"entry name may not contain '..': {raw!r}")
    if not parts:
        raise EntryNameError(f"entry name is empty: {raw!r}")
    return "/".join(parts)


def relative_name(root: str, path: str) -> str:
    """Entry name for ``path`` relative to the directory ``root``."""
    try:
        rel = os.path.relpath(path, root)
    except ValueError as exc:  # e.g. different drives on Windows
        raise EntryNameError(f"error relativizing file for archival: {exc}") from exc
    return norm_path(rel.replace(os.sep, "/"))
