from __future__ import annotations

import os
import stat
from typing import Iterator, List, NoReturn, Tuple

from .errors import SourceMissingError, SourceTypeError
from .pathutil import relative_name


def _stat_source(path: str) -> os.stat_result:
    try:
        return os.stat(path)
    except FileNotFoundError as exc:
        raise SourceMissingError(f"could not archive missing file: {path}") from exc


def assert_valid_file(path: str) -> os.stat_result:
    """Stat ``path`` and make sure it is an existing regular file."""
    st = _stat_source(path)
    if stat.S_ISDIR(st.st_mode):
        raise SourceTypeError(f"error reading file: {path} is a directory")
    if not stat.S_ISREG(st.st_mode):
        raise SourceTypeError(f"error reading file: {path} is not a regular file")
    return st


def assert_valid_dir(path: str) -> os.stat_result:
    """Stat ``path`` and make sure it is an existing directory."""
    try:
        st = os.stat(path)
    except FileNotFoundError as exc:
        raise SourceMissingError(f"could not archive missing directory: {path}") from exc
    if not stat.S_ISDIR(st.st_mode):
        raise SourceTypeError(f"error reading directory: {path} is not a directory")
    return st


def read_all(path: str) -> bytes:
    with open(path, "rb") as fh:
        return fh.read()


def _raise(exc: OSError) -> NoReturn:
    raise exc


def walk_files(root: str) -> Iterator[Tuple[str, str, os.stat_result]]:
    """Yield ``(entry_name, fs_path, stat)`` for every regular file under ``root``.

    Results come out sorted by entry name so the order never depends on the
    filesystem. Directories produce nothing; symlinked directories are not
    followed; sockets, fifos and device nodes are skipped. Any error while
    listing a directory or stat'ing a file propagates.
    """
    found: List[Tuple[str, str, os.stat_result]] = []
    for dirpath, _dirs, files in os.walk(root, onerror=_raise):
        for fn in files:
            full = os.path.join(dirpath, fn)
            st = os.stat(full)
            if not stat.S_ISREG(st.st_mode):
                continue
            found.append((relative_name(root, full), full, st))
    found.sort(key=lambda item: item[0])
    yield from found
