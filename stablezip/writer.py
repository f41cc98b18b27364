from __future__ import annotations

import os
import stat
import struct
import sys
import time
import zipfile
from dataclasses import dataclass
from typing import BinaryIO, Callable, Iterable, List, Mapping, Optional, Set, Union

from .constants import (
    DEFAULT_METHOD,
    DEFAULT_ENTRY_MODE,
    FIXED_DATE_TIME,
    CREATE_SYSTEM_UNIX,
)
from .errors import EntryCreateError, EntryHeaderError, EntryNameError
from .pathutil import norm_path
from .sources import assert_valid_dir, assert_valid_file, read_all, walk_files


Content = Union[bytes, bytearray, memoryview, str]


def _as_bytes(content: Content) -> bytes:
    if isinstance(content, str):
        return content.encode("utf-8")
    return bytes(content)


def _warn(msg: str) -> None:
    print(f"Warning: {msg}", file=sys.stderr)


def _content_info(name: str) -> zipfile.ZipInfo:
    """Header for an entry that has no filesystem source."""
    info = zipfile.ZipInfo(name, date_time=FIXED_DATE_TIME)
    info.create_system = CREATE_SYSTEM_UNIX
    info.external_attr = (stat.S_IFREG | DEFAULT_ENTRY_MODE) << 16
    info.compress_type = DEFAULT_METHOD
    return info


def _file_info(name: str, st: os.stat_result) -> zipfile.ZipInfo:
    """Header for a file entry: mode bits and mtime come from ``st``."""
    date_time = time.localtime(st.st_mtime)[0:6]
    if not 1980 <= date_time[0] <= 2107:
        raise EntryHeaderError(
            f"error creating file header: {name}: zip can only store timestamps from 1980 to 2107"
        )
    info = zipfile.ZipInfo(name, date_time=date_time)
    info.create_system = CREATE_SYSTEM_UNIX
    info.external_attr = (st.st_mode & 0xFFFF) << 16
    info.compress_type = DEFAULT_METHOD
    return info


@dataclass
class PendingEntry:
    info: zipfile.ZipInfo
    load: Callable[[], bytes]


class ZipArchiver:
    """Writes reproducible zip archives to a single output path.

    Each ``archive_*`` call owns the whole lifecycle: it validates its input,
    truncates ``out_path``, writes the entries and always finalizes the zip
    and closes the file, even when an entry fails. One instance must not be
    used by two calls at the same time.
    """
    def __init__(self, out_path: str, compresslevel: Optional[int] = None):
        self.out_path = out_path
        self.compresslevel = compresslevel
        self.f: Optional[BinaryIO] = None
        self.writer: Optional[zipfile.ZipFile] = None
        self._written: Set[str] = set()

    def open(self):
        if self.writer is not None:
            return
        f = open(self.out_path, "wb")
        try:
            self.writer = zipfile.ZipFile(
                f, "w", compression=DEFAULT_METHOD, compresslevel=self.compresslevel
            )
        except Exception:
            f.close()
            raise
        self.f = f
        self._written = set()

    def close(self):
        """Finalize the zip and close the output file.

        Errors here are reported on stderr and otherwise ignored; an error
        raised by the operation itself always wins.
        """
        if self.writer is not None:
            try:
                self.writer.close()
            except Exception as exc:
                _warn(f"failed to finalize archive {self.out_path}: {exc}")
            self.writer = None
        if self.f is not None:
            try:
                self.f.close()
            except Exception as exc:
                _warn(f"failed to close {self.out_path}: {exc}")
            self.f = None

    def archive_content(self, content: Content, name: str) -> None:
        """Write ``content`` as the single entry ``name``."""
        data = _as_bytes(content)
        entry = PendingEntry(_content_info(norm_path(name)), lambda: data)
        self._write_entries([entry])

    def archive_file(self, fs_path: str) -> None:
        """Write one file, named after its base name."""
        st = assert_valid_file(fs_path)
        data = read_all(fs_path)
        info = _file_info(norm_path(os.path.basename(fs_path)), st)
        self._write_entries([PendingEntry(info, lambda: data)])

    def archive_dir(self, fs_path: str) -> None:
        """Write every regular file under ``fs_path``, named relative to it.

        When ``out_path`` itself lies inside the tree it is left out, so the
        archive never contains a copy of itself.
        """
        assert_valid_dir(fs_path)
        self._write_entries(self._dir_entries(fs_path))

    def archive_multiple(self, content: Mapping[str, Content]) -> None:
        """Write every ``name -> content`` pair, in ascending name order.

        The mapping's own iteration order never reaches the archive, so equal
        mappings always produce byte-identical files.
        """
        by_name = {}
        for raw in content:
            name = norm_path(raw)
            if name in by_name:
                raise EntryNameError(
                    f"entry names {by_name[name]!r} and {raw!r} both map to {name!r}"
                )
            by_name[name] = raw
        entries: List[PendingEntry] = []
        for name in sorted(by_name):
            data = _as_bytes(content[by_name[name]])
            entries.append(PendingEntry(_content_info(name), lambda data=data: data))
        self._write_entries(entries)

    # internals
    def _dir_entries(self, root: str) -> Iterable[PendingEntry]:
        target = os.path.realpath(self.out_path)
        for name, full, st in walk_files(root):
            if os.path.realpath(full) == target:
                continue
            yield PendingEntry(_file_info(name, st), lambda full=full: read_all(full))

    def _write_entries(self, entries: Iterable[PendingEntry]) -> None:
        self.open()
        try:
            for entry in entries:
                self._write_entry(entry)
        finally:
            self.close()

    def _write_entry(self, entry: PendingEntry) -> None:
        if self.writer is None:
            raise RuntimeError("Archive not open")
        name = entry.info.filename
        if name in self._written:
            raise EntryCreateError(f"error creating file inside archive: duplicate entry {name}")
        data = entry.load()
        try:
            self.writer.writestr(entry.info, data, compresslevel=self.compresslevel)
        except struct.error as exc:
            raise EntryHeaderError(f"error creating file header: {name}: {exc}") from exc
        except (ValueError, RuntimeError) as exc:
            raise EntryCreateError(f"error creating file inside archive: {exc}") from exc
        self._written.add(name)
