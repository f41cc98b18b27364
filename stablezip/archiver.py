from __future__ import annotations

from typing import Dict, Type

from .constants import ARCHIVE_TYPE_ZIP
from .errors import UnsupportedArchiveTypeError
from .writer import ZipArchiver


_ARCHIVERS: Dict[str, Type[ZipArchiver]] = {
    ARCHIVE_TYPE_ZIP: ZipArchiver,
}


def get_archiver(archive_type: str, out_path: str, **options) -> ZipArchiver:
    """Return an archiver of ``archive_type`` bound to ``out_path``.

    Args:
        archive_type: Container type name; only "zip" is available.
        out_path: File the archiver will (re)create on each call.
        **options: Passed to the archiver constructor (e.g. ``compresslevel``).
    """
    try:
        cls = _ARCHIVERS[archive_type]
    except KeyError:
        raise UnsupportedArchiveTypeError(f"archive type not supported: {archive_type}") from None
    return cls(out_path, **options)
