"""
Stablezip — reproducible zip archives for build pipelines.

Features:

- One archiver per output path, four ways in: a byte blob, a single file, a
  directory tree, or an in-memory name -> bytes mapping.
- Deterministic entry order: mapping keys and walked paths are sorted before
  anything is written, so the same inputs always give byte-identical output.
- Byte entries carry a fixed 1980-01-01 timestamp; file entries carry the
  mode bits and mtime of their source.
- The zip is always finalized and the output file always closed, even when
  an entry fails half way.
- Digest helpers (sha1/sha256/sha512/md5) for content-addressed artifacts.

Only trusted local inputs are handled; there is no reading, extraction or
appending.
"""

__version__ = "0.1"

__all__ = [
    "constants",
    "errors",
    "pathutil",
    "sources",
    "writer",
    "archiver",
    "hashutil",
]

# Importable programmatic API is available via stablezip.archiver.get_archiver
# and stablezip.writer.ZipArchiver; stablezip.hashutil hashes finished archives.
