from __future__ import annotations

import base64
from dataclasses import dataclass

from Cryptodome.Hash import MD5, SHA1, SHA256, SHA512

from .constants import DIGEST_CHUNK_SIZE


@dataclass(frozen=True)
class ArchiveDigests:
    size: int
    sha1: str
    sha256: str
    base64sha256: str
    base64sha512: str
    md5: str


def file_digests(path: str) -> ArchiveDigests:
    """Hash a finished archive in one streaming pass.

    The base64 forms match what content-addressed stores (e.g. function
    deployment APIs) compare against.
    """
    h_sha1 = SHA1.new()
    h_sha256 = SHA256.new()
    h_sha512 = SHA512.new()
    h_md5 = MD5.new()
    size = 0
    with open(path, "rb") as fh:
        while True:
            block = fh.read(DIGEST_CHUNK_SIZE)
            if not block:
                break
            size += len(block)
            for h in (h_sha1, h_sha256, h_sha512, h_md5):
                h.update(block)
    return ArchiveDigests(
        size=size,
        sha1=h_sha1.hexdigest(),
        sha256=h_sha256.hexdigest(),
        base64sha256=base64.b64encode(h_sha256.digest()).decode("ascii"),
        base64sha512=base64.b64encode(h_sha512.digest()).decode("ascii"),
        md5=h_md5.hexdigest(),
    )
