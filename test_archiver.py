from __future__ import annotations

import base64
import hashlib
import tempfile
import unittest
import zipfile
from pathlib import Path

from stablezip.archiver import get_archiver
from stablezip.errors import UnsupportedArchiveTypeError
from stablezip.hashutil import file_digests
from stablezip.writer import ZipArchiver


class ArchiverFactoryTests(unittest.TestCase):
    def run_with_tmpdir(self, func):
        with tempfile.TemporaryDirectory() as tmp:
            func(Path(tmp))

    def test_zip_archiver(self):
        def scenario(tmp_path: Path):
            out = tmp_path / "out.zip"
            a = get_archiver("zip", str(out), compresslevel=9)
            self.assertIsInstance(a, ZipArchiver)
            self.assertEqual(a.out_path, str(out))
            self.assertEqual(a.compresslevel, 9)
            a.archive_content(b"hello" * 100, "h.txt")
            with zipfile.ZipFile(out) as zf:
                self.assertEqual(zf.read("h.txt"), b"hello" * 100)

        self.run_with_tmpdir(scenario)

    def test_unknown_type(self):
        for kind in ("tar", "ZIP", ""):
            with self.assertRaises(UnsupportedArchiveTypeError):
                get_archiver(kind, "out.bin")


class DigestTests(unittest.TestCase):
    def run_with_tmpdir(self, func):
        with tempfile.TemporaryDirectory() as tmp:
            func(Path(tmp))

    def test_digests_match_hashlib(self):
        def scenario(tmp_path: Path):
            out = tmp_path / "out.zip"
            ZipArchiver(str(out)).archive_multiple({"b.txt": b"2", "a.txt": b"1"})
            raw = out.read_bytes()
            d = file_digests(str(out))
            self.assertEqual(d.size, len(raw))
            self.assertEqual(d.sha1, hashlib.sha1(raw).hexdigest())
            self.assertEqual(d.sha256, hashlib.sha256(raw).hexdigest())
            self.assertEqual(d.md5, hashlib.md5(raw).hexdigest())
            self.assertEqual(d.base64sha256, base64.b64encode(hashlib.sha256(raw).digest()).decode("ascii"))
            self.assertEqual(d.base64sha512, base64.b64encode(hashlib.sha512(raw).digest()).decode("ascii"))

        self.run_with_tmpdir(scenario)

    def test_same_mapping_same_digest(self):
        def scenario(tmp_path: Path):
            a = tmp_path / "a.zip"
            b = tmp_path / "b.zip"
            ZipArchiver(str(a)).archive_multiple({"x": b"1", "y/z": b"2"})
            ZipArchiver(str(b)).archive_multiple({"y/z": b"2", "x": b"1"})
            self.assertEqual(file_digests(str(a)), file_digests(str(b)))

        self.run_with_tmpdir(scenario)


if __name__ == "__main__":
    unittest.main()
