# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

import io
import tempfile
import unittest
import zipfile
from pathlib import Path
from unittest import mock

from compresskit.archive.builder import (
    FileEntry,
    build_to_memory,
    build_to_memory_async,
    build_to_stream_async,
)
from compresskit.errors import InvalidArgumentError


class TestArchiveBuilderAsync(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self._tmpdir = tempfile.TemporaryDirectory()
        self.root = Path(self._tmpdir.name)

    def tearDown(self) -> None:
        self._tmpdir.cleanup()

    def _write(self, name: str, content: bytes) -> Path:
        path = self.root / name
        path.write_bytes(content)
        return path

    async def test_build_to_memory_async_entries_and_order(self) -> None:
        paths = [
            self._write("second.txt", b"2" * 10),
            self._write("first.txt", b"1"),
            self._write("big.bin", bytes(range(256)) * 1024),
        ]
        buffer = await build_to_memory_async(paths, chunk_size=4096)
        self.assertEqual(buffer.tell(), 0)
        with zipfile.ZipFile(buffer) as archive:
            self.assertEqual(archive.namelist(), ["second.txt", "first.txt", "big.bin"])
            self.assertEqual(archive.read("big.bin"), bytes(range(256)) * 1024)
            self.assertEqual(archive.read("first.txt"), b"1")

    async def test_async_matches_sync_contents(self) -> None:
        paths = [self._write("a.txt", b"alpha" * 100), self._write("b.txt", b"")]
        sync_buffer = build_to_memory(paths)
        async_buffer = await build_to_memory_async(paths)
        with zipfile.ZipFile(sync_buffer) as expected, zipfile.ZipFile(async_buffer) as actual:
            self.assertEqual(expected.namelist(), actual.namelist())
            for name in expected.namelist():
                self.assertEqual(expected.read(name), actual.read(name))

    async def test_build_to_stream_async_named_entry(self) -> None:
        path = self._write("source.txt", b"payload")
        output = io.BytesIO()
        await build_to_stream_async([FileEntry(name="target.txt", path=path)], output)
        self.assertFalse(output.closed)
        output.seek(0)
        with zipfile.ZipFile(output) as archive:
            self.assertEqual(archive.read("target.txt"), b"payload")

    async def test_on_entry_called_in_order(self) -> None:
        paths = [self._write("b.txt", b"B"), self._write("a.txt", b"A")]
        seen: list[str] = []
        await build_to_memory_async(paths, on_entry=lambda entry: seen.append(entry.name))
        self.assertEqual(seen, ["b.txt", "a.txt"])

    async def test_entry_sources_come_from_open_async(self) -> None:
        path = self._write("real.txt", b"on disk")
        opened: list[str] = []

        class _RecordingEntry(FileEntry):
            def open_async(self):
                opened.append(self.name)
                return super().open_async()

        buffer = await build_to_memory_async([_RecordingEntry(name="real.txt", path=path)])
        self.assertEqual(opened, ["real.txt"])
        with zipfile.ZipFile(buffer) as archive:
            self.assertEqual(archive.read("real.txt"), b"on disk")

    async def test_entry_size_is_not_read_with_blocking_stat(self) -> None:
        path = self._write("a.txt", b"A" * 100)
        with mock.patch.object(Path, "stat", side_effect=AssertionError("blocking stat")):
            buffer = await build_to_memory_async([FileEntry(name="a.txt", path=path)])
        with zipfile.ZipFile(buffer) as archive:
            self.assertEqual(archive.read("a.txt"), b"A" * 100)

    async def test_missing_file_raises(self) -> None:
        first = self._write("a.txt", b"A")
        output = io.BytesIO()
        with self.assertRaises(FileNotFoundError):
            await build_to_stream_async([first, self.root / "missing.txt"], output)
        output.seek(0)
        with zipfile.ZipFile(output) as archive:
            self.assertEqual(archive.namelist(), ["a.txt"])

    async def test_invalid_arguments(self) -> None:
        path = self._write("a.txt", b"A")
        with self.assertRaises(InvalidArgumentError):
            await build_to_memory_async(None)  # type: ignore[arg-type]
        with self.assertRaises(InvalidArgumentError):
            await build_to_stream_async([path], None)  # type: ignore[arg-type]
        output = io.BytesIO()
        with self.assertRaises(InvalidArgumentError):
            await build_to_stream_async([path, path], output)
        self.assertEqual(output.getvalue(), b"")


if __name__ == "__main__":
    unittest.main()
