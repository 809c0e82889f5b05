#!/usr/bin/env python3
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

"""Bundle files into a ZIP archive.

Entries are written strictly in input order, one at a time: a ZIP container
has a single writer appending entries and then the central directory.
The output stream is never closed by the builder.
"""

from __future__ import annotations

import io
import os
import shutil
import zipfile
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Union

import aiofiles
import aiofiles.os

from ..encoding.gzip_frame import validate_level
from ..errors import InvalidArgumentError, require

DEFAULT_ZIP_LEVEL = 9
DEFAULT_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class FileEntry:
    name: str
    path: Path

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> FileEntry:
        resolved = Path(path)
        return cls(name=resolved.name, path=resolved)

    def open(self) -> BinaryIO:
        return self.path.open("rb")

    def open_async(self):
        return aiofiles.open(self.path, "rb")


EntryLike = Union[FileEntry, str, os.PathLike]
EntryCallback = Callable[[FileEntry], None]


def build_to_stream(
    files: Iterable[EntryLike],
    output: BinaryIO,
    *,
    level: int = DEFAULT_ZIP_LEVEL,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    on_entry: EntryCallback | None = None,
) -> None:
    entries = _prepare(files, output, level=level, chunk_size=chunk_size)
    with _open_archive(output, level) as archive:
        for entry in entries:
            with entry.open() as source:
                size = os.fstat(source.fileno()).st_size
                with _open_entry(archive, entry, size) as target:
                    shutil.copyfileobj(source, target, chunk_size)
            if on_entry is not None:
                on_entry(entry)


def build_to_memory(
    files: Iterable[EntryLike],
    *,
    level: int = DEFAULT_ZIP_LEVEL,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    on_entry: EntryCallback | None = None,
) -> io.BytesIO:
    require(files, "files")
    buffer = io.BytesIO()
    build_to_stream(files, buffer, level=level, chunk_size=chunk_size, on_entry=on_entry)
    buffer.seek(0)
    return buffer


async def build_to_stream_async(
    files: Iterable[EntryLike],
    output: BinaryIO,
    *,
    level: int = DEFAULT_ZIP_LEVEL,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    on_entry: EntryCallback | None = None,
) -> None:
    entries = _prepare(files, output, level=level, chunk_size=chunk_size)
    with _open_archive(output, level) as archive:
        for entry in entries:
            async with entry.open_async() as source:
                size = (await aiofiles.os.stat(entry.path)).st_size
                with _open_entry(archive, entry, size) as target:
                    while True:
                        chunk = await source.read(chunk_size)
                        if not chunk:
                            break
                        target.write(chunk)
            if on_entry is not None:
                on_entry(entry)


async def build_to_memory_async(
    files: Iterable[EntryLike],
    *,
    level: int = DEFAULT_ZIP_LEVEL,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    on_entry: EntryCallback | None = None,
) -> io.BytesIO:
    require(files, "files")
    buffer = io.BytesIO()
    await build_to_stream_async(
        files, buffer, level=level, chunk_size=chunk_size, on_entry=on_entry
    )
    buffer.seek(0)
    return buffer


def coerce_entry(item: object) -> FileEntry:
    if item is None:
        raise InvalidArgumentError("file entry must not be None")
    if isinstance(item, FileEntry):
        entry = item
    elif isinstance(item, (str, os.PathLike)):
        entry = FileEntry.from_path(item)
    else:
        raise InvalidArgumentError(
            f"file entry must be a FileEntry or a path, got {type(item).__name__}"
        )
    if not entry.name:
        raise InvalidArgumentError(f"file entry has an empty name: {entry.path}")
    return entry


def validate_entries(files: Iterable[EntryLike]) -> list[FileEntry]:
    """Coerce ``files`` and reject duplicate entry names, without touching the disk."""
    require(files, "files")
    if isinstance(files, (str, bytes, os.PathLike)):
        raise InvalidArgumentError("files must be a collection of entries, not a single path")
    entries = [coerce_entry(item) for item in files]
    seen: set[str] = set()
    for entry in entries:
        if entry.name in seen:
            raise InvalidArgumentError(f"duplicate archive entry name: {entry.name}")
        seen.add(entry.name)
    return entries


def _prepare(
    files: Iterable[EntryLike],
    output: BinaryIO,
    *,
    level: int,
    chunk_size: int,
) -> list[FileEntry]:
    require(files, "files")
    require(output, "output")
    if not callable(getattr(output, "write", None)):
        raise InvalidArgumentError("output must be a writable binary stream")
    validate_level(level, field="level")
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size <= 0:
        raise InvalidArgumentError("chunk_size must be a positive integer")

    return validate_entries(files)


def _open_archive(output: BinaryIO, level: int) -> zipfile.ZipFile:
    return zipfile.ZipFile(
        output,
        mode="w",
        compression=zipfile.ZIP_DEFLATED,
        compresslevel=level,
    )


def _open_entry(archive: zipfile.ZipFile, entry: FileEntry, size: int) -> BinaryIO:
    return archive.open(entry.name, mode="w", force_zip64=size >= zipfile.ZIP64_LIMIT)
