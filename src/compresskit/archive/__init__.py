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

"""ZIP archive builders."""

from .builder import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_ZIP_LEVEL,
    EntryLike,
    FileEntry,
    build_to_memory,
    build_to_memory_async,
    build_to_stream,
    build_to_stream_async,
    coerce_entry,
    validate_entries,
)

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_ZIP_LEVEL",
    "EntryLike",
    "FileEntry",
    "build_to_memory",
    "build_to_memory_async",
    "build_to_stream",
    "build_to_stream_async",
    "coerce_entry",
    "validate_entries",
]
