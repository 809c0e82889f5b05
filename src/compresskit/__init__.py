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
"""Length-prefixed GZIP frames and ZIP bundles."""

from .archive import (
    FileEntry,
    build_to_memory,
    build_to_memory_async,
    build_to_stream,
    build_to_stream_async,
)
from .encoding import (
    LENGTH_PREFIX_SIZE,
    MAX_FRAME_LENGTH,
    compress,
    compress_object,
    compress_text,
    decompress,
    decompress_object,
    decompress_text,
    read_frame_length,
)
from .errors import CompressKitError, InvalidArgumentError, InvalidDataError
from .serializers import (
    CBOR_SERIALIZER,
    JSON_SERIALIZER,
    TEXT_SERIALIZER,
    Serializer,
    get_serializer,
)

__all__ = [
    "CBOR_SERIALIZER",
    "CompressKitError",
    "FileEntry",
    "InvalidArgumentError",
    "InvalidDataError",
    "JSON_SERIALIZER",
    "LENGTH_PREFIX_SIZE",
    "MAX_FRAME_LENGTH",
    "Serializer",
    "TEXT_SERIALIZER",
    "build_to_memory",
    "build_to_memory_async",
    "build_to_stream",
    "build_to_stream_async",
    "compress",
    "compress_object",
    "compress_text",
    "decompress",
    "decompress_object",
    "decompress_text",
    "get_serializer",
    "read_frame_length",
]
