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

"""Length-prefixed GZIP frames.

Frame layout::

    [uint32 little-endian: original length][gzip stream]

The prefix records the size of the uncompressed payload so the reader can
check the decoded size against it.
"""

from __future__ import annotations

import gzip
import io
import zlib
from collections.abc import Callable
from typing import BinaryIO, TypeVar, Union

from ..errors import InvalidArgumentError, InvalidDataError, require, require_callable

LENGTH_PREFIX_SIZE = 4
MAX_FRAME_LENGTH = (1 << 32) - 1
DEFAULT_LEVEL = 9

_READ_CHUNK_SIZE = 64 * 1024

_T = TypeVar("_T")

FrameSource = Union[bytes, bytearray, memoryview, BinaryIO]


def compress(data: bytes | bytearray | memoryview, *, level: int = DEFAULT_LEVEL) -> bytes:
    require(data, "data")
    raw = _as_bytes(data, name="data")
    if len(raw) > MAX_FRAME_LENGTH:
        raise InvalidArgumentError(
            f"data exceeds MAX_FRAME_LENGTH ({MAX_FRAME_LENGTH}): {len(raw)} bytes"
        )
    validate_level(level, field="level")
    prefix = len(raw).to_bytes(LENGTH_PREFIX_SIZE, "little")
    return prefix + gzip.compress(raw, compresslevel=level, mtime=0)


def compress_object(
    value: _T,
    serialize: Callable[[_T], bytes],
    *,
    level: int = DEFAULT_LEVEL,
) -> bytes:
    require_callable(serialize, "serialize")
    return compress(serialize(value), level=level)


def decompress(source: FrameSource) -> bytes:
    """Decode one frame from a bytes-like buffer or a readable binary stream.

    When ``source`` is a stream it is left open and positioned somewhere after
    the frame; the GZIP reader may buffer ahead of the last byte it needs.
    """
    require(source, "source")
    stream = _open_source(source)
    length = _read_length(stream)
    return _read_payload(stream, length)


def decompress_object(source: FrameSource, deserialize: Callable[[bytes], _T]) -> _T:
    require_callable(deserialize, "deserialize")
    return deserialize(decompress(source))


def read_frame_length(source: FrameSource) -> int:
    """Return the declared original length without decoding the payload.

    Consumes the 4 prefix bytes when ``source`` is a stream.
    """
    require(source, "source")
    return _read_length(_open_source(source))


def validate_level(level: object, *, field: str) -> int:
    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidArgumentError(f"{field} must be an integer between 0 and 9")
    if not 0 <= level <= 9:
        raise InvalidArgumentError(f"{field} must be between 0 and 9, got {level}")
    return level


def _as_bytes(data: object, *, name: str) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise InvalidArgumentError(f"{name} must be bytes-like, got {type(data).__name__}")


def _open_source(source: object) -> BinaryIO:
    if isinstance(source, (bytes, bytearray, memoryview)):
        return io.BytesIO(bytes(source))
    if callable(getattr(source, "read", None)):
        return source  # type: ignore[return-value]
    raise InvalidArgumentError(
        f"source must be bytes-like or a readable stream, got {type(source).__name__}"
    )


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = b""
    while len(data) < size:
        chunk = stream.read(size - len(data))
        if not chunk:
            break
        data += chunk
    return data


def _read_length(stream: BinaryIO) -> int:
    prefix = _read_exact(stream, LENGTH_PREFIX_SIZE)
    if len(prefix) != LENGTH_PREFIX_SIZE:
        raise InvalidDataError(
            f"frame too short: expected {LENGTH_PREFIX_SIZE} prefix bytes, got {len(prefix)}"
        )
    return int.from_bytes(prefix, "little")


def _read_payload(stream: BinaryIO, length: int) -> bytes:
    if length == 0:
        _read_empty_member(stream)
        return b""
    chunks: list[bytes] = []
    filled = 0
    try:
        with gzip.GzipFile(fileobj=stream, mode="rb") as decoder:
            # A single read may return fewer bytes than requested.
            while filled < length:
                chunk = decoder.read(min(length - filled, _READ_CHUNK_SIZE))
                if not chunk:
                    raise InvalidDataError(
                        f"gzip stream ended after {filled} of {length} declared bytes"
                    )
                chunks.append(chunk)
                filled += len(chunk)
    except (gzip.BadGzipFile, zlib.error, EOFError) as exc:
        raise InvalidDataError(f"invalid gzip payload: {exc}") from exc
    return b"".join(chunks)


def _read_empty_member(stream: BinaryIO) -> None:
    # GzipFile would go on to parse whatever follows the member as a new one.
    decoder = zlib.decompressobj(wbits=16 + zlib.MAX_WBITS)
    try:
        while not decoder.eof:
            chunk = stream.read(_READ_CHUNK_SIZE)
            if not chunk:
                raise InvalidDataError("gzip stream ended before the end of the member")
            if decoder.decompress(chunk, 1):
                raise InvalidDataError("gzip stream is longer than the declared length 0")
    except zlib.error as exc:
        raise InvalidDataError(f"invalid gzip payload: {exc}") from exc
