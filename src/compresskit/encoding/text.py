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

from __future__ import annotations

from ..errors import InvalidArgumentError, InvalidDataError, require
from .gzip_frame import DEFAULT_LEVEL, FrameSource, compress, decompress


def compress_text(text: str, *, level: int = DEFAULT_LEVEL) -> bytes:
    require(text, "text")
    if not isinstance(text, str):
        raise InvalidArgumentError(f"text must be a string, got {type(text).__name__}")
    return compress(text.encode("utf-8"), level=level)


def decompress_text(source: FrameSource) -> str:
    raw = decompress(source)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidDataError(f"payload is not valid UTF-8: {exc}") from exc
