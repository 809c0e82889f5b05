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

"""Framed GZIP codecs."""

from .gzip_frame import (
    DEFAULT_LEVEL,
    LENGTH_PREFIX_SIZE,
    MAX_FRAME_LENGTH,
    compress,
    compress_object,
    decompress,
    decompress_object,
    read_frame_length,
)
from .text import compress_text, decompress_text

__all__ = [
    "DEFAULT_LEVEL",
    "LENGTH_PREFIX_SIZE",
    "MAX_FRAME_LENGTH",
    "compress",
    "compress_object",
    "compress_text",
    "decompress",
    "decompress_object",
    "decompress_text",
    "read_frame_length",
]
