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

"""Exception types raised by compresskit.

Missing files and stream failures are not wrapped: callers see the builtin
``FileNotFoundError`` / ``OSError`` raised by the file system or the sink.
"""

from __future__ import annotations


class CompressKitError(ValueError):
    """Base class for errors raised by compresskit itself."""


class InvalidArgumentError(CompressKitError):
    """A required argument is missing or has an unusable type or value."""


class InvalidDataError(CompressKitError):
    """Bytes presented for decoding are not a valid frame or GZIP stream."""


def require(value: object, name: str) -> None:
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")


def require_callable(value: object, name: str) -> None:
    require(value, name)
    if not callable(value):
        raise InvalidArgumentError(f"{name} must be callable")
