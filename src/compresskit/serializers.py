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

"""Ready-made serializer pairs for ``compress_object`` / ``decompress_object``."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import cbor2

from .encoding.gzip_frame import DEFAULT_LEVEL, FrameSource, compress_object, decompress_object

_T = TypeVar("_T")


@dataclass(frozen=True)
class Serializer(Generic[_T]):
    name: str
    serialize: Callable[[_T], bytes]
    deserialize: Callable[[bytes], _T]

    def compress(self, value: _T, *, level: int = DEFAULT_LEVEL) -> bytes:
        return compress_object(value, self.serialize, level=level)

    def decompress(self, source: FrameSource) -> _T:
        return decompress_object(source, self.deserialize)


def _json_dumps(value: Any) -> bytes:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def _json_loads(data: bytes) -> Any:
    return json.loads(data.decode("utf-8"))


def _cbor_dumps(value: Any) -> bytes:
    return cbor2.dumps(value, canonical=True)


def _text_dumps(value: str) -> bytes:
    return value.encode("utf-8")


def _text_loads(data: bytes) -> str:
    return data.decode("utf-8")


JSON_SERIALIZER: Serializer[Any] = Serializer("json", _json_dumps, _json_loads)
CBOR_SERIALIZER: Serializer[Any] = Serializer("cbor", _cbor_dumps, cbor2.loads)
TEXT_SERIALIZER: Serializer[str] = Serializer("text", _text_dumps, _text_loads)

SERIALIZERS: dict[str, Serializer[Any]] = {
    serializer.name: serializer
    for serializer in (JSON_SERIALIZER, CBOR_SERIALIZER, TEXT_SERIALIZER)
}


def get_serializer(name: str) -> Serializer[Any]:
    key = name.strip().lower()
    try:
        return SERIALIZERS[key]
    except KeyError as exc:
        known = ", ".join(sorted(SERIALIZERS))
        raise ValueError(f"unknown serializer: {name} (expected one of: {known})") from exc
