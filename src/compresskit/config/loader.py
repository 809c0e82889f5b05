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

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from ..archive.builder import DEFAULT_CHUNK_SIZE, DEFAULT_ZIP_LEVEL
from ..encoding.gzip_frame import DEFAULT_LEVEL
from .installer import resolve_config_path


@dataclass(frozen=True)
class GzipDefaults:
    level: int = DEFAULT_LEVEL


@dataclass(frozen=True)
class ZipDefaults:
    level: int = DEFAULT_ZIP_LEVEL
    chunk_size: int = DEFAULT_CHUNK_SIZE


@dataclass(frozen=True)
class UiDefaults:
    quiet: bool = False
    no_color: bool = False


@dataclass(frozen=True)
class CompressKitConfig:
    gzip: GzipDefaults = field(default_factory=GzipDefaults)
    zip: ZipDefaults = field(default_factory=ZipDefaults)
    ui: UiDefaults = field(default_factory=UiDefaults)
    source_path: Path | None = None


def load_config(path: str | Path | None = None) -> CompressKitConfig:
    config_path = resolve_config_path(path)
    if config_path is None:
        return CompressKitConfig()
    data = _load_toml(config_path)
    return parse_config(data, source_path=config_path)


def parse_config(
    data: dict[str, object], *, source_path: Path | None = None
) -> CompressKitConfig:
    gzip_cfg = _get_dict(data, "gzip")
    zip_cfg = _get_dict(data, "zip")
    ui_cfg = _get_dict(data, "ui")
    return CompressKitConfig(
        gzip=GzipDefaults(
            level=_parse_level(gzip_cfg.get("level"), field="gzip.level", default=DEFAULT_LEVEL),
        ),
        zip=ZipDefaults(
            level=_parse_level(zip_cfg.get("level"), field="zip.level", default=DEFAULT_ZIP_LEVEL),
            chunk_size=_parse_positive_int(
                zip_cfg.get("chunk_size"), field="zip.chunk_size", default=DEFAULT_CHUNK_SIZE
            ),
        ),
        ui=UiDefaults(
            quiet=_parse_bool(ui_cfg.get("quiet"), field="ui.quiet", default=False),
            no_color=_parse_bool(ui_cfg.get("no_color"), field="ui.no_color", default=False),
        ),
        source_path=source_path,
    )


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        try:
            return tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ValueError(f"invalid config file {path}: {exc}") from exc


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_level(value: object, *, field: str, default: int) -> int:
    if value is None:
        return default
    parsed = _parse_int_strict(value, field=field)
    if not 0 <= parsed <= 9:
        raise ValueError(f"{field} must be between 0 and 9")
    return parsed


def _parse_positive_int(value: object, *, field: str, default: int) -> int:
    if value is None:
        return default
    parsed = _parse_int_strict(value, field=field)
    if parsed <= 0:
        raise ValueError(f"{field} must be a positive integer")
    return parsed


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"{field} must be a boolean")
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{field} must be a boolean")


def _parse_int_strict(value: object, *, field: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{field} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{field} must be an integer")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError as exc:
            raise ValueError(f"{field} must be an integer") from exc
    raise ValueError(f"{field} must be an integer")
