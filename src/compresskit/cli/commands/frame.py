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

import functools
import sys
from pathlib import Path

import typer

from ...encoding.gzip_frame import LENGTH_PREFIX_SIZE, compress, decompress, read_frame_length
from ..core.common import _ctx_config, _ctx_quiet, _ctx_value, _run_cli
from ..ui import build_kv_table, console, print_completion_panel

FRAME_SUFFIX = ".gzf"

_COMPRESS_HELP = (
    "Compress a file into a length-prefixed GZIP frame.\n\n"
    "Examples:\n"
    "  compresskit compress notes.txt              # writes notes.txt.gzf\n"
    "  compresskit compress notes.txt -o out.gzf\n"
    "  cat notes.txt | compresskit compress - -o notes.gzf"
)
_DECOMPRESS_HELP = (
    "Decompress a length-prefixed GZIP frame.\n\n"
    "Examples:\n"
    "  compresskit decompress notes.txt.gzf        # writes notes.txt\n"
    "  compresskit decompress notes.gzf -o -       # write to stdout"
)
_INFO_HELP = "Show the declared length and size of a frame without writing anything."


def register(app: typer.Typer) -> None:
    app.command("compress", help=_COMPRESS_HELP)(compress_command)
    app.command("decompress", help=_DECOMPRESS_HELP)(decompress_command)
    app.command("info", help=_INFO_HELP)(info_command)


def _read_input(path: Path) -> bytes:
    if str(path) == "-":
        return sys.stdin.buffer.read()
    return path.read_bytes()


def _write_output(path: Path | None, data: bytes) -> str:
    if path is None or str(path) == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return "stdout"
    path.write_bytes(data)
    return str(path)


def _default_compress_output(input_path: Path) -> Path | None:
    if str(input_path) == "-":
        return None
    return input_path.with_name(input_path.name + FRAME_SUFFIX)


def _default_decompress_output(input_path: Path) -> Path:
    if input_path.suffix == FRAME_SUFFIX:
        return input_path.with_suffix("")
    return input_path.with_name(input_path.name + ".out")


def _run_compress(*, input_path: Path, output: Path | None, level: int, quiet: bool) -> None:
    data = _read_input(input_path)
    framed = compress(data, level=level)
    target = output if output is not None else _default_compress_output(input_path)
    written_to = _write_output(target, framed)
    if written_to != "stdout":
        print_completion_panel(
            "Compressed",
            [f"Saved to {written_to}", f"{len(data)} bytes -> {len(framed)} bytes"],
            quiet=quiet,
        )


def _run_decompress(*, input_path: Path, output: Path | None, quiet: bool) -> None:
    with input_path.open("rb") as handle:
        data = decompress(handle)
    target = output if output is not None else _default_decompress_output(input_path)
    written_to = _write_output(target, data)
    if written_to != "stdout":
        print_completion_panel(
            "Decompressed",
            [f"Saved to {written_to}", f"{len(data)} bytes"],
            quiet=quiet,
        )


def _run_info(*, input_path: Path, verify: bool) -> None:
    frame_size = input_path.stat().st_size
    with input_path.open("rb") as handle:
        declared = read_frame_length(handle)
    payload_size = frame_size - LENGTH_PREFIX_SIZE
    ratio = f"{declared / payload_size:.2f}" if payload_size > 0 else "n/a"
    rows = [
        ("File", str(input_path)),
        ("Declared length", f"{declared} bytes"),
        ("Frame size", f"{frame_size} bytes"),
        ("Ratio", ratio),
    ]
    if verify:
        with input_path.open("rb") as handle:
            decompress(handle)
        rows.append(("Verified", "yes"))
    console.print(build_kv_table(rows, title="Frame"))


def compress_command(
    ctx: typer.Context,
    input_path: Path = typer.Argument(..., help="File to compress ('-' reads stdin)."),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path (default: INPUT.gzf, '-' writes stdout).",
    ),
    level: int | None = typer.Option(
        None,
        "--level",
        "-l",
        min=0,
        max=9,
        help="GZIP level 0-9 (default from config: 9).",
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress the summary panel."),
) -> None:
    config = _ctx_config(ctx)
    _run_cli(
        functools.partial(
            _run_compress,
            input_path=input_path,
            output=output,
            level=config.gzip.level if level is None else level,
            quiet=_ctx_quiet(ctx, quiet),
        ),
        debug=bool(_ctx_value(ctx, "debug")),
    )


def decompress_command(
    ctx: typer.Context,
    input_path: Path = typer.Argument(..., help="Frame file to decompress."),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path (default: INPUT without .gzf, '-' writes stdout).",
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress the summary panel."),
) -> None:
    _run_cli(
        functools.partial(
            _run_decompress,
            input_path=input_path,
            output=output,
            quiet=_ctx_quiet(ctx, quiet),
        ),
        debug=bool(_ctx_value(ctx, "debug")),
    )


def info_command(
    ctx: typer.Context,
    input_path: Path = typer.Argument(..., help="Frame file to inspect."),
    verify: bool = typer.Option(False, "--verify", help="Also decode the payload."),
) -> None:
    _run_cli(
        functools.partial(_run_info, input_path=input_path, verify=verify),
        debug=bool(_ctx_value(ctx, "debug")),
    )
