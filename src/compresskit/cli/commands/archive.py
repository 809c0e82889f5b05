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

import asyncio
import functools
from pathlib import Path

import typer

from ...archive.builder import (
    FileEntry,
    build_to_stream,
    build_to_stream_async,
    validate_entries,
)
from ..core.common import _ctx_config, _ctx_quiet, _ctx_value, _run_cli
from ..ui import print_completion_panel, progress

_ZIP_HELP = (
    "Bundle files into a ZIP archive.\n\n"
    "Each file becomes one entry named after its base name, in the order given.\n\n"
    "Examples:\n"
    "  compresskit zip a.txt b.bin -o bundle.zip\n"
    "  compresskit zip logs/*.log -o logs.zip --async"
)


def register(app: typer.Typer) -> None:
    app.command("zip", help=_ZIP_HELP)(zip_command)


def _run_zip(
    *,
    files: list[Path],
    output: Path,
    level: int,
    chunk_size: int,
    use_async: bool,
    quiet: bool,
) -> None:
    entries = validate_entries(files)
    with progress(quiet=quiet) as progress_bar:
        task_id = (
            progress_bar.add_task("Adding files...", total=len(entries))
            if progress_bar is not None
            else None
        )

        def _advance(entry: FileEntry) -> None:
            if progress_bar is not None and task_id is not None:
                progress_bar.update(task_id, advance=1, description=f"Added {entry.name}")

        try:
            with output.open("wb") as handle:
                if use_async:
                    asyncio.run(
                        build_to_stream_async(
                            entries, handle, level=level, chunk_size=chunk_size, on_entry=_advance
                        )
                    )
                else:
                    build_to_stream(
                        entries, handle, level=level, chunk_size=chunk_size, on_entry=_advance
                    )
        except BaseException:
            # A failed build leaves an incomplete archive behind.
            output.unlink(missing_ok=True)
            raise
    print_completion_panel(
        "Archive ready",
        [f"Saved to {output}", f"Entries: {len(entries)}"],
        quiet=quiet,
    )


def zip_command(
    ctx: typer.Context,
    files: list[Path] = typer.Argument(..., help="Files to add, in archive order."),
    output: Path = typer.Option(..., "--output", "-o", help="Archive path to write."),
    level: int | None = typer.Option(
        None,
        "--level",
        "-l",
        min=0,
        max=9,
        help="DEFLATE level 0-9 (default from config: 9).",
    ),
    use_async: bool = typer.Option(
        False,
        "--async",
        help="Read input files with the asynchronous builder.",
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress progress output."),
) -> None:
    config = _ctx_config(ctx)
    _run_cli(
        functools.partial(
            _run_zip,
            files=files,
            output=output,
            level=config.zip.level if level is None else level,
            chunk_size=config.zip.chunk_size,
            use_async=use_async,
            quiet=_ctx_quiet(ctx, quiet),
        ),
        debug=bool(_ctx_value(ctx, "debug")),
    )
