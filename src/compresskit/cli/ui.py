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

import sys
from collections.abc import Sequence
from contextlib import contextmanager

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.theme import Theme

THEME = Theme({"accent": "cyan", "success": "green"})


def _is_terminal(*, stderr: bool) -> bool:
    # sys.__stdout__ is None under pythonw; fall back to the replaced stream.
    if stderr:
        stream = sys.__stderr__ or sys.stderr
    else:
        stream = sys.__stdout__ or sys.stdout
    try:
        return bool(stream.isatty())
    except (OSError, ValueError, AttributeError):
        return False


def _build_console(*, stderr: bool) -> Console:
    return Console(stderr=stderr, theme=THEME, force_terminal=_is_terminal(stderr=stderr))


console = _build_console(stderr=False)
console_err = _build_console(stderr=True)


def configure_ui(*, no_color: bool) -> None:
    console.no_color = no_color
    console_err.no_color = no_color


@contextmanager
def progress(*, quiet: bool):
    if quiet:
        yield None
        return
    progress_bar = Progress(
        SpinnerColumn(style="accent"),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=True,
        disable=not _is_terminal(stderr=False),
    )
    with progress_bar:
        yield progress_bar


def build_kv_table(rows: Sequence[tuple[str, str]], *, title: str | None = None) -> Table:
    table = Table(title=title, show_header=False, box=box.SIMPLE, show_lines=False)
    table.add_column("Field", style="bold", no_wrap=True)
    table.add_column("Value")
    for key, value in rows:
        table.add_row(str(key), str(value))
    return table


def _action_list(items: Sequence[str]) -> Table:
    table = Table.grid(padding=(0, 1))
    table.add_column(no_wrap=True)
    table.add_column()
    for item in items:
        table.add_row("[accent]-[/accent]", item)
    return table


def print_completion_panel(title: str, items: Sequence[str], *, quiet: bool) -> None:
    if quiet:
        return
    console.print(
        Panel(
            _action_list(items),
            title=title,
            title_align="left",
            border_style="success",
            box=box.ROUNDED,
        )
    )
