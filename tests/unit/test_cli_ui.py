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


import io
import unittest
from unittest import mock

from compresskit.cli import ui


class TestCliUi(unittest.TestCase):
    def test_completion_panel_lists_items(self) -> None:
        with ui.console.capture() as captured:
            ui.print_completion_panel(
                "Archive ready", ["Saved to out.zip", "Entries: 2"], quiet=False
            )
        text = captured.get()
        self.assertIn("Archive ready", text)
        self.assertIn("Saved to out.zip", text)
        self.assertIn("Entries: 2", text)

    def test_completion_panel_quiet(self) -> None:
        with ui.console.capture() as captured:
            ui.print_completion_panel("Archive ready", ["Saved"], quiet=True)
        self.assertEqual(captured.get(), "")

    def test_theme_styles_resolve(self) -> None:
        for name in ("accent", "success"):
            with self.subTest(style=name):
                self.assertIsNotNone(ui.console.get_style(name))

    def test_terminal_detection_falls_back_to_replaced_stream(self) -> None:
        with mock.patch.object(ui.sys, "__stdout__", None), mock.patch.object(
            ui.sys, "stdout", io.StringIO()
        ):
            self.assertFalse(ui._is_terminal(stderr=False))

    def test_progress_quiet_yields_none(self) -> None:
        with ui.progress(quiet=True) as progress_bar:
            self.assertIsNone(progress_bar)


if __name__ == "__main__":
    unittest.main()
