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

import unittest
from types import SimpleNamespace
from unittest import mock

import typer

from compresskit.cli.core import common as common_module
from compresskit.config import CompressKitConfig, GzipDefaults, UiDefaults
from compresskit.errors import InvalidDataError


class TestCliCoreCommon(unittest.TestCase):
    def test_run_cli_success_path(self) -> None:
        called: list[str] = []

        def _fn() -> None:
            called.append("ok")

        common_module._run_cli(_fn, debug=False)
        self.assertEqual(called, ["ok"])

    def test_run_cli_nonzero_int_raises_typer_exit(self) -> None:
        with self.assertRaises(typer.Exit) as exc_info:
            common_module._run_cli(lambda: 7, debug=False)
        self.assertEqual(exc_info.exception.exit_code, 7)

    @mock.patch("compresskit.cli.core.common.console_err.print")
    def test_run_cli_catches_codec_errors_when_not_debug(
        self,
        print_mock: mock.MagicMock,
    ) -> None:
        def _fail() -> None:
            raise InvalidDataError("bad frame")

        with self.assertRaises(typer.Exit) as exc_info:
            common_module._run_cli(_fail, debug=False)
        self.assertEqual(exc_info.exception.exit_code, 2)
        print_mock.assert_called_once()
        self.assertIn("bad frame", str(print_mock.call_args.args[0]))

    @mock.patch("compresskit.cli.core.common.install_rich_traceback")
    def test_run_cli_debug_reraises(self, install_rich_traceback: mock.MagicMock) -> None:
        with self.assertRaises(FileNotFoundError):
            common_module._run_cli(
                lambda: (_ for _ in ()).throw(FileNotFoundError("missing")),
                debug=True,
            )
        install_rich_traceback.assert_called_once_with(show_locals=True)

    def test_ctx_helpers(self) -> None:
        config = CompressKitConfig(gzip=GzipDefaults(level=3), ui=UiDefaults(quiet=True))
        ctx = SimpleNamespace(obj={"app_config": config, "quiet": False})
        self.assertIs(common_module._ctx_config(ctx), config)
        self.assertTrue(common_module._ctx_quiet(ctx, False))
        self.assertIsNone(common_module._ctx_value(SimpleNamespace(obj=None), "quiet"))


if __name__ == "__main__":
    unittest.main()
