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

from compresskit.encoding.gzip_frame import compress, read_frame_length
from compresskit.encoding.text import compress_text, decompress_text
from compresskit.errors import InvalidArgumentError, InvalidDataError


class TestTextCodec(unittest.TestCase):
    def test_roundtrip_unicode(self) -> None:
        for text in ("", "hello", "grüße, 世界 🚀" * 20):
            with self.subTest(text=text[:10]):
                self.assertEqual(decompress_text(compress_text(text)), text)

    def test_prefix_counts_utf8_bytes(self) -> None:
        text = "é" * 10
        self.assertEqual(read_frame_length(compress_text(text)), 20)

    def test_decompress_from_stream(self) -> None:
        stream = io.BytesIO(compress_text("streamed"))
        self.assertEqual(decompress_text(stream), "streamed")

    def test_rejects_none_and_bytes(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            compress_text(None)  # type: ignore[arg-type]
        with self.assertRaises(InvalidArgumentError):
            compress_text(b"bytes")  # type: ignore[arg-type]
        with self.assertRaises(InvalidArgumentError):
            decompress_text(None)  # type: ignore[arg-type]

    def test_invalid_utf8_payload(self) -> None:
        with self.assertRaises(InvalidDataError):
            decompress_text(compress(b"\xff\xfe\xfd"))


if __name__ == "__main__":
    unittest.main()
