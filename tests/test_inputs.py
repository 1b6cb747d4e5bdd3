from __future__ import annotations

import io
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from advent_solutions.errors import MissingInputError
from advent_solutions.inputs import (
    DATA_DIR_ENV,
    input_path,
    open_input,
    read_lines,
    read_text,
    resolve_data_dir,
)


class TestInputs(unittest.TestCase):
    def test_input_path_pads_day(self) -> None:
        self.assertEqual(input_path(2015, 3, "data"), Path("data") / "2015-03.txt")
        self.assertEqual(input_path(2022, 12, "in"), Path("in") / "2022-12.txt")

    def test_missing_file_yields_none(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with open_input(2015, 1, tmp) as stream:
                self.assertIsNone(stream)

    def test_empty_file_yields_stream_at_eof(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            Path(tmp, "2015-01.txt").write_text("", encoding="utf-8")
            with open_input(2015, 1, tmp) as stream:
                self.assertIsNotNone(stream)
                self.assertEqual(stream.read(), "")
            self.assertTrue(stream.closed)

    def test_existing_file_is_closed_after_use(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            Path(tmp, "2023-02.txt").write_text("line one\n", encoding="utf-8")
            with open_input(2023, 2, tmp) as stream:
                self.assertEqual(stream.readline(), "line one\n")
            self.assertTrue(stream.closed)

    def test_resolve_data_dir_precedence(self) -> None:
        with patch.dict(os.environ, {DATA_DIR_ENV: "/from/env"}):
            self.assertEqual(resolve_data_dir("/flag", "/config"), Path("/flag"))
            self.assertEqual(resolve_data_dir(None, "/config"), Path("/from/env"))
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(resolve_data_dir(None, "/config"), Path("/config"))
            self.assertEqual(resolve_data_dir(None, None), Path("data"))

    def test_readers_require_input(self) -> None:
        with self.assertRaises(MissingInputError):
            read_text(None)
        with self.assertRaises(MissingInputError):
            read_lines(None)

    def test_read_lines_drops_blank_lines_by_default(self) -> None:
        text = "a\r\n\nb\n"
        self.assertEqual(read_lines(io.StringIO(text)), ["a", "b"])
        self.assertEqual(read_lines(io.StringIO(text), keep_blank=True), ["a", "", "b"])


if __name__ == "__main__":
    unittest.main()
