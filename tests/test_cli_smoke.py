from __future__ import annotations

import contextlib
import io
import json
import tempfile
import types
import unittest
from pathlib import Path
from typing import Any
from unittest.mock import patch

from advent_solutions import years as years_module
from advent_solutions.cli import main as advent_cli
from advent_solutions.cli.common import parse_puzzle_id
from advent_solutions.cli.run_all import run_all
from advent_solutions.errors import MalformedInputError
from advent_solutions.registry import DaySolutions, YearRegistry


def _write_input(data_dir: str, name: str, text: str) -> None:
    Path(data_dir, name).write_text(text, encoding="utf-8")


def _run_cli(argv: list[str]) -> tuple[int, str, str]:
    stdout = io.StringIO()
    stderr = io.StringIO()
    with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
        rc = advent_cli.main(argv)
    return rc, stdout.getvalue(), stderr.getvalue()


class TestPuzzleId(unittest.TestCase):
    def test_parse_full_id(self) -> None:
        self.assertEqual(parse_puzzle_id("2015-1-2"), (2015, 1, 2))
        self.assertEqual(parse_puzzle_id(" 2022-06-1 "), (2022, 6, 1))

    def test_parse_partial_id(self) -> None:
        self.assertEqual(parse_puzzle_id("2015"), (2015, None, None))
        self.assertEqual(parse_puzzle_id("2015-3"), (2015, 3, None))

    def test_parse_invalid_id(self) -> None:
        for raw in ("", "15-1-1", "2015-1-2-3", "2015-a-1", "2015--1"):
            with self.assertRaises(ValueError):
                parse_puzzle_id(raw)


class TestCliSmoke(unittest.TestCase):
    def setUp(self) -> None:
        registry_patch = patch.dict(years_module._REGISTRY, {}, clear=True)
        built_patch = patch.dict(years_module._BUILT, {}, clear=True)
        registry_patch.start()
        built_patch.start()
        self.addCleanup(registry_patch.stop)
        self.addCleanup(built_patch.stop)

    def test_help_and_unknown_command(self) -> None:
        rc, stdout, _ = _run_cli([])
        self.assertEqual(rc, 0)
        self.assertIn("run-all", stdout)
        rc, stdout, _ = _run_cli(["bogus"])
        self.assertEqual(rc, 2)
        self.assertIn("Unknown command: bogus", stdout)

    def test_run_prints_result(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            _write_input(tmp, "2015-01.txt", "(()(()(\n")
            rc, stdout, stderr = _run_cli(["run", "2015-1-1", "--data-dir", tmp])
        self.assertEqual(rc, 0, stderr)
        self.assertEqual(stdout.strip(), "3")

    def test_run_json_output(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            _write_input(tmp, "2022-06.txt", "mjqjpqmgbljsphdztnvjfqwrcgsmlb\n")
            rc, stdout, _ = _run_cli(["run", "2022-6-2", "--data-dir", tmp, "--json"])
        self.assertEqual(rc, 0)
        payload = json.loads(stdout)
        self.assertEqual(payload["result"], 19)
        self.assertTrue(payload["implemented"])

    def test_run_unsolved_day(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            rc, stdout, stderr = _run_cli(["run", "2015-19-1", "--data-dir", tmp])
        self.assertEqual(rc, 1)
        self.assertEqual(stdout, "")
        self.assertIn("No solution exists for day 19 part 1 of 2015", stderr)

    def test_run_unknown_year(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            rc, _, stderr = _run_cli(["run", "1999-1-1", "--data-dir", tmp])
        self.assertEqual(rc, 1)
        self.assertIn("No solution exists for day 1 part 1 of 1999", stderr)

    def test_run_missing_input(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            rc, _, stderr = _run_cli(["run", "2022-1-1", "--data-dir", tmp])
        self.assertEqual(rc, 1)
        self.assertIn("2022 day 1 part 1 failed: puzzle input is required", stderr)

    def test_run_handler_failure(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            _write_input(tmp, "2015-01.txt", "(((\n")
            rc, _, stderr = _run_cli(["run", "2015-1-2", "--data-dir", tmp])
        self.assertEqual(rc, 1)
        self.assertIn("2015 day 1 part 2 failed:", stderr)

    def test_run_requires_day_and_part(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                advent_cli.main(["run", "2015"])
        self.assertEqual(ctx.exception.code, 2)

    def test_run_with_config_limiting_year(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            _write_input(tmp, "2015-02.txt", "2x3x4\n")
            config_path = Path(tmp, "config.json")
            config_path.write_text(
                json.dumps({"years": {"2015": 1}, "data_dir": tmp}), encoding="utf-8"
            )
            rc, _, stderr = _run_cli(["run", "2015-2-1", "--config", str(config_path)])
        self.assertEqual(rc, 1)
        self.assertIn("No solution exists for day 2 part 1 of 2015", stderr)

    def test_invalid_config_exits(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp, "config.json")
            config_path.write_text(json.dumps({"years": "all"}), encoding="utf-8")
            with self.assertRaises(SystemExit) as ctx:
                _run_cli(["status", "--config", str(config_path)])
        self.assertIn("Invalid config", str(ctx.exception.code))

    def test_out_of_range_year_bound_exits_at_startup(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            _write_input(tmp, "2015-01.txt", "(()(()(\n")
            config_path = Path(tmp, "config.json")
            config_path.write_text(
                json.dumps({"years": {"2016": 30, "2017": -4}}), encoding="utf-8"
            )
            with self.assertRaises(SystemExit) as ctx:
                _run_cli(
                    ["run", "2015-1-1", "--config", str(config_path), "--data-dir", tmp]
                )
        self.assertIn("Invalid config", str(ctx.exception.code))

    def test_status_json(self) -> None:
        rc, stdout, _ = _run_cli(["status", "--json"])
        self.assertEqual(rc, 0)
        payload = json.loads(stdout)
        solved = {entry["year"]: entry["days_solved"] for entry in payload["years"]}
        self.assertEqual(solved, {2015: 18, 2022: 8, 2023: 2})

    def test_status_text_for_one_year(self) -> None:
        rc, stdout, _ = _run_cli(["status", "2023"])
        self.assertEqual(rc, 0)
        lines = stdout.splitlines()
        self.assertEqual(lines[0], "2023: 2/2 days solved")
        self.assertEqual(lines[1], "  day  1  * *")

    def test_status_unknown_year(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            _run_cli(["status", "1999"])
        self.assertIn("No solutions found for the year 1999", str(ctx.exception.code))

    def test_run_all_single_year(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            _write_input(tmp, "2023-01.txt", "1abc2\ntreb7uchet\n")
            _write_input(tmp, "2023-02.txt", "Game 1: 3 blue, 4 red\n")
            rc, stdout, _ = _run_cli(
                ["run-all", "2023", "--data-dir", tmp, "--no-progress"]
            )
        self.assertEqual(rc, 0)
        payload = json.loads(stdout)
        self.assertEqual(payload["years"], {"2023": 2})
        self.assertEqual(payload["failures"], [])
        results = {(r["day"], r["part"]): r["result"] for r in payload["results"]}
        self.assertEqual(results[(1, 1)], 89)
        self.assertEqual(results[(2, 1)], 1)
        self.assertEqual(results[(2, 2)], 12)


class TestRunAll(unittest.TestCase):
    def test_collects_results_and_failures(self) -> None:
        def failing(stream: Any) -> int:
            raise MalformedInputError("nothing to parse")

        registry = YearRegistry(
            2099,
            3,
            {
                1: DaySolutions(day=1, part_01=lambda stream: "first"),
                3: DaySolutions(day=3, part_01=lambda stream: stream, part_02=failing),
            },
        )
        with tempfile.TemporaryDirectory() as tmp:
            summary = run_all([registry], tmp)

        self.assertEqual(summary["years"], {"2099": 2})
        self.assertEqual(
            [(r["day"], r["part"], r["result"]) for r in summary["results"]],
            [(1, 1, "first"), (3, 1, None)],
        )
        self.assertEqual(len(summary["failures"]), 1)
        failure = summary["failures"][0]
        self.assertEqual((failure["day"], failure["part"]), (3, 2))
        self.assertEqual(failure["error_type"], "MalformedInputError")

    def test_unreadable_input_is_recorded_and_run_continues(self) -> None:
        registry = YearRegistry(
            2099,
            2,
            {
                1: DaySolutions(day=1, part_01=lambda stream: "never"),
                2: DaySolutions(day=2, part_01=lambda stream: "second"),
            },
        )
        with tempfile.TemporaryDirectory() as tmp:
            Path(tmp, "2099-01.txt").mkdir()
            summary = run_all([registry], tmp)

        self.assertEqual(
            [(r["day"], r["result"]) for r in summary["results"]], [(2, "second")]
        )
        self.assertEqual(len(summary["failures"]), 1)
        failure = summary["failures"][0]
        self.assertEqual((failure["day"], failure["part"]), (1, 1))
        self.assertEqual(failure["error_type"], "IsADirectoryError")

    def test_progress_reporter_sees_every_part(self) -> None:
        seen: list[tuple[str, bool]] = []

        class Recorder:
            def on_part_complete(self, label: str, *, failed: bool) -> None:
                seen.append((label, failed))

            def close(self) -> None:
                seen.append(("closed", False))

        registry = YearRegistry(
            2099, 2, {2: DaySolutions(day=2, part_01=len, part_02=lambda s: 0)}
        )
        with patch(
            "advent_solutions.cli.run_all.build_progress_reporter",
            return_value=Recorder(),
        ):
            with tempfile.TemporaryDirectory() as tmp:
                summary = run_all([registry], tmp, progress_enabled=True)

        self.assertEqual(
            seen, [("2099-2-1", True), ("2099-2-2", False), ("closed", False)]
        )
        self.assertEqual(summary["failures"][0]["error_type"], "HandlerError")


class TestModuleEntryPoint(unittest.TestCase):
    def test_commands_table(self) -> None:
        self.assertEqual(set(advent_cli.COMMANDS), {"run", "status", "run-all"})
        for _desc, handler in advent_cli.COMMANDS.values():
            self.assertIsInstance(handler, types.FunctionType)


if __name__ == "__main__":
    unittest.main()
