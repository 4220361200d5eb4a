from __future__ import annotations

import io
import json
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

TESTS_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = TESTS_DIR.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from svgscene import cli


class CLIAcceptanceTests(unittest.TestCase):
    def run_cli(self, argv: list[str]) -> tuple[int, str, str]:
        stdout = io.StringIO()
        stderr = io.StringIO()
        with mock.patch("sys.stdout", stdout), mock.patch("sys.stderr", stderr):
            code = cli.main(argv)
        return code, stdout.getvalue(), stderr.getvalue()

    def test_requires_subcommand(self) -> None:
        code, _out, err = self.run_cli([])
        self.assertEqual(code, 2)
        self.assertIn("E_ARGS", err)
        self.assertIn("subcommand", err)

    def test_demo_stdout(self) -> None:
        code, out, err = self.run_cli(["demo", "--stdout", "--depth", "1", "--size", "50"])
        self.assertEqual(code, 0, err)
        self.assertTrue(out.startswith('<svg width="50" height="50" xmlns="http://www.w3.org/2000/svg">\n'))
        self.assertTrue(out.endswith("</svg>\n"))
        self.assertEqual(out.count("<polygon"), 3)

    def test_demo_writes_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            target = Path(td) / "out.svg"
            code, out, err = self.run_cli(["demo", "--depth", "2", "-o", str(target)])
            self.assertEqual(code, 0, err)
            self.assertIn("Wrote", out)
            text = target.read_text(encoding="utf-8")
            self.assertEqual(text.count("<polygon"), 9)

    def test_demo_default_output_path(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            cwd = os.getcwd()
            os.chdir(td)
            try:
                code, _out, err = self.run_cli(["demo", "--depth", "0"])
            finally:
                os.chdir(cwd)
            self.assertEqual(code, 0, err)
            self.assertTrue((Path(td) / cli.DEFAULT_OUTPUT).exists())

    def test_stdout_and_output_conflict(self) -> None:
        code, _out, err = self.run_cli(["demo", "--stdout", "-o", "x.svg"])
        self.assertEqual(code, 2)
        self.assertIn("E_ARGS", err)
        self.assertIn("mutually exclusive", err)

    def test_negative_depth(self) -> None:
        code, _out, err = self.run_cli(["demo", "--stdout", "--depth", "-1"])
        self.assertEqual(code, 2)
        self.assertIn("error[E_ARGS]: --depth must be >= 0", err)
        self.assertIn("hint:", err)

    def test_json_error_format(self) -> None:
        code, _out, err = self.run_cli(["--error-format", "json", "demo", "--size", "0", "--stdout"])
        self.assertEqual(code, 2)
        payload = json.loads(err.strip())
        self.assertFalse(payload["ok"])
        self.assertEqual(payload["code"], "E_ARGS")

    def test_unknown_subcommand(self) -> None:
        code, _out, err = self.run_cli(["paint"])
        self.assertEqual(code, 2)
        self.assertIn("E_ARGS", err)

    def test_write_failure_reported(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            code, _out, err = self.run_cli(["demo", "--depth", "0", "-o", td])
            self.assertEqual(code, 4)
            self.assertIn("E_IO_WRITE", err)


if __name__ == "__main__":
    unittest.main()
