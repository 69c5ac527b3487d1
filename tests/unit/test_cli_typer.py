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


import re
import unittest
from unittest import mock

from typer.testing import CliRunner

from ecoji.cli import app
from ecoji.config.installer import CONFIG_ENV, DEFAULT_CONFIG_PATH
from tests.test_support import ABC_ENCODED, INPUT_DATA_ENCODED, temp_directory, temp_files

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")


def _strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


class TestCliTyper(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()
        self.env = {CONFIG_ENV: str(DEFAULT_CONFIG_PATH)}

    def _invoke(self, args: list[str], *, input: bytes | None = None):
        return self.runner.invoke(app, args, input=input, env=self.env)

    def test_root_info_commands(self) -> None:
        cases = (
            {"args": ["--help"], "contains": ("--decode", "config", "manpage")},
            {"args": ["--version"], "contains": ("ecoji",)},
        )
        for case in cases:
            with self.subTest(args=case["args"]):
                with mock.patch("ecoji.cli.app.run_startup", return_value=False):
                    result = self._invoke(case["args"])
                self.assertEqual(result.exit_code, 0)
                output = _strip_ansi(result.output)
                for expected in case["contains"]:
                    self.assertIn(expected, output)

    def test_encode_stdin_to_stdout(self) -> None:
        result = self._invoke([], input=b"abc")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout_bytes.decode("utf-8"), ABC_ENCODED)

    def test_decode_stdin_to_stdout(self) -> None:
        for flag in ("-d", "--decode"):
            with self.subTest(flag=flag):
                result = self._invoke([flag], input=INPUT_DATA_ENCODED.encode("utf-8"))
                self.assertEqual(result.exit_code, 0, result.output)
                self.assertEqual(result.stdout_bytes, b"input data")

    def test_empty_input(self) -> None:
        result = self._invoke([], input=b"")
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout_bytes, b"")

    def test_file_input_and_output(self) -> None:
        with temp_files(plain=b"input data") as paths:
            encoded_path = paths["_dir"] / "encoded.txt"
            decoded_path = paths["_dir"] / "decoded.bin"
            result = self._invoke(["-i", str(paths["plain"]), "-o", str(encoded_path)])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertEqual(encoded_path.read_text(encoding="utf-8"), INPUT_DATA_ENCODED)

            result = self._invoke(
                ["-d", "--input", str(encoded_path), "--output", str(decoded_path)]
            )
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertEqual(decoded_path.read_bytes(), b"input data")

    def test_dash_means_standard_streams(self) -> None:
        result = self._invoke(["-i", "-", "-o", "-"], input=b"abc")
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout_bytes.decode("utf-8"), ABC_ENCODED)

    def test_jobs_output_matches_streaming(self) -> None:
        payload = bytes(range(256)) * 3
        streaming = self._invoke([], input=payload)
        for jobs in ("0", "1", "2", "auto"):
            with self.subTest(jobs=jobs):
                result = self._invoke(["--jobs", jobs], input=payload)
                self.assertEqual(result.exit_code, 0, result.output)
                self.assertEqual(result.stdout_bytes, streaming.stdout_bytes)
                decoded = self._invoke(["-d", "-j", jobs], input=result.stdout_bytes)
                self.assertEqual(decoded.stdout_bytes, payload)

    def test_invalid_jobs_is_usage_error(self) -> None:
        for jobs in ("-1", "many"):
            with self.subTest(jobs=jobs):
                result = self._invoke([f"--jobs={jobs}"], input=b"abc")
                self.assertEqual(result.exit_code, 2)
                self.assertIn("--jobs", _strip_ansi(result.output))

    def test_decode_errors_exit_with_message(self) -> None:
        cases = (
            (b"\xfe\xfe\xff\xff", "valid utf8"),
            ("Not emoji data  ".encode("utf-8"), "not a part of the Ecoji alphabet"),
            (ABC_ENCODED[:3].encode("utf-8"), "unexpected end of data"),
        )
        for payload, message in cases:
            for jobs in ("0", "2"):
                with self.subTest(message=message, jobs=jobs):
                    result = self._invoke(["-d", "-j", jobs], input=payload)
                    self.assertEqual(result.exit_code, 2)
                    self.assertIn("Error:", result.output)
                    self.assertIn(message, result.output)

    def test_missing_input_file(self) -> None:
        with temp_directory() as tmp:
            result = self._invoke(["-i", str(tmp / "missing.bin")])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("input file not found", result.output)

    def test_output_directory_is_rejected(self) -> None:
        with temp_directory() as tmp:
            result = self._invoke(["-o", str(tmp)], input=b"abc")
        self.assertEqual(result.exit_code, 2)
        self.assertIn("output path is a directory", result.output)

    def test_verbose_summary(self) -> None:
        result = self._invoke(["--verbose"], input=b"input data")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Encoded 10 bytes into 32 bytes (1 worker)", result.output)

    def test_config_file_enables_verbose(self) -> None:
        with temp_files(config="[ui]\nverbose = true\n") as paths:
            result = self._invoke(
                ["--config", str(paths["config"]), "-d"],
                input=ABC_ENCODED.encode("utf-8"),
            )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Decoded 15 bytes into 3 bytes", result.output)

    def test_missing_config_file_fails_codec(self) -> None:
        with temp_directory() as tmp:
            result = self._invoke(["--config", str(tmp / "missing.toml")], input=b"abc")
        self.assertEqual(result.exit_code, 2)
        self.assertIn("config file not found", result.output)

    def test_invalid_config_value(self) -> None:
        with temp_files(config="[runtime]\njobs = -3\n") as paths:
            result = self._invoke(["--config", str(paths["config"])], input=b"abc")
        self.assertEqual(result.exit_code, 2)
        self.assertIn("runtime.jobs", result.output)

    def test_config_print_path(self) -> None:
        with temp_files(config="[ui]\n") as paths:
            result = self._invoke(["--config", str(paths["config"]), "config", "--print-path"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output.strip(), str(paths["config"]))

    def test_config_editor_runs_command(self) -> None:
        with temp_files(config="[ui]\n") as paths:
            with mock.patch("ecoji.cli.commands.config.subprocess.run") as run_mock:
                result = self._invoke(
                    ["--config", str(paths["config"]), "--quiet", "config", "--editor", "nano -w"]
                )
        self.assertEqual(result.exit_code, 0, result.output)
        run_mock.assert_called_once_with(["nano", "-w", str(paths["config"])], check=False)

    def test_init_config_reports_path(self) -> None:
        with temp_directory() as tmp:
            with mock.patch("ecoji.cli.startup.init_user_config", return_value=tmp / "config.toml"):
                result = self._invoke(["--init-config"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("User config ready at", result.output)

    def test_manpage(self) -> None:
        result = self._invoke(["manpage"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn(".TH ECOJI 1", result.output)
        self.assertIn(".SH NAME", result.output)

    def test_manpage_to_file(self) -> None:
        with temp_directory() as tmp:
            target = tmp / "ecoji.1"
            result = self._invoke(["manpage", "--output", str(target)])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertTrue(target.read_text(encoding="utf-8").startswith(".TH ECOJI 1"))


if __name__ == "__main__":
    unittest.main()
