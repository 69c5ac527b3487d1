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


import os
import subprocess
import sys
import tempfile
import unittest
from pathlib import Path

from tests.test_support import ABC_ENCODED, INPUT_DATA_ENCODED, build_cli_env

REPO_ROOT = Path(__file__).resolve().parents[2]
CONFIG_PATH = REPO_ROOT / "src" / "ecoji" / "config" / "config.toml"


def _run_ecoji(
    args: list[str], *, stdin: bytes, tmp_path: Path, module: str = "ecoji"
) -> subprocess.CompletedProcess:
    pythonpath = os.pathsep.join(
        filter(None, [str(REPO_ROOT / "src"), os.environ.get("PYTHONPATH")])
    )
    env = build_cli_env(
        overrides={
            "PYTHONPATH": pythonpath,
            "XDG_CONFIG_HOME": str(tmp_path / "xdg"),
        }
    )
    return subprocess.run(
        [sys.executable, "-m", module, "--config", str(CONFIG_PATH), *args],
        cwd=REPO_ROOT,
        env=env,
        input=stdin,
        capture_output=True,
        check=False,
    )


class TestEndToEndCli(unittest.TestCase):
    def test_encode_and_decode_through_pipes(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp_path = Path(tmpdir)
            encoded = _run_ecoji([], stdin=b"abc", tmp_path=tmp_path)
            self.assertEqual(encoded.returncode, 0, encoded.stderr)
            self.assertEqual(encoded.stdout.decode("utf-8"), ABC_ENCODED)

            decoded = _run_ecoji(
                ["-d"], stdin=INPUT_DATA_ENCODED.encode("utf-8"), tmp_path=tmp_path
            )
            self.assertEqual(decoded.returncode, 0, decoded.stderr)
            self.assertEqual(decoded.stdout, b"input data")

    def test_binary_round_trip_with_workers(self) -> None:
        payload = os.urandom(5 * 4096 * 3 + 7)
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp_path = Path(tmpdir)
            encoded = _run_ecoji(["--jobs", "auto"], stdin=payload, tmp_path=tmp_path)
            self.assertEqual(encoded.returncode, 0, encoded.stderr)
            streaming = _run_ecoji([], stdin=payload, tmp_path=tmp_path)
            self.assertEqual(encoded.stdout, streaming.stdout)

            decoded = _run_ecoji(["-d", "-j", "2"], stdin=encoded.stdout, tmp_path=tmp_path)
            self.assertEqual(decoded.returncode, 0, decoded.stderr)
            self.assertEqual(decoded.stdout, payload)

    def test_module_entrypoints_run_the_cli(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            for module in ("ecoji", "ecoji.cli"):
                with self.subTest(module=module):
                    version = _run_ecoji(
                        ["--version"], stdin=b"", tmp_path=Path(tmpdir), module=module
                    )
                    self.assertEqual(version.returncode, 0, version.stderr)
                    self.assertTrue(version.stdout.decode("utf-8").startswith("ecoji "))

                    encoded = _run_ecoji([], stdin=b"abc", tmp_path=Path(tmpdir), module=module)
                    self.assertEqual(encoded.returncode, 0, encoded.stderr)
                    self.assertEqual(encoded.stdout.decode("utf-8"), ABC_ENCODED)

    def test_invalid_input_exits_with_status_2(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            result = _run_ecoji(["-d"], stdin=b"\xfe\xfe\xff\xff", tmp_path=Path(tmpdir))
        self.assertEqual(result.returncode, 2)
        self.assertIn(b"Error:", result.stderr)
        self.assertEqual(result.stdout, b"")


if __name__ == "__main__":
    unittest.main()
