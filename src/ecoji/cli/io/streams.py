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

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

import click


def _is_std_stream(path: str | None) -> bool:
    return path is None or path == "-"


@contextmanager
def open_input(path: str | None) -> Iterator[BinaryIO]:
    if _is_std_stream(path):
        yield click.get_binary_stream("stdin")
        return
    source = Path(path).expanduser()
    if not source.exists():
        raise FileNotFoundError(f"input file not found: {source}")
    if not source.is_file():
        raise ValueError(f"input path is not a file: {source}")
    with source.open("rb") as handle:
        yield handle


@contextmanager
def open_output(path: str | None) -> Iterator[BinaryIO]:
    if _is_std_stream(path):
        stream = click.get_binary_stream("stdout")
        try:
            yield stream
        finally:
            stream.flush()
        return
    target = Path(path).expanduser()
    if target.is_dir():
        raise ValueError(f"output path is a directory: {target}")
    with target.open("wb") as handle:
        yield handle
