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

from dataclasses import dataclass
from typing import Literal


@dataclass
class CodecArgs:
    """Typed container for the root encode/decode invocation."""

    decode: bool = False
    input: str | None = None
    output: str | None = None
    jobs: int | Literal["auto"] | None = None
    quiet: bool = False
    verbose: bool = False


@dataclass(frozen=True)
class CodecResult:
    mode: Literal["encode", "decode"]
    bytes_read: int
    bytes_written: int
    workers: int
