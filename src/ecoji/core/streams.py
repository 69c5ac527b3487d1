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

import errno
from typing import Protocol


class ByteSource(Protocol):
    def read(self, size: int = -1, /) -> bytes: ...


class ByteSink(Protocol):
    def write(self, data: bytes, /) -> int | None: ...


def read_exact(source: ByteSource, size: int) -> bytes:
    """Read up to ``size`` bytes, stopping early only at end of stream."""
    if size < 0:
        raise ValueError("size must be non-negative")
    buf = bytearray()
    while len(buf) < size:
        try:
            chunk = source.read(size - len(buf))
        except InterruptedError:
            continue
        if not chunk:
            break
        buf += chunk
    return bytes(buf)


def read_byte(source: ByteSource) -> int | None:
    data = read_exact(source, 1)
    if not data:
        return None
    return data[0]


def write_all(destination: ByteSink, data: bytes) -> int:
    view = memoryview(data)
    while view:
        try:
            written = destination.write(view)
        except InterruptedError:
            continue
        # A raw non-blocking sink returns None when it accepted nothing.
        if written is None:
            raise BlockingIOError(
                errno.EAGAIN, "sink would block", len(data) - len(view)
            )
        if written == 0:
            raise OSError("failed to write whole buffer")
        view = view[written:]
    return len(data)
