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

from ..core.errors import NotUtf8Error
from ..core.streams import ByteSource, read_byte, read_exact


def utf8_sequence_width(first_byte: int) -> int:
    """Return the UTF-8 sequence length for a leading byte, or 0 if invalid (RFC 3629)."""
    if first_byte < 0x80:
        return 1
    if 0xC2 <= first_byte <= 0xDF:
        return 2
    if 0xE0 <= first_byte <= 0xEF:
        return 3
    if 0xF0 <= first_byte <= 0xF4:
        return 4
    return 0


class CodePointReader(Iterator[str]):
    """Lazily decode a binary stream into single-character strings."""

    def __init__(self, source: ByteSource) -> None:
        self._source = source
        self._done = False

    def __iter__(self) -> CodePointReader:
        return self

    def __next__(self) -> str:
        if self._done:
            raise StopIteration
        first = read_byte(self._source)
        if first is None:
            self._done = True
            raise StopIteration
        width = utf8_sequence_width(first)
        if width == 1:
            return chr(first)
        if width == 0:
            raise NotUtf8Error()
        rest = read_exact(self._source, width - 1)
        if len(rest) != width - 1:
            raise NotUtf8Error()
        try:
            return (bytes((first,)) + rest).decode("utf-8", "strict")
        except UnicodeDecodeError as exc:
            raise NotUtf8Error() from exc
