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

import io

from ..core.streams import ByteSink, ByteSource, read_exact, write_all
from .alphabet import ALPHABET, PADDING, PADDING_4X

CHUNK_BYTES = 5
CHUNK_SYMBOLS = 4


def encode_chunk(chunk: bytes) -> str:
    """Map 1..5 input bytes onto exactly four symbols."""
    size = len(chunk)
    if not 1 <= size <= CHUNK_BYTES:
        raise ValueError(f"chunk must be 1..{CHUNK_BYTES} bytes, got {size}")
    b0, b1, b2, b3, b4 = bytes(chunk).ljust(CHUNK_BYTES, b"\x00")

    symbols = [ALPHABET[(b0 << 2) | (b1 >> 6)], PADDING, PADDING, PADDING]
    if size >= 2:
        symbols[1] = ALPHABET[((b1 & 0x3F) << 4) | (b2 >> 4)]
    if size >= 3:
        symbols[2] = ALPHABET[((b2 & 0x0F) << 6) | (b3 >> 2)]
    if size == 4:
        symbols[3] = PADDING_4X[b3 & 0x03]
    elif size == 5:
        symbols[3] = ALPHABET[((b3 & 0x03) << 8) | b4]
    return "".join(symbols)


def encode(source: ByteSource, destination: ByteSink) -> int:
    """Encode the whole source and write the UTF-8 symbols to destination.

    Returns the number of bytes written. On a read or write failure the error
    propagates and the destination may hold a prefix of the encoded output.
    """
    bytes_written = 0
    while True:
        chunk = read_exact(source, CHUNK_BYTES)
        if not chunk:
            break
        bytes_written += write_all(destination, encode_chunk(chunk).encode("utf-8"))
    return bytes_written


def encode_to_string(source: ByteSource) -> str:
    output = io.BytesIO()
    encode(source, output)
    return output.getvalue().decode("utf-8")


def encode_bytes(data: bytes) -> str:
    return "".join(
        encode_chunk(data[start : start + CHUNK_BYTES])
        for start in range(0, len(data), CHUNK_BYTES)
    )


__all__ = [
    "CHUNK_BYTES",
    "CHUNK_SYMBOLS",
    "encode",
    "encode_bytes",
    "encode_chunk",
    "encode_to_string",
]
