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
from collections.abc import Iterator

from ..core.errors import InvalidDataError, NotInAlphabetError, UnexpectedEofError
from ..core.streams import ByteSink, ByteSource, write_all
from .alphabet import ALPHABET_LOOKUP, PADDING, PADDING_4X, is_alphabet_member
from .chars import CodePointReader
from .encoder import CHUNK_SYMBOLS

_EOF_MESSAGE = "unexpected end of data, input code points count is not a multiple of 4"
_PADDING_4X_BITS = {symbol: index << 8 for index, symbol in enumerate(PADDING_4X)}


def _check_symbol(symbol: str) -> str:
    if not is_alphabet_member(symbol):
        raise NotInAlphabetError(symbol)
    return symbol


def _decode_group(c0: str, c1: str, c2: str, c3: str) -> bytes:
    r0 = ALPHABET_LOOKUP.get(c0, 0)
    r1 = ALPHABET_LOOKUP.get(c1, 0)
    r2 = ALPHABET_LOOKUP.get(c2, 0)
    r3 = _PADDING_4X_BITS.get(c3)
    if r3 is None:
        r3 = ALPHABET_LOOKUP.get(c3, 0)

    out = bytes(
        (
            r0 >> 2,
            ((r0 & 0x3) << 6) | (r1 >> 4),
            ((r1 & 0xF) << 4) | (r2 >> 6),
            ((r2 & 0x3F) << 2) | (r3 >> 8),
            r3 & 0xFF,
        )
    )

    # Guard order matters for crafted groups mixing padding kinds.
    if c1 == PADDING:
        return out[:1]
    if c2 == PADDING:
        return out[:2]
    if c3 == PADDING:
        return out[:3]
    if c3 in _PADDING_4X_BITS:
        return out[:4]
    return out


def decode_chunk(group: str) -> bytes:
    """Decode exactly four symbols back into 1..5 bytes."""
    if len(group) != CHUNK_SYMBOLS:
        raise ValueError(f"group must be {CHUNK_SYMBOLS} symbols, got {len(group)}")
    c0, c1, c2, c3 = (_check_symbol(symbol) for symbol in group)
    return _decode_group(c0, c1, c2, c3)


def _read_group(symbols: Iterator[str]) -> tuple[str, str, str, str] | None:
    first = next(symbols, None)
    if first is None:
        return None
    group = [_check_symbol(first)]
    while len(group) < CHUNK_SYMBOLS:
        symbol = next(symbols, None)
        if symbol is None:
            raise UnexpectedEofError(_EOF_MESSAGE)
        group.append(_check_symbol(symbol))
    c0, c1, c2, c3 = group
    return c0, c1, c2, c3


def decode(source: ByteSource, destination: ByteSink) -> int:
    """Decode a UTF-8 Ecoji stream from source and write the bytes to destination.

    Returns the number of bytes written. Raises UnexpectedEofError when the
    code point count is not a multiple of 4, NotUtf8Error for malformed UTF-8
    and NotInAlphabetError for characters outside the alphabet. I/O errors
    propagate unchanged. On failure the destination may hold a decoded prefix.
    """
    symbols = CodePointReader(source)
    bytes_written = 0
    while True:
        group = _read_group(symbols)
        if group is None:
            break
        bytes_written += write_all(destination, _decode_group(*group))
    return bytes_written


def decode_to_bytes(source: ByteSource) -> bytes:
    output = io.BytesIO()
    decode(source, output)
    return output.getvalue()


def decode_to_string(source: ByteSource) -> str:
    data = decode_to_bytes(source)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidDataError(f"decoded data is not valid UTF-8 text: {exc}") from exc


def decode_text(text: str) -> bytes:
    if len(text) % CHUNK_SYMBOLS:
        # Non-members win over a short trailing group, as in decode().
        for symbol in text:
            _check_symbol(symbol)
        raise UnexpectedEofError(_EOF_MESSAGE)
    return b"".join(
        decode_chunk(text[start : start + CHUNK_SYMBOLS])
        for start in range(0, len(text), CHUNK_SYMBOLS)
    )


__all__ = [
    "decode",
    "decode_chunk",
    "decode_text",
    "decode_to_bytes",
    "decode_to_string",
]
