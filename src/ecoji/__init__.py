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


"""Base-1024 encoding and decoding with an emoji alphabet (Ecoji v1)."""

from .core.errors import (
    EcojiError,
    InvalidDataError,
    NotInAlphabetError,
    NotUtf8Error,
    UnexpectedEofError,
)
from .encoding import (
    ALPHABET,
    ALPHABET_SIZE,
    PADDING,
    PADDING_4X,
    PADDING_40,
    PADDING_41,
    PADDING_42,
    PADDING_43,
    CodePointReader,
    decode,
    decode_chunk,
    decode_text,
    decode_text_parallel,
    decode_to_bytes,
    decode_to_string,
    encode,
    encode_bytes,
    encode_bytes_parallel,
    encode_chunk,
    encode_to_string,
    is_alphabet_member,
    is_padding,
    rank_of,
    symbol_at,
)

__all__ = [
    "ALPHABET",
    "ALPHABET_SIZE",
    "CodePointReader",
    "EcojiError",
    "InvalidDataError",
    "NotInAlphabetError",
    "NotUtf8Error",
    "PADDING",
    "PADDING_40",
    "PADDING_41",
    "PADDING_42",
    "PADDING_43",
    "PADDING_4X",
    "UnexpectedEofError",
    "decode",
    "decode_chunk",
    "decode_text",
    "decode_text_parallel",
    "decode_to_bytes",
    "decode_to_string",
    "encode",
    "encode_bytes",
    "encode_bytes_parallel",
    "encode_chunk",
    "encode_to_string",
    "is_alphabet_member",
    "is_padding",
    "rank_of",
    "symbol_at",
]
