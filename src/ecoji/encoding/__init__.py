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


"""Ecoji base-1024 codec."""

from .alphabet import (
    ALPHABET,
    ALPHABET_SIZE,
    PADDING,
    PADDING_4X,
    PADDING_40,
    PADDING_41,
    PADDING_42,
    PADDING_43,
    is_alphabet_member,
    is_padding,
    rank_of,
    symbol_at,
)
from .chars import CodePointReader
from .decoder import decode, decode_chunk, decode_text, decode_to_bytes, decode_to_string
from .encoder import encode, encode_bytes, encode_chunk, encode_to_string
from .parallel import decode_text_parallel, encode_bytes_parallel

__all__ = [
    "ALPHABET",
    "ALPHABET_SIZE",
    "CodePointReader",
    "PADDING",
    "PADDING_40",
    "PADDING_41",
    "PADDING_42",
    "PADDING_43",
    "PADDING_4X",
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
