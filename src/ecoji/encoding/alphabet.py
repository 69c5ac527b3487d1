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


"""Ecoji v1 alphabet: 1024 emoji symbols plus five padding sentinels.

The table is loaded once from ``emojis.txt`` (one hexadecimal code point per line,
in rank order) and never mutated. Changing the file breaks compatibility with
previously encoded data.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from types import MappingProxyType

ALPHABET_PATH = Path(__file__).resolve().with_name("emojis.txt")
ALPHABET_SIZE = 1024

PADDING = "☕"
PADDING_40 = "⚜"
PADDING_41 = "\U0001f3cd"
PADDING_42 = "\U0001f4d1"
PADDING_43 = "\U0001f64b"

PADDING_4X = (PADDING_40, PADDING_41, PADDING_42, PADDING_43)
SENTINELS = frozenset((PADDING, *PADDING_4X))


def load_alphabet(lines: Iterable[str]) -> tuple[str, ...]:
    symbols: list[str] = []
    seen: set[str] = set()
    for lineno, raw in enumerate(lines, start=1):
        text = raw.strip()
        if not text or text.startswith("#"):
            continue
        try:
            value = int(text, 16)
        except ValueError as exc:
            raise ValueError(f"alphabet line {lineno}: invalid code point {text!r}") from exc
        if not 0 <= value <= 0x10FFFF or 0xD800 <= value <= 0xDFFF:
            raise ValueError(f"alphabet line {lineno}: U+{value:04X} is not a scalar value")
        symbol = chr(value)
        if symbol in SENTINELS:
            raise ValueError(f"alphabet line {lineno}: U+{value:04X} is a padding symbol")
        if symbol in seen:
            raise ValueError(f"alphabet line {lineno}: duplicate U+{value:04X}")
        seen.add(symbol)
        symbols.append(symbol)
    if len(symbols) != ALPHABET_SIZE:
        raise ValueError(f"alphabet must have {ALPHABET_SIZE} symbols, found {len(symbols)}")
    return tuple(symbols)


def _load_default_alphabet() -> tuple[str, ...]:
    with ALPHABET_PATH.open("r", encoding="ascii") as handle:
        return load_alphabet(handle)


ALPHABET = _load_default_alphabet()
ALPHABET_LOOKUP = MappingProxyType({symbol: rank for rank, symbol in enumerate(ALPHABET)})


def symbol_at(rank: int) -> str:
    if not 0 <= rank < ALPHABET_SIZE:
        raise IndexError(f"rank out of range: {rank}")
    return ALPHABET[rank]


def rank_of(symbol: str) -> int | None:
    return ALPHABET_LOOKUP.get(symbol)


def is_padding(symbol: str) -> bool:
    return symbol in SENTINELS


def is_alphabet_member(symbol: str) -> bool:
    return symbol in ALPHABET_LOOKUP or symbol in SENTINELS


__all__ = [
    "ALPHABET",
    "ALPHABET_LOOKUP",
    "ALPHABET_PATH",
    "ALPHABET_SIZE",
    "PADDING",
    "PADDING_40",
    "PADDING_41",
    "PADDING_42",
    "PADDING_43",
    "PADDING_4X",
    "SENTINELS",
    "is_alphabet_member",
    "is_padding",
    "load_alphabet",
    "rank_of",
    "symbol_at",
]
