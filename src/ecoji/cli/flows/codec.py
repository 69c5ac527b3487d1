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

from typing import BinaryIO

from ...core.errors import NotInAlphabetError, NotUtf8Error
from ...core.streams import write_all
from ...encoding import decode, encode
from ...encoding.alphabet import is_alphabet_member
from ...encoding.encoder import CHUNK_BYTES, CHUNK_SYMBOLS
from ...encoding.parallel import (
    BLOCK_CHUNKS,
    decode_text_parallel,
    encode_bytes_parallel,
    resolve_jobs,
)
from ..core.log import _info
from ..core.types import CodecArgs, CodecResult
from ..io.streams import open_input, open_output


class _CountingReader:
    def __init__(self, inner: BinaryIO) -> None:
        self._inner = inner
        self.count = 0

    def read(self, size: int = -1, /) -> bytes:
        data = self._inner.read(size)
        if data:
            self.count += len(data)
        return data


def run_codec(args: CodecArgs) -> CodecResult:
    mode = "decode" if args.decode else "encode"
    with open_input(args.input) as source, open_output(args.output) as destination:
        if args.jobs:
            result = _run_parallel(source, destination, args=args)
        else:
            result = _run_streaming(source, destination, decode_mode=args.decode)
    if args.verbose:
        verb = "Decoded" if mode == "decode" else "Encoded"
        _info(
            f"{verb} {result.bytes_read} bytes into {result.bytes_written} bytes "
            f"({result.workers} worker{'s' if result.workers != 1 else ''})",
            quiet=args.quiet,
        )
    return result


def _run_streaming(source: BinaryIO, destination: BinaryIO, *, decode_mode: bool) -> CodecResult:
    reader = _CountingReader(source)
    if decode_mode:
        written = decode(reader, destination)
    else:
        written = encode(reader, destination)
    return CodecResult(
        mode="decode" if decode_mode else "encode",
        bytes_read=reader.count,
        bytes_written=written,
        workers=1,
    )


def _run_parallel(source: BinaryIO, destination: BinaryIO, *, args: CodecArgs) -> CodecResult:
    data = source.read()
    if args.decode:
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            _raise_first_foreign(data[: exc.start].decode("utf-8"))
            raise NotUtf8Error() from exc
        blocks = -(-len(text) // (BLOCK_CHUNKS * CHUNK_SYMBOLS))
        workers = resolve_jobs(args.jobs, blocks)
        output = decode_text_parallel(text, jobs=args.jobs)
    else:
        blocks = -(-len(data) // (BLOCK_CHUNKS * CHUNK_BYTES))
        workers = resolve_jobs(args.jobs, blocks)
        output = encode_bytes_parallel(data, jobs=args.jobs).encode("utf-8")
    write_all(destination, output)
    return CodecResult(
        mode="decode" if args.decode else "encode",
        bytes_read=len(data),
        bytes_written=len(output),
        workers=workers,
    )


def _raise_first_foreign(prefix: str) -> None:
    # A foreign character ahead of malformed UTF-8 wins, as when streaming.
    for symbol in prefix:
        if not is_alphabet_member(symbol):
            raise NotInAlphabetError(symbol)
