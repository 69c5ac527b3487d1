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

import concurrent.futures
import os
from collections.abc import Callable, Sequence
from typing import Literal, TypeVar

from .decoder import decode_text
from .encoder import CHUNK_BYTES, CHUNK_SYMBOLS, encode_bytes

_T = TypeVar("_T")
_R = TypeVar("_R")

# Chunks handed to one worker task.
BLOCK_CHUNKS = 4096
_MIN_BLOCKS_PER_WORKER = 2
_DEFAULT_WORKERS_CAP = 8

Jobs = int | Literal["auto"] | None


def resolve_jobs(requested: Jobs, task_count: int) -> int:
    explicit = isinstance(requested, int) and not isinstance(requested, bool)
    if explicit:
        if requested <= 0:
            raise ValueError("jobs must be 'auto' or a positive integer")
    elif requested not in (None, "auto"):
        raise ValueError("jobs must be 'auto' or a positive integer")
    if task_count <= 1:
        return 1

    cpu = os.cpu_count() or 1
    workers = requested if explicit else min(cpu, _DEFAULT_WORKERS_CAP)
    workers = max(1, min(workers, cpu, task_count))
    if not explicit:
        workers = min(workers, max(1, task_count // _MIN_BLOCKS_PER_WORKER))
    return workers


def _map_ordered(worker: Callable[[_T], _R], blocks: Sequence[_T], workers: int) -> list[_R]:
    if workers <= 1:
        return [worker(block) for block in blocks]
    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(worker, blocks))


def encode_bytes_parallel(
    data: bytes,
    *,
    jobs: Jobs = "auto",
    block_chunks: int = BLOCK_CHUNKS,
) -> str:
    """Encode in-memory data on a thread pool; output equals ``encode_bytes(data)``."""
    if block_chunks <= 0:
        raise ValueError("block_chunks must be positive")
    step = block_chunks * CHUNK_BYTES
    blocks = [data[start : start + step] for start in range(0, len(data), step)]
    workers = resolve_jobs(jobs, len(blocks))
    return "".join(_map_ordered(encode_bytes, blocks, workers))


def decode_text_parallel(
    text: str,
    *,
    jobs: Jobs = "auto",
    block_chunks: int = BLOCK_CHUNKS,
) -> bytes:
    """Decode an in-memory Ecoji string on a thread pool; output equals ``decode_text(text)``."""
    if block_chunks <= 0:
        raise ValueError("block_chunks must be positive")
    if len(text) % CHUNK_SYMBOLS:
        return decode_text(text)
    step = block_chunks * CHUNK_SYMBOLS
    blocks = [text[start : start + step] for start in range(0, len(text), step)]
    workers = resolve_jobs(jobs, len(blocks))
    return b"".join(_map_ordered(decode_text, blocks, workers))


__all__ = [
    "BLOCK_CHUNKS",
    "Jobs",
    "decode_text_parallel",
    "encode_bytes_parallel",
    "resolve_jobs",
]
