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

import importlib.metadata
from collections.abc import Callable
from typing import Any, Literal

import typer
from rich.traceback import install as install_rich_traceback

from ...config import parse_jobs
from .log import _error


def _run_cli(func: Callable[[], Any], *, debug: bool) -> None:
    if debug:
        install_rich_traceback(show_locals=True)
    try:
        result = func()
    except (OSError, RuntimeError, ValueError, TypeError, LookupError) as exc:
        if debug:
            raise
        _error(str(exc) or type(exc).__name__)
        raise typer.Exit(code=2)
    if isinstance(result, int) and result != 0:
        raise typer.Exit(code=result)


def _ctx_value(ctx: typer.Context, key: str) -> Any:
    if ctx.obj is None:
        return None
    return ctx.obj.get(key)


def _jobs_callback(value: str | None) -> int | Literal["auto"] | None:
    if value is None:
        return None
    # 0 forces the streaming codec even when the config enables workers.
    if value.strip() == "0":
        return 0
    try:
        jobs = parse_jobs(value, field="--jobs")
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if jobs is None:
        raise typer.BadParameter("--jobs must be 'auto' or a non-negative integer")
    return jobs


def _get_version() -> str:
    try:
        return importlib.metadata.version("ecoji")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0"
