#!/usr/bin/env python3
from __future__ import annotations

from rich.markup import escape

from ..ui import console_err, is_quiet


def _warn(message: str, *, quiet: bool | None = None) -> None:
    if quiet is None:
        quiet = is_quiet()
    if quiet:
        return
    console_err.print(f"[warning]Warning:[/warning] {escape(message)}")


def _info(message: str, *, quiet: bool | None = None) -> None:
    if quiet is None:
        quiet = is_quiet()
    if quiet:
        return
    console_err.print(f"[info]{escape(message)}[/info]", highlight=False)


def _error(message: str) -> None:
    console_err.print(f"[error]Error:[/error] {escape(message)}", highlight=False, soft_wrap=True)
