#!/usr/bin/env python3
from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

from rich.console import Console
from rich.theme import Theme

# Styles for diagnostics on standard error. Standard output carries codec
# payloads and is never styled.
THEME = Theme(
    {
        "error": "bold red",
        "warning": "yellow",
        "info": "dim",
        "path": "cyan",
    }
)


def isatty(stream: TextIO | None) -> bool:
    if stream is None:
        return False
    try:
        return bool(stream.isatty())
    except (OSError, ValueError, AttributeError):
        return False


@dataclass
class UIContext:
    console: Console
    console_err: Console
    quiet: bool = False


def _build_console(*, stderr: bool) -> Console:
    if stderr:
        return Console(stderr=True, theme=THEME, force_terminal=isatty(sys.__stderr__) or None)
    # Payload writes bypass this console, so it only prints plain text lines.
    return Console(theme=THEME, highlight=False)


def create_default_context() -> UIContext:
    return UIContext(
        console=_build_console(stderr=False),
        console_err=_build_console(stderr=True),
    )


DEFAULT_CONTEXT = create_default_context()


def get_context() -> UIContext:
    return DEFAULT_CONTEXT
