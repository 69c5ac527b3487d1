#!/usr/bin/env python3
from __future__ import annotations

import datetime
from pathlib import Path
from typing import Any

import typer

from ..ui import console

_DESCRIPTION = (
    "Ecoji encodes data as a string of emojis. Every 5 bytes of input become 4 emojis, "
    "each standing for 10 bits. Short trailing chunks are padded with dedicated padding "
    "emojis so that decoding restores the exact input length."
)


def register(app: typer.Typer) -> None:
    app.command(help="Generate a manpage for the CLI.")(manpage)


def _roff(text: str) -> str:
    text = text.replace("\\", "\\e").replace("-", "\\-")
    if text.startswith((".", "'")):
        text = "\\&" + text
    return text


def _first_line(text: str | None) -> str:
    stripped = (text or "").strip()
    return stripped.splitlines()[0] if stripped else ""


def _option_lines(param: Any) -> list[str]:
    # Duck typed: typer may build its commands from a bundled click copy.
    if getattr(param, "param_type_name", None) != "option" or param.hidden:
        return []
    names = ", ".join(f"\\fB{_roff(name)}\\fR" for name in param.opts)
    if not param.is_flag and param.metavar:
        names += f" \\fI{_roff(param.metavar)}\\fR"
    elif not param.is_flag:
        names += " \\fIVALUE\\fR"
    return [".TP", names, _roff(param.help or "")]


def build_manpage(command: Any, *, date: str) -> str:
    lines = [
        f'.TH ECOJI 1 "{date}" "ecoji" "User Commands"',
        ".SH NAME",
        "ecoji \\- base\\-1024 emoji encoding and decoding",
        ".SH SYNOPSIS",
        "\\fBecoji\\fR [\\fIOPTIONS\\fR]",
        ".br",
        "\\fBecoji\\fR [\\fIOPTIONS\\fR] \\fICOMMAND\\fR [\\fIARGS\\fR]",
        ".SH DESCRIPTION",
        _roff(_DESCRIPTION),
        ".SH OPTIONS",
    ]
    for param in command.params:
        lines.extend(_option_lines(param))
    subcommands = getattr(command, "commands", None) or {}
    if subcommands:
        lines.append(".SH COMMANDS")
        for name in sorted(subcommands):
            sub = subcommands[name]
            if sub.hidden:
                continue
            lines.extend([".TP", f"\\fB{_roff(name)}\\fR", _roff(_first_line(sub.help))])
    lines.extend(
        [
            ".SH EXIT STATUS",
            ".TP",
            "\\fB0\\fR",
            "Success.",
            ".TP",
            "\\fB2\\fR",
            "Invalid input data, I/O failure, configuration error or usage error.",
            ".SH EXAMPLES",
            ".nf",
            "echo \\-n abc | ecoji",
            "ecoji \\-d \\-i encoded.txt \\-o data.bin",
            ".fi",
        ]
    )
    return "\n".join(lines) + "\n"


def manpage(
    ctx: typer.Context,
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the manpage to a file (default: stdout).",
    ),
) -> None:
    root = ctx.find_root().command
    date = datetime.datetime.now(datetime.timezone.utc).strftime("%Y-%m-%d")
    man = build_manpage(root, date=date)
    if output:
        output.write_text(man, encoding="utf-8")
    else:
        console.print(man, markup=False, highlight=False, soft_wrap=True, end="")
