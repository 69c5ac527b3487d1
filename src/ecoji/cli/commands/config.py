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

import os
import shlex
import subprocess
from pathlib import Path

import typer

from ...config import AppConfig, load_app_config, resolve_config_path
from ..core.common import _ctx_value, _run_cli
from ..core.log import _info, _warn
from ..ui import console

_CONFIG_HELP = (
    "Show, check or edit the active TOML config.\n\n"
    "Without options the file opens in $VISUAL / $EDITOR, or in the system default\n"
    "application when neither is set. The file is checked again once the editor exits.\n\n"
    "Examples:\n"
    "  ecoji config --print-path\n"
    "  ecoji config --check\n"
    "  ecoji --config ./my_config.toml config --editor nano\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_CONFIG_HELP)(config)


def config(
    ctx: typer.Context,
    editor: str | None = typer.Option(
        None,
        "--editor",
        "-e",
        help="Editor command (defaults to $VISUAL/$EDITOR; 'default' = system opener).",
        rich_help_panel="Behavior",
    ),
    print_path: bool = typer.Option(
        False,
        "--print-path",
        help="Print the resolved config path and exit.",
        rich_help_panel="Behavior",
    ),
    check: bool = typer.Option(
        False,
        "--check",
        help="Parse the config and print its effective values.",
        rich_help_panel="Behavior",
    ),
) -> None:
    config_value = _ctx_value(ctx, "config")

    def _run() -> None:
        path = resolve_config_path(config_value)
        if print_path:
            _print_line(str(path))
            return
        if check:
            for line in describe_config(load_app_config(path)):
                _print_line(line)
            return
        _edit_config(path, editor=editor)

    _run_cli(_run, debug=bool(_ctx_value(ctx, "debug")))


def describe_config(app_config: AppConfig) -> list[str]:
    jobs = app_config.runtime.jobs
    return [
        f"# {app_config.path}",
        f"runtime.jobs = {'streaming' if jobs is None else jobs}",
        f"ui.quiet = {str(app_config.ui.quiet).lower()}",
        f"ui.no_color = {str(app_config.ui.no_color).lower()}",
        f"ui.verbose = {str(app_config.ui.verbose).lower()}",
        f"debug.enabled = {str(app_config.debug.enabled).lower()}",
    ]


def _print_line(text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def _edit_config(path: Path, *, editor: str | None) -> None:
    resolved = Path(os.path.expandvars(str(path))).expanduser()
    if not resolved.is_file():
        raise FileNotFoundError(f"config file not found: {resolved}")

    editor_cmd = _resolve_editor_command(editor)
    if editor_cmd is None:
        _info(f"Opening {resolved}...")
        # The system opener returns immediately, so there is nothing to re-check.
        typer.launch(str(resolved))
        return

    _info(f"Opening {resolved} with {' '.join(editor_cmd)}...")
    subprocess.run([*editor_cmd, str(resolved)], check=False)
    try:
        load_app_config(resolved)
    except ValueError as exc:
        _warn(f"edited config does not parse: {exc}")


def _resolve_editor_command(editor: str | None) -> list[str] | None:
    if editor is not None:
        value = editor.strip()
        if not value or value.lower() in {"default", "system"}:
            return None
    else:
        value = (os.environ.get("VISUAL") or os.environ.get("EDITOR") or "").strip()
        if not value:
            return None
    return shlex.split(value, posix=os.name != "nt")
