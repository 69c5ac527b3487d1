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

import typer

from ..config import AppConfig, load_app_config
from . import command_registry
from .core.common import _get_version, _jobs_callback, _run_cli
from .core.log import _error, _warn
from .core.types import CodecArgs
from .flows.codec import run_codec
from .startup import run_startup
from .ui import console

app = typer.Typer(
    add_completion=False,
    help=(
        "Encode or decode data as emojis (Ecoji base-1024).\n\n"
        "Reads standard input (or --input), writes standard output (or --output)."
    ),
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"ecoji {_get_version()}", highlight=False)
        raise typer.Exit()


def _load_config(config: str | None, *, required: bool) -> AppConfig | None:
    try:
        return load_app_config(config)
    except (OSError, ValueError) as exc:
        if required:
            _error(str(exc))
            raise typer.Exit(code=2)
        _warn(str(exc), quiet=False)
        return None


@app.callback(invoke_without_command=True)
def cli(
    ctx: typer.Context,
    decode: bool = typer.Option(
        False,
        "--decode",
        "-d",
        help="Decode data.",
    ),
    input_path: str | None = typer.Option(
        None,
        "--input",
        "-i",
        help="Read from this file instead of standard input ('-' = stdin).",
        rich_help_panel="I/O",
    ),
    output_path: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write to this file instead of standard output ('-' = stdout).",
        rich_help_panel="I/O",
    ),
    jobs: str | None = typer.Option(
        None,
        "--jobs",
        "-j",
        metavar="N|auto",
        help="Transcode in memory on N worker threads ('auto' = CPU count, 0 = streaming).",
        callback=_jobs_callback,
        rich_help_panel="Performance",
    ),
    config: str | None = typer.Option(
        None,
        "--config",
        help="Use this TOML config file.",
        rich_help_panel="Global",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Hide non-error output.",
        rich_help_panel="Global",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Print a byte count summary to standard error.",
        rich_help_panel="Global",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output.",
        rich_help_panel="Accessibility",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Show full tracebacks for errors.",
        rich_help_panel="Debug",
    ),
    init_config: bool = typer.Option(
        False,
        "--init-config",
        help="Copy defaults to the user config directory and exit.",
        is_eager=True,
        rich_help_panel="Config",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
        rich_help_panel="Info",
    ),
) -> None:
    _ = version
    app_config = None
    if not init_config:
        app_config = _load_config(config, required=ctx.invoked_subcommand is None)
    if app_config is not None:
        quiet = quiet or app_config.ui.quiet
        verbose = verbose or app_config.ui.verbose
        no_color = no_color or app_config.ui.no_color
        debug = debug or app_config.debug.enabled
        if jobs is None:
            jobs = app_config.runtime.jobs
    try:
        should_exit = run_startup(
            quiet=quiet,
            no_color=no_color,
            debug=debug,
            init_config=init_config,
        )
    except (OSError, RuntimeError, ValueError) as exc:
        _error(str(exc))
        raise typer.Exit(code=2)
    if should_exit:
        raise typer.Exit()
    ctx.ensure_object(dict)
    ctx.obj.update(
        {
            "config": config,
            "debug": debug,
            "quiet": quiet,
            "verbose": verbose,
            "no_color": no_color,
        }
    )
    if ctx.invoked_subcommand is None:
        args = CodecArgs(
            decode=decode,
            input=input_path,
            output=output_path,
            jobs=jobs,
            quiet=quiet,
            verbose=verbose,
        )
        _run_cli(lambda: run_codec(args), debug=debug)


command_registry.register(app)


def main() -> None:
    app()
