#!/usr/bin/env python3
from __future__ import annotations

import typer

from .commands import (
    config as config_command,
    manpage as manpage_command,
)


def register(app: typer.Typer) -> None:
    config_command.register(app)
    manpage_command.register(app)
