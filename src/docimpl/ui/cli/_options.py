"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from docimpl.core.config import PendingPolicy


INPUTS_PANEL = "Input Handling"
REGISTRY_PANEL = "Registry"

FragmentPathsArgument = Annotated[
    list[Path],
    typer.Argument(
        metavar="FRAGMENT...",
        help=(
            "Implementors fragment files (trait.*.js) or directories searched "
            "recursively for them."
        ),
        exists=True,
        file_okay=True,
        dir_okay=True,
        readable=True,
        resolve_path=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

InstallAtOption = Annotated[
    int | None,
    typer.Option(
        "--install-at",
        min=0,
        help=(
            "Install the viewer callback before the fragment at this position "
            "(0 = before any fragment). Defaults to after every fragment."
        ),
        rich_help_panel=REGISTRY_PANEL,
    ),
]

PolicyOption = Annotated[
    PendingPolicy | None,
    typer.Option(
        "--policy",
        case_sensitive=False,
        help="Pending strategy before install: keep only the last mapping (slot) or all (queue).",
        rich_help_panel=REGISTRY_PANEL,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="YAML file providing registry settings.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        rich_help_panel=REGISTRY_PANEL,
    ),
]
