"""`docimpl replay`: simulate a page load over fragment files."""

from __future__ import annotations

import typer

from docimpl.adapters.fragments import load_fragments
from docimpl.core.config import RegistryConfig, load_config
from docimpl.core.exceptions import DocImplError
from docimpl.core.page import replay_page_load
from docimpl.core.registry import ImplementorsRegistry

from .._options import ConfigOption, FragmentPathsArgument, InstallAtOption, PolicyOption
from ..diagnostics import CliEmitter
from ..presenter import present_replay
from ..state import emit_error, emit_warning, get_cli_state


def replay(
    paths: FragmentPathsArgument,
    install_at: InstallAtOption = None,
    policy: PolicyOption = None,
    config_path: ConfigOption = None,
) -> None:
    """Run every fragment against one registry and report what reached the viewer."""
    state = get_cli_state()
    try:
        config = load_config(config_path) if config_path else RegistryConfig()
        fragments = load_fragments(paths)
    except DocImplError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    if not fragments:
        emit_warning("No implementors fragments found.")
        raise typer.Exit(code=1)

    if policy is not None:
        config = config.model_copy(update={"pending_policy": policy})

    registry = ImplementorsRegistry.from_config(config, emitter=CliEmitter(state))
    report = replay_page_load(
        [fragment.producer for fragment in fragments],
        install_at=install_at,
        registry=registry,
    )
    present_replay(state, report, fragments)


__all__ = ["replay"]
