"""`docimpl show`: print the implementors listed by fragment files."""

from __future__ import annotations

import typer

from docimpl.adapters.fragments import load_fragments
from docimpl.core.exceptions import DocImplError

from .._options import FragmentPathsArgument
from ..presenter import present_fragment
from ..state import emit_error, emit_warning, get_cli_state


def show(paths: FragmentPathsArgument) -> None:
    """Print the implementors tables contained in the given fragments."""
    state = get_cli_state()
    try:
        fragments = load_fragments(paths)
    except DocImplError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    if not fragments:
        emit_warning("No implementors fragments found.")
        raise typer.Exit(code=1)

    for fragment in fragments:
        present_fragment(state, fragment)


__all__ = ["show"]
