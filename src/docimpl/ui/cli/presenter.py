"""Rich presenters for CLI output."""

from __future__ import annotations

from collections.abc import Sequence

from bs4 import BeautifulSoup
from rich import box
from rich.markup import escape
from rich.table import Table

from docimpl.adapters.fragments import TraitFragment
from docimpl.core.page import ReplayReport
from docimpl.core.records import count_records

from .state import CLIState


def signature_plain_text(signature: str) -> str:
    """Strip markup from a signature so it reads cleanly in a terminal."""
    text = BeautifulSoup(signature, "html.parser").get_text()
    return text.replace("\xa0", " ")


def _build_table(*, title: str | None, columns: Sequence[str]) -> Table:
    """Create a Rich table with the house style."""
    table = Table(
        title=title or None,
        box=box.SQUARE,
        show_edge=True,
        header_style="bold cyan",
    )
    for column in columns:
        table.add_column(column)
    return table


def present_fragment(state: CLIState, fragment: TraitFragment) -> None:
    """Print the implementors of one trait, grouped by library."""
    mapping = fragment.producer.mapping
    console = state.console
    if not mapping:
        console.print(f"{escape(fragment.trait_path)}: no implementors")
        return

    table = _build_table(
        title=escape(fragment.trait_path),
        columns=("Library", "Implementor", "Synthetic", "Types"),
    )
    for library, records in mapping.items():
        for position, record in enumerate(records):
            table.add_row(
                escape(library) if position == 0 else "",
                escape(signature_plain_text(record.signature_text)),
                "yes" if record.is_synthetic else "",
                escape(", ".join(record.related_types)) or "-",
            )
    console.print(table)
    console.print(
        f"{len(mapping)} libraries, {count_records(mapping)} implementors",
        style="dim",
    )


def present_replay(
    state: CLIState,
    report: ReplayReport,
    fragments: Sequence[TraitFragment],
) -> None:
    """Print which fragments reached the viewer during a replayed page load."""
    dropped = set(report.dropped)
    table = _build_table(
        title="Page load replay",
        columns=("#", "Trait", "Libraries", "Implementors", "Status"),
    )
    for index, fragment in enumerate(fragments):
        if index == report.install_index:
            table.add_row("", "[italic]viewer installed[/italic]", "", "", "")
        producer = fragment.producer
        if fragment.trait_path in dropped:
            status = "[red]dropped[/red]"
        else:
            status = "[green]delivered[/green]"
        table.add_row(
            str(index + 1),
            escape(fragment.trait_path),
            str(len(producer.mapping)),
            str(producer.record_count),
            status,
        )
    if report.install_index >= len(fragments):
        table.add_row("", "[italic]viewer installed[/italic]", "", "", "")

    console = state.console
    console.print(table)
    console.print(
        f"Delivered {report.delivered} of {report.produced} mappings; "
        f"{len(report.store)} libraries registered.",
    )


__all__ = ["present_fragment", "present_replay", "signature_plain_text"]
