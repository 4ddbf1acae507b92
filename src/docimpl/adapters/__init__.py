"""Adapters reading generator output from disk."""

from __future__ import annotations

from .fragments import (
    TraitFragment,
    discover_fragments,
    load_fragment,
    load_fragments,
    parse_fragment,
    trait_path_for,
)


__all__ = [
    "TraitFragment",
    "discover_fragments",
    "load_fragment",
    "load_fragments",
    "parse_fragment",
    "trait_path_for",
]
