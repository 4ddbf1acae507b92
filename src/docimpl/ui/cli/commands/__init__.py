"""CLI command implementations."""

from __future__ import annotations

from .replay import replay
from .show import show


__all__ = ["replay", "show"]
