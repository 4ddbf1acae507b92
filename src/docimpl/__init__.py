"""Primary public API for docimpl."""

from __future__ import annotations

from docimpl.adapters import TraitFragment, load_fragment, load_fragments, parse_fragment
from docimpl.core import (
    ConfigError,
    DocImplError,
    FragmentFormatError,
    FragmentNotFoundError,
    FragmentProducer,
    ImplementorRecord,
    ImplementorsMapping,
    ImplementorsRegistry,
    ImplementorsStore,
    PendingPolicy,
    RegistryConfig,
    ReplayReport,
    build_mapping,
    get_registry,
    load_config,
    produce,
    replay_page_load,
    reset_registry,
)
from docimpl.version import get_version


__version__ = get_version()

__all__ = [
    "ConfigError",
    "DocImplError",
    "FragmentFormatError",
    "FragmentNotFoundError",
    "FragmentProducer",
    "ImplementorRecord",
    "ImplementorsMapping",
    "ImplementorsRegistry",
    "ImplementorsStore",
    "PendingPolicy",
    "RegistryConfig",
    "ReplayReport",
    "TraitFragment",
    "__version__",
    "build_mapping",
    "get_registry",
    "load_config",
    "load_fragment",
    "load_fragments",
    "parse_fragment",
    "produce",
    "replay_page_load",
    "reset_registry",
]
