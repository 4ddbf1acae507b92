"""Core hand-off between implementors fragments and the documentation viewer."""

from __future__ import annotations

from .config import PendingPolicy, RegistryConfig, load_config
from .diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from .exceptions import ConfigError, DocImplError, FragmentFormatError, FragmentNotFoundError
from .page import ImplementorsStore, ReplayReport, replay_page_load
from .producer import FragmentProducer, produce
from .records import (
    ImplementorRecord,
    ImplementorsMapping,
    LibraryImplementorList,
    build_mapping,
)
from .registry import ImplementorsRegistry, Ready, Uninitialized, get_registry, reset_registry


__all__ = [
    "ConfigError",
    "DiagnosticEmitter",
    "DocImplError",
    "FragmentFormatError",
    "FragmentNotFoundError",
    "FragmentProducer",
    "ImplementorRecord",
    "ImplementorsMapping",
    "ImplementorsRegistry",
    "ImplementorsStore",
    "LibraryImplementorList",
    "LoggingEmitter",
    "NullEmitter",
    "PendingPolicy",
    "Ready",
    "RegistryConfig",
    "ReplayReport",
    "Uninitialized",
    "build_mapping",
    "get_registry",
    "load_config",
    "produce",
    "replay_page_load",
    "reset_registry",
]
