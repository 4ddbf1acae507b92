"""Diagnostic abstractions shared by the registry and its tooling."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any, Protocol, runtime_checkable


logger = logging.getLogger(__name__)


@runtime_checkable
class DiagnosticEmitter(Protocol):
    """Interface used to surface warnings, errors, and structured events."""

    debug_enabled: bool

    def warning(self, message: str, exc: BaseException | None = None) -> None: ...

    def error(self, message: str, exc: BaseException | None = None) -> None: ...

    def event(self, name: str, payload: Mapping[str, Any]) -> None: ...


class NullEmitter:
    """Emitter that ignores every diagnostic."""

    debug_enabled: bool = False

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        return

    def error(self, message: str, exc: BaseException | None = None) -> None:
        return

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        return


class LoggingEmitter:
    """Emitter that forwards diagnostics to the standard logging module."""

    def __init__(
        self, *, logger_obj: logging.Logger | None = None, debug_enabled: bool = False
    ) -> None:
        self._logger = logger_obj or logger
        self.debug_enabled = debug_enabled

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        if exc is not None:
            self._logger.warning(message, exc_info=exc)
        else:
            self._logger.warning(message)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        if exc is not None:
            self._logger.error(message, exc_info=exc)
        else:
            self._logger.error(message)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        message = format_event_message(name, payload)
        if message:
            self._logger.info(message)
            return
        self._logger.debug("diagnostic event %s: %s", name, dict(payload))


def _libraries_hint(data: Mapping[str, Any]) -> str:
    libraries = data.get("libraries") or ()
    count = len(libraries)
    noun = "library" if count == 1 else "libraries"
    return f"{count} {noun}"


def _origin(data: Mapping[str, Any]) -> str:
    origin = data.get("origin")
    return f" from {origin}" if origin else ""


def format_event_message(name: str, payload: Mapping[str, Any]) -> str | None:
    """Return a human-friendly summary for registry events."""
    data = dict(payload)

    if name == "implementors_delivered":
        return f"Registered implementors{_origin(data)} ({_libraries_hint(data)})"

    if name == "implementors_pending":
        return f"Holding implementors{_origin(data)} until the viewer is ready"

    if name == "implementors_pending_overwritten":
        dropped = data.get("dropped_origin") or "an earlier fragment"
        return f"Pending implementors from {dropped} replaced before the viewer was ready"

    if name == "implementors_drained":
        count = data.get("count", 0)
        noun = "mapping" if count == 1 else "mappings"
        return f"Viewer ready: delivered {count} pending {noun}"

    return None


__all__ = [
    "DiagnosticEmitter",
    "LoggingEmitter",
    "NullEmitter",
    "format_event_message",
]
