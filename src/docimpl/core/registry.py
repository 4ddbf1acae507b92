"""Deferred hand-off between implementors fragments and the documentation viewer.

Fragments deliver their mapping whenever they run. Until the viewer installs
its callback the registry holds deliveries in a pending slot; installing the
callback drains that slot before anything delivered afterwards.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import logging
from typing import TypeAlias

from docimpl.core.config import PendingPolicy, RegistryConfig
from docimpl.core.diagnostics import DiagnosticEmitter, NullEmitter
from docimpl.core.records import ImplementorsMapping


logger = logging.getLogger(__name__)

RegisterCallback: TypeAlias = Callable[[ImplementorsMapping], object]


@dataclass(frozen=True, slots=True)
class PendingDelivery:
    """A mapping waiting for the viewer, tagged with where it came from."""

    mapping: ImplementorsMapping
    origin: str | None = None


@dataclass(frozen=True, slots=True)
class Uninitialized:
    """No callback yet; deliveries accumulate in `pending`."""

    pending: tuple[PendingDelivery, ...] = ()


@dataclass(frozen=True, slots=True)
class Ready:
    """Callback installed; deliveries are forwarded immediately.

    `backlog` holds mappings left undelivered when the callback raised while
    draining; they go out ahead of the next delivery.
    """

    callback: RegisterCallback
    backlog: tuple[PendingDelivery, ...] = ()


RegistryState: TypeAlias = Uninitialized | Ready


class ImplementorsRegistry:
    """Page-level sink for implementors mappings."""

    def __init__(
        self,
        *,
        policy: PendingPolicy | str = PendingPolicy.SLOT,
        emitter: DiagnosticEmitter | None = None,
        warn_on_overwrite: bool = True,
    ) -> None:
        self.policy = PendingPolicy(policy)
        self.emitter: DiagnosticEmitter = emitter or NullEmitter()
        self.warn_on_overwrite = warn_on_overwrite
        self._state: RegistryState = Uninitialized()

    @classmethod
    def from_config(
        cls, config: RegistryConfig, *, emitter: DiagnosticEmitter | None = None
    ) -> ImplementorsRegistry:
        """Create a registry honouring a `RegistryConfig`."""
        return cls(
            policy=config.pending_policy,
            emitter=emitter,
            warn_on_overwrite=config.warn_on_overwrite,
        )

    @property
    def state(self) -> RegistryState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return isinstance(self._state, Ready)

    @property
    def pending(self) -> tuple[ImplementorsMapping, ...]:
        """Mappings currently held for the viewer, oldest first."""
        return tuple(entry.mapping for entry in self._held())

    def _held(self) -> tuple[PendingDelivery, ...]:
        state = self._state
        if isinstance(state, Uninitialized):
            return state.pending
        return state.backlog

    def _drain(self, callback: RegisterCallback, entries: tuple[PendingDelivery, ...]) -> None:
        """Pass `entries` to `callback` in order, keeping the rest if it raises."""
        for position, entry in enumerate(entries):
            try:
                callback(entry.mapping)
            except Exception:
                remaining = entries[position + 1 :]
                self._state = Ready(callback, remaining)
                if remaining:
                    self.emitter.warning(
                        f"Implementors callback failed; keeping {len(remaining)} undelivered "
                        "mapping(s) for the next delivery."
                    )
                raise

    def deliver(self, mapping: ImplementorsMapping, *, origin: str | None = None) -> None:
        """Hand a fragment's mapping to the viewer, or hold it until `install`."""
        state = self._state
        entry = PendingDelivery(mapping, origin)
        if isinstance(state, Ready):
            if state.backlog:
                self._state = Ready(state.callback)
            self._drain(state.callback, (*state.backlog, entry))
            self.emitter.event(
                "implementors_delivered",
                {"origin": origin, "libraries": list(mapping)},
            )
            return

        if self.policy is PendingPolicy.QUEUE:
            self._state = Uninitialized((*state.pending, entry))
            self.emitter.event("implementors_pending", {"origin": origin})
            return

        if state.pending:
            dropped = state.pending[-1]
            logger.debug("pending implementors from %s overwritten", dropped.origin)
            payload = {"origin": origin, "dropped_origin": dropped.origin}
            self.emitter.event("implementors_pending_overwritten", payload)
            if self.warn_on_overwrite:
                what = f"from {dropped.origin}" if dropped.origin else "held earlier"
                self.emitter.warning(
                    f"Implementors {what} were discarded: only one mapping can wait "
                    "for the viewer."
                )
        self._state = Uninitialized((entry,))
        self.emitter.event("implementors_pending", {"origin": origin})

    def install(self, callback: RegisterCallback) -> None:
        """Install the viewer callback and flush whatever is pending."""
        state = self._state
        if isinstance(state, Ready):
            self.emitter.warning(
                "Implementors callback already installed; ignoring the new callback."
            )
            return

        self._state = Ready(callback)
        self._drain(callback, state.pending)
        if state.pending:
            self.emitter.event("implementors_drained", {"count": len(state.pending)})


_REGISTRY = ImplementorsRegistry()


def get_registry() -> ImplementorsRegistry:
    """Return the process-wide default registry."""
    return _REGISTRY


def reset_registry() -> ImplementorsRegistry:
    """Replace the default registry with a fresh uninitialised one."""
    global _REGISTRY
    _REGISTRY = ImplementorsRegistry()
    return _REGISTRY


__all__ = [
    "ImplementorsRegistry",
    "PendingDelivery",
    "Ready",
    "RegisterCallback",
    "RegistryState",
    "Uninitialized",
    "get_registry",
    "reset_registry",
]
