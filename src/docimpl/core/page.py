"""Viewer-side store and a page-load replay over a set of producers."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from docimpl.core.producer import FragmentProducer
from docimpl.core.records import ImplementorsMapping, LibraryImplementorList
from docimpl.core.registry import ImplementorsRegistry


@dataclass(slots=True)
class ImplementorsStore:
    """Callback installed by the viewer; keeps every mapping it receives.

    Libraries are merged across mappings, a later list for the same library
    replacing the earlier one.
    """

    received: list[ImplementorsMapping] = field(default_factory=list)
    _libraries: dict[str, LibraryImplementorList] = field(default_factory=dict, repr=False)

    def __call__(self, mapping: ImplementorsMapping) -> None:
        self.received.append(mapping)
        self._libraries.update(mapping)

    def __len__(self) -> int:
        return len(self._libraries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._libraries)

    def libraries(self) -> list[str]:
        """Library names in first-seen order."""
        return list(self._libraries)

    def records(self, library: str) -> LibraryImplementorList:
        return self._libraries.get(library, ())


@dataclass(slots=True)
class ReplayReport:
    """Outcome of a replayed page load."""

    store: ImplementorsStore
    produced: int
    install_index: int
    dropped: list[str | None] = field(default_factory=list)

    @property
    def delivered(self) -> int:
        return len(self.store.received)


def replay_page_load(
    producers: Sequence[FragmentProducer],
    *,
    install_at: int | None = None,
    registry: ImplementorsRegistry | None = None,
    store: ImplementorsStore | None = None,
) -> ReplayReport:
    """Run `producers` in order, installing the viewer before index `install_at`.

    `install_at=None` installs after every producer has run. Producers whose
    mapping never reached the store are listed in `ReplayReport.dropped` by
    trait path.

    A registry that already has a viewer callback is rejected with `ValueError`.
    """
    registry = registry or ImplementorsRegistry()
    if registry.is_ready:
        raise ValueError("registry already has a viewer callback installed")
    store = store if store is not None else ImplementorsStore()
    total = len(producers)
    index = total if install_at is None else max(0, min(install_at, total))

    for producer in producers[:index]:
        producer.produce(registry)
    registry.install(store)
    for producer in producers[index:]:
        producer.produce(registry)

    received = {id(mapping) for mapping in store.received}
    dropped = [
        producer.trait_path for producer in producers if id(producer.mapping) not in received
    ]
    return ReplayReport(store=store, produced=total, install_index=index, dropped=dropped)


__all__ = ["ImplementorsStore", "ReplayReport", "replay_page_load"]
