"""Fragment producers: one per trait page, each delivering a single mapping."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from docimpl.core.records import (
    ImplementorsMapping,
    RecordLike,
    build_mapping,
    count_records,
)
from docimpl.core.registry import ImplementorsRegistry


def produce(
    mapping: ImplementorsMapping,
    registry: ImplementorsRegistry,
    *,
    origin: str | None = None,
) -> None:
    """Deliver `mapping` to `registry`. Empty mappings are delivered too."""
    registry.deliver(mapping, origin=origin)


@dataclass(frozen=True, slots=True)
class FragmentProducer:
    """Static implementors table for one trait, ready to be handed off."""

    mapping: ImplementorsMapping
    trait_path: str | None = None

    @classmethod
    def from_table(
        cls,
        table: Mapping[str, Iterable[RecordLike]] | Iterable[tuple[str, Iterable[RecordLike]]],
        *,
        trait_path: str | None = None,
    ) -> FragmentProducer:
        return cls(build_mapping(table), trait_path)

    @property
    def libraries(self) -> list[str]:
        return list(self.mapping)

    @property
    def record_count(self) -> int:
        return count_records(self.mapping)

    def produce(self, registry: ImplementorsRegistry) -> None:
        """Run the hand-off. Calling it twice delivers twice."""
        produce(self.mapping, registry, origin=self.trait_path)


__all__ = ["FragmentProducer", "produce"]
