"""Implementor records and the library-keyed mappings built from them."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias


@dataclass(frozen=True, slots=True)
class ImplementorRecord:
    """One implementor entry as listed on a trait page.

    `signature_text` is kept verbatim, markup and HTML entities included.
    """

    signature_text: str
    is_synthetic: bool = False
    related_types: tuple[str, ...] = ()

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> ImplementorRecord:
        """Build a record from the generator's `text`/`synthetic`/`types` object."""
        text = payload.get("text")
        if not isinstance(text, str):
            raise TypeError("implementor entry requires a string 'text' field")
        types = payload.get("types") or ()
        if isinstance(types, str) or not isinstance(types, Sequence):
            raise TypeError("implementor 'types' must be a list of type identifiers")
        synthetic = payload.get("synthetic", False)
        if not isinstance(synthetic, bool):
            raise TypeError("implementor 'synthetic' flag must be a boolean")
        return cls(
            signature_text=text,
            is_synthetic=synthetic,
            related_types=tuple(str(item) for item in types),
        )


LibraryImplementorList: TypeAlias = tuple[ImplementorRecord, ...]
ImplementorsMapping: TypeAlias = Mapping[str, LibraryImplementorList]

RecordLike: TypeAlias = ImplementorRecord | Mapping[str, Any] | Sequence[Any]


def coerce_record(value: RecordLike) -> ImplementorRecord:
    """Normalise a record given as a record, a payload dict, or a literal tuple."""
    if isinstance(value, ImplementorRecord):
        return value
    if isinstance(value, Mapping):
        return ImplementorRecord.from_payload(value)
    text, synthetic, *rest = value
    if not isinstance(synthetic, bool):
        raise TypeError("implementor 'synthetic' flag must be a boolean")
    related = rest[0] if rest else ()
    return ImplementorRecord(str(text), synthetic, tuple(related))


def build_mapping(
    entries: Mapping[str, Iterable[RecordLike]] | Iterable[tuple[str, Iterable[RecordLike]]],
) -> dict[str, LibraryImplementorList]:
    """Build an implementors mapping from literal table data.

    Entries are consumed in order; a library name seen twice keeps the last
    list. Record order inside each list is preserved.
    """
    items = entries.items() if isinstance(entries, Mapping) else entries
    mapping: dict[str, LibraryImplementorList] = {}
    for library, records in items:
        mapping[library] = tuple(coerce_record(record) for record in records)
    return mapping


def count_records(mapping: ImplementorsMapping) -> int:
    return sum(len(records) for records in mapping.values())


__all__ = [
    "ImplementorRecord",
    "ImplementorsMapping",
    "LibraryImplementorList",
    "RecordLike",
    "build_mapping",
    "coerce_record",
    "count_records",
]
