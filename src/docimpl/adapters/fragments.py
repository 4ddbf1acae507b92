"""Read implementors fragments written by the documentation generator.

A fragment lives at `implementors/<module path>/trait.<Name>.js` and looks
like::

    (function() {var implementors = {};
    implementors["gimli"] = [{"text":"impl Hash for Format","synthetic":false,"types":[]}];
    if (window.register_implementors) {...} else {...}})()

Each assignment line carries one library's implementors as JSON.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
import json
import logging
from pathlib import Path
import re

from docimpl.core.exceptions import FragmentFormatError, FragmentNotFoundError
from docimpl.core.producer import FragmentProducer
from docimpl.core.records import ImplementorRecord, LibraryImplementorList


logger = logging.getLogger(__name__)

FRAGMENT_ROOT = "implementors"
FRAGMENT_GLOB = "trait.*.js"

_PROLOGUE = re.compile(r"^\(function\(\)\s*\{\s*var\s+implementors\s*=\s*\{\s*\}\s*;?\s*$")
_ASSIGNMENT = re.compile(r'^implementors\[(?P<key>"(?:[^"\\]|\\.)*")\]\s*=\s*(?P<value>.*?);?\s*$')
_EPILOGUE = re.compile(r"^if\s*\(window\.register_implementors\).*\}\)\(\)\s*;?\s*$")


@dataclass(frozen=True, slots=True)
class TraitFragment:
    """A decoded fragment together with the trait page it belongs to."""

    trait_path: str
    source: Path | None
    producer: FragmentProducer


def _decode_records(value: str, line: int) -> LibraryImplementorList:
    try:
        payload = json.loads(value)
    except json.JSONDecodeError as exc:
        raise FragmentFormatError(f"invalid implementors list: {exc.msg}", line=line) from exc
    if not isinstance(payload, list):
        raise FragmentFormatError("implementors value must be a list", line=line)
    try:
        return tuple(ImplementorRecord.from_payload(item) for item in payload)
    except (TypeError, AttributeError) as exc:
        raise FragmentFormatError(f"invalid implementor entry: {exc}", line=line) from exc


def iter_assignments(text: str) -> Iterator[tuple[str, LibraryImplementorList]]:
    """Yield `(library, records)` pairs in file order."""
    seen_prologue = False
    for number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line:
            continue
        if _PROLOGUE.match(line):
            seen_prologue = True
            continue
        if not seen_prologue:
            raise FragmentFormatError("missing 'var implementors = {};' prologue", line=number)
        match = _ASSIGNMENT.match(line)
        if match:
            library = json.loads(match.group("key"))
            yield library, _decode_records(match.group("value"), number)
            continue
        if _EPILOGUE.match(line):
            continue
        raise FragmentFormatError(f"unexpected statement: {line[:60]}", line=number)
    if not seen_prologue:
        raise FragmentFormatError("missing 'var implementors = {};' prologue")


def parse_fragment(text: str) -> dict[str, LibraryImplementorList]:
    """Decode a fragment into an implementors mapping.

    A library assigned twice keeps its last list.
    """
    mapping: dict[str, LibraryImplementorList] = {}
    for library, records in iter_assignments(text):
        if library in mapping:
            logger.debug("library %s assigned twice; keeping the later list", library)
        mapping[library] = records
    return mapping


def trait_path_for(path: Path | str) -> str:
    """Return `core::hash::Hash` for `.../implementors/core/hash/trait.Hash.js`."""
    fragment = Path(path)
    name = fragment.name
    if not (name.startswith("trait.") and name.endswith(".js")):
        raise FragmentFormatError(f"'{name}' is not a trait fragment file name")
    trait = name[len("trait.") : -len(".js")]
    parts = list(fragment.parent.parts)
    if FRAGMENT_ROOT in parts:
        index = len(parts) - 1 - parts[::-1].index(FRAGMENT_ROOT)
        modules = parts[index + 1 :]
    else:
        modules = []
    return "::".join([*modules, trait])


def load_fragment(path: Path | str) -> TraitFragment:
    """Read and decode a fragment file."""
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FragmentFormatError(f"unable to read fragment '{source}': {exc}") from exc
    try:
        mapping = parse_fragment(text)
    except FragmentFormatError as exc:
        error = FragmentFormatError(f"{source}: {exc}")
        error.line = exc.line
        raise error from exc
    trait_path = trait_path_for(source)
    logger.debug("loaded %s with %d libraries", trait_path, len(mapping))
    return TraitFragment(trait_path, source, FragmentProducer(mapping, trait_path))


def discover_fragments(root: Path | str) -> list[Path]:
    """Return every trait fragment below `root`, sorted by path."""
    base = Path(root)
    if not base.exists():
        raise FragmentNotFoundError(f"no such fragment file or directory: '{base}'")
    if base.is_file():
        return [base]
    return sorted(path for path in base.rglob(FRAGMENT_GLOB) if path.is_file())


def load_fragments(paths: Iterable[Path | str]) -> list[TraitFragment]:
    """Load fragments from files and directories, in the order given."""
    fragments: list[TraitFragment] = []
    for entry in paths:
        for path in discover_fragments(entry):
            fragments.append(load_fragment(path))
    return fragments


__all__ = [
    "FRAGMENT_GLOB",
    "FRAGMENT_ROOT",
    "TraitFragment",
    "discover_fragments",
    "iter_assignments",
    "load_fragment",
    "load_fragments",
    "parse_fragment",
    "trait_path_for",
]
