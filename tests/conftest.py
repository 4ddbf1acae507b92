from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pytest

from docimpl.core.registry import ImplementorsRegistry


DROP_FRAGMENT = """(function() {var implementors = {};
implementors["backtrace"] = [{"text":"impl&lt;'_, '_, '_&gt; Drop for BacktraceFrameFmt&lt;'_, '_, '_&gt;","synthetic":false,"types":[]}];
implementors["imgui"] = [{"text":"impl Drop for Context","synthetic":false,"types":[]},{"text":"impl Drop for SharedFontAtlas","synthetic":false,"types":[]},{"text":"impl Drop for FontStackToken","synthetic":false,"types":[]}];
implementors["scopeguard"] = [{"text":"impl&lt;T, F, S&gt; Drop for ScopeGuard&lt;T, F, S&gt; <span class=\\"where fmt-newline\\">where<br>&nbsp;&nbsp;&nbsp;&nbsp;F: FnOnce(T),<br>&nbsp;&nbsp;&nbsp;&nbsp;S: Strategy,&nbsp;</span>","synthetic":false,"types":[]}];
if (window.register_implementors) {window.register_implementors(implementors);} else {window.pending_implementors = implementors;}})()
"""

HASH_FRAGMENT = """(function() {var implementors = {};
implementors["failure"] = [{"text":"impl&lt;E:&nbsp;Hash&gt; Hash for Compat&lt;E&gt;","synthetic":false,"types":[]}];
implementors["gimli"] = [{"text":"impl Hash for Format","synthetic":false,"types":[]},{"text":"impl Hash for Encoding","synthetic":true,"types":["gimli::Encoding"]}];
if (window.register_implementors) {window.register_implementors(implementors);} else {window.pending_implementors = implementors;}})()
"""

EMPTY_FRAGMENT = """(function() {var implementors = {};
if (window.register_implementors) {window.register_implementors(implementors);} else {window.pending_implementors = implementors;}})()
"""


class RecordingEmitter:
    """Emitter capturing diagnostics for assertions."""

    def __init__(self) -> None:
        self.debug_enabled = False
        self.warnings: list[str] = []
        self.errors: list[str] = []
        self.events: list[tuple[str, dict[str, Any]]] = []

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        self.warnings.append(message)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        self.errors.append(message)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        self.events.append((name, dict(payload)))

    def event_names(self) -> list[str]:
        return [name for name, _ in self.events]


@pytest.fixture
def emitter() -> RecordingEmitter:
    return RecordingEmitter()


@pytest.fixture
def registry(emitter: RecordingEmitter) -> ImplementorsRegistry:
    return ImplementorsRegistry(emitter=emitter)


@pytest.fixture
def fragment_tree(tmp_path: Path) -> Path:
    root = tmp_path / "doc" / "implementors"
    (root / "core" / "ops" / "drop").mkdir(parents=True)
    (root / "core" / "hash").mkdir(parents=True)
    (root / "core" / "marker").mkdir(parents=True)
    (root / "core" / "ops" / "drop" / "trait.Drop.js").write_text(DROP_FRAGMENT, encoding="utf-8")
    (root / "core" / "hash" / "trait.Hash.js").write_text(HASH_FRAGMENT, encoding="utf-8")
    (root / "core" / "marker" / "trait.Unpin.js").write_text(EMPTY_FRAGMENT, encoding="utf-8")
    return root
