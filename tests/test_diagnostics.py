from __future__ import annotations

import logging

import pytest

from docimpl.core.diagnostics import LoggingEmitter, NullEmitter, format_event_message
from docimpl.core.exceptions import (
    DocImplError,
    FragmentFormatError,
    exception_messages,
)
from docimpl.core.registry import ImplementorsRegistry
from docimpl.ui.cli.diagnostics import CliEmitter
from docimpl.ui.cli.state import render_message, set_cli_state


def test_null_emitter_is_noop(caplog: pytest.LogCaptureFixture) -> None:
    emitter = NullEmitter()
    with caplog.at_level(logging.WARNING):
        emitter.warning("nothing to see")
        emitter.error("still quiet")
    assert not caplog.records
    emitter.event("ignored", {"value": 1})
    assert emitter.debug_enabled is False


def test_logging_emitter_logs_messages(caplog: pytest.LogCaptureFixture) -> None:
    emitter = LoggingEmitter(debug_enabled=True)
    with caplog.at_level(logging.ERROR):
        emitter.error("boom")
    assert any(record.message == "boom" for record in caplog.records)
    assert emitter.debug_enabled is True


def test_registry_overwrite_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    registry = ImplementorsRegistry(emitter=LoggingEmitter())
    with caplog.at_level(logging.INFO):
        registry.deliver({"a": ()}, origin="core::hash::Hash")
        registry.deliver({"b": ()}, origin="core::ops::drop::Drop")
    messages = [record.getMessage() for record in caplog.records]
    assert any("core::hash::Hash" in message and "discarded" in message for message in messages)
    assert "Holding implementors from core::ops::drop::Drop until the viewer is ready" in messages


def test_format_event_messages() -> None:
    assert (
        format_event_message(
            "implementors_delivered", {"origin": "core::hash::Hash", "libraries": ["gimli"]}
        )
        == "Registered implementors from core::hash::Hash (1 library)"
    )
    assert format_event_message("implementors_drained", {"count": 2}) == (
        "Viewer ready: delivered 2 pending mappings"
    )
    assert "an earlier fragment" in format_event_message("implementors_pending_overwritten", {})
    assert format_event_message("unknown", {}) is None


def test_cli_emitter_bridges_state(capsys: pytest.CaptureFixture[str]) -> None:
    state = set_cli_state(verbosity=1, debug=False)
    emitter = CliEmitter(state=state)

    emitter.warning("Heads up", exc=None)
    emitter.error("Boom", exc=None)
    emitter.event("implementors_drained", {"count": 1})

    captured = capsys.readouterr()
    combined_output = f"{captured.out}\n{captured.err}"
    assert "Heads up" in combined_output
    assert "Boom" in combined_output
    assert "Viewer ready" in combined_output


def _chained_error() -> DocImplError:
    try:
        try:
            raise FragmentFormatError("invalid implementors list", line=4)
        except FragmentFormatError as exc:
            raise DocImplError("replay failed") from exc
    except DocImplError as error:
        return error
    raise AssertionError("unreachable")


def test_exception_messages_follow_causes() -> None:
    error = _chained_error()
    assert exception_messages(error) == ["replay failed", "line 4: invalid implementors list"]


def test_render_message_lists_causes_when_very_verbose(
    capsys: pytest.CaptureFixture[str],
) -> None:
    set_cli_state(verbosity=2, debug=False)
    render_message("error", "replay failed", exception=_chained_error())

    err = capsys.readouterr().err
    assert "type: DocImplError" in err
    assert "caused by:" in err
    assert "  line 4: invalid implementors list" in err


def test_render_message_hides_causes_by_default(capsys: pytest.CaptureFixture[str]) -> None:
    set_cli_state(verbosity=0, debug=False)
    render_message("error", "replay failed", exception=_chained_error())

    err = capsys.readouterr().err
    assert "replay failed" in err
    assert "caused by" not in err
