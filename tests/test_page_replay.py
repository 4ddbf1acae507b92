from __future__ import annotations

import pytest

from docimpl.core.config import PendingPolicy
from docimpl.core.page import ImplementorsStore, replay_page_load
from docimpl.core.producer import FragmentProducer
from docimpl.core.records import ImplementorRecord
from docimpl.core.registry import ImplementorsRegistry


def _producers() -> list[FragmentProducer]:
    return [
        FragmentProducer.from_table(
            {"gimli": [("impl Hash for Format", False, [])]}, trait_path="core::hash::Hash"
        ),
        FragmentProducer.from_table(
            {"imgui": [("impl Drop for Context", False, [])]}, trait_path="core::ops::drop::Drop"
        ),
        FragmentProducer.from_table(
            {"gimli": [("impl From<u8> for Register", False, [])]},
            trait_path="core::convert::From",
        ),
    ]


def test_store_merges_libraries_in_first_seen_order() -> None:
    store = ImplementorsStore()
    store({"a": (ImplementorRecord("one"),), "b": ()})
    store({"a": (ImplementorRecord("two"),)})

    assert store.libraries() == ["a", "b"]
    assert store.records("a") == (ImplementorRecord("two"),)
    assert store.records("missing") == ()
    assert len(store.received) == 2
    assert len(store) == 2


def test_install_first_delivers_everything() -> None:
    report = replay_page_load(_producers(), install_at=0)
    assert report.delivered == 3
    assert report.dropped == []
    assert report.install_index == 0


def test_install_last_keeps_only_final_mapping() -> None:
    report = replay_page_load(_producers())
    assert report.install_index == 3
    assert report.delivered == 1
    assert report.dropped == ["core::hash::Hash", "core::ops::drop::Drop"]
    assert report.store.libraries() == ["gimli"]


def test_install_in_the_middle() -> None:
    report = replay_page_load(_producers(), install_at=2)
    assert report.dropped == ["core::hash::Hash"]
    assert report.delivered == 2


def test_queue_policy_replay_drops_nothing() -> None:
    registry = ImplementorsRegistry(policy=PendingPolicy.QUEUE)
    report = replay_page_load(_producers(), registry=registry)
    assert report.dropped == []
    assert [list(mapping) for mapping in report.store.received] == [["gimli"], ["imgui"], ["gimli"]]


def test_install_index_is_clamped() -> None:
    report = replay_page_load(_producers(), install_at=99)
    assert report.install_index == 3


def test_replay_rejects_registry_with_callback_installed() -> None:
    registry = ImplementorsRegistry()
    earlier = ImplementorsStore()
    registry.install(earlier)

    with pytest.raises(ValueError, match="already has a viewer callback"):
        replay_page_load(_producers(), registry=registry)
    assert earlier.received == []
