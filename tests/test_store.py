# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for name-based catalog slot resolution."""

from __future__ import annotations

import pytest

from workspace_catalog import CatalogStore


def test_lookup_resolves_both_slots() -> None:
    """The reserved name maps to ``catalog``; others map into ``catalogs``."""
    document = {"workspaces": {"catalog": {"a": "1"}, "catalogs": {"x": {"b": "2"}}}}
    store = CatalogStore(document)
    assert store.lookup("default") == {"a": "1"}
    assert store.lookup("x") == {"b": "2"}
    assert store.lookup("y") is None


@pytest.mark.parametrize(
    "document",
    [
        {},
        {"workspaces": None},
        {"workspaces": {}},
        {"workspaces": {"catalogs": {}}},
        {"workspaces": {"catalog": None, "catalogs": None}},
    ],
)
def test_lookup_tolerates_missing_levels(document: dict[str, object]) -> None:
    """Every missing level should resolve to ``None`` instead of raising."""
    store = CatalogStore(document)
    assert store.lookup("default") is None
    assert store.lookup("anything") is None
    assert list(store.names()) == []


def test_lookup_on_non_object_root() -> None:
    """A JSON array root has no catalogs but does not break lookups."""
    store = CatalogStore([1, 2])  # type: ignore[arg-type]
    assert store.workspaces() is None
    assert store.lookup("default") is None


def test_names_orders_default_first() -> None:
    """Default comes first, then named catalogs in insertion order."""
    document = {"workspaces": {"catalogs": {"b": {}, "a": {}}, "catalog": {}}}
    assert list(CatalogStore(document).names()) == ["default", "b", "a"]


def test_create_materialises_named_container() -> None:
    """Creating a named catalog adds the ``catalogs`` container on demand."""
    document: dict[str, object] = {"workspaces": {}}
    store = CatalogStore(document)
    assert store.create("vue") is True
    assert document == {"workspaces": {"catalogs": {"vue": {}}}}
    assert store.create("vue") is False


def test_create_default_never_touches_named_container() -> None:
    """The default catalog is never duplicated into ``catalogs``."""
    document: dict[str, object] = {"workspaces": {}}
    assert CatalogStore(document).create("default") is True
    assert document == {"workspaces": {"catalog": {}}}


def test_create_requires_workspaces_section() -> None:
    """The store does not create the ``workspaces`` section itself."""
    with pytest.raises(TypeError):
        CatalogStore({}).create("default")


def test_remove_reports_result() -> None:
    """Removal returns whether something was deleted."""
    document = {"workspaces": {"catalog": {"a": "1"}, "catalogs": {"x": {}}}}
    store = CatalogStore(document)
    assert store.remove("x") is True
    assert store.remove("x") is False
    assert store.remove("default") is True
    assert document == {"workspaces": {"catalogs": {}}}


def test_create_and_remove_log(caplog: pytest.LogCaptureFixture) -> None:
    """Structural changes are reported at debug level."""
    caplog.set_level("DEBUG", logger="workspace_catalog")
    store = CatalogStore({"workspaces": {}})
    store.create("tools")
    store.remove("tools")
    messages = [record.getMessage() for record in caplog.records]
    assert "created catalog 'tools'" in messages
    assert "removed catalog 'tools'" in messages
