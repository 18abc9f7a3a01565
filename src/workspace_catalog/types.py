# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for workspace catalog documents."""

from __future__ import annotations

from typing import Final, TypeAlias, TypedDict

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | list["JSONValue"] | dict[str, "JSONValue"]

CatalogEntries: TypeAlias = dict[str, str]


class WorkspacesSection(TypedDict, total=False):
    """The ``workspaces`` object holding package globs and catalogs."""

    packages: list[str]
    catalog: CatalogEntries
    catalogs: dict[str, CatalogEntries]


class WorkspaceDocument(TypedDict, total=False):
    """Root configuration document parsed from JSON."""

    workspaces: WorkspacesSection


# Parsed payloads are only guaranteed to be JSON; the TypedDicts above
# describe the expected shape, not a validated one.
RawDocument: TypeAlias = dict[str, JSONValue]

DEFAULT_CATALOG: Final[str] = "default"
WORKSPACES_KEY: Final[str] = "workspaces"
CATALOG_KEY: Final[str] = "catalog"
CATALOGS_KEY: Final[str] = "catalogs"

__all__ = [
    "CATALOGS_KEY",
    "CATALOG_KEY",
    "DEFAULT_CATALOG",
    "WORKSPACES_KEY",
    "CatalogEntries",
    "JSONPrimitive",
    "JSONValue",
    "RawDocument",
    "WorkspaceDocument",
    "WorkspacesSection",
]
