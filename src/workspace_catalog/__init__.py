# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Public export surface for the workspace catalog model."""

from __future__ import annotations

from typing import Final

from .errors import CatalogParseError, ParseError
from .io import dump_document, parse_document
from .model import WorkspaceCatalog, parse_workspace
from .settings import SerializationOptions
from .store import CatalogStore
from .types import DEFAULT_CATALOG, CatalogEntries, WorkspaceDocument, WorkspacesSection

__all__: Final[tuple[str, ...]] = (
    "DEFAULT_CATALOG",
    "CatalogEntries",
    "CatalogParseError",
    "CatalogStore",
    "ParseError",
    "SerializationOptions",
    "WorkspaceCatalog",
    "WorkspaceDocument",
    "WorkspacesSection",
    "dump_document",
    "parse_document",
    "parse_workspace",
)
