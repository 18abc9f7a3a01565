# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Name-based access to the default and named catalog slots of a document."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, cast

from .types import CATALOG_KEY, CATALOGS_KEY, DEFAULT_CATALOG, WORKSPACES_KEY, CatalogEntries, RawDocument

LOGGER = logging.getLogger(__name__)


def _mapping_or_none(value: object) -> dict[str, Any] | None:
    """Return ``value`` when it is a JSON object, otherwise ``None``."""

    if isinstance(value, dict):
        return cast(dict[str, Any], value)
    return None


@dataclass(frozen=True, slots=True)
class CatalogStore:
    """View over a workspace document addressing catalogs by name.

    The default catalog lives at ``workspaces.catalog`` and every other catalog
    lives at ``workspaces.catalogs[name]``. :meth:`_slot` is the only place that
    branches on the reserved name, so reads and writes cannot disagree about
    where a catalog is stored.

    The store never materialises the ``workspaces`` section itself and knows
    nothing about change tracking; :meth:`create` and :meth:`remove` report
    whether they touched the document so the owner can react.
    """

    document: RawDocument

    def workspaces(self) -> dict[str, Any] | None:
        """Return the ``workspaces`` section, or ``None`` when absent."""

        if not isinstance(self.document, dict):
            return None
        return _mapping_or_none(self.document.get(WORKSPACES_KEY))

    def default_catalog(self) -> CatalogEntries | None:
        """Return the default catalog mapping, or ``None`` when absent."""

        workspaces = self.workspaces()
        if workspaces is None:
            return None
        return _mapping_or_none(workspaces.get(CATALOG_KEY))

    def named_catalogs(self) -> dict[str, CatalogEntries] | None:
        """Return the container of named catalogs, or ``None`` when absent."""

        workspaces = self.workspaces()
        if workspaces is None:
            return None
        return _mapping_or_none(workspaces.get(CATALOGS_KEY))

    def _slot(self, name: str, *, materialise: bool = False) -> tuple[dict[str, Any] | None, str]:
        """Return the parent mapping and key under which catalog ``name`` is stored.

        Args:
            name: Catalog name, ``"default"`` included.
            materialise: Create an absent named-catalog container on the way.

        Returns:
            tuple[dict[str, Any] | None, str]: Parent mapping (``None`` when a
            level above the catalog is missing) and the key inside it.
        """

        if name == DEFAULT_CATALOG:
            return self.workspaces(), CATALOG_KEY
        workspaces = self.workspaces()
        if workspaces is None:
            return None, name
        if materialise and workspaces.get(CATALOGS_KEY) is None:
            workspaces[CATALOGS_KEY] = {}
        return _mapping_or_none(workspaces.get(CATALOGS_KEY)), name

    def lookup(self, name: str) -> CatalogEntries | None:
        """Return catalog ``name`` or ``None`` when it does not exist."""

        parent, key = self._slot(name)
        if parent is None:
            return None
        return _mapping_or_none(parent.get(key))

    def names(self) -> Iterator[str]:
        """Yield existing catalog names, the default catalog first."""

        if self.default_catalog() is not None:
            yield DEFAULT_CATALOG
        named = self.named_catalogs()
        if named is not None:
            yield from named

    def create(self, name: str) -> bool:
        """Create catalog ``name`` as an empty mapping when it is missing.

        The ``workspaces`` section must already exist.

        Returns:
            bool: ``True`` when a new catalog was inserted.

        Raises:
            TypeError: If the document holds a non-object where a catalog
                container is expected.
        """

        parent, key = self._slot(name, materialise=True)
        if parent is None:
            raise TypeError(f"cannot create catalog '{name}': enclosing workspace section is not an object")
        if parent.get(key) is not None:
            return False
        parent[key] = {}
        LOGGER.debug("created catalog '%s'", name)
        return True

    def remove(self, name: str) -> bool:
        """Delete catalog ``name`` and its packages.

        Returns:
            bool: ``True`` when a catalog was deleted.
        """

        parent, key = self._slot(name)
        if parent is None or parent.get(key) is None:
            return False
        del parent[key]
        LOGGER.debug("removed catalog '%s'", name)
        return True


__all__ = ["CatalogStore"]
