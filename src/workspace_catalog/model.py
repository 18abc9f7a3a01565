# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""In-memory model of a workspace dependency-catalog configuration."""

from __future__ import annotations

import logging
from typing import cast

from .io import dump_document, parse_document
from .settings import DEFAULT_SERIALIZATION, SerializationOptions
from .store import CatalogStore
from .types import DEFAULT_CATALOG, WORKSPACES_KEY, CatalogEntries, RawDocument, WorkspaceDocument

LOGGER = logging.getLogger(__name__)


class WorkspaceCatalog:
    """Mutable workspace document exposing default and named catalogs.

    The catalog named ``"default"`` maps to ``workspaces.catalog``; any other
    name maps to an entry of ``workspaces.catalogs``. Every mutation marks the
    model as changed and the flag never resets. Lookups on missing catalogs or
    packages return ``None``, an empty mapping, or do nothing; they never raise.
    """

    __slots__ = ("_changed", "_document", "_options")

    def __init__(
        self,
        document: WorkspaceDocument | RawDocument,
        *,
        options: SerializationOptions | None = None,
    ) -> None:
        """Wrap an already parsed ``document`` without copying it.

        Args:
            document: Parsed workspace document owned by the model from now on.
            options: Serialisation options used by :meth:`to_string`.
        """

        self._document = cast(RawDocument, document)
        self._options = options or DEFAULT_SERIALIZATION
        self._changed = False

    @classmethod
    def parse(
        cls,
        content: str | bytes | bytearray,
        *,
        options: SerializationOptions | None = None,
    ) -> WorkspaceCatalog:
        """Build a model from JSON ``content``.

        Args:
            content: JSON text of the workspace configuration.
            options: Serialisation options used by :meth:`to_string`.

        Returns:
            WorkspaceCatalog: Fresh model whose change flag is ``False``.

        Raises:
            CatalogParseError: If ``content`` is not valid JSON.
        """

        return cls(parse_document(content), options=options)

    @property
    def options(self) -> SerializationOptions:
        """Return the serialisation options bound to this model."""

        return self._options

    @property
    def _store(self) -> CatalogStore:
        """Return a catalog view over the current document."""

        return CatalogStore(self._document)

    # Document ---------------------------------------------------------

    def get_content(self) -> WorkspaceDocument:
        """Return the live document; mutations to it are not tracked."""

        return cast(WorkspaceDocument, self._document)

    def set_content(self, document: WorkspaceDocument | RawDocument) -> None:
        """Replace the whole document and mark the model as changed."""

        self._document = cast(RawDocument, document)
        self._changed = True
        LOGGER.debug("workspace document replaced")

    def has_changed(self) -> bool:
        """Return ``True`` once any mutation has been applied."""

        return self._changed

    def to_string(self) -> str:
        """Serialise the document using the bound :class:`SerializationOptions`."""

        return dump_document(self._document, self._options)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(catalogs={self.list_catalogs()!r}, changed={self._changed!r})"

    def _ensure_workspaces(self) -> None:
        """Materialise an absent ``workspaces`` section, marking the change."""

        if self._document.get(WORKSPACES_KEY) is None:
            self._document[WORKSPACES_KEY] = {}
            self._changed = True
            LOGGER.debug("materialised empty '%s' section", WORKSPACES_KEY)

    # Catalogs ---------------------------------------------------------

    def create_catalog(self, name: str) -> None:
        """Create catalog ``name`` as an empty mapping unless it already exists."""

        self._ensure_workspaces()
        if self._store.create(name):
            self._changed = True

    def remove_catalog(self, name: str) -> None:
        """Delete catalog ``name`` with all of its packages, if present."""

        if self._store.remove(name):
            self._changed = True

    def list_catalogs(self) -> list[str]:
        """Return catalog names, ``"default"`` first when it exists."""

        return list(self._store.names())

    def get_catalog_packages(self, catalog_name: str) -> CatalogEntries:
        """Return the package mapping of ``catalog_name``.

        Args:
            catalog_name: Catalog to inspect.

        Returns:
            CatalogEntries: Live mapping of package names to versions, or a new
            empty mapping when the catalog does not exist.
        """

        catalog = self._store.lookup(catalog_name)
        if catalog is None:
            return {}
        return catalog

    # Packages ---------------------------------------------------------

    def set_catalog_version(self, catalog_name: str, package_name: str, version: str) -> None:
        """Pin ``package_name`` to ``version`` in ``catalog_name``.

        The catalog and any enclosing sections are created when missing. The
        model is marked as changed even when the version is unchanged.

        Args:
            catalog_name: Target catalog, ``"default"`` included.
            package_name: Package whose version is recorded.
            version: Version specifier stored verbatim.
        """

        self.create_catalog(catalog_name)
        catalog = self._store.lookup(catalog_name)
        if catalog is None:
            raise TypeError(f"catalog '{catalog_name}' is not an object")
        catalog[package_name] = version
        self._changed = True

    def set_package(self, catalog_name: str, package_name: str, version: str) -> None:
        """Alias of :meth:`set_catalog_version`."""

        self.set_catalog_version(catalog_name, package_name, version)

    def get_catalog_version(self, catalog_name: str, package_name: str) -> str | None:
        """Return the version of ``package_name`` in ``catalog_name``, or ``None``."""

        catalog = self._store.lookup(catalog_name)
        if catalog is None:
            return None
        return catalog.get(package_name)

    def get_package_catalogs(self, package_name: str) -> list[str]:
        """Return every catalog containing ``package_name``.

        Named catalogs are reported in document order and the default catalog,
        when it contains the package, is always reported last.

        Args:
            package_name: Package to search for.

        Returns:
            list[str]: Names of catalogs pinning ``package_name``.
        """

        store = self._store
        found: list[str] = []
        named = store.named_catalogs()
        if named is not None:
            for name, entries in named.items():
                if isinstance(entries, dict) and package_name in entries:
                    found.append(name)
        default = store.default_catalog()
        if default is not None and package_name in default:
            found.append(DEFAULT_CATALOG)
        return found


def parse_workspace(
    content: str | bytes | bytearray,
    *,
    options: SerializationOptions | None = None,
) -> WorkspaceCatalog:
    """Parse ``content`` into an independent :class:`WorkspaceCatalog`.

    Raises:
        CatalogParseError: If ``content`` is not valid JSON.
    """

    return WorkspaceCatalog.parse(content, options=options)


__all__ = ["WorkspaceCatalog", "parse_workspace"]
