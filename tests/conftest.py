# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json

import pytest

from workspace_catalog import WorkspaceCatalog, parse_workspace


@pytest.fixture
def react_document() -> dict[str, object]:
    """Return a workspace document with a default and two named catalogs."""
    return {
        "workspaces": {
            "packages": ["packages/*", "apps/*"],
            "catalog": {
                "@unocss/core": "^0.66.0",
                "react": "^18.2.0",
            },
            "catalogs": {
                "react18": {
                    "next": "^14.0.0",
                    "react-dom": "^18.2.0",
                    "react": "^18.2.0",
                },
                "react19": {
                    "react": "^19.0.0",
                },
            },
        },
    }


@pytest.fixture
def react_workspace(react_document: dict[str, object]) -> WorkspaceCatalog:
    """Return a model parsed from :func:`react_document`."""
    return parse_workspace(json.dumps(react_document))


@pytest.fixture
def empty_workspace() -> WorkspaceCatalog:
    """Return a model parsed from an empty ``workspaces`` section."""
    return parse_workspace(json.dumps({"workspaces": {}}))
