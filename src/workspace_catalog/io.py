# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers converting workspace documents to and from JSON text."""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from typing import Any, cast

from .errors import CatalogParseError
from .settings import DEFAULT_SERIALIZATION, SerializationOptions
from .types import RawDocument

LOGGER = logging.getLogger(__name__)


def _reject_constant(token: str) -> float:
    """Refuse the ``NaN`` and ``Infinity`` tokens that JSON does not define."""

    LOGGER.debug("rejecting non-standard JSON constant %s", token)
    raise CatalogParseError(f"failed to parse workspace JSON: {token} is not a JSON value")


def _parse_finite_float(token: str) -> float:
    """Return ``token`` as a float, refusing numbers outside the float range."""

    value = float(token)
    if not math.isfinite(value):
        LOGGER.debug("rejecting out-of-range JSON number %s", token)
        raise CatalogParseError(f"failed to parse workspace JSON: {token} is out of range")
    return value


def parse_document(content: str | bytes | bytearray) -> RawDocument:
    """Parse ``content`` into a workspace document.

    Only JSON syntax is checked. The shape of the payload is left as found so
    unknown keys and ``workspaces.packages`` survive a later dump unchanged.

    Args:
        content: JSON text, or UTF-8 encoded bytes holding JSON text.

    Returns:
        RawDocument: Parsed JSON payload.

    Raises:
        CatalogParseError: If ``content`` is not syntactically valid JSON or
            holds a number that does not fit a finite float.
    """

    try:
        payload = json.loads(content, parse_constant=_reject_constant, parse_float=_parse_finite_float)
    except json.JSONDecodeError as exc:
        LOGGER.debug("rejecting workspace JSON at line %d column %d: %s", exc.lineno, exc.colno, exc.msg)
        raise CatalogParseError(
            f"failed to parse workspace JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})",
            line=exc.lineno,
            column=exc.colno,
        ) from exc
    except UnicodeDecodeError as exc:
        LOGGER.debug("rejecting workspace bytes that are not valid UTF-8: %s", exc)
        raise CatalogParseError(f"failed to decode workspace JSON: {exc.reason}") from exc
    return cast(RawDocument, payload)


def dump_document(
    document: Mapping[str, Any],
    options: SerializationOptions = DEFAULT_SERIALIZATION,
) -> str:
    """Render ``document`` as formatted JSON text.

    Args:
        document: Workspace document to serialise. Key order is preserved.
        options: Formatting options applied to the output.

    Returns:
        str: JSON text indented according to ``options``.

    Raises:
        ValueError: If ``document`` holds a ``NaN`` or infinite float.
    """

    text = json.dumps(document, indent=options.indent, ensure_ascii=options.ensure_ascii, allow_nan=False)
    if options.trailing_newline:
        return f"{text}\n"
    return text


__all__ = ["dump_document", "parse_document"]
