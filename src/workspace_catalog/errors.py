# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised while reading workspace catalog documents."""

from __future__ import annotations


class CatalogParseError(ValueError):
    """Raised when workspace configuration text is not valid JSON."""

    def __init__(self, message: str, *, line: int | None = None, column: int | None = None) -> None:
        """Create the parse error with an optional source position.

        Args:
            message: Human-readable description of the failure.
            line: One-based line of the offending character, when known.
            column: One-based column of the offending character, when known.
        """

        super().__init__(message)
        self.line = line
        self.column = column


ParseError = CatalogParseError

__all__ = ("CatalogParseError", "ParseError")
