# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Configuration model controlling how workspace documents are serialised."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SerializationOptions(BaseModel):
    """Formatting options applied when a workspace document is rendered."""

    model_config = ConfigDict(validate_assignment=True, frozen=True)

    indent: int = Field(default=2, ge=0)
    ensure_ascii: bool = False
    trailing_newline: bool = False


DEFAULT_SERIALIZATION = SerializationOptions()

__all__ = ["DEFAULT_SERIALIZATION", "SerializationOptions"]
