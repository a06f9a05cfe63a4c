# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Base record model with common fields.
"""

from datetime import datetime, timezone
from pydantic import BaseModel, Field, ConfigDict


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class BaseRecord(BaseModel):
    """Base for stored records: integer identity, immutable once built."""

    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        # Use enum values instead of enum objects
        use_enum_values=True,
        # Records are never updated after creation
        frozen=True,
    )

    id: int = Field(..., ge=1, description="Process-local sequential identifier")
    schema_version: int = Field(default=1, description="Schema version")
