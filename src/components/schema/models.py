"""
Schema component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SchemaError:
    """Schema migration error."""

    code: str
    message: str
    path: str | None = None


@dataclass(frozen=True)
class MigrateInput:
    """Input for migrating a Delta to a target schema version."""

    delta: Any
    target_version: int


@dataclass(frozen=True)
class MigrateOutput:
    """Output with the migrated Delta."""

    delta: list[dict[str, Any]] | None
    errors: list[SchemaError] = field(default_factory=list)
    success: bool = True
