"""
Schema component - Delta v1 <-> v2 migration.
"""

from ._impl import (
    SCHEMA_V1,
    SCHEMA_V2,
    box_op,
    delta_v1_to_v2,
    delta_v2_to_v1,
    detect_schema,
    unbox_op,
)
from .component import run, run_migrate
from .models import MigrateInput, MigrateOutput, SchemaError

__all__ = [
    # Entry points
    "run",
    "run_migrate",
    # Models
    "MigrateInput",
    "MigrateOutput",
    "SchemaError",
    # _impl
    "SCHEMA_V1",
    "SCHEMA_V2",
    "box_op",
    "delta_v1_to_v2",
    "delta_v2_to_v1",
    "detect_schema",
    "unbox_op",
]
