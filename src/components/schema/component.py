"""
Schema component - migrate stored Deltas between v1 and v2.

Invariants:
- I1: v1 -> v2 -> v1 recovers every text run
- I2: Non-text ops are unchanged by either direction
- I3: Malformed input fails loudly (success=False), never silently
"""

from __future__ import annotations

from src.domain.delta import MalformedDeltaError

from ._impl import SCHEMA_V1, SCHEMA_V2, delta_v1_to_v2, delta_v2_to_v1
from .models import MigrateInput, MigrateOutput, SchemaError

# --- Component Entry Points ---


def run_migrate(inp: MigrateInput) -> MigrateOutput:
    """
    Migrate a Delta to the requested schema version.

    Args:
        inp: Input containing the Delta and the target version (1 or 2).

    Returns:
        MigrateOutput with a new op list, or errors on malformed input.
    """
    if inp.target_version == SCHEMA_V2:
        migrate = delta_v1_to_v2
    elif inp.target_version == SCHEMA_V1:
        migrate = delta_v2_to_v1
    else:
        return MigrateOutput(
            delta=None,
            errors=[
                SchemaError(
                    code="unknown_version",
                    message=f"Unknown schema version: {inp.target_version}",
                )
            ],
            success=False,
        )

    try:
        delta = migrate(inp.delta)
    except MalformedDeltaError as e:
        return MigrateOutput(
            delta=None,
            errors=[SchemaError(code=e.code, message=e.message, path=e.path)],
            success=False,
        )

    return MigrateOutput(delta=delta, errors=[], success=True)


def run(inp: MigrateInput) -> MigrateOutput:
    """Main entry point for the schema component."""
    if isinstance(inp, MigrateInput):
        return run_migrate(inp)
    raise ValueError(f"Unknown input type: {type(inp)}")
