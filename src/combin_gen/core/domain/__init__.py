"""
Domain models and value objects.

Contains boundary values, named fixture inputs and expected outcomes.
"""

from combin_gen.core.domain.boundary import (
    BINARY,
    BOUNDARY_SETS,
    ONE_UNIT,
    TERNARY,
    TWO_UNITS,
    U128_LIMIT,
    ZERO,
    boundary_set,
    get_boundary_set,
    validate_boundary_value,
)
from combin_gen.core.domain.inputs import RELEASE_PT_FIELDS, FixtureInput, ReleasePTInput
from combin_gen.core.domain.outcome import (
    SUCCESS,
    ClassifiedCase,
    FailureCategory,
    Outcome,
    Success,
)

__all__ = [
    # Boundary values
    "ZERO",
    "ONE_UNIT",
    "TWO_UNITS",
    "U128_LIMIT",
    "BINARY",
    "TERNARY",
    "BOUNDARY_SETS",
    "boundary_set",
    "get_boundary_set",
    "validate_boundary_value",
    # Inputs
    "FixtureInput",
    "ReleasePTInput",
    "RELEASE_PT_FIELDS",
    # Outcomes
    "FailureCategory",
    "Success",
    "SUCCESS",
    "Outcome",
    "ClassifiedCase",
]
