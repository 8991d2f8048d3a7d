"""Pydantic schemas for maintenance configuration and results."""

from .menu import (
    MenuItem,
    KeywordRule,
    CategoryRename,
    CategoryReorgPlan,
    CategoryRecord,
)

from .results import (
    AddedDish,
    ProcedureResult,
    ReplacementResult,
    ReorgPartition,
    ReorgResult,
)

__all__ = [
    # Configuration schemas
    "MenuItem",
    "KeywordRule",
    "CategoryRename",
    "CategoryReorgPlan",
    "CategoryRecord",
    # Result schemas
    "AddedDish",
    "ProcedureResult",
    "ReplacementResult",
    "ReorgPartition",
    "ReorgResult",
]
