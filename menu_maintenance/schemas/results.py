from decimal import Decimal
from typing import FrozenSet, List, Optional

from pydantic import BaseModel, Field


class AddedDish(BaseModel):
    dish_id: int
    name: str
    price_eur: Decimal
    category_id: int


class ProcedureResult(BaseModel):
    """Outcome of one maintenance run; `error` is set when the run was aborted."""
    warnings: List[str] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ReplacementResult(ProcedureResult):
    inserted: int = 0
    skipped: int = 0
    dishes: List[AddedDish] = Field(default_factory=list)


class ReorgPartition(BaseModel):
    """Three-way split of the dishes touched by a reorg."""
    keep: FrozenSet[int] = frozenset()
    move: FrozenSet[int] = frozenset()
    overflow: FrozenSet[int] = frozenset()


class ReorgResult(ProcedureResult):
    renamed: int = 0
    overflow_category_id: Optional[int] = None
    overflow_category_created: bool = False
    kept: List[int] = Field(default_factory=list)
    moved_to_target: List[int] = Field(default_factory=list)
    moved_to_overflow: List[int] = Field(default_factory=list)
    links_created: int = 0
    links_deleted: int = 0
