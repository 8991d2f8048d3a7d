from decimal import Decimal
from typing import List, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from menu_maintenance.schemas.base import BaseSchema


class MenuItem(BaseModel):
    """A catalog entry as supplied to the replacement run (price in rupees)."""
    name: str = Field(..., min_length=1, max_length=255, description="Dish name")
    price: Decimal = Field(..., ge=0, description="Price in the source currency (INR)")


class KeywordRule(BaseModel):
    """One step of the ordered name classification: any keyword -> category."""
    keywords: Tuple[str, ...] = Field(..., min_length=1, description="Substrings matched against the upper-cased name")
    category_id: int = Field(..., description="Category assigned when a keyword matches")

    @field_validator("keywords")
    @classmethod
    def upper_keywords(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(keyword.upper() for keyword in value)

    def matches(self, upper_name: str) -> bool:
        return any(keyword in upper_name for keyword in self.keywords)


class CategoryRename(BaseModel):
    category_id: int
    name: str = Field(..., min_length=1)


class CategoryReorgPlan(BaseModel):
    """Fixed configuration for the category reorganization run."""
    rename: CategoryRename
    category_type: str = Field("dish", description="Type tag of the categories touched by the run")
    overflow_category_name: str = Field(..., min_length=1, description="Category receiving unlisted source members")
    source_category_id: int
    target_category_id: int
    keep_names: List[str] = Field(default_factory=list, description="Dishes that stay in the source category")
    move_names: List[str] = Field(default_factory=list, description="Dishes moved to the target category")

    @model_validator(mode="after")
    def check_disjoint(self) -> "CategoryReorgPlan":
        overlap = {n.upper() for n in self.keep_names} & {n.upper() for n in self.move_names}
        if overlap:
            raise ValueError(f"Dish names both kept and moved: {', '.join(sorted(overlap))}")
        if self.source_category_id == self.target_category_id:
            raise ValueError("source_category_id and target_category_id must differ")
        return self


class CategoryRecord(BaseSchema):
    category_id: int
    name: str
    type: str
