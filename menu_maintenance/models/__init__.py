"""Database models."""

# Import all models here to ensure they're recognized by SQLAlchemy
from menu_maintenance.models.base import Base
from menu_maintenance.models.category import Category
from menu_maintenance.models.dish import Dish
from menu_maintenance.models.dish_links import DishCategory, DishCuisson, DishIngredient

__all__ = [
    "Base",
    "Dish",
    "Category",
    "DishCategory",
    "DishIngredient",
    "DishCuisson",
]
