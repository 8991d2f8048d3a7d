from sqlalchemy import Column, Integer, ForeignKey
from menu_maintenance.models.base import Base

# Join tables carry a surrogate key only; (category_id, dish_id) pairs are not
# unique at the schema level, so callers check before inserting.

class DishCategory(Base):
    __tablename__ = "categories_dishes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    category_id = Column(Integer, ForeignKey("categories.category_id", ondelete="RESTRICT"), nullable=False)
    dish_id = Column(Integer, ForeignKey("dishes.dish_id", ondelete="RESTRICT"), nullable=False)


class DishIngredient(Base):
    __tablename__ = "dishes_ingredients"

    id = Column(Integer, primary_key=True, autoincrement=True)
    dish_id = Column(Integer, ForeignKey("dishes.dish_id", ondelete="RESTRICT"), nullable=False)
    ingredient_id = Column(Integer, nullable=False)


class DishCuisson(Base):
    __tablename__ = "dishes_cuisson"

    id = Column(Integer, primary_key=True, autoincrement=True)
    dish_id = Column(Integer, ForeignKey("dishes.dish_id", ondelete="RESTRICT"), nullable=False)
    cuisson_id = Column(Integer, nullable=False)
