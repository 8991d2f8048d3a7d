from sqlalchemy import Column, Integer, String
from menu_maintenance.models.base import Base

class Category(Base):
    __tablename__ = "categories"

    category_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    # "dish" for dish categories, other kinds share the table
    type = Column(String(50), nullable=False)

    def __repr__(self) -> str:
        return f"<Category {self.category_id} {self.name!r} type={self.type!r}>"
