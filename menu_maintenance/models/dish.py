from sqlalchemy import Column, Integer, String, Numeric, DateTime, func
from menu_maintenance.models.base import Base

class Dish(Base):
    __tablename__ = "dishes"
    # sqlite only keeps a resettable counter for AUTOINCREMENT tables
    __table_args__ = {"sqlite_autoincrement": True}

    dish_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    price_eur = Column(Numeric(12, 4), nullable=False)
    record_date = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self) -> str:
        return f"<Dish {self.dish_id} {self.name!r}>"
