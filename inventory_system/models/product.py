from sqlalchemy import CheckConstraint, Column, Float, Integer, String

from inventory_system.core.constants import DEFAULT_CATEGORY
from inventory_system.database.base import Base
from inventory_system.models._ids import new_id


class Product(Base):
    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False, unique=True)
    category = Column(String, nullable=False, default=DEFAULT_CATEGORY)

    # Only changed by purchases and sales.
    quantity = Column(Integer, nullable=False, default=0)
    price = Column(Float, nullable=False)

    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_products_quantity_non_negative"),
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
    )


__all__ = ["Product"]
