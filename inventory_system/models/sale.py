from sqlalchemy import CheckConstraint, Column, DateTime, Float, Index, Integer, String

from inventory_system.database.base import Base
from inventory_system.models._ids import new_id, utcnow


class Sale(Base):
    __tablename__ = "sales"

    id = Column(String(36), primary_key=True, default=new_id)
    date = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    quantity = Column(Integer, nullable=False)
    total_price = Column(Float, nullable=False)

    product_id = Column(String(36), nullable=False)
    customer_id = Column(String(36), nullable=False)

    __table_args__ = (
        CheckConstraint("quantity >= 1", name="ck_sales_quantity_min"),
        CheckConstraint("total_price >= 0", name="ck_sales_total_price_non_negative"),
        Index("idx_sales_date", "date"),
        Index("idx_sales_product", "product_id"),
    )


__all__ = ["Sale"]
