from sqlalchemy import CheckConstraint, Column, DateTime, Float, Index, Integer, String

from inventory_system.database.base import Base
from inventory_system.models._ids import new_id, utcnow


class Purchase(Base):
    __tablename__ = "purchases"

    id = Column(String(36), primary_key=True, default=new_id)
    date = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    quantity = Column(Integer, nullable=False)
    total_cost = Column(Float, nullable=False)

    # Identity references, resolved at read time. Not enforced, so deleting
    # a product leaves its purchases pointing at nothing.
    product_id = Column(String(36), nullable=False)
    supplier_id = Column(String(36), nullable=False)

    __table_args__ = (
        CheckConstraint("quantity >= 1", name="ck_purchases_quantity_min"),
        CheckConstraint("total_cost >= 0", name="ck_purchases_total_cost_non_negative"),
        Index("idx_purchases_date", "date"),
        Index("idx_purchases_product", "product_id"),
    )


__all__ = ["Purchase"]
