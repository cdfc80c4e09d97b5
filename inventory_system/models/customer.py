from sqlalchemy import Column, String

from inventory_system.database.base import Base
from inventory_system.models._ids import new_id


class Customer(Base):
    __tablename__ = "customers"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False, index=True)
    phone = Column(String)
    email = Column(String, unique=True)


__all__ = ["Customer"]
