from sqlalchemy import Column, String

from inventory_system.database.base import Base
from inventory_system.models._ids import new_id


class Supplier(Base):
    __tablename__ = "suppliers"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False, unique=True)
    contact_number = Column(String)
    email = Column(String)


__all__ = ["Supplier"]
