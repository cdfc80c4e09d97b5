from sqlalchemy import Column, Enum, String

from inventory_system.core.constants import USER_ROLES
from inventory_system.database.base import Base
from inventory_system.models._ids import new_id


class User(Base):
    """Account record. No route reads or writes it yet."""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    username = Column(String, nullable=False, unique=True)
    password_hash = Column(String, nullable=False)
    role = Column(Enum(*USER_ROLES, name="user_role"), nullable=False, default="admin")


__all__ = ["User"]
