from inventory_system.database.base import Base
from inventory_system.database.engine import build_engine
from inventory_system.database.session import Database, get_database, get_db
from inventory_system.database.unit_of_work import UnitOfWork

__all__ = ["Base", "Database", "UnitOfWork", "build_engine", "get_database", "get_db"]
