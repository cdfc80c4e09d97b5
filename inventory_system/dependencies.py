from fastapi import Depends

from inventory_system.database.session import Database, get_database, get_db
from inventory_system.database.unit_of_work import UnitOfWork


def get_unit_of_work(database: Database = Depends(get_database)) -> UnitOfWork:
    return database.unit_of_work()


__all__ = ["get_db", "get_database", "get_unit_of_work"]
