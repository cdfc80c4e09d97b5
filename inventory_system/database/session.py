import logging
from typing import Iterator

from fastapi import Request
from sqlalchemy.orm import Session, sessionmaker

from inventory_system.database.base import Base
from inventory_system.database.engine import build_engine
from inventory_system.database.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class Database:
    """Store handle built at startup and passed to every request."""

    def __init__(self, database_url: str):
        self.url = database_url
        self.engine = build_engine(database_url)
        self.session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine,
        )

    def create_schema(self) -> None:
        from inventory_system.models import import_all_models

        import_all_models()
        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.session_factory()

    def unit_of_work(self) -> UnitOfWork:
        return UnitOfWork(self.session_factory)

    def dispose(self) -> None:
        logger.info("Closing database connections")
        self.engine.dispose()


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_db(request: Request) -> Iterator[Session]:
    db = get_database(request).session()
    try:
        yield db
    finally:
        db.close()


__all__ = ["Database", "get_database", "get_db"]
