import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session, sessionmaker

logger = logging.getLogger(__name__)


class UnitOfWork:
    """Atomic read/write scope over one session.

    ``begin`` hands out a session with an open transaction, ``commit`` and
    ``abort`` finish it. ``scope`` wraps all three and closes the session on
    every exit path.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def begin(self) -> Session:
        session = self._session_factory()
        session.begin()
        return session

    def commit(self, session: Session) -> None:
        session.commit()

    def abort(self, session: Session) -> None:
        if session.in_transaction():
            session.rollback()

    @contextmanager
    def scope(self) -> Iterator[Session]:
        session = self.begin()
        try:
            yield session
            self.commit(session)
        except BaseException:
            logger.debug("Aborting unit of work", exc_info=True)
            self.abort(session)
            raise
        finally:
            session.close()


__all__ = ["UnitOfWork"]
