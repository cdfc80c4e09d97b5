import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from inventory_system.core.errors import PersistenceError, ValidationError

logger = logging.getLogger(__name__)


def value_taken(db: Session, column, value, *, exclude_id=None) -> bool:
    if value is None:
        return False
    stmt = select(column.class_.id).where(column == value).limit(1)
    if exclude_id is not None:
        stmt = stmt.where(column.class_.id != exclude_id)
    return db.execute(stmt).first() is not None


def ensure_unique(db: Session, entity: str, column, value, *, exclude_id=None) -> None:
    if value_taken(db, column, value, exclude_id=exclude_id):
        raise ValidationError(
            "{} validation failed: {} '{}' already exists.".format(entity, column.key, value)
        )


def commit_record(db: Session, entity: str, record):
    """Commit pending changes to ``record`` and reload it."""
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ValidationError(
            "{} validation failed.".format(entity), str(exc.orig)
        ) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to save %s", entity)
        raise PersistenceError("Failed to save {}.".format(entity.lower()), str(exc)) from exc
    db.refresh(record)
    return record


def fetch_all(db: Session, stmt, failure_message: str) -> list:
    try:
        return list(db.execute(stmt).scalars().all())
    except SQLAlchemyError as exc:
        logger.exception(failure_message)
        raise PersistenceError(failure_message, str(exc)) from exc
