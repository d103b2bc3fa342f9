"""Persistence error taxonomy and the SQLAlchemy error translation shared by repositories and services."""
import logging
from contextlib import contextmanager

from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    """Storage-layer failure. Propagated to the caller, never retried here."""


class ConstraintViolationError(PersistenceError):
    """A write was rejected by a database constraint (unique, check, foreign key)."""


class StorageUnavailableError(PersistenceError):
    """The database could not be reached or the connection was lost."""


class InstanceNotFoundError(Exception):
    """Raised by services when a requested record does not exist."""


@contextmanager
def translate_errors(session: Session, action: str):
    """Roll back and re-raise SQLAlchemy failures as PersistenceError subclasses."""
    try:
        yield
    except IntegrityError as e:
        session.rollback()
        logger.error("Constraint violation while %s: %s", action, e.orig)
        raise ConstraintViolationError(f"Constraint violation while {action}") from e
    except DBAPIError as e:
        session.rollback()
        if e.connection_invalidated:
            logger.error("Database connection lost while %s", action)
            raise StorageUnavailableError(f"Database unavailable while {action}") from e
        logger.error("Database error while %s: %s", action, e.orig)
        raise PersistenceError(f"Database error while {action}") from e
    except SQLAlchemyError as e:
        session.rollback()
        logger.error("Persistence failure while %s: %s", action, e)
        raise PersistenceError(f"Persistence failure while {action}") from e
