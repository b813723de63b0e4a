"""Translation of SQLAlchemy failures into application errors."""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from wholesale.core.exceptions import DuplicateKeyError, StorageError

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors(db: Session, resource: str, unique_key: Optional[str] = None) -> Iterator[None]:
    """
    Roll back and re-raise store failures as application errors.

    An IntegrityError becomes DuplicateKeyError when ``unique_key`` names the
    secondary key being written; every other failure becomes StorageError.
    """
    try:
        yield
    except IntegrityError as e:
        db.rollback()
        if unique_key is not None:
            raise DuplicateKeyError(resource, unique_key) from e
        logger.error(f"{resource} constraint violation: {e.orig}")
        raise StorageError(f"{resource} violates a storage constraint") from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"{resource} storage failure")
        raise StorageError(f"{resource} storage failure: {e.__class__.__name__}") from e
