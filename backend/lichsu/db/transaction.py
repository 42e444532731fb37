"""
Unit-of-work helper for multi-row mutations.

    with atomic(db, "reorder"):
        ...  # every write in here commits together or not at all
"""
import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from lichsu.exceptions import TransactionFailure

logger = logging.getLogger(__name__)


@contextmanager
def atomic(db: Session, operation: str):
    """Commit on success; roll back and re-raise on any error.

    Storage errors are wrapped in TransactionFailure so callers can
    offer a retry.
    """
    try:
        yield db
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Transaction '%s' rolled back", operation, exc_info=True)
        raise TransactionFailure(
            f"Could not complete '{operation}', no changes were saved",
            operation=operation,
        ) from e
    except Exception:
        db.rollback()
        raise
