from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from src.selectshop.core.exceptions import StorageFailureError


def commit(session: Session) -> None:
    """Commit the unit of work, reporting store failures as domain errors."""
    try:
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        raise StorageFailureError(f"Failed to commit transaction: {e}") from e
