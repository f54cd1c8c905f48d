from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from luct_reports.errors import Conflict


@contextmanager
def atomic(session: Session, conflict_message: str = "Record conflicts with existing data") -> Iterator[Session]:
    """Commit everything written inside the block as one transaction.

    A uniqueness or check violation raised by the store becomes ``Conflict``.
    """
    try:
        yield session
        session.commit()
    except IntegrityError:
        session.rollback()
        raise Conflict(conflict_message)
    except Exception:
        session.rollback()
        raise
