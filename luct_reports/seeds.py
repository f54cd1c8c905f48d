import logging
from typing import Sequence

from sqlalchemy.orm import Session

from luct_reports.models import Faculty

log = logging.getLogger(__name__)

DEFAULT_FACULTIES = (
    "Faculty of Information and Communication Technology",
    "Faculty of Business Management and Globalisation",
    "Faculty of Design and Innovation",
    "Faculty of Communication, Media and Broadcasting",
    "Faculty of Architecture and the Built Environment",
)


def seed_faculties(session: Session, names: Sequence[str] = DEFAULT_FACULTIES) -> int:
    """Insert the default faculties when the table is empty. Returns rows added."""
    if session.query(Faculty.id).first():
        return 0
    session.add_all([Faculty(name=name) for name in names])
    session.commit()
    log.info("Seeded %d faculties", len(names))
    return len(names)
