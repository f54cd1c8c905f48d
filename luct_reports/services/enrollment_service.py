import logging

from sqlalchemy import update
from sqlalchemy.orm import Session

from luct_reports.errors import Conflict, NotFound
from luct_reports.models import Enrollment, LectureClass
from luct_reports.services.transactions import atomic

log = logging.getLogger(__name__)

ALREADY_ENROLLED = "Already enrolled in this class"


def is_enrolled(session: Session, student_id: int, class_id: int) -> bool:
    return (
        session.query(Enrollment.id)
        .filter(Enrollment.student_id == student_id, Enrollment.class_id == class_id)
        .first()
        is not None
    )


def enroll_student(session: Session, student_id: int, class_id: int) -> Enrollment:
    """Enroll a student and bump the class counter in the same transaction."""
    if session.get(LectureClass, class_id) is None:
        raise NotFound("Class not found")
    if is_enrolled(session, student_id, class_id):
        raise Conflict(ALREADY_ENROLLED)

    enrollment = Enrollment(student_id=student_id, class_id=class_id)
    with atomic(session, ALREADY_ENROLLED):
        session.add(enrollment)
        session.flush()
        session.execute(
            update(LectureClass)
            .where(LectureClass.id == class_id)
            .values(total_registered_students=LectureClass.total_registered_students + 1)
        )
    log.info("Student %s enrolled in class %s", student_id, class_id)
    return enrollment
