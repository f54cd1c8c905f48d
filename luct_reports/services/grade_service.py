import logging

from sqlalchemy.orm import Session

from luct_reports.errors import Forbidden, NotFound, ValidationFailed
from luct_reports.models import Grade, LectureClass
from luct_reports.schemas.auth import TokenClaims
from luct_reports.schemas.grade import GradeCreate
from luct_reports.services.enrollment_service import is_enrolled
from luct_reports.services.transactions import atomic

log = logging.getLogger(__name__)


def submit_grade(session: Session, claims: TokenClaims, data: GradeCreate) -> Grade:
    # score range and grade type are already enforced by GradeCreate
    lecture_class = session.get(LectureClass, data.class_id)
    if lecture_class is None:
        raise NotFound("Class not found")
    if lecture_class.lecturer_id != claims.user_id:
        raise Forbidden("You can only grade students in classes you teach")
    if not is_enrolled(session, data.student_id, data.class_id):
        raise ValidationFailed("Student is not enrolled in this class")

    grade = Grade(lecturer_id=claims.user_id, **data.model_dump())
    with atomic(session):
        session.add(grade)
    log.info("Lecturer %s graded student %s in class %s", claims.user_id, data.student_id, data.class_id)
    return grade
