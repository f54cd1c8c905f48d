import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from luct_reports.dependencies import authenticate, get_db, require_role
from luct_reports.errors import Forbidden, NotFound, ValidationFailed
from luct_reports.models import Course, Enrollment, LectureClass, Role, User
from luct_reports.schemas.auth import TokenClaims
from luct_reports.schemas.course import ClassCreate, ClassOut, StudentOut
from luct_reports.services.catalog import class_query, roster_query, to_models
from luct_reports.services.transactions import atomic
from luct_reports.utils import success
from luct_reports.visibility import CLASS_SCOPES, ROSTER_ACCESS, allowed, scoped

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/classes", tags=["classes"])


@router.get("")
def list_classes(claims: TokenClaims = Depends(authenticate), session: Session = Depends(get_db)):
    classes = scoped(CLASS_SCOPES, class_query(session), claims)
    return success(classes=to_models(ClassOut, classes))


@router.get("/available")
def available_classes(
    claims: TokenClaims = Depends(require_role(Role.STUDENT)),
    session: Session = Depends(get_db),
):
    """Classes the calling student has not enrolled in yet."""
    enrolled = select(Enrollment.class_id).where(Enrollment.student_id == claims.user_id)
    classes = class_query(session).filter(LectureClass.id.not_in(enrolled))
    return success(classes=to_models(ClassOut, classes))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_class(
    data: ClassCreate,
    claims: TokenClaims = Depends(require_role(Role.PROGRAM_LEADER, Role.PRINCIPAL_LECTURER)),
    session: Session = Depends(get_db),
):
    if session.get(Course, data.course_id) is None:
        raise NotFound("Course not found")
    lecturer = session.get(User, data.lecturer_id)
    if lecturer is None or not lecturer.is_lecturer:
        raise ValidationFailed("lecturer_id must refer to a Lecturer")

    lecture_class = LectureClass(
        name=data.class_name.strip(),
        course_id=data.course_id,
        lecturer_id=lecturer.id,
        venue=data.venue,
        scheduled_time=data.scheduled_time,
        total_registered_students=0,
    )
    with atomic(session):
        session.add(lecture_class)
    log.info("%s created class %s for lecturer %s", claims.username, lecture_class.id, lecturer.id)

    created = class_query(session).filter(LectureClass.id == lecture_class.id).one()
    return success(message="Class added successfully", **{"class": ClassOut.model_validate(dict(created._mapping))})


@router.get("/{class_id}/students")
def class_students(
    class_id: int,
    claims: TokenClaims = Depends(authenticate),
    session: Session = Depends(get_db),
):
    lecture_class = session.get(LectureClass, class_id)
    if lecture_class is None:
        raise NotFound("Class not found")
    if not allowed(ROSTER_ACCESS, claims, lecture_class):
        raise Forbidden("You cannot view this class roster")
    return success(class_id=class_id, students=to_models(StudentOut, roster_query(session, class_id)))
