from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from luct_reports.dependencies import authenticate, get_db, require_role
from luct_reports.errors import Conflict, Forbidden, NotFound, ValidationFailed
from luct_reports.models import Course, Faculty, LectureClass, Role
from luct_reports.schemas.auth import TokenClaims
from luct_reports.schemas.course import ClassOut, CourseCreate, CourseOut
from luct_reports.services.catalog import class_query, course_query, to_models
from luct_reports.services.transactions import atomic
from luct_reports.utils import success
from luct_reports.visibility import CLASS_SCOPES, COURSE_ACCESS, COURSE_SCOPES, allowed, scoped

router = APIRouter(prefix="/api/courses", tags=["courses"])

DUPLICATE_CODE = "Course code already exists"


@router.get("")
def list_courses(claims: TokenClaims = Depends(authenticate), session: Session = Depends(get_db)):
    courses = scoped(COURSE_SCOPES, course_query(session), claims)
    return success(courses=to_models(CourseOut, courses))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_course(
    data: CourseCreate,
    claims: TokenClaims = Depends(require_role(Role.PROGRAM_LEADER)),
    session: Session = Depends(get_db),
):
    if session.get(Faculty, data.faculty_id) is None:
        raise ValidationFailed("Faculty not found")
    code = data.course_code.strip().upper()
    if session.query(Course.id).filter(Course.code == code).first():
        raise Conflict(DUPLICATE_CODE)

    course = Course(
        name=data.course_name.strip(),
        code=code,
        faculty_id=data.faculty_id,
        program_leader_id=claims.user_id,
    )
    with atomic(session, DUPLICATE_CODE):
        session.add(course)

    created = course_query(session).filter(Course.id == course.id).one()
    return success(message="Course added successfully", course=CourseOut.model_validate(dict(created._mapping)))


@router.get("/{course_id}/classes")
def list_course_classes(
    course_id: int,
    claims: TokenClaims = Depends(authenticate),
    session: Session = Depends(get_db),
):
    course = session.get(Course, course_id)
    if course is None:
        raise NotFound("Course not found")
    if not allowed(COURSE_ACCESS, claims, course):
        raise Forbidden("You do not lead this course")

    classes = scoped(CLASS_SCOPES, class_query(session), claims).filter(LectureClass.course_id == course.id)
    return success(course_id=course.id, classes=to_models(ClassOut, classes))
