from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from luct_reports.dependencies import authenticate, get_db
from luct_reports.errors import Forbidden, NotFound
from luct_reports.models import LectureClass, Role, User
from luct_reports.schemas.auth import TokenClaims, UserOut
from luct_reports.schemas.course import ClassOut
from luct_reports.services.catalog import class_query, to_models
from luct_reports.utils import success
from luct_reports.visibility import SCHEDULE_ACCESS, allowed

router = APIRouter(prefix="/api", tags=["users"])


@router.get("/users/lecturers")
def list_lecturers(claims: TokenClaims = Depends(authenticate), session: Session = Depends(get_db)):
    lecturers = session.query(User).filter(User.role == Role.LECTURER).order_by(User.full_name).all()
    return success(lecturers=[UserOut.model_validate(u) for u in lecturers])


@router.get("/lecturers/{lecturer_id}/schedule")
def lecturer_schedule(
    lecturer_id: int,
    claims: TokenClaims = Depends(authenticate),
    session: Session = Depends(get_db),
):
    """Classes a lecturer teaches, in time order."""
    if claims.role == Role.STUDENT:
        raise Forbidden("You cannot view this lecturer's schedule")
    lecturer = session.get(User, lecturer_id)
    if lecturer is None or not lecturer.is_lecturer:
        raise NotFound("Lecturer not found")
    if not allowed(SCHEDULE_ACCESS, claims, lecturer):
        raise Forbidden("You cannot view this lecturer's schedule")

    classes = class_query(session).filter(LectureClass.lecturer_id == lecturer.id)
    return success(lecturer=UserOut.model_validate(lecturer), classes=to_models(ClassOut, classes))
