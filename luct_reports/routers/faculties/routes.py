from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from luct_reports.dependencies import get_db, require_role
from luct_reports.models import Faculty, Role
from luct_reports.schemas.course import FacultyCreate, FacultyOut
from luct_reports.services.catalog import faculty_query, to_models
from luct_reports.services.transactions import atomic
from luct_reports.utils import success

router = APIRouter(prefix="/api/faculties", tags=["faculties"])


@router.get("")
def list_faculties(session: Session = Depends(get_db)):
    # public: the registration form needs it before anyone has a token
    return success(faculties=to_models(FacultyOut, faculty_query(session)))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_faculty(
    data: FacultyCreate,
    claims=Depends(require_role(Role.PROGRAM_LEADER)),
    session: Session = Depends(get_db),
):
    faculty = Faculty(name=data.faculty_name.strip())
    with atomic(session):
        session.add(faculty)
    return success(
        message="Faculty added successfully",
        faculty=FacultyOut(faculty_id=faculty.id, faculty_name=faculty.name),
    )
