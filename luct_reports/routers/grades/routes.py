from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from luct_reports.dependencies import authenticate, get_db, require_role
from luct_reports.models import Grade, Role
from luct_reports.schemas.auth import TokenClaims
from luct_reports.schemas.grade import GradeCreate, GradeOut
from luct_reports.services.catalog import grade_query, to_models
from luct_reports.services.grade_service import submit_grade
from luct_reports.utils import success
from luct_reports.visibility import GRADE_SCOPES, scoped

router = APIRouter(prefix="/api/grades", tags=["grades"])


@router.get("")
def list_grades(claims: TokenClaims = Depends(authenticate), session: Session = Depends(get_db)):
    grades = scoped(GRADE_SCOPES, grade_query(session), claims)
    return success(grades=to_models(GradeOut, grades))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_grade(
    data: GradeCreate,
    claims: TokenClaims = Depends(require_role(Role.LECTURER)),
    session: Session = Depends(get_db),
):
    grade = submit_grade(session, claims, data)
    row = grade_query(session).filter(Grade.id == grade.id).one()
    return success(message="Grade submitted successfully", grade=GradeOut.model_validate(dict(row._mapping)))
