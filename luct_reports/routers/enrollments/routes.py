from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from luct_reports.dependencies import get_db, require_role
from luct_reports.models import Role
from luct_reports.schemas.auth import TokenClaims
from luct_reports.schemas.course import EnrollmentCreate, EnrollmentOut
from luct_reports.services.catalog import enrollment_query, to_models
from luct_reports.services.enrollment_service import enroll_student
from luct_reports.utils import success

router = APIRouter(prefix="/api/enrollments", tags=["enrollments"])

student_only = require_role(Role.STUDENT)


@router.get("")
def my_enrollments(claims: TokenClaims = Depends(student_only), session: Session = Depends(get_db)):
    return success(enrollments=to_models(EnrollmentOut, enrollment_query(session, claims.user_id)))


@router.post("", status_code=status.HTTP_201_CREATED)
def enroll(
    data: EnrollmentCreate,
    claims: TokenClaims = Depends(student_only),
    session: Session = Depends(get_db),
):
    enrollment = enroll_student(session, claims.user_id, data.class_id)
    return success(
        message="Enrolled successfully",
        enrollment=EnrollmentOut(
            enrollment_id=enrollment.id,
            student_id=enrollment.student_id,
            class_id=enrollment.class_id,
            enrollment_date=enrollment.enrollment_date,
        ),
    )
