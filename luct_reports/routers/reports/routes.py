from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from luct_reports.dependencies import authenticate, get_db, require_role
from luct_reports.models import Report, Role
from luct_reports.schemas.auth import TokenClaims
from luct_reports.schemas.report import FeedbackCreate, ReportCreate, ReportOut
from luct_reports.services.catalog import report_query, to_models
from luct_reports.services.report_service import add_feedback, delete_report, submit_report
from luct_reports.utils import success
from luct_reports.visibility import REPORT_SCOPES, scoped

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get("")
def list_reports(claims: TokenClaims = Depends(authenticate), session: Session = Depends(get_db)):
    reports = scoped(REPORT_SCOPES, report_query(session), claims)
    return success(reports=to_models(ReportOut, reports))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_report(
    data: ReportCreate,
    claims: TokenClaims = Depends(require_role(Role.LECTURER)),
    session: Session = Depends(get_db),
):
    report = submit_report(session, claims, data)
    created = report_query(session).filter(Report.id == report.id).one()
    return success(message="Report submitted successfully", report=ReportOut.model_validate(dict(created._mapping)))


@router.post("/{report_id}/feedback", status_code=status.HTTP_201_CREATED)
def create_feedback(
    report_id: int,
    data: FeedbackCreate,
    claims: TokenClaims = Depends(require_role(Role.PRINCIPAL_LECTURER)),
    session: Session = Depends(get_db),
):
    feedback = add_feedback(session, claims, report_id, data.feedback.strip())
    return success(message="Feedback added successfully", feedback_id=feedback.id, report_id=report_id)


@router.delete("/{report_id}")
def remove_report(
    report_id: int,
    claims: TokenClaims = Depends(require_role(Role.PRINCIPAL_LECTURER)),
    session: Session = Depends(get_db),
):
    delete_report(session, report_id)
    return success(message="Report deleted successfully")
