import logging

from sqlalchemy.orm import Session

from luct_reports.errors import Conflict, Forbidden, NotFound
from luct_reports.models import Feedback, LectureClass, Report
from luct_reports.schemas.auth import TokenClaims
from luct_reports.schemas.report import ReportCreate
from luct_reports.services.transactions import atomic

log = logging.getLogger(__name__)

ALREADY_REVIEWED = "Report already has feedback"


def submit_report(session: Session, claims: TokenClaims, data: ReportCreate) -> Report:
    lecture_class = session.get(LectureClass, data.class_id)
    if lecture_class is None:
        raise NotFound("Class not found")
    if lecture_class.lecturer_id != claims.user_id:
        raise Forbidden("You do not teach this class")

    report = Report(lecturer_id=claims.user_id, **data.model_dump())
    with atomic(session):
        session.add(report)
    log.info("Lecturer %s reported on class %s (%s)", claims.user_id, data.class_id, data.week_of_reporting)
    return report


def add_feedback(session: Session, claims: TokenClaims, report_id: int, comments: str) -> Feedback:
    report = session.get(Report, report_id)
    if report is None:
        raise NotFound("Report not found")
    if session.query(Feedback.id).filter(Feedback.report_id == report_id).first():
        raise Conflict(ALREADY_REVIEWED)

    feedback = Feedback(report_id=report_id, reviewer_id=claims.user_id, comments=comments)
    with atomic(session, ALREADY_REVIEWED):
        session.add(feedback)
    return feedback


def delete_report(session: Session, report_id: int) -> None:
    """Remove a report together with its feedback."""
    report = session.get(Report, report_id)
    if report is None:
        raise NotFound("Report not found")
    with atomic(session):
        session.query(Feedback).filter(Feedback.report_id == report_id).delete(synchronize_session=False)
        session.delete(report)
    log.info("Deleted report %s", report_id)
