from __future__ import annotations

from typing import Any, Callable, Mapping

from sqlalchemy import func
from sqlalchemy.orm import Session

from luct_reports.models import Course, Enrollment, Feedback, Grade, LectureClass, Rating, Report, Role, User
from luct_reports.schemas.auth import TokenClaims


def _round(value, digits: int = 2):
    return round(float(value), digits) if value is not None else None


def overview_counts(session: Session) -> dict[str, int]:
    return {
        "users": session.query(func.count(User.id)).scalar(),
        "courses": session.query(func.count(Course.id)).scalar(),
        "classes": session.query(func.count(LectureClass.id)).scalar(),
        "reports": session.query(func.count(Report.id)).scalar(),
    }


def _student_metrics(session: Session, claims: TokenClaims) -> dict[str, Any]:
    grades = session.query(func.count(Grade.id), func.avg(Grade.grade)).filter(Grade.student_id == claims.user_id).one()
    return {
        "enrolled_classes": session.query(func.count(Enrollment.id)).filter(Enrollment.student_id == claims.user_id).scalar(),
        "grades_received": grades[0],
        "average_grade": _round(grades[1]),
        "ratings_given": session.query(func.count(Rating.id)).filter(Rating.user_id == claims.user_id).scalar(),
    }


def _lecturer_metrics(session: Session, claims: TokenClaims) -> dict[str, Any]:
    reports = (
        session.query(func.count(Report.id), func.avg(Report.actual_students_present))
        .filter(Report.lecturer_id == claims.user_id)
        .one()
    )
    feedback = (
        session.query(func.count(Feedback.id))
        .join(Report, Report.id == Feedback.report_id)
        .filter(Report.lecturer_id == claims.user_id)
        .scalar()
    )
    return {
        "classes_taught": session.query(func.count(LectureClass.id)).filter(LectureClass.lecturer_id == claims.user_id).scalar(),
        "reports_submitted": reports[0],
        "average_attendance": _round(reports[1]),
        "feedback_received": feedback,
        "average_rating": _round(
            session.query(func.avg(Rating.rating)).filter(Rating.lecturer_id == claims.user_id).scalar()
        ),
    }


def _principal_lecturer_metrics(session: Session, claims: TokenClaims) -> dict[str, Any]:
    total = session.query(func.count(Report.id)).scalar()
    reviewed = session.query(func.count(Feedback.id)).scalar()
    per_lecturer = (
        session.query(User.id, User.full_name, func.count(Report.id))
        .join(Report, Report.lecturer_id == User.id)
        .group_by(User.id, User.full_name)
        .order_by(func.count(Report.id).desc(), User.full_name)
        .all()
    )
    return {
        "total_reports": total,
        "pending_feedback": total - reviewed,
        "feedback_given": session.query(func.count(Feedback.id)).filter(Feedback.reviewer_id == claims.user_id).scalar(),
        "reports_by_lecturer": [
            {"lecturer_id": lecturer_id, "lecturer_name": name, "reports": count}
            for lecturer_id, name, count in per_lecturer
        ],
    }


def _program_leader_metrics(session: Session, claims: TokenClaims) -> dict[str, Any]:
    per_course = (
        session.query(
            Course.id,
            Course.code,
            func.count(LectureClass.id),
            func.coalesce(func.sum(LectureClass.total_registered_students), 0),
        )
        .outerjoin(LectureClass, LectureClass.course_id == Course.id)
        .filter(Course.program_leader_id == claims.user_id)
        .group_by(Course.id, Course.code)
        .order_by(Course.code)
        .all()
    )
    return {
        "courses_led": len(per_course),
        "classes": sum(row[2] for row in per_course),
        "enrolled_students": sum(int(row[3]) for row in per_course),
        "classes_by_course": [
            {"course_id": course_id, "course_code": code, "classes": classes, "students": int(students)}
            for course_id, code, classes, students in per_course
        ],
    }


MONITORING: Mapping[Role, Callable[[Session, TokenClaims], dict[str, Any]]] = {
    Role.STUDENT: _student_metrics,
    Role.LECTURER: _lecturer_metrics,
    Role.PRINCIPAL_LECTURER: _principal_lecturer_metrics,
    Role.PROGRAM_LEADER: _program_leader_metrics,
}


def monitoring_metrics(session: Session, claims: TokenClaims) -> dict[str, Any]:
    return MONITORING[claims.role](session, claims)
