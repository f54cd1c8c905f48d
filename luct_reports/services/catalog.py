"""Listing queries joined with the names the dashboard shows next to ids."""
from __future__ import annotations

from typing import Iterable, TypeVar

from pydantic import BaseModel
from sqlalchemy.orm import Query, Session, aliased

from luct_reports.models import Course, Enrollment, Faculty, Feedback, Grade, LectureClass, Rating, Report, User

M = TypeVar("M", bound=BaseModel)


def to_models(schema: type[M], rows: Iterable) -> list[M]:
    return [schema.model_validate(dict(row._mapping)) for row in rows]


def faculty_query(session: Session) -> Query:
    return session.query(Faculty.id.label("faculty_id"), Faculty.name.label("faculty_name")).order_by(Faculty.name)


def course_query(session: Session) -> Query:
    return (
        session.query(
            Course.id.label("course_id"),
            Course.name.label("course_name"),
            Course.code.label("course_code"),
            Course.faculty_id,
            Faculty.name.label("faculty_name"),
            Course.program_leader_id,
        )
        .outerjoin(Faculty, Course.faculty_id == Faculty.id)
        .order_by(Course.code)
    )


def class_query(session: Session) -> Query:
    return (
        session.query(
            LectureClass.id.label("class_id"),
            LectureClass.name.label("class_name"),
            LectureClass.course_id,
            Course.name.label("course_name"),
            LectureClass.lecturer_id,
            User.full_name.label("lecturer_name"),
            LectureClass.venue,
            LectureClass.scheduled_time,
            LectureClass.total_registered_students,
        )
        .outerjoin(Course, LectureClass.course_id == Course.id)
        .outerjoin(User, LectureClass.lecturer_id == User.id)
        .order_by(LectureClass.scheduled_time, LectureClass.id)
    )


def roster_query(session: Session, class_id: int) -> Query:
    return (
        session.query(
            User.id.label("user_id"),
            User.username,
            User.full_name,
            User.email,
            Enrollment.enrollment_date,
        )
        .join(Enrollment, Enrollment.student_id == User.id)
        .filter(Enrollment.class_id == class_id)
        .order_by(User.full_name)
    )


def enrollment_query(session: Session, student_id: int) -> Query:
    return (
        session.query(
            Enrollment.id.label("enrollment_id"),
            Enrollment.student_id,
            Enrollment.class_id,
            LectureClass.name.label("class_name"),
            Enrollment.enrollment_date,
        )
        .join(LectureClass, Enrollment.class_id == LectureClass.id)
        .filter(Enrollment.student_id == student_id)
        .order_by(Enrollment.enrollment_date)
    )


def report_query(session: Session) -> Query:
    return (
        session.query(
            Report.id.label("report_id"),
            Report.class_id,
            Report.lecturer_id,
            Report.week_of_reporting,
            Report.date_of_lecture,
            Report.topic_taught,
            Report.learning_outcomes,
            Report.recommendations,
            Report.actual_students_present,
            Report.created_at,
            LectureClass.name.label("class_name"),
            Course.name.label("course_name"),
            Course.code.label("course_code"),
            User.full_name.label("lecturer_name"),
            Feedback.id.label("feedback_id"),
            Feedback.comments.label("feedback_comments"),
        )
        .outerjoin(LectureClass, Report.class_id == LectureClass.id)
        .outerjoin(Course, LectureClass.course_id == Course.id)
        .outerjoin(User, Report.lecturer_id == User.id)
        .outerjoin(Feedback, Feedback.report_id == Report.id)
        .order_by(Report.created_at.desc(), Report.id.desc())
    )


def rating_query(session: Session) -> Query:
    lecturer = aliased(User)
    rater = aliased(User)
    return (
        session.query(
            Rating.id.label("rating_id"),
            Rating.lecturer_id,
            lecturer.full_name.label("lecturer_name"),
            Rating.user_id,
            rater.full_name.label("rater_name"),
            Rating.rating,
            Rating.comments,
            Rating.created_at,
        )
        .outerjoin(lecturer, Rating.lecturer_id == lecturer.id)
        .outerjoin(rater, Rating.user_id == rater.id)
        .order_by(Rating.created_at.desc(), Rating.id.desc())
    )


def grade_query(session: Session) -> Query:
    student = aliased(User)
    lecturer = aliased(User)
    return (
        session.query(
            Grade.id.label("grade_id"),
            Grade.student_id,
            student.full_name.label("student_name"),
            Grade.class_id,
            LectureClass.name.label("class_name"),
            Grade.lecturer_id,
            lecturer.full_name.label("lecturer_name"),
            Grade.grade,
            Grade.grade_type,
            Grade.description,
            Grade.date_given,
        )
        .outerjoin(student, Grade.student_id == student.id)
        .outerjoin(lecturer, Grade.lecturer_id == lecturer.id)
        .outerjoin(LectureClass, Grade.class_id == LectureClass.id)
        .order_by(Grade.date_given.desc(), Grade.id.desc())
    )
