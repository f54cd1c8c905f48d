"""Row visibility per role.

Every list endpoint narrows its query through one of the scope tables below
before it runs, so callers never receive rows they are not allowed to see.
Relation checks (who may look at a lecturer's schedule or a class roster)
live here too. Each table must cover every :class:`Role`; this is verified
when the module is imported.
"""
from __future__ import annotations

from typing import Callable, Mapping

from sqlalchemy import select
from sqlalchemy.orm import Query

from .models import Course, Enrollment, Grade, LectureClass, Rating, Report, Role, User
from .schemas.auth import TokenClaims

Scope = Callable[[Query, TokenClaims], Query]
RelationCheck = Callable[[TokenClaims, object], bool]


def _everything(query: Query, claims: TokenClaims) -> Query:
    return query


def _enrolled_class_ids(claims: TokenClaims):
    return select(Enrollment.class_id).where(Enrollment.student_id == claims.user_id)


CLASS_SCOPES: Mapping[Role, Scope] = {
    Role.STUDENT: lambda q, c: q.filter(LectureClass.id.in_(_enrolled_class_ids(c))),
    Role.LECTURER: lambda q, c: q.filter(LectureClass.lecturer_id == c.user_id),
    Role.PRINCIPAL_LECTURER: _everything,
    Role.PROGRAM_LEADER: _everything,
}

COURSE_SCOPES: Mapping[Role, Scope] = {
    Role.STUDENT: _everything,
    Role.LECTURER: _everything,
    Role.PRINCIPAL_LECTURER: _everything,
    Role.PROGRAM_LEADER: lambda q, c: q.filter(Course.program_leader_id == c.user_id),
}

REPORT_SCOPES: Mapping[Role, Scope] = {
    Role.STUDENT: lambda q, c: q.filter(Report.class_id.in_(_enrolled_class_ids(c))),
    Role.LECTURER: lambda q, c: q.filter(Report.lecturer_id == c.user_id),
    Role.PRINCIPAL_LECTURER: _everything,
    Role.PROGRAM_LEADER: _everything,
}

GRADE_SCOPES: Mapping[Role, Scope] = {
    Role.STUDENT: lambda q, c: q.filter(Grade.student_id == c.user_id),
    Role.LECTURER: lambda q, c: q.filter(Grade.lecturer_id == c.user_id),
    Role.PRINCIPAL_LECTURER: _everything,
    Role.PROGRAM_LEADER: _everything,
}

RATING_SCOPES: Mapping[Role, Scope] = {
    Role.STUDENT: lambda q, c: q.filter(Rating.user_id == c.user_id),
    Role.LECTURER: lambda q, c: q.filter(Rating.lecturer_id == c.user_id),
    Role.PRINCIPAL_LECTURER: _everything,
    Role.PROGRAM_LEADER: _everything,
}


def _own_schedule(claims: TokenClaims, lecturer: User) -> bool:
    return lecturer.id == claims.user_id


def _same_faculty(claims: TokenClaims, lecturer: User) -> bool:
    return claims.faculty_id is not None and lecturer.faculty_id == claims.faculty_id


SCHEDULE_ACCESS: Mapping[Role, RelationCheck] = {
    Role.STUDENT: lambda c, lecturer: False,
    Role.LECTURER: _own_schedule,
    Role.PRINCIPAL_LECTURER: lambda c, lecturer: True,
    Role.PROGRAM_LEADER: _same_faculty,
}

ROSTER_ACCESS: Mapping[Role, RelationCheck] = {
    Role.STUDENT: lambda c, cls: False,
    Role.LECTURER: lambda c, cls: cls.lecturer_id == c.user_id,
    Role.PRINCIPAL_LECTURER: lambda c, cls: True,
    Role.PROGRAM_LEADER: lambda c, cls: cls.course is not None and cls.course.program_leader_id == c.user_id,
}

# Course-scoped class views: a Program Leader only looks inside courses they lead.
COURSE_ACCESS: Mapping[Role, RelationCheck] = {
    Role.STUDENT: lambda c, course: True,
    Role.LECTURER: lambda c, course: True,
    Role.PRINCIPAL_LECTURER: lambda c, course: True,
    Role.PROGRAM_LEADER: lambda c, course: course.program_leader_id == c.user_id,
}


def scoped(table: Mapping[Role, Scope], query: Query, claims: TokenClaims) -> Query:
    """Narrow ``query`` to the rows ``claims`` may see."""
    return table[claims.role](query, claims)


def allowed(table: Mapping[Role, RelationCheck], claims: TokenClaims, target) -> bool:
    return bool(table[claims.role](claims, target))


def _check_exhaustive() -> None:
    tables = {
        "CLASS_SCOPES": CLASS_SCOPES,
        "COURSE_SCOPES": COURSE_SCOPES,
        "REPORT_SCOPES": REPORT_SCOPES,
        "GRADE_SCOPES": GRADE_SCOPES,
        "RATING_SCOPES": RATING_SCOPES,
        "SCHEDULE_ACCESS": SCHEDULE_ACCESS,
        "ROSTER_ACCESS": ROSTER_ACCESS,
        "COURSE_ACCESS": COURSE_ACCESS,
    }
    for name, table in tables.items():
        missing = set(Role) - set(table)
        if missing:
            raise RuntimeError(f"{name} has no rule for: {', '.join(sorted(r.value for r in missing))}")


_check_exhaustive()
