from types import SimpleNamespace

import pytest

from luct_reports import visibility
from luct_reports.models import Role
from luct_reports.schemas.auth import TokenClaims


def _claims(role: Role, user_id: int = 1, faculty_id: int | None = 10) -> TokenClaims:
    return TokenClaims(user_id=user_id, username="u", role=role, faculty_id=faculty_id)


@pytest.mark.parametrize(
    "table",
    [
        visibility.CLASS_SCOPES,
        visibility.COURSE_SCOPES,
        visibility.REPORT_SCOPES,
        visibility.GRADE_SCOPES,
        visibility.RATING_SCOPES,
        visibility.SCHEDULE_ACCESS,
        visibility.ROSTER_ACCESS,
        visibility.COURSE_ACCESS,
    ],
)
def test_every_role_has_a_rule(table):
    assert set(table) == set(Role)


def test_schedule_access_rules():
    lecturer = SimpleNamespace(id=5, faculty_id=10)
    check = visibility.SCHEDULE_ACCESS

    assert not visibility.allowed(check, _claims(Role.STUDENT), lecturer)
    assert visibility.allowed(check, _claims(Role.LECTURER, user_id=5), lecturer)
    assert not visibility.allowed(check, _claims(Role.LECTURER, user_id=6), lecturer)
    assert visibility.allowed(check, _claims(Role.PRINCIPAL_LECTURER), lecturer)
    assert visibility.allowed(check, _claims(Role.PROGRAM_LEADER, faculty_id=10), lecturer)
    assert not visibility.allowed(check, _claims(Role.PROGRAM_LEADER, faculty_id=11), lecturer)
    assert not visibility.allowed(check, _claims(Role.PROGRAM_LEADER, faculty_id=None), SimpleNamespace(id=5, faculty_id=None))


def test_roster_access_rules():
    lecture_class = SimpleNamespace(lecturer_id=5, course=SimpleNamespace(program_leader_id=3))
    check = visibility.ROSTER_ACCESS

    assert not visibility.allowed(check, _claims(Role.STUDENT), lecture_class)
    assert visibility.allowed(check, _claims(Role.LECTURER, user_id=5), lecture_class)
    assert not visibility.allowed(check, _claims(Role.LECTURER, user_id=4), lecture_class)
    assert visibility.allowed(check, _claims(Role.PRINCIPAL_LECTURER), lecture_class)
    assert visibility.allowed(check, _claims(Role.PROGRAM_LEADER, user_id=3), lecture_class)
    assert not visibility.allowed(check, _claims(Role.PROGRAM_LEADER, user_id=9), lecture_class)
