from dataclasses import dataclass
from datetime import datetime

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from luct_reports.config import Settings
from luct_reports.main import create_app
from luct_reports.models import Faculty


@dataclass
class Account:
    token: str
    user: dict

    @property
    def id(self) -> int:
        return self.user["user_id"]

    @property
    def headers(self) -> dict:
        return {"Authorization": f"Bearer {self.token}"}


class Api:
    """Thin helpers over the HTTP client for the flows most tests need."""

    def __init__(self, client: AsyncClient):
        self.client = client

    async def register(self, username: str, role: str, faculty_id: int | None = None, password: str = "secret123") -> Account:
        response = await self.client.post(
            "/api/auth/register",
            json={
                "username": username,
                "password": password,
                "full_name": username.replace("_", " ").title(),
                "email": f"{username}@luct.ac.ls",
                "role": role,
                "faculty_id": faculty_id,
            },
        )
        assert response.status_code == 201, response.text
        body = response.json()
        return Account(token=body["token"], user=body["user"])

    async def create_course(self, leader: Account, code: str, faculty_id: int, name: str | None = None) -> dict:
        response = await self.client.post(
            "/api/courses",
            json={"course_name": name or f"Course {code}", "course_code": code, "faculty_id": faculty_id},
            headers=leader.headers,
        )
        assert response.status_code == 201, response.text
        return response.json()["course"]

    async def create_class(self, creator: Account, course_id: int, lecturer: Account, name: str = "BScIT-Y1") -> dict:
        response = await self.client.post(
            "/api/classes",
            json={
                "class_name": name,
                "course_id": course_id,
                "lecturer_id": lecturer.id,
                "venue": "Hall 6",
                "scheduled_time": datetime(2025, 3, 3, 8, 30).isoformat(),
            },
            headers=creator.headers,
        )
        assert response.status_code == 201, response.text
        return response.json()["class"]

    async def enroll(self, student: Account, class_id: int):
        return await self.client.post("/api/enrollments", json={"class_id": class_id}, headers=student.headers)

    async def submit_report(self, lecturer: Account, class_id: int, week: str = "Week 1"):
        return await self.client.post(
            "/api/reports",
            json={
                "class_id": class_id,
                "week_of_reporting": week,
                "date_of_lecture": "2025-03-03",
                "topic_taught": "Normalisation",
                "learning_outcomes": "Students can normalise to 3NF",
                "recommendations": "More lab time",
                "actual_students_present": 42,
            },
            headers=lecturer.headers,
        )


@pytest.fixture(name="settings")
def settings_fixture():
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite://",
        ENVIRONMENT="test",
        SECRET_KEY="test-secret",
        SEED_DEFAULTS=False,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture(name="app")
def app_fixture(settings: Settings):
    app = create_app(settings)
    app.state.db.create_all()
    yield app
    app.state.db.drop_all()
    app.state.db.dispose()


@pytest.fixture(name="db")
def db_fixture(app):
    return app.state.db


@pytest_asyncio.fixture(name="client")
async def client_fixture(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture(name="api")
def api_fixture(client: AsyncClient) -> Api:
    return Api(client)


def _add_faculty(db, name: str) -> int:
    with db.session() as session:
        faculty = Faculty(name=name)
        session.add(faculty)
        session.commit()
        return faculty.id


@pytest.fixture(name="faculty_id")
def faculty_fixture(db) -> int:
    return _add_faculty(db, "Faculty of Information and Communication Technology")


@pytest.fixture(name="other_faculty_id")
def other_faculty_fixture(db) -> int:
    return _add_faculty(db, "Faculty of Design and Innovation")


@dataclass
class World:
    leader: Account
    principal: Account
    lecturer: Account
    other_lecturer: Account
    student: Account
    other_student: Account
    course: dict
    lecture_class: dict
    other_class: dict


@pytest_asyncio.fixture(name="world")
async def world_fixture(api: Api, faculty_id: int) -> World:
    """A faculty with one of each role, a course and two classes taught by different lecturers."""
    leader = await api.register("leader", "Program Leader", faculty_id)
    principal = await api.register("principal", "Principal Lecturer", faculty_id)
    lecturer = await api.register("lecturer", "Lecturer", faculty_id)
    other_lecturer = await api.register("other_lecturer", "Lecturer", faculty_id)
    student = await api.register("student", "Student", faculty_id)
    other_student = await api.register("other_student", "Student", faculty_id)

    course = await api.create_course(leader, "BIT1101", faculty_id, "Database Systems")
    lecture_class = await api.create_class(leader, course["course_id"], lecturer, "BScIT-DB")
    other_class = await api.create_class(principal, course["course_id"], other_lecturer, "BScSM-DB")
    return World(
        leader=leader,
        principal=principal,
        lecturer=lecturer,
        other_lecturer=other_lecturer,
        student=student,
        other_student=other_student,
        course=course,
        lecture_class=lecture_class,
        other_class=other_class,
    )
