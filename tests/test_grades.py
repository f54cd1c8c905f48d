import pytest


def _grade(student_id, class_id, /, **overrides):
    payload = {
        "student_id": student_id,
        "class_id": class_id,
        "grade": 78.5,
        "grade_type": "exam",
        "description": "Midterm",
        "date_given": "2025-04-10",
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
async def test_lecturer_grades_enrolled_student(api, client, world):
    class_id = world.lecture_class["class_id"]
    await api.enroll(world.student, class_id)

    response = await client.post("/api/grades", json=_grade(world.student.id, class_id), headers=world.lecturer.headers)
    assert response.status_code == 201
    grade = response.json()["grade"]
    assert grade["grade"] == 78.5
    assert grade["grade_type"] == "exam"
    assert grade["student_name"] == "Student"
    assert grade["lecturer_id"] == world.lecturer.id


@pytest.mark.asyncio
async def test_grade_for_student_not_enrolled_fails(client, world):
    response = await client.post(
        "/api/grades",
        json=_grade(world.student.id, world.lecture_class["class_id"]),
        headers=world.lecturer.headers,
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Student is not enrolled in this class"


@pytest.mark.asyncio
@pytest.mark.parametrize("overrides", [{"grade": -1}, {"grade": 100.5}, {"grade_type": "essay"}, {"student_id": None}])
async def test_grade_payload_validation(api, client, world, overrides):
    class_id = world.lecture_class["class_id"]
    await api.enroll(world.student, class_id)
    response = await client.post("/api/grades", json=_grade(world.student.id, class_id, **overrides), headers=world.lecturer.headers)
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_lecturer_cannot_grade_class_they_do_not_teach(api, client, world):
    class_id = world.other_class["class_id"]
    await api.enroll(world.student, class_id)
    response = await client.post("/api/grades", json=_grade(world.student.id, class_id), headers=world.lecturer.headers)
    assert response.status_code == 403

    principal = await client.post("/api/grades", json=_grade(world.student.id, class_id), headers=world.principal.headers)
    assert principal.status_code == 403


@pytest.mark.asyncio
async def test_grade_list_is_shaped_by_role(api, client, world):
    mine, theirs = world.lecture_class["class_id"], world.other_class["class_id"]
    await api.enroll(world.student, mine)
    await api.enroll(world.other_student, theirs)
    await client.post("/api/grades", json=_grade(world.student.id, mine), headers=world.lecturer.headers)
    await client.post("/api/grades", json=_grade(world.other_student.id, theirs, grade_type="quiz"), headers=world.other_lecturer.headers)

    async def student_ids(account):
        response = await client.get("/api/grades", headers=account.headers)
        return [g["student_id"] for g in response.json()["grades"]]

    assert await student_ids(world.student) == [world.student.id]
    assert await student_ids(world.other_student) == [world.other_student.id]
    assert await student_ids(world.lecturer) == [world.student.id]
    assert sorted(await student_ids(world.principal)) == sorted([world.student.id, world.other_student.id])
    assert len(await student_ids(world.leader)) == 2
