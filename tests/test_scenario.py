import pytest


@pytest.mark.asyncio
async def test_course_to_reviewed_report(api, client, faculty_id):
    leader = await api.register("mahlape", "Program Leader", faculty_id)
    lecturer = await api.register("tsepo", "Lecturer", faculty_id)
    principal = await api.register("nthabiseng", "Principal Lecturer", faculty_id)

    course = await api.create_course(leader, "DIWA2110", faculty_id, "Web Application Development")
    assert course["faculty_id"] == faculty_id
    lecture_class = await api.create_class(leader, course["course_id"], lecturer, "BScSM-Web")

    submitted = await api.submit_report(lecturer, lecture_class["class_id"], week="Week 6")
    assert submitted.status_code == 201
    report_id = submitted.json()["report"]["report_id"]

    feedback = await client.post(
        f"/api/reports/{report_id}/feedback",
        json={"feedback": "Include the lab outcomes next week"},
        headers=principal.headers,
    )
    assert feedback.status_code == 201

    response = await client.get("/api/reports", headers=lecturer.headers)
    assert response.status_code == 200
    reports = response.json()["reports"]
    assert len(reports) == 1
    assert reports[0]["report_id"] == report_id
    assert reports[0]["class_name"] == "BScSM-Web"
    assert reports[0]["feedback_comments"] == "Include the lab outcomes next week"
