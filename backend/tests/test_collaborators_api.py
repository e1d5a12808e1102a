def test_teacher_crud(client):
    created = client.post(
        "/api/teachers",
        json={
            "name": "Dr. Lisa Verma",
            "email": "lv@bwu.ac.in",
            "department": "CSE",
            "subjects": ["AI", "ML"],
        },
    )
    assert created.status_code == 201
    teacher = created.json()
    assert teacher["subjects"] == ["AI", "ML"]
    assert teacher["joinedAt"] is not None

    listed = client.get("/api/teachers").json()
    assert [item["id"] for item in listed] == [teacher["id"]]
    assert client.get("/api/teachers", params={"id": teacher["id"]}).json()["email"] == "lv@bwu.ac.in"

    updated = client.patch("/api/teachers", params={"id": teacher["id"]}, json={"department": "CSE-AI"})
    assert updated.status_code == 200
    assert updated.json()["department"] == "CSE-AI"
    assert updated.json()["name"] == "Dr. Lisa Verma"

    deleted = client.delete("/api/teachers", params={"id": teacher["id"]})
    assert deleted.status_code == 200
    assert deleted.json() == {"success": True}
    assert client.get("/api/teachers").json() == []


def test_teacher_validation(client):
    missing = client.post("/api/teachers", json={"name": "No Email", "department": "CSE"})
    assert missing.status_code == 400
    assert missing.json()["error"] == "Missing required fields: email"

    invalid = client.post("/api/teachers", json={"name": "X", "email": "not-an-email", "department": "CSE"})
    assert invalid.status_code == 400


def test_missing_and_unknown_ids(client):
    for path in ("/api/teachers", "/api/subjects", "/api/rooms", "/api/floors", "/api/students", "/api/study-materials"):
        no_id = client.delete(path)
        assert no_id.status_code == 400
        assert no_id.json()["error"].endswith("ID is required")

        assert client.patch(path, json={}).status_code == 400

        unknown = client.delete(path, params={"id": "missing"})
        assert unknown.status_code == 404
        assert unknown.json()["error"].endswith("not found")
        assert client.get(path, params={"id": "missing"}).status_code == 404


def test_subject_crud(client):
    created = client.post(
        "/api/subjects",
        json={"name": "Operating Systems", "code": "CS301", "department": "CSE", "credits": 4},
    )
    assert created.status_code == 201
    subject_id = created.json()["id"]

    updated = client.patch("/api/subjects", params={"id": subject_id}, json={"credits": 3})
    assert updated.json()["credits"] == 3

    assert client.post("/api/subjects", json={"name": "No code", "department": "CSE", "credits": 3}).status_code == 400


def test_room_crud_and_type_validation(client):
    body = {"name": "Seminar Room", "number": "CSE-301", "floor": "3", "capacity": 40, "type": "Classroom"}
    created = client.post("/api/rooms", json=body)
    assert created.status_code == 201
    assert created.json()["type"] == "classroom"

    duplicate = client.post("/api/rooms", json=body)
    assert duplicate.status_code == 409

    bad_type = client.post("/api/rooms", json={**body, "number": "CSE-302", "type": "gym"})
    assert bad_type.status_code == 400

    room_id = created.json()["id"]
    updated = client.patch("/api/rooms", params={"id": room_id}, json={"capacity": 60, "type": "lab"})
    assert updated.json()["capacity"] == 60
    assert updated.json()["type"] == "lab"


def test_floor_and_student_crud(client):
    floor = client.post("/api/floors", json={"name": "Third Floor", "number": "3", "building": "CSE Block"})
    assert floor.status_code == 201
    assert client.get("/api/floors").json()[0]["building"] == "CSE Block"

    student = client.post(
        "/api/students",
        json={"name": "Asha Roy", "email": "asha@bwu.ac.in", "batch": "CS2024A", "enrollmentNumber": "BWU/24/001"},
    )
    assert student.status_code == 201
    assert student.json()["enrollmentNumber"] == "BWU/24/001"

    renamed = client.patch("/api/students", params={"id": student.json()["id"]}, json={"batch": "CS2024B"})
    assert renamed.json()["batch"] == "CS2024B"


def test_study_materials_filter_by_subject(client):
    for title, subject in (("Intro to AI", "AI"), ("Graph Search", "AI"), ("SQL Joins", "DBMS")):
        response = client.post(
            "/api/study-materials",
            json={"title": title, "fileName": f"{title}.pdf", "subject": subject, "uploadedBy": "Dr. Verma"},
        )
        assert response.status_code == 201
        assert response.json()["fileType"] == "application/pdf"

    assert len(client.get("/api/study-materials").json()) == 3
    ai = client.get("/api/study-materials", params={"subject": "AI"}).json()
    assert sorted(item["title"] for item in ai) == ["Graph Search", "Intro to AI"]

    assert client.post("/api/study-materials", json={"title": "No file"}).status_code == 400
