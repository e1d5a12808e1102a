def _create(client, title, day):
    response = client.post(
        "/api/announcements",
        json={
            "title": title,
            "description": f"{title} details",
            "date": f"{day}T09:00:00Z",
            "teacherName": "Dr. Lisa Verma",
            "batchName": "CS2024A",
        },
    )
    assert response.status_code == 201
    return response.json()


def test_list_is_newest_first(client):
    _create(client, "Mid-term schedule", "2025-01-06")
    _create(client, "Lab moved", "2025-01-09")
    _create(client, "Welcome back", "2025-01-02")

    titles = [item["title"] for item in client.get("/api/announcements").json()]
    assert titles == ["Lab moved", "Mid-term schedule", "Welcome back"]


def test_get_update_delete(client):
    announcement = _create(client, "Quiz", "2025-01-06")
    path = f"/api/announcements/{announcement['id']}"

    fetched = client.get(path)
    assert fetched.status_code == 200
    assert fetched.json()["replies"] == []

    updated = client.put(path, json={"title": "Quiz postponed"})
    assert updated.status_code == 200
    assert updated.json()["title"] == "Quiz postponed"
    assert updated.json()["description"] == "Quiz details"

    assert client.delete(path).json() == {"success": True}
    assert client.get(path).status_code == 404
    assert client.put(path, json={"title": "Gone"}).status_code == 404


def test_replies(client):
    announcement = _create(client, "Quiz", "2025-01-06")
    path = f"/api/announcements/{announcement['id']}/replies"

    reply = client.post(path, json={"content": "Which chapters?", "author": "student", "authorName": "Asha Roy"})
    assert reply.status_code == 201
    assert reply.json()["authorName"] == "Asha Roy"

    replies = client.get(f"/api/announcements/{announcement['id']}").json()["replies"]
    assert [item["content"] for item in replies] == ["Which chapters?"]

    assert client.post(path, json={"content": "", "author": "student", "authorName": "Asha"}).status_code == 400
    assert client.post(path, json={"content": "Hi", "author": "parent", "authorName": "Asha"}).status_code == 400
    missing = client.post("/api/announcements/missing/replies", json={"content": "Hi", "author": "admin", "authorName": "Ops"})
    assert missing.status_code == 404
