"""
Tests for the HTTP API
"""

import json


def add_note(client, content):
    response = client.post("/api/notes", json={"content": content})
    assert response.status_code == 201
    return response.json()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


class TestNotesApi:
    """Test cases for note endpoints"""

    def test_create_and_list(self, client, data_dir):
        note = add_note(client, "I need to exercise tomorrow")

        assert note["type"] == "text"
        assert note["tags"] == ["fitness"]

        listing = client.get("/api/notes").json()
        assert listing["count"] == 1
        assert listing["notes"][0]["id"] == note["id"]

        saved = json.loads((data_dir / "habitiq-notes.json").read_text())
        assert saved[0]["content"] == "I need to exercise tomorrow"

    def test_create_voice(self, client):
        response = client.post("/api/notes/voice", json={"transcript": "drink more water"})
        assert response.status_code == 201
        assert response.json()["transcript"] == "drink more water"

        add_note(client, "typed")
        assert client.get("/api/notes", params={"type": "voice"}).json()["count"] == 1
        assert client.get("/api/notes", params={"type": "all"}).json()["count"] == 2

    def test_search(self, client):
        add_note(client, "Read a book")
        add_note(client, "Go to the gym")
        assert client.get("/api/notes", params={"q": "BOOK"}).json()["count"] == 1

    def test_invalid_type(self, client):
        assert client.get("/api/notes", params={"type": "video"}).status_code == 400

    def test_blank_content(self, client):
        assert client.post("/api/notes", json={"content": "  "}).status_code == 400

    def test_missing_field(self, client):
        assert client.post("/api/notes", json={}).status_code == 422

    def test_get_patch_delete(self, client):
        note = add_note(client, "hello")

        assert client.get(f"/api/notes/{note['id']}").json()["content"] == "hello"

        patched = client.patch(f"/api/notes/{note['id']}", json={"content": "bye", "tags": ["work"]})
        assert patched.status_code == 200
        assert patched.json()["content"] == "bye"
        assert patched.json()["tags"] == ["work"]

        assert client.delete(f"/api/notes/{note['id']}").status_code == 200
        assert client.get(f"/api/notes/{note['id']}").status_code == 404

    def test_unknown_note(self, client):
        assert client.get("/api/notes/missing").status_code == 404
        assert client.patch("/api/notes/missing", json={"content": "x"}).status_code == 404
        assert client.delete("/api/notes/missing").status_code == 404


class TestRemindersApi:
    """Test cases for reminder endpoints"""

    def test_reminders_follow_notes(self, client):
        note = add_note(client, "I need to exercise tomorrow")

        data = client.get("/api/reminders").json()
        assert data["count"] == 1
        reminder = data["reminders"][0]
        assert reminder["noteId"] == note["id"]
        assert reminder["text"] == "exercise tomorrow"
        assert reminder["category"] == "fitness"
        assert reminder["priority"] == "medium"
        assert reminder["suggestedTime"] == "tomorrow"
        assert reminder["isCompleted"] is False

        client.patch(f"/api/notes/{note['id']}", json={"content": "urgent: call the doctor asap"})
        data = client.get("/api/reminders").json()
        assert [r["priority"] for r in data["reminders"]] == ["high"]

        client.delete(f"/api/notes/{note['id']}")
        assert client.get("/api/reminders").json()["count"] == 0

    def test_complete_survives_new_notes(self, client):
        add_note(client, "I need to exercise tomorrow")
        reminder_id = client.get("/api/reminders").json()["reminders"][0]["id"]

        completed = client.post(f"/api/reminders/{reminder_id}/complete")
        assert completed.status_code == 200
        assert completed.json()["isCompleted"] is True

        add_note(client, "urgent: call the doctor asap")

        data = client.get("/api/reminders").json()
        assert data["count"] == 1
        assert data["completed"] == 1

        everything = client.get("/api/reminders", params={"show_completed": True}).json()
        by_id = {r["id"]: r for r in everything["reminders"]}
        assert by_id[reminder_id]["isCompleted"] is True

    def test_dismiss(self, client):
        add_note(client, "Need to buy groceries.")
        reminder_id = client.get("/api/reminders").json()["reminders"][0]["id"]

        dismissed = client.post(f"/api/reminders/{reminder_id}/dismiss")
        assert dismissed.json()["isDismissed"] is True
        assert client.get("/api/reminders", params={"show_completed": True}).json()["count"] == 0

    def test_unknown_reminder(self, client):
        assert client.post("/api/reminders/missing/complete").status_code == 404
        assert client.post("/api/reminders/missing/dismiss").status_code == 404


class TestInsightsApi:
    """Test cases for insight endpoints"""

    def test_empty(self, client):
        data = client.get("/api/insights").json()
        assert data["noteCount"] == 0
        assert data["habitScore"] == 0
        assert data["suggestions"] == []

    def test_with_notes(self, client):
        add_note(client, "Morning workout done")
        add_note(client, "Evening workout and water")

        data = client.get("/api/insights").json()
        assert data["noteCount"] == 2
        assert data["patterns"][0]["type"] == "fitness"
        assert any(s["id"] == "progress-celebration" for s in data["suggestions"])
        assert data["weeklyActivity"][-1] == 2

    def test_overview(self, client):
        add_note(client, "Remind me to stretch")
        client.post("/api/notes/voice", json={"transcript": "sleep early tomorrow"})

        data = client.get("/api/insights/overview").json()
        assert data["totalNotes"] == 2
        assert data["voiceNotes"] == 1
        assert data["reminderNotes"] == 2
        assert data["topCategories"] == {"sleep": 1}
