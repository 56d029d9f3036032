"""Technician work sessions: starting and completing on-site work."""

# Third-party imports
import pytest

pytestmark = pytest.mark.asyncio


@pytest.fixture
async def assigned(client, create_issue, create_technician):
    technician = await create_technician()
    issue = await create_issue()
    resp = await client.post(f"/api/technicians/{technician['id']}/assign/{issue['id']}")
    assert resp.status_code == 200
    return issue, technician


class TestStartWork:
    async def test_start(self, client, assigned):
        issue, technician = assigned
        resp = await client.post(
            "/api/work-sessions/start", json={"issueId": issue["id"], "technicianId": technician["id"]}
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "Work session started"
        assert body["issue"]["status"] == "in_progress"

    async def test_start_requires_assignment(self, client, create_issue, create_technician):
        technician = await create_technician()
        issue = await create_issue()
        resp = await client.post(
            "/api/work-sessions/start", json={"issueId": issue["id"], "technicianId": technician["id"]}
        )
        assert resp.status_code == 409

    async def test_start_twice(self, client, assigned):
        issue, technician = assigned
        body = {"issueId": issue["id"], "technicianId": technician["id"]}
        await client.post("/api/work-sessions/start", json=body)
        resp = await client.post("/api/work-sessions/start", json=body)
        assert resp.status_code == 409

    async def test_unknown_issue(self, client, create_technician):
        technician = await create_technician()
        resp = await client.post("/api/work-sessions/start", json={"issueId": 9999, "technicianId": technician["id"]})
        assert resp.status_code == 404


class TestCompleteWork:
    async def test_complete(self, client, assigned):
        issue, technician = assigned
        ids = {"issueId": issue["id"], "technicianId": technician["id"]}
        await client.post("/api/work-sessions/start", json=ids)

        resp = await client.post(
            "/api/work-sessions/complete", json={**ids, "completionNotes": "Replaced the stop valve"}
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "Work completed successfully"
        assert body["issue"]["status"] == "resolved"
        assert body["issue"]["resolvedAt"] == body["completedAt"]

        notes = (await client.get(f"/api/issues/{issue['id']}/notes")).json()
        assert notes[-1]["note"] == "Replaced the stop valve"
        assert notes[-1]["noteType"] == "completion"

    async def test_completion_notes_required(self, client, assigned):
        issue, technician = assigned
        ids = {"issueId": issue["id"], "technicianId": technician["id"]}
        await client.post("/api/work-sessions/start", json=ids)

        resp = await client.post("/api/work-sessions/complete", json={**ids, "completionNotes": " "})
        assert resp.status_code == 400

        current = (await client.get(f"/api/issues/{issue['id']}")).json()
        assert current["status"] == "in_progress"

    async def test_complete_before_start(self, client, assigned):
        issue, technician = assigned
        resp = await client.post(
            "/api/work-sessions/complete",
            json={"issueId": issue["id"], "technicianId": technician["id"], "completionNotes": "Done"},
        )
        assert resp.status_code == 409


class TestActiveSessions:
    async def test_active_sessions(self, client, assigned):
        issue, technician = assigned
        ids = {"issueId": issue["id"], "technicianId": technician["id"]}

        before = await client.get("/api/work-sessions/active", params={"technicianId": technician["id"]})
        assert before.json() == []

        await client.post("/api/work-sessions/start", json=ids)
        during = (await client.get("/api/work-sessions/active", params={"technicianId": technician["id"]})).json()
        assert len(during) == 1
        assert during[0]["issueId"] == issue["id"]
        assert during[0]["referenceNumber"] == issue["referenceNumber"]
        assert during[0]["isActive"] is True

        await client.post("/api/work-sessions/complete", json={**ids, "completionNotes": "Fixed"})
        after = await client.get("/api/work-sessions/active", params={"technicianId": technician["id"]})
        assert after.json() == []

    async def test_technician_id_required(self, client):
        resp = await client.get("/api/work-sessions/active")
        assert resp.status_code == 400

    async def test_unknown_technician(self, client):
        resp = await client.get("/api/work-sessions/active", params={"technicianId": 9999})
        assert resp.status_code == 404
