"""
API tests for the issue lifecycle: reporting, listing, updates, deletion
and photo management.
"""

# Standard library imports
import re

# Third-party imports
import pytest

# Local application imports
from smartmunic.services.issues import issue_services

pytestmark = pytest.mark.asyncio


class TestCreateIssue:
    async def test_create_issue(self, client, issue_payload):
        resp = await client.post("/api/issues", json=issue_payload())
        assert resp.status_code == 201
        data = resp.json()
        assert re.fullmatch(r"REF\d{4}[A-Z0-9]{6}", data["referenceNumber"])
        assert data["status"] == "open"
        assert data["priority"] == "high"
        assert data["assignedTo"] is None
        assert data["rating"] is None
        assert data["feedback"] is None
        assert data["resolvedAt"] is None
        assert data["createdAt"] == data["updatedAt"]
        assert data["reporterPhone"] == "+27821234567"

    async def test_reference_numbers_are_unique(self, create_issue):
        references = {(await create_issue())["referenceNumber"] for _ in range(10)}
        assert len(references) == 10

    async def test_reference_number_collisions_exhaust_retries(self, client, issue_payload, monkeypatch):
        monkeypatch.setattr(issue_services, "generate_reference_number", lambda: "REF2026AAAAAA")

        first = await client.post("/api/issues", json=issue_payload())
        assert first.status_code == 201
        assert first.json()["referenceNumber"] == "REF2026AAAAAA"

        second = await client.post("/api/issues", json=issue_payload(title="Another leak"))
        assert second.status_code == 409
        assert second.json()["error"]["code"] == "conflict"

        issues = (await client.get("/api/issues")).json()
        assert len(issues) == 1

    async def test_emergency_priority_maps_to_urgent(self, create_issue):
        issue = await create_issue(priority="emergency")
        assert issue["priority"] == "urgent"

    async def test_numeric_coordinates_stored_as_strings(self, create_issue):
        issue = await create_issue(latitude=-25.7461, longitude=28.1881)
        assert issue["latitude"] == "-25.7461"
        assert issue["longitude"] == "28.1881"

    async def test_missing_title_rejected(self, client, issue_payload):
        payload = issue_payload()
        del payload["title"]
        resp = await client.post("/api/issues", json=payload)
        assert resp.status_code == 400
        body = resp.json()
        assert body["ok"] is False
        assert body["error"]["code"] == "bad_request"
        assert "title" in body["error"]["message"]

    async def test_blank_description_rejected(self, client, issue_payload):
        resp = await client.post("/api/issues", json=issue_payload(description="   "))
        assert resp.status_code == 400

    async def test_invalid_phone_rejected(self, client, issue_payload):
        resp = await client.post("/api/issues", json=issue_payload(reporterPhone="12345"))
        assert resp.status_code == 400
        assert "Invalid phone number" in resp.json()["error"]["message"]

    async def test_non_numeric_coordinates_rejected(self, client, issue_payload):
        resp = await client.post("/api/issues", json=issue_payload(latitude="north"))
        assert resp.status_code == 400

    async def test_creation_recorded_in_history(self, client, create_issue):
        issue = await create_issue()
        resp = await client.get(f"/api/issues/{issue['id']}/history")
        assert resp.status_code == 200
        history = resp.json()
        assert len(history) == 1
        assert history[0]["fromStatus"] is None
        assert history[0]["toStatus"] == "open"


class TestGetAndListIssues:
    async def test_get_issue(self, client, create_issue):
        issue = await create_issue()
        resp = await client.get(f"/api/issues/{issue['id']}")
        assert resp.status_code == 200
        assert resp.json()["referenceNumber"] == issue["referenceNumber"]

    async def test_get_unknown_issue(self, client):
        resp = await client.get("/api/issues/9999")
        assert resp.status_code == 404
        assert resp.json()["error"]["code"] == "not_found"

    async def test_list_newest_first(self, client, create_issue):
        first = await create_issue(title="First")
        second = await create_issue(title="Second")
        resp = await client.get("/api/issues")
        assert resp.status_code == 200
        ids = [issue["id"] for issue in resp.json()]
        assert ids == [second["id"], first["id"]]

    async def test_list_filters(self, client, create_issue):
        await create_issue(category="electricity", ward="Ward 1")
        await create_issue(category="water_sanitation", ward="Ward 2")

        resp = await client.get("/api/issues", params={"category": "electricity"})
        assert [issue["ward"] for issue in resp.json()] == ["Ward 1"]

        resp = await client.get("/api/issues", params={"ward": "Ward 2"})
        assert [issue["category"] for issue in resp.json()] == ["water_sanitation"]

        resp = await client.get("/api/issues", params={"status": "resolved"})
        assert resp.json() == []

    async def test_unknown_route_uses_error_envelope(self, client):
        resp = await client.get("/api/nothing-here")
        assert resp.status_code == 404
        assert resp.json()["ok"] is False


class TestUpdateIssue:
    async def test_partial_update(self, client, create_issue):
        issue = await create_issue()
        resp = await client.patch(f"/api/issues/{issue['id']}", json={"priority": "low", "ward": "Ward 7"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["priority"] == "low"
        assert data["ward"] == "Ward 7"
        assert data["title"] == issue["title"]
        assert data["updatedAt"] >= issue["updatedAt"]

    async def test_resolved_at_stamped_once(self, client, create_issue):
        issue = await create_issue()

        resolved = (await client.patch(f"/api/issues/{issue['id']}", json={"status": "resolved"})).json()
        assert resolved["status"] == "resolved"
        assert resolved["resolvedAt"] is not None

        await client.patch(f"/api/issues/{issue['id']}", json={"status": "closed"})
        again = (await client.patch(f"/api/issues/{issue['id']}", json={"status": "resolved"})).json()
        assert again["resolvedAt"] == resolved["resolvedAt"]

    async def test_status_changes_recorded(self, client, create_issue):
        issue = await create_issue()
        await client.patch(f"/api/issues/{issue['id']}", json={"status": "in_progress"})
        await client.patch(f"/api/issues/{issue['id']}", json={"title": "Renamed"})

        history = (await client.get(f"/api/issues/{issue['id']}/history")).json()
        assert [(h["fromStatus"], h["toStatus"]) for h in history] == [(None, "open"), ("open", "in_progress")]

    async def test_status_change_records_actor(self, client, create_issue):
        issue = await create_issue()
        await client.patch(f"/api/issues/{issue['id']}", json={"status": "in_progress", "updatedBy": "Naledi Khumalo"})
        await client.patch(f"/api/issues/{issue['id']}", json={"status": "resolved"})

        history = (await client.get(f"/api/issues/{issue['id']}/history")).json()
        assert [h["updatedBy"] for h in history[1:]] == ["Naledi Khumalo", "Staff"]

    async def test_reference_number_cannot_change(self, client, create_issue):
        issue = await create_issue()
        resp = await client.patch(f"/api/issues/{issue['id']}", json={"referenceNumber": "REF2000AAAAAA"})
        assert resp.status_code == 400

        current = (await client.get(f"/api/issues/{issue['id']}")).json()
        assert current["referenceNumber"] == issue["referenceNumber"]

    async def test_null_status_rejected(self, client, create_issue):
        issue = await create_issue()
        resp = await client.patch(f"/api/issues/{issue['id']}", json={"status": None})
        assert resp.status_code == 400

    async def test_update_unknown_issue(self, client):
        resp = await client.patch("/api/issues/9999", json={"priority": "low"})
        assert resp.status_code == 404


class TestDeleteIssue:
    async def test_delete_removes_dependents(self, client, create_issue):
        issue = await create_issue()
        await client.post(f"/api/issues/{issue['id']}/notes", json={"note": "Caller phoned back"})
        await client.post(f"/api/issues/{issue['id']}/escalate", json={"escalationReason": "Flooding"})

        resp = await client.delete(f"/api/issues/{issue['id']}")
        assert resp.status_code == 200
        assert resp.json() == {"message": "Issue deleted successfully"}

        assert (await client.get(f"/api/issues/{issue['id']}")).status_code == 404
        assert (await client.get(f"/api/issues/{issue['id']}/notes")).status_code == 404

    async def test_delete_unknown_issue(self, client):
        resp = await client.delete("/api/issues/9999")
        assert resp.status_code == 404

    async def test_delete_leaves_other_issues(self, client, create_issue):
        keep = await create_issue(title="Keep me")
        drop = await create_issue(title="Drop me")
        await client.post(f"/api/issues/{keep['id']}/notes", json={"note": "Still relevant"})

        await client.delete(f"/api/issues/{drop['id']}")

        notes = (await client.get(f"/api/issues/{keep['id']}/notes")).json()
        assert [note["note"] for note in notes] == ["Still relevant"]


class TestIssuePhotos:
    async def test_remove_photo(self, client, create_issue):
        issue = await create_issue(photos=["a.jpg", "b.jpg", "c.jpg"])
        resp = await client.delete(f"/api/issues/{issue['id']}/photos/1")
        assert resp.status_code == 200
        assert resp.json()["photos"] == ["a.jpg", "c.jpg"]

    async def test_invalid_photo_index(self, client, create_issue):
        issue = await create_issue(photos=["a.jpg"])
        resp = await client.delete(f"/api/issues/{issue['id']}/photos/3")
        assert resp.status_code == 400

    async def test_photos_locked_once_work_starts(self, client, create_issue):
        issue = await create_issue(photos=["a.jpg"])
        await client.patch(f"/api/issues/{issue['id']}", json={"status": "in_progress"})
        resp = await client.delete(f"/api/issues/{issue['id']}/photos/0")
        assert resp.status_code == 409
