"""Staff notes and escalations on an issue."""

# Third-party imports
import pytest
from sqlalchemy.exc import IntegrityError

# Local application imports
from smartmunic.core.exceptions import ConflictError
from smartmunic.db_selectors.issues import list_issue_notes
from smartmunic.models.issues import Issue, IssueCategory
from smartmunic.schemas.issues.note_schemas import NoteCreate
from smartmunic.services.issues.note_services import add_note
from smartmunic.utils.datetime_utils import utc_now

pytestmark = pytest.mark.asyncio


class TestNotes:
    async def test_add_note_with_defaults(self, client, create_issue):
        issue = await create_issue()
        resp = await client.post(f"/api/issues/{issue['id']}/notes", json={"note": "Called the reporter"})
        assert resp.status_code == 201
        note = resp.json()
        assert note["issueId"] == issue["id"]
        assert note["noteType"] == "general"
        assert note["createdBy"] == "Unknown User"
        assert note["createdByRole"] == "call_center_agent"

    async def test_notes_listed_in_order(self, client, create_issue):
        issue = await create_issue()
        for text in ("First", "Second", "Third"):
            await client.post(f"/api/issues/{issue['id']}/notes", json={"note": text, "createdBy": "Lerato"})

        notes = (await client.get(f"/api/issues/{issue['id']}/notes")).json()
        assert [note["note"] for note in notes] == ["First", "Second", "Third"]

    async def test_note_leaves_issue_untouched(self, client, create_issue):
        issue = await create_issue()
        await client.post(f"/api/issues/{issue['id']}/notes", json={"note": "FYI"})
        current = (await client.get(f"/api/issues/{issue['id']}")).json()
        assert current["updatedAt"] == issue["updatedAt"]
        assert current["status"] == "open"

    async def test_blank_note_rejected(self, client, create_issue):
        issue = await create_issue()
        resp = await client.post(f"/api/issues/{issue['id']}/notes", json={"note": "  "})
        assert resp.status_code == 400

    async def test_note_on_unknown_issue(self, client):
        resp = await client.post("/api/issues/9999/notes", json={"note": "Hello"})
        assert resp.status_code == 404

    async def test_failed_commit_rolls_back_note(self, db, monkeypatch):
        now = utc_now()
        issue = Issue(
            reference_number="REF2026NOTE01",
            title="Streetlight out",
            description="Dark corner on Jorissen Street",
            category=IssueCategory.ELECTRICITY,
            location="Braamfontein",
            photos=[],
            created_at=now,
            updated_at=now,
        )
        db.add(issue)
        await db.commit()
        issue_id = issue.id

        async def failing_commit():
            raise IntegrityError("INSERT INTO issue_notes", {}, Exception("database is locked"))

        monkeypatch.setattr(db, "commit", failing_commit)
        with pytest.raises(ConflictError):
            await add_note(db, issue_id, NoteCreate(note="Reported to Eskom"))
        monkeypatch.undo()

        assert list(await list_issue_notes(db, issue_id)) == []


class TestEscalations:
    async def test_escalation_makes_issue_urgent(self, client, create_issue):
        issue = await create_issue(priority="low")

        resp = await client.post(
            f"/api/issues/{issue['id']}/escalate", json={"escalationReason": "Reporter called three times"}
        )
        assert resp.status_code == 201
        escalation = resp.json()
        assert escalation["priority"] == "urgent"
        assert escalation["status"] == "pending"
        assert escalation["escalatedBy"] == "Call Center Agent"
        assert escalation["escalatedTo"] == "Technical Manager"

        current = (await client.get(f"/api/issues/{issue['id']}")).json()
        assert current["priority"] == "urgent"

    async def test_escalate_twice(self, client, create_issue):
        issue = await create_issue()
        for reason in ("No response", "Road now flooded"):
            resp = await client.post(f"/api/issues/{issue['id']}/escalate", json={"escalationReason": reason})
            assert resp.status_code == 201

        escalations = (await client.get(f"/api/issues/{issue['id']}/escalations")).json()
        assert [e["escalationReason"] for e in escalations] == ["No response", "Road now flooded"]

        current = (await client.get(f"/api/issues/{issue['id']}")).json()
        assert current["priority"] == "urgent"

    async def test_reason_required(self, client, create_issue):
        issue = await create_issue(priority="low")
        resp = await client.post(f"/api/issues/{issue['id']}/escalate", json={"escalationReason": ""})
        assert resp.status_code == 400

        current = (await client.get(f"/api/issues/{issue['id']}")).json()
        assert current["priority"] == "low"

    async def test_escalate_unknown_issue(self, client):
        resp = await client.post("/api/issues/9999/escalate", json={"escalationReason": "Urgent"})
        assert resp.status_code == 404

    async def test_escalations_for_unknown_issue(self, client):
        resp = await client.get("/api/issues/9999/escalations")
        assert resp.status_code == 404

    async def test_priority_cannot_be_lowered_after_escalation(self, client, create_issue):
        issue = await create_issue(priority="low")
        await client.post(f"/api/issues/{issue['id']}/escalate", json={"escalationReason": "Sewage in the street"})

        resp = await client.patch(f"/api/issues/{issue['id']}", json={"priority": "low"})
        assert resp.status_code == 409
        assert resp.json()["error"]["code"] == "conflict"

        current = (await client.get(f"/api/issues/{issue['id']}")).json()
        assert current["priority"] == "urgent"

    async def test_escalated_issue_still_editable(self, client, create_issue):
        issue = await create_issue()
        await client.post(f"/api/issues/{issue['id']}/escalate", json={"escalationReason": "Hospital affected"})

        resp = await client.patch(f"/api/issues/{issue['id']}", json={"priority": "urgent", "ward": "Ward 3"})
        assert resp.status_code == 200
        assert resp.json()["priority"] == "urgent"
        assert resp.json()["ward"] == "Ward 3"
