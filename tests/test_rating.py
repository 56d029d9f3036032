"""Citizen ratings on resolved issues."""

# Third-party imports
import pytest

pytestmark = pytest.mark.asyncio


async def _resolve(client, issue_id):
    resp = await client.patch(f"/api/issues/{issue_id}", json={"status": "resolved"})
    assert resp.status_code == 200


class TestRating:
    async def test_rate_resolved_issue(self, client, create_issue):
        issue = await create_issue()
        await _resolve(client, issue["id"])

        resp = await client.post(f"/api/issues/{issue['id']}/rating", json={"rating": 4, "feedback": "Quick fix"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["rating"] == 4
        assert data["feedback"] == "Quick fix"

    async def test_rating_can_be_replaced(self, client, create_issue):
        issue = await create_issue()
        await _resolve(client, issue["id"])

        await client.post(f"/api/issues/{issue['id']}/rating", json={"rating": 2, "feedback": "Slow"})
        resp = await client.post(f"/api/issues/{issue['id']}/rating", json={"rating": 5})
        assert resp.json()["rating"] == 5
        assert resp.json()["feedback"] is None

    @pytest.mark.parametrize("rating", [0, 6, -1])
    async def test_out_of_range_rating(self, client, create_issue, rating):
        issue = await create_issue()
        await _resolve(client, issue["id"])

        resp = await client.post(f"/api/issues/{issue['id']}/rating", json={"rating": rating})
        assert resp.status_code == 400

        current = (await client.get(f"/api/issues/{issue['id']}")).json()
        assert current["rating"] is None

    async def test_open_issue_cannot_be_rated(self, client, create_issue):
        issue = await create_issue()
        resp = await client.post(f"/api/issues/{issue['id']}/rating", json={"rating": 3})
        assert resp.status_code == 409
        assert resp.json()["error"]["code"] == "conflict"

    async def test_closed_issue_can_be_rated(self, client, create_issue):
        issue = await create_issue()
        await client.patch(f"/api/issues/{issue['id']}", json={"status": "closed"})
        resp = await client.post(f"/api/issues/{issue['id']}/rating", json={"rating": 1})
        assert resp.status_code == 200

    async def test_rate_unknown_issue(self, client):
        resp = await client.post("/api/issues/9999/rating", json={"rating": 3})
        assert resp.status_code == 404
