"""Security tests: no organization can see or touch another's data."""

from typing import Any

import pytest
from httpx import AsyncClient


pytestmark = pytest.mark.integration


@pytest.fixture
async def foreign_board(client: AsyncClient, org_b) -> dict[str, Any]:
    """A project with one work item owned by organization B."""
    headers = org_b["headers"]
    project = (
        await client.post("/api/projects", json={"name": "Secret"}, headers=headers)
    ).json()
    item = (
        await client.post(
            "/api/work-items",
            json={"project_id": project["id"], "title": "Classified"},
            headers=headers,
        )
    ).json()
    return {"project": project, "item": item}


class TestTenantIsolation:
    async def test_lists_exclude_other_organizations(
        self, client: AsyncClient, org_a, foreign_board
    ):
        headers = org_a["headers"]

        projects = await client.get("/api/projects", headers=headers)
        members = await client.get("/api/members", headers=headers)
        items = await client.get(
            f"/api/work-items/project/{foreign_board['project']['id']}", headers=headers
        )
        summary = await client.get("/api/dashboard/summary", headers=headers)

        assert projects.json() == []
        assert [m["id"] for m in members.json()] == [org_a["user_id"]]
        assert items.json() == []
        assert summary.json()["total_tasks"] == 0

    async def test_foreign_project_is_not_found(
        self, client: AsyncClient, org_a, foreign_board
    ):
        project_id = foreign_board["project"]["id"]
        headers = org_a["headers"]

        deleted = await client.delete(f"/api/projects/{project_id}", headers=headers)
        completed = await client.patch(
            f"/api/projects/{project_id}/complete", headers=headers
        )
        created = await client.post(
            "/api/work-items",
            json={"project_id": project_id, "title": "Intrude"},
            headers=headers,
        )

        assert deleted.status_code == 404
        assert completed.status_code == 404
        assert created.status_code == 404

    async def test_foreign_work_item_is_not_found(
        self, client: AsyncClient, org_a, foreign_board
    ):
        item_id = foreign_board["item"]["id"]
        headers = org_a["headers"]

        status = await client.patch(
            f"/api/work-items/{item_id}/status", json={"status": 5}, headers=headers
        )
        assignee = await client.patch(
            f"/api/work-items/{item_id}/assignee",
            json={"assignee_id": org_a["user_id"]},
            headers=headers,
        )
        comments = await client.get(f"/api/work-items/{item_id}/comments", headers=headers)
        comment = await client.post(
            f"/api/work-items/{item_id}/comments", json={"body": "hi"}, headers=headers
        )

        assert status.status_code == 404
        assert assignee.status_code == 404
        assert comments.status_code == 404
        assert comment.status_code == 404

    async def test_foreign_member_cannot_be_removed(
        self, client: AsyncClient, org_a, org_b
    ):
        response = await client.delete(
            f"/api/members/{org_b['user_id']}", headers=org_a["headers"]
        )

        assert response.status_code == 404

    async def test_foreign_board_is_untouched(
        self, client: AsyncClient, org_a, org_b, foreign_board
    ):
        await client.patch(
            f"/api/work-items/{foreign_board['item']['id']}/status",
            json={"status": 5},
            headers=org_a["headers"],
        )

        items = await client.get(
            f"/api/work-items/project/{foreign_board['project']['id']}",
            headers=org_b["headers"],
        )
        assert items.json()[0]["status"] == 1
