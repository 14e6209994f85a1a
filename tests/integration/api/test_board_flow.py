"""End-to-end flow from registration to a completed project."""

import pytest
from httpx import AsyncClient


pytestmark = pytest.mark.integration


async def test_register_plan_deliver(client: AsyncClient):
    registered = await client.post(
        "/api/auth/register",
        json={
            "organization_name": "Initech",
            "full_name": "Peter Gibbons",
            "email": "peter@initech.com",
            "password": "TPS-reports-1",
        },
    )
    assert registered.status_code == 201

    login = await client.post(
        "/api/auth/login",
        json={"email": "peter@initech.com", "password": "TPS-reports-1"},
    )
    assert login.status_code == 200
    headers = {"Authorization": f"Bearer {login.json()['token']}"}

    member = await client.post(
        "/api/members",
        json={
            "full_name": "Milton Waddams",
            "display_name": "Milton",
            "email": "milton@initech.com",
        },
        headers=headers,
    )
    assert member.status_code == 201

    project = await client.post(
        "/api/projects",
        json={"name": "Y2K Patch", "description": "Two digit years"},
        headers=headers,
    )
    assert project.status_code == 201
    project_id = project.json()["id"]

    item = await client.post(
        "/api/work-items",
        json={
            "project_id": project_id,
            "title": "Update date fields",
            "assignee_id": member.json()["id"],
            "priority": 4,
            "story_points": 8,
        },
        headers=headers,
    )
    assert item.status_code == 201
    assert item.json()["assignee_name"] == "Milton Waddams"
    item_id = item.json()["id"]

    blocked = await client.patch(f"/api/projects/{project_id}/complete", headers=headers)
    assert blocked.status_code == 400
    assert blocked.json()["incomplete_statuses"] == ["Backlog"]

    for status in (2, 3, 4, 5):
        moved = await client.patch(
            f"/api/work-items/{item_id}/status", json={"status": status}, headers=headers
        )
        assert moved.status_code == 200

    comment = await client.post(
        f"/api/work-items/{item_id}/comments",
        json={"body": "Shipped."},
        headers=headers,
    )
    assert comment.status_code == 201

    completed = await client.patch(f"/api/projects/{project_id}/complete", headers=headers)
    assert completed.status_code == 200

    listing = (await client.get("/api/projects/completed", headers=headers)).json()
    assert listing[0]["member_count"] == 1
    assert listing[0]["completed_tasks"] == 1

    summary = (await client.get("/api/dashboard/summary", headers=headers)).json()
    assert summary["total_projects"] == 1
    assert summary["completed_tasks"] == 1
