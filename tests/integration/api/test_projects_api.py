"""Integration tests for the project registry."""

from typing import Any

import pytest
from httpx import AsyncClient


pytestmark = pytest.mark.integration


async def create_project(client: AsyncClient, org: dict[str, Any], **fields: Any) -> dict:
    payload = {"name": "Launch", **fields}
    response = await client.post("/api/projects", json=payload, headers=org["headers"])
    assert response.status_code == 201, response.text
    return response.json()


async def create_item(
    client: AsyncClient, org: dict[str, Any], project_id: str, status: int | None = None
) -> dict:
    response = await client.post(
        "/api/work-items",
        json={"project_id": project_id, "title": "Task"},
        headers=org["headers"],
    )
    assert response.status_code == 201, response.text
    item = response.json()
    if status is not None:
        response = await client.patch(
            f"/api/work-items/{item['id']}/status",
            json={"status": status},
            headers=org["headers"],
        )
        item = response.json()
    return item


class TestCreateProject:
    async def test_create_project(self, client: AsyncClient, org_a):
        project = await create_project(
            client, org_a, name="  Apollo  ", description="Moon", due_date="2030-01-01T00:00:00Z"
        )

        assert project["name"] == "Apollo"
        assert project["description"] == "Moon"
        assert project["total_tasks"] == 0
        assert project["completed_tasks"] == 0
        assert project["is_completed"] is False

    async def test_blank_name_is_rejected(self, client: AsyncClient, org_a):
        response = await client.post(
            "/api/projects", json={"name": "   "}, headers=org_a["headers"]
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Project name is required."


class TestListProjects:
    async def test_active_list_carries_counts(self, client: AsyncClient, org_a):
        project = await create_project(client, org_a, name="Beta")
        await create_project(client, org_a, name="Alpha")
        await create_item(client, org_a, project["id"], status=5)
        await create_item(client, org_a, project["id"])

        response = await client.get("/api/projects", headers=org_a["headers"])

        assert response.status_code == 200
        projects = response.json()
        assert [p["name"] for p in projects] == ["Alpha", "Beta"]
        beta = projects[1]
        assert beta["total_tasks"] == 2
        assert beta["completed_tasks"] == 1


class TestCompleteProject:
    async def test_incomplete_items_block_completion(self, client: AsyncClient, org_a):
        project = await create_project(client, org_a)
        await create_item(client, org_a, project["id"], status=3)
        await create_item(client, org_a, project["id"], status=5)
        await create_item(client, org_a, project["id"])

        response = await client.patch(
            f"/api/projects/{project['id']}/complete", headers=org_a["headers"]
        )

        assert response.status_code == 400
        body = response.json()
        assert "Not all tasks are finished" in body["error"]
        assert body["error"].endswith("Backlog, InProgress")
        assert body["incomplete_statuses"] == ["Backlog", "InProgress"]

    async def test_completed_project_moves_to_completed_list(
        self, client: AsyncClient, org_a
    ):
        project = await create_project(client, org_a)
        await create_item(client, org_a, project["id"], status=5)

        response = await client.patch(
            f"/api/projects/{project['id']}/complete", headers=org_a["headers"]
        )

        assert response.status_code == 200
        assert response.json()["is_completed"] is True

        active = await client.get("/api/projects", headers=org_a["headers"])
        assert project["id"] not in [p["id"] for p in active.json()]

        completed = await client.get("/api/projects/completed", headers=org_a["headers"])
        assert completed.status_code == 200
        [entry] = completed.json()
        assert entry["id"] == project["id"]
        assert entry["total_tasks"] == 1
        assert entry["completed_tasks"] == 1
        assert entry["completed_at"]

    async def test_empty_project_can_be_completed(self, client: AsyncClient, org_a):
        project = await create_project(client, org_a)

        response = await client.patch(
            f"/api/projects/{project['id']}/complete", headers=org_a["headers"]
        )

        assert response.status_code == 200


class TestDeleteProject:
    async def test_delete_removes_project_and_items(self, client: AsyncClient, org_a):
        project = await create_project(client, org_a)
        item = await create_item(client, org_a, project["id"])

        response = await client.delete(
            f"/api/projects/{project['id']}", headers=org_a["headers"]
        )
        assert response.status_code == 204

        again = await client.delete(
            f"/api/projects/{project['id']}", headers=org_a["headers"]
        )
        assert again.status_code == 404
        assert again.json()["error"] == "Project not found."

        comments = await client.get(
            f"/api/work-items/{item['id']}/comments", headers=org_a["headers"]
        )
        assert comments.status_code == 404


class TestCompletedProjects:
    async def test_latest_completion_first_with_distinct_assignees(
        self, client: AsyncClient, org_a
    ):
        headers = org_a["headers"]
        members = []
        for full_name in ("Grace Hopper", "Alan Turing"):
            response = await client.post(
                "/api/members",
                json={
                    "full_name": full_name,
                    "display_name": full_name.split()[0],
                    "email": f"{full_name.split()[0].lower()}@example.com",
                },
                headers=headers,
            )
            members.append(response.json()["id"])

        first = await create_project(client, org_a, name="First")
        second = await create_project(client, org_a, name="Second")
        assignments = {
            first["id"]: [members[0], members[0], None],
            second["id"]: [members[0], members[1]],
        }
        for project_id, assignees in assignments.items():
            for assignee_id in assignees:
                response = await client.post(
                    "/api/work-items",
                    json={
                        "project_id": project_id,
                        "title": "Task",
                        "assignee_id": assignee_id,
                    },
                    headers=headers,
                )
                await client.patch(
                    f"/api/work-items/{response.json()['id']}/status",
                    json={"status": 5},
                    headers=headers,
                )

        for project in (first, second):
            response = await client.patch(
                f"/api/projects/{project['id']}/complete", headers=headers
            )
            assert response.status_code == 200

        completed = await client.get("/api/projects/completed", headers=headers)

        assert [
            (p["name"], p["member_count"], p["total_tasks"], p["completed_tasks"])
            for p in completed.json()
        ] == [("Second", 2, 2, 2), ("First", 1, 3, 3)]
