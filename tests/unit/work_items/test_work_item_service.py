"""Unit tests for WorkItemService."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from workboard.core.auth.context import AccessContext
from workboard.core.errors import NotFoundError, ValidationError
from workboard.modules.members.models import Account
from workboard.modules.projects.models import Project
from workboard.modules.work_items.models import (
    WorkItem,
    WorkItemPriority,
    WorkItemStatus,
)
from workboard.modules.work_items.repos import WorkItemWithAssignee
from workboard.modules.work_items.schemas import WorkItemCreate
from workboard.modules.work_items.services import WorkItemService


@pytest.fixture
def ctx() -> AccessContext:
    return AccessContext(user_id=uuid4(), organization_id=uuid4())


@pytest.fixture
def item(ctx: AccessContext) -> WorkItem:
    return WorkItem(
        id=uuid4(),
        organization_id=ctx.organization_id,
        project_id=uuid4(),
        title="Spec",
        status=WorkItemStatus.BACKLOG,
        priority=WorkItemPriority.MEDIUM,
        story_points=0,
    )


def persisted(item: WorkItem) -> WorkItem:
    """Mimic a flush, which assigns the primary key."""
    item.id = item.id or uuid4()
    return item


class Mocks:
    def __init__(self) -> None:
        self.repo = AsyncMock()
        self.projects = AsyncMock()
        self.accounts = AsyncMock()
        self.repo.create.side_effect = persisted
        self.repo.update.side_effect = lambda item: item
        self.repo.get_with_assignee.return_value = None
        self.service = WorkItemService(
            repo=self.repo, projects=self.projects, accounts=self.accounts
        )


class TestCreateWorkItem:
    """Tests for WorkItemService.create_work_item."""

    async def test_blank_title_is_rejected(self, ctx):
        mocks = Mocks()

        with pytest.raises(ValidationError) as exc_info:
            await mocks.service.create_work_item(
                ctx, WorkItemCreate(project_id=uuid4(), title="  ")
            )

        assert exc_info.value.message == "Task title is required."

    async def test_unknown_project_is_not_found(self, ctx):
        mocks = Mocks()
        mocks.projects.get_by_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await mocks.service.create_work_item(
                ctx, WorkItemCreate(project_id=uuid4(), title="Spec")
            )

        assert exc_info.value.message == "Project not found."

    async def test_foreign_assignee_is_not_found(self, ctx):
        mocks = Mocks()
        mocks.projects.get_by_id.return_value = Project(id=uuid4())
        mocks.accounts.get_by_id.return_value = None
        assignee_id = uuid4()

        with pytest.raises(NotFoundError) as exc_info:
            await mocks.service.create_work_item(
                ctx,
                WorkItemCreate(project_id=uuid4(), title="Spec", assignee_id=assignee_id),
            )

        assert exc_info.value.message == "Member not found."
        mocks.accounts.get_by_id.assert_awaited_once_with(ctx.organization_id, assignee_id)
        mocks.repo.create.assert_not_awaited()

    async def test_new_items_start_in_backlog(self, ctx):
        mocks = Mocks()
        project = Project(id=uuid4())
        mocks.projects.get_by_id.return_value = project

        result = await mocks.service.create_work_item(
            ctx,
            WorkItemCreate(
                project_id=project.id,
                title=" Spec ",
                priority=WorkItemPriority.HIGH,
                story_points=3,
            ),
        )

        created, = mocks.repo.create.await_args.args
        assert created.status is WorkItemStatus.BACKLOG
        assert created.organization_id == ctx.organization_id
        assert result.id == created.id
        assert result.title == "Spec"
        assert result.priority is WorkItemPriority.HIGH
        assert result.assignee_name is None


class TestUpdateStatus:
    """Tests for WorkItemService.update_status."""

    async def test_unknown_item_is_not_found(self, ctx):
        mocks = Mocks()
        mocks.repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await mocks.service.update_status(ctx, uuid4(), WorkItemStatus.DONE)

        assert exc_info.value.message == "Task not found."

    async def test_any_status_may_follow_any_other(self, ctx, item):
        mocks = Mocks()
        mocks.repo.get_by_id.return_value = item

        result = await mocks.service.update_status(ctx, item.id, WorkItemStatus.DONE)
        assert result.status is WorkItemStatus.DONE

        result = await mocks.service.update_status(ctx, item.id, WorkItemStatus.TODO)
        assert result.status is WorkItemStatus.TODO
        assert item.updated_at is not None


class TestUpdateAssignee:
    """Tests for WorkItemService.update_assignee."""

    async def test_foreign_assignee_is_not_found(self, ctx, item):
        mocks = Mocks()
        mocks.repo.get_by_id.return_value = item
        mocks.accounts.get_by_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await mocks.service.update_assignee(ctx, item.id, uuid4())

        assert exc_info.value.message == "Member not found."
        assert item.assignee_id is None
        mocks.repo.update.assert_not_awaited()

    async def test_assign_re_reads_assignee(self, ctx, item):
        mocks = Mocks()
        assignee = Account(id=uuid4(), organization_id=ctx.organization_id)
        mocks.repo.get_by_id.return_value = item
        mocks.accounts.get_by_id.return_value = assignee
        mocks.repo.get_with_assignee.return_value = WorkItemWithAssignee(
            item, "Grace Hopper", "grace@navy.mil"
        )

        result = await mocks.service.update_assignee(ctx, item.id, assignee.id)

        assert item.assignee_id == assignee.id
        assert result.assignee_name == "Grace Hopper"
        assert result.assignee_email == "grace@navy.mil"

    async def test_null_unassigns_without_lookup(self, ctx, item):
        mocks = Mocks()
        item.assignee_id = uuid4()
        mocks.repo.get_by_id.return_value = item

        result = await mocks.service.update_assignee(ctx, item.id, None)

        assert result.assignee_id is None
        mocks.accounts.get_by_id.assert_not_awaited()


class TestComments:
    async def test_blank_comment_is_rejected(self, ctx):
        mocks = Mocks()

        with pytest.raises(ValidationError) as exc_info:
            await mocks.service.add_comment(ctx, uuid4(), "   ")

        assert exc_info.value.message == "Comment body is required."

    async def test_comments_on_unknown_item_are_not_found(self, ctx):
        mocks = Mocks()
        mocks.repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await mocks.service.list_comments(ctx, uuid4())
