"""Account repository for database operations."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends
from sqlalchemy import delete, select, update

from workboard.api.dependencies import DBSession
from workboard.modules.members.models import Account
from workboard.modules.projects.models import ProjectMembership
from workboard.modules.work_items.models import WorkItem, WorkItemComment


class AccountRepository:
    """Repository for Account database operations.

    Every lookup except the email lookups is scoped to an organization.
    Emails are unique across organizations, so those are global.
    """

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, account: Account) -> Account:
        """Create a new account.

        Args:
            account: Account instance to create

        Returns:
            The created account with ID populated

        Raises:
            IntegrityError: If the email is already taken
        """
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account

    async def get_by_id(self, organization_id: UUID, account_id: UUID) -> Account | None:
        """Get an account by ID within an organization.

        Args:
            organization_id: The organization's UUID
            account_id: The account's UUID

        Returns:
            Account if found in the organization, None otherwise
        """
        stmt = select(Account).where(
            Account.id == account_id,
            Account.organization_id == organization_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Account | None:
        """Get an account by normalized email in any organization."""
        stmt = select(Account).where(Account.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_organization(self, organization_id: UUID) -> list[Account]:
        """List an organization's accounts ordered by full name."""
        stmt = (
            select(Account)
            .where(Account.organization_id == organization_id)
            .order_by(Account.full_name, Account.email)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def delete(self, account: Account) -> None:
        """Delete an account and detach it from the organization's data.

        Its work items are unassigned, its project memberships deleted and
        its comments kept without an author.
        """
        await self.session.execute(
            update(WorkItem)
            .where(
                WorkItem.organization_id == account.organization_id,
                WorkItem.assignee_id == account.id,
            )
            .values(assignee_id=None)
        )
        await self.session.execute(
            delete(ProjectMembership).where(ProjectMembership.account_id == account.id)
        )
        await self.session.execute(
            update(WorkItemComment)
            .where(
                WorkItemComment.organization_id == account.organization_id,
                WorkItemComment.author_id == account.id,
            )
            .values(author_id=None)
        )
        await self.session.delete(account)
        await self.session.flush()


# Type alias for dependency injection
AccountRepo = Annotated[AccountRepository, Depends(AccountRepository)]
