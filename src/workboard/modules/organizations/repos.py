"""Organization repository for database operations."""

from uuid import UUID

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from workboard.modules.organizations.models import Organization


class OrganizationRepository:
    """Repository for Organization database operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, organization: Organization) -> Organization:
        """Create a new organization.

        The insert runs in a savepoint, so a slug conflict leaves the
        surrounding transaction usable.

        Args:
            organization: Organization instance to create

        Returns:
            The created organization with ID populated

        Raises:
            IntegrityError: If the slug is already taken
        """
        async with self.session.begin_nested():
            self.session.add(organization)
            await self.session.flush()
        await self.session.refresh(organization)
        return organization

    async def get_by_id(self, organization_id: UUID) -> Organization | None:
        stmt = select(Organization).where(Organization.id == organization_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def slug_exists(self, slug: str) -> bool:
        """Check whether a slug is already taken by any organization."""
        stmt = select(exists().where(Organization.slug == slug))
        result = await self.session.execute(stmt)
        return bool(result.scalar())
