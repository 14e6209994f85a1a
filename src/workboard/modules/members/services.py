"""Member service for roster business logic."""

from typing import Annotated
from uuid import UUID

import structlog
from fastapi import Depends
from sqlalchemy.exc import IntegrityError

from workboard.core.auth.backend import hash_password
from workboard.core.auth.context import AccessContext
from workboard.core.errors import NotFoundError, ValidationError
from workboard.core.utils.passwords import PasswordGenerator
from workboard.core.utils.text import normalize_email
from workboard.modules.members.models import Account, AccountRole
from workboard.modules.members.repos import AccountRepo


logger = structlog.get_logger()

EMAIL_TAKEN_MESSAGE = "Email is already registered."


class MemberService:
    """Service for the organization's membership roster.

    Every operation is scoped to the caller's organization.
    """

    def __init__(
        self,
        repo: AccountRepo,
        password_generator: PasswordGenerator,
    ) -> None:
        self.repo = repo
        self.password_generator = password_generator

    async def list_members(self, ctx: AccessContext) -> list[Account]:
        return await self.repo.list_by_organization(ctx.organization_id)

    async def add_member(
        self,
        ctx: AccessContext,
        full_name: str,
        display_name: str,
        email: str,
    ) -> Account:
        """Add a Member account to the caller's organization.

        Args:
            ctx: The caller's access context
            full_name: Member's full name
            display_name: Name shown on the board
            email: Member's email, normalized before storage

        Returns:
            The created account

        Raises:
            ValidationError: If a field is blank or the email is taken
        """
        full_name = full_name.strip()
        display_name = display_name.strip()
        email = normalize_email(email)
        if not full_name or not display_name or not email:
            raise ValidationError("All member fields are required.")

        existing = await self.repo.get_by_email(email)
        if existing is not None:
            if existing.organization_id == ctx.organization_id:
                raise ValidationError(
                    "Email is already a member of this organization.",
                    error_code="already_member",
                )
            raise ValidationError(EMAIL_TAKEN_MESSAGE, error_code="email_taken")

        account = Account(
            organization_id=ctx.organization_id,
            full_name=full_name,
            display_name=display_name,
            email=email,
            password_hash=hash_password(self.password_generator.generate()),
            role=AccountRole.MEMBER.value,
        )
        try:
            account = await self.repo.create(account)
        except IntegrityError as e:
            raise ValidationError(EMAIL_TAKEN_MESSAGE, error_code="email_taken") from e

        logger.info(
            "member_added",
            organization_id=str(ctx.organization_id),
            member_id=str(account.id),
        )
        return account

    async def remove_member(self, ctx: AccessContext, account_id: UUID) -> None:
        """Remove an account from the caller's organization.

        Raises:
            ValidationError: If removing oneself or the organization owner
            NotFoundError: If the account is not in the organization
        """
        if account_id == ctx.user_id:
            raise ValidationError(
                "You cannot remove yourself from the organization.",
                error_code="cannot_remove_self",
            )

        account = await self.repo.get_by_id(ctx.organization_id, account_id)
        if account is None:
            raise NotFoundError("Member not found.", resource="member")

        if account.is_owner:
            raise ValidationError(
                "Cannot remove the organization owner.",
                error_code="cannot_remove_owner",
            )

        await self.repo.delete(account)
        logger.info(
            "member_removed",
            organization_id=str(ctx.organization_id),
            member_id=str(account_id),
        )


# Type alias for dependency injection
MemberSvc = Annotated[MemberService, Depends(MemberService)]
