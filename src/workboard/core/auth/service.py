"""Authentication service for registration and login."""

import secrets
from typing import Annotated

import structlog
from fastapi import Depends
from sqlalchemy.exc import IntegrityError

from workboard.api.dependencies import DBSession
from workboard.config import settings
from workboard.core.auth.backend import (
    create_access_token,
    hash_password,
    verify_password,
)
from workboard.core.auth.schemas import AuthResponse
from workboard.core.constants import (
    MAX_SLUG_LENGTH,
    SLUG_ATTEMPTS,
    SLUG_SUFFIX_BYTES,
)
from workboard.core.errors import UnauthorizedError, ValidationError
from workboard.core.utils.text import generate_slug, normalize_email
from workboard.modules.members.models import Account, AccountRole
from workboard.modules.members.repos import AccountRepository
from workboard.modules.organizations.models import Organization
from workboard.modules.organizations.repos import OrganizationRepository


logger = structlog.get_logger()


class AuthService:
    """Service for authentication operations.

    Handles organization registration and login.
    """

    def __init__(self, db: DBSession) -> None:
        self.db = db
        self.account_repo = AccountRepository(db)
        self.organization_repo = OrganizationRepository(db)

    async def register(
        self,
        organization_name: str,
        full_name: str,
        email: str,
        password: str,
    ) -> AuthResponse:
        """Register a new organization and its owner.

        The organization and the Owner account are written in the
        request's single transaction.

        Args:
            organization_name: Name for the new organization
            full_name: Owner's full name
            email: Owner's email address
            password: Plain text password

        Returns:
            Session token and the owner's identity

        Raises:
            ValidationError: If a field is blank or the email is registered
        """
        organization_name = organization_name.strip()
        full_name = full_name.strip()
        email = normalize_email(email)
        if not organization_name or not full_name or not email or not password.strip():
            raise ValidationError("All registration fields are required.")

        if await self.account_repo.get_by_email(email) is not None:
            raise ValidationError("Email is already registered.", error_code="email_taken")

        organization = await self._create_organization(organization_name)

        account = Account(
            organization_id=organization.id,
            full_name=full_name,
            display_name=full_name,
            email=email,
            password_hash=hash_password(password),
            role=AccountRole.OWNER.value,
        )
        try:
            account = await self.account_repo.create(account)
        except IntegrityError as e:
            raise ValidationError(
                "Email is already registered.", error_code="email_taken"
            ) from e

        logger.info(
            "organization_registered",
            organization_id=str(organization.id),
            slug=organization.slug,
            user_id=str(account.id),
        )
        return self._issue(account)

    async def login(self, email: str, password: str) -> AuthResponse:
        """Authenticate with email and password.

        Unknown emails and wrong passwords fail identically.

        Raises:
            UnauthorizedError: If credentials are invalid
        """
        account = await self.account_repo.get_by_email(normalize_email(email))
        if account is None or not verify_password(password, account.password_hash):
            logger.info("login_failed")
            raise UnauthorizedError(
                "Invalid credentials.",
                error_code="invalid_credentials",
            )

        logger.info("login_succeeded", user_id=str(account.id))
        return self._issue(account)

    async def _create_organization(self, organization_name: str) -> Organization:
        """Insert the organization under a free slug.

        A concurrent registration can claim the same slug between the
        check and the insert; the insert is then retried with a new slug.

        Raises:
            ValidationError: If every attempt collides
        """
        for _ in range(SLUG_ATTEMPTS):
            slug = await self._unique_slug(organization_name)
            try:
                return await self.organization_repo.create(
                    Organization(name=organization_name, slug=slug)
                )
            except IntegrityError:
                logger.info("organization_slug_conflict", slug=slug)

        raise ValidationError(
            "Organization could not be registered. Please try again.",
            error_code="slug_conflict",
        )

    async def _unique_slug(self, organization_name: str) -> str:
        """Derive a slug, suffixing it with random hex while it is taken."""
        base = generate_slug(organization_name)
        slug = base
        while await self.organization_repo.slug_exists(slug):
            suffix = secrets.token_hex(SLUG_SUFFIX_BYTES)
            slug = f"{base[: MAX_SLUG_LENGTH - len(suffix) - 1]}-{suffix}"
        return slug

    @staticmethod
    def _issue(account: Account) -> AuthResponse:
        token = create_access_token(
            user_id=account.id,
            organization_id=account.organization_id,
            email=account.email,
            role=account.role,
        )
        return AuthResponse(
            token=token,
            expires_in=settings.access_token_expire_minutes * 60,
            user_id=account.id,
            organization_id=account.organization_id,
            email=account.email,
            full_name=account.full_name,
            role=account.role,
        )


# Type alias for dependency injection
AuthSvc = Annotated[AuthService, Depends(AuthService)]
