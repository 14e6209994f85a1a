"""Account database model."""

import enum

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from workboard.core.constants import MAX_EMAIL_LENGTH, MAX_NAME_LENGTH
from workboard.core.database.base import (
    Base,
    OrganizationMixin,
    TimestampMixin,
    UUIDMixin,
)


class AccountRole(str, enum.Enum):
    """Role of an account within its organization."""

    OWNER = "Owner"
    MEMBER = "Member"


class Account(Base, UUIDMixin, TimestampMixin, OrganizationMixin):
    """Account model representing a member of an organization.

    Exactly one Owner is created when the organization registers; every
    account added through the roster is a Member.

    Attributes:
        full_name: Member's full name
        display_name: Name shown on the board
        email: Normalized email, unique across all organizations
        password_hash: Bcrypt-hashed password
        role: Owner or Member
    """

    __tablename__ = "accounts"

    full_name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
    )
    display_name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
    )
    email: Mapped[str] = mapped_column(
        String(MAX_EMAIL_LENGTH),
        unique=True,
        index=True,
        nullable=False,
    )
    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    role: Mapped[str] = mapped_column(
        String(20),
        default=AccountRole.MEMBER.value,
        nullable=False,
    )

    @property
    def is_owner(self) -> bool:
        return self.role == AccountRole.OWNER.value

    def __repr__(self) -> str:
        return f"<Account {self.email}>"
