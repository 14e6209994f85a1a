"""Organization database model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from workboard.core.constants import MAX_ORGANIZATION_NAME_LENGTH, MAX_SLUG_LENGTH
from workboard.core.database.base import Base, TimestampMixin, UUIDMixin


class Organization(Base, UUIDMixin, TimestampMixin):
    """Organization model representing a tenant.

    Every other entity is partitioned by its organization id. The slug is
    derived from the name at registration and never changes.

    Attributes:
        name: Display name of the organization
        slug: Globally unique URL-safe identifier
    """

    __tablename__ = "organizations"

    name: Mapped[str] = mapped_column(
        String(MAX_ORGANIZATION_NAME_LENGTH),
        nullable=False,
    )
    slug: Mapped[str] = mapped_column(
        String(MAX_SLUG_LENGTH),
        unique=True,
        index=True,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Organization {self.slug}>"
