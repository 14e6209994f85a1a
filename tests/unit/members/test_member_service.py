"""Unit tests for MemberService."""

import random
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from workboard.core.auth.backend import verify_password
from workboard.core.auth.context import AccessContext
from workboard.core.errors import NotFoundError, ValidationError
from workboard.core.utils.passwords import TemporaryPasswordGenerator
from workboard.modules.members.models import Account, AccountRole
from workboard.modules.members.services import MemberService


@pytest.fixture
def ctx() -> AccessContext:
    return AccessContext(user_id=uuid4(), organization_id=uuid4())


def make_service(seed: int = 1) -> tuple[MemberService, AsyncMock]:
    repo = AsyncMock()
    repo.create.side_effect = lambda account: account
    generator = TemporaryPasswordGenerator(rng=random.Random(seed))
    return MemberService(repo=repo, password_generator=generator), repo


class TestAddMember:
    """Tests for MemberService.add_member."""

    async def test_member_gets_hashed_temporary_password(self, ctx):
        service, repo = make_service(seed=3)
        repo.get_by_email.return_value = None
        expected_password = TemporaryPasswordGenerator(rng=random.Random(3)).generate()

        account = await service.add_member(ctx, " Grace Hopper ", "Grace", " Grace@Navy.mil ")

        assert account.organization_id == ctx.organization_id
        assert account.full_name == "Grace Hopper"
        assert account.email == "grace@navy.mil"
        assert account.role == AccountRole.MEMBER.value
        assert account.password_hash != expected_password
        assert verify_password(expected_password, account.password_hash)

    @pytest.mark.parametrize("field", ["full_name", "display_name", "email"])
    async def test_blank_fields_are_rejected(self, ctx, field):
        service, repo = make_service()
        data = {"full_name": "Grace", "display_name": "Grace", "email": "g@x.io"}
        data[field] = " "

        with pytest.raises(ValidationError):
            await service.add_member(ctx, **data)

        repo.create.assert_not_awaited()

    async def test_existing_member_of_same_organization(self, ctx):
        service, repo = make_service()
        repo.get_by_email.return_value = Account(organization_id=ctx.organization_id)

        with pytest.raises(ValidationError) as exc_info:
            await service.add_member(ctx, "Grace", "Grace", "g@x.io")

        assert exc_info.value.message == "Email is already a member of this organization."

    async def test_email_registered_elsewhere(self, ctx):
        service, repo = make_service()
        repo.get_by_email.return_value = Account(organization_id=uuid4())

        with pytest.raises(ValidationError) as exc_info:
            await service.add_member(ctx, "Grace", "Grace", "g@x.io")

        assert exc_info.value.message == "Email is already registered."


class TestRemoveMember:
    """Tests for MemberService.remove_member."""

    async def test_cannot_remove_self(self, ctx):
        service, repo = make_service()

        with pytest.raises(ValidationError) as exc_info:
            await service.remove_member(ctx, ctx.user_id)

        assert exc_info.value.message == "You cannot remove yourself from the organization."
        repo.get_by_id.assert_not_awaited()

    async def test_unknown_member_is_not_found(self, ctx):
        service, repo = make_service()
        repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await service.remove_member(ctx, uuid4())

        assert exc_info.value.message == "Member not found."

    async def test_cannot_remove_owner(self, ctx):
        service, repo = make_service()
        repo.get_by_id.return_value = Account(
            id=uuid4(),
            organization_id=ctx.organization_id,
            role=AccountRole.OWNER.value,
        )

        with pytest.raises(ValidationError) as exc_info:
            await service.remove_member(ctx, uuid4())

        assert exc_info.value.message == "Cannot remove the organization owner."
        repo.delete.assert_not_awaited()

    async def test_removes_member(self, ctx):
        service, repo = make_service()
        member = Account(
            id=uuid4(),
            organization_id=ctx.organization_id,
            role=AccountRole.MEMBER.value,
        )
        repo.get_by_id.return_value = member

        await service.remove_member(ctx, member.id)

        repo.get_by_id.assert_awaited_once_with(ctx.organization_id, member.id)
        repo.delete.assert_awaited_once_with(member)
