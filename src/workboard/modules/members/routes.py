"""Membership roster API routes."""

from uuid import UUID

from fastapi import status

from workboard.core.auth.dependencies import Access
from workboard.modules.members import router
from workboard.modules.members.schemas import AddMemberRequest, MemberResponse
from workboard.modules.members.services import MemberSvc


@router.get(
    "",
    response_model=list[MemberResponse],
    summary="List members",
    description="List the members of the caller's organization, ordered by full name.",
)
async def list_members(
    ctx: Access,
    service: MemberSvc,
) -> list[MemberResponse]:
    """List organization members."""
    members = await service.list_members(ctx)
    return [MemberResponse.model_validate(m) for m in members]


@router.post(
    "",
    response_model=MemberResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add member",
    description="Add a member with a generated temporary password.",
)
async def add_member(
    data: AddMemberRequest,
    ctx: Access,
    service: MemberSvc,
) -> MemberResponse:
    """Add a member to the organization."""
    member = await service.add_member(
        ctx,
        full_name=data.full_name,
        display_name=data.display_name,
        email=data.email,
    )
    return MemberResponse.model_validate(member)


@router.delete(
    "/{member_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove member",
    description="Remove a member. The owner and the caller cannot be removed.",
)
async def remove_member(
    member_id: UUID,
    ctx: Access,
    service: MemberSvc,
) -> None:
    """Remove a member from the organization."""
    await service.remove_member(ctx, member_id)
