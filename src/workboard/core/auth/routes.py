"""Authentication API routes.

Provides endpoints for:
- Organization registration
- Login
- The caller's own profile
"""

from fastapi import APIRouter, status

from workboard.core.auth.dependencies import CurrentAccount
from workboard.core.auth.schemas import AuthResponse, LoginRequest, RegisterRequest
from workboard.core.auth.service import AuthSvc
from workboard.modules.members.schemas import MemberResponse


router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register organization",
    description="Creates a new organization and its owner account, and signs the owner in.",
)
async def register(
    data: RegisterRequest,
    service: AuthSvc,
) -> AuthResponse:
    """Register a new organization and owner."""
    return await service.register(
        organization_name=data.organization_name,
        full_name=data.full_name,
        email=data.email,
        password=data.password,
    )


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Login with email and password",
    description="Authenticate with email and password to receive a session token.",
)
async def login(
    data: LoginRequest,
    service: AuthSvc,
) -> AuthResponse:
    """Login with email and password."""
    return await service.login(email=data.email, password=data.password)


@router.get(
    "/me",
    response_model=MemberResponse,
    summary="Get current member",
    description="Returns the authenticated caller's member profile.",
)
async def get_me(current_account: CurrentAccount) -> MemberResponse:
    """Get the caller's profile."""
    return MemberResponse.model_validate(current_account)
