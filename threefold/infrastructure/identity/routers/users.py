from typing import Annotated

from fastapi import APIRouter, Depends

from threefold.domain.identity.entities.user import User
from threefold.infrastructure.identity.dependencies import get_current_user
from threefold.infrastructure.identity.schemas import UserDetailsResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me")
async def get_me(current_user: Annotated[User, Depends(get_current_user)]) -> UserDetailsResponse:
    """Get the current user's profile, including the premium flag."""
    return UserDetailsResponse(
        id=current_user.id.value,
        email=current_user.email,
        is_premium=current_user.is_premium,
    )
