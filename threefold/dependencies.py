"""Shared FastAPI dependencies."""

from fastapi import HTTPException, status

from threefold.feature_flags import is_ai_enabled


async def require_ai_enabled() -> None:
    """Answer 410 Gone while no AI provider is configured.

    Runs before the endpoint, so a disabled feature never spends quota.
    """
    if not is_ai_enabled():
        raise HTTPException(
            status_code=status.HTTP_410_GONE,
            detail="AI features are not enabled on this server",
        )
