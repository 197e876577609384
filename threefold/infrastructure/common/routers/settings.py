from fastapi import APIRouter

from threefold.config import get_settings
from threefold.feature_flags import FeatureFlags
from threefold.infrastructure.common.schemas.settings_schemas import (
    AppSettingsResponse,
    QuotaLimits,
)

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("")
async def get_app_settings() -> AppSettingsResponse:
    """
    Get public application settings.

    No authentication required; clients use this to decide which AI actions
    to offer and how to describe the free allowance.
    """
    settings = get_settings()
    return AppSettingsResponse(
        feature_flags=FeatureFlags.from_settings(settings),
        quota=QuotaLimits.from_settings(settings),
    )
