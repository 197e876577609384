from pydantic import BaseModel, Field

from threefold.config import Settings
from threefold.feature_flags import FeatureFlags


class QuotaLimits(BaseModel):
    """Published quota policy for non-premium requesters."""

    guest_limit: int = Field(..., description="Guest requests per window, shared by all features")
    guest_window_days: float
    user_limit: int = Field(..., description="Requests per window for each feature")
    user_window_hours: float

    @classmethod
    def from_settings(cls, settings: Settings) -> "QuotaLimits":
        return cls(
            guest_limit=settings.GUEST_QUOTA_LIMIT,
            guest_window_days=settings.GUEST_QUOTA_WINDOW_DAYS,
            user_limit=settings.USER_QUOTA_LIMIT,
            user_window_hours=settings.USER_QUOTA_WINDOW_HOURS,
        )


class AppSettingsResponse(BaseModel):
    """Public, non-user-specific application settings."""

    feature_flags: FeatureFlags
    quota: QuotaLimits
