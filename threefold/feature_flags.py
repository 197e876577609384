"""Runtime feature toggles derived from settings."""

from pydantic import BaseModel, ConfigDict, Field

from threefold.config import Settings, get_settings


class FeatureFlags(BaseModel):
    """Switches a client needs to know about before calling the API."""

    model_config = ConfigDict(frozen=True)

    ai: bool = Field(..., description="AI drafting endpoints are available")
    user_registrations: bool = Field(..., description="New accounts can be created")
    guest_usage: bool = Field(..., description="Anonymous visitors may spend guest quota")

    @classmethod
    def from_settings(cls, settings: Settings) -> "FeatureFlags":
        return cls(
            ai=settings.ai_enabled,
            user_registrations=settings.ALLOW_USER_REGISTRATIONS,
            guest_usage=settings.ALLOW_GUEST_USAGE,
        )


def get_feature_flags() -> FeatureFlags:
    return FeatureFlags.from_settings(get_settings())


def is_ai_enabled() -> bool:
    return get_feature_flags().ai


def is_user_registrations_enabled() -> bool:
    return get_feature_flags().user_registrations


def is_guest_usage_enabled() -> bool:
    return get_feature_flags().guest_usage
