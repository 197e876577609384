import pytest
from pydantic_ai.models.openai import OpenAIChatModel

from threefold.config import Settings
from threefold.infrastructure.ai.ai_model import build_model


def test_builds_openai_model() -> None:
    settings = Settings(AI_PROVIDER="openai", AI_MODEL_NAME="gpt-4o-mini", OPENAI_API_KEY="sk-x")

    model = build_model(settings)

    assert isinstance(model, OpenAIChatModel)
    assert model.model_name == "gpt-4o-mini"


def test_no_provider_is_rejected() -> None:
    settings = Settings(AI_PROVIDER=None)

    with pytest.raises(ValueError, match="Unsupported AI provider"):
        build_model(settings)


def test_provider_requires_its_credentials() -> None:
    with pytest.raises(ValueError, match="ANTHROPIC_API_KEY is required"):
        Settings(AI_PROVIDER="anthropic", AI_MODEL_NAME="claude", ANTHROPIC_API_KEY=None)
