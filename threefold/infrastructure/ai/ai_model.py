"""Construction of the pydantic-ai model behind the AI agents."""

from collections.abc import Callable
from functools import lru_cache

from pydantic_ai.models import Model
from pydantic_ai.models.anthropic import AnthropicModel
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.anthropic import AnthropicProvider
from pydantic_ai.providers.google import GoogleProvider
from pydantic_ai.providers.ollama import OllamaProvider
from pydantic_ai.providers.openai import OpenAIProvider

from threefold.config import Settings, get_settings


def _ollama(name: str, settings: Settings) -> Model:
    return OpenAIChatModel(name, provider=OllamaProvider(base_url=settings.OPENAI_BASE_URL))


def _openai(name: str, settings: Settings) -> Model:
    return OpenAIChatModel(name, provider=OpenAIProvider(api_key=settings.OPENAI_API_KEY))


def _anthropic(name: str, settings: Settings) -> Model:
    return AnthropicModel(name, provider=AnthropicProvider(api_key=settings.ANTHROPIC_API_KEY))


def _google(name: str, settings: Settings) -> Model:
    return GoogleModel(name, provider=GoogleProvider(api_key=settings.GEMINI_API_KEY))


_BUILDERS: dict[str, Callable[[str, Settings], Model]] = {
    "ollama": _ollama,
    "openai": _openai,
    "anthropic": _anthropic,
    "google": _google,
}


def build_model(settings: Settings) -> Model:
    """Build the model for ``settings.AI_PROVIDER``.

    Provider credentials are checked by the settings validator, so this only
    fails for a missing or unknown provider.
    """
    builder = _BUILDERS.get(settings.AI_PROVIDER or "")
    if builder is None or settings.AI_MODEL_NAME is None:
        raise ValueError(f"Unsupported AI provider: {settings.AI_PROVIDER!r}")
    return builder(settings.AI_MODEL_NAME, settings)


@lru_cache
def get_ai_model() -> Model:
    # Built on first use so nothing contacts a provider until an AI endpoint runs.
    return build_model(get_settings())
