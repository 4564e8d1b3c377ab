from dataclasses import dataclass
from enum import Enum

from lesson_plan_ai.config import Settings

OPENROUTER_KEY_PREFIX = "sk-or-"


class LLMProvider(str, Enum):
    OPENAI = "openai"
    OPENROUTER = "openrouter"


_DEFAULTS: dict[LLMProvider, tuple[str, str]] = {
    LLMProvider.OPENAI: ("https://api.openai.com/v1", "gpt-3.5-turbo"),
    LLMProvider.OPENROUTER: ("https://openrouter.ai/api/v1", "x-ai/grok-4-fast:free"),
}


@dataclass(frozen=True)
class ProviderRoute:
    """Resolved OpenAI-compatible endpoint for chat completions."""

    provider: LLMProvider
    base_url: str
    model: str

    @property
    def litellm_model(self) -> str:
        # Both providers speak the OpenAI wire format, so litellm always goes
        # through its openai adapter with an explicit base_url.
        return f"openai/{self.model}"


def select_provider(settings: Settings) -> LLMProvider:
    if settings.llm_provider != "auto":
        return LLMProvider(settings.llm_provider)
    if settings.openai_api_key.startswith(OPENROUTER_KEY_PREFIX):
        return LLMProvider.OPENROUTER
    return LLMProvider.OPENAI


def resolve_route(settings: Settings) -> ProviderRoute:
    provider = select_provider(settings)
    default_base_url, default_model = _DEFAULTS[provider]
    return ProviderRoute(
        provider=provider,
        base_url=settings.openai_base_url.strip() or default_base_url,
        model=settings.openai_model.strip() or default_model,
    )
