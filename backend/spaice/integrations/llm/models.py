"""
Models selectable in the prompt manager.
"""
from pydantic import BaseModel

from spaice.integrations.prompts.types import ModelProvider


class ModelOption(BaseModel):
    provider: ModelProvider
    label: str


MODEL_OPTIONS: dict[str, ModelOption] = {
    "gpt-4": ModelOption(provider="openai", label="GPT-4"),
    "gpt-4-turbo": ModelOption(provider="openai", label="GPT-4 Turbo"),
    "gpt-4o": ModelOption(provider="openai", label="GPT-4o"),
    "gpt-4o-mini": ModelOption(provider="openai", label="GPT-4o mini"),
    "gpt-3.5-turbo": ModelOption(provider="openai", label="GPT-3.5 Turbo"),
    "claude-3-opus": ModelOption(provider="anthropic", label="Claude 3 Opus"),
    "claude-3-sonnet": ModelOption(provider="anthropic", label="Claude 3 Sonnet"),
    "claude-3-haiku": ModelOption(provider="anthropic", label="Claude 3 Haiku"),
    "llama-3.1-sonar-large-128k-online": ModelOption(provider="perplexity", label="Llama 3.1 Sonar Large"),
}


def provider_for_model(model: str) -> ModelProvider | None:
    """Provider of a catalog model, None for models outside the catalog."""
    option = MODEL_OPTIONS.get(model)
    return option.provider if option else None
