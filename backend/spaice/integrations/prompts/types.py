"""
Prompt types: stored template, partial update, resolved prompt.
"""
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ModelProvider = Literal["openai", "anthropic", "perplexity"]


class PromptDefinition(BaseModel):
    """Stored prompt record, the value persisted under a prompt name."""

    id: str
    model: str
    provider: ModelProvider
    content: str


class PromptTemplate(PromptDefinition):
    """Prompt record together with its registry name."""

    name: str


class PromptUpdate(BaseModel):
    """Partial edit of a prompt. Unset fields are left as they are."""

    model_config = ConfigDict(extra="forbid")

    id: str | None = Field(default=None, min_length=1)
    model: str | None = Field(default=None, min_length=1)
    provider: ModelProvider | None = None
    content: str | None = None


class ResolvedPrompt(BaseModel):
    """Template text after substitution plus the model to call."""

    text: str
    model: str
    provider: ModelProvider
