"""API schemas for the prompt manager."""

from pydantic import BaseModel, Field

from spaice.integrations.prompts import ModelProvider


class PromptOut(BaseModel):
    """Prompt as shown in the prompt manager."""

    name: str = Field(..., description="Registry key")
    id: str = Field(..., description="Id used for resolution")
    model: str
    provider: ModelProvider
    content: str
    placeholders: list[str] = Field(default_factory=list, description="{{...}} names in content")
    overridden: bool = Field(False, description="Differs from the shipped definition")


class ModelOptionOut(BaseModel):
    model: str
    provider: ModelProvider
    label: str
