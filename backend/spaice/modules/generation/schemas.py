"""API schemas for document generation."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from spaice.integrations.prompts import ModelProvider


class GenerationResult(BaseModel):
    """Answer of the model plus what produced it."""

    prompt_id: str
    text: str
    model: str
    provider: ModelProvider
    latency_ms: int | None = None


class GenerateRequest(BaseModel):
    """Generic generation: any prompt id with its variables."""

    prompt_id: str = Field(..., min_length=1, description="Prompt id, e.g. research_targetcompany")
    variables: dict[str, Any] = Field(default_factory=dict, description="Placeholder values")


class CompanyResearchRequest(BaseModel):
    targetcompany_name: str = Field(..., min_length=1)
    targetcompany_website: str = Field(..., min_length=1)

    @field_validator("targetcompany_name", "targetcompany_website", mode="before")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v


class AnnualReportRequest(BaseModel):
    targetcompany_name: str = Field(..., min_length=1)
    targetcompany_annualreport: str = Field(..., min_length=1, description="Report text")
    owncompany_name: str = Field(..., min_length=1)
    owncompany_info: str | None = Field(None, description="Our products, solutions and services")


class ColdCallingGuideRequest(BaseModel):
    prospect_name: str = Field(..., min_length=1)
    owncompany_name: str = Field(..., min_length=1)
    prospect_info: str | None = None
    targetcompany_research: str | None = Field(None, description="Latest research result")
    targetcompany_annualreport: str | None = Field(None, description="Annual report analysis")


class ProspectingEmailRequest(BaseModel):
    owncompany_name: str = Field(..., min_length=1)
    targetcompany_name: str = Field(..., min_length=1)
    prospect_name: str = Field(..., min_length=1)
    owncompany_info: str | None = None
    targetcompany_research_result: str | None = None
    prospect_info: str | None = None


class ProspectResearchRequest(BaseModel):
    targetcompany_name: str = Field(..., min_length=1)
    prospect_url: str = Field(..., min_length=1, description="LinkedIn profile URL")


class BrainstormRequest(BaseModel):
    user_input: str = Field(..., min_length=1, description="Topic or message of this turn")
    system_prompt: str | None = Field(None, description="Overrides the default brainstorming instructions")
    chat_history: str | None = Field(None, description="Earlier turns as plain text")
