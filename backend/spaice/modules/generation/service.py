"""
GenerationService: resolve a prompt and dispatch it to its model in one call.
"""
import logging
import time
from collections.abc import Mapping
from typing import Any

from fastapi import Depends

from spaice.integrations.llm import ModelDispatcher, get_model_dispatcher
from spaice.integrations.prompts import PromptService, get_prompt_service
from spaice.modules.generation.schemas import GenerationResult

logger = logging.getLogger(__name__)

RESEARCH_PROMPT_ID = "research_targetcompany"
ANNUAL_REPORT_PROMPT_ID = "analyze_annualreport"
COLD_CALLING_GUIDE_PROMPT_ID = "generate_targetcompany_coldcallingguide"
PROSPECTING_EMAIL_PROMPT_ID = "prospecting_email"
PROSPECT_RESEARCH_PROMPT_ID = "research_prospect"
BRAINSTORM_PROMPT_ID = "brainstorm"

# Used when the caller brings no system prompt of its own
BRAINSTORM_SYSTEM_PROMPT = """You are a sales strategist helping to brainstorm ideas.

Please provide:
1. Key challenges
2. Potential solutions
3. Creative approaches
4. Action items
5. Next steps

Format the response in markdown with clear sections."""


class GenerationService:
    """Sales documents generated from the prompt library."""

    def __init__(self, prompt_service: PromptService, dispatcher: ModelDispatcher) -> None:
        self._prompts = prompt_service
        self._dispatcher = dispatcher

    async def generate(self, prompt_id: str, variables: Mapping[str, Any] | None = None) -> GenerationResult:
        resolved = self._prompts.resolve(prompt_id, variables)
        start = time.perf_counter()
        text = await self._dispatcher.dispatch(resolved.text, resolved.provider, resolved.model)
        latency_ms = int((time.perf_counter() - start) * 1000)
        logger.info(
            "generate ok prompt_id=%s provider=%s model=%s latency_ms=%s",
            prompt_id,
            resolved.provider,
            resolved.model,
            latency_ms,
        )
        return GenerationResult(
            prompt_id=prompt_id,
            text=text,
            model=resolved.model,
            provider=resolved.provider,
            latency_ms=latency_ms,
        )

    async def research_target_company(
        self, targetcompany_name: str, targetcompany_website: str
    ) -> GenerationResult:
        return await self.generate(
            RESEARCH_PROMPT_ID,
            {
                "targetcompany_name": targetcompany_name,
                "targetcompany_website": targetcompany_website,
            },
        )

    async def analyze_annual_report(
        self,
        targetcompany_name: str,
        targetcompany_annualreport: str,
        owncompany_name: str,
        owncompany_info: str | None = None,
    ) -> GenerationResult:
        return await self.generate(
            ANNUAL_REPORT_PROMPT_ID,
            {
                "targetcompany_name": targetcompany_name,
                "targetcompany_annualreport": targetcompany_annualreport,
                "owncompany_name": owncompany_name,
                "owncompany_info": owncompany_info,
            },
        )

    async def cold_calling_guide(
        self,
        prospect_name: str,
        owncompany_name: str,
        prospect_info: str | None = None,
        targetcompany_research: str | None = None,
        targetcompany_annualreport: str | None = None,
    ) -> GenerationResult:
        return await self.generate(
            COLD_CALLING_GUIDE_PROMPT_ID,
            {
                "prospect_name": prospect_name,
                "prospect_info": prospect_info,
                "targetcompany_research": targetcompany_research,
                "targetcompany_annualreport": targetcompany_annualreport,
                "owncompany_name": owncompany_name,
            },
        )

    async def prospecting_email(
        self,
        owncompany_name: str,
        targetcompany_name: str,
        prospect_name: str,
        owncompany_info: str | None = None,
        targetcompany_research_result: str | None = None,
        prospect_info: str | None = None,
    ) -> GenerationResult:
        return await self.generate(
            PROSPECTING_EMAIL_PROMPT_ID,
            {
                "owncompany_name": owncompany_name,
                "owncompany_info": owncompany_info,
                "targetcompany_name": targetcompany_name,
                "targetcompany_research_result": targetcompany_research_result,
                "prospect_name": prospect_name,
                "prospect_info": prospect_info,
            },
        )

    async def research_prospect(self, targetcompany_name: str, prospect_url: str) -> GenerationResult:
        """Prospect analysis from a LinkedIn profile URL."""
        return await self.generate(
            PROSPECT_RESEARCH_PROMPT_ID,
            {"targetcompany_name": targetcompany_name, "prospect_url": prospect_url},
        )

    async def brainstorm(
        self,
        user_input: str,
        system_prompt: str | None = None,
        chat_history: str | None = None,
    ) -> GenerationResult:
        """One brainstorming turn; an empty history starts a new session."""
        return await self.generate(
            BRAINSTORM_PROMPT_ID,
            {
                "system_prompt": system_prompt or BRAINSTORM_SYSTEM_PROMPT,
                "chat_history": chat_history,
                "user_input": user_input,
            },
        )


def get_generation_service(
    prompt_service: PromptService = Depends(get_prompt_service),
    dispatcher: ModelDispatcher = Depends(get_model_dispatcher),
) -> GenerationService:
    """Dependency: GenerationService over the request's prompt service and dispatcher."""
    return GenerationService(prompt_service, dispatcher)
