"""Generation router: research, annual report, cold calling guide, prospecting email, prospect research, brainstorm."""

import logging
from collections.abc import Awaitable

from fastapi import APIRouter, Depends, HTTPException, status

from spaice.integrations.llm import (
    MalformedResponseError,
    RequestFailedError,
    UnknownProviderError,
)
from spaice.integrations.prompts import PromptNotFoundError
from spaice.modules.generation.schemas import (
    AnnualReportRequest,
    BrainstormRequest,
    ColdCallingGuideRequest,
    CompanyResearchRequest,
    GenerateRequest,
    GenerationResult,
    ProspectingEmailRequest,
    ProspectResearchRequest,
)
from spaice.modules.generation.service import GenerationService, get_generation_service

router = APIRouter(prefix="/api/v1/generate", tags=["generate"])
logger = logging.getLogger(__name__)


async def _run(call: Awaitable[GenerationResult]) -> GenerationResult:
    """Await a generation and map its errors to HTTP responses."""
    try:
        return await call
    except PromptNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except UnknownProviderError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except RequestFailedError as e:
        logger.exception("LLM proxy call failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"LLM proxy call failed: {e}",
        ) from e
    except MalformedResponseError as e:
        logger.warning("LLM proxy returned unexpected body: %s", e)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Unexpected LLM response: {e}",
        ) from e


@router.post("", response_model=GenerationResult)
async def generate_endpoint(
    body: GenerateRequest,
    service: GenerationService = Depends(get_generation_service),
) -> GenerationResult:
    """Resolve any prompt by id and send it to its model."""
    return await _run(service.generate(body.prompt_id, body.variables))


@router.post("/research", response_model=GenerationResult)
async def research_endpoint(
    body: CompanyResearchRequest,
    service: GenerationService = Depends(get_generation_service),
) -> GenerationResult:
    return await _run(
        service.research_target_company(body.targetcompany_name, body.targetcompany_website)
    )


@router.post("/annual-report", response_model=GenerationResult)
async def annual_report_endpoint(
    body: AnnualReportRequest,
    service: GenerationService = Depends(get_generation_service),
) -> GenerationResult:
    return await _run(service.analyze_annual_report(**body.model_dump()))


@router.post("/cold-calling-guide", response_model=GenerationResult)
async def cold_calling_guide_endpoint(
    body: ColdCallingGuideRequest,
    service: GenerationService = Depends(get_generation_service),
) -> GenerationResult:
    return await _run(service.cold_calling_guide(**body.model_dump()))


@router.post("/prospecting-email", response_model=GenerationResult)
async def prospecting_email_endpoint(
    body: ProspectingEmailRequest,
    service: GenerationService = Depends(get_generation_service),
) -> GenerationResult:
    return await _run(service.prospecting_email(**body.model_dump()))


@router.post("/prospect-research", response_model=GenerationResult)
async def prospect_research_endpoint(
    body: ProspectResearchRequest,
    service: GenerationService = Depends(get_generation_service),
) -> GenerationResult:
    return await _run(service.research_prospect(body.targetcompany_name, body.prospect_url))


@router.post("/brainstorm", response_model=GenerationResult)
async def brainstorm_endpoint(
    body: BrainstormRequest,
    service: GenerationService = Depends(get_generation_service),
) -> GenerationResult:
    return await _run(service.brainstorm(**body.model_dump()))
