"""Prompt manager router: list, read, edit and reset prompts; model catalog."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from spaice.integrations.llm import MODEL_OPTIONS, provider_for_model
from spaice.integrations.prompts import (
    PromptIdConflictError,
    PromptService,
    PromptTemplate,
    PromptUpdate,
    get_prompt_service,
)
from spaice.integrations.prompts.render.simple_template import find_placeholders
from spaice.modules.prompt.schemas import ModelOptionOut, PromptOut

router = APIRouter(prefix="/api/v1", tags=["prompts"])
logger = logging.getLogger(__name__)


def _prompt_to_out(prompt: PromptTemplate, overridden: bool) -> PromptOut:
    return PromptOut(
        name=prompt.name,
        id=prompt.id,
        model=prompt.model,
        provider=prompt.provider,
        content=prompt.content,
        placeholders=find_placeholders(prompt.content),
        overridden=overridden,
    )


def _not_found(name: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Prompt {name!r} not found",
    )


@router.get("/prompts", response_model=list[PromptOut])
async def list_prompts_endpoint(
    prompt_service: PromptService = Depends(get_prompt_service),
) -> list[PromptOut]:
    """All prompts ordered by name."""
    store = prompt_service.store
    prompts = sorted(store.get_all(), key=lambda p: p.name)
    return [_prompt_to_out(p, store.is_overridden(p.name)) for p in prompts]


@router.get("/prompts/{name}", response_model=PromptOut)
async def get_prompt_endpoint(
    name: str,
    prompt_service: PromptService = Depends(get_prompt_service),
) -> PromptOut:
    store = prompt_service.store
    prompt = store.get(name)
    if prompt is None:
        raise _not_found(name)
    return _prompt_to_out(prompt, store.is_overridden(name))


@router.patch("/prompts/{name}", response_model=PromptOut)
def update_prompt_endpoint(
    name: str,
    body: PromptUpdate,
    prompt_service: PromptService = Depends(get_prompt_service),
) -> PromptOut:
    """
    Edit a prompt. Changing the model without a provider takes the provider
    from the model catalog; models outside the catalog keep the current provider.
    Runs in the threadpool: file storage writes are blocking.
    """
    store = prompt_service.store
    if body.model is not None and body.provider is None:
        provider = provider_for_model(body.model)
        if provider is not None:
            body = body.model_copy(update={"provider": provider})
    try:
        updated = store.update(name, body)
    except PromptIdConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    if not updated:
        raise _not_found(name)
    prompt = store.get(name)
    return _prompt_to_out(prompt, store.is_overridden(name))


@router.delete("/prompts/{name}/override", response_model=PromptOut)
def reset_prompt_endpoint(
    name: str,
    prompt_service: PromptService = Depends(get_prompt_service),
) -> PromptOut:
    """Drop the user's edits and restore the shipped definition."""
    store = prompt_service.store
    try:
        restored = store.reset(name)
    except PromptIdConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    if not restored:
        raise _not_found(name)
    return _prompt_to_out(store.get(name), False)


@router.get("/models", response_model=list[ModelOptionOut])
async def list_models_endpoint() -> list[ModelOptionOut]:
    return [
        ModelOptionOut(model=model, provider=option.provider, label=option.label)
        for model, option in MODEL_OPTIONS.items()
    ]
