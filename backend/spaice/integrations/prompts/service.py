"""
PromptService: resolve a prompt id plus variables into text and the model to call.
"""
import logging
from collections.abc import Mapping
from typing import Any

from fastapi import Request

from spaice.integrations.prompts.errors import PromptNotFoundError
from spaice.integrations.prompts.render.simple_template import render
from spaice.integrations.prompts.store import PromptStore
from spaice.integrations.prompts.types import ResolvedPrompt

logger = logging.getLogger(__name__)


class PromptService:
    """Prompt resolution over a PromptStore (static prompts plus user edits)."""

    def __init__(self, store: PromptStore) -> None:
        self._store = store

    @property
    def store(self) -> PromptStore:
        return self._store

    def resolve(self, prompt_id: str, variables: Mapping[str, Any] | None = None) -> ResolvedPrompt:
        """
        Find the template by id and substitute the variables.

        Keys passed with None become an empty string, placeholders whose key
        was never passed stay in the text. Raises PromptNotFoundError.
        """
        template = self._store.find_by_id(prompt_id)
        if template is None:
            raise PromptNotFoundError(prompt_id)
        text = render(template.content, variables or {})
        logger.debug("Resolved prompt %r (%s/%s)", prompt_id, template.provider, template.model)
        return ResolvedPrompt(text=text, model=template.model, provider=template.provider)


def get_prompt_service(request: Request) -> PromptService:
    """
    Dependency: PromptService over the store kept in app.state (built in lifespan).

    Usage: prompt_service: PromptService = Depends(get_prompt_service).
    """
    return PromptService(request.app.state.prompt_store)
