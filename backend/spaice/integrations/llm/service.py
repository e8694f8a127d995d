"""
ModelDispatcher: one POST to the provider-keyed LLM proxy, answer text normalized per provider.
"""
import logging

import httpx
from fastapi import Request

from spaice.core.config import Settings
from spaice.integrations.llm.errors import MalformedResponseError, RequestFailedError
from spaice.integrations.llm.extractors import ExtractorRegistry, default_extractors
from spaice.integrations.llm.types import ProxyRequest

logger = logging.getLogger(__name__)


class ModelDispatcher:
    """
    Sends a resolved prompt to the proxy and returns the plain-text answer.

    Example (no real request):

        dispatcher = ModelDispatcher(get_settings())
        text = await dispatcher.dispatch("Hello!", "openai", "gpt-4o-mini")
    """

    def __init__(
        self,
        settings: Settings,
        extractors: ExtractorRegistry | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = settings.LLM_PROXY_BASE_URL.rstrip("/")
        self._timeout = settings.llm_proxy_timeout
        self._extractors = extractors or default_extractors()
        self._transport = transport

    async def dispatch(self, text: str, provider: str, model: str) -> str:
        """
        POST {base_url}/{provider} with {"message", "modelName"} and extract the answer.

        Raises UnknownProviderError before sending anything, RequestFailedError on
        transport errors and non-2xx statuses, MalformedResponseError on a body of
        the wrong shape.
        """
        extract = self._extractors.get(provider)
        body = ProxyRequest(message=text, model_name=model).model_dump(by_alias=True)
        url = f"{self._base_url}/{provider}"
        logger.debug("LLM proxy call provider=%s model=%s", provider, model)

        async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
            try:
                response = await client.post(url, json=body)
            except httpx.RequestError as e:
                logger.warning("LLM proxy request error provider=%s: %s", provider, e)
                raise RequestFailedError(f"Request to {url} failed: {e}") from e

        if not response.is_success:
            logger.warning("LLM proxy HTTP %s provider=%s model=%s", response.status_code, provider, model)
            raise RequestFailedError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"{provider}: response is not JSON") from e
        return extract(data)


def get_model_dispatcher(request: Request) -> ModelDispatcher:
    """
    Dependency: ModelDispatcher from app.state (registered in lifespan).

    Usage: dispatcher: ModelDispatcher = Depends(get_model_dispatcher).
    """
    return request.app.state.model_dispatcher
