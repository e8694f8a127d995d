"""
LLM integration: ModelDispatcher over the provider-keyed proxy, response extractors, model catalog.
"""
from spaice.integrations.llm.errors import (
    DispatchError,
    MalformedResponseError,
    RequestFailedError,
    UnknownProviderError,
)
from spaice.integrations.llm.extractors import ExtractorRegistry, default_extractors
from spaice.integrations.llm.models import MODEL_OPTIONS, ModelOption, provider_for_model
from spaice.integrations.llm.service import ModelDispatcher, get_model_dispatcher
from spaice.integrations.llm.types import ProxyRequest

__all__ = [
    "ModelDispatcher",
    "get_model_dispatcher",
    "ExtractorRegistry",
    "default_extractors",
    "DispatchError",
    "UnknownProviderError",
    "RequestFailedError",
    "MalformedResponseError",
    "MODEL_OPTIONS",
    "ModelOption",
    "provider_for_model",
    "ProxyRequest",
]
