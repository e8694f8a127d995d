"""
Prompt integration: static registry, override store, resolution.
"""
from spaice.integrations.prompts.errors import (
    PromptConfigurationError,
    PromptIdConflictError,
    PromptNotFoundError,
)
from spaice.integrations.prompts.factory import build_prompt_store, get_prompt_storage
from spaice.integrations.prompts.ports import PromptStoragePort
from spaice.integrations.prompts.service import PromptService, get_prompt_service
from spaice.integrations.prompts.store import STORAGE_KEY, PromptStore
from spaice.integrations.prompts.types import (
    ModelProvider,
    PromptDefinition,
    PromptTemplate,
    PromptUpdate,
    ResolvedPrompt,
)

__all__ = [
    "PromptService",
    "get_prompt_service",
    "PromptStore",
    "STORAGE_KEY",
    "build_prompt_store",
    "get_prompt_storage",
    "PromptStoragePort",
    "PromptNotFoundError",
    "PromptConfigurationError",
    "PromptIdConflictError",
    "ModelProvider",
    "PromptDefinition",
    "PromptTemplate",
    "PromptUpdate",
    "ResolvedPrompt",
]
