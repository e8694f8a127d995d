from pathlib import Path

import pytest

from spaice.core.config import Settings
from spaice.integrations.prompts import PromptDefinition, PromptService, PromptStore
from spaice.integrations.prompts.registry import load_static_prompts
from spaice.integrations.prompts.storage import MemoryPromptStorage

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "spaice" / "prompts" / "templates"
PROXY_BASE_URL = "http://proxy.test/api"


@pytest.fixture
def static_prompts() -> dict[str, PromptDefinition]:
    return load_static_prompts(TEMPLATES_DIR)


@pytest.fixture
def storage() -> MemoryPromptStorage:
    return MemoryPromptStorage()


@pytest.fixture
def prompt_store(static_prompts, storage) -> PromptStore:
    return PromptStore(static_prompts, storage)


@pytest.fixture
def prompt_service(prompt_store) -> PromptService:
    return PromptService(prompt_store)


@pytest.fixture
def settings() -> Settings:
    s = Settings()
    s.LLM_PROXY_BASE_URL = PROXY_BASE_URL
    s.LLM_PROXY_TIMEOUT_S = 0
    return s
