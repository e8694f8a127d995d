"""
Factories: prompt override storage by settings, PromptStore from the static registry.
"""
from pathlib import Path

from spaice.core.config import Settings
from spaice.integrations.prompts.ports import PromptStoragePort
from spaice.integrations.prompts.registry import load_static_prompts
from spaice.integrations.prompts.storage import FilePromptStorage, MemoryPromptStorage
from spaice.integrations.prompts.store import PromptStore


def _project_root() -> Path:
    """Backend root: spaice/integrations/prompts -> backend."""
    return Path(__file__).resolve().parent.parent.parent.parent


def get_prompt_storage(settings: Settings) -> PromptStoragePort:
    """
    Return the storage implementation named by PROMPT_STORAGE.

    Supported: "file", "memory". Anything else raises ValueError.
    """
    storage = (settings.PROMPT_STORAGE or "file").strip().lower()
    if storage == "file":
        return FilePromptStorage(_project_root() / settings.PROMPT_STORAGE_FILE.strip())
    if storage == "memory":
        return MemoryPromptStorage()
    raise ValueError(f"Unsupported prompt storage: {settings.PROMPT_STORAGE!r}")


def build_prompt_store(settings: Settings, storage: PromptStoragePort | None = None) -> PromptStore:
    """Load the static prompts and overlay whatever the storage holds."""
    defaults = load_static_prompts(_project_root() / settings.PROMPT_TEMPLATES_DIR.strip())
    return PromptStore(defaults, storage if storage is not None else get_prompt_storage(settings))
