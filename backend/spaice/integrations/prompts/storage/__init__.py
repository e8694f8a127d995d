from spaice.integrations.prompts.storage.file_storage import FilePromptStorage
from spaice.integrations.prompts.storage.memory_storage import MemoryPromptStorage

__all__ = ["FilePromptStorage", "MemoryPromptStorage"]
