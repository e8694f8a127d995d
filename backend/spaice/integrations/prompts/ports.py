"""
Storage port for prompt overrides: string values under string keys.
"""
from typing import Protocol


class PromptStoragePort(Protocol):
    """Key/value storage for serialized prompt overrides (file, memory, ...)."""

    def get_item(self, key: str) -> str | None:
        """Return the stored value or None when the key is absent."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store the value under the key, replacing any previous one."""
        ...
