"""
PromptStore: static prompts with the user's persisted edits laid over them.
"""
import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from spaice.integrations.prompts.errors import PromptConfigurationError, PromptIdConflictError
from spaice.integrations.prompts.ports import PromptStoragePort
from spaice.integrations.prompts.types import PromptDefinition, PromptTemplate, PromptUpdate

logger = logging.getLogger(__name__)

STORAGE_KEY = "savedPrompts"


class PromptStore:
    """
    In-memory name -> prompt mapping seeded from the static registry.

    The overlay found in storage is merged on construction (overlay wins per name).
    Every successful update writes the whole mapping back under STORAGE_KEY.
    """

    def __init__(self, defaults: Mapping[str, PromptDefinition], storage: PromptStoragePort) -> None:
        self._defaults = dict(defaults)
        self._storage = storage
        self._prompts: dict[str, PromptDefinition] = dict(self._defaults)
        self._load_from_storage()

    def _load_from_storage(self) -> None:
        saved = self._storage.get_item(STORAGE_KEY)
        if not saved:
            return
        try:
            parsed = json.loads(saved)
        except json.JSONDecodeError as e:
            raise PromptConfigurationError(f"Saved prompts are not valid JSON: {e}") from e
        if not isinstance(parsed, dict):
            raise PromptConfigurationError("Saved prompts must be a JSON object")
        overlay: dict[str, PromptDefinition] = {}
        for name, record in parsed.items():
            try:
                overlay[name] = PromptDefinition.model_validate(record)
            except ValidationError as e:
                raise PromptConfigurationError(f"Saved prompt {name!r} is invalid: {e}") from e
        merged = {**self._prompts, **overlay}
        seen_ids: dict[str, str] = {}
        for name, prompt in merged.items():
            if prompt.id in seen_ids:
                raise PromptConfigurationError(
                    f"Saved prompts use id {prompt.id!r} for both {seen_ids[prompt.id]!r} and {name!r}"
                )
            seen_ids[prompt.id] = name
        self._prompts = merged
        logger.info("Loaded %s saved prompts from storage", len(overlay))

    def _save_to_storage(self) -> None:
        payload = {name: p.model_dump(mode="json") for name, p in self._prompts.items()}
        self._storage.set_item(STORAGE_KEY, json.dumps(payload, ensure_ascii=False))

    def get_all(self) -> list[PromptTemplate]:
        return [PromptTemplate(name=name, **p.model_dump()) for name, p in self._prompts.items()]

    def get(self, name: str) -> PromptTemplate | None:
        prompt = self._prompts.get(name)
        return PromptTemplate(name=name, **prompt.model_dump()) if prompt else None

    def find_by_id(self, prompt_id: str) -> PromptTemplate | None:
        """Prompt whose id equals prompt_id (ids are unique across the store)."""
        name = self._owner_of_id(prompt_id)
        return self.get(name) if name is not None else None

    def _owner_of_id(self, prompt_id: str) -> str | None:
        for name, prompt in self._prompts.items():
            if prompt.id == prompt_id:
                return name
        return None

    def update(self, name: str, update: PromptUpdate | Mapping[str, Any]) -> bool:
        """
        Merge the set fields of update into the named prompt and persist.

        Returns False (store unchanged) when the name does not exist.
        Raises PromptIdConflictError when the new id belongs to another prompt.
        """
        current = self._prompts.get(name)
        if current is None:
            return False
        if not isinstance(update, PromptUpdate):
            update = PromptUpdate.model_validate(update)
        changes = update.model_dump(exclude_unset=True, exclude_none=True)
        new_id = changes.get("id")
        if new_id is not None:
            owner = self._owner_of_id(new_id)
            if owner is not None and owner != name:
                raise PromptIdConflictError(new_id, owner)
        self._prompts[name] = PromptDefinition.model_validate({**current.model_dump(), **changes})
        self._save_to_storage()
        logger.info("Prompt %r updated fields=%s", name, sorted(changes))
        return True

    def reset(self, name: str) -> bool:
        """
        Restore the static definition of a prompt. False if it has none.

        Raises PromptIdConflictError when another prompt took the static id meanwhile.
        """
        default = self._defaults.get(name)
        if default is None:
            return False
        owner = self._owner_of_id(default.id)
        if owner is not None and owner != name:
            raise PromptIdConflictError(default.id, owner)
        self._prompts[name] = default
        self._save_to_storage()
        logger.info("Prompt %r reset to default", name)
        return True

    def is_overridden(self, name: str) -> bool:
        """True when the current record differs from the static one."""
        return self._prompts.get(name) != self._defaults.get(name)
