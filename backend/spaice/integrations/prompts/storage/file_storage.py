"""
File storage: one JSON object on disk, key -> string value.
Writes go through a temporary file and a rename so a crash never leaves half a document.
"""
import json
import logging
import os
from pathlib import Path

from spaice.integrations.prompts.errors import PromptConfigurationError

logger = logging.getLogger(__name__)


class FilePromptStorage:
    """Key/value storage kept in a single JSON file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def _read(self) -> dict[str, str]:
        if not self._path.is_file():
            return {}
        text = self._path.read_text(encoding="utf-8")
        if not text.strip():
            return {}
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise PromptConfigurationError(f"Storage file {self._path} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise PromptConfigurationError(f"Storage file {self._path} must contain a JSON object")
        return data

    def get_item(self, key: str) -> str | None:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        os.replace(tmp_path, self._path)
        logger.debug("storage write key=%s path=%s", key, self._path)
