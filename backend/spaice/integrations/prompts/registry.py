"""
Static prompt registry: *.md files with YAML front matter (name, id, model, provider).
The body after the front matter is the template text.
"""
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from spaice.integrations.prompts.errors import PromptConfigurationError
from spaice.integrations.prompts.types import PromptDefinition

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "id", "model", "provider")


def _parse_front_matter(content: str) -> tuple[dict[str, Any], str]:
    """Split YAML front matter (between --- and ---) from the body. Returns (meta_dict, body)."""
    if not content.strip().startswith("---"):
        return {}, content
    parts = content.strip().split("---", 2)
    if len(parts) < 3:
        return {}, content
    meta_str, body = parts[1].strip(), parts[2].strip()
    try:
        meta = yaml.safe_load(meta_str) if meta_str else {}
    except yaml.YAMLError as e:
        raise PromptConfigurationError(f"Invalid YAML front matter: {e}") from e
    if meta is not None and not isinstance(meta, dict):
        raise PromptConfigurationError("Front matter must be a mapping")
    return meta or {}, body


def load_prompt_file(path: Path) -> tuple[str, PromptDefinition]:
    """Read one template file. Returns (name, definition)."""
    meta, body = _parse_front_matter(path.read_text(encoding="utf-8"))
    if not meta:
        raise PromptConfigurationError(f"{path.name}: missing front matter")
    missing = [f for f in REQUIRED_FIELDS if not meta.get(f)]
    if missing:
        raise PromptConfigurationError(f"{path.name}: missing fields {', '.join(missing)}")
    if not body:
        raise PromptConfigurationError(f"{path.name}: empty template body")
    try:
        definition = PromptDefinition(
            id=str(meta["id"]).strip(),
            model=str(meta["model"]).strip(),
            provider=str(meta["provider"]).strip().lower(),
            content=body,
        )
    except ValidationError as e:
        raise PromptConfigurationError(f"{path.name}: {e}") from e
    return str(meta["name"]).strip(), definition


def load_static_prompts(prompts_dir: Path) -> dict[str, PromptDefinition]:
    """
    Load every *.md under prompts_dir into a name -> definition mapping.

    Raises PromptConfigurationError when the directory is missing or empty,
    a file is invalid, or two files share a name or an id.
    """
    if not prompts_dir.is_dir():
        raise PromptConfigurationError(f"Prompt templates directory not found: {prompts_dir}")
    prompts: dict[str, PromptDefinition] = {}
    seen_ids: dict[str, str] = {}
    for path in sorted(prompts_dir.rglob("*.md")):
        name, definition = load_prompt_file(path)
        if name in prompts:
            raise PromptConfigurationError(f"Duplicate prompt name {name!r} in {path.name}")
        if definition.id in seen_ids:
            raise PromptConfigurationError(
                f"Duplicate prompt id {definition.id!r} in {name!r} and {seen_ids[definition.id]!r}"
            )
        prompts[name] = definition
        seen_ids[definition.id] = name
    if not prompts:
        raise PromptConfigurationError(f"No prompt templates in {prompts_dir}")
    logger.info("Loaded %s static prompts from %s", len(prompts), prompts_dir)
    return prompts
