"""
Simple {{var}} substitution.
Only keys present in vars are substituted; any other {{...}} stays in the text as is.
"""
import re
from collections.abc import Mapping
from typing import Any

PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}")


def render(template: str, vars: Mapping[str, Any]) -> str:
    """
    Replace every {{key}} in template for each key in vars.

    None and other falsy values become an empty string, non-string values go
    through str(value). Keys are matched literally.
    """
    text = template
    for key, value in vars.items():
        replacement = str(value) if value else ""
        text = text.replace("{{" + key + "}}", replacement)
    return text


def find_placeholders(template: str) -> list[str]:
    """Placeholder names in order of first appearance, without duplicates."""
    return list(dict.fromkeys(PLACEHOLDER_PATTERN.findall(template)))
