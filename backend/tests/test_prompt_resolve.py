import re

import pytest

from spaice.integrations.prompts import PromptNotFoundError
from spaice.integrations.prompts.render.simple_template import find_placeholders, render

MARKER = re.compile(r"\{\{\w+\}\}")


def test_render_replaces_every_occurrence() -> None:
    text = render("{{a}} and {{a}} then {{b}}", {"a": "x", "b": "y"})
    assert text == "x and x then y"


def test_render_none_becomes_empty_and_absent_key_stays() -> None:
    text = render("[{{given}}] [{{missing}}]", {"given": None})
    assert text == "[] [{{missing}}]"


def test_render_non_string_values_and_literal_keys() -> None:
    assert render("n={{n}}", {"n": 42}) == "n=42"
    # key is not a regex; "." must not match arbitrary characters
    assert render("{{a.b}} {{axb}}", {"a.b": "dot"}) == "dot {{axb}}"


def test_find_placeholders_dedupes_in_order() -> None:
    assert find_placeholders("{{b}} {{a}} {{b}}") == ["b", "a"]


def test_resolve_research_prompt(prompt_service) -> None:
    resolved = prompt_service.resolve(
        "research_targetcompany",
        {"targetcompany_name": "Acme", "targetcompany_website": "acme.com"},
    )
    assert "Acme" in resolved.text
    assert "acme.com" in resolved.text
    assert "{{targetcompany_name}}" not in resolved.text
    assert "{{targetcompany_website}}" not in resolved.text
    assert resolved.provider == "perplexity"
    assert resolved.model == "llama-3.1-sonar-large-128k-online"


def test_resolve_looks_up_by_id_not_name(prompt_service) -> None:
    with pytest.raises(PromptNotFoundError):
        prompt_service.resolve("targetcompany_research", {})


@pytest.mark.parametrize("prompt_id", ["nope", "", "RESEARCH_TARGETCOMPANY"])
def test_resolve_unknown_id_raises_not_found(prompt_service, prompt_id) -> None:
    with pytest.raises(PromptNotFoundError) as exc_info:
        prompt_service.resolve(prompt_id, {"targetcompany_name": "Acme"})
    assert exc_info.value.prompt_id == prompt_id


def test_resolve_with_all_placeholders_leaves_no_markers(prompt_store, prompt_service) -> None:
    for prompt in prompt_store.get_all():
        variables = {key: f"value-{key}" for key in find_placeholders(prompt.content)}
        resolved = prompt_service.resolve(prompt.id, variables)
        assert not MARKER.search(resolved.text), prompt.id


def test_resolve_partial_variables_passes_through(prompt_service) -> None:
    resolved = prompt_service.resolve("research_targetcompany", {"targetcompany_name": "Acme"})
    assert "{{targetcompany_website}}" in resolved.text


def test_resolve_uses_user_edit(prompt_store, prompt_service) -> None:
    assert prompt_store.update("prospecting_email", {"content": "Hi {{prospect_name}}", "model": "gpt-4"})
    resolved = prompt_service.resolve("prospecting_email", {"prospect_name": "Jane"})
    assert resolved.text == "Hi Jane"
    assert resolved.model == "gpt-4"
