"""
ModelDispatcher: request format, per-provider answer extraction, failure modes (httpx.MockTransport).
"""
import json

import httpx
import pytest

from spaice.integrations.llm import (
    MalformedResponseError,
    ModelDispatcher,
    RequestFailedError,
    UnknownProviderError,
    provider_for_model,
)
from spaice.integrations.llm.extractors import extract_anthropic, extract_openai, extract_perplexity

SAMPLE_RESPONSES = {
    "openai": {"choices": [{"message": {"role": "assistant", "content": "X"}}]},
    "anthropic": [{"messageList": [{"role": "user", "content": "prompt"}, {"role": "assistant", "content": "X"}]}],
    "perplexity": "X",
}


def _dispatcher(settings, handler) -> ModelDispatcher:
    return ModelDispatcher(settings, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
@pytest.mark.parametrize("provider", ["openai", "anthropic", "perplexity"])
async def test_dispatch_extracts_answer_per_provider(settings, provider):
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=SAMPLE_RESPONSES[provider])

    text = await _dispatcher(settings, handler).dispatch("Hello", provider, "some-model")

    assert text == "X"
    assert len(seen) == 1
    assert seen[0].method == "POST"
    assert str(seen[0].url) == f"http://proxy.test/api/{provider}"
    assert json.loads(seen[0].content) == {"message": "Hello", "modelName": "some-model"}


@pytest.mark.asyncio
async def test_dispatch_unknown_provider_sends_nothing(settings):
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(200, json="X")

    with pytest.raises(UnknownProviderError) as exc_info:
        await _dispatcher(settings, handler).dispatch("Hello", "palm", "palm-2")
    assert exc_info.value.provider == "palm"
    assert calls == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [400, 401, 429, 500, 503])
async def test_dispatch_non_success_status_fails_without_retry(settings, status_code):
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(status_code, json={"error": "nope"})

    with pytest.raises(RequestFailedError) as exc_info:
        await _dispatcher(settings, handler).dispatch("Hello", "openai", "gpt-4o")
    assert exc_info.value.status_code == status_code
    assert calls == 1


@pytest.mark.asyncio
async def test_dispatch_transport_error_is_request_failed(settings):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(RequestFailedError) as exc_info:
        await _dispatcher(settings, handler).dispatch("Hello", "openai", "gpt-4o")
    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_dispatch_non_json_body_is_malformed(settings):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>oops</html>")

    with pytest.raises(MalformedResponseError):
        await _dispatcher(settings, handler).dispatch("Hello", "perplexity", "sonar")


@pytest.mark.asyncio
async def test_dispatch_strips_trailing_slash_from_base_url(settings):
    settings.LLM_PROXY_BASE_URL = "http://proxy.test/api/"
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, json="X")

    await _dispatcher(settings, handler).dispatch("Hello", "perplexity", "sonar")
    assert seen == ["http://proxy.test/api/perplexity"]


@pytest.mark.parametrize(
    "extract, data",
    [
        (extract_openai, {"choices": []}),
        (extract_openai, {"choices": [{"message": {"content": None}}]}),
        (extract_anthropic, [{"messageList": [{"content": "only prompt"}]}]),
        (extract_anthropic, {"messageList": []}),
        (extract_perplexity, {"answer": "X"}),
    ],
)
def test_extractors_reject_wrong_shapes(extract, data) -> None:
    with pytest.raises(MalformedResponseError):
        extract(data)


def test_provider_for_model() -> None:
    assert provider_for_model("gpt-4o-mini") == "openai"
    assert provider_for_model("claude-3-haiku") == "anthropic"
    assert provider_for_model("llama-3.1-sonar-large-128k-online") == "perplexity"
    assert provider_for_model("unknown") is None
