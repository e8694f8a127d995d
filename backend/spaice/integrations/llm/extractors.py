"""
Per-provider extraction of the answer text from the proxy's response body.

openai:     {"choices": [{"message": {"content": "..."}}]}
anthropic:  [{"messageList": [<prompt>, {"content": "..."}]}]
perplexity: "..."
"""
from collections.abc import Callable
from typing import Any

from spaice.integrations.llm.errors import MalformedResponseError, UnknownProviderError

ResponseExtractor = Callable[[Any], str]


def extract_openai(data: Any) -> str:
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise MalformedResponseError(f"openai: expected choices[0].message.content ({e!r})") from e
    return _require_str("openai", content)


def extract_anthropic(data: Any) -> str:
    try:
        content = data[0]["messageList"][1]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise MalformedResponseError(f"anthropic: expected [0].messageList[1].content ({e!r})") from e
    return _require_str("anthropic", content)


def extract_perplexity(data: Any) -> str:
    return _require_str("perplexity", data)


def _require_str(provider: str, value: Any) -> str:
    if not isinstance(value, str):
        raise MalformedResponseError(f"{provider}: answer is {type(value).__name__}, expected str")
    return value


class ExtractorRegistry:
    """Explicit provider -> extractor table."""

    def __init__(self) -> None:
        self._extractors: dict[str, ResponseExtractor] = {}

    def register(self, provider: str, extractor: ResponseExtractor) -> None:
        self._extractors[provider] = extractor

    def get(self, provider: str) -> ResponseExtractor:
        try:
            return self._extractors[provider]
        except KeyError:
            raise UnknownProviderError(provider) from None


def default_extractors() -> ExtractorRegistry:
    """Registry with the three supported providers."""
    registry = ExtractorRegistry()
    registry.register("openai", extract_openai)
    registry.register("anthropic", extract_anthropic)
    registry.register("perplexity", extract_perplexity)
    return registry
