"""
Dispatch errors. None of them is retried.
"""


class DispatchError(Exception):
    """Base error of a model dispatch."""


class UnknownProviderError(DispatchError):
    """No response extractor is registered for the provider."""

    def __init__(self, provider: str) -> None:
        super().__init__(f"Unknown model provider: {provider}")
        self.provider = provider


class RequestFailedError(DispatchError):
    """The proxy answered with a non-success status or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(DispatchError):
    """A success response does not have the provider's expected shape."""
