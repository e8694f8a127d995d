"""
Prompt errors: unknown prompt id, broken registry or overlay.
"""


class PromptNotFoundError(KeyError):
    """No template matches the requested prompt id."""

    def __init__(self, prompt_id: str) -> None:
        super().__init__(prompt_id)
        self.prompt_id = prompt_id

    def __str__(self) -> str:
        return f"Prompt template {self.prompt_id!r} not found"


class PromptConfigurationError(ValueError):
    """Static registry or persisted overlay is missing or structurally invalid."""


class PromptIdConflictError(ValueError):
    """Another prompt already uses the requested id."""

    def __init__(self, prompt_id: str, owner: str) -> None:
        super().__init__(f"Prompt id {prompt_id!r} is already used by {owner!r}")
        self.prompt_id = prompt_id
        self.owner = owner
