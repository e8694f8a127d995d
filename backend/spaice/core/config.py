"""
Application configuration from environment variables (.env).
"""
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the backend root
_env_path = Path(__file__).resolve().parent.parent.parent / ".env"
load_dotenv(_env_path)


def _str(key: str, default: str | None = None) -> str:
    value = os.getenv(key)
    if value is not None:
        return value.strip()
    if default is not None:
        return default
    return ""


def _float(key: str, default: float) -> float:
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


class Settings:
    """Application settings."""

    # LLM proxy: POST {LLM_PROXY_BASE_URL}/{provider}
    LLM_PROXY_BASE_URL: str = _str(
        "LLM_PROXY_BASE_URL",
        "https://sales-spaice-api-rickenforcer488.replit.app/api",
    )
    # 0 disables the client timeout
    LLM_PROXY_TIMEOUT_S: float = _float("LLM_PROXY_TIMEOUT_S", 0)

    # Prompts: static templates directory, override storage ("file" | "memory")
    PROMPT_TEMPLATES_DIR: str = _str("PROMPT_TEMPLATES_DIR", "spaice/prompts/templates")
    PROMPT_STORAGE: str = _str("PROMPT_STORAGE", "file")
    PROMPT_STORAGE_FILE: str = _str("PROMPT_STORAGE_FILE", "data/prompt_storage.json")

    @property
    def llm_proxy_timeout(self) -> float | None:
        """Timeout for httpx (None when disabled)."""
        return self.LLM_PROXY_TIMEOUT_S if self.LLM_PROXY_TIMEOUT_S > 0 else None


# Global settings instance (created on first access)
_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the settings instance (singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
