"""
Application configuration from environment variables.
Settings class using pydantic-settings; every field has a local-dev default.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env from backend root so it loads when running from backend/ or project root
_BACKEND_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _BACKEND_ROOT / ".env"

DEFAULT_REVIEW_MODEL = "claude-sonnet-4-20250514"
DEFAULT_REVIEW_MAX_TOKENS = 3000


class Settings(BaseSettings):
    """
    Application settings loaded from environment and .env.
    """

    # Application
    ENVIRONMENT: str = "development"
    # Store as string so env never triggers json.loads; parsed in cors_origins_list.
    cors_origins: str = Field(
        default="http://localhost:3000",
        description="Comma-separated origins or JSON array",
        validation_alias="CORS_ORIGINS",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def normalize_cors_origins(cls, v: object) -> str:
        """Ensure we always have a string (avoid empty env causing json.loads in pydantic-settings)."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return "http://localhost:3000"
        if isinstance(v, list):
            return ",".join(str(x).strip() for x in v if str(x).strip())
        return str(v).strip()

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Account store (relative paths resolve against the working directory)
    accounts_data_file: Path = Field(
        default=Path("Data") / "accounts.json",
        description="JSON file holding the account records",
        validation_alias="ACCOUNTS_DATA_FILE",
    )

    # Review glue (LLM provider)
    anthropic_api_key: str = Field(
        default="",
        description="Anthropic API key used by the review request step",
        validation_alias="ANTHROPIC_API_KEY",
    )
    review_model: str = Field(
        default=DEFAULT_REVIEW_MODEL,
        description="Model id written into the review request payload",
        validation_alias="REVIEW_MODEL",
    )
    review_max_tokens: int = Field(
        default=DEFAULT_REVIEW_MAX_TOKENS,
        gt=0,
        description="max_tokens written into the review request payload",
        validation_alias="REVIEW_MAX_TOKENS",
    )
    review_project_name: str = Field(
        default="AccountApi",
        description="Project name used in the company-specific review prompt",
        validation_alias="REVIEW_PROJECT_NAME",
    )

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS_ORIGINS from comma-separated or JSON array string."""
        raw = (self.cors_origins or "").strip()
        if not raw:
            return ["http://localhost:3000"]
        if raw.startswith("["):
            try:
                parsed = json.loads(raw)
            except json.JSONDecodeError:
                parsed = None
            if isinstance(parsed, list):
                return [x.strip() for x in parsed if isinstance(x, str) and x.strip()]
        return [x.strip() for x in raw.split(",") if x.strip()] or ["http://localhost:3000"]

    @field_validator("review_model", "review_project_name", mode="before")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip()
        return v

    def validate_for_review_request(self) -> None:
        """
        Call before contacting the provider.
        Raises ValueError naming the missing key.
        """
        if not self.anthropic_api_key:
            raise ValueError("Missing required environment variables: ANTHROPIC_API_KEY")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
