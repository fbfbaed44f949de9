"""
Language model configuration settings.

Manages the generation model, its sampling parameters and the context budget.

Dependencies: pydantic, pydantic_settings
System role: Answer generation configuration
"""

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """OpenAI generation and credential configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LLM_",
        case_sensitive=False,
        extra="ignore",
    )

    openai_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENAI_API_KEY", "LLM_OPENAI_API_KEY"),
        description="API key shared by the embedding and chat clients",
    )

    model: str = Field(default="gpt-4.1-mini", description="Chat completion model ID")
    temperature: float = Field(default=0.5, description="Sampling temperature", ge=0.0, le=2.0)
    max_tokens: int = Field(default=500, description="Response length cap in tokens", ge=1)

    max_context_chars: int = Field(
        default=12000,
        description="Character budget for assembled context (0 disables the cap)",
        ge=0,
    )
