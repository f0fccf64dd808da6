"""Summary pipeline configuration."""

import os
from typing import Any

from pydantic import BaseModel, Field, field_validator

DEFAULT_MODEL = "openai:gpt-4o-mini"


def validate_model_string(model: str) -> tuple[str, str]:
    """Validate and parse model string format.

    Args:
        model: Model identifier (e.g., 'openai:gpt-4o-mini')

    Returns:
        Tuple of (provider, model_name)

    Raises:
        ValueError: If model string format is invalid
    """
    if ":" not in model:
        raise ValueError(
            f"Invalid model format '{model}'. Expected format: provider:model\n\n"
            f"💡 Examples of valid model formats:\n"
            f"   openai:gpt-4o-mini\n"
            f"   anthropic:claude-3-5-sonnet-latest\n"
            f"   google-gla:gemini-2.0-flash"
        )

    parts = model.split(":", 1)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ValueError(
            f"Invalid model format '{model}'. Both provider and model name must be "
            f"non-empty."
        )

    provider = parts[0].lower()
    model_name = parts[1]
    return provider, model_name


class SummaryConfig(BaseModel):
    """Policy constants and defaults for one summary bot deployment."""

    model: str = DEFAULT_MODEL
    token_budget: int = Field(2800, gt=0)
    issue_quota: int = Field(10, gt=0)
    cooldown_minutes: int = Field(10, ge=0)
    tokenizer: str = "cl100k_base"
    default_days: int = Field(7, gt=0)
    default_owner: str = "flows-network"
    default_repo: str = "haiku-platform"
    trigger_word: str = "flows summarize"
    restart_conversation: bool = True
    max_retries: int = Field(3, ge=0)

    @field_validator("model")
    @classmethod
    def _check_model(cls, value: str) -> str:
        validate_model_string(value)
        return value

    @classmethod
    def from_env(cls, **overrides: Any) -> "SummaryConfig":
        """Build configuration from SUMMARY_* environment variables.

        Keyword overrides take precedence over the environment.
        """
        env_fields = {
            "model": "SUMMARY_MODEL",
            "token_budget": "SUMMARY_TOKEN_BUDGET",
            "issue_quota": "SUMMARY_ISSUE_QUOTA",
            "cooldown_minutes": "SUMMARY_COOLDOWN_MINUTES",
            "tokenizer": "SUMMARY_TOKENIZER",
            "default_days": "SUMMARY_DEFAULT_DAYS",
            "default_owner": "SUMMARY_DEFAULT_OWNER",
            "default_repo": "SUMMARY_DEFAULT_REPO",
            "trigger_word": "SUMMARY_TRIGGER_WORD",
            "restart_conversation": "SUMMARY_RESTART_CONVERSATION",
            "max_retries": "SUMMARY_MAX_RETRIES",
        }
        values: dict[str, Any] = {}
        for field, env_var in env_fields.items():
            raw = os.getenv(env_var)
            if raw is not None and raw != "":
                values[field] = raw
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
