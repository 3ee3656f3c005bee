"""Application settings using pydantic-settings."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration for resume-ingest."""

    model_config = SettingsConfigDict(env_prefix="RI_", env_file=".env")

    # --- LLM ---
    anthropic_api_key: SecretStr = Field(
        description="Anthropic API key for Claude models",
    )
    draft_model: str = Field(
        default="claude-sonnet-4-5-20250514",
        description="Model ID that reads PDFs and images into a free-text draft",
    )
    extraction_model: str = Field(
        default="claude-sonnet-4-5-20250514",
        description="Model ID for structured slice extraction",
    )
    tailoring_model: str = Field(
        default="claude-sonnet-4-5-20250514",
        description="Model ID for job-description tailoring",
    )
    max_output_tokens: int = Field(
        default=4096,
        description="Maximum tokens per LLM response",
    )
    llm_max_retries: int = Field(
        default=3,
        description="Attempts per LLM call before the slice fails",
    )
    llm_timeout_seconds: float = Field(
        default=120.0,
        description="Timeout for a single LLM call in seconds",
    )
    pipeline_timeout_seconds: float = Field(
        default=300.0,
        description="Timeout for a whole pipeline invocation in seconds",
    )

    # --- LinkedIn import ---
    scrapin_api_key: SecretStr | None = Field(
        default=None,
        description="Scrapin API key used to fetch LinkedIn profiles (optional)",
    )
    scrapin_base_url: str = Field(
        default="https://api.scrapin.io/enrichment/profile",
        description="Scrapin profile enrichment endpoint",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        description="Timeout for profile API requests in seconds",
    )

    # --- Storage ---
    store_dir: Path = Field(
        default=Path("./.data/resumes"),
        description="Directory for the diskcache resume store",
    )
    max_upload_size_mb: int = Field(
        default=10,
        description="Uploads above this size are rejected",
    )

    # --- Cost Guardrails ---
    max_cost_per_run_usd: float = Field(
        default=1.0,
        description="Hard stop if estimated cost of one invocation exceeds this (USD)",
    )
    warn_cost_threshold_usd: float = Field(
        default=0.5,
        description="Log warning at this cost threshold (USD)",
    )

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        description="Root log level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log renderer: 'console' for humans, 'json' for collectors",
    )

    @model_validator(mode="after")
    def validate_cost_config(self) -> Settings:
        """Ensure the warning threshold does not exceed the hard limit."""
        if self.warn_cost_threshold_usd > self.max_cost_per_run_usd:
            msg = (
                f"warn_cost_threshold_usd ({self.warn_cost_threshold_usd}) cannot exceed "
                f"max_cost_per_run_usd ({self.max_cost_per_run_usd})"
            )
            raise ValueError(msg)
        return self

    @model_validator(mode="after")
    def validate_timeouts(self) -> Settings:
        """Timeouts must be positive."""
        if self.llm_timeout_seconds <= 0 or self.pipeline_timeout_seconds <= 0:
            msg = "timeouts must be positive"
            raise ValueError(msg)
        return self
