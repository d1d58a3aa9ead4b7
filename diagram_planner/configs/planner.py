"""
Diagram planner configuration settings.

Model selection and retry budget for the LLM planning phase.

Dependencies: pydantic, pydantic_settings
System role: Planning-service configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PlannerSettings(BaseSettings):
    """Settings for the chat model that produces structured diagram plans."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PLANNER_",
        case_sensitive=False,
        extra="ignore",
    )

    model_id: str = Field(
        default="global.anthropic.claude-haiku-4-5-20251001-v1:0",
        description="Chat model identifier used for planning",
    )
    region: str = Field(
        default="ap-southeast-2",
        description="AWS region for Bedrock",
    )
    temperature: float = Field(
        default=0.0,
        ge=0.0,
        le=2.0,
        description="Model temperature (0.0 for deterministic plans)",
    )
    max_tokens: int = Field(
        default=2048,
        gt=0,
        description="Maximum tokens in a planner response",
    )
    timeout_seconds: float | None = Field(
        default=60.0,
        description="Client-side timeout for one planning call",
    )
    max_plan_attempts: int = Field(
        default=2,
        ge=1,
        description="Planning attempts (initial + corrective retries)",
    )
    use_prompt_registry: bool = Field(
        default=False,
        description="Fetch planner prompts from the Langfuse prompt registry",
    )
    prompt_label: str | None = Field(
        default=None,
        description="Optional label filter when using the prompt registry",
    )
