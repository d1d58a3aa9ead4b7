"""
Pydantic models for prompt registry configuration.

Defines model configuration schema for LLM parameters tracked alongside prompts.

Dependencies: pydantic, diagram_planner.configs
System role: Configuration validation for prompt-model pairs
"""

from typing import Any

from pydantic import BaseModel, Field

from diagram_planner.configs.planner import PlannerSettings


class ModelConfig(BaseModel):
    """
    LLM model configuration tracked with planner prompts.

    Attributes:
        model: LLM model identifier
        temperature: Sampling temperature (0.0-2.0)
        max_tokens: Maximum tokens in response
        extra: Additional model-specific parameters
    """

    model: str = Field(description="LLM model identifier")
    temperature: float | None = Field(
        default=None,
        ge=0.0,
        le=2.0,
        description="Sampling temperature",
    )
    max_tokens: int | None = Field(
        default=None,
        gt=0,
        description="Maximum tokens in response",
    )
    extra: dict[str, Any] | None = Field(
        default=None,
        description="Additional model-specific parameters",
    )

    @classmethod
    def from_planner_settings(cls, settings: PlannerSettings) -> "ModelConfig":
        """Build the config that accompanies a planner prompt version."""
        return cls(
            model=settings.model_id,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
        )

    def to_langfuse_config(self) -> dict[str, Any]:
        """
        Convert to Langfuse config dictionary.

        Returns:
            dict: Configuration dict for Langfuse prompt creation
        """
        config: dict[str, Any] = {"model": self.model}

        if self.temperature is not None:
            config["temperature"] = self.temperature
        if self.max_tokens is not None:
            config["max_tokens"] = self.max_tokens
        if self.extra:
            config.update(self.extra)

        return config
