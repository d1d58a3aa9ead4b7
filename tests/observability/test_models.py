"""Tests for prompt registry models."""

import pytest
from pydantic import ValidationError

from diagram_planner.configs.planner import PlannerSettings
from diagram_planner.observability.prompt_registry.models import ModelConfig


class TestModelConfig:
    """Tests for ModelConfig Pydantic schema."""

    def test_model_required(self) -> None:
        """Model field is required."""
        with pytest.raises(ValidationError):
            ModelConfig()  # type: ignore[call-arg]

    def test_minimal_config(self) -> None:
        """Create config with only required model field."""
        config = ModelConfig(model="claude-haiku")
        assert config.model == "claude-haiku"
        assert config.temperature is None
        assert config.max_tokens is None
        assert config.extra is None

    def test_temperature_bounds(self) -> None:
        """Temperature must be between 0.0 and 2.0."""
        ModelConfig(model="test", temperature=0.0)
        ModelConfig(model="test", temperature=2.0)

        with pytest.raises(ValidationError):
            ModelConfig(model="test", temperature=-0.1)
        with pytest.raises(ValidationError):
            ModelConfig(model="test", temperature=2.1)

    def test_max_tokens_positive(self) -> None:
        """max_tokens must be positive."""
        with pytest.raises(ValidationError):
            ModelConfig(model="test", max_tokens=0)

    def test_from_planner_settings(self) -> None:
        """Config mirrors the planner model settings."""
        settings = PlannerSettings(model_id="planner-model", temperature=0.3, max_tokens=512)

        config = ModelConfig.from_planner_settings(settings)

        assert config.model == "planner-model"
        assert config.temperature == 0.3
        assert config.max_tokens == 512


class TestToLangfuseConfig:
    """Tests for to_langfuse_config method."""

    def test_minimal_conversion(self) -> None:
        """Only model included when others are None."""
        assert ModelConfig(model="test").to_langfuse_config() == {"model": "test"}

    def test_full_conversion(self) -> None:
        """All set fields are included and extra is merged."""
        config = ModelConfig(
            model="test",
            temperature=0.0,
            max_tokens=2048,
            extra={"region": "ap-southeast-2"},
        )

        assert config.to_langfuse_config() == {
            "model": "test",
            "temperature": 0.0,
            "max_tokens": 2048,
            "region": "ap-southeast-2",
        }
