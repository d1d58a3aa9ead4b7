"""Tests for PromptRegistry."""

from unittest.mock import MagicMock, patch

import pytest

from diagram_planner.observability.prompt_registry.models import ModelConfig
from diagram_planner.observability.prompt_registry.registry import (
    PromptRegistry,
    planner_prompt_name,
)

REGISTRY_MODULE = "diagram_planner.observability.prompt_registry.registry"


@pytest.fixture
def mock_settings() -> MagicMock:
    """Mock settings with Langfuse enabled."""
    settings = MagicMock()
    settings.observability.enable_tracing = True
    settings.observability.langfuse_public_key = "pk-test"
    settings.observability.langfuse_secret_key = "sk-test"
    settings.observability.langfuse_host = "http://localhost:3000"
    return settings


@pytest.fixture
def mock_langfuse() -> MagicMock:
    """Mock Langfuse client."""
    return MagicMock()


@pytest.fixture(autouse=True)
def reset_singleton() -> None:
    """Reset singleton before each test."""
    PromptRegistry._instance = None
    PromptRegistry._client = None
    PromptRegistry._enabled = False


class TestPromptName:
    """Tests for planner prompt naming."""

    def test_prefixed_name(self) -> None:
        assert planner_prompt_name("swot") == "diagram-planner-swot"


class TestPromptRegistrySingleton:
    """Tests for singleton pattern."""

    def test_singleton_returns_same_instance(self, mock_settings: MagicMock) -> None:
        """Multiple instantiations return same instance."""
        with patch(f"{REGISTRY_MODULE}.get_settings", return_value=mock_settings):
            with patch(f"{REGISTRY_MODULE}.Langfuse"):
                registry1 = PromptRegistry()
                registry2 = PromptRegistry()
                assert registry1 is registry2
                assert registry1.is_enabled

    def test_disabled_when_tracing_off(self, mock_settings: MagicMock) -> None:
        """Registry disabled when tracing disabled."""
        mock_settings.observability.enable_tracing = False
        with patch(f"{REGISTRY_MODULE}.get_settings", return_value=mock_settings):
            registry = PromptRegistry()
            assert not registry.is_enabled

    def test_disabled_when_keys_missing(self, mock_settings: MagicMock) -> None:
        """Registry disabled when Langfuse keys missing."""
        mock_settings.observability.langfuse_public_key = None
        with patch(f"{REGISTRY_MODULE}.get_settings", return_value=mock_settings):
            registry = PromptRegistry()
            assert not registry.is_enabled

    def test_client_built_from_settings(
        self, mock_settings: MagicMock, mock_langfuse: MagicMock
    ) -> None:
        """Langfuse client receives the configured keys and host."""
        with patch(f"{REGISTRY_MODULE}.get_settings", return_value=mock_settings):
            with patch(f"{REGISTRY_MODULE}.Langfuse", return_value=mock_langfuse) as langfuse_cls:
                PromptRegistry()
                langfuse_cls.assert_called_once_with(
                    public_key="pk-test",
                    secret_key="sk-test",
                    host="http://localhost:3000",
                )


class TestRegisterPlannerPrompt:
    """Tests for register_planner_prompt method."""

    def test_register_text_prompt(
        self, mock_settings: MagicMock, mock_langfuse: MagicMock
    ) -> None:
        """Planner prompts are stored as text prompts with model config."""
        mock_prompt = MagicMock()
        mock_prompt.version = 3
        mock_langfuse.create_prompt.return_value = mock_prompt

        with patch(f"{REGISTRY_MODULE}.get_settings", return_value=mock_settings):
            with patch(f"{REGISTRY_MODULE}.Langfuse", return_value=mock_langfuse):
                registry = PromptRegistry()
                config = ModelConfig(model="claude-haiku", temperature=0.0)

                result = registry.register_planner_prompt(
                    diagram_type="kanban",
                    prompt_text='Output {"version": 1}',
                    config=config,
                    labels=["production"],
                )

                assert result == mock_prompt
                mock_langfuse.create_prompt.assert_called_once_with(
                    name="diagram-planner-kanban",
                    type="text",
                    prompt='Output {"version": 1}',
                    config={"model": "claude-haiku", "temperature": 0.0},
                    labels=["production"],
                )

    def test_register_disabled_returns_none(self, mock_settings: MagicMock) -> None:
        """Registration skipped when registry disabled."""
        mock_settings.observability.enable_tracing = False
        with patch(f"{REGISTRY_MODULE}.get_settings", return_value=mock_settings):
            registry = PromptRegistry()

            result = registry.register_planner_prompt(
                diagram_type="swot",
                prompt_text="x",
                config=ModelConfig(model="test"),
            )

            assert result is None


class TestGetPlannerPrompt:
    """Tests for get_planner_prompt method."""

    def test_get_with_label_and_fallback(
        self, mock_settings: MagicMock, mock_langfuse: MagicMock
    ) -> None:
        """Label and fallback are forwarded; prompt text is returned."""
        mock_prompt = MagicMock()
        mock_prompt.version = 2
        mock_prompt.prompt = "Registry text"
        mock_langfuse.get_prompt.return_value = mock_prompt

        with patch(f"{REGISTRY_MODULE}.get_settings", return_value=mock_settings):
            with patch(f"{REGISTRY_MODULE}.Langfuse", return_value=mock_langfuse):
                registry = PromptRegistry()

                result = registry.get_planner_prompt(
                    "swot", label="production", fallback="Built-in text"
                )

                assert result == "Registry text"
                mock_langfuse.get_prompt.assert_called_once_with(
                    name="diagram-planner-swot",
                    type="text",
                    label="production",
                    fallback="Built-in text",
                )

    def test_get_without_label(
        self, mock_settings: MagicMock, mock_langfuse: MagicMock
    ) -> None:
        """Only name and type are sent when no label or fallback is given."""
        mock_langfuse.get_prompt.return_value = MagicMock(prompt="text")

        with patch(f"{REGISTRY_MODULE}.get_settings", return_value=mock_settings):
            with patch(f"{REGISTRY_MODULE}.Langfuse", return_value=mock_langfuse):
                registry = PromptRegistry()

                registry.get_planner_prompt("retro")

                mock_langfuse.get_prompt.assert_called_once_with(
                    name="diagram-planner-retro",
                    type="text",
                )

    def test_get_disabled_returns_none(self, mock_settings: MagicMock) -> None:
        """Fetch returns None when registry disabled."""
        mock_settings.observability.enable_tracing = False
        with patch(f"{REGISTRY_MODULE}.get_settings", return_value=mock_settings):
            registry = PromptRegistry()
            assert registry.get_planner_prompt("swot") is None
