"""
Planning service adapter.

Wraps a LangChain chat model so the plan validator can ask it for one
diagram plan at a time. The system message is the handler's planner
prompt (optionally fetched from the Langfuse prompt registry); the human
message is the topic or the corrective retry text.

Dependencies: langchain_core, langchain_aws, botocore, diagram_planner.observability
System role: Planning-service client for the diagram pipeline
"""

import logging
from typing import Any

from botocore.config import Config
from langchain_aws import ChatBedrockConverse
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage
from langchain_core.prompts import ChatPromptTemplate

from diagram_planner.configs.planner import PlannerSettings
from diagram_planner.core.diagrams.types import DiagramHandler
from diagram_planner.core.exceptions import PlanningServiceError
from diagram_planner.observability.log_utils import safe_log_value
from diagram_planner.observability.prompt_registry import ModelConfig, PromptRegistry

logger = logging.getLogger(__name__)


def build_planner_prompt(system_prompt: str) -> ChatPromptTemplate:
    """
    Build the chat template for one planner prompt.

    Planner prompts contain literal JSON, so braces are escaped before the
    text becomes a template; the only variable is `request`.
    """
    escaped = system_prompt.replace("{", "{{").replace("}", "}}")
    return ChatPromptTemplate.from_messages([
        ("system", escaped),
        ("human", "{request}"),
    ])


def message_text(message: BaseMessage) -> str:
    """
    Flatten a chat reply to plain text.

    Content may be a string or a list of content blocks; only text blocks
    are kept.
    """
    content: Any = message.content
    if isinstance(content, str):
        return content
    parts: list[str] = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(str(block.get("text", "")))
    return "".join(parts)


def create_planner_model(settings: PlannerSettings) -> BaseChatModel:
    """
    Create the Bedrock chat model used for planning.

    Args:
        settings: Planner settings (model id, region, sampling, timeout)

    Returns:
        BaseChatModel: Configured ChatBedrockConverse instance
    """
    config = None
    if settings.timeout_seconds is not None:
        config = Config(
            connect_timeout=settings.timeout_seconds,
            read_timeout=settings.timeout_seconds,
        )
    return ChatBedrockConverse(
        model=settings.model_id,
        region_name=settings.region,
        temperature=settings.temperature,
        max_tokens=settings.max_tokens,
        config=config,
    )


class DiagramPlanner:
    """
    Planning service backed by a LangChain chat model.

    Prompt templates are built once per diagram type and reused.
    """

    def __init__(
        self,
        model: BaseChatModel,
        use_prompt_registry: bool = False,
        prompt_label: str | None = None,
    ) -> None:
        """
        Initialize planner with a chat model.

        Args:
            model: Chat model used for planning
            use_prompt_registry: Whether to fetch planner prompts from Langfuse
            prompt_label: Optional label filter when using the registry
        """
        self._model = model
        self._use_prompt_registry = use_prompt_registry
        self._prompt_label = prompt_label
        self._prompts: dict[str, ChatPromptTemplate] = {}

    @classmethod
    def from_settings(cls, settings: PlannerSettings) -> "DiagramPlanner":
        """Build a planner with a Bedrock model from settings."""
        return cls(
            model=create_planner_model(settings),
            use_prompt_registry=settings.use_prompt_registry,
            prompt_label=settings.prompt_label,
        )

    def get_prompt(self, handler: DiagramHandler) -> ChatPromptTemplate:
        """
        Return the chat template for a diagram type.

        With the prompt registry enabled, the labelled Langfuse version is
        used; the handler's own prompt is the fallback.
        """
        key = handler.diagram_type.value
        template = self._prompts.get(key)
        if template is not None:
            return template

        system_prompt = handler.planner_prompt
        if self._use_prompt_registry:
            registry = PromptRegistry()
            if registry.is_enabled:
                fetched = registry.get_planner_prompt(
                    key,
                    label=self._prompt_label,
                    fallback=handler.planner_prompt,
                )
                if fetched:
                    logger.debug(f"{__name__}:get_prompt - Using registry prompt for {key}")
                    system_prompt = fetched

        template = build_planner_prompt(system_prompt)
        self._prompts[key] = template
        return template

    async def complete(self, handler: DiagramHandler, user_message: str) -> str:
        """
        Request one plan from the chat model.

        Args:
            handler: Diagram handler whose prompt is used
            user_message: Topic or corrective retry message

        Returns:
            str: Raw reply text

        Raises:
            PlanningServiceError: If the model call fails
        """
        messages = self.get_prompt(handler).format_messages(request=user_message)
        logger.debug(
            f"{__name__}:complete - Planning {handler.diagram_type.value}: "
            f"{safe_log_value(user_message, 200)}"
        )
        try:
            response = await self._model.ainvoke(messages)
        except Exception as e:
            logger.error(
                f"{__name__}:complete - Planning call failed for "
                f"{handler.diagram_type.value}: {type(e).__name__}: {e}"
            )
            raise PlanningServiceError(
                f"Planning service call failed: {e}",
                diagram_type=handler.diagram_type.value,
                details={"error_type": type(e).__name__},
            ) from e

        return message_text(response)


def register_planner_prompts(
    handlers: list[DiagramHandler],
    settings: PlannerSettings,
    labels: list[str] | None = None,
) -> None:
    """
    Push every handler's planner prompt to the Langfuse prompt registry.

    Args:
        handlers: Handlers whose prompts to register
        settings: Planner settings recorded alongside each version
        labels: Optional labels (e.g., ["production", "staging"])
    """
    registry = PromptRegistry()

    if not registry.is_enabled:
        logger.debug("Prompt registry disabled, skipping registration")
        return

    config = ModelConfig.from_planner_settings(settings)
    for handler in handlers:
        registry.register_planner_prompt(
            diagram_type=handler.diagram_type.value,
            prompt_text=handler.planner_prompt,
            config=config,
            labels=labels or ["development"],
        )
    logger.info("Registered planner prompts: count=%s", len(handlers))
