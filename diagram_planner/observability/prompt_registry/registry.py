"""
Langfuse prompt registry for versioned planner prompts.

Singleton registry that pushes each diagram type's planner system prompt
to Langfuse as a text prompt and fetches labelled versions back.

Dependencies: langfuse, diagram_planner.configs, diagram_planner.observability.prompt_registry
System role: Prompt version control and retrieval
"""

from typing import TYPE_CHECKING

from langfuse import Langfuse

import logging

from diagram_planner.configs import get_settings
from diagram_planner.observability.prompt_registry.models import ModelConfig

if TYPE_CHECKING:
    from langfuse.model import TextPromptClient

logger = logging.getLogger(__name__)

PROMPT_NAME_PREFIX = "diagram-planner-"


def planner_prompt_name(diagram_type: str) -> str:
    """Return the Langfuse prompt name for a diagram type."""
    return f"{PROMPT_NAME_PREFIX}{diagram_type}"


class PromptRegistry:
    """
    Singleton registry for Langfuse prompt management.

    Planner prompts are stored as Langfuse text prompts without template
    variables, so the fetched text is used verbatim as the system message.

    Attributes:
        _instance: Singleton instance
        _client: Langfuse client
        _enabled: Whether Langfuse integration is enabled

    Example:
        >>> registry = PromptRegistry()
        >>> registry.register_planner_prompt(
        ...     diagram_type="swot",
        ...     prompt_text=SWOT_PLANNER_PROMPT,
        ...     config=ModelConfig(model="anthropic.claude-3-haiku", temperature=0.0),
        ...     labels=["production"],
        ... )
    """

    _instance: "PromptRegistry | None" = None
    _client: Langfuse | None = None
    _enabled: bool = False

    def __new__(cls) -> "PromptRegistry":
        """Singleton pattern for registry instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self) -> None:
        """Initialize Langfuse client with configuration."""
        settings = get_settings()
        obs_settings = settings.observability

        if not obs_settings.enable_tracing:
            logger.info("Langfuse tracing disabled, prompt registry inactive")
            self._enabled = False
            return

        if not obs_settings.langfuse_public_key or not obs_settings.langfuse_secret_key:
            logger.warning("Langfuse keys not configured, prompt registry inactive")
            self._enabled = False
            return

        self._client = Langfuse(
            public_key=obs_settings.langfuse_public_key,
            secret_key=obs_settings.langfuse_secret_key,
            host=obs_settings.langfuse_host,
        )
        self._enabled = True
        logger.info("Prompt registry initialized: host=%s", obs_settings.langfuse_host)

    @property
    def is_enabled(self) -> bool:
        """Check if registry is active."""
        return self._enabled

    def register_planner_prompt(
        self,
        diagram_type: str,
        prompt_text: str,
        config: ModelConfig,
        labels: list[str] | None = None,
    ) -> "TextPromptClient | None":
        """
        Register or version a planner prompt in Langfuse.

        Args:
            diagram_type: Diagram type the prompt plans for
            prompt_text: Full planner system prompt
            config: Model configuration to store with prompt
            labels: Optional labels (e.g., ["production", "staging"])

        Returns:
            TextPromptClient: Created Langfuse prompt, or None if disabled
        """
        name = planner_prompt_name(diagram_type)
        if not self._enabled or self._client is None:
            logger.debug("Prompt registry disabled, skipping registration: name=%s", name)
            return None

        labels = labels or []
        prompt = self._client.create_prompt(
            name=name,
            type="text",
            prompt=prompt_text,
            config=config.to_langfuse_config(),
            labels=labels,
        )
        logger.info(
            "Registered planner prompt: name=%s version=%s labels=%s",
            name, prompt.version, labels,
        )
        return prompt

    def get_planner_prompt(
        self,
        diagram_type: str,
        label: str | None = None,
        fallback: str | None = None,
    ) -> str | None:
        """
        Fetch a planner prompt's text from Langfuse.

        Args:
            diagram_type: Diagram type whose prompt to fetch
            label: Optional label filter (e.g., "production")
            fallback: Text Langfuse returns when the prompt cannot be fetched

        Returns:
            str: Prompt text, or None if disabled
        """
        name = planner_prompt_name(diagram_type)
        if not self._enabled or self._client is None:
            logger.debug("Prompt registry disabled, cannot fetch: name=%s", name)
            return None

        kwargs: dict = {"name": name, "type": "text"}
        if label:
            kwargs["label"] = label
        if fallback is not None:
            kwargs["fallback"] = fallback

        prompt = self._client.get_prompt(**kwargs)
        logger.debug(
            "Fetched prompt: name=%s version=%s",
            name, prompt.version if prompt else None,
        )
        return prompt.prompt if prompt else None
