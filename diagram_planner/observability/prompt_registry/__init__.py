"""
Langfuse prompt registry module.

Versions the per-diagram planner prompts in Langfuse together with the
model configuration used to run them.

Dependencies: langfuse, pydantic
System role: Planner prompt version management
"""

from diagram_planner.observability.prompt_registry.models import ModelConfig
from diagram_planner.observability.prompt_registry.registry import (
    PromptRegistry,
    planner_prompt_name,
)

__all__ = ["PromptRegistry", "ModelConfig", "planner_prompt_name"]
