"""
Plan validator.

Turns free-text planner replies into a validated plan through a bounded
retry protocol, modelled as a small state machine:

    Attempting(attempt, last_error) --advance--> Succeeded | Attempting | Exhausted

`advance` is pure, so the retry contract is testable without a model.
`plan_diagram` drives it against a planning service.

Dependencies: pydantic, json, re
System role: Untrusted planner output -> guaranteed-valid plan
"""

from dataclasses import dataclass, field
import json
import logging
import re
from typing import Any, Protocol

from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from diagram_planner.core.diagrams.types import DiagramHandler
from diagram_planner.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

MAX_PLAN_ATTEMPTS = 2
INVALID_JSON_ERROR = "Response was not valid JSON"

_FENCE_PATTERN = re.compile(r"```(?:json)?\s*\n?([\s\S]*?)\n?\s*```")


class PlanningService(Protocol):
    """Anything that can answer one planning request with raw text."""

    async def complete(self, handler: DiagramHandler, user_message: str) -> str: ...


# =============================================================================
# States
# =============================================================================


@dataclass(frozen=True)
class Attempting:
    """About to make planning attempt number `attempt` (0-based)."""

    attempt: int = 0
    last_error: str | None = None


@dataclass(frozen=True)
class Succeeded:
    """A schema-valid plan was obtained."""

    plan: BaseModel
    attempts: int


@dataclass(frozen=True)
class Exhausted:
    """Every attempt failed."""

    attempts: int
    last_error: str

    @property
    def message(self) -> str:
        """Failure message reported to the caller."""
        return (
            f"Failed to generate a valid diagram plan after {self.attempts} attempts. "
            f"Last error: {self.last_error}"
        )


PlanState = Attempting | Succeeded | Exhausted


# =============================================================================
# Parsing and validation
# =============================================================================


@dataclass
class PlanValidation:
    """Result of checking one candidate value against a plan model."""

    valid: bool
    plan: BaseModel | None = None
    errors: list[dict[str, Any]] = field(default_factory=list)


def extract_json(text: str) -> str:
    """
    Pull the JSON payload out of a model reply.

    Unwraps the first fenced code block (```json or ```) when one is
    present, otherwise returns the trimmed text.
    """
    match = _FENCE_PATTERN.search(text)
    if match and match.group(1):
        return match.group(1).strip()
    return text.strip()


def validate_plan(schema: type[BaseModel], payload: str) -> PlanValidation:
    """
    Validate a JSON payload against a plan model.

    Validation is strict and by wire name only: Python field names,
    booleans standing in for numbers and numeric strings are all rejected,
    matching the closed JSON Schema the planner is given.

    Args:
        schema: Plan model class
        payload: JSON text of the candidate plan

    Returns:
        PlanValidation: The plan on success, structured errors otherwise
    """
    try:
        plan = schema.model_validate_json(payload, strict=True)
    except SchemaValidationError as e:
        errors = [
            {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
            for err in e.errors()
        ]
        return PlanValidation(valid=False, errors=errors)
    return PlanValidation(valid=True, plan=plan)


def user_message(state: Attempting, topic: str) -> str:
    """Message sent to the planner for the given attempt."""
    if state.attempt == 0:
        return topic
    return (
        "Your previous response was not valid JSON matching the required schema.\n"
        f"Errors: {state.last_error}\n\n"
        f"Please try again for the topic: {topic}"
    )


def advance(
    state: Attempting,
    response_text: str,
    schema: type[BaseModel],
    max_attempts: int = MAX_PLAN_ATTEMPTS,
) -> PlanState:
    """
    Consume one planner reply and move to the next state.

    Args:
        state: Current attempting state
        response_text: Raw reply for `state.attempt`
        schema: Plan model to validate against
        max_attempts: Total attempt budget

    Returns:
        PlanState: Succeeded on the first valid plan, Exhausted once the
            budget is spent, otherwise Attempting with the recorded error
    """
    attempts_used = state.attempt + 1

    payload = extract_json(response_text)
    # Deeply nested replies overflow the decoder's recursion limit
    try:
        json.loads(payload)
    except (ValueError, RecursionError):
        error = INVALID_JSON_ERROR
    else:
        validation = validate_plan(schema, payload)
        if validation.valid:
            return Succeeded(plan=validation.plan, attempts=attempts_used)
        error = json.dumps(validation.errors)

    if attempts_used >= max_attempts:
        return Exhausted(attempts=attempts_used, last_error=error)
    return Attempting(attempt=attempts_used, last_error=error)


async def plan_diagram(
    handler: DiagramHandler,
    topic: str,
    planner: PlanningService,
    max_attempts: int = MAX_PLAN_ATTEMPTS,
) -> Succeeded | Exhausted:
    """
    Ask the planning service for a plan until one validates or the budget runs out.

    Args:
        handler: Diagram handler supplying prompt and plan model
        topic: User topic, sent verbatim on the first attempt
        planner: Planning service
        max_attempts: Total attempt budget (initial + corrective)

    Returns:
        Succeeded | Exhausted: Terminal state

    Raises:
        ValueError: If max_attempts is below 1
        PlanningServiceError: If the planning call itself fails
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    state: PlanState = Attempting()
    while isinstance(state, Attempting):
        response_text = await planner.complete(handler, user_message(state, topic))
        state = advance(state, response_text, handler.schema, max_attempts)
        if isinstance(state, Attempting):
            log_with_context(
                logger,
                logging.WARNING,
                f"{__name__}:plan_diagram - Plan rejected",
                diagram_type=handler.diagram_type.value,
                attempt=state.attempt,
                error=state.last_error,
            )

    if isinstance(state, Succeeded):
        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:plan_diagram - Plan accepted",
            diagram_type=handler.diagram_type.value,
            attempts=state.attempts,
        )
    else:
        log_with_context(
            logger,
            logging.WARNING,
            f"{__name__}:plan_diagram - Planning exhausted",
            diagram_type=handler.diagram_type.value,
            attempts=state.attempts,
            error=state.last_error,
        )
    return state
