"""
Logging helpers for planner traffic.

Topics and planner replies are untrusted, often multi-line and sometimes
huge. These helpers fold them onto one bounded line and attach diagram
fields to records so log processors can filter on them.

Dependencies: logging (stdlib), re
System role: Logging helper functions
"""

import logging
import re
from typing import Any

_WHITESPACE = re.compile(r"\s+")


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Render a value as a single bounded log token.

    Whitespace runs (including newlines from fenced replies) collapse to
    one space. Collections are summarised by size instead of dumped.

    Args:
        value: Value to render
        max_length: Characters kept before the value is cut

    Returns:
        str: One-line representation
    """
    if value is None:
        return "None"
    if isinstance(value, (list, tuple, set, dict)):
        unit = "keys" if isinstance(value, dict) else "items"
        return f"{type(value).__name__}({len(value)} {unit})"

    text = value if isinstance(value, str) else repr(value)
    text = _WHITESPACE.sub(" ", text).strip()
    if len(text) > max_length:
        return f"{text[:max_length]}... (+{len(text) - max_length} chars)"
    return text


def log_with_context(
    logger: logging.Logger,
    level: int,
    event: str,
    **fields: Any,
) -> None:
    """
    Log an event with key=value fields.

    Fields are appended to the message and also attached to the record
    as attributes, so both plain text handlers and structured processors
    see them.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        event: Short event description
        **fields: Diagram context such as diagram_type, attempts, objects.
            Names must not shadow LogRecord attributes (name, created, ...)
    """
    if not logger.isEnabledFor(level):
        return
    rendered = {key: safe_log_value(val, 300) for key, val in fields.items()}
    suffix = " ".join(f"{key}={val}" for key, val in rendered.items())
    message = f"{event} {suffix}" if suffix else event
    logger.log(level, message, extra=rendered, stacklevel=2)
