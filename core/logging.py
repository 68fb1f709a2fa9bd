# ============================================================================
# STRUCTURED LOGGING
# ============================================================================
# STATUS: Core - Structured logging with context
# PURPOSE: Locate every warning at the entity/property that caused it
# CREATED: 19 OCT 2026
# ============================================================================
"""
Structured Logging

Leaf components (legalizer, default resolver) only know the name they
are looking at. The assembly pushes the entity and property being mapped
with log_context(), and every record logged underneath carries them.

Output:
- HumanFormatter: one line, "[entity=Pet, property=tags]" inline
- StructuredFormatter: one JSON object per record (LOG_FORMAT=json)

Usage:
    from core.logging import get_logger, log_context

    logger = get_logger(__name__, ComponentType.ASSEMBLY)

    with log_context(entity="Pet", property="petName"):
        logger.warning("Property default rejected")
"""

import json
import logging
import os
import sys
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Union


class ComponentType(str, Enum):
    """Which part of the mapping pass emitted a record."""
    CLASSIFIER = "classifier"
    NORMALIZER = "normalizer"
    LEGALIZER = "legalizer"
    RESOLVER = "resolver"
    ASSEMBLY = "assembly"
    LOADER = "loader"
    RENDERER = "renderer"
    CLI = "cli"


# ============================================================================
# CONTEXT
# ============================================================================

@dataclass(frozen=True)
class LogContext:
    """Entity/property currently being mapped, plus free-form fields."""
    entity: Optional[str] = None
    property: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        fields = {"entity": self.entity, "property": self.property, **self.extra}
        return {k: v for k, v in fields.items() if v is not None}


_EMPTY_CONTEXT = LogContext()
_local = threading.local()


def _stack() -> list:
    stack = getattr(_local, "contexts", None)
    if stack is None:
        stack = _local.contexts = []
    return stack


def get_current_context() -> LogContext:
    """Innermost context of the calling thread."""
    stack = _stack()
    return stack[-1] if stack else _EMPTY_CONTEXT


@contextmanager
def log_context(entity: Optional[str] = None, property: Optional[str] = None, **extra):
    """
    Push entity/property fields for the duration of a block.

    Fields not given are inherited from the enclosing context.
    """
    parent = get_current_context()
    context = replace(
        parent,
        entity=entity if entity is not None else parent.entity,
        property=property if property is not None else parent.property,
        extra={**parent.extra, **extra},
    )
    stack = _stack()
    stack.append(context)
    try:
        yield context
    finally:
        stack.pop()


# ============================================================================
# FORMATTERS
# ============================================================================

class StructuredFormatter(logging.Formatter):
    """One JSON object per record, for log aggregation."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = get_current_context().to_dict()
        if context:
            payload["context"] = context
        data = getattr(record, "extra", None)
        if data:
            payload["data"] = data
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class HumanFormatter(logging.Formatter):
    """Terminal output with the entity/property inline."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        context = get_current_context()
        where = [
            f"{name}={value}"
            for name, value in (("entity", context.entity), ("property", context.property))
            if value
        ]
        location = f" [{', '.join(where)}]" if where else ""

        line = f"{timestamp} {record.levelname:<8} {record.name}{location}: {record.getMessage()}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


# ============================================================================
# LOGGERS
# ============================================================================

class ContextLogger(logging.LoggerAdapter):
    """
    Adapter attaching the current context and the component to each record.

    The merged fields land on record.extra.
    """

    def process(self, msg, kwargs):
        data = dict(kwargs.get("extra") or {})
        data.update(get_current_context().to_dict())
        component = (self.extra or {}).get("component")
        if component:
            data.setdefault("component", component)
        kwargs["extra"] = {"extra": data}
        return msg, kwargs


def get_logger(name: str, component: Optional[ComponentType] = None) -> ContextLogger:
    """
    Get a context-aware logger.

    Args:
        name: Logger name, normally __name__
        component: Component tag added to every record
    """
    return ContextLogger(
        logging.getLogger(name),
        {"component": component.value if component is not None else None},
    )


def configure_logging(level: Union[str, int] = "INFO", json_output: bool = False) -> None:
    """
    Install a single stderr handler on the root logger.

    stdout is left to the rendered output. LOG_FORMAT=json forces the
    JSON formatter.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    use_json = json_output or os.getenv("LOG_FORMAT", "").lower() == "json"

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(StructuredFormatter() if use_json else HumanFormatter())

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "ComponentType",
    "LogContext",
    "StructuredFormatter",
    "HumanFormatter",
    "ContextLogger",
    "get_logger",
    "configure_logging",
    "log_context",
    "get_current_context",
]
