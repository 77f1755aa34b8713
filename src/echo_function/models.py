# In src/echo_function/models.py

from dataclasses import dataclass
from typing import Any, Protocol, TypedDict

from pydantic import BaseModel, ConfigDict, Field

# --- Static Type Hinting (for mypy and IDEs) ---

RawEventDict = TypedDict(
    "RawEventDict",
    {
        "data": str,
        "event-id": str,
        "event-type": str,
        "event-time": str,
        "event-namespace": str,
        "extensions": dict[str, Any],
    },
    total=False,
)
"""The wire shape a host delivers before it is decoded into an Event."""


class LogSink(Protocol):
    """Anything that accepts a diagnostic record: a stdlib or Powertools logger."""

    def info(self, msg: Any, *args: Any, **kwargs: Any) -> Any: ...


# --- Runtime Validation (using Pydantic) ---


class Event(BaseModel):
    """
    One unit of inbound work delivered to a handler.

    Only `data` is required. The identifying fields are host-defined and
    accepted under either their wire names (`event-id`) or snake-case names.
    Unknown fields are kept as extras so nothing the host sends is lost.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    data: str
    event_id: str | None = Field(None, alias="event-id")
    event_type: str | None = Field(None, alias="event-type")
    event_time: str | None = Field(None, alias="event-time")
    event_namespace: str | None = Field(None, alias="event-namespace")
    extensions: dict[str, Any] = Field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class InvocationContext:
    """Per-invocation metadata supplied by the host alongside an Event."""

    function_name: str | None = None
    namespace: str | None = None
    runtime: str | None = None
    timeout_seconds: int | None = None
    memory_limit: str | None = None
    request_id: str | None = None
    # Explicit logging capability; handlers fall back to their module logger.
    log_sink: LogSink | None = None
