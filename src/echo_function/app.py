"""
The Lambda Adapter for the Echo Function.

This module is the entry point a host runtime invokes. It is responsible for:
1.  Initializing and configuring AWS Lambda Powertools (Logger, Tracer and
    Metrics).
2.  Decoding the raw host payload into an `Event` and the host context into
    an `InvocationContext`, injecting the Powertools logger as the log sink.
3.  Resolving the configured handler and returning its result unchanged.

Decoding failures are raised as `InvalidEventError` so the host can map them
to a transport-level failure. The handlers themselves never raise.
"""

import math

import pydantic
from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from .config import AppConfig, get_config
from .exceptions import InvalidEventError, get_error_context
from .handlers import resolve_handler
from .models import Event, InvocationContext, LogSink, RawEventDict

# --- Global & Reusable Components ---
CONFIG = get_config()

logger = Logger(service=CONFIG.service_name, level=CONFIG.log_level)
tracer = Tracer(service=CONFIG.service_name)
metrics = Metrics(
    namespace="EchoFunction",
    service=CONFIG.service_name,
)


def decode_event(raw_event: RawEventDict | str | Event) -> Event:
    """
    Decodes a host payload into an Event.

    A bare string is treated as the payload itself. Mappings are validated
    against the Event model; anything else is rejected.
    """
    if isinstance(raw_event, Event):
        return raw_event
    if isinstance(raw_event, str):
        return Event(data=raw_event)
    if not isinstance(raw_event, dict):
        raise InvalidEventError(
            "Event must be a mapping or a string.",
            context={"received_type": type(raw_event).__name__},
        )
    try:
        return Event.model_validate(raw_event)
    except pydantic.ValidationError as e:
        raise InvalidEventError(
            "Event failed validation.",
            context={"validation_errors": e.errors(include_url=False)},
        ) from e


def build_invocation_context(
    context: LambdaContext, config: AppConfig, log_sink: LogSink | None = None
) -> InvocationContext:
    """
    Builds an InvocationContext from the host context, falling back to configuration.

    The reported timeout is the remaining time rounded up to whole seconds, so
    it is 0 only once the host deadline has passed.
    """
    remaining_ms = None
    get_remaining = getattr(context, "get_remaining_time_in_millis", None)
    if callable(get_remaining):
        remaining_ms = get_remaining()

    memory_limit = getattr(context, "memory_limit_in_mb", None)

    return InvocationContext(
        function_name=getattr(context, "function_name", None) or config.service_name,
        namespace=config.namespace,
        runtime=config.runtime,
        timeout_seconds=(
            math.ceil(remaining_ms / 1000) if isinstance(remaining_ms, int) else config.timeout_seconds
        ),
        memory_limit=str(memory_limit) if memory_limit is not None else config.memory_limit,
        request_id=getattr(context, "aws_request_id", None),
        log_sink=log_sink,
    )


@logger.inject_lambda_context()
@tracer.capture_lambda_handler
@metrics.log_metrics(capture_cold_start_metric=True)
def handler(event: RawEventDict | str, context: LambdaContext) -> str:
    """Main Lambda handler: decode, invoke the configured handler, return its result."""
    metrics.add_dimension("environment", CONFIG.environment)

    try:
        parsed_event = decode_event(event)
    except InvalidEventError as e:
        metrics.add_metric(name="InvalidEvents", unit=MetricUnit.Count, value=1)
        logger.error("Received event could not be decoded.", extra={"error": get_error_context(e)})
        raise

    function = resolve_handler(CONFIG.handler_name)
    invocation_context = build_invocation_context(context, CONFIG, log_sink=logger)

    result = function(parsed_event, invocation_context)

    metrics.add_metric(name="InvocationsHandled", unit=MetricUnit.Count, value=1)
    return result
