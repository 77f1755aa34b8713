"""
Reference handlers for the Echo Function.

Every handler satisfies the same invocation contract: it receives one
`Event` and one `InvocationContext`, returns a string, and emits exactly one
diagnostic record of the received event. Handlers keep no state between
calls, so a host may invoke them concurrently without coordination.

The diagnostic emission is best-effort. A failure while rendering or
writing the record is absorbed and never changes the returned result.
"""

import logging
from contextlib import suppress
from datetime import datetime
from typing import Callable

from .exceptions import HandlerNotFoundError
from .models import Event, InvocationContext

logger = logging.getLogger(__name__)

Handler = Callable[[Event, InvocationContext], str]

PAD_WIDTH = 20
PAD_CHAR = "*"


def _emit_event(event: Event, context: InvocationContext) -> None:
    """Writes one diagnostic record of `event` to the context's sink."""
    try:
        # Hosts may pass their native context, which has no log_sink.
        sink = getattr(context, "log_sink", None) or logger
        sink.info("Received event: %s", repr(event))
    except Exception:
        # A logging failure never reaches the caller.
        with suppress(Exception):
            logger.warning("Diagnostic emission of the received event failed.", exc_info=True)


def echo(event: Event, context: InvocationContext) -> str:
    """Returns the event payload verbatim."""
    _emit_event(event, context)
    return event.data


def capitalize(event: Event, context: InvocationContext) -> str:
    """Upper-cases the first character of the payload and lower-cases the rest."""
    _emit_event(event, context)
    return event.data.capitalize()


def pad(event: Event, context: InvocationContext) -> str:
    """
    Centres the payload in a field of PAD_WIDTH characters using PAD_CHAR.
    When the padding cannot be split evenly the extra character goes on the right.
    Payloads already as wide as the field are returned unchanged.
    """
    _emit_event(event, context)
    missing = max(PAD_WIDTH - len(event.data), 0)
    left = missing // 2
    return f"{PAD_CHAR * left}{event.data}{PAD_CHAR * (missing - left)}"


def reverse(event: Event, context: InvocationContext) -> str:
    _emit_event(event, context)
    return event.data[::-1]


def print_clock(event: Event, context: InvocationContext) -> str:
    """Ignores the payload and returns the current local time as HH:MM."""
    _emit_event(event, context)
    return datetime.now().strftime("%H:%M")


HANDLERS: dict[str, Handler] = {
    "echo": echo,
    "capitalize": capitalize,
    "pad": pad,
    "reverse": reverse,
    "print_clock": print_clock,
}


def resolve_handler(name: str) -> Handler:
    """Looks up a registered handler by its public name."""
    try:
        return HANDLERS[name]
    except KeyError as e:
        raise HandlerNotFoundError(name) from e
