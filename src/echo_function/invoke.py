#!/usr/bin/env python

"""
Local invocation of the reference handlers, outside any host runtime.

A single handler can be invoked, or a sequence of handlers chained so that
each result becomes the payload of the next event.
"""

import argparse
import dataclasses
import json
import logging
import sys
import uuid
from pathlib import Path
from typing import Any, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .exceptions import EchoFunctionError, InvalidInvocationDataError, get_error_context
from .handlers import resolve_handler
from .models import Event, InvocationContext

logger = logging.getLogger(__name__)


def parse_data(data: Any, path: str | None = None) -> str:
    """
    Turns CLI or caller supplied data into an event payload.

    Non-empty strings are used as-is and mappings or lists are serialized to
    JSON. Without data, the payload is read from `path`, which must be an
    absolute path to an existing file. With neither, the payload is empty.
    """
    if data:
        if isinstance(data, (dict, list)):
            return json.dumps(data)
        if isinstance(data, str):
            return data
        raise InvalidInvocationDataError(f"unsupported data type {type(data).__name__}")

    if path:
        file_path = Path(path)
        if not file_path.is_absolute():
            raise InvalidInvocationDataError("Data path should be absolute")
        if not file_path.exists():
            raise InvalidInvocationDataError("The file you provided does not exist.")
        try:
            return file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise InvalidInvocationDataError(str(e)) from e

    return ""


def invoke(
    functions: str | Sequence[str],
    data: str,
    context: InvocationContext | None = None,
) -> str:
    """Invokes one handler, or chains several feeding each result to the next."""
    names = [functions] if isinstance(functions, str) else list(functions)
    if not names:
        raise InvalidInvocationDataError("no function to invoke")

    # Resolve everything up front so an unknown name fails before any handler runs.
    chain = [(name, resolve_handler(name)) for name in names]
    result = data
    for name, function in chain:
        if context is None:
            invocation_context = InvocationContext(function_name=name, request_id=str(uuid.uuid4()))
        else:
            invocation_context = dataclasses.replace(context, function_name=name)
        event = Event(data=result, event_id=str(uuid.uuid4()))
        result = function(event, invocation_context)
        logger.debug("Handler completed.", extra={"handler": name, "result_length": len(result)})
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for local invocations."""
    parser = argparse.ArgumentParser(
        description="Invoke the Echo Function handlers locally.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-f",
        "--function",
        action="append",
        dest="functions",
        help="Handler to invoke. Repeat to chain handlers in sequence (default: echo).",
    )
    parser.add_argument("-d", "--data", help="Payload for the event.")
    parser.add_argument(
        "-p", "--path", help="Absolute path of a file whose contents become the payload."
    )
    parser.add_argument("--namespace", default="default", help="Namespace reported in the context.")
    args = parser.parse_args(argv)

    console = Console()
    functions = args.functions or ["echo"]
    context = InvocationContext(
        namespace=args.namespace,
        runtime="python",
        request_id=str(uuid.uuid4()),
    )

    try:
        payload = parse_data(args.data, path=args.path)
        result = invoke(functions, payload, context)
    except EchoFunctionError as e:
        logger.debug("Local invocation failed.", extra={"error": get_error_context(e)})
        console.print(Panel(Text(e.message), title="Invocation Error", border_style="red"))
        return 1

    console.print(Panel(Text(result), title=" -> ".join(functions), expand=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
