"""
Shared fixtures for unit tests.
"""

from __future__ import annotations

import os
import types
import uuid

import pytest

# The Lambda adapter builds its Powertools objects at import time, which
# happens during collection and therefore before any fixture runs.
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "echo-function-test")
os.environ.setdefault("AWS_DEFAULT_REGION", "eu-west-1")

from echo_function.models import Event, InvocationContext  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def _env_vars():
    """
    Ensures a deterministic environment for every test run.
    Overwrite *only* the variables needed by the handler.
    """
    original = os.environ.copy()
    os.environ.setdefault("POWERTOOLS_LOG_LEVEL", "INFO")
    yield
    os.environ.clear()
    os.environ.update(original)


# ---------- Minimal, realistic dummy events ---------- #
@pytest.fixture
def raw_event() -> dict:
    """An event as a host delivers it, with wire-named metadata."""
    return {
        "data": "hello",
        "event-id": "evt-" + uuid.uuid4().hex,
        "event-type": "application/json",
        "event-time": "2026-10-18T10:00:00Z",
        "event-namespace": "default",
        "extensions": {"request": {"method": "POST", "path": "/"}},
    }


@pytest.fixture
def event() -> Event:
    return Event(data="hello")


@pytest.fixture
def invocation_context() -> InvocationContext:
    return InvocationContext(
        function_name="echo",
        namespace="default",
        runtime="python",
        timeout_seconds=180,
        memory_limit="128",
        request_id="req-" + uuid.uuid4().hex,
    )


@pytest.fixture
def lambda_context():
    """A *very* small stand-in for the LambdaContext object."""
    return types.SimpleNamespace(
        function_name="echo-function",
        function_version="$LATEST",
        memory_limit_in_mb=128,
        aws_request_id="req-" + uuid.uuid4().hex,
        invoked_function_arn="arn:aws:lambda:eu-west-1:000000000000:function:echo-function",
        log_group_name="/aws/lambda/echo-function",
        log_stream_name="2026/10/18/[$LATEST]stream",
        tenant_id=None,
        get_remaining_time_in_millis=lambda: 30000,
    )
