import json
import logging
import os

import pytest

# Config is initialized at import time, so set environment at module level.
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ["LOG_CONFIG_PATH"] = "/tmp/lambdaproxy-missing-logging.yml"

from lambdaproxy.models import HTTPRequest  # noqa: E402


@pytest.fixture
def restore_logging():
    """Undo dictConfig changes to the root and lambdaproxy loggers."""
    root = logging.getLogger()
    package = logging.getLogger("lambdaproxy")
    saved = (root.level, list(root.handlers), package.level, list(package.handlers), package.propagate)
    yield
    root.setLevel(saved[0])
    root.handlers[:] = saved[1]
    package.setLevel(saved[2])
    package.handlers[:] = saved[3]
    package.propagate = saved[4]


@pytest.fixture
def book_request() -> HTTPRequest:
    return HTTPRequest(
        method="POST",
        resource="/books/0-123456789",
        headers=[("Content-Type", "application/json"), ("Accept", "*/*")],
        body='{"title":"x"}',
    )


@pytest.fixture
def make_envelope():
    """Serialize a response envelope dict the way a Lambda function returns it."""

    def _make(**fields) -> bytes:
        envelope = {"statusCode": 200, "headers": {}, "body": ""}
        envelope.update(fields)
        return json.dumps(envelope).encode("utf-8")

    return _make
