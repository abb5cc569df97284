"""
Request-scoped identifier used when building upload keys.

The HTTP middleware binds one id per request. Outside a request (CLI, Lambda
handler, tests) the ``AWS_REQUEST_ID`` environment variable is used, and an
empty string when neither is available.
"""

from __future__ import annotations

import os
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

_request_id: ContextVar[Optional[str]] = ContextVar("docmanager_request_id", default=None)


def new_request_id() -> str:
    return uuid.uuid4().hex


def get_request_id() -> str:
    bound = _request_id.get()
    if bound:
        return bound
    return os.getenv("AWS_REQUEST_ID", "")


@contextmanager
def bind_request_id(request_id: Optional[str] = None) -> Iterator[str]:
    value = request_id or new_request_id()
    token = _request_id.set(value)
    try:
        yield value
    finally:
        _request_id.reset(token)
