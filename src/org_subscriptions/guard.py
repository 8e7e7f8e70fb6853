from __future__ import annotations
from collections.abc import Callable
from typing import TypeVar
from .core import RateLimitExceeded, RemoteClient
from .diagnostics import DiagnosticSink, default_sink
from .util import log

T = TypeVar("T")


def handle_errors(
    client: RemoteClient,
    operation: Callable[[], T],
    sink: DiagnosticSink | None = None,
) -> T:
    """
    Run ``operation`` and return its result.  If it fails because the rate
    limit was exceeded, report the client's current rate limit status before
    re-raising the exception as-is.  No other exception is touched, and the
    operation is never retried.
    """
    try:
        return operation()
    except RateLimitExceeded:
        try:
            rate = client.get_rate_limit()
        except Exception as e:
            log.warning("Failed to get rate limit status: %s", e)
        else:
            default_sink(sink).emit(
                f"Rate limit exceeded: {rate.remaining}/{rate.limit} requests"
                f" remaining; resets at {rate.reset.isoformat()}"
            )
        raise
