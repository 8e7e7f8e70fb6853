from __future__ import annotations
from collections.abc import Iterable
import logging
import platform
import requests

USER_AGENT = "org_subscriptions ({}) requests/{} {}/{}".format(
    "https://github.com/org-subscriptions/org-subscriptions",
    requests.__version__,
    platform.python_implementation(),
    platform.python_version(),
)

log = logging.getLogger(__package__)


def read_repo_names(lines: Iterable[str]) -> list[str]:
    """Parse repository short names given one per line, skipping blank lines"""
    return [s for line in lines if (s := line.strip())]


def is_rate_limited(response: requests.Response) -> bool:
    if response.status_code not in (403, 429):
        return False
    if response.headers.get("x-ratelimit-remaining") == "0":
        return True
    return "rate limit" in response.text.lower()
